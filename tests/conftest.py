"""Shared test fixtures for gem-secrets tests."""

import json
from unittest.mock import patch

import pytest


@pytest.fixture
def write_config(tmp_path):
    """Write a JSON config file and return its path."""

    def _write(values, name="config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(values))
        return path

    return _write


@pytest.fixture
def overrides_config():
    """Complete gem-overrides.json content."""
    return {
        "admin_bucket": "b1",
        "ruler_bucket": "b2",
        "blocks_bucket": "b3",
        "access_key": "AK",
        "secret_key": "SK",
        "endpoint": "s3.example.com",
    }


@pytest.fixture
def license_file(tmp_path):
    """A license.jwt file on disk."""
    path = tmp_path / "license.jwt"
    path.write_text("eyJhbGciOiJIUzI1NiJ9.license.token")
    return path


@pytest.fixture
def mock_text_prompt():
    """Mock questionary.text prompts."""
    with patch("questionary.text") as mock:
        yield mock


@pytest.fixture
def mock_password_prompt():
    """Mock questionary.password prompts."""
    with patch("questionary.password") as mock:
        yield mock


@pytest.fixture
def sample_secret_yaml():
    """Sample secret YAML content."""
    return """apiVersion: v1
kind: Secret
metadata:
  name: test-secret
  namespace: default
type: Opaque
data:
  adminUser: YWRtaW4=
  adminPassword: c2VjcmV0
"""
