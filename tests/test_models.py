"""Tests for models.py module."""

from pathlib import Path

import pytest

from gem_secrets.models import EffectiveConfig, FieldSource, WriteResult


class TestEffectiveConfig:
    """Tests for the resolved configuration record."""

    def test_mapping_behaviour(self):
        """Test the config behaves like a read-only mapping."""
        config = EffectiveConfig(values={"adminUser": "root"}, sources={"adminUser": FieldSource.OVERRIDE})

        assert config["adminUser"] == "root"
        assert list(config) == ["adminUser"]
        assert len(config) == 1
        assert config.get("missing") is None

    def test_copy_of_input(self):
        """Test later changes to the input dict do not leak in."""
        values = {"adminUser": "root"}
        config = EffectiveConfig(values=values)
        values["adminUser"] = "changed"

        assert config["adminUser"] == "root"

    def test_frozen(self):
        """Test attributes cannot be reassigned."""
        config = EffectiveConfig(values={})

        with pytest.raises(AttributeError):
            config.values = {"x": "y"}  # type: ignore[misc]


class TestWriteResult:
    """Tests for write results."""

    def test_ok(self):
        """Test a result without error is ok."""
        assert WriteResult(path=Path("a.yaml")).ok is True

    def test_failed(self):
        """Test a result with an error is not ok."""
        assert WriteResult(path=Path("a.yaml"), error="boom").ok is False
