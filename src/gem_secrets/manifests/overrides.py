"""Helm values overrides for Grafana Enterprise Metrics object storage.

The generated document points every Mimir storage role at S3. Access and
secret keys are stored as plain scalars here; the pods additionally load
the separately created bucket secret through ``global.extraEnvFrom``.
"""

from collections.abc import Mapping
from typing import Any

import yaml
from icecream import ic

from gem_secrets.exceptions import RenderError

REQUIRED_KEYS: tuple[str, ...] = (
    "admin_bucket",
    "ruler_bucket",
    "blocks_bucket",
    "access_key",
    "secret_key",
    "endpoint",
)

# Changing this annotation's value forces a rolling restart of the pods
SECRET_VERSION_ANNOTATION = "bucketSecretVersion"


def _check_required(config: Mapping[str, str]) -> None:
    missing = [key for key in REQUIRED_KEYS if not config.get(key)]
    if missing:
        raise RenderError(f"Overrides require non-empty value(s) for: {', '.join(missing)}")


def storage_block(bucket: str, config: Mapping[str, str]) -> dict[str, str]:
    """Build the S3 settings shared by every storage role.

    Args:
        bucket: Bucket name for this role.
        config: Resolved configuration with credentials and endpoint.

    Returns:
        The ``s3`` mapping for one storage role.

    """
    return {
        "bucket_name": bucket,
        "access_key_id": config["access_key"],
        "endpoint": config["endpoint"],
        "secret_access_key": config["secret_key"],
    }


def build_overrides(
    config: Mapping[str, str],
    *,
    bucket_secret_name: str,
    secret_version: str = "0",
) -> dict[str, Any]:
    """Build the overrides document from resolved configuration.

    The alertmanager role uses ``alertmanager_bucket`` when given and the
    ruler bucket otherwise.

    Args:
        config: Resolved configuration.
        bucket_secret_name: Secret referenced from ``global.extraEnvFrom``.
        secret_version: Value of the restart annotation.

    Returns:
        The nested values document.

    Raises:
        RenderError: If a required key is absent or empty.

    """
    _check_required(config)

    alertmanager_bucket = config.get("alertmanager_bucket") or config["ruler_bucket"]

    return {
        "global": {
            "extraEnvFrom": [{"secretRef": {"name": bucket_secret_name}}],
            "podAnnotations": {SECRET_VERSION_ANNOTATION: secret_version},
        },
        "minio": {"enabled": False},
        "mimir": {
            "structuredConfig": {
                "admin_client": {"storage": {"s3": storage_block(config["admin_bucket"], config)}},
                "alertmanager_storage": {"s3": storage_block(alertmanager_bucket, config)},
                "blocks_storage": {
                    "backend": "s3",
                    "s3": storage_block(config["blocks_bucket"], config),
                },
                "ruler_storage": {"s3": storage_block(config["ruler_bucket"], config)},
            }
        },
    }


def render_overrides(
    config: Mapping[str, str],
    *,
    bucket_secret_name: str,
    secret_version: str = "0",
) -> str:
    """Render the overrides document to YAML text."""
    document = build_overrides(
        config,
        bucket_secret_name=bucket_secret_name,
        secret_version=secret_version,
    )
    ic(bucket_secret_name, secret_version)
    return yaml.safe_dump(document, sort_keys=False, default_flow_style=False)
