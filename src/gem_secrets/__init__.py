"""gem-secrets: Kubernetes secret and Helm overrides generators.

This package renders the Secret manifests and Helm values overrides needed
to run Grafana Enterprise Metrics against S3 object storage.

Example usage:
    from gem_secrets import build_secret_manifest, render_secret

    manifest = build_secret_manifest("metrics-admin-secret", {"adminUser": "admin"})
    print(render_secret(manifest))
"""

__version__ = "0.1.0"

from gem_secrets.cli import cli
from gem_secrets.exceptions import (
    GemSecretsError,
    InvalidInputError,
    ManifestIOError,
    MissingFieldError,
    NoInputError,
    RenderError,
)
from gem_secrets.manifests import (
    build_overrides,
    build_secret_manifest,
    encode_fields,
    encode_value,
    render_overrides,
    render_secret,
    write_manifest,
    write_manifests,
)
from gem_secrets.resolver import load_config_file, resolve_config, resolve_field

__all__ = [
    # Version
    "__version__",
    # Main CLI
    "cli",
    # Resolution
    "load_config_file",
    "resolve_config",
    "resolve_field",
    # Manifests
    "build_overrides",
    "build_secret_manifest",
    "encode_fields",
    "encode_value",
    "render_overrides",
    "render_secret",
    "write_manifest",
    "write_manifests",
    # Exceptions
    "GemSecretsError",
    "InvalidInputError",
    "ManifestIOError",
    "MissingFieldError",
    "NoInputError",
    "RenderError",
]
