"""Rendering of flat Kubernetes Secret manifests.

Plaintext goes in once through :func:`build_secret_manifest`; everything
after that only handles base64-encoded values.
"""

from collections.abc import Mapping
from typing import Any

import yaml
from icecream import ic

from gem_secrets.exceptions import RenderError
from gem_secrets.manifests.encoding import encode_fields
from gem_secrets.models import SecretManifest


def build_secret_manifest(
    name: str,
    fields: Mapping[str, str | bytes],
    *,
    namespace: str | None = None,
) -> SecretManifest:
    """Create a SecretManifest from plaintext field values.

    Args:
        name: The secret's metadata.name.
        fields: Mapping of data key to plaintext value.
        namespace: Optional namespace; empty strings are treated as unset.

    Returns:
        SecretManifest whose data values are base64-encoded.

    Raises:
        RenderError: If a field value is empty.

    """
    empty = [key for key, value in fields.items() if not value]
    if empty:
        raise RenderError(f"Secret '{name}' has empty value(s) for: {', '.join(empty)}")

    return SecretManifest(name=name, data=encode_fields(fields), namespace=namespace or None)


def secret_document(manifest: SecretManifest) -> dict[str, Any]:
    """Build the Secret document as a plain dictionary.

    Args:
        manifest: The secret to convert.

    Returns:
        Dictionary ready for YAML serialization.

    Raises:
        RenderError: If the name is empty, there is no data, or a data
            value is empty.

    """
    if not manifest.name:
        raise RenderError("Secret name cannot be empty")
    if not manifest.data:
        raise RenderError(f"Secret '{manifest.name}' has no data entries")

    empty = [key for key, value in manifest.data.items() if not value]
    if empty:
        raise RenderError(f"Secret '{manifest.name}' has empty data for: {', '.join(empty)}")

    metadata: dict[str, str] = {"name": manifest.name}
    if manifest.namespace:
        metadata["namespace"] = manifest.namespace

    return {
        "apiVersion": "v1",
        "kind": "Secret",
        "metadata": metadata,
        "type": "Opaque",
        # Key order follows input order; consumers must not depend on it
        "data": dict(manifest.data),
    }


def render_secret(manifest: SecretManifest) -> str:
    """Render a SecretManifest to YAML text.

    Args:
        manifest: The secret to render.

    Returns:
        The YAML document as a string.

    """
    document = secret_document(manifest)
    ic(manifest.name, list(manifest.data))
    return yaml.safe_dump(document, sort_keys=False, default_flow_style=False)
