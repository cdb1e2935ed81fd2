"""Manifest subpackage.

This package contains modules for encoding secret data, rendering Secret
and Helm overrides documents, and writing them to disk.
"""

from gem_secrets.manifests.encoding import encode_fields, encode_value
from gem_secrets.manifests.overrides import build_overrides, render_overrides, storage_block
from gem_secrets.manifests.rendering import build_secret_manifest, render_secret, secret_document
from gem_secrets.manifests.writing import write_manifest, write_manifests

__all__ = [
    # encoding
    "encode_value",
    "encode_fields",
    # rendering
    "build_secret_manifest",
    "secret_document",
    "render_secret",
    # overrides
    "storage_block",
    "build_overrides",
    "render_overrides",
    # writing
    "write_manifest",
    "write_manifests",
]
