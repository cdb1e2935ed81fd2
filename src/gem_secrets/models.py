"""Data models for gem-secrets.

This module provides the type-safe records passed between the resolver,
encoder, renderer and writer.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import NamedTuple


class FieldSource(str, Enum):
    """Where a resolved field value came from."""

    OVERRIDE = "override"
    FILE = "file"
    PROMPT = "prompt"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Description of a single input field.

    Attributes:
        key: Field name as used in the JSON config file.
        label: Text shown when prompting for the value.
        secret: If True, the prompt hides typed input.
        required: If False, the field may stay empty after resolution.
        k8s_name: If True, the value must be a valid Kubernetes name.

    """

    key: str
    label: str
    secret: bool = False
    required: bool = True
    k8s_name: bool = False


@dataclass(frozen=True)
class EffectiveConfig(Mapping[str, str]):
    """Resolved field values, read-only once built.

    Behaves as a mapping of field name to value. ``sources`` records which
    input supplied each field.
    """

    values: Mapping[str, str] = field(default_factory=dict)
    sources: Mapping[str, FieldSource] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "sources", MappingProxyType(dict(self.sources)))

    def __getitem__(self, key: str) -> str:
        return self.values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True, slots=True)
class SecretManifest:
    """A Kubernetes Secret with already base64-encoded data.

    Attributes:
        name: The secret's metadata.name.
        data: Mapping of data key to base64-encoded value.
        namespace: Optional metadata.namespace.

    """

    name: str
    data: Mapping[str, str]
    namespace: str | None = None


class ManifestTarget(NamedTuple):
    """A secret name paired with the file it is written to."""

    name: str
    filename: str


class WriteResult(NamedTuple):
    """Outcome of a single manifest write.

    Attributes:
        path: The file that was written or attempted.
        error: The failure message, or None on success.

    """

    path: Path
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True if the file was written."""
        return self.error is None
