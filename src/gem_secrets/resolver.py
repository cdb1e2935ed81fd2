"""Resolution of field values from flags, a JSON config file and prompts.

Precedence for every field, highest first:

1. an explicit override (command-line flag)
2. the value in the JSON config file
3. an interactively prompted value

Each field is resolved on its own, so one run may mix all three sources.
"""

import json
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

from icecream import ic

from gem_secrets.exceptions import InvalidInputError, ManifestIOError, MissingFieldError
from gem_secrets.models import EffectiveConfig, FieldSource, FieldSpec

Prompter = Callable[[FieldSpec], str]


def load_config_file(path: str | Path, *, required: bool = False) -> dict[str, str]:
    """Load a flat JSON config file.

    Args:
        path: Path to the JSON file.
        required: If False, a missing or unreadable file yields an empty
            mapping instead of an error.

    Returns:
        Mapping of field name to string value. ``null`` values are dropped.

    Raises:
        ManifestIOError: If the file is required and cannot be read.
        InvalidInputError: If the file is not a JSON object of scalars.

    """
    config_path = Path(path)

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as err:
        if required:
            raise ManifestIOError(config_path, err) from err
        ic(f"config file {config_path} not loaded: {err}")
        return {}

    try:
        document = json.loads(content)
    except json.JSONDecodeError as err:
        raise InvalidInputError(f"Config file '{config_path}' is not valid JSON: {err}") from err

    if not isinstance(document, dict):
        raise InvalidInputError(f"Config file '{config_path}' must contain a JSON object")

    values: dict[str, str] = {}
    for key, value in document.items():
        if value is None:
            continue
        if isinstance(value, (dict, list)):
            raise InvalidInputError(f"Config file '{config_path}': field '{key}' must be a scalar value")
        values[key] = str(value)

    ic(config_path, sorted(values))
    return values


def resolve_field(
    key: str,
    *,
    override: str | None,
    file_values: Mapping[str, str],
    prompt: Prompter | None = None,
    spec: FieldSpec | None = None,
) -> tuple[str, FieldSource]:
    """Resolve one field from its three candidate sources.

    Empty strings count as absent at every level.

    Args:
        key: Field name.
        override: Explicit value, usually from a command-line flag.
        file_values: Values loaded from the config file.
        prompt: Interactive capability, or None to disable prompting.
        spec: Field description handed to the prompt. Defaults to a spec
            labelled with the key.

    Returns:
        Tuple of (value, source). The value is empty and the source is
        ``FieldSource.NONE`` when nothing supplied one.

    """
    if override:
        return override, FieldSource.OVERRIDE

    file_value = file_values.get(key)
    if file_value:
        return file_value, FieldSource.FILE

    if prompt is not None:
        answer = prompt(spec or FieldSpec(key=key, label=f"Enter {key}"))
        if answer:
            return answer, FieldSource.PROMPT

    return "", FieldSource.NONE


def resolve_config(
    fields: Iterable[FieldSpec],
    *,
    overrides: Mapping[str, str | None],
    file_values: Mapping[str, str] | None = None,
    prompt: Prompter | None = None,
) -> EffectiveConfig:
    """Resolve every field into an EffectiveConfig.

    Args:
        fields: The fields to resolve, in prompting order.
        overrides: Explicit values keyed by field name.
        file_values: Values loaded from the config file.
        prompt: Interactive capability, or None to disable prompting.

    Returns:
        The resolved configuration.

    Raises:
        MissingFieldError: If a required field is still empty.

    """
    file_values = file_values or {}
    values: dict[str, str] = {}
    sources: dict[str, FieldSource] = {}

    for spec in fields:
        value, source = resolve_field(
            spec.key,
            override=overrides.get(spec.key),
            file_values=file_values,
            prompt=prompt,
            spec=spec,
        )
        if spec.required and not value:
            raise MissingFieldError(spec.key)
        values[spec.key] = value
        sources[spec.key] = source

    # Only sources are traced, never values
    ic(sources)
    return EffectiveConfig(values=values, sources=sources)


def has_any_input(overrides: Mapping[str, str | None], file_values: Mapping[str, str]) -> bool:
    """Check whether any source supplied anything at all.

    Args:
        overrides: Explicit values keyed by field name.
        file_values: Values loaded from the config file.

    Returns:
        True if at least one override is set or the config file had values.

    """
    return any(overrides.values()) or bool(file_values)
