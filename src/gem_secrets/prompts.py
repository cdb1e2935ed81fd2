"""Interactive user prompts for field values.

This module provides the line-reading capability used by the resolver
when neither a flag nor the config file supplies a field.
"""

import re

import questionary

from gem_secrets.models import FieldSpec
from gem_secrets.styles import PROMPT_STYLE, QMARK

# Kubernetes DNS subdomain name validation (RFC 1123)
_DNS_SUBDOMAIN_MAX_LENGTH = 253
_DNS_SUBDOMAIN_PATTERN = r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*$"


def validate_k8s_name(name: str) -> bool | str:
    """Validate a Kubernetes resource name (DNS subdomain).

    Args:
        name: The name to validate.

    Returns:
        True if valid, or an error message string if invalid.

    """
    if not name:
        return "Name cannot be empty"
    if len(name) > _DNS_SUBDOMAIN_MAX_LENGTH:
        return f"Name must be {_DNS_SUBDOMAIN_MAX_LENGTH} characters or less"
    if not re.match(_DNS_SUBDOMAIN_PATTERN, name):
        return "Name must consist of lowercase alphanumeric characters, '-' or '.', and must start and end with an alphanumeric character"
    return True


def prompt_field(spec: FieldSpec) -> str:
    """Ask the user for a single field value.

    Secret fields use a hidden password prompt. Kubernetes names are
    validated while typing.

    Args:
        spec: The field to ask for.

    Returns:
        The answer with surrounding whitespace removed.

    """
    if spec.secret:
        answer = questionary.password(
            spec.label,
            style=PROMPT_STYLE,
            qmark=QMARK,
        ).unsafe_ask()
    else:
        answer = questionary.text(
            spec.label,
            validate=validate_k8s_name if spec.k8s_name else None,
            style=PROMPT_STYLE,
            qmark=QMARK,
        ).unsafe_ask()

    return (answer or "").strip()
