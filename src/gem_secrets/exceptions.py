"""Custom exceptions for gem-secrets.

This module defines the exception hierarchy used throughout the application
to provide meaningful error messages and proper error handling.
"""

from pathlib import Path


class GemSecretsError(Exception):
    """Base exception for all gem-secrets errors.

    All custom exceptions in this package inherit from this class,
    allowing callers to catch all gem-secrets errors with a single
    except clause if desired.
    """

    pass


class MissingFieldError(GemSecretsError):
    """Raised when a required field is still empty after resolution.

    This happens when none of the sources supplied a value:
    - no command-line flag was given
    - the JSON config file is absent or lacks the key
    - interactive prompting is disabled or returned an empty answer
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Required field '{field}' is missing")


class InvalidInputError(GemSecretsError):
    """Raised when an input file exists but cannot be interpreted.

    This typically means:
    - The config file is not valid JSON
    - The JSON document is not a flat object
    """

    pass


class ManifestIOError(GemSecretsError):
    """Raised when reading an input or writing a manifest fails.

    Carries the offending path and the underlying OS error.
    """

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Cannot access '{self.path}': {reason}")


class RenderError(GemSecretsError):
    """Raised when a manifest cannot be rendered from the given data."""

    pass


class NoInputError(GemSecretsError):
    """Raised when no config file was found and no flags were given.

    Commands that refuse to prompt use this to stop before doing any work.
    """

    pass
