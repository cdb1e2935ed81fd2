"""Base64 encoding of Secret data values.

Kubernetes expects every value under ``Secret.data`` to be the standard,
padded base64 encoding of the plaintext.
"""

import base64
from collections.abc import Mapping


def encode_value(value: str | bytes) -> str:
    """Encode a single value for use under ``Secret.data``.

    Strings are encoded as UTF-8. Undecodable bytes that reached Python as
    surrogate escapes (command-line arguments, file names) are restored to
    the original bytes; any other lone surrogate is kept as its UTF-8 form.

    Args:
        value: Plaintext string or raw bytes.

    Returns:
        The standard base64 encoding as an ASCII string.

    """
    if isinstance(value, str):
        try:
            raw = value.encode("utf-8", errors="surrogateescape")
        except UnicodeEncodeError:
            raw = value.encode("utf-8", errors="surrogatepass")
    else:
        raw = value
    return base64.b64encode(raw).decode("ascii")


def encode_fields(fields: Mapping[str, str | bytes]) -> dict[str, str]:
    """Encode every value of a mapping, keeping keys and their order."""
    return {key: encode_value(value) for key, value in fields.items()}
