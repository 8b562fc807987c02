"""Data URI utilities for Sahayak.

Media travels between the caller, the flows, and the model as base64 data URIs
(``data:<mimetype>;base64,<encoded_data>``).
"""

import base64
import binascii
import re
from typing import Tuple

DATA_URI_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?P<params>(;[\w.+-]+=[\w.+-]+)*);base64,(?P<data>.*)$", re.DOTALL)


def is_data_uri(value: str) -> bool:
    """Check whether a string looks like a base64 data URI with a MIME type."""
    return bool(isinstance(value, str) and DATA_URI_PATTERN.match(value))


def parse_data_uri(value: str) -> Tuple[str, bytes]:
    """Split a base64 data URI into its MIME type and decoded payload.

    Args:
        value: Data URI string

    Returns:
        Tuple of (mime_type, raw bytes)

    Raises:
        ValueError: If the value is not a base64 data URI or the payload is not valid base64
    """
    match = DATA_URI_PATTERN.match(value or "")
    if not match:
        raise ValueError("Expected a data URI of the form 'data:<mimetype>;base64,<encoded_data>'")

    try:
        payload = base64.b64decode(match.group("data"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Data URI payload is not valid base64: {e}")

    return match.group("mime"), payload


def to_data_uri(mime_type: str, data: bytes) -> str:
    """Encode raw bytes as a base64 data URI.

    Example:
        >>> to_data_uri("text/plain", b"hi")
        'data:text/plain;base64,aGk='
    """
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def require_data_uri(value: str) -> str:
    """Check that a value is a data URI carrying a non-empty base64 payload.

    Used as a pydantic field validator body, so failures are ValueError.

    Raises:
        ValueError: If the value is not a data URI, the payload is not valid
            base64, or it decodes to nothing
    """
    if not is_data_uri(value):
        raise ValueError("must be a data URI of the form 'data:<mimetype>;base64,<encoded_data>'")
    _, payload = parse_data_uri(value)
    if not payload:
        raise ValueError("data URI payload is empty")
    return value
