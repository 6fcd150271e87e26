"""Argument and URI validation shared by the document modules."""

from __future__ import annotations

import re
from enum import Enum
from urllib.parse import urlsplit

from ..core.exceptions import ValidationError

# RFC 3986 unreserved + reserved characters, or a percent-encoded octet
_URI_REFERENCE = re.compile(r"(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})+")
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")


def require_name(value: str | Enum, label: str) -> str:
    """Validate a relation or property name passed by the caller.

    Args:
        value: Name to validate. Enum members are converted to their value.
        label: Argument name used in the error message.

    Returns:
        The validated name.

    Raises:
        ValidationError: If the name is not a string, is empty, or has leading
            or trailing whitespace.
    """
    if isinstance(value, Enum):
        value = value.value
    if not isinstance(value, str):
        raise ValidationError(f"{label} must be a string. Actual: {type(value).__name__}")
    if not value:
        raise ValidationError(f"{label} may not be empty")
    if value != value.strip():
        raise ValidationError(
            f"{label} may not contain leading or trailing whitespace. Actual: {value!r}"
        )
    return value


def is_valid_uri(value: str) -> bool:
    """Check whether a string is a syntactically valid URI reference.

    Relative references are accepted. The check rejects characters that must be
    percent-encoded (whitespace, quotes, angle brackets...) and malformed
    schemes or authorities.
    """
    if not value or not _URI_REFERENCE.fullmatch(value):
        return False
    try:
        parts = urlsplit(value)
        # Accessing port validates it
        parts.port
    except ValueError:
        return False
    # A colon before the first "/", "?" or "#" must terminate a scheme
    head = re.split(r"[/?#]", value, maxsplit=1)[0]
    if ":" in head and not _SCHEME.fullmatch(head.split(":", 1)[0]):
        return False
    return True


def is_absolute_uri(value: str) -> bool:
    """Check whether a string is a valid URI that carries a scheme."""
    return is_valid_uri(value) and bool(urlsplit(value).scheme)


def require_uri(value: str, label: str) -> str:
    """Validate a URI passed by the caller.

    Raises:
        ValidationError: If ``value`` is not a non-empty valid URI reference.
    """
    if not isinstance(value, str) or not is_valid_uri(value):
        raise ValidationError(f"{label} must be a valid URI. Actual: {value!r}")
    return value
