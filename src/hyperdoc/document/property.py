"""Typed access to the properties of a JSON object.

A :class:`Property` is a throwaway view over one ``name: value`` pair of a
document. It knows whether the pair is document metadata or application state
and converts the value to the Python type the caller asks for.

Example:
    prop = Property("createdAt", "2024-01-02T03:04:05Z")
    prop.is_state          # True
    prop.date_value()      # datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from ..core.exceptions import (
    InvalidIntegerError,
    InvalidTimestampError,
    InvalidUriError,
    InvalidUuidError,
    TypeMismatchError,
)
from ..core.types import json_type_name
from .metadata import METADATA_MARKER
from .validation import is_valid_uri

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Property:
    """A named JSON value together with its metadata/state classification.

    Attributes:
        name: Property name as it appears in the document.
        value: Parsed JSON value of the property.
        inside_state_metadata: True if the property was declared inside a
            ``@state`` container, where ``@``-prefixed names are ordinary
            state.

    Equality includes the classification: ``@x`` read inline is metadata,
    while ``@x`` read from a ``@state`` container is state, so the two differ.
    """

    name: str
    value: Any
    inside_state_metadata: bool = False

    @property
    def is_metadata(self) -> bool:
        """True if the property is reserved document metadata."""
        return self.name.startswith(METADATA_MARKER) and not self.inside_state_metadata

    @property
    def is_state(self) -> bool:
        """True if the property describes application state."""
        return not self.is_metadata

    def _mismatch(self, expected: str) -> TypeMismatchError:
        return TypeMismatchError(
            self.name,
            self.value,
            f"{self.name} must be {expected}.\n"
            f"Actual: {json_type_name(self.value)}\n"
            f"Node  : {self.value!r}",
        )

    def string_value(self) -> str:
        """Get the value as a string.

        Raises:
            TypeMismatchError: If the value is not a JSON string.
        """
        if not isinstance(self.value, str):
            raise self._mismatch("a string")
        return self.value

    def uri_value(self) -> str:
        """Get the value as a URI reference.

        Raises:
            TypeMismatchError: If the value is not a JSON string.
            InvalidUriError: If the string is not a valid URI.
        """
        text = self.string_value()
        if not is_valid_uri(text):
            raise InvalidUriError(
                self.name, text, f"{self.name} must be a valid URI.\nActual: {text!r}"
            )
        return text

    def string_values(self) -> list[str]:
        """Get the value as a list of strings.

        Raises:
            TypeMismatchError: If the value is not an array, or any element is
                not a string.
        """
        if not isinstance(self.value, list):
            raise self._mismatch("an array")
        return [
            Property(self.name, element, self.inside_state_metadata).string_value()
            for element in self.value
        ]

    def date_value(self) -> datetime:
        """Get the value as a UTC instant.

        The string must be ISO-8601 with a ``Z`` designator or a UTC offset.

        Raises:
            TypeMismatchError: If the value is not a JSON string.
            InvalidTimestampError: If the string is not an ISO-8601 instant.
        """
        text = self.string_value()
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidTimestampError(
                self.name, text, f"{self.name} must be an ISO-8601 instant: {e}"
            ) from e
        if parsed.tzinfo is None:
            raise InvalidTimestampError(
                self.name,
                text,
                f"{self.name} must include a UTC offset.\nActual: {text!r}",
            )
        return parsed.astimezone(timezone.utc)

    def uuid_value(self) -> uuid.UUID:
        """Get the value as a UUID.

        Raises:
            TypeMismatchError: If the value is not a JSON string.
            InvalidUuidError: If the string is not a UUID.
        """
        text = self.string_value()
        try:
            return uuid.UUID(text)
        except ValueError as e:
            raise InvalidUuidError(
                self.name, text, f"{self.name} must be a UUID.\nActual: {text!r}"
            ) from e

    def integer_value(self) -> int:
        """Get the value as an integer.

        Raises:
            TypeMismatchError: If the value is not a JSON integer.
        """
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise self._mismatch("an integer")
        return self.value

    def integer_keyed_string_map(self) -> dict[int, str]:
        """Get the value as a mapping from integer keys to strings.

        Raises:
            TypeMismatchError: If the value is not an object, or any value is
                not a string.
            InvalidIntegerError: If any key is not an integer.
        """
        if not isinstance(self.value, dict):
            raise self._mismatch("an object")
        result: dict[int, str] = {}
        for key, nested in self.value.items():
            if not _INTEGER.fullmatch(key):
                raise InvalidIntegerError(
                    key, key, f"Keys of {self.name} must be integers.\nActual: {key!r}"
                )
            result[int(key)] = Property(key, nested, self.inside_state_metadata).string_value()
        return result
