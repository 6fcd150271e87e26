"""Tests for Property classification and value conversion."""

import uuid
from datetime import datetime, timezone

import pytest

from hyperdoc.core.exceptions import (
    InvalidIntegerError,
    InvalidTimestampError,
    InvalidUriError,
    InvalidUuidError,
    MalformedDocumentError,
    TypeMismatchError,
)
from hyperdoc.document import Property


class TestClassification:
    """Tests for metadata vs. state classification."""

    def test_marker_prefix_is_metadata(self):
        """Names starting with @ are metadata."""
        prop = Property("@link", "https://example.com")

        assert prop.is_metadata
        assert not prop.is_state

    def test_plain_name_is_state(self):
        """Names without the marker are state."""
        assert Property("name", "John").is_state

    def test_marker_inside_state_container_is_state(self):
        """Inside @state, marker-prefixed names are ordinary state."""
        prop = Property("@link", "not a link", inside_state_metadata=True)

        assert prop.is_state
        assert not prop.is_metadata

    def test_equality_includes_state_container_flag(self):
        """The same pair differs once it is classified differently."""
        assert Property("@x", "v") != Property("@x", "v", True)
        assert Property("name", "John", True) == Property("name", "John", True)


class TestStringValues:
    """Tests for string-based conversions."""

    def test_string_value(self):
        assert Property("name", "John").string_value() == "John"

    @pytest.mark.parametrize("value", [None, 1, True, [], {}])
    def test_string_value_rejects_other_types(self, value):
        """Non-string values raise TypeMismatchError."""
        with pytest.raises(TypeMismatchError) as exc_info:
            Property("name", value).string_value()

        assert exc_info.value.name == "name"

    def test_type_mismatch_is_malformed_document(self):
        """Conversion failures are document errors."""
        with pytest.raises(MalformedDocumentError):
            Property("name", 5).string_value()

    def test_uri_value(self):
        prop = Property("home", "https://example.com/a?b=c#d")

        assert prop.uri_value() == "https://example.com/a?b=c#d"

    def test_uri_value_accepts_relative_reference(self):
        assert Property("home", "../employees/5").uri_value() == "../employees/5"

    @pytest.mark.parametrize("value", ["has space", "<angle>", "", "1http://x"])
    def test_uri_value_rejects_invalid(self, value):
        with pytest.raises(InvalidUriError):
            Property("home", value).uri_value()

    def test_string_values(self):
        assert Property("tags", ["a", "b"]).string_values() == ["a", "b"]

    def test_string_values_requires_array(self):
        with pytest.raises(TypeMismatchError):
            Property("tags", "a").string_values()

    def test_string_values_rejects_non_string_element(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            Property("tags", ["a", 2]).string_values()

        assert exc_info.value.value == 2


class TestDateValue:
    """Tests for ISO-8601 instant parsing."""

    def test_utc_designator(self):
        result = Property("createdAt", "2024-01-02T03:04:05Z").date_value()

        assert result == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_offset_is_normalized_to_utc(self):
        result = Property("createdAt", "2024-01-02T05:04:05+02:00").date_value()

        assert result == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2024-01-02T03:04:05+0000", datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)),
            (
                "2024-01-02T03:04:05.5Z",
                datetime(2024, 1, 2, 3, 4, 5, 500000, tzinfo=timezone.utc),
            ),
        ],
    )
    def test_compact_offset_and_short_fraction(self, text, expected):
        assert Property("createdAt", text).date_value() == expected

    def test_missing_offset_rejected(self):
        """Local times are not instants."""
        with pytest.raises(InvalidTimestampError):
            Property("createdAt", "2024-01-02T03:04:05").date_value()

    def test_garbage_rejected(self):
        with pytest.raises(InvalidTimestampError):
            Property("createdAt", "yesterday").date_value()


class TestOtherValues:
    """Tests for UUID, integer and integer-keyed map conversions."""

    def test_uuid_value(self):
        value = "12345678-1234-5678-1234-567812345678"

        assert Property("id", value).uuid_value() == uuid.UUID(value)

    def test_uuid_value_rejects_garbage(self):
        with pytest.raises(InvalidUuidError):
            Property("id", "not-a-uuid").uuid_value()

    def test_integer_value(self):
        assert Property("count", 3).integer_value() == 3

    @pytest.mark.parametrize("value", [True, 1.5, "3"])
    def test_integer_value_rejects_other_types(self, value):
        with pytest.raises(TypeMismatchError):
            Property("count", value).integer_value()

    def test_integer_keyed_string_map(self):
        prop = Property("versions", {"1": "alpha", "-2": "beta"})

        assert prop.integer_keyed_string_map() == {1: "alpha", -2: "beta"}

    def test_integer_keyed_string_map_requires_object(self):
        with pytest.raises(TypeMismatchError):
            Property("versions", ["alpha"]).integer_keyed_string_map()

    def test_integer_keyed_string_map_rejects_bad_key(self):
        with pytest.raises(InvalidIntegerError) as exc_info:
            Property("versions", {"one": "alpha"}).integer_keyed_string_map()

        assert exc_info.value.value == "one"

    def test_integer_keyed_string_map_rejects_non_string_value(self):
        with pytest.raises(TypeMismatchError):
            Property("versions", {"1": 1}).integer_keyed_string_map()
