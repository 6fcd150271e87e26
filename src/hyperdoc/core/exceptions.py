"""Custom exceptions for hyperdoc."""

from typing import Any


class HyperdocError(Exception):
    """Base exception for all hyperdoc errors."""

    pass


class ValidationError(HyperdocError, ValueError):
    """An argument passed by the caller is invalid."""

    pass


# =============================================================================
# Lookup failures
# =============================================================================


class NotFoundError(HyperdocError):
    """A well-formed query did not match anything."""

    pass


class NoSuchRelationError(NotFoundError):
    """No resource with the requested relation was found."""

    def __init__(self, node: dict[str, Any], relation: str):
        """Initialize exception with the search root and relation.

        Args:
            node: JSON object that the search began at.
            relation: Relation that was searched for.
        """
        self.node = node
        self.relation = relation
        super().__init__(
            f'Could not find any resources with relation "{relation}".\nfrom: {node}'
        )


class NoSuchPropertyError(NotFoundError):
    """The resource does not contain the requested property."""

    def __init__(self, node: dict[str, Any], name: str):
        """Initialize exception with the resource node and property name.

        Args:
            node: JSON object that was searched.
            name: Name of the missing property.
        """
        self.node = node
        self.name = name
        super().__init__(f'Could not find a property named "{name}".\nfrom: {node}')


# =============================================================================
# Document structure failures
# =============================================================================


class MalformedDocumentError(HyperdocError):
    """The document does not have the structure it claims to have."""

    pass


class InvalidLinkPropertyError(MalformedDocumentError):
    """An object carries a link property that is not a valid URI string."""

    def __init__(self, value: Any, reason: str):
        self.value = value
        super().__init__(f"{reason}\nActual: {value!r}")


class PropertyValueError(MalformedDocumentError):
    """A property value could not be converted to the requested type."""

    def __init__(self, name: str, value: Any, message: str):
        self.name = name
        self.value = value
        super().__init__(message)


class TypeMismatchError(PropertyValueError):
    """Property value has the wrong JSON type."""

    pass


class InvalidUriError(PropertyValueError):
    """Property value is not a valid URI."""

    pass


class InvalidTimestampError(PropertyValueError):
    """Property value is not an ISO-8601 instant."""

    pass


class InvalidIntegerError(PropertyValueError):
    """Property value (or key) is not an integer."""

    pass


class InvalidUuidError(PropertyValueError):
    """Property value is not a UUID."""

    pass


# =============================================================================
# Loading failures
# =============================================================================


class DocumentLoadError(HyperdocError):
    """A document could not be read or parsed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load {source}: {reason}")


class DocumentFetchError(DocumentLoadError):
    """A document could not be fetched over HTTP."""

    def __init__(self, source: str, reason: str, retryable: bool = False):
        self.retryable = retryable
        super().__init__(source, reason)
