"""Resource facade over a JSON object."""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..core.exceptions import (
    MalformedDocumentError,
    NoSuchPropertyError,
    NoSuchRelationError,
    ValidationError,
)
from ..core.types import (
    ROOT_PATH,
    DocumentPath,
    JsonObject,
    json_type_name,
    to_json_pointer,
)
from .link import IncludedStateLink, Link, resolve_link
from .metadata import Metadata
from .property import Property
from .relations import find_all, find_one
from .validation import require_name, require_uri

_STATE = Metadata.STATE.value


class Resource:
    """A resource returned by the server.

    Wraps the JSON object that represents the resource together with the
    resource's URI and its location within the enclosing document. The wrapped
    object is never modified; every query re-reads it.

    Example:
        resource = Resource(
            {"@link": "https://example.com/employees/1", "name": "John"},
            "https://example.com/employees/1",
        )
        resource.property("name").string_value()  # 'John'
    """

    __slots__ = ("_json", "_uri", "_path")

    def __init__(self, json_object: JsonObject, uri: str, path: DocumentPath = ROOT_PATH) -> None:
        """Initialize resource.

        Args:
            json_object: JSON object that represents the resource.
            uri: Canonical URI of the resource.
            path: Location of the object within the enclosing document.

        Raises:
            ValidationError: If ``json_object`` is not a JSON object or ``uri``
                is not a valid URI.
        """
        if not isinstance(json_object, dict):
            raise ValidationError(
                f"A resource must be a JSON object, not {json_type_name(json_object)}"
            )
        self._json = json_object
        self._uri = require_uri(uri, "uri")
        self._path = tuple(path)

    @property
    def json(self) -> JsonObject:
        """The JSON object that represents the resource."""
        return self._json

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def path(self) -> DocumentPath:
        """Steps from the document root to this resource."""
        return self._path

    @property
    def pointer(self) -> str:
        """This resource's location as a JSON pointer."""
        return to_json_pointer(self._path)

    def as_link(self) -> IncludedStateLink:
        """Get a link to this resource."""
        return IncludedStateLink(self)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def state_container(self) -> Any:
        """Get the value that holds the resource's state.

        Returns:
            The ``@state`` property's value if present, otherwise the resource
            object itself.
        """
        if _STATE in self._json:
            return self._json[_STATE]
        return self._json

    def contains_state(self) -> bool:
        """Check whether the resource has a state.

        Returns:
            True if the resource has a state property or a ``@state`` property,
            even an empty one.
        """
        return any(
            Property(name, value).is_state or name == _STATE
            for name, value in self._json.items()
        )

    def string_values(self) -> list[str]:
        """Get the resource's state as a list of strings.

        Raises:
            MalformedDocumentError: If the resource has no ``@state`` property,
                or its value is not an array of strings.
        """
        state = self._require_state_array()
        for element in state:
            if not isinstance(element, str):
                raise MalformedDocumentError(
                    f"{Metadata.STATE} must contain string elements.\n"
                    f"Actual: {element!r}\n"
                    f"Type  : {json_type_name(element)}"
                )
        return list(state)

    def resource_links(self) -> list[Link]:
        """Get the resource's state as a list of links.

        Raises:
            MalformedDocumentError: If the resource has no ``@state`` property,
                its value is not an array, or any element is not a link.
        """
        state = self._require_state_array()
        links = []
        for index, element in enumerate(state):
            link = resolve_link(element, self._uri, self._path + (_STATE, index))
            if link is None:
                raise MalformedDocumentError(
                    f"{Metadata.STATE} must contain resources.\n"
                    f"Actual  : {state!r}\n"
                    f"Unwanted: {element!r}"
                )
            links.append(link)
        return links

    def _require_state_array(self) -> list[Any]:
        if _STATE not in self._json:
            raise MalformedDocumentError(
                f"Resource must contain a {Metadata.STATE} property.\nActual: {self._json!r}"
            )
        state = self._json[_STATE]
        if not isinstance(state, list):
            raise MalformedDocumentError(
                f"{Metadata.STATE} property must be an array.\nActual: {json_type_name(state)}"
            )
        return state

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    def optional_property(self, name: str) -> Property | None:
        """Look up a property by name.

        The resource object is searched first, then the object held by its
        ``@state`` property (one level, not recursively).

        Returns:
            The property, or None if it does not exist.

        Raises:
            ValidationError: If ``name`` is empty or padded with whitespace.
        """
        name = require_name(name, "name")
        if name in self._json:
            return Property(name, self._json[name])
        state = self._json.get(_STATE)
        if isinstance(state, dict) and name in state:
            return Property(name, state[name], inside_state_metadata=True)
        return None

    def property(self, name: str) -> Property:
        """Look up a property by name.

        Raises:
            ValidationError: If ``name`` is empty or padded with whitespace.
            NoSuchPropertyError: If the property does not exist.
        """
        match = self.optional_property(name)
        if match is None:
            raise NoSuchPropertyError(self._json, name)
        return match

    # -------------------------------------------------------------------------
    # Relations
    # -------------------------------------------------------------------------

    def optional_resource(self, relation: str | Enum) -> Link | None:
        """Find a descendant resource with the requested relation.

        If multiple matches exist the first one in document order is returned.

        Raises:
            ValidationError: If ``relation`` is empty or padded with whitespace.
        """
        return find_one(self._json, relation, base_uri=self._uri, path=self._path)

    def resource(self, relation: str | Enum) -> Link:
        """Find a descendant resource with the requested relation.

        Raises:
            ValidationError: If ``relation`` is empty or padded with whitespace.
            NoSuchRelationError: If no match was found.
        """
        match = self.optional_resource(relation)
        if match is None:
            raise NoSuchRelationError(self._json, require_name(relation, "relation"))
        return match

    def optional_resources(self, relation: str | Enum) -> list[Link]:
        """Find all descendant resources with the requested relation.

        Returns:
            The matches in document order; empty if there are none.

        Raises:
            ValidationError: If ``relation`` is empty or padded with whitespace.
        """
        return find_all(self._json, relation, base_uri=self._uri, path=self._path)

    def resources(self, relation: str | Enum) -> list[Link]:
        """Find all descendant resources with the requested relation.

        Raises:
            ValidationError: If ``relation`` is empty or padded with whitespace.
            NoSuchRelationError: If no match was found.
        """
        matches = self.optional_resources(relation)
        if not matches:
            raise NoSuchRelationError(self._json, require_name(relation, "relation"))
        return matches

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self._json == other._json

    def __hash__(self) -> int:
        # Equal documents have equal key sets
        return hash(frozenset(self._json))

    def __repr__(self) -> str:
        return f"Resource(uri={self._uri!r}, path={self.pointer!r})"

    def __str__(self) -> str:
        return self._uri
