"""Links between resources.

A link is one of two shapes:

- :class:`IncludedStateLink` - the target resource's state is embedded in the
  document, so the link carries a full :class:`~hyperdoc.document.resource.Resource`.
- :class:`OmittedStateLink` - only the target's URI is known; its state has to
  be fetched separately.

``Link`` is the union of the two. Code that needs to tell them apart can check
``link.kind`` or use ``isinstance``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Literal, Union
from urllib.parse import urljoin

from loguru import logger

from ..core.exceptions import InvalidLinkPropertyError
from ..core.types import DocumentPath, json_type_name
from .metadata import Metadata
from .validation import is_absolute_uri, is_valid_uri

if TYPE_CHECKING:
    from .resource import Resource


class LinkKind(Enum):
    """Which of the two link shapes a link has."""

    INCLUDED_STATE = "included"
    OMITTED_STATE = "omitted"


@dataclass(frozen=True)
class IncludedStateLink:
    """A link to a resource whose state is included in the enclosing document."""

    resource: "Resource"
    kind: Literal[LinkKind.INCLUDED_STATE] = field(default=LinkKind.INCLUDED_STATE, init=False)

    @property
    def uri(self) -> str | None:
        """The target's ``@link`` value, or None if the resource has no link."""
        return read_link_property(self.resource.json)

    @property
    def state_included(self) -> bool:
        return True

    def __str__(self) -> str:
        return str(self.resource)


@dataclass(frozen=True)
class OmittedStateLink:
    """A link to a resource whose state is omitted from the enclosing document."""

    uri: str
    kind: Literal[LinkKind.OMITTED_STATE] = field(default=LinkKind.OMITTED_STATE, init=False)

    @property
    def resource(self) -> None:
        """Always None; the target's state is not available."""
        return None

    @property
    def state_included(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.uri


Link = Union[IncludedStateLink, OmittedStateLink]


def read_link_property(node: dict[str, Any]) -> str | None:
    """Read the ``@link`` property of a JSON object.

    Args:
        node: JSON object that might represent a resource.

    Returns:
        The link value, or None if the object has no ``@link`` property.

    Raises:
        InvalidLinkPropertyError: If ``@link`` is present but is not a string
            holding a valid URI.
    """
    if Metadata.LINK.value not in node:
        return None
    value = node[Metadata.LINK.value]
    if not isinstance(value, str):
        raise InvalidLinkPropertyError(
            value,
            f"The value of a {Metadata.LINK} property must be a string, "
            f"not {json_type_name(value)}.",
        )
    if not is_valid_uri(value):
        raise InvalidLinkPropertyError(
            value, f"The value of a {Metadata.LINK} property must be a valid URI."
        )
    return value


def has_valid_link(node: Any) -> bool:
    """Check whether a node is a nested-resource boundary.

    Returns:
        True if ``node`` is a JSON object carrying a valid ``@link``.

    Raises:
        InvalidLinkPropertyError: If ``node`` carries an invalid ``@link``.
    """
    return isinstance(node, dict) and read_link_property(node) is not None


def resolve_link(node: Any, base_uri: str, path: DocumentPath) -> Link | None:
    """Convert a JSON node to a link, if it represents one.

    Strings are links when they hold an absolute URI. Objects are links when
    they carry a ``@link`` property; the object itself becomes the state of the
    linked resource.

    Args:
        node: JSON value to convert.
        base_uri: URI that relative ``@link`` values are resolved against.
        path: Location of ``node`` within the document.

    Returns:
        The link, or None if ``node`` does not represent one.

    Raises:
        InvalidLinkPropertyError: If ``node`` is an object whose ``@link``
            property is not a valid URI string.
    """
    if isinstance(node, str):
        if is_absolute_uri(node):
            return OmittedStateLink(node)
        return None
    if isinstance(node, dict):
        link = read_link_property(node)
        if link is None:
            return None
        # Deferred: resource.py imports this module
        from .resource import Resource

        logger.debug(f"Resolved embedded resource {link} at {path!r}")
        return IncludedStateLink(Resource(node, urljoin(base_uri, link), path))
    return None
