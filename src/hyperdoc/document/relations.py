"""Find the links that a JSON object has with a given relation.

The search walks an object's properties in document order and reports each
value that is related to the object by ``relation``:

1. An object whose ``@relations`` array lists the relation is a match. It must
   carry a valid ``@link``, otherwise the document is malformed.
2. A property named after the relation is a match if its value resolves to a
   link (an absolute URI string, or an object with ``@link``). Arrays under
   such a property contribute each of their elements that resolves to a link.
3. Metadata properties are not searched into, except ``@state``, whose subtree
   holds the resource's state. A metadata property named after the relation
   still matches under rule 2. Below ``@state`` every property is state, even if
   its name starts with ``@``.
4. Nested resources (objects carrying a valid ``@link``) are not searched:
   their relations belong to them, not to the object that embeds them.

Example:
    doc = {
        "@link": "https://example.com/teams/7",
        "lead": {"@link": "https://example.com/employees/123", "name": "John"},
        "members": [
            {"@link": "https://example.com/employees/5", "@relations": ["member"]},
        ],
    }
    find_one(doc, "lead", base_uri="https://example.com/teams/7").uri
    # 'https://example.com/employees/123'

If an object both lists the relation in ``@relations`` and contains properties
that match it, the object itself is reported first and the scan of its
properties continues.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator

from loguru import logger

from ..core.exceptions import MalformedDocumentError
from ..core.types import ROOT_PATH, DocumentPath, JsonObject
from .link import Link, has_valid_link, resolve_link
from .metadata import Metadata
from .property import Property
from .validation import require_name

_STATE = Metadata.STATE.value
_RELATIONS = Metadata.RELATIONS.value


def find_one(
    root: JsonObject,
    relation: str | Enum,
    *,
    base_uri: str,
    path: DocumentPath = ROOT_PATH,
    inside_state_metadata: bool = False,
) -> Link | None:
    """Find the first link with the requested relation.

    If multiple matches exist the first one in document order is returned.

    Args:
        root: Object to start the search at.
        relation: Relation between ``root`` and the wanted resource.
        base_uri: URI that relative links are resolved against.
        path: Location of ``root`` within the document.
        inside_state_metadata: True if ``root`` lies inside a ``@state``
            container.

    Returns:
        The matching link, or None if there is no match.

    Raises:
        ValidationError: If ``relation`` is empty or padded with whitespace.
        MalformedDocumentError: If the searched subtree is malformed.
    """
    relation = require_name(relation, "relation")
    return next(_walk(root, relation, base_uri, path, inside_state_metadata), None)


def find_all(
    root: JsonObject,
    relation: str | Enum,
    *,
    base_uri: str,
    path: DocumentPath = ROOT_PATH,
    inside_state_metadata: bool = False,
) -> list[Link]:
    """Find every link with the requested relation, in document order.

    Takes the same arguments as :func:`find_one`.

    Returns:
        The matching links; empty if there is no match.
    """
    relation = require_name(relation, "relation")
    return list(_walk(root, relation, base_uri, path, inside_state_metadata))


def declares_relation(node: JsonObject, relation: str) -> bool:
    """Check whether an object lists ``relation`` in its ``@relations`` array.

    Raises:
        MalformedDocumentError: If ``@relations`` is not an array of strings.
    """
    relations = node.get(_RELATIONS)
    if relations is None:
        return False
    if not isinstance(relations, list) or not all(isinstance(r, str) for r in relations):
        raise MalformedDocumentError(
            f"{Metadata.RELATIONS} must be an array of strings.\nActual: {relations!r}"
        )
    return relation in relations


def _require_link(node: JsonObject, base_uri: str, path: DocumentPath) -> Link:
    link = resolve_link(node, base_uri, path)
    if link is None:
        raise MalformedDocumentError(
            f"Object that contains {Metadata.RELATIONS} must contain a valid "
            f"{Metadata.LINK}.\nActual: {node!r}"
        )
    return link


def _walk(
    node: JsonObject,
    relation: str,
    base_uri: str,
    path: DocumentPath,
    inside_state: bool,
) -> Iterator[Link]:
    """Yield the matches of ``node`` itself, then those of its properties."""
    if declares_relation(node, relation):
        logger.debug(f"{relation!r}: explicit match at {path!r}")
        yield _require_link(node, base_uri, path)
    yield from _walk_properties(node, relation, base_uri, path, inside_state)


def _walk_properties(
    node: JsonObject,
    relation: str,
    base_uri: str,
    path: DocumentPath,
    inside_state: bool,
) -> Iterator[Link]:
    for name, value in node.items():
        child_path = path + (name,)
        is_state_container = name == _STATE and not inside_state
        if Property(name, value, inside_state).is_metadata and not is_state_container:
            # Metadata may still name the relation, but is never searched into
            if name == relation:
                yield from _walk_value(
                    name, value, relation, base_uri, child_path, inside_state, descend=False
                )
            continue
        yield from _walk_value(
            name,
            value,
            relation,
            base_uri,
            child_path,
            inside_state or is_state_container,
        )


def _walk_value(
    name: str,
    value: Any,
    relation: str,
    base_uri: str,
    path: DocumentPath,
    inside_state: bool,
    descend: bool = True,
) -> Iterator[Link]:
    """Yield the matches of a property value.

    ``name`` is the enclosing property's name; array elements inherit it.
    With ``descend`` false only the value itself (or its array elements) can
    match.
    """
    if isinstance(value, list):
        for index, element in enumerate(value):
            yield from _walk_value(
                name, element, relation, base_uri, path + (index,), inside_state, descend
            )
        return

    explicit = isinstance(value, dict) and _RELATIONS in value
    if name == relation and not explicit:
        link = resolve_link(value, base_uri, path)
        if link is not None:
            logger.debug(f"{relation!r}: implicit match at {path!r}")
            yield link
            return

    if not descend or not isinstance(value, dict):
        # Scalars only match through the property that encloses them
        return
    if has_valid_link(value):
        # Nested resource: only its own @relations can match
        if declares_relation(value, relation):
            logger.debug(f"{relation!r}: explicit match at {path!r}")
            yield _require_link(value, base_uri, path)
        return
    yield from _walk(value, relation, base_uri, path, inside_state)
