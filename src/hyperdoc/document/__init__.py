"""Navigation of hypermedia JSON documents.

Quick Start
-----------
Wrap the parsed root object in a :class:`Resource` and query it by relation
or by property name:

    from hyperdoc.document import Resource

    doc = Resource(json.loads(text), "https://example.com/employees/7")

    manager = doc.resource("manager")          # Link
    if manager.state_included:
        name = manager.resource.property("name").string_value()
    else:
        fetch(manager.uri)

Metadata vs. state
------------------
Property names starting with ``@`` are document metadata (``@link``,
``@relations``, ``@state``...). Everything else is application state. A
resource whose state would collide with that convention, or whose state is not
an object, wraps it in ``@state``; inside ``@state`` every name is state.
"""

from .link import (
    IncludedStateLink,
    Link,
    LinkKind,
    OmittedStateLink,
    has_valid_link,
    read_link_property,
    resolve_link,
)
from .metadata import METADATA_MARKER, Metadata, Relation
from .property import Property
from .relations import declares_relation, find_all, find_one
from .resource import Resource
from .validation import is_absolute_uri, is_valid_uri, require_name

__all__ = [
    "Resource",
    "Property",
    "Link",
    "LinkKind",
    "IncludedStateLink",
    "OmittedStateLink",
    "resolve_link",
    "has_valid_link",
    "read_link_property",
    "find_one",
    "find_all",
    "declares_relation",
    "Metadata",
    "Relation",
    "METADATA_MARKER",
    "require_name",
    "is_valid_uri",
    "is_absolute_uri",
]
