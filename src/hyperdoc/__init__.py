"""hyperdoc - navigate hypermedia JSON documents by relation."""

from .core.exceptions import (
    HyperdocError,
    MalformedDocumentError,
    NoSuchPropertyError,
    NoSuchRelationError,
    NotFoundError,
    ValidationError,
)
from .document import (
    IncludedStateLink,
    Link,
    LinkKind,
    Metadata,
    OmittedStateLink,
    Property,
    Relation,
    Resource,
)
from .sources import load_document, parse_document

__version__ = "1.0.0"

__all__ = [
    "Resource",
    "Property",
    "Link",
    "LinkKind",
    "IncludedStateLink",
    "OmittedStateLink",
    "Metadata",
    "Relation",
    "HyperdocError",
    "ValidationError",
    "NotFoundError",
    "NoSuchRelationError",
    "NoSuchPropertyError",
    "MalformedDocumentError",
    "load_document",
    "parse_document",
]
