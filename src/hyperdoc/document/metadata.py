"""Reserved metadata property names and conventional relation names."""

from enum import Enum

METADATA_MARKER = "@"
"""Prefix shared by every reserved metadata property name."""


class Metadata(str, Enum):
    """Metadata properties defined by the document format."""

    LINK = "@link"
    STATE = "@state"
    RELATIONS = "@relations"
    TYPE = "@type"
    OPTIONAL = "@optional"
    OPTIONS = "@options"
    DESCRIPTION = "@description"
    DEPRECATED = "@deprecated"
    AUTHENTICATION = "@authentication"

    def __str__(self) -> str:
        return self.value


class Relation(str, Enum):
    """Relation names used by document conventions."""

    # The parent resource in the hierarchy of resources
    PARENT = "parent"
    FORM_CREATE = "formCreate"
    FORM_UPDATE = "formUpdate"
    FORM_DELETE = "formDelete"

    def __str__(self) -> str:
        return self.value
