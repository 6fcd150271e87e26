"""CLI command handlers for hyperdoc."""

from .property import VALUE_TYPES, handle_property
from .resource import handle_resource
from .state import handle_state

__all__ = [
    "VALUE_TYPES",
    "handle_property",
    "handle_resource",
    "handle_state",
]
