"""Type definitions for hyperdoc."""

from typing import Any, Union

JsonValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]
"""A node of a parsed JSON document, as produced by ``json.loads``."""

JsonObject = dict[str, Any]

DocumentPath = tuple[Union[str, int], ...]
"""Steps (property names or array indexes) from the document root to a node."""

ROOT_PATH: DocumentPath = ()


def to_json_pointer(path: DocumentPath) -> str:
    """Render a document path as an RFC 6901 JSON pointer.

    Args:
        path: Steps from the document root.

    Returns:
        JSON pointer string; the empty string denotes the root.
    """
    parts = []
    for step in path:
        token = str(step).replace("~", "~0").replace("/", "~1")
        parts.append(f"/{token}")
    return "".join(parts)


def json_type_name(value: Any) -> str:
    """Get the JSON type name of a parsed value, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
