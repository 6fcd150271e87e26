"""Shared output helpers for CLI commands."""

import json
from typing import Any

from ...document import Link


def link_to_dict(link: Link) -> dict[str, Any]:
    """Describe a link as a JSON-serializable dict."""
    result: dict[str, Any] = {
        "uri": link.uri,
        "state_included": link.state_included,
    }
    if link.resource is not None:
        result["path"] = link.resource.pointer
    return result


def print_json(value: Any) -> None:
    """Print a value as indented JSON."""
    print(json.dumps(value, indent=2, ensure_ascii=False, default=str))
