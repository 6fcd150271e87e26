"""Property command for hyperdoc CLI."""

from typing import Any, Callable

from ...core.config import Config
from ...document import Property
from ...sources import load_document
from .output import print_json

_CONVERTERS: dict[str, Callable[[Property], Any]] = {
    "json": lambda prop: prop.value,
    "string": Property.string_value,
    "uri": Property.uri_value,
    "date": lambda prop: prop.date_value().isoformat(),
    "strings": Property.string_values,
    "int-map": Property.integer_keyed_string_map,
}

VALUE_TYPES = tuple(_CONVERTERS)


def handle_property(args, config: Config) -> None:
    """Handle property command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    root = load_document(args.source, config.http)
    prop = root.property(args.name)
    print_json(_CONVERTERS[args.value_type](prop))
