"""Resource command for hyperdoc CLI."""

from ...core.config import Config
from ...sources import load_document
from .output import link_to_dict, print_json


def handle_resource(args, config: Config) -> None:
    """Handle resource command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    root = load_document(args.source, config.http)
    if args.all:
        print_json([link_to_dict(link) for link in root.resources(args.relation)])
    else:
        print_json(link_to_dict(root.resource(args.relation)))
