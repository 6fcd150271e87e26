"""State command for hyperdoc CLI."""

from ...core.config import Config
from ...sources import load_document
from .output import link_to_dict, print_json


def handle_state(args, config: Config) -> None:
    """Handle state command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    root = load_document(args.source, config.http)
    if args.links:
        print_json([link_to_dict(link) for link in root.resource_links()])
    else:
        print_json(root.state_container())
