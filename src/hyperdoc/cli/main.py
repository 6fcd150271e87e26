"""CLI entry point for hyperdoc."""

import argparse
import sys
from typing import NoReturn, Sequence

from loguru import logger

from ..core.config import Config
from ..core.exceptions import HyperdocError
from ..core.logging import configure_logging
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="hyperdoc",
        description="Query hypermedia JSON documents by relation or property",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 1.0.0")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log resolution details to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    resource_parser = subparsers.add_parser(
        "resource", help="Find resources by relation"
    )
    resource_parser.add_argument("source", help="Document file path or http(s) URL")
    resource_parser.add_argument("relation", help="Relation to search for")
    resource_parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Print every match instead of the first one",
    )

    property_parser = subparsers.add_parser("property", help="Read a property value")
    property_parser.add_argument("source", help="Document file path or http(s) URL")
    property_parser.add_argument("name", help="Property name")
    property_parser.add_argument(
        "--as",
        dest="value_type",
        choices=commands.VALUE_TYPES,
        default="json",
        help="Convert the value before printing (default: json)",
    )

    state_parser = subparsers.add_parser("state", help="Print the resource state")
    state_parser.add_argument("source", help="Document file path or http(s) URL")
    state_parser.add_argument(
        "--links",
        action="store_true",
        help="Print the state as a list of resource links",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    config = Config.from_env()
    if args.verbose:
        config.logging.level = "DEBUG"
        config.logging.verbose = True
    configure_logging(config.logging)

    try:
        if args.command == "resource":
            commands.handle_resource(args, config)
        elif args.command == "property":
            commands.handle_property(args, config)
        elif args.command == "state":
            commands.handle_state(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except HyperdocError as e:
        logger.debug(f"{type(e).__name__} while running {args.command}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
