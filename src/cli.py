"""Command-line interface for todo-mvc."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from config import LOG_LEVELS, AppConfig, ConfigError, configure_logging, load_config

TODO_MVC_VERSION = "0.1.0"


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    config_path: Path | None
    log_level: str | None
    items: list[str]
    keep_stale_renders: bool


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the todo-mvc CLI."""
    parser = argparse.ArgumentParser(
        prog="todo-mvc",
        description="Todo list demo for the typed MVC core.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {TODO_MVC_VERSION}")
    parser.add_argument("--config", metavar="PATH", help="Config file (default: XDG config dir)")
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level: " + ", ".join(LOG_LEVELS),
    )
    parser.add_argument(
        "--add",
        metavar="NAME",
        action="append",
        default=[],
        help="Start with this item in the list (repeatable)",
    )
    parser.add_argument(
        "--keep-stale-renders",
        action="store_true",
        help="Show every render even when a newer fetch finished first",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
    """
    args = create_parser().parse_args(argv)
    return ParsedArgs(
        config_path=Path(args.config).expanduser() if args.config else None,
        log_level=args.log_level,
        items=args.add,
        keep_stale_renders=args.keep_stale_renders,
    )


def build_config(args: ParsedArgs) -> AppConfig:
    """Load the config file and apply command-line overrides.

    Exits with status 1 if the config file is unusable.
    """
    try:
        config, warnings = load_config(args.config_path)
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        sys.exit(1)

    for warning in warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    if args.log_level:
        config.log_level = args.log_level
    config.initial_items.extend(args.items)
    if args.keep_stale_renders:
        config.drop_stale_renders = False
    return config


def main() -> None:
    """Main entry point."""
    from app import TodoApp

    args = parse_args()
    config = build_config(args)
    configure_logging(config)
    TodoApp(config).run()


if __name__ == "__main__":
    main()
