"""Command-line helpers for configuring llama-common logging.

This module exposes functions to register logging-related subcommands on an
``argparse`` parser and to dispatch the parsed arguments to their respective
handlers.
"""

import logging

from llama_common.logging import get_logger, reset_logger, set_level
from llama_common.logging.logging import get_configured_level, _resolve_log_file
from llama_common.logging.config import save_log_level


def register_subcommands(subparsers):
    """Register logging subcommands on the provided ``argparse`` object."""

    set_level_parser = subparsers.add_parser(
        "set-level", help="Persist the logging level"
    )
    set_level_parser.add_argument(
        "level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level to use",
    )

    subparsers.add_parser("show-path", help="Show the log file location")
    subparsers.add_parser("show-level", help="Show the configured logging level")


def dispatch(args):
    """Execute the logging command associated with ``args.subcommand``."""

    if args.subcommand == "set-level":
        level = getattr(logging, args.level.upper())
        path = save_log_level(args.level)
        # module loggers keep their handlers; only the level changes
        reset_logger("llama_common")
        set_level(level)
        get_logger(level=level).info("log level set to %s in %s", args.level.upper(), path)
    elif args.subcommand == "show-path":
        print(_resolve_log_file().resolve())
    elif args.subcommand == "show-level":
        print(get_configured_level())
    else:
        get_logger(__file__).error("No handler for subcommand: %s", args.subcommand)
