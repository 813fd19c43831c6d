# llama_common/cli/main.py
import argparse

from llama_common.cli import history, logging as logging_cli
from llama_common.logging import get_logger, set_level
from llama_common.logging.config import load_log_level


def build_parser():
    parser = argparse.ArgumentParser(
        prog="llama-common", description="Chat history toolkit"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    history_parser = subparsers.add_parser("history", help="Chat history files")
    history_subparsers = history_parser.add_subparsers(dest="subcommand", required=True)
    history.register_subcommands(history_subparsers)

    logging_parser = subparsers.add_parser("logging", help="Logging utilities")
    logging_subparsers = logging_parser.add_subparsers(dest="subcommand", required=True)
    logging_cli.register_subcommands(logging_subparsers)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    level = load_log_level()
    if level is not None:
        get_logger(level=level)
        set_level(level)

    if args.command == "history":
        history.dispatch(args)
    elif args.command == "logging":
        logging_cli.dispatch(args)
