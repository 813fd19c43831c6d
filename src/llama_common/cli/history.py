"""Command-line helpers for inspecting and editing chat history files.

Each file holds one JSON encoded :class:`~llama_common.chat.ChatHistory`.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from llama_common.chat import AuthorRole, ChatHistory, ChatHistoryError
from llama_common.logging import get_logger

logger = get_logger(__file__)


def register_subcommands(subparsers):
    """Register history subcommands on the provided ``argparse`` object."""

    new_parser = subparsers.add_parser("new", help="Write an empty chat history")
    new_parser.add_argument("file", type=Path, help="Target JSON file")
    new_parser.add_argument(
        "--force", action="store_true", help="Overwrite the file if it exists"
    )

    add_parser = subparsers.add_parser("add", help="Append a message to a chat history")
    add_parser.add_argument("file", type=Path, help="Chat history JSON file")
    add_parser.add_argument(
        "--role",
        required=True,
        choices=list(AuthorRole.__members__),
        help="Author role of the new message",
    )
    add_parser.add_argument("--content", required=True, help="Message text")

    show_parser = subparsers.add_parser("show", help="Print the messages of a chat history")
    show_parser.add_argument("file", type=Path, help="Chat history JSON file")

    validate_parser = subparsers.add_parser(
        "validate", help="Check that a file decodes as a chat history"
    )
    validate_parser.add_argument("file", type=Path, help="Chat history JSON file")


def load_history(path: Path, *, missing_ok: bool = False) -> ChatHistory:
    if missing_ok and not path.exists():
        return ChatHistory()
    # bytes let the decoder report bad UTF-8 as malformed JSON
    return ChatHistory.from_json(path.read_bytes())


def save_history(history: ChatHistory, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    # lone surrogates become \uXXXX escapes, which decode back unchanged
    path.write_bytes((history.to_json() + "\n").encode("utf-8", "backslashreplace"))
    return path


def _render_history(history: ChatHistory, console: Console | None = None) -> None:
    """Pretty-print the messages using ``rich``."""

    if console is None:
        console = Console()

    table = Table(title="Chat History", show_lines=True)
    table.add_column("#", justify="right", style="bright_black")
    table.add_column("Role", style="bold cyan")
    table.add_column("Content")

    if not history.messages:
        table.add_row("", "[dim]-[/dim]", "[dim]No messages[/dim]")
    for index, message in enumerate(history.messages):
        # Text keeps square brackets in content from being read as markup
        table.add_row(
            str(index),
            message.author_role.name,
            Text(message.content),
        )
    console.print(table)


def dispatch(args):
    """Execute the history command associated with ``args.subcommand``.

    Decode and file errors are logged and turned into exit status 1.
    """

    try:
        _dispatch(args)
    except (ChatHistoryError, OSError) as exc:
        logger.error("%s %s failed: %s", args.subcommand, args.file, exc)
        raise SystemExit(1) from exc


def _dispatch(args):
    if args.subcommand == "new":
        if args.file.exists() and not args.force:
            logger.error("%s already exists, use --force to overwrite", args.file)
            raise SystemExit(1)
        save_history(ChatHistory(), args.file)
        logger.info("wrote empty chat history to %s", args.file)
    elif args.subcommand == "add":
        history = load_history(args.file, missing_ok=True)
        history.add_message(AuthorRole.from_name(args.role), args.content)
        save_history(history, args.file)
        logger.info("appended %s message to %s (%d total)", args.role, args.file, len(history))
    elif args.subcommand == "show":
        _render_history(load_history(args.file))
    elif args.subcommand == "validate":
        history = load_history(args.file)
        print(f"ok: {len(history)} messages")
    else:
        logger.error("No handler for subcommand: %s", args.subcommand)
