"""todostore - SQLite vs. ZODB to-do list entry point."""

import argparse
import asyncio
import sys
from pathlib import Path

from todostore import commands
from todostore.app import Application
from todostore.config import CompareConfig, Settings, load_settings
from todostore.errors import StoreError
from todostore.log import setup_logging
from todostore.persistence.registry import get_available_stores
from todostore.screens.console import Console


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="todostore - compare SQLite and ZODB storage for a to-do list"
    )

    parser.add_argument(
        "--backend",
        choices=["sqlite", "zodb"],
        default=None,
        help="Storage backend (default: from config)",
    )

    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Directory holding the database files (default: from config)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: from config)",
    )

    parser.add_argument(
        "--list-backends",
        action="store_true",
        help="List available storage backends and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("ui", help="Interactive screens (default)")
    subparsers.add_parser("list", help="List todos, newest first")

    add = subparsers.add_parser("add", help="Add a todo")
    add.add_argument("title")

    edit = subparsers.add_parser("edit", help="Change the title of a todo")
    edit.add_argument("id", type=int)
    edit.add_argument("title")

    for name, help_text in (("done", "Mark a todo done"), ("undo", "Mark a todo not done")):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("id", type=int)

    delete = subparsers.add_parser("delete", help="Delete a todo")
    delete.add_argument("id", type=int)

    subparsers.add_parser("clear", help="Delete every todo")

    compare = subparsers.add_parser("compare", help="Time both backends on scratch files")
    compare.add_argument(
        "--count",
        type=int,
        default=None,
        help="Todos per backend (default: from config)",
    )
    compare.add_argument(
        "--workdir",
        type=str,
        default=None,
        help="Keep the scratch databases in this directory",
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def apply_args_to_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Apply command line arguments to settings."""
    if args.backend:
        settings.backend = args.backend

    if args.data_dir:
        settings.storage.data_dir = Path(args.data_dir)

    if args.log_level:
        settings.logging.level = args.log_level

    if getattr(args, "count", None) is not None:
        settings.compare = CompareConfig(count=args.count)

    return settings


async def run_command(args: argparse.Namespace, settings: Settings, console: Console) -> int:
    """Run a one-shot command against the configured backend."""
    if args.command == "compare":
        workdir = Path(args.workdir) if args.workdir else None
        return await commands.compare(console, settings.compare.count, workdir)

    async with commands.configured_store(settings) as store:
        if args.command == "list":
            return await commands.list_todos(store, console)
        if args.command == "add":
            return await commands.add_todo(store, console, args.title)
        if args.command == "edit":
            return await commands.edit_todo(store, console, args.id, args.title)
        if args.command in ("done", "undo"):
            return await commands.set_done(store, console, args.id, args.command == "done")
        if args.command == "delete":
            return await commands.delete_todo(store, console, args.id)
        if args.command == "clear":
            return await commands.clear_todos(store, console)

    raise ValueError(f"Unknown command '{args.command}'")


async def async_main(args: argparse.Namespace, settings: Settings, console: Console) -> int:
    """Async main entry point."""
    if args.command in (None, "ui"):
        app = Application(settings, console)
        try:
            await app.run()
            return 0
        except KeyboardInterrupt:
            return 0

    setup_logging(
        settings.logging.log_dir,
        settings.logging.level,
        settings.logging.json_format,
        settings.logging.console_level,
    )
    try:
        return await run_command(args, settings, console)
    except StoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.list_backends:
        print("Available backends:")
        for name in get_available_stores():
            print(f"  - {name}")
        return 0

    try:
        settings = apply_args_to_settings(args, load_settings())
        return asyncio.run(async_main(args, settings, Console()))
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
