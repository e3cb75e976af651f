"""docstore-lite CLI entry point.

Usage: docstore-lite --root DIR [-v] <command> ...

    docstore-lite --root ./data write users john '{"Name": "John"}'
    docstore-lite --root ./data read users john
    docstore-lite --root ./data read-all users
    docstore-lite --root ./data delete users john
    docstore-lite --root ./data delete users        # whole collection
    docstore-lite --root ./data sweep
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from docstore_lite.errors import EncodingFailure, StoreError
from docstore_lite.log import TRACE, ConsoleLogger
from docstore_lite.options import Options
from docstore_lite.store import codec
from docstore_lite.store.file_store import FileStore, open_store


def _add_write_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("write", help="Write a JSON value as a resource.")
    p.add_argument("collection")
    p.add_argument("resource")
    p.add_argument(
        "value",
        help="JSON text, or '-' to read it from stdin.",
    )


def _add_read_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("read", help="Print one resource.")
    p.add_argument("collection")
    p.add_argument("resource")


def _add_read_all_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "read-all",
        help="Print every resource of a collection, one JSON document per line.",
    )
    p.add_argument("collection")


def _add_delete_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "delete",
        help="Delete a resource, or the whole collection if no resource is given.",
    )
    p.add_argument("collection")
    p.add_argument("resource", nargs="?", default="")


def _add_sweep_parser(subparsers: argparse._SubParsersAction) -> None:
    subparsers.add_parser("sweep", help="Remove temp files left by failed writes.")


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return TRACE
    if verbosity == 1:
        return logging.DEBUG
    return logging.INFO


def _run_write(store: FileStore, args: argparse.Namespace) -> None:
    text = sys.stdin.read() if args.value == "-" else args.value
    try:
        value = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise EncodingFailure(f"value is not valid JSON: {exc}") from exc
    store.write(args.collection, args.resource, value)


def _run_read(store: FileStore, args: argparse.Namespace) -> None:
    value = store.read(args.collection, args.resource)
    print(json.dumps(value, indent=2))


def _run_read_all(store: FileStore, args: argparse.Namespace) -> None:
    for raw in store.read_all(args.collection):
        # Compact each record onto one line so the output is line-oriented.
        value = codec.decode(raw, source=args.collection)
        print(json.dumps(value, separators=(",", ":")))


def _run_delete(store: FileStore, args: argparse.Namespace) -> None:
    store.delete(args.collection, args.resource)


def _run_sweep(store: FileStore, args: argparse.Namespace) -> None:
    for path in store.sweep_temp_files():
        print(path)


_COMMANDS = {
    "write": _run_write,
    "read": _run_read,
    "read-all": _run_read_all,
    "delete": _run_delete,
    "sweep": _run_sweep,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docstore-lite",
        description="JSON document store on the plain filesystem.",
    )
    parser.add_argument(
        "--root", default="./data",
        help="Database directory (default: ./data)",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="More logging: -v for debug, -vv for trace.",
    )
    parser.add_argument(
        "--sweep", action="store_true",
        help="Remove stray temp files when opening the store.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_write_parser(subparsers)
    _add_read_parser(subparsers)
    _add_read_all_parser(subparsers)
    _add_delete_parser(subparsers)
    _add_sweep_parser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    options = Options(
        logger=ConsoleLogger(_log_level(args.verbose)),
        sweep_temp_files=args.sweep,
    )
    try:
        store = open_store(args.root, options)
        _COMMANDS[args.command](store, args)
    except StoreError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
