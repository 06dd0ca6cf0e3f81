"""Command line interface for oidlookup."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional

from .configuration import OidLookupConfig, get_settings
from .errors import ConfigurationError, OidLookupError
from .host import MemoryBufferHost, TextContext
from .invoker import TranslatorRunner
from .logs import configure_logging
from .lookup import OidLookup
from .structures import ResultBuffer

COMMANDS = ("oid", "label", "infer", "list")


def _add_cursor_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--line",
        default="",
        help="Line of text to take the OID or word from.",
    )
    parser.add_argument(
        "--column",
        type=int,
        default=1,
        help="1-based display column of the cursor in --line (default: 1).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oidlookup",
        description="Translate SNMP OIDs to MIB definitions and back with snmptranslate.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show translator invocations and diagnostics.",
    )
    parser.add_argument(
        "--gui",
        nargs="?",
        const="",
        metavar="FILE",
        help="Open the editor window, optionally loading FILE.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    oid_parser = subparsers.add_parser(
        "oid",
        help="Translate a numeric OID (taken from --line when omitted).",
    )
    oid_parser.add_argument("value", nargs="?", help="Numeric OID, e.g. .1.3.6.1.2.1.1.5")
    _add_cursor_arguments(oid_parser)

    label_parser = subparsers.add_parser(
        "label",
        help="Translate a MIB label (taken from --line when omitted).",
    )
    label_parser.add_argument("value", nargs="?", help="MIB label, e.g. sysName")
    _add_cursor_arguments(label_parser)

    infer_parser = subparsers.add_parser(
        "infer",
        help="Translate whatever sits under the cursor in --line.",
    )
    _add_cursor_arguments(infer_parser)

    subparsers.add_parser("list", help="List every OID known to the translator.")
    return parser


def execute_command(
    *,
    command: str,
    value: str | None,
    line: str,
    column: int,
    settings: OidLookupConfig,
    host: MemoryBufferHost | None = None,
    runner: TranslatorRunner | None = None,
) -> tuple[int, ResultBuffer | None, str | None]:
    """Run one lookup command and return the exit code, buffer, and message."""

    lookup = OidLookup(
        settings=settings,
        context=TextContext(line, column),
        host=host or MemoryBufferHost(),
        runner=runner,
    )

    try:
        if command == "oid":
            buffer = lookup.translate_by_oid(value)
        elif command == "label":
            buffer = lookup.translate_by_label(value)
        elif command == "infer":
            buffer = lookup.translate_infer()
        elif command == "list":
            buffer = lookup.list_all_oids()
        else:
            return 1, None, f"Unknown command: {command}"
    except OidLookupError as exc:
        return 1, None, str(exc)

    return 0, buffer, None


def print_buffer(buffer: ResultBuffer) -> None:
    """Write the buffer content to standard output."""

    for text in buffer.lines:
        print(text)


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logging(verbose=args.verbose)

    try:
        settings = get_settings()
    except ConfigurationError as exc:
        print(exc)
        return 1

    if args.gui is not None:
        from .gui import launch_gui

        return launch_gui(settings=settings, path=args.gui or None)

    if args.command is None:
        parser.error("a command is required: " + ", ".join(COMMANDS))

    exit_code, buffer, message = execute_command(
        command=args.command,
        value=getattr(args, "value", None),
        line=getattr(args, "line", ""),
        column=getattr(args, "column", 1),
        settings=settings,
    )

    if message:
        print(message)
    if buffer is not None:
        print_buffer(buffer)
    return exit_code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
