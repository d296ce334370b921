#!/usr/bin/env python3

import argparse
from collections.abc import Callable, Sequence

from nubemdom.runtime.settings import DEFAULT_OCR_SERVICE_URL


def _coerce_exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1


def _run_command(command: Callable[[argparse.Namespace], None], args: argparse.Namespace) -> int:
    """
    Run a command handler that may call sys.exit().

    This keeps process termination centralized in this module's entrypoint.
    """
    try:
        command(args)
    except SystemExit as exc:
        return _coerce_exit_code(exc.code)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nubemdom",
        description="Household receipt digitization CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  parse <file|->             Parse receipt text (no OCR)
  scan <image>               OCR, parse and store a receipt image
  list                       List stored receipts

Notes:
  receipts/processed/ = parsed receipt records (JSON)
  receipts/ocr_json/  = raw OCR responses
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser("parse", help="Parse receipt text")
    parse_parser.add_argument("source", help="Text file with OCR output, or - for stdin")
    parse_parser.add_argument("--json", action="store_true", help="Print JSON instead of a summary")

    scan_parser = subparsers.add_parser("scan", help="Scan a receipt image")
    scan_parser.add_argument("image", help="Path to receipt image")
    scan_parser.add_argument(
        "--ocr-url",
        default=None,
        help=f"OCR service URL (default: $OCR_SERVICE_URL or {DEFAULT_OCR_SERVICE_URL})",
    )
    scan_parser.add_argument("--user", default="local", help="Owner of the stored receipt (default: local)")
    scan_parser.add_argument("--json", action="store_true", help="Print the stored record as JSON")

    list_parser = subparsers.add_parser("list", help="List stored receipts")
    list_parser.add_argument("--user", default=None, help="Only receipts owned by this user")
    list_parser.add_argument("--category", default=None, help="Only receipts in this category")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "parse":
        from nubemdom.cli.receipt import cmd_parse

        return _run_command(cmd_parse, args)
    elif args.command == "scan":
        from nubemdom.cli.receipt import cmd_scan

        return _run_command(cmd_scan, args)
    elif args.command == "list":
        from nubemdom.cli.receipt import cmd_list

        return _run_command(cmd_list, args)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
