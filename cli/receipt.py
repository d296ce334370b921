"""Receipt command handlers used by the unified CLI."""

import argparse
import json
import sys
from pathlib import Path

from nubemdom.receipt.formatter import format_parsed_receipt, receipt_to_dict, record_to_dict
from nubemdom.runtime import get_logger

logger = get_logger(__name__)


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def cmd_parse(args: argparse.Namespace) -> None:
    """Parse receipt text from a file (or stdin) and print the result."""
    from nubemdom.application.receipts.parse import run_parse_text

    try:
        full_text = _read_text(args.source)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", args.source, e)
        print(f"Error: cannot read {args.source}: {e}")
        sys.exit(1)

    try:
        receipt = run_parse_text(full_text)
    except ValueError as e:
        logger.error("%s", e)
        print(f"Error: {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps(receipt_to_dict(receipt), indent=2, ensure_ascii=False))
    else:
        print(format_parsed_receipt(receipt))


def cmd_scan(args: argparse.Namespace) -> None:
    """Scan a receipt image through the OCR service and store the record."""
    from nubemdom.application.receipts.scan import ReceiptScanRequest, run_receipt_scan

    result = run_receipt_scan(
        ReceiptScanRequest(
            image_path=Path(args.image),
            user_id=args.user,
            ocr_url=args.ocr_url,
        )
    )

    if result.status == "file_not_found":
        logger.error("%s", result.error)
        print(f"Error: {result.error}")
        sys.exit(1)

    if result.status == "upload_rejected":
        print(f"Upload rejected: {result.error}")
        sys.exit(1)

    if result.status == "invalid_rules":
        print(f"Error: {result.error}")
        sys.exit(1)

    if result.status == "ocr_failed":
        logger.error("%s", result.error)
        print(f"OCR failed: {result.error}")
        print("Make sure the OCR service is running before scanning receipts.")
        sys.exit(1)

    record = result.record
    if record is None or result.record_path is None:
        print("Scan failed: missing receipt output.")
        sys.exit(1)

    if args.json:
        print(json.dumps(record_to_dict(record), indent=2, ensure_ascii=False))
    else:
        print(format_parsed_receipt(record.receipt))
        print(f"\nSaved record to: {result.record_path}")


def cmd_list(args: argparse.Namespace) -> None:
    """List stored receipt records."""
    from nubemdom.application.receipts.listing import run_list_receipts

    listing = run_list_receipts(user_id=args.user, category=args.category)
    if not listing.receipts:
        print("No receipts found.")
        return

    print(f"Receipts ({len(listing.receipts)}):")
    for path, record in listing.receipts:
        receipt = record.receipt
        print(f"  {receipt.date}  {receipt.vendor[:30]:<30}  {receipt.total:>9.2f} €  [{receipt.category}]  {path.name}")
