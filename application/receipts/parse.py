"""Offline parsing of receipt text that is already available."""

from __future__ import annotations

from nubemdom.domain.receipt import ParsedReceipt
from nubemdom.receipt.ocr_result_parser import parse_receipt_text
from nubemdom.runtime import load_category_rules


def run_parse_text(full_text: str) -> ParsedReceipt:
    """Parse receipt text with the configured category rules."""
    return parse_receipt_text(full_text, category_rules=load_category_rules())
