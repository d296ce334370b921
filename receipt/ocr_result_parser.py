"""Parse raw OCR text into structured ParsedReceipt data."""

from collections.abc import Sequence

from nubemdom.domain.receipt import FIXED_CONFIDENCE, ParsedReceipt, RawOcrResult
from nubemdom.runtime.logging import get_logger

from .categories import CATEGORY_RULES, CategoryRule, classify_receipt
from .ocr_parser import _extract_date, _extract_items, _extract_total, _extract_vendor, _split_lines

logger = get_logger(__name__)


def parse_receipt(
    ocr_result: RawOcrResult,
    category_rules: Sequence[CategoryRule] = CATEGORY_RULES,
) -> ParsedReceipt:
    """
    Parse an OCR result into a ParsedReceipt.

    This is a best-effort parser with no failure path: fields that cannot be
    recognized fall back to defaults (placeholder vendor, today's date, zero
    total, no items, "Otros").

    Args:
        ocr_result: Text returned by the OCR collaborator
        category_rules: Ordered category table, defaults to the built-in one

    Returns:
        ParsedReceipt with parsed data
    """
    full_text = ocr_result.full_text
    lines = _split_lines(full_text)

    receipt = ParsedReceipt(
        vendor=_extract_vendor(lines),
        date=_extract_date(lines),
        total=_extract_total(lines),
        items=tuple(_extract_items(lines)),
        category=classify_receipt(lines, category_rules),
        confidence=FIXED_CONFIDENCE,
        raw_text=full_text,
    )
    logger.debug(
        "Parsed %d lines: vendor=%r date=%s total=%s items=%d category=%s",
        len(lines),
        receipt.vendor,
        receipt.date,
        receipt.total,
        len(receipt.items),
        receipt.category,
    )
    return receipt


def parse_receipt_text(
    full_text: str,
    category_rules: Sequence[CategoryRule] = CATEGORY_RULES,
) -> ParsedReceipt:
    """Parse plain receipt text that did not come from the OCR service."""
    return parse_receipt(RawOcrResult(full_text=full_text), category_rules=category_rules)
