"""Vendor/date/total extraction helpers."""

import re
from datetime import date
from decimal import Decimal

from ..date_utils import today_iso
from .common import AMOUNT_TOKEN, AMOUNT_TOKEN_PATTERN, ES_EUR, _positive_amount

VENDOR_SEARCH_LINES = 5
VENDOR_MIN_LENGTH = 3  # exclusive
VENDOR_MAX_LENGTH = 50  # exclusive

VENDOR_PATTERNS = (
    # All caps company names: "SUPERMERCADO TEST", "H & M"
    re.compile(r"^[A-ZÁÉÍÓÚÜÑ\s&]+$"),
    # Spanish/Latin company suffixes: S.L., S.A., LTDA
    # Standalone tokens only, so "Casa Pepe" or "Salón" do not count as companies.
    re.compile(r"(?<![A-Za-z])(?:S\.?L|S\.?A|LTDA)\.?(?![A-Za-z])", re.IGNORECASE),
)

# (pattern, field order) pairs, tried in order on every line
DATE_PATTERNS = (
    # DD/MM/YYYY or DD-MM-YYYY
    (re.compile(r"(?<!\d)(\d{1,2})[/-](\d{1,2})[/-](\d{4}|\d{2})(?!\d)"), "dmy"),
    # DD.MM.YYYY
    (re.compile(r"(?<!\d)(\d{1,2})\.(\d{1,2})\.(\d{4}|\d{2})(?!\d)"), "dmy"),
    # YYYY/MM/DD or YYYY-MM-DD
    (re.compile(r"(?<!\d)(\d{4})[/-](\d{1,2})[/-](\d{1,2})(?!\d)"), "ymd"),
)

TOTAL_PATTERNS = (
    re.compile(rf"TOTAL[:\s]*({AMOUNT_TOKEN})", re.IGNORECASE),
    re.compile(rf"SUMA[:\s]*({AMOUNT_TOKEN})", re.IGNORECASE),
    re.compile(rf"IMPORTE[:\s]*({AMOUNT_TOKEN})", re.IGNORECASE),
    re.compile(rf"({AMOUNT_TOKEN})\s*€"),
    re.compile(rf"€\s*({AMOUNT_TOKEN})"),
    re.compile(rf"({AMOUNT_TOKEN})\s*EUR", re.IGNORECASE),
)


def _is_vendor_length(line: str) -> bool:
    return VENDOR_MIN_LENGTH < len(line) < VENDOR_MAX_LENGTH


def _extract_vendor(lines: list[str]) -> str:
    """
    Extract the merchant name from the top of the receipt.

    Strategy order:
    1. First of the top lines that looks like a company name
    2. First line anywhere with a plausible name length
    3. Placeholder for unknown merchants
    """
    for line in lines[:VENDOR_SEARCH_LINES]:
        if not _is_vendor_length(line):
            continue
        for pattern in VENDOR_PATTERNS:
            if pattern.search(line):
                return line

    for line in lines:
        if _is_vendor_length(line):
            return line

    return ES_EUR.unknown_vendor


def _build_date(first: str, second: str, third: str, order: str) -> date | None:
    """Build a calendar date from captured groups; None when it does not exist."""
    if order == "ymd":
        year, month, day = first, second, third
    else:
        day, month, year = first, second, third
    if len(year) == 2:
        year = f"20{year}"
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def _extract_date(lines: list[str]) -> str:
    """Extract the receipt date as YYYY-MM-DD, falling back to today."""
    for line in lines:
        for pattern, order in DATE_PATTERNS:
            match = pattern.search(line)
            if not match:
                continue
            receipt_date = _build_date(*match.groups(), order=order)
            if receipt_date is not None:
                return receipt_date.isoformat()

    return today_iso()


def _extract_total(lines: list[str]) -> Decimal:
    """Extract the total amount, scanning from the bottom of the receipt."""
    for line in reversed(lines):
        for pattern in TOTAL_PATTERNS:
            match = pattern.search(line)
            if not match:
                continue
            amount = _positive_amount(match.group(1))
            if amount is not None:
                return amount

    # Fallback: rightmost positive number on the lowest line that has one
    for line in reversed(lines):
        for token in reversed(AMOUNT_TOKEN_PATTERN.findall(line)):
            amount = _positive_amount(token)
            if amount is not None:
                return amount

    return Decimal("0")
