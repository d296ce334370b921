"""Shared constants and helpers for OCR receipt parsing."""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True)
class LocaleProfile:
    """Numeric and textual conventions for the receipts we read.

    Only Spanish/European receipts are handled: comma or period decimal
    separator, euro amounts, day-month-year dates.
    """

    name: str
    amount_token: str
    unknown_vendor: str


ES_EUR = LocaleProfile(
    name="es_EUR",
    # "4.30", "4,30", "12" and "12." are all amount tokens.
    amount_token=r"[0-9]+[,.]?[0-9]*",
    unknown_vendor="Comercio desconocido",
)

AMOUNT_TOKEN = ES_EUR.amount_token
AMOUNT_TOKEN_PATTERN = re.compile(AMOUNT_TOKEN)

# Administrative lines that never hold purchased items
HEADER_FOOTER_PATTERNS = (
    re.compile(r"total", re.IGNORECASE),
    re.compile(r"suma", re.IGNORECASE),
    re.compile(r"iva", re.IGNORECASE),
    re.compile(r"fecha", re.IGNORECASE),
    re.compile(r"date", re.IGNORECASE),
    re.compile(r"gracias", re.IGNORECASE),
    re.compile(r"thank", re.IGNORECASE),
    re.compile(r"tel[eé]fono", re.IGNORECASE),
    re.compile(r"phone", re.IGNORECASE),
    re.compile(r"direcci[oó]n", re.IGNORECASE),
    re.compile(r"address", re.IGNORECASE),
    re.compile(r"www\.", re.IGNORECASE),
    re.compile(r"@"),
    re.compile(r"n[úu]mero", re.IGNORECASE),
    re.compile(r"ticket", re.IGNORECASE),
    re.compile(r"factura", re.IGNORECASE),
    re.compile(r"invoice", re.IGNORECASE),
)


def _split_lines(full_text: str) -> list[str]:
    """Split raw OCR text into trimmed, non-empty lines in reading order."""
    if not full_text:
        return []
    return [line.strip() for line in full_text.splitlines() if line.strip()]


def _parse_amount(token: str) -> Decimal | None:
    """Parse an amount token, reading a comma as the decimal separator."""
    try:
        return Decimal(token.replace(",", ".", 1))
    except InvalidOperation:
        return None


def _positive_amount(token: str) -> Decimal | None:
    """Return the parsed amount if it is a finite number above zero."""
    amount = _parse_amount(token)
    if amount is None or not amount.is_finite() or amount <= 0:
        return None
    return amount


def _is_header_or_footer(line: str) -> bool:
    """Return True if the line looks like receipt metadata rather than an item."""
    return any(pattern.search(line) for pattern in HEADER_FOOTER_PATTERNS)
