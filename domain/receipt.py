"""Data models for receipt scanning."""

from dataclasses import dataclass
from decimal import Decimal

# Attached to every parsed receipt; not derived from match quality.
FIXED_CONFIDENCE = Decimal("0.85")


@dataclass(frozen=True)
class RawOcrResult:
    """Text returned by the OCR collaborator for one image."""

    full_text: str = ""
    blocks: tuple[str, ...] = ()


@dataclass(frozen=True)
class LineItem:
    """A single line item on a receipt."""

    name: str
    price: Decimal
    quantity: int = 1


@dataclass(frozen=True)
class ParsedReceipt:
    """Structured fields recovered from OCR text."""

    vendor: str
    date: str  # YYYY-MM-DD
    total: Decimal
    items: tuple[LineItem, ...] = ()
    category: str = "Otros"
    confidence: Decimal = FIXED_CONFIDENCE
    raw_text: str = ""


@dataclass(frozen=True)
class ReceiptRecord:
    """A parsed receipt merged with upload metadata and its owner."""

    receipt_id: str
    user_id: str
    receipt: ParsedReceipt
    filename: str = ""
    image_path: str = ""
    uploaded_at: str = ""  # ISO-8601 timestamp
    size_bytes: int = 0
    mime_type: str = ""
    status: str = "processed"
    verified: bool = False
