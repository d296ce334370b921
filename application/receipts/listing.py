"""Receipt listing workflow orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from nubemdom.domain.receipt import ReceiptRecord
from nubemdom.runtime.receipt_storage import list_receipt_records


@dataclass(frozen=True)
class ReceiptListing:
    """Stored receipt records for CLI display."""

    receipts: list[tuple[Path, ReceiptRecord]]


def run_list_receipts(user_id: str | None = None, category: str | None = None) -> ReceiptListing:
    """Load stored receipts, optionally for one user and/or category."""
    return ReceiptListing(receipts=list_receipt_records(user_id=user_id, category=category))
