"""Core domain models for nubemdom.

- RawOcrResult: text handed over by the OCR collaborator
- ParsedReceipt, LineItem: structured fields recovered from that text
- ReceiptRecord: a parsed receipt merged with upload metadata

Usage:
    from nubemdom.domain import ParsedReceipt, LineItem
"""

from nubemdom.domain.receipt import FIXED_CONFIDENCE, LineItem, ParsedReceipt, RawOcrResult, ReceiptRecord

__all__ = [
    "FIXED_CONFIDENCE",
    "LineItem",
    "ParsedReceipt",
    "RawOcrResult",
    "ReceiptRecord",
]
