"""Receipt workflows."""

from nubemdom.application.receipts.listing import ReceiptListing, run_list_receipts
from nubemdom.application.receipts.parse import run_parse_text
from nubemdom.application.receipts.scan import (
    ReceiptScanRequest,
    ReceiptScanResult,
    UploadRejected,
    run_receipt_scan,
    validate_upload,
)

__all__ = [
    "ReceiptListing",
    "run_list_receipts",
    "run_parse_text",
    "ReceiptScanRequest",
    "ReceiptScanResult",
    "UploadRejected",
    "run_receipt_scan",
    "validate_upload",
]
