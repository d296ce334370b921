"""Receipt scan workflow orchestration."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from nubemdom.receipt.ocr_result_parser import parse_receipt
from nubemdom.runtime import get_logger, get_settings, load_category_rules
from nubemdom.runtime.receipt_pipeline import OcrFailed, call_ocr_service, save_ocr_json
from nubemdom.runtime.receipt_storage import build_receipt_record, save_receipt_image, save_receipt_record

if TYPE_CHECKING:
    from nubemdom.domain.receipt import ReceiptRecord
    from nubemdom.runtime.settings import Settings

logger = get_logger(__name__)

ScanStatus = Literal[
    "file_not_found",
    "upload_rejected",
    "invalid_rules",
    "ocr_failed",
    "saved",
]


class UploadRejected(ValueError):
    """Raised when an uploaded image fails the size or type checks."""


@dataclass(frozen=True)
class ReceiptScanRequest:
    """Inputs for running receipt scan workflow."""

    image_path: Path
    user_id: str
    ocr_url: str | None = None


@dataclass(frozen=True)
class ReceiptScanResult:
    """Outcome from receipt scan workflow."""

    status: ScanStatus
    record: ReceiptRecord | None = None
    record_path: Path | None = None
    error: str | None = None


def guess_mime_type(filename: str) -> str:
    """Guess an image MIME type from the file name, empty when unknown."""
    mime_type, _ = mimetypes.guess_type(filename)
    return mime_type or ""


def validate_upload(image_bytes: bytes, filename: str, settings: Settings) -> str:
    """
    Check an uploaded image against the configured limits.

    Returns:
        The MIME type guessed from the file name.

    Raises:
        UploadRejected: empty file, file too large, or MIME type not allowed.
    """
    if not image_bytes:
        raise UploadRejected(f"Empty file: {filename}")
    if len(image_bytes) > settings.max_file_size:
        raise UploadRejected(f"File too large: {len(image_bytes)} bytes (limit {settings.max_file_size})")

    mime_type = guess_mime_type(filename)
    if mime_type not in settings.allowed_file_types:
        raise UploadRejected(f"Unsupported file type: {mime_type or 'unknown'}")
    return mime_type


def run_receipt_scan(request: ReceiptScanRequest) -> ReceiptScanResult:
    """Run scan flow: validate -> load rules -> OCR -> parse -> merge metadata -> save."""
    if not request.image_path.exists():
        return ReceiptScanResult(
            status="file_not_found",
            error=f"Receipt file not found: {request.image_path}",
        )

    settings = get_settings()
    image_bytes = request.image_path.read_bytes()
    filename = request.image_path.name

    try:
        mime_type = validate_upload(image_bytes, filename, settings)
    except UploadRejected as exc:
        logger.warning("Rejected %s: %s", filename, exc)
        return ReceiptScanResult(status="upload_rejected", error=str(exc))

    try:
        category_rules = load_category_rules()
    except ValueError as exc:
        logger.error("%s", exc)
        return ReceiptScanResult(status="invalid_rules", error=str(exc))

    try:
        raw_ocr_result, ocr_result = call_ocr_service(
            image_bytes,
            filename,
            request.ocr_url or settings.ocr_service_url,
            timeout=settings.ocr_timeout_seconds,
        )
    except OcrFailed as exc:
        return ReceiptScanResult(status="ocr_failed", error=str(exc))

    save_ocr_json(raw_ocr_result, request.image_path)

    receipt = parse_receipt(ocr_result, category_rules=category_rules)
    image_copy = save_receipt_image(image_bytes, filename)
    record = build_receipt_record(
        receipt,
        user_id=request.user_id,
        filename=filename,
        image_path=str(image_copy),
        size_bytes=len(image_bytes),
        mime_type=mime_type,
    )
    record_path = save_receipt_record(record)

    return ReceiptScanResult(status="saved", record=record, record_path=record_path)
