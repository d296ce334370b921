"""Runtime helpers for the receipt OCR pipeline."""

import json
import time
from pathlib import Path
from typing import Any

import httpx
from PIL import Image

from nubemdom.domain.receipt import RawOcrResult
from nubemdom.receipt.ocr_helpers import prepare_image_for_ocr, transform_ocr_response
from nubemdom.runtime.logging import get_logger
from nubemdom.runtime.paths import get_paths

logger = get_logger(__name__)


class OcrFailed(RuntimeError):
    """Raised when the OCR service cannot be reached, errors, or returns garbage.

    Distinct from a successful OCR call that recognized no fields: that case
    still produces a (sparse) ParsedReceipt.
    """


def call_ocr_service(
    image_bytes: bytes,
    filename: str,
    ocr_url: str,
    timeout: float = 60.0,
) -> tuple[dict[str, Any], RawOcrResult]:
    """
    Send an image to the OCR service.

    Returns:
        Tuple of (raw_result, transformed_result).

    Raises:
        OcrFailed: on connection errors, non-200 responses or non-JSON bodies.
    """
    ocr_url = ocr_url.rstrip("/")
    logger.info("Sending %s to OCR service at %s...", filename, ocr_url)

    try:
        prepared = prepare_image_for_ocr(image_bytes)
    except (OSError, Image.DecompressionBombError) as e:
        # DecompressionBombError is not an OSError
        raise OcrFailed(f"Unreadable image {filename}: {e}") from e

    try:
        start_time = time.time()
        response = httpx.post(
            f"{ocr_url}/ocr",
            files={"file": (filename, prepared, "image/jpeg")},
            timeout=timeout,
        )
        logger.info("OCR service returned in %.2f seconds", time.time() - start_time)
    except httpx.RequestError as e:
        logger.error("Failed to connect to OCR service: %s", e)
        raise OcrFailed(f"Failed to connect to OCR service: {e}") from e

    if response.status_code != 200:
        logger.error("OCR service error: %s", response.status_code)
        raise OcrFailed(f"OCR service error: {response.status_code}")

    try:
        raw_result = response.json()
    except ValueError as e:
        raise OcrFailed("OCR service returned a non-JSON body") from e
    if not isinstance(raw_result, dict):
        raise OcrFailed("OCR service returned an unexpected payload")

    return raw_result, transform_ocr_response(raw_result)


def save_ocr_json(ocr_result: dict[str, Any], image_path: Path) -> Path:
    """Save the raw OCR response next to the other OCR dumps, for debugging."""
    ocr_json_dir = get_paths().receipts_ocr_json
    ocr_json_dir.mkdir(parents=True, exist_ok=True)
    ocr_json_path = ocr_json_dir / f"{image_path.stem}.json"
    ocr_json_path.write_text(json.dumps(ocr_result, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.debug("OCR JSON saved to: %s", ocr_json_path)
    return ocr_json_path
