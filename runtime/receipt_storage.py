"""Storage and retrieval of processed receipts.

Each processed receipt is one JSON record holding the parsed fields plus the
upload metadata and owning user.

Directory structure:
    receipts/
    ├── images/     - Uploaded receipt photos
    ├── processed/  - Parsed receipt records (JSON)
    └── ocr_json/   - Raw OCR results
"""

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path

from nubemdom.domain.receipt import ParsedReceipt, ReceiptRecord
from nubemdom.receipt.formatter import record_from_dict, record_to_dict
from nubemdom.runtime.logging import get_logger
from nubemdom.runtime.paths import get_paths

logger = get_logger(__name__)

MAX_VENDOR_SLUG_LENGTH = 30


def ensure_directories() -> None:
    """Create required directories if they don't exist."""
    get_paths().ensure_receipt_directories()


def build_receipt_record(
    receipt: ParsedReceipt,
    user_id: str,
    filename: str = "",
    image_path: str = "",
    size_bytes: int = 0,
    mime_type: str = "",
    uploaded_at: datetime | None = None,
) -> ReceiptRecord:
    """Merge a parsed receipt with upload metadata into a new record."""
    if uploaded_at is None:
        uploaded_at = datetime.now(timezone.utc)
    return ReceiptRecord(
        receipt_id=uuid.uuid4().hex,
        user_id=user_id,
        receipt=receipt,
        filename=filename,
        image_path=image_path,
        uploaded_at=uploaded_at.isoformat(),
        size_bytes=size_bytes,
        mime_type=mime_type,
    )


def generate_receipt_filename(receipt: ParsedReceipt) -> str:
    """
    Generate the file name for a receipt record.

    Format: YYYY-MM-DD_vendor_amount.json
    """
    vendor_clean = receipt.vendor.lower()
    vendor_clean = "".join(c if c.isalnum() else "_" for c in vendor_clean)
    vendor_clean = "_".join(filter(None, vendor_clean.split("_")))[:MAX_VENDOR_SLUG_LENGTH]
    if not vendor_clean:
        vendor_clean = "unknown"

    amount_str = f"{receipt.total:.2f}".replace(".", "_")
    return f"{receipt.date}_{vendor_clean}_{amount_str}.json"


def _unique_path(directory: Path, filename: str) -> Path:
    """Append a counter to ``filename`` until it does not collide."""
    filepath = directory / filename
    base_name, suffix = filepath.stem, filepath.suffix
    counter = 1
    while filepath.exists():
        filepath = directory / f"{base_name}_{counter}{suffix}"
        counter += 1
    return filepath


def save_receipt_image(image_bytes: bytes, filename: str) -> Path:
    """Keep a copy of the uploaded image under receipts/images/."""
    ensure_directories()
    filepath = _unique_path(get_paths().receipts_images, Path(filename).name or "receipt.jpg")
    filepath.write_bytes(image_bytes)
    logger.debug("Saved receipt image to %s", filepath)
    return filepath


def save_receipt_record(record: ReceiptRecord) -> Path:
    """
    Save a receipt record to the processed/ directory.

    Returns:
        Path to the saved file
    """
    ensure_directories()

    filepath = _unique_path(get_paths().receipts_processed, generate_receipt_filename(record.receipt))
    filepath.write_text(json.dumps(record_to_dict(record), indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Saved receipt %s to %s", record.receipt_id, filepath)

    return filepath


def load_receipt_record(filepath: Path) -> ReceiptRecord:
    """
    Load a receipt record from disk.

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if the file is not a valid record
    """
    data = json.loads(filepath.read_text(encoding="utf-8"))
    try:
        return record_from_dict(data)
    except (KeyError, TypeError, ArithmeticError) as e:
        raise ValueError(f"Invalid receipt record {filepath}: {e}") from e


def list_receipt_records(
    user_id: str | None = None,
    category: str | None = None,
) -> list[tuple[Path, ReceiptRecord]]:
    """
    List stored receipt records, newest upload first.

    Files that cannot be read are skipped with a warning.
    """
    processed_dir = get_paths().receipts_processed
    if not processed_dir.exists():
        return []

    results: list[tuple[Path, ReceiptRecord]] = []
    for filepath in sorted(processed_dir.glob("*.json")):
        try:
            record = load_receipt_record(filepath)
        except ValueError as e:
            logger.warning("Failed to load %s: %s", filepath, e)
            continue

        if user_id is not None and record.user_id != user_id:
            continue
        if category is not None and record.receipt.category != category:
            continue
        results.append((filepath, record))

    results.sort(key=lambda entry: entry[1].uploaded_at, reverse=True)
    return results
