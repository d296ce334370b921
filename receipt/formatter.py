"""Format parsed receipts for storage and display."""

from decimal import Decimal
from typing import Any

from nubemdom.domain.receipt import FIXED_CONFIDENCE, LineItem, ParsedReceipt, ReceiptRecord


def _format_amount(amount: Decimal) -> str:
    """Format an amount with two decimals, e.g. Decimal("4.3") -> "4.30"."""
    return f"{amount:.2f}"


def receipt_to_dict(receipt: ParsedReceipt) -> dict[str, Any]:
    """Serialize a ParsedReceipt. Amounts are strings so they stay exact."""
    return {
        "vendor": receipt.vendor,
        "date": receipt.date,
        "total": _format_amount(receipt.total),
        "items": [
            {"name": item.name, "price": _format_amount(item.price), "quantity": item.quantity}
            for item in receipt.items
        ],
        "category": receipt.category,
        "confidence": str(receipt.confidence),
        "rawText": receipt.raw_text,
    }


def receipt_from_dict(data: dict[str, Any]) -> ParsedReceipt:
    """Rebuild a ParsedReceipt from receipt_to_dict() output."""
    return ParsedReceipt(
        vendor=data["vendor"],
        date=data["date"],
        total=Decimal(str(data["total"])),
        items=tuple(
            LineItem(name=item["name"], price=Decimal(str(item["price"])), quantity=int(item.get("quantity", 1)))
            for item in data.get("items", [])
        ),
        category=data.get("category", "Otros"),
        confidence=Decimal(str(data.get("confidence", FIXED_CONFIDENCE))),
        raw_text=data.get("rawText", ""),
    )


def record_to_dict(record: ReceiptRecord) -> dict[str, Any]:
    """Serialize a ReceiptRecord: receipt fields flattened next to the metadata."""
    return {
        "id": record.receipt_id,
        "userId": record.user_id,
        **receipt_to_dict(record.receipt),
        "filename": record.filename,
        "imagePath": record.image_path,
        "uploadedAt": record.uploaded_at,
        "sizeBytes": record.size_bytes,
        "mimeType": record.mime_type,
        "status": record.status,
        "verified": record.verified,
    }


def record_from_dict(data: dict[str, Any]) -> ReceiptRecord:
    """Rebuild a ReceiptRecord from record_to_dict() output."""
    return ReceiptRecord(
        receipt_id=data["id"],
        user_id=data["userId"],
        receipt=receipt_from_dict(data),
        filename=data.get("filename", ""),
        image_path=data.get("imagePath", ""),
        uploaded_at=data.get("uploadedAt", ""),
        size_bytes=int(data.get("sizeBytes", 0)),
        mime_type=data.get("mimeType", ""),
        status=data.get("status", "processed"),
        verified=bool(data.get("verified", False)),
    )


def format_parsed_receipt(receipt: ParsedReceipt) -> str:
    """Render a human-readable summary of a parsed receipt."""
    lines = [
        "=" * 60,
        "PARSED RECEIPT",
        "=" * 60,
        f"Vendor: {receipt.vendor}",
        f"Date: {receipt.date}",
        f"Total: {_format_amount(receipt.total)} €",
        f"Category: {receipt.category}",
        f"Items ({len(receipt.items)}):",
    ]
    width = max((len(item.name) for item in receipt.items), default=0)
    for i, item in enumerate(receipt.items, 1):
        lines.append(f"  {i:>2}. {item.name.ljust(width)}  {_format_amount(item.price):>8} €")
    lines.append("=" * 60)
    return "\n".join(lines)
