"""Pure OCR helpers: image preparation and OCR response normalization."""

import io
from typing import Any

from nubemdom.domain.receipt import RawOcrResult

MAX_IMAGE_DIMENSION = 3000  # Longest side sent to OCR
OCR_IMAGE_PADDING = 50  # White border so text at the edges is not cut off
OCR_JPEG_QUALITY = 95


def prepare_image_for_ocr(
    image_bytes: bytes,
    max_dimension: int = MAX_IMAGE_DIMENSION,
    padding: int = OCR_IMAGE_PADDING,
) -> bytes:
    """
    Normalize a receipt photo before it is sent to OCR.

    Applies EXIF orientation, shrinks the image so neither side exceeds
    ``max_dimension`` (keeping the aspect ratio), adds a white border and
    re-encodes as JPEG.

    Raises:
        PIL.UnidentifiedImageError: if the bytes are not a readable image
        PIL.Image.DecompressionBombError: if the pixel count is above Pillow's limit
    """
    from PIL import Image, ImageOps

    img = ImageOps.exif_transpose(Image.open(io.BytesIO(image_bytes)))

    width, height = img.size
    longest = max(width, height)
    if longest > max_dimension:
        scale = max_dimension / longest
        img = img.resize((max(1, int(width * scale)), max(1, int(height * scale))), Image.Resampling.LANCZOS)

    if padding > 0:
        img = ImageOps.expand(img, border=padding, fill="white")

    buffer = io.BytesIO()
    img.convert("RGB").save(buffer, format="JPEG", quality=OCR_JPEG_QUALITY)
    return buffer.getvalue()


def _vision_annotations(raw_result: dict[str, Any]) -> list[dict[str, Any]] | None:
    """Locate Cloud Vision ``textAnnotations``, top level or under ``responses``."""
    if "textAnnotations" in raw_result:
        return raw_result.get("textAnnotations") or []
    responses = raw_result.get("responses")
    if isinstance(responses, list) and responses and isinstance(responses[0], dict):
        if "textAnnotations" in responses[0]:
            return responses[0].get("textAnnotations") or []
    return None


def transform_ocr_response(raw_result: dict[str, Any]) -> RawOcrResult:
    """
    Transform an OCR service response into a RawOcrResult.

    Supported shapes:
    - Cloud Vision text detection: the first annotation holds the full text,
      the remaining ones are individual text blocks
    - Already normalized: ``{"full_text": ..., "blocks": [...]}``

    Anything else is treated as an image with no recognized text.
    """
    annotations = _vision_annotations(raw_result)
    if annotations is not None:
        if not annotations:
            return RawOcrResult()
        full_text = str(annotations[0].get("description", ""))
        blocks = tuple(str(a.get("description", "")) for a in annotations[1:])
        return RawOcrResult(full_text=full_text, blocks=blocks)

    full_text = raw_result.get("full_text", raw_result.get("fullText", ""))
    blocks = raw_result.get("blocks", [])
    return RawOcrResult(
        full_text=str(full_text or ""),
        blocks=tuple(str(b.get("text", "")) if isinstance(b, dict) else str(b) for b in blocks or []),
    )
