"""Tests for OCR transformation helpers."""

import io

import pytest
from PIL import Image

from nubemdom.domain.receipt import RawOcrResult
from nubemdom.receipt.ocr_helpers import prepare_image_for_ocr, transform_ocr_response


def _png_bytes(size: tuple[int, int]) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, "white").save(buffer, format="PNG")
    return buffer.getvalue()


def test_transform_cloud_vision_annotations() -> None:
    raw_result = {
        "textAnnotations": [
            {"description": "MERCADONA S.A.\nTOTAL: 4.30€"},
            {"description": "MERCADONA"},
            {"description": "S.A."},
        ]
    }

    assert transform_ocr_response(raw_result) == RawOcrResult(
        full_text="MERCADONA S.A.\nTOTAL: 4.30€",
        blocks=("MERCADONA", "S.A."),
    )


def test_transform_batch_annotate_response() -> None:
    raw_result = {"responses": [{"textAnnotations": [{"description": "BAR PACO\nCaña 2,00"}]}]}

    transformed = transform_ocr_response(raw_result)

    assert transformed.full_text == "BAR PACO\nCaña 2,00"
    assert transformed.blocks == ()


@pytest.mark.parametrize("raw_result", [{"textAnnotations": []}, {"responses": [{"textAnnotations": []}]}])
def test_transform_no_text_detected(raw_result: dict) -> None:
    assert transform_ocr_response(raw_result) == RawOcrResult()


def test_transform_normalized_response() -> None:
    raw_result = {"full_text": "ZARA\n29,95", "blocks": [{"text": "ZARA"}, "29,95"]}

    assert transform_ocr_response(raw_result) == RawOcrResult(full_text="ZARA\n29,95", blocks=("ZARA", "29,95"))


def test_transform_accepts_camel_case_full_text() -> None:
    assert transform_ocr_response({"fullText": "IKEA"}).full_text == "IKEA"


def test_transform_unknown_shape_is_empty() -> None:
    assert transform_ocr_response({"status": "success"}) == RawOcrResult()


def test_prepare_image_shrinks_longest_side_and_pads() -> None:
    prepared = prepare_image_for_ocr(_png_bytes((4000, 2000)), max_dimension=3000, padding=50)

    with Image.open(io.BytesIO(prepared)) as img:
        assert img.format == "JPEG"
        assert img.size == (3100, 1600)


def test_prepare_image_keeps_small_images_at_size() -> None:
    prepared = prepare_image_for_ocr(_png_bytes((100, 40)), padding=0)

    with Image.open(io.BytesIO(prepared)) as img:
        assert img.size == (100, 40)


def test_prepare_image_rejects_non_images() -> None:
    with pytest.raises(OSError):
        prepare_image_for_ocr(b"not an image")
