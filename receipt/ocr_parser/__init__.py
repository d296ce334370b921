"""Composable OCR receipt parser components."""

from .common import ES_EUR, LocaleProfile, _is_header_or_footer, _split_lines
from .fields_parser import _extract_date, _extract_total, _extract_vendor
from .items_text_parser import MAX_ITEMS, _extract_items

__all__ = [
    "ES_EUR",
    "MAX_ITEMS",
    "LocaleProfile",
    "_extract_date",
    "_extract_items",
    "_extract_total",
    "_extract_vendor",
    "_is_header_or_footer",
    "_split_lines",
]
