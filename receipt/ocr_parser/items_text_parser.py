"""Text-line based receipt item extraction."""

import re

from nubemdom.domain.receipt import LineItem

from .common import AMOUNT_TOKEN, _is_header_or_footer, _positive_amount

MAX_ITEMS = 20

# (pattern, field order) pairs; every pattern is tried on every line
ITEM_PATTERNS = (
    # "Pan integral 2.50€" / "Pan integral 2,50"
    (re.compile(rf"(.+?)\s+({AMOUNT_TOKEN})\s*€?$"), "name_price"),
    # "Pan integral 2.50 EUR"
    (re.compile(rf"(.+?)\s+({AMOUNT_TOKEN})\s*EUR$", re.IGNORECASE), "name_price"),
    # "2.50€ Pan integral"
    (re.compile(rf"({AMOUNT_TOKEN})\s*€?\s+(.+)$"), "price_name"),
)


def _extract_items(lines: list[str]) -> list[LineItem]:
    """
    Extract priced line items from receipt lines.

    Metadata lines (totals, tax, contact details) are skipped. A line can
    match more than one pattern; each qualifying match becomes an item.
    """
    items: list[LineItem] = []

    for line in lines:
        if _is_header_or_footer(line):
            continue

        for pattern, order in ITEM_PATTERNS:
            match = pattern.search(line)
            if not match:
                continue

            if order == "name_price":
                name, price_token = match.groups()
            else:
                price_token, name = match.groups()

            price = _positive_amount(price_token)
            name = name.strip()
            if price is not None and len(name) > 1:
                items.append(LineItem(name=name, price=price))

    return items[:MAX_ITEMS]
