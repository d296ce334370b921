from datetime import date
from decimal import Decimal

import pytest

from nubemdom.domain.receipt import LineItem
from nubemdom.receipt.ocr_parser import (
    MAX_ITEMS,
    _extract_date,
    _extract_items,
    _extract_total,
    _extract_vendor,
    _is_header_or_footer,
    _split_lines,
)


def test_split_lines_trims_and_drops_blank_lines() -> None:
    assert _split_lines("  MERCADONA S.A.  \n\n   \r\n15/01/2024\t\n") == ["MERCADONA S.A.", "15/01/2024"]


@pytest.mark.parametrize("text", ["", "   ", "\n\n \t \n"])
def test_split_lines_empty_input_yields_no_lines(text: str) -> None:
    assert _split_lines(text) == []


def test_vendor_prefers_company_suffix_line() -> None:
    assert _extract_vendor(["MERCADONA S.A.", "C/ EJEMPLO 123", "28001 MADRID"]) == "MERCADONA S.A."


def test_vendor_all_caps_line() -> None:
    assert _extract_vendor(["Bienvenido", "SUPERMERCADO TEST", "2024-01-15"]) == "SUPERMERCADO TEST"


def test_vendor_suffix_inside_words_is_not_a_company_token() -> None:
    # "Casa" contains "sa" but is not an S.A. suffix.
    assert _extract_vendor(["12", "Casa Pepe", "Ferreteria Lopez SL"]) == "Ferreteria Lopez SL"


def test_vendor_only_looks_at_first_five_lines_for_patterns() -> None:
    lines = ["Ticket simplificado", "Caja 3", "Op 12", "Hora 10", "Mesa 2", "BAR PACO"]
    assert _extract_vendor(lines) == "Ticket simplificado"


def test_vendor_length_bounds_are_exclusive() -> None:
    lines = ["ABC", "X" * 50, "LTDA"]
    assert _extract_vendor(lines) == "LTDA"


@pytest.mark.parametrize("lines", [[], ["12", "ab", "€"], ["Y" * 60]])
def test_vendor_placeholder_when_nothing_fits(lines: list[str]) -> None:
    assert _extract_vendor(lines) == "Comercio desconocido"


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("15/01/2024", "2024-01-15"),
        ("Fecha: 5-3-2024 10:42", "2024-03-05"),
        ("15.01.2024", "2024-01-15"),
        ("15/01/24", "2024-01-15"),
        ("2024-01-15", "2024-01-15"),
        ("2024/1/5", "2024-01-05"),
    ],
)
def test_extract_date_formats(line: str, expected: str) -> None:
    assert _extract_date(["MERCADONA", line, "TICKET: 123"]) == expected


def test_extract_date_skips_impossible_dates() -> None:
    assert _extract_date(["31/02/2024", "45/13/2024", "29/02/2024"]) == "2024-02-29"


def test_extract_date_first_valid_line_wins() -> None:
    assert _extract_date(["01/03/2024", "02/03/2024"]) == "2024-03-01"


def test_extract_date_falls_back_to_today() -> None:
    result = _extract_date(["sin fecha", "TOTAL 3,00"])
    assert result == date.today().isoformat()


def test_extract_date_result_is_always_iso_formatted() -> None:
    for lines in ([], ["99/99/9999"], ["1/1/2025"]):
        result = _extract_date(lines)
        assert date.fromisoformat(result).isoformat() == result


def test_extract_total_keyword_line() -> None:
    assert _extract_total(["Producto 1: 2.50€", "Producto 2: 3.80€", "TOTAL: 6.30€"]) == Decimal("6.30")


def test_extract_total_only_numeric_content_uses_keyword() -> None:
    assert _extract_total(["Gracias", "TOTAL: 45.67€"]) == Decimal("45.67")


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("Suma: 12,40", Decimal("12.40")),
        ("IMPORTE 7,5", Decimal("7.5")),
        ("A pagar 9,99 €", Decimal("9.99")),
        ("€ 3.10", Decimal("3.10")),
        ("Efectivo 20 EUR", Decimal("20")),
    ],
)
def test_extract_total_patterns(line: str, expected: Decimal) -> None:
    assert _extract_total(["CAFE CENTRAL", line]) == expected


def test_extract_total_scans_from_the_bottom() -> None:
    lines = ["TOTAL 10.00", "Entregado 20,00 €"]
    assert _extract_total(lines) == Decimal("20.00")


def test_extract_total_skips_zero_amounts() -> None:
    assert _extract_total(["Subtotal 8,20", "Descuento 0,00 €"]) == Decimal("8.20")


def test_extract_total_fallback_uses_rightmost_number() -> None:
    assert _extract_total(["Mesa 4", "2 cafes 3 tostadas 7,40"]) == Decimal("7.40")


@pytest.mark.parametrize("lines", [[], ["sin importes", "gracias"], ["0", "0,00"]])
def test_extract_total_zero_without_positive_numbers(lines: list[str]) -> None:
    assert _extract_total(lines) == Decimal("0")


def test_extract_items_name_then_price() -> None:
    items = _extract_items(["Pan integral 2.50€", "Leche entera 1.80€", "TOTAL: 4.30€"])

    assert items == [
        LineItem(name="Pan integral", price=Decimal("2.50"), quantity=1),
        LineItem(name="Leche entera", price=Decimal("1.80"), quantity=1),
    ]


def test_extract_items_comma_decimal_and_eur_suffix() -> None:
    items = _extract_items(["Queso curado 4,95"])
    assert items == [LineItem(name="Queso curado", price=Decimal("4.95"))]

    eur_items = _extract_items(["Queso curado 4,95 EUR"])
    assert LineItem(name="Queso curado", price=Decimal("4.95")) in eur_items


def test_extract_items_price_then_name() -> None:
    assert _extract_items(["3,20€ Huevos camperos"]) == [LineItem(name="Huevos camperos", price=Decimal("3.20"))]


def test_extract_items_overlapping_patterns_are_all_kept() -> None:
    items = _extract_items(["2 Cafes con leche 3.40€"])

    assert items == [
        LineItem(name="2 Cafes con leche", price=Decimal("3.40")),
        LineItem(name="Cafes con leche 3.40€", price=Decimal("2")),
    ]


def test_extract_items_skips_header_and_footer_lines() -> None:
    lines = [
        "Teléfono: 912 345 678",
        "Factura simplificada 0042",
        "IVA 10% 0,39",
        "www.mercadona.es",
        "Gracias por su visita 2024",
    ]
    assert _extract_items(lines) == []


def test_extract_items_rejects_zero_prices_and_short_names() -> None:
    assert _extract_items(["Bolsa 0,00", "X 1,20"]) == []


def test_extract_items_caps_result() -> None:
    lines = [f"Producto {chr(65 + i)} {i + 1},00" for i in range(25)]
    items = _extract_items(lines)

    assert len(items) == MAX_ITEMS
    assert items[0].name == "Producto A"
    assert items[-1].price == Decimal("20.00")


def test_accepted_item_lines_never_look_like_metadata() -> None:
    lines = ["Pan integral 2.50€", "Leche entera 1.80€", "Tomates 1,99", "TOTAL 6,29", "IVA 0,57"]
    for line in lines:
        if _extract_items([line]):
            assert not _is_header_or_footer(line)


@pytest.mark.parametrize(
    "line",
    [
        "TOTAL: 45.67€",
        "GRACIAS POR SU VISITA",
        "www.mercadona.es",
        "info@tienda.es",
        "Teléfono 91 000",
        "Nº Número 7",
        "Dirección: C/ Mayor 3",
        "Direccion C/ Mayor 3",
        "Telefono 91 000",
    ],
)
def test_header_footer_lines(line: str) -> None:
    assert _is_header_or_footer(line)


def test_plain_item_is_not_header_or_footer() -> None:
    assert not _is_header_or_footer("Pan integral")
