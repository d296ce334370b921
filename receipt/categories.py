"""Expense category rules for whole receipts.

Categories are matched by keyword substrings against the lowercased receipt
text. The table is walked in declared order and the first category with a
matching keyword wins, so a keyword listed under two categories (e.g.
"el corte inglés" under Alimentación and Ropa) always resolves to the earlier
one.

To add keywords:
1. Add them to the tuple of an existing category below, or
2. List them under that category in config/category_rules.toml
Keywords are lowercase substrings; the set of categories is fixed.
"""

from collections.abc import Mapping, Sequence

CategoryRule = tuple[str, tuple[str, ...]]

DEFAULT_CATEGORY = "Otros"

CATEGORY_RULES: tuple[CategoryRule, ...] = (
    (
        "Alimentación",
        (
            "supermercado",
            "mercado",
            "carrefour",
            "mercadona",
            "lidl",
            "aldi",
            "dia",
            "eroski",
            "alcampo",
            "hipercor",
            "el corte inglés",
            "panadería",
            "charcutería",
            "frutería",
        ),
    ),
    (
        "Transporte",
        (
            "gasolinera",
            "shell",
            "repsol",
            "cepsa",
            "bp",
            "galp",
            "taxi",
            "uber",
            "cabify",
            "metro",
            "bus",
            "tren",
            "parking",
            "aparcamiento",
        ),
    ),
    (
        "Restaurantes",
        (
            "restaurante",
            "bar",
            "café",
            "cafetería",
            "pizzería",
            "hamburguesa",
            "mcdonald",
            "burger",
            "kfc",
            "telepizza",
            "dominos",
        ),
    ),
    ("Farmacia", ("farmacia", "parafarmacia", "medicina", "medicamento")),
    (
        "Ropa",
        ("zara", "h&m", "mango", "primark", "decathlon", "nike", "adidas", "el corte inglés", "moda"),
    ),
    (
        "Hogar",
        (
            "ikea",
            "leroy merlin",
            "bricomart",
            "aki",
            "ferretería",
            "electrodomésticos",
            "mediamarkt",
            "carrefour",
        ),
    ),
    ("Entretenimiento", ("cine", "teatro", "concierto", "spotify", "netflix", "amazon prime", "juego")),
    ("Servicios", ("electricidad", "agua", "gas", "telefono", "internet", "seguro", "banco")),
)

CATEGORY_LABELS: tuple[str, ...] = tuple(label for label, _ in CATEGORY_RULES) + (DEFAULT_CATEGORY,)


def classify_receipt(lines: Sequence[str], rules: Sequence[CategoryRule] = CATEGORY_RULES) -> str:
    """Return the first category whose keywords appear in the receipt text."""
    text = " ".join(lines).lower()
    for label, keywords in rules:
        if any(keyword in text for keyword in keywords):
            return label
    return DEFAULT_CATEGORY


def extend_category_rules(
    extra_keywords: Mapping[str, Sequence[str]],
    base_rules: Sequence[CategoryRule] = CATEGORY_RULES,
) -> tuple[CategoryRule, ...]:
    """
    Append extra keywords to existing categories, keeping table order.

    Raises:
        ValueError: if a label is not one of the fixed categories.
    """
    known_labels = {label for label, _ in base_rules}
    unknown = sorted(set(extra_keywords) - known_labels)
    if unknown:
        raise ValueError(f"Unknown receipt categories: {', '.join(unknown)}")

    merged: list[CategoryRule] = []
    for label, keywords in base_rules:
        combined = list(keywords)
        for keyword in extra_keywords.get(label, ()):
            normalized = keyword.strip().lower()
            if normalized and normalized not in combined:
                combined.append(normalized)
        merged.append((label, tuple(combined)))
    return tuple(merged)
