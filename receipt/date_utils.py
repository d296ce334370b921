"""Date helpers for receipt parsing."""

from datetime import date


def today_iso() -> str:
    """Return today's date as YYYY-MM-DD, used when a receipt shows no date."""
    return date.today().isoformat()
