"""Environment-driven service settings.

Environment variables:
    OCR_SERVICE_URL: Base URL of the OCR service. Default: http://localhost:8001
    OCR_TIMEOUT_SECONDS: Request timeout for OCR calls. Default: 60
    MAX_FILE_SIZE: Largest accepted receipt image, in bytes. Default: 10 MiB
    ALLOWED_FILE_TYPES: Comma separated MIME types accepted for upload.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_OCR_SERVICE_URL = "http://localhost:8001"
DEFAULT_OCR_TIMEOUT_SECONDS = 60.0
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_ALLOWED_FILE_TYPES = ("image/jpeg", "image/png", "image/jpg", "image/webp")


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _float_from_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


def _allowed_types_from_env() -> tuple[str, ...]:
    raw = os.environ.get("ALLOWED_FILE_TYPES", "")
    types = tuple(t.strip().lower() for t in raw.split(",") if t.strip())
    return types or DEFAULT_ALLOWED_FILE_TYPES


@dataclass(frozen=True)
class Settings:
    """OCR and upload settings resolved from the environment."""

    ocr_service_url: str = field(default_factory=lambda: os.environ.get("OCR_SERVICE_URL", DEFAULT_OCR_SERVICE_URL))
    ocr_timeout_seconds: float = field(
        default_factory=lambda: _float_from_env("OCR_TIMEOUT_SECONDS", DEFAULT_OCR_TIMEOUT_SECONDS)
    )
    max_file_size: int = field(default_factory=lambda: _int_from_env("MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE))
    allowed_file_types: tuple[str, ...] = field(default_factory=_allowed_types_from_env)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment. Useful for testing."""
    global _settings
    _settings = None
