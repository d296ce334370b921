"""Shared pytest fixtures for nubemdom tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from nubemdom.runtime import clear_category_rules_cache, reset_paths, reset_settings, set_project_root
from nubemdom.runtime.paths import ProjectPaths


@pytest.fixture(autouse=True)
def _isolated_runtime(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Keep env-driven singletons and rule caches from leaking between tests."""
    for name in ("OCR_SERVICE_URL", "OCR_TIMEOUT_SECONDS", "MAX_FILE_SIZE", "ALLOWED_FILE_TYPES", "NUBEMDOM_HOME"):
        monkeypatch.delenv(name, raising=False)
    # Never read config or receipts from the working directory.
    monkeypatch.setenv("NUBEMDOM_HOME", str(tmp_path))
    reset_settings()
    reset_paths()
    clear_category_rules_cache()
    yield
    reset_settings()
    reset_paths()
    clear_category_rules_cache()


@pytest.fixture
def project_root(tmp_path: Path) -> ProjectPaths:
    """Point every runtime path at a temporary project root."""
    return set_project_root(tmp_path)
