"""Centralized path management for nubemdom.

A single source of truth for the configuration and receipt directories,
so modules never build paths on their own.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_project_root() -> Path:
    """Resolve the data root: NUBEMDOM_HOME, else the current directory."""
    home = os.environ.get("NUBEMDOM_HOME")
    if home:
        return Path(home).expanduser()
    return Path.cwd()


@dataclass
class ProjectPaths:
    """Container for all project-related paths.

    Every path is derived from ``root`` so tests can point the whole
    tree at a temporary directory.
    """

    root: Path = field(default_factory=_get_project_root)

    def __post_init__(self) -> None:
        self.root = self.root.resolve()

    # --- Configuration paths ---
    @property
    def config(self) -> Path:
        """Configuration directory (config/)."""
        return self.root / "config"

    @property
    def category_rules(self) -> Path:
        """Extra classifier keywords TOML file."""
        return self.config / "category_rules.toml"

    # --- Receipt paths ---
    @property
    def receipts(self) -> Path:
        """Root receipts directory."""
        return self.root / "receipts"

    @property
    def receipts_images(self) -> Path:
        """Uploaded receipt photos."""
        return self.receipts / "images"

    @property
    def receipts_processed(self) -> Path:
        """Parsed receipt records (JSON)."""
        return self.receipts / "processed"

    @property
    def receipts_ocr_json(self) -> Path:
        """Raw OCR results (JSON)."""
        return self.receipts / "ocr_json"

    def ensure_receipt_directories(self) -> None:
        """Create all receipt-related directories if they don't exist."""
        self.receipts_images.mkdir(parents=True, exist_ok=True)
        self.receipts_processed.mkdir(parents=True, exist_ok=True)
        self.receipts_ocr_json.mkdir(parents=True, exist_ok=True)


_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the singleton ProjectPaths instance."""
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def set_project_root(root: Path) -> ProjectPaths:
    """Replace the singleton with one rooted at ``root``."""
    global _paths
    _paths = ProjectPaths(root=root)
    return _paths


def reset_paths() -> None:
    """Forget the singleton so the next get_paths() re-reads the environment."""
    global _paths
    _paths = None
