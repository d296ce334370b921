"""Runtime infrastructure for nubemdom.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Environment settings via get_settings()
- Category rule loading via load_category_rules()

Usage:
    from nubemdom.runtime import get_logger, get_paths

    logger = get_logger(__name__)
    paths = get_paths()
    print(paths.root, paths.receipts_processed)
"""

from nubemdom.runtime.category_rules import clear_category_rules_cache, load_category_rules
from nubemdom.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from nubemdom.runtime.paths import ProjectPaths, get_paths, reset_paths, set_project_root
from nubemdom.runtime.settings import Settings, get_settings, reset_settings

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Rules
    "load_category_rules",
    "clear_category_rules_cache",
    # Paths
    "get_paths",
    "set_project_root",
    "reset_paths",
    "ProjectPaths",
    # Settings
    "Settings",
    "get_settings",
    "reset_settings",
]
