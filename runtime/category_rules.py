"""Runtime loader for extra receipt category keywords."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from nubemdom.receipt.categories import CATEGORY_RULES, CategoryRule, extend_category_rules
from nubemdom.runtime.logging import get_logger
from nubemdom.runtime.paths import get_paths

logger = get_logger(__name__)


def _extra_keywords(config: dict[str, Any], path: Path) -> dict[str, list[str]]:
    """Collect ``[[rules]]`` entries into label -> keywords."""
    rules = config.get("rules", [])
    if not isinstance(rules, list):
        raise ValueError(f"Invalid category rules {path}: 'rules' must be an array of tables")

    extra: dict[str, list[str]] = {}
    for index, rule in enumerate(rules):
        if not isinstance(rule, dict):
            raise ValueError(f"Invalid category rules {path}: rules[{index}] must be a table")
        category = rule.get("category", "")
        keywords = rule.get("keywords", [])
        if not isinstance(category, str):
            raise ValueError(f"Invalid category rules {path}: rules[{index}].category must be a string")
        if not isinstance(keywords, list) or not all(isinstance(kw, str) for kw in keywords):
            raise ValueError(f"Invalid category rules {path}: rules[{index}].keywords must be a list of strings")
        if category.strip() and keywords:
            extra.setdefault(category.strip(), []).extend(keywords)
    return extra


@lru_cache(maxsize=4)
def _load_rules_file(resolved_path: str) -> tuple[CategoryRule, ...]:
    path = Path(resolved_path)
    try:
        with open(path, "rb") as f:
            config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid category rules {path}: {e}") from e

    extra = _extra_keywords(config, path)
    rules = extend_category_rules(extra)
    logger.debug("Loaded extra keywords for %d categories from %s", len(extra), path)
    return rules


def load_category_rules(config_path: str | None = None) -> tuple[CategoryRule, ...]:
    """
    Load the category table, extended with keywords from category_rules.toml.

    File format:
        [[rules]]
        category = "Hogar"
        keywords = ["conforama", "jysk"]

    Results are cached per resolved file path, so switching the project root
    picks up that root's file.

    Args:
        config_path: Optional TOML path override. If None, uses the project path,
            and a missing project file means "built-in rules only".

    Raises:
        FileNotFoundError: if an explicit config_path does not exist
        ValueError: if the file is not valid TOML, a rule is malformed, or a
            rule names a category outside the fixed set
    """
    path = Path(config_path) if config_path is not None else get_paths().category_rules
    if not path.exists():
        if config_path is not None:
            raise FileNotFoundError(f"Category rules file not found: {path}")
        return CATEGORY_RULES
    return _load_rules_file(str(path.resolve()))


def clear_category_rules_cache() -> None:
    """Forget loaded rule files so edits are re-read. Useful for testing."""
    _load_rules_file.cache_clear()
