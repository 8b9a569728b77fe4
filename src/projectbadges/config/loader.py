"""Config loading and normalization for badge lists."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path
from typing import Any

import yaml

from projectbadges.config.model import BadgesConfig
from projectbadges.constants.rendering import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_OPTION_KEYS,
    CONFIG_FILENAME,
    SEPARATOR_ENTRY,
    VALID_CATEGORIES,
)
from projectbadges.exceptions import ConfigError
from projectbadges.registry import BADGE_REGISTRY
from projectbadges.rendering import BadgeEntry, RenderOptions

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> BadgesConfig:
    """Load and validate a badge list from ``badges.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return BadgesConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    _reject_unknown_keys(raw, ALLOWED_CONFIG_KEYS, "")

    fields_raw = raw.get("fields", {})
    if fields_raw is None:
        fields_raw = {}
    if not isinstance(fields_raw, dict):
        raise ConfigError("fields must be a mapping")

    options_raw = raw.get("options", {})
    if options_raw is None:
        options_raw = {}
    if not isinstance(options_raw, dict):
        raise ConfigError("options must be a mapping")
    _reject_unknown_keys(options_raw, ALLOWED_OPTION_KEYS, "options.")

    badges_raw = raw.get("badges", [])
    if badges_raw is None:
        badges_raw = []
    if not isinstance(badges_raw, list):
        raise ConfigError("badges must be a list")

    config = BadgesConfig(
        entries=tuple(_parse_entry(item, index) for index, item in enumerate(badges_raw)),
        fields={str(key): value for key, value in fields_raw.items()},
        options=_parse_options(options_raw),
    )
    logger.debug("Loaded %d badge entries from %s", len(config.entries), path)
    return config


def _suggest_key(key: str, allowed: frozenset[str] | dict[str, Any]) -> str:
    """Return a 'did you mean' hint for an unknown key, or an empty string."""
    matches = difflib.get_close_matches(key, list(allowed), n=1, cutoff=0.6)
    return f" (did you mean '{matches[0]}'?)" if matches else ""


def _reject_unknown_keys(raw: dict[str, Any], allowed: frozenset[str], prefix: str) -> None:
    """Raise ConfigError for the first key not in *allowed*."""
    for key in raw:
        if key not in allowed:
            raise ConfigError(f"unknown key {prefix}{key}{_suggest_key(str(key), allowed)}")


def _check_badge_name(name: Any, location: str) -> str:
    """Validate that *name* is a registered badge or the separator entry."""
    if not isinstance(name, str) or not name.strip():
        raise ConfigError(f"{location} must be a badge name")
    if name != SEPARATOR_ENTRY and name not in BADGE_REGISTRY:
        raise ConfigError(f"{location}: unknown badge {name!r}{_suggest_key(name, BADGE_REGISTRY)}")
    return name


def _parse_entry(item: Any, index: int) -> BadgeEntry:
    """Parse one ``badges`` item: a name, or a single-key mapping of name to overrides."""
    location = f"badges[{index}]"
    if isinstance(item, str):
        return BadgeEntry(_check_badge_name(item, location))
    if not isinstance(item, dict) or len(item) != 1:
        raise ConfigError(f"{location} must be a badge name or a single-key mapping")
    ((name, overrides),) = item.items()
    name = _check_badge_name(name, location)
    if overrides is None:
        overrides = {}
    if not isinstance(overrides, dict):
        raise ConfigError(f"{location}.{name} overrides must be a mapping")
    return BadgeEntry(name, {str(key): value for key, value in overrides.items()})


def _parse_options(raw: dict[str, Any]) -> RenderOptions:
    """Build RenderOptions from the raw ``options`` block."""
    category = raw.get("category")
    if category is not None and (not isinstance(category, str) or category not in VALID_CATEGORIES):
        raise ConfigError(f"options.category must be one of {sorted(VALID_CATEGORIES)}, got {category!r}")

    exclude_scripts = raw.get("exclude_scripts", False)
    if not isinstance(exclude_scripts, bool):
        raise ConfigError("options.exclude_scripts must be a boolean")

    inline_only = raw.get("inline_only", False)
    if not isinstance(inline_only, bool):
        raise ConfigError("options.inline_only must be a boolean")

    return RenderOptions(
        category=category,  # type: ignore[arg-type]
        exclude_scripts=exclude_scripts,
        inline_only=inline_only,
    )
