"""Constants for list rendering and the badges.yaml config file."""

from __future__ import annotations

CONFIG_FILENAME: str = "badges.yaml"

SEPARATOR_ENTRY: str = "---"
SEPARATOR_MARKUP: str = '<br class="badge-separator" />'
BADGE_WRAPPER_TEMPLATE: str = '<span class="badge-{name}">{markup}</span>'
RENDER_JOINER: str = "\n"

VALID_CATEGORIES: frozenset[str] = frozenset({"custom", "development", "testing", "funding", "social"})

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"badges", "fields", "options"})
ALLOWED_OPTION_KEYS: frozenset[str] = frozenset({"category", "exclude_scripts", "inline_only"})
