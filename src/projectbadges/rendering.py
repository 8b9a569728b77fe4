"""Render an ordered list of badges into one block of markup."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from projectbadges.constants.rendering import (
    BADGE_WRAPPER_TEMPLATE,
    RENDER_JOINER,
    SEPARATOR_ENTRY,
    SEPARATOR_MARKUP,
    VALID_CATEGORIES,
)
from projectbadges.model import BadgeSpec
from projectbadges.registry import get_badge, render_badge
from projectbadges.types.common import BadgeCategory, BadgeConfig, Environment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    """Filters applied while rendering a badge list."""

    category: BadgeCategory | None = None
    exclude_scripts: bool = False
    inline_only: bool = False

    def __post_init__(self) -> None:
        """Reject categories outside the closed badge category set."""
        if self.category is not None and self.category not in VALID_CATEGORIES:
            raise ValueError(f"category must be one of {sorted(VALID_CATEGORIES)}, got {self.category!r}")


@dataclass(frozen=True)
class BadgeEntry:
    """One badge in a list, with fields that override the shared ones."""

    name: str
    overrides: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_separator(self) -> bool:
        return self.name == SEPARATOR_ENTRY


EntryLike: TypeAlias = str | tuple[str, Mapping[str, Any]] | BadgeEntry


def as_entry(raw: EntryLike) -> BadgeEntry:
    """Normalize a name, ``(name, overrides)`` pair or entry into a ``BadgeEntry``."""
    if isinstance(raw, BadgeEntry):
        return raw
    if isinstance(raw, str):
        return BadgeEntry(raw)
    name, overrides = raw
    return BadgeEntry(name, overrides)


def _skip_reason(spec: BadgeSpec, options: RenderOptions) -> str | None:
    """Return why *spec* is filtered out by *options*, or ``None`` to keep it."""
    if options.category is not None and spec.category != options.category:
        return f"category {spec.category} != {options.category}"
    if options.exclude_scripts and spec.script:
        return "script badge"
    if options.inline_only and not spec.inline:
        return "not inline"
    return None


def render_badges(
    entries: Iterable[EntryLike],
    fields: BadgeConfig,
    options: RenderOptions | None = None,
    *,
    env: Environment | None = None,
) -> str:
    """Render *entries* with the shared *fields*, one badge per line.

    Each badge is wrapped in ``<span class="badge-NAME">``. Separator entries
    become ``<br class="badge-separator" />`` but only between two groups that
    rendered at least one badge.
    """
    options = options or RenderOptions()
    parts: list[str] = []
    pending_separator = False

    for raw in entries:
        entry = as_entry(raw)
        if entry.is_separator:
            pending_separator = bool(parts)
            continue

        spec = get_badge(entry.name)
        reason = _skip_reason(spec, options)
        if reason is not None:
            logger.debug("Skipping badge %s: %s", entry.name, reason)
            continue

        merged = {**fields, **entry.overrides}
        markup = render_badge(entry.name, merged, env=env)
        if pending_separator:
            parts.append(SEPARATOR_MARKUP)
            pending_separator = False
        parts.append(BADGE_WRAPPER_TEMPLATE.format(name=entry.name, markup=markup))

    return RENDER_JOINER.join(parts)
