"""Config data model for badge lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from projectbadges.rendering import BadgeEntry, RenderOptions


@dataclass(frozen=True)
class BadgesConfig:
    """Resolved ``badges.yaml`` contents."""

    entries: tuple[BadgeEntry, ...] = ()
    fields: dict[str, Any] = field(default_factory=dict)
    options: RenderOptions = RenderOptions()
