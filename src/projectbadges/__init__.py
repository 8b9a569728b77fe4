"""Projectbadges package."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from projectbadges.config import BadgesConfig, load_config
from projectbadges.exceptions import (
    BadgeError,
    ConfigError,
    InvalidSlugError,
    InvalidTypeError,
    MissingFieldError,
    UnknownBadgeError,
)
from projectbadges.generators import *  # noqa: F403
from projectbadges.generators import __all__ as _generator_names
from projectbadges.registry import BADGE_REGISTRY, BadgeSpec, badge_names, get_badge, render_badge
from projectbadges.rendering import BadgeEntry, RenderOptions, render_badges

__all__ = [
    "BADGE_REGISTRY",
    "BadgeEntry",
    "BadgeError",
    "BadgeSpec",
    "BadgesConfig",
    "ConfigError",
    "InvalidSlugError",
    "InvalidTypeError",
    "MissingFieldError",
    "RenderOptions",
    "UnknownBadgeError",
    "__version__",
    "badge_names",
    "get_badge",
    "load_config",
    "render_badge",
    "render_badges",
    *_generator_names,
]

try:
    __version__ = version("projectbadges")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
