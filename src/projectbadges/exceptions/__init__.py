"""Shared exception hierarchy for projectbadges."""

from __future__ import annotations

from .base import BadgeError
from .config import ConfigError
from .fields import InvalidSlugError, InvalidTypeError, MissingFieldError
from .registry import UnknownBadgeError

__all__ = [
    "BadgeError",
    "ConfigError",
    "InvalidSlugError",
    "InvalidTypeError",
    "MissingFieldError",
    "UnknownBadgeError",
]
