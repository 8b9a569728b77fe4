"""Configuration-related exceptions."""

from __future__ import annotations

from projectbadges.exceptions.base import BadgeError


class ConfigError(BadgeError, ValueError):
    """Raised when a badges.yaml file is invalid."""
