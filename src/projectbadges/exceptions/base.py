"""Base exception for projectbadges."""

from __future__ import annotations


class BadgeError(Exception):
    """Base class for every error raised while generating badges."""
