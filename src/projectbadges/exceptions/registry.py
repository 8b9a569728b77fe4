"""Registry lookup exceptions."""

from __future__ import annotations

from projectbadges.exceptions.base import BadgeError


class UnknownBadgeError(BadgeError, LookupError):
    """Raised when a badge name is not registered."""

    def __init__(self, name: str, hint: str = "") -> None:
        self.name = name
        self.hint = hint
        message = f"unknown badge {name!r}"
        if hint:
            message = f"{message} ({hint})"
        super().__init__(message)
