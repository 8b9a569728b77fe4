"""Exceptions raised while validating generator input fields."""

from __future__ import annotations

from typing import Any

from projectbadges.exceptions.base import BadgeError


class MissingFieldError(BadgeError, ValueError):
    """Raised when a required field is absent or empty.

    Fallback chains name every alternative in resolution order; ``field`` is
    always the first of them.
    """

    def __init__(self, *fields: str) -> None:
        if not fields:
            raise TypeError("MissingFieldError requires at least one field name")
        self.fields: tuple[str, ...] = fields
        if len(fields) == 1:
            message = f"{fields[0]} is missing"
        else:
            message = f"{', '.join(fields[:-1])} or {fields[-1]} is missing, at least one must exist"
        super().__init__(message)

    @property
    def field(self) -> str:
        """Name of the first missing field."""
        return self.fields[0]


class InvalidSlugError(BadgeError, ValueError):
    """Raised when an ``owner/repository`` slug is malformed."""

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} is invalid, expected owner/repository (got {value!r})")


class InvalidTypeError(BadgeError, TypeError):
    """Raised when an optional structured field has the wrong shape."""

    def __init__(self, field: str, value: Any, expected: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} must be {expected}, got {type(value).__name__}")
