"""Core data models for projectbadges."""

from .entities import BadgeDescriptor, BadgeSpec

__all__ = ["BadgeDescriptor", "BadgeSpec"]
