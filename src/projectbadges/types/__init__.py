"""Shared type aliases for projectbadges."""

from .common import BadgeCategory, BadgeConfig, Environment, Generator
from .query import NodeicoQuery, QueryParams, RawQuery

__all__ = [
    "BadgeCategory",
    "BadgeConfig",
    "Environment",
    "Generator",
    "NodeicoQuery",
    "QueryParams",
    "RawQuery",
]
