"""Frozen dataclasses describing badges and their generators."""

from __future__ import annotations

from dataclasses import dataclass

from projectbadges.types.common import BadgeCategory, Generator


@dataclass(frozen=True)
class BadgeDescriptor:
    """Image, link and labels handed to the shared renderer."""

    image: str
    alt: str | None = None
    url: str | None = None
    title: str | None = None


@dataclass(frozen=True)
class BadgeSpec:
    """Static metadata for one registered generator.

    ``script`` marks generators whose output embeds executable script or
    iframe markup. ``inline`` is False for badges that should sit on their
    own line rather than in a row of inline badges.
    """

    name: str
    generator: Generator
    category: BadgeCategory
    script: bool = False
    inline: bool = True
    reads_environment: bool = False
