"""Shared HTML renderer and the custom shields.io badge."""

from __future__ import annotations

from projectbadges.constants.badges import SHIELDS_BASE_URL, SHIELDS_DEFAULT_COLOR
from projectbadges.generators.shared import require
from projectbadges.model import BadgeDescriptor
from projectbadges.types.common import BadgeConfig


def render_descriptor(descriptor: BadgeDescriptor) -> str:
    """Render an ``<img>`` tag, wrapped in an ``<a>`` link when a URL is set."""
    if descriptor.alt:
        result = f'<img src="{descriptor.image}" alt="{descriptor.alt}" />'
    else:
        result = f'<img src="{descriptor.image}" />'
    if descriptor.url:
        if descriptor.title:
            result = f'<a href="{descriptor.url}" title="{descriptor.title}">{result}</a>'
        else:
            result = f'<a href="{descriptor.url}">{result}</a>'
    return result


def badge(config: BadgeConfig) -> str:
    """Render a badge from ``image`` and the optional ``alt``, ``url`` and ``title`` fields."""
    image = require(config, "image")
    return render_descriptor(
        BadgeDescriptor(
            image=image,
            alt=config.get("alt"),
            url=config.get("url"),
            title=config.get("title"),
        )
    )


def shields(config: BadgeConfig) -> str:
    """Render a ``left-right-color`` shields.io badge."""
    left = require(config, "left")
    right = require(config, "right")
    color = config.get("color") or SHIELDS_DEFAULT_COLOR
    return render_descriptor(
        BadgeDescriptor(
            image=f"{SHIELDS_BASE_URL}/badge/{left}-{right}-{color}.svg",
            alt=config.get("alt"),
            url=config.get("url"),
            title=config.get("title"),
        )
    )
