"""Package registry and dependency badges."""

from __future__ import annotations

from projectbadges.constants.badges import SHIELDS_BASE_URL
from projectbadges.generators.render import render_descriptor
from projectbadges.generators.shared import coerce_query, require, serialize_query
from projectbadges.model import BadgeDescriptor
from projectbadges.types.common import BadgeConfig

NPM_TITLE = "View this project on NPM"


def npmversion(config: BadgeConfig) -> str:
    """NPM version badge for ``npmPackageName``."""
    package = require(config, "npmPackageName")
    return render_descriptor(
        BadgeDescriptor(
            image=f"{SHIELDS_BASE_URL}/npm/v/{package}.svg",
            alt="NPM version",
            url=f"https://npmjs.org/package/{package}",
            title=NPM_TITLE,
        )
    )


def npmdownloads(config: BadgeConfig) -> str:
    """NPM monthly downloads badge for ``npmPackageName``."""
    package = require(config, "npmPackageName")
    return render_descriptor(
        BadgeDescriptor(
            image=f"{SHIELDS_BASE_URL}/npm/dm/{package}.svg",
            alt="NPM downloads",
            url=f"https://npmjs.org/package/{package}",
            title=NPM_TITLE,
        )
    )


def daviddm(config: BadgeConfig) -> str:
    """David DM dependency status badge for ``githubSlug``."""
    slug = require(config, "githubSlug")
    return render_descriptor(
        BadgeDescriptor(
            image=f"{SHIELDS_BASE_URL}/david/{slug}.svg",
            alt="Dependency Status",
            url=f"https://david-dm.org/{slug}",
            title="View the status of this project's dependencies on DavidDM",
        )
    )


def daviddmdev(config: BadgeConfig) -> str:
    """David DM dev dependency status badge for ``githubSlug``."""
    slug = require(config, "githubSlug")
    return render_descriptor(
        BadgeDescriptor(
            image=f"{SHIELDS_BASE_URL}/david/dev/{slug}.svg",
            alt="Dev Dependency Status",
            url=f"https://david-dm.org/{slug}#info=devDependencies",
            title="View the status of this project's development dependencies on DavidDM",
        )
    )


def nodeico(config: BadgeConfig) -> str:
    """Nodei.co badge for ``npmPackageName``.

    ``nodeicoQueryString`` is either a literal query string or a mapping
    serialized as ``key=value&...`` in insertion order.
    """
    package = require(config, "npmPackageName")
    query = serialize_query(coerce_query("nodeicoQueryString", config.get("nodeicoQueryString")))
    image = f"https://nodei.co/npm/{package}.png"
    if query:
        image = f"{image}?{query}"
    return render_descriptor(
        BadgeDescriptor(
            image=image,
            alt="Nodei.co badge",
            url=f"https://www.npmjs.com/package/{package}",
            title="Nodei.co badge",
        )
    )
