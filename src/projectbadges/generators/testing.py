"""Continuous integration, coverage and code quality badges."""

from __future__ import annotations

from projectbadges.constants.badges import SAUCELABS_AUTH_TOKEN_ENV, SHIELDS_BASE_URL, WAFFLE_LABEL
from projectbadges.generators.render import render_descriptor
from projectbadges.generators.shared import env_fallback, escape, require
from projectbadges.model import BadgeDescriptor
from projectbadges.types.common import BadgeConfig, Environment


def saucelabsbm(config: BadgeConfig, *, env: Environment | None = None) -> str:
    """Sauce Labs browser matrix badge.

    ``saucelabsAuthToken`` falls back to ``SAUCELABS_AUTH_TOKEN``.
    """
    username = require(config, "saucelabsUsername")
    token = env_fallback(config, "saucelabsAuthToken", SAUCELABS_AUTH_TOKEN_ENV, env)
    return render_descriptor(
        BadgeDescriptor(
            image=f"https://saucelabs.com/browser-matrix/{username}.svg?auth={escape(token)}",
            alt="Sauce Labs Browser Matrix",
            url=f"https://saucelabs.com/u/{username}",
            title="Check this project's browser tests on Sauce Labs",
        )
    )


def saucelabs(config: BadgeConfig, *, env: Environment | None = None) -> str:
    """Sauce Labs badge, rendered the same as the browser matrix."""
    return saucelabsbm(config, env=env)


def travisci(config: BadgeConfig) -> str:
    """Travis CI build status badge for the master branch of ``githubSlug``."""
    slug = require(config, "githubSlug")
    return render_descriptor(
        BadgeDescriptor(
            image=f"{SHIELDS_BASE_URL}/travis/{slug}/master.svg",
            alt="Travis CI Build Status",
            url=f"http://travis-ci.org/{slug}",
            title="Check this project's build status on TravisCI",
        )
    )


def codeship(config: BadgeConfig) -> str:
    """Codeship badge from the project UUID (image) and project ID (link)."""
    project_uuid = require(config, "codeshipProjectUUID")
    project_id = require(config, "codeshipProjectID")
    return render_descriptor(
        BadgeDescriptor(
            image=f"{SHIELDS_BASE_URL}/codeship/{project_uuid}/master.svg",
            alt="Codeship Status",
            url=f"https://www.codeship.io/projects/{project_id}",
            title="Check this project's status on Codeship",
        )
    )


def coveralls(config: BadgeConfig) -> str:
    """Coveralls coverage badge for ``githubSlug``."""
    slug = require(config, "githubSlug")
    return render_descriptor(
        BadgeDescriptor(
            image=f"{SHIELDS_BASE_URL}/coveralls/{slug}.svg",
            alt="Coveralls Coverage Status",
            url=f"https://coveralls.io/r/{slug}",
            title="View this project's coverage on Coveralls",
        )
    )


def codeclimate(config: BadgeConfig) -> str:
    """Code Climate rating badge for ``githubSlug``."""
    slug = require(config, "githubSlug")
    return render_descriptor(
        BadgeDescriptor(
            image=f"{SHIELDS_BASE_URL}/codeclimate/github/{slug}.svg",
            alt="Code Climate Rating",
            url=f"https://codeclimate.com/github/{slug}",
            title="View this project's rating on Code Climate",
        )
    )


def bithound(config: BadgeConfig) -> str:
    """BitHound score badge for ``githubSlug``."""
    slug = require(config, "githubSlug")
    return render_descriptor(
        BadgeDescriptor(
            image=f"https://bithound.io/github/{slug}/badges/score.svg",
            alt="BitHound Score",
            url=f"https://bithound.io/github/{slug}",
            title="View this project's score on BitHound",
        )
    )


def waffle(config: BadgeConfig) -> str:
    """Waffle.io stories badge for the ``ready`` column."""
    slug = require(config, "githubSlug")
    return render_descriptor(
        BadgeDescriptor(
            image=f"https://badge.waffle.io/{slug}.png?label={escape(WAFFLE_LABEL)}",
            alt="Stories in Ready",
            url=f"http://waffle.io/{slug}",
            title="View this project's stories on Waffle.io",
        )
    )
