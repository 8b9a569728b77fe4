"""Central badge registry.

Maps badge names to their generator and static metadata. The order of
``BADGE_REGISTRY`` is the catalog order.
"""

from __future__ import annotations

import difflib
import logging
from typing import Any

from projectbadges import generators as g
from projectbadges.exceptions import UnknownBadgeError
from projectbadges.model import BadgeSpec
from projectbadges.types.common import BadgeCategory, BadgeConfig, Environment

logger = logging.getLogger(__name__)

_SPECS: tuple[BadgeSpec, ...] = (
    BadgeSpec("badge", g.badge, "custom"),
    BadgeSpec("shields", g.shields, "custom"),
    BadgeSpec("npmversion", g.npmversion, "development"),
    BadgeSpec("npmdownloads", g.npmdownloads, "development"),
    BadgeSpec("daviddm", g.daviddm, "development"),
    BadgeSpec("daviddmdev", g.daviddmdev, "development"),
    BadgeSpec("nodeico", g.nodeico, "development"),
    BadgeSpec("saucelabsbm", g.saucelabsbm, "testing", inline=False, reads_environment=True),
    BadgeSpec("saucelabs", g.saucelabs, "testing", reads_environment=True),
    BadgeSpec("travisci", g.travisci, "testing"),
    BadgeSpec("codeship", g.codeship, "testing"),
    BadgeSpec("coveralls", g.coveralls, "testing"),
    BadgeSpec("codeclimate", g.codeclimate, "testing"),
    BadgeSpec("bithound", g.bithound, "testing"),
    BadgeSpec("waffle", g.waffle, "testing"),
    BadgeSpec("sixtydevstips", g.sixtydevstips, "funding"),
    BadgeSpec("patreon", g.patreon, "funding"),
    BadgeSpec("opencollective", g.opencollective, "funding"),
    BadgeSpec("gratipay", g.gratipay, "funding"),
    BadgeSpec("flattr", g.flattr, "funding"),
    BadgeSpec("paypal", g.paypal, "funding"),
    BadgeSpec("crypto", g.crypto, "funding"),
    BadgeSpec("bitcoin", g.bitcoin, "funding"),
    BadgeSpec("wishlist", g.wishlist, "funding"),
    BadgeSpec("buymeacoffee", g.buymeacoffee, "funding"),
    BadgeSpec("liberapay", g.liberapay, "funding"),
    BadgeSpec("thanksapp", g.thanksapp, "funding"),
    BadgeSpec("boostlab", g.boostlab, "funding"),
    BadgeSpec("slackinscript", g.slackinscript, "social", script=True),
    BadgeSpec("slackin", g.slackin, "social"),
    BadgeSpec("gabeacon", g.gabeacon, "social"),
    BadgeSpec("googleplusone", g.googleplusone, "social", script=True),
    BadgeSpec("redditsubmit", g.redditsubmit, "social", script=True),
    BadgeSpec("hackernewssubmit", g.hackernewssubmit, "social", script=True),
    BadgeSpec("facebooklike", g.facebooklike, "social", script=True, reads_environment=True),
    BadgeSpec("facebookfollow", g.facebookfollow, "social", script=True, reads_environment=True),
    BadgeSpec("twittertweet", g.twittertweet, "social", script=True),
    BadgeSpec("twitterfollow", g.twitterfollow, "social", script=True),
    BadgeSpec("githubfollow", g.githubfollow, "social", script=True),
    BadgeSpec("githubstar", g.githubstar, "social", script=True),
    BadgeSpec("quorafollow", g.quorafollow, "social", script=True),
)

BADGE_REGISTRY: dict[str, BadgeSpec] = {spec.name: spec for spec in _SPECS}


def _suggest_name(name: str) -> str:
    """Return a 'did you mean' hint for an unknown badge name."""
    matches = difflib.get_close_matches(name, BADGE_REGISTRY, n=1, cutoff=0.6)
    return f"did you mean '{matches[0]}'?" if matches else ""


def get_badge(name: str) -> BadgeSpec:
    """Return the registered spec for *name*."""
    try:
        return BADGE_REGISTRY[name]
    except KeyError:
        raise UnknownBadgeError(name, _suggest_name(name)) from None


def badge_names(category: BadgeCategory | None = None) -> list[str]:
    """List registered badge names in catalog order, optionally for one category."""
    return [spec.name for spec in _SPECS if category is None or spec.category == category]


def render_badge(name: str, config: BadgeConfig, *, env: Environment | None = None) -> str:
    """Render the badge registered as *name* with *config*."""
    spec = get_badge(name)
    logger.debug("Rendering badge: %s", name)
    kwargs: dict[str, Any] = {"env": env} if spec.reads_environment else {}
    return spec.generator(config, **kwargs)
