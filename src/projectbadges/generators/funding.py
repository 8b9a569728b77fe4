"""Donation and sponsorship badges.

Most of these accept either an explicit ``*URL`` field or an identifier the
link is built from; the explicit URL always wins.
"""

from __future__ import annotations

from projectbadges.constants.badges import SHIELDS_BASE_URL
from projectbadges.exceptions import MissingFieldError
from projectbadges.generators.render import render_descriptor
from projectbadges.generators.shared import escape, first_present, require, resolve_link
from projectbadges.model import BadgeDescriptor
from projectbadges.types.common import BadgeConfig


def _donate_badge(label: str, url: str, alt: str, title: str) -> str:
    """Render a yellow ``{label}-donate`` shields.io badge linking to *url*."""
    return render_descriptor(
        BadgeDescriptor(
            image=f"{SHIELDS_BASE_URL}/badge/{label}-donate-yellow.svg",
            alt=alt,
            url=url,
            title=title,
        )
    )


def sixtydevstips(config: BadgeConfig) -> str:
    """60devs tips badge from ``sixtydevstipsURL`` or ``sixtydevstipsID``."""
    url = resolve_link(
        config,
        "sixtydevstipsURL",
        ("sixtydevstipsID", lambda tip_id: f"https://tips.60devs.com/tip/{tip_id}"),
    )
    return _donate_badge("60devs", url, "60devs tips donate button", "Donate to this project using 60devs tips")


def patreon(config: BadgeConfig) -> str:
    """Patreon badge from ``patreonURL`` or ``patreonUsername``."""
    url = resolve_link(config, "patreonURL", ("patreonUsername", lambda name: f"https://patreon.com/{name}"))
    return _donate_badge("patreon", url, "Patreon donate button", "Donate to this project using Patreon")


def opencollective(config: BadgeConfig) -> str:
    """Open Collective badge from ``opencollectiveURL`` or ``opencollectiveUsername``."""
    url = resolve_link(
        config,
        "opencollectiveURL",
        ("opencollectiveUsername", lambda name: f"https://opencollective.com/{name}"),
    )
    return _donate_badge(
        "open%20collective",
        url,
        "Open Collective donate button",
        "Donate to this project using Open Collective",
    )


def gratipay(config: BadgeConfig) -> str:
    """Gratipay badge from ``gratipayURL`` or ``gratipayUsername``."""
    url = resolve_link(config, "gratipayURL", ("gratipayUsername", lambda name: f"https://gratipay.com/{name}"))
    return _donate_badge("gratipay", url, "Gratipay donate button", "Donate weekly to this project using Gratipay")


def flattr(config: BadgeConfig) -> str:
    """Flattr badge; a username links to the profile, a code to a thing."""
    url = resolve_link(
        config,
        "flattrURL",
        ("flattrUsername", lambda name: f"https://flattr.com/profile/{name}"),
        ("flattrCode", lambda code: f"https://flattr.com/thing/{code}"),
    )
    return _donate_badge("flattr", url, "Flattr donate button", "Donate to this project using Flattr")


def paypal(config: BadgeConfig) -> str:
    """PayPal badge from a URL, a hosted button ID or a paypal.me username."""
    url = resolve_link(
        config,
        "paypalURL",
        (
            "paypalButtonID",
            lambda button_id: (
                f"https://www.paypal.com/cgi-bin/webscr?cmd=_s-xclick&amp;hosted_button_id={escape(button_id)}"
            ),
        ),
        ("paypalUsername", lambda name: f"https://paypal.me/{name}"),
    )
    return _donate_badge("paypal", url, "PayPal donate button", "Donate to this project using Paypal")


def crypto(config: BadgeConfig) -> str:
    """Cryptocurrency badge; ``bitcoinURL`` is accepted as a legacy name for ``cryptoURL``."""
    found = first_present(config, "cryptoURL", "bitcoinURL")
    if found is None:
        raise MissingFieldError("cryptoURL")
    _, url = found
    return _donate_badge("crypto", url, "crypto donate button", "Donate to this project using Cryptocurrency")


def bitcoin(config: BadgeConfig) -> str:
    """Alias of :func:`crypto`."""
    return crypto(config)


def wishlist(config: BadgeConfig) -> str:
    """Wishlist badge linking to ``wishlistURL``."""
    url = require(config, "wishlistURL")
    return render_descriptor(
        BadgeDescriptor(
            image=f"{SHIELDS_BASE_URL}/badge/wishlist-donate-yellow.svg",
            alt="Wishlist browse button",
            url=url,
            title="Buy an item on our wishlist for us",
        )
    )


def buymeacoffee(config: BadgeConfig) -> str:
    """Buy Me A Coffee badge from ``buymeacoffeeURL`` or ``buymeacoffeeUsername``."""
    url = resolve_link(
        config,
        "buymeacoffeeURL",
        ("buymeacoffeeUsername", lambda name: f"https://buymeacoffee.com/{name}"),
    )
    return _donate_badge(
        "buy%20me%20a%20coffee",
        url,
        "Buy Me A Coffee donate button",
        "Donate to this project using Buy Me A Coffee",
    )


def liberapay(config: BadgeConfig) -> str:
    """Liberapay badge from ``liberapayURL`` or ``liberapayUsername``."""
    url = resolve_link(config, "liberapayURL", ("liberapayUsername", lambda name: f"https://liberapay.com/{name}"))
    return _donate_badge("liberapay", url, "Liberapay donate button", "Donate to this project using Liberapay")


def thanksapp(config: BadgeConfig) -> str:
    """Thanks App badge; the npm package takes precedence over the GitHub slug."""
    found = first_present(config, "npmPackageName", "githubSlug")
    if found is None:
        raise MissingFieldError("npmPackageName", "githubSlug")
    field, value = found
    source = "npm" if field == "npmPackageName" else "github"
    return _donate_badge(
        "thanksapp",
        f"https://givethanks.app/donate/{source}/{value}",
        "Thanks App donate button",
        "Donate to this project using Thanks App",
    )


def boostlab(config: BadgeConfig) -> str:
    """Boost Lab badge for ``githubSlug``."""
    slug = require(config, "githubSlug")
    return _donate_badge(
        "boostlab",
        f"https://boost-lab.app/{slug}",
        "Boost Lab donate button",
        "Donate to this project using Boost Lab",
    )
