"""Badge generator functions grouped by category."""

from .development import daviddm, daviddmdev, nodeico, npmdownloads, npmversion
from .funding import (
    bitcoin,
    boostlab,
    buymeacoffee,
    crypto,
    flattr,
    gratipay,
    liberapay,
    opencollective,
    patreon,
    paypal,
    sixtydevstips,
    thanksapp,
    wishlist,
)
from .render import badge, render_descriptor, shields
from .social import (
    facebookfollow,
    facebooklike,
    gabeacon,
    githubfollow,
    githubstar,
    googleplusone,
    hackernewssubmit,
    quorafollow,
    redditsubmit,
    slackin,
    slackinscript,
    twitterfollow,
    twittertweet,
)
from .testing import bithound, codeclimate, codeship, coveralls, saucelabs, saucelabsbm, travisci, waffle

__all__ = [
    "badge",
    "bithound",
    "bitcoin",
    "boostlab",
    "buymeacoffee",
    "codeclimate",
    "codeship",
    "coveralls",
    "crypto",
    "daviddm",
    "daviddmdev",
    "facebookfollow",
    "facebooklike",
    "flattr",
    "gabeacon",
    "githubfollow",
    "githubstar",
    "googleplusone",
    "gratipay",
    "hackernewssubmit",
    "liberapay",
    "nodeico",
    "npmdownloads",
    "npmversion",
    "opencollective",
    "patreon",
    "paypal",
    "quorafollow",
    "redditsubmit",
    "render_descriptor",
    "saucelabs",
    "saucelabsbm",
    "shields",
    "sixtydevstips",
    "slackin",
    "slackinscript",
    "thanksapp",
    "travisci",
    "twitterfollow",
    "twittertweet",
    "waffle",
    "wishlist",
]
