"""Social widgets and community badges.

Apart from ``slackin`` and ``gabeacon``, these return embed markup with
script or iframe tags rather than a plain image link.
"""

from __future__ import annotations

from projectbadges.constants.badges import (
    FACEBOOK_APPLICATION_ID_ENV,
    GOOGLE_PLUSONE_SCRIPT,
    HACKERNEWS_SCRIPT,
    QUORA_DEFAULT_CODE,
    TWITTER_WIDGET_SCRIPT,
)
from projectbadges.exceptions import InvalidSlugError
from projectbadges.generators.render import render_descriptor
from projectbadges.generators.shared import env_fallback, escape, require
from projectbadges.model import BadgeDescriptor
from projectbadges.types.common import BadgeConfig, Environment


def slackinscript(config: BadgeConfig) -> str:
    """Slackin embed script served from ``slackinURL``."""
    slackin_url = require(config, "slackinURL")
    return f'<script async defer src="{slackin_url}/slackin.js"></script>'


def slackin(config: BadgeConfig) -> str:
    """Slackin community badge served from ``slackinURL``."""
    slackin_url = require(config, "slackinURL")
    return render_descriptor(
        BadgeDescriptor(
            image=f"{slackin_url}/badge.svg",
            alt="Slack community badge",
            url=slackin_url,
            title="Join this project's slack community",
        )
    )


def gabeacon(config: BadgeConfig) -> str:
    """Google Analytics beacon image (https://github.com/igrigorik/ga-beacon)."""
    tracking_id = require(config, "gaTrackingID")
    slug = require(config, "githubSlug")
    return render_descriptor(
        BadgeDescriptor(
            image=f"https://ga-beacon.appspot.com/{tracking_id}/{slug}",
            alt="Google Analytics beacon image",
            url="https://github.com/igrigorik/ga-beacon",
            title="Get Google Analytics for your project",
        )
    )


def googleplusone(config: BadgeConfig) -> str:
    """Google +1 button for ``homepage``."""
    homepage = require(config, "homepage")
    return f'<span class="g-plusone" data-size="medium" data-href="{homepage}"></span>{GOOGLE_PLUSONE_SCRIPT}'


def redditsubmit(config: BadgeConfig) -> str:
    """Reddit submit button for ``homepage``."""
    homepage = require(config, "homepage")
    return f'<script>reddit_url="{homepage}"</script><script src="https://en.reddit.com/static/button/button1.js"></script>'


def hackernewssubmit(config: BadgeConfig) -> str:
    """Hacker News vote button for ``homepage``."""
    homepage = require(config, "homepage")
    return (
        f'<a href="https://news.ycombinator.com/submit" class="hn-button" data-url="{homepage}" '
        f'data-count="horizontal">Vote on Hacker News</a>{HACKERNEWS_SCRIPT}'
    )


def facebooklike(config: BadgeConfig, *, env: Environment | None = None) -> str:
    """Facebook like button; ``facebookApplicationID`` falls back to ``FACEBOOK_APPLICATION_ID``."""
    homepage = require(config, "homepage")
    app_id = env_fallback(config, "facebookApplicationID", FACEBOOK_APPLICATION_ID_ENV, env)
    return (
        f'<iframe src="https://www.facebook.com/plugins/like.php?href={escape(homepage)}'
        "&amp;send=false&amp;layout=button_count&amp;width=450&amp;show_faces=false&amp;font"
        f'&amp;colorscheme=light&amp;action=like&amp;height=21&amp;appId={escape(app_id)}" '
        'scrolling="no" frameborder="0" style="border:none; overflow:hidden; width:450px; height:21px;" '
        'allowTransparency="true"></iframe>'
    )


def facebookfollow(config: BadgeConfig, *, env: Environment | None = None) -> str:
    """Facebook follow button; ``facebookApplicationID`` falls back to ``FACEBOOK_APPLICATION_ID``."""
    username = require(config, "facebookUsername")
    app_id = env_fallback(config, "facebookApplicationID", FACEBOOK_APPLICATION_ID_ENV, env)
    return (
        "<iframe src=\"https://www.facebook.com/plugins/follow.php?href=https%3A%2F%2Fwww.facebook.com%2F"
        f"{escape(username)}&amp;layout=button_count&amp;show_faces=false&amp;colorscheme=light&amp;font"
        f'&amp;width=450&amp;appId={escape(app_id)}" scrolling="no" frameborder="0" '
        'style="border:none; overflow:hidden; width:450px; height: 20px;" allowTransparency="true"></iframe>'
    )


def twittertweet(config: BadgeConfig) -> str:
    """Tweet button mentioning ``twitterUsername``."""
    username = require(config, "twitterUsername")
    return (
        f'<a href="https://twitter.com/share" class="twitter-share-button" data-via="{username}" '
        f'data-related="{username}">Tweet</a>{TWITTER_WIDGET_SCRIPT}'
    )


def twitterfollow(config: BadgeConfig) -> str:
    """Twitter follow button for ``twitterUsername``."""
    username = require(config, "twitterUsername")
    return (
        f'<a href="https://twitter.com/{escape(username)}" class="twitter-follow-button" '
        f'data-show-count="false">Follow @{username}</a>{TWITTER_WIDGET_SCRIPT}'
    )


def githubfollow(config: BadgeConfig) -> str:
    """GitHub follow button for ``githubUsername``."""
    username = require(config, "githubUsername")
    return (
        f'<iframe src="https://ghbtns.com/github-btn.html?user={escape(username)}&amp;type=follow&amp;count=true" '
        'allowtransparency="true" frameborder="0" scrolling="0" width="165" height="20"></iframe>'
    )


def githubstar(config: BadgeConfig) -> str:
    """GitHub star button for an ``owner/repository`` ``githubSlug``."""
    slug = require(config, "githubSlug")
    owner, _, rest = str(slug).partition("/")
    repository = rest.split("/", 1)[0]
    if not owner or not repository:
        raise InvalidSlugError("githubSlug", slug)
    return (
        f'<iframe src="https://ghbtns.com/github-btn.html?user={escape(owner)}&amp;repo={escape(repository)}'
        '&amp;type=watch&amp;count=true" allowtransparency="true" frameborder="0" scrolling="0" '
        'width="110" height="20"></iframe>'
    )


def quorafollow(config: BadgeConfig) -> str:
    """Quora follow button; the real name defaults to the username with dashes as spaces."""
    username = require(config, "quoraUsername")
    realname = config.get("quoraRealname") or str(username).replace("-", " ")
    code = config.get("quoraCode") or QUORA_DEFAULT_CODE
    return (
        f'<span data-name="{username}">'
        f'Follow <a href="http://www.quora.com/{username}">{realname}</a> on <a href="http://www.quora.com">Quora</a>'
        f'<script src="https://www.quora.com/widgets/follow?embed_code={escape(code)}"></script>'
        "</span>"
    )
