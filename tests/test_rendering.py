"""Tests for rendering badge lists."""

from __future__ import annotations

import logging

import pytest

from projectbadges.exceptions import MissingFieldError, UnknownBadgeError
from projectbadges.generators import npmversion, shields, travisci
from projectbadges.rendering import BadgeEntry, RenderOptions, as_entry, render_badges


def test_wraps_each_badge_in_span(github_fields: dict[str, str]) -> None:
    result = render_badges(["npmversion", "travisci"], github_fields)
    lines = result.split("\n")

    assert len(lines) == 2
    assert lines[0] == f'<span class="badge-npmversion">{npmversion(github_fields)}</span>'
    assert lines[1].startswith('<span class="badge-travisci"><a href="http://travis-ci.org/bevry/badges"')


def test_separator_between_groups(github_fields: dict[str, str]) -> None:
    result = render_badges(["npmversion", "---", "travisci"], github_fields)

    assert result.split("\n")[1] == '<br class="badge-separator" />'


def test_leading_trailing_and_repeated_separators_collapse(github_fields: dict[str, str]) -> None:
    result = render_badges(["---", "npmversion", "---", "---", "travisci", "---"], github_fields)

    assert result.count("badge-separator") == 1
    assert result.startswith('<span class="badge-npmversion">')
    assert result.endswith("</span>")


def test_entry_overrides_merge_over_shared_fields(github_fields: dict[str, str]) -> None:
    result = render_badges([("shields", {"left": "build", "right": "passing", "color": "green"})], github_fields)

    assert result == (
        '<span class="badge-shields">'
        f'{shields({"left": "build", "right": "passing", "color": "green"})}'
        "</span>"
    )


def test_category_filter(github_fields: dict[str, str], caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="projectbadges.rendering"):
        result = render_badges(
            ["npmversion", "---", "travisci", "githubstar"],
            github_fields,
            RenderOptions(category="testing"),
        )

    assert result == f'<span class="badge-travisci">{travisci(github_fields)}</span>'
    assert "Skipping badge npmversion" in caplog.text


def test_exclude_scripts(github_fields: dict[str, str]) -> None:
    result = render_badges(["githubstar", "npmversion"], github_fields, RenderOptions(exclude_scripts=True))

    assert "badge-githubstar" not in result
    assert "badge-npmversion" in result


def test_inline_only_drops_browser_matrix(github_fields: dict[str, str]) -> None:
    fields = {**github_fields, "saucelabsUsername": "bevry", "saucelabsAuthToken": "t"}

    result = render_badges(["saucelabsbm", "saucelabs"], fields, RenderOptions(inline_only=True), env={})

    assert "badge-saucelabsbm" not in result
    assert "badge-saucelabs" in result


def test_separator_dropped_when_group_is_filtered(github_fields: dict[str, str]) -> None:
    result = render_badges(
        ["npmversion", "---", "githubstar", "---", "travisci"],
        github_fields,
        RenderOptions(exclude_scripts=True),
    )

    assert result.count("badge-separator") == 1


def test_generator_errors_propagate() -> None:
    with pytest.raises(MissingFieldError, match="npmPackageName"):
        render_badges(["npmversion"], {})


def test_unknown_badge_propagates() -> None:
    with pytest.raises(UnknownBadgeError):
        render_badges(["nope"], {})


def test_empty_list_renders_empty_string() -> None:
    assert render_badges([], {}) == ""


def test_as_entry_forms() -> None:
    assert as_entry("npmversion") == BadgeEntry("npmversion")
    assert as_entry(("shields", {"left": "a"})) == BadgeEntry("shields", {"left": "a"})
    entry = BadgeEntry("---")
    assert as_entry(entry) is entry
    assert entry.is_separator


@pytest.mark.parametrize("category", ["bogus", "Testing", ""], ids=["unknown", "wrong_case", "empty"])
def test_render_options_rejects_unknown_category(category: str) -> None:
    with pytest.raises(ValueError, match="category must be one of"):
        RenderOptions(category=category)  # type: ignore[arg-type]


def test_render_options_accepts_every_category() -> None:
    for category in ("custom", "development", "testing", "funding", "social"):
        assert RenderOptions(category=category).category == category  # type: ignore[arg-type]
