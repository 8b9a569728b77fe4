"""Tests for package registry and dependency badges."""

from __future__ import annotations

import pytest

from projectbadges.exceptions import InvalidTypeError, MissingFieldError
from projectbadges.generators import daviddm, daviddmdev, nodeico, npmdownloads, npmversion
from projectbadges.types.query import QueryParams, RawQuery


def test_npmversion() -> None:
    assert npmversion({"npmPackageName": "foo"}) == (
        '<a href="https://npmjs.org/package/foo" title="View this project on NPM">'
        '<img src="https://img.shields.io/npm/v/foo.svg" alt="NPM version" /></a>'
    )


def test_npmdownloads() -> None:
    result = npmdownloads({"npmPackageName": "foo"})

    assert 'src="https://img.shields.io/npm/dm/foo.svg"' in result
    assert 'alt="NPM downloads"' in result
    assert 'href="https://npmjs.org/package/foo"' in result


def test_daviddm() -> None:
    result = daviddm({"githubSlug": "bevry/badges"})

    assert 'src="https://img.shields.io/david/bevry/badges.svg"' in result
    assert 'href="https://david-dm.org/bevry/badges"' in result


def test_daviddmdev() -> None:
    result = daviddmdev({"githubSlug": "bevry/badges"})

    assert 'src="https://img.shields.io/david/dev/bevry/badges.svg"' in result
    assert 'href="https://david-dm.org/bevry/badges#info=devDependencies"' in result


@pytest.mark.parametrize(
    ("generator", "field"),
    [
        (npmversion, "npmPackageName"),
        (npmdownloads, "npmPackageName"),
        (daviddm, "githubSlug"),
        (daviddmdev, "githubSlug"),
        (nodeico, "npmPackageName"),
    ],
    ids=["npmversion", "npmdownloads", "daviddm", "daviddmdev", "nodeico"],
)
def test_required_field(generator, field: str) -> None:
    with pytest.raises(MissingFieldError, match=field):
        generator({})

    assert generator({field: "value"})


class TestNodeico:
    def test_without_query(self) -> None:
        assert nodeico({"npmPackageName": "foo"}) == (
            '<a href="https://www.npmjs.com/package/foo" title="Nodei.co badge">'
            '<img src="https://nodei.co/npm/foo.png" alt="Nodei.co badge" /></a>'
        )

    def test_string_query_is_verbatim(self) -> None:
        result = nodeico({"npmPackageName": "foo", "nodeicoQueryString": "downloads=true&stars=true"})

        assert 'src="https://nodei.co/npm/foo.png?downloads=true&stars=true"' in result

    def test_mapping_query_keeps_insertion_order(self) -> None:
        result = nodeico({"npmPackageName": "foo", "nodeicoQueryString": {"a": "1", "b": "2"}})

        assert 'src="https://nodei.co/npm/foo.png?a=1&b=2"' in result

    def test_mapping_query_escapes_values(self) -> None:
        result = nodeico({"npmPackageName": "foo", "nodeicoQueryString": {"q": "a b&c", "flag": True, "none": None}})

        assert 'src="https://nodei.co/npm/foo.png?q=a%20b%26c&flag=true&none="' in result

    def test_mapping_list_values_repeat_key(self) -> None:
        result = nodeico({"npmPackageName": "foo", "nodeicoQueryString": {"k": ["1", "2"]}})

        assert "foo.png?k=1&k=2" in result

    def test_empty_mapping_adds_no_query(self) -> None:
        result = nodeico({"npmPackageName": "foo", "nodeicoQueryString": {}})

        assert 'src="https://nodei.co/npm/foo.png"' in result

    def test_tagged_variants(self) -> None:
        raw = nodeico({"npmPackageName": "foo", "nodeicoQueryString": RawQuery("x=1")})
        params = nodeico({"npmPackageName": "foo", "nodeicoQueryString": QueryParams((("x", "1"),))})

        assert raw == params

    def test_rejects_other_types(self) -> None:
        with pytest.raises(InvalidTypeError, match="nodeicoQueryString"):
            nodeico({"npmPackageName": "foo", "nodeicoQueryString": 42})

    def test_missing_package_checked_before_query_type(self) -> None:
        with pytest.raises(MissingFieldError):
            nodeico({"nodeicoQueryString": 42})
