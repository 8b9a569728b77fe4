"""Tests for loading badges.yaml files."""

from __future__ import annotations

from pathlib import Path

import pytest

from projectbadges.config import BadgesConfig, load_config
from projectbadges.exceptions import ConfigError
from projectbadges.rendering import BadgeEntry, RenderOptions, render_badges

EXAMPLE_CONFIG = """\
badges:
  - npmversion
  - "---"
  - shields: {left: build, right: passing}
fields:
  npmPackageName: foo
options:
  category: development
  exclude_scripts: true
"""


def _write(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "badges.yaml"
    config_path.write_text(content, encoding="utf-8")
    return config_path


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    assert load_config(tmp_path) == BadgesConfig()


def test_load_config_explicit_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "other.yaml")


def test_load_config_reads_default_filename(tmp_path: Path) -> None:
    _write(tmp_path, EXAMPLE_CONFIG)

    loaded = load_config(tmp_path)

    assert loaded.entries == (
        BadgeEntry("npmversion"),
        BadgeEntry("---"),
        BadgeEntry("shields", {"left": "build", "right": "passing"}),
    )
    assert loaded.fields == {"npmPackageName": "foo"}
    assert loaded.options == RenderOptions(category="development", exclude_scripts=True)


def test_loaded_config_renders(tmp_path: Path) -> None:
    loaded = load_config(tmp_path, _write(tmp_path, EXAMPLE_CONFIG))

    result = render_badges(loaded.entries, loaded.fields, RenderOptions())

    assert result.split("\n")[0].startswith('<span class="badge-npmversion">')
    assert result.split("\n")[1] == '<br class="badge-separator" />'
    assert "build-passing-yellow.svg" in result


def test_load_config_empty_file(tmp_path: Path) -> None:
    assert load_config(tmp_path, _write(tmp_path, "")) == BadgesConfig()


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(tmp_path, _write(tmp_path, "badges: [unclosed\n"))


def test_load_config_unknown_badge_suggests(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="did you mean 'travisci'"):
        load_config(tmp_path, _write(tmp_path, "badges:\n  - travisic\n"))


def test_load_config_unknown_key_suggests(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="did you mean 'fields'"):
        load_config(tmp_path, _write(tmp_path, "feilds: {}\n"))


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("- npmversion\n", "must be a YAML mapping"),
        ("badges: npmversion\n", "badges must be a list"),
        ("fields: [a]\n", "fields must be a mapping"),
        ("options: [a]\n", "options must be a mapping"),
        ("options:\n  category: misc\n", "options.category"),
        ("options:\n  exclude_scripts: maybe\n", "options.exclude_scripts"),
        ("options:\n  inline_only: 1\n", "options.inline_only"),
        ("options:\n  inline: true\n", "unknown key options.inline"),
        ("badges:\n  - {shields: {}, npmversion: {}}\n", "single-key mapping"),
        ("badges:\n  - shields: [a]\n", "overrides must be a mapping"),
        ("badges:\n  - 3\n", "must be a badge name"),
    ],
    ids=[
        "non_mapping",
        "badges_not_list",
        "fields_not_mapping",
        "options_not_mapping",
        "invalid_category",
        "non_bool_exclude_scripts",
        "non_bool_inline_only",
        "unknown_option",
        "multi_key_entry",
        "non_mapping_overrides",
        "non_string_entry",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path, _write(tmp_path, yaml_content))


def test_entry_with_null_overrides(tmp_path: Path) -> None:
    loaded = load_config(tmp_path, _write(tmp_path, "badges:\n  - npmversion:\n"))

    assert loaded.entries == (BadgeEntry("npmversion"),)
