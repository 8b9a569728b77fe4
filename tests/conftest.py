"""Shared pytest fixtures for badge generation tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def empty_env() -> dict[str, str]:
    """Return an injected environment with no variables set."""
    return {}


@pytest.fixture
def github_fields() -> dict[str, str]:
    """Return fields describing a typical GitHub hosted npm project."""
    return {
        "githubSlug": "bevry/badges",
        "npmPackageName": "badges",
        "homepage": "https://github.com/bevry/badges",
    }
