"""Environment provider used by generators with secret-like fields."""

from __future__ import annotations

import os

from projectbadges.types.common import Environment


def process_environment() -> Environment:
    """Return the live process environment."""
    return os.environ


def resolve_environment(env: Environment | None) -> Environment:
    """Return *env*, or the process environment when none was injected."""
    return process_environment() if env is None else env
