"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Literal, TypeAlias

BadgeCategory: TypeAlias = Literal["custom", "development", "testing", "funding", "social"]

BadgeConfig: TypeAlias = Mapping[str, Any]
Environment: TypeAlias = Mapping[str, str]
Generator: TypeAlias = Callable[..., str]
