"""Query payload variants accepted by the nodei.co badge."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class RawQuery:
    """A literal query string, used verbatim."""

    text: str


@dataclass(frozen=True)
class QueryParams:
    """Ordered key/value pairs serialized as ``key=value&...``."""

    pairs: tuple[tuple[str, str], ...] = ()


NodeicoQuery: TypeAlias = RawQuery | QueryParams
