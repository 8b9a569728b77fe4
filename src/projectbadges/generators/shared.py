"""Validation and escaping helpers shared by every generator module."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote, urlencode

from projectbadges.constants.badges import LEGACY_ESCAPE_SAFE, QUERY_COMPONENT_SAFE
from projectbadges.environment import resolve_environment
from projectbadges.exceptions import InvalidTypeError, MissingFieldError
from projectbadges.types.common import BadgeConfig, Environment
from projectbadges.types.query import NodeicoQuery, QueryParams, RawQuery


def require(config: BadgeConfig, field: str) -> Any:
    """Return *field* from *config*, raising ``MissingFieldError`` when absent or empty."""
    value = config.get(field)
    if not value:
        raise MissingFieldError(field)
    return value


def first_present(config: BadgeConfig, *fields: str) -> tuple[str, Any] | None:
    """Return ``(field, value)`` for the first present field, or ``None``."""
    for field in fields:
        value = config.get(field)
        if value:
            return field, value
    return None


def env_fallback(config: BadgeConfig, field: str, env_key: str, env: Environment | None) -> Any:
    """Return *field* from *config*, falling back to *env_key* in the environment."""
    value = config.get(field)
    if value:
        return value
    value = resolve_environment(env).get(env_key)
    if not value:
        raise MissingFieldError(field)
    return value


def escape(value: Any) -> str:
    """Percent-encode *value* like the legacy JavaScript ``escape()``.

    Latin-1 characters become ``%XX``; anything wider becomes ``%uXXXX`` per
    UTF-16 code unit, so astral characters yield a surrogate pair.
    """
    encoded: list[str] = []
    for char in str(value):
        code = ord(char)
        if (char.isascii() and char.isalnum()) or char in LEGACY_ESCAPE_SAFE:
            encoded.append(char)
        elif code < 0x100:
            encoded.append(f"%{code:02X}")
        elif code < 0x10000:
            encoded.append(f"%u{code:04X}")
        else:
            code -= 0x10000
            encoded.append(f"%u{0xD800 + (code >> 10):04X}%u{0xDC00 + (code & 0x3FF):04X}")
    return "".join(encoded)


def coerce_query(field: str, value: Any) -> NodeicoQuery | None:
    """Convert a string or mapping query payload into a ``NodeicoQuery``."""
    if not value:
        return None
    if isinstance(value, (RawQuery, QueryParams)):
        return value
    if isinstance(value, str):
        return RawQuery(value)
    if isinstance(value, Mapping):
        pairs: list[tuple[str, str]] = []
        for key, item in value.items():
            if isinstance(item, (list, tuple)):
                pairs.extend((str(key), _query_scalar(element)) for element in item)
            else:
                pairs.append((str(key), _query_scalar(item)))
        return QueryParams(tuple(pairs))
    raise InvalidTypeError(field, value, "a string or a mapping")


def serialize_query(query: NodeicoQuery | None) -> str:
    """Render a ``NodeicoQuery`` as the text that follows ``?``."""
    match query:
        case None:
            return ""
        case RawQuery(text=text):
            return text
        case QueryParams(pairs=pairs):
            return urlencode(pairs, quote_via=quote, safe=QUERY_COMPONENT_SAFE)
    raise InvalidTypeError("query", query, "a RawQuery or QueryParams")


def _query_scalar(value: Any) -> str:
    """Stringify one query value the way Node's querystring does."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def resolve_link(
    config: BadgeConfig,
    url_field: str,
    *candidates: tuple[str, Callable[[Any], str]],
) -> str:
    """Resolve a link from an explicit URL field or the first present identifier.

    Each candidate pairs an identifier field with the function that builds the
    link from its value. Raises ``MissingFieldError`` naming every candidate
    field when none is present.
    """
    explicit = config.get(url_field)
    if explicit:
        return explicit
    for field, build in candidates:
        value = config.get(field)
        if value:
            return build(value)
    raise MissingFieldError(*(field for field, _ in candidates))
