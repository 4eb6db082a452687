"""URL slug, internal path and link URL value helpers."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

# Lowercase words separated by single hyphens, e.g. ``ueber-uns``.
SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

_INTERNAL_PATH_PATTERN = re.compile(r"^/(?!/)")
_WHITESPACE_PATTERN = re.compile(r"\s")
_HTTP_SCHEMES = frozenset({"http", "https"})


def is_valid_slug(value: object) -> bool:
    """Return ``True`` when ``value`` is a well-formed URL slug."""

    return isinstance(value, str) and SLUG_PATTERN.match(value) is not None


def to_slug(value: str) -> str:
    """Best-effort conversion of free text (e.g. a page title) into a slug."""

    slug = value.strip().lower()
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def assert_slug(value: object, message: str = "Invalid slug") -> str:
    """Return ``value`` unchanged or raise ``ValueError`` if it is not a slug."""

    if not is_valid_slug(value):
        raise ValueError(message)
    return value  # type: ignore[return-value]


def is_internal_path(value: object) -> bool:
    """Return ``True`` for site-relative paths such as ``/de/kontakt``.

    Protocol-relative URLs (``//host``) and values containing whitespace are
    rejected.
    """

    if not isinstance(value, str):
        return False
    if _WHITESPACE_PATTERN.search(value):
        return False
    return _INTERNAL_PATH_PATTERN.match(value) is not None


def is_http_url(value: object) -> bool:
    """Return ``True`` for absolute ``http``/``https`` URLs with a host."""

    if not isinstance(value, str) or _WHITESPACE_PATTERN.search(value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return parts.scheme in _HTTP_SCHEMES and bool(parts.hostname)


def is_valid_url(value: object) -> bool:
    """Return ``True`` for link targets allowed in content.

    Only internal paths and absolute http(s) URLs qualify; ``javascript:``,
    ``data:`` and other schemes are rejected.
    """

    return is_internal_path(value) or is_http_url(value)


def assert_url(value: object, message: str = "Invalid URL") -> str:
    if not is_valid_url(value):
        raise ValueError(message)
    return value  # type: ignore[return-value]


__all__ = [
    "SLUG_PATTERN",
    "assert_slug",
    "assert_url",
    "is_http_url",
    "is_internal_path",
    "is_valid_slug",
    "is_valid_url",
    "to_slug",
]
