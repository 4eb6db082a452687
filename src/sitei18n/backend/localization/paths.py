"""Bidirectional mapping between route keys and localized URL paths."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from sitei18n.backend.domain import Namespace, RouteKey

from .catalog import MissingTranslationKey, TranslationCatalog, coerce_route_key, get_catalog


@dataclass(frozen=True)
class StaticPage:
    """A localized page the static site generator has to pre-render."""

    locale: str
    route_key: RouteKey
    slug: str
    path: str


def _normalise_path(path: str) -> str:
    """Drop a single trailing slash, keeping the root path intact."""

    if path == "/":
        return path
    return path[:-1] if path.endswith("/") else path


class RouteTable:
    """Builds and resolves localized paths for a :class:`TranslationCatalog`.

    The default locale is never used as a path prefix: ``about`` maps to
    ``/about`` in the default locale and to ``/de/ueber-uns`` in ``de``.
    """

    def __init__(self, catalog: TranslationCatalog) -> None:
        self._catalog = catalog
        self._home_paths = frozenset({"/", *(f"/{locale}" for locale in catalog.locales)})

        # First route key (declaration order) owning the slug in any locale wins.
        index: dict[str, RouteKey] = {}
        for route_key in catalog.route_keys:
            for locale in catalog.locales:
                slug = catalog.route_slug(locale, route_key)
                if slug:
                    index.setdefault(slug, route_key)
        self._slug_index: Mapping[str, RouteKey] = MappingProxyType(index)

        self._slugs: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {
                locale: tuple(
                    slug
                    for key, slug in catalog.get_namespace(locale, Namespace.ROUTES).items()
                    if key != RouteKey.HOME.value
                )
                for locale in catalog.locales
            }
        )

    @property
    def catalog(self) -> TranslationCatalog:
        return self._catalog

    def _require_locale(self, locale: str) -> str:
        if not self._catalog.is_valid_locale(locale):
            raise MissingTranslationKey(f"Unsupported locale '{locale}'")
        return locale

    def build_path(self, route_key: RouteKey | str, locale: str) -> str:
        """Return the absolute path of ``route_key`` in ``locale``."""

        key = coerce_route_key(route_key)
        locale = self._require_locale(locale)
        is_default = locale == self._catalog.default_locale

        if key is RouteKey.HOME:
            return "/" if is_default else f"/{locale}"

        slug = self._catalog.route_slug(locale, key)
        return f"/{slug}" if is_default else f"/{locale}/{slug}"

    def resolve_route_key(self, path: str) -> RouteKey | None:
        """Return the route key addressed by ``path`` or ``None`` when unknown.

        The slug is matched against the route tables of every locale, so the
        locale prefix of ``path`` does not restrict the match. With two or more
        segments the first one is taken to be a locale prefix without checking
        it against the configured locales.
        """

        normalised = _normalise_path(path)
        if normalised in self._home_paths:
            return RouteKey.HOME

        segments = [segment for segment in normalised.split("/") if segment]
        if not segments:
            return None

        candidate = segments[0] if len(segments) == 1 else segments[1]
        return self._slug_index.get(candidate)

    def list_slugs(self, locale: str) -> tuple[str, ...]:
        """Return every non-home slug of ``locale`` in declaration order."""

        return self._slugs[self._require_locale(locale)]

    def alternate_path(self, path: str, target_locale: str | None) -> str:
        """Translate ``path`` into ``target_locale`` for a language switcher.

        Unknown paths switch to the target locale's home page.
        """

        locale = self._catalog.resolve_locale(target_locale)
        route_key = self.resolve_route_key(path)
        return self.build_path(route_key or RouteKey.HOME, locale)

    def alternates(self, route_key: RouteKey | str) -> dict[str, str]:
        """Return ``locale -> path`` for every locale, e.g. for hreflang links."""

        return {locale: self.build_path(route_key, locale) for locale in self._catalog.locales}

    def static_paths(self, include_default: bool = True) -> tuple[StaticPage, ...]:
        """Return every non-home page to pre-render, grouped by locale."""

        locales = (
            self._catalog.locales if include_default else self._catalog.config.non_default_locales
        )
        pages: list[StaticPage] = []
        for locale in locales:
            for route_key in self._catalog.route_keys:
                if route_key is RouteKey.HOME:
                    continue
                pages.append(
                    StaticPage(
                        locale=locale,
                        route_key=route_key,
                        slug=self._catalog.route_slug(locale, route_key),
                        path=self.build_path(route_key, locale),
                    )
                )
        return tuple(pages)


@lru_cache(maxsize=1)
def get_route_table() -> RouteTable:
    """Return the route table of the packaged catalogue."""

    return RouteTable(get_catalog())


__all__ = ["RouteTable", "StaticPage", "get_route_table"]
