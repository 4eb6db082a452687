"""Immutable translation catalogue and the accessors built on top of it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from sitei18n.backend.config.schema import CatalogInconsistency, SiteLocaleConfig
from sitei18n.backend.config.site_config import (
    load_catalog_documents,
    load_site_config,
    parse_catalog_document,
)
from sitei18n.backend.config.validator import find_catalog_issues, find_catalog_warnings
from sitei18n.backend.domain import Namespace, RouteKey

logger = logging.getLogger(__name__)


class MissingTranslationKey(LookupError):
    """Raised when a locale, namespace, key or route key is not in the catalogue."""


def _coerce_namespace(namespace: Namespace | str) -> str:
    try:
        return Namespace(namespace).value
    except ValueError as error:
        raise MissingTranslationKey(f"Unknown translation namespace '{namespace}'") from error


def coerce_route_key(route_key: RouteKey | str) -> RouteKey:
    try:
        return RouteKey(route_key)
    except ValueError as error:
        raise MissingTranslationKey(f"Unknown route key '{route_key}'") from error


@dataclass(frozen=True, eq=False)
class TranslationCatalog:
    """Read-only ``locale -> namespace -> key -> message`` table.

    Instances are produced by :func:`build_catalog`, which guarantees that every
    locale defines the same namespaces and keys and that route slugs are unique
    per locale.
    """

    config: SiteLocaleConfig
    _messages: Mapping[str, Mapping[str, Mapping[str, str]]]

    @property
    def default_locale(self) -> str:
        return self.config.default_locale

    @property
    def locales(self) -> tuple[str, ...]:
        return self.config.locales

    @property
    def route_keys(self) -> tuple[RouteKey, ...]:
        """Route keys in the declaration order of the default catalogue."""

        routes = self._messages[self.default_locale][Namespace.ROUTES.value]
        return tuple(RouteKey(key) for key in routes)

    def is_valid_locale(self, value: object) -> bool:
        return self.config.is_valid_locale(value)

    def resolve_locale(self, value: object) -> str:
        return self.config.resolve_locale(value)

    def _locale_messages(self, locale: str) -> Mapping[str, Mapping[str, str]]:
        try:
            return self._messages[locale]
        except KeyError as error:
            raise MissingTranslationKey(f"Unsupported locale '{locale}'") from error

    def get_namespace(self, locale: str, namespace: Namespace | str) -> Mapping[str, str]:
        """Return every ``key -> message`` pair of ``namespace`` in declaration order."""

        return self._locale_messages(locale)[_coerce_namespace(namespace)]

    def translate(self, locale: str, namespace: Namespace | str, key: str) -> str:
        """Return a single message, failing fast when it is not defined."""

        messages = self.get_namespace(locale, namespace)
        try:
            return messages[key]
        except KeyError as error:
            raise MissingTranslationKey(
                f"Missing translation '{_coerce_namespace(namespace)}.{key}' "
                f"for locale '{locale}'"
            ) from error

    def route_slug(self, locale: str, route_key: RouteKey | str) -> str:
        """Return the URL segment of ``route_key`` in ``locale`` (empty for home)."""

        return self.translate(locale, Namespace.ROUTES, coerce_route_key(route_key).value)


def _freeze(
    documents: Mapping[str, Mapping[str, Mapping[str, str]]],
    locales: tuple[str, ...],
) -> Mapping[str, Mapping[str, Mapping[str, str]]]:
    return MappingProxyType(
        {
            locale: MappingProxyType(
                {
                    namespace: MappingProxyType(dict(messages))
                    for namespace, messages in documents[locale].items()
                }
            )
            for locale in locales
        }
    )


def build_catalog(
    config: SiteLocaleConfig,
    documents: Mapping[str, Any],
) -> TranslationCatalog:
    """Validate raw catalogue documents and return an immutable catalogue.

    Raises :class:`CatalogInconsistency` listing every detected problem; a
    catalogue that violates its invariants is never constructed.
    """

    parsed = {
        locale: parse_catalog_document(locale, payload)
        for locale, payload in documents.items()
    }

    issues = find_catalog_issues(config, parsed)
    if issues:
        raise CatalogInconsistency(issues)

    for warning in find_catalog_warnings(config, parsed):
        logger.warning("Ambiguous catalogue entry: %s", warning)

    return TranslationCatalog(config=config, _messages=_freeze(parsed, config.locales))


def load_catalog(
    config: SiteLocaleConfig | None = None,
    directory: Path | None = None,
) -> TranslationCatalog:
    """Read the catalogue documents from disk and build a catalogue."""

    site_config = config or load_site_config()
    catalog = build_catalog(site_config, load_catalog_documents(directory))
    logger.debug("Translation catalogue ready for locales %s", ", ".join(catalog.locales))
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> TranslationCatalog:
    """Return the catalogue built from the packaged configuration."""

    return load_catalog()


@dataclass(frozen=True)
class Translator:
    """Callable helper for retrieving localized strings of one locale."""

    locale: str
    catalog: TranslationCatalog

    def __call__(self, namespace: Namespace | str, key: str) -> str:
        return self.catalog.translate(self.locale, namespace, key)

    def namespace(self, namespace: Namespace | str) -> Mapping[str, str]:
        return self.catalog.get_namespace(self.locale, namespace)


def get_translator(
    locale: str | None = None, catalog: TranslationCatalog | None = None
) -> Translator:
    """Return a translator for ``locale``, falling back to the default locale."""

    active = catalog or get_catalog()
    return Translator(locale=active.resolve_locale(locale), catalog=active)


def load_translations(
    locale: str | None = None, catalog: TranslationCatalog | None = None
) -> dict[str, Any]:
    """Expose a locale's catalogue together with locale metadata for API consumers."""

    active = catalog or get_catalog()
    resolved = active.resolve_locale(locale)
    messages = {
        namespace.value: dict(active.get_namespace(resolved, namespace))
        for namespace in Namespace
    }

    return {
        "locale": resolved,
        "default_locale": active.default_locale,
        "available_locales": list(active.locales),
        "locale_names": dict(active.config.locale_names),
        "date_format": active.config.date_format(resolved),
        "messages": messages,
    }


__all__ = [
    "MissingTranslationKey",
    "coerce_route_key",
    "TranslationCatalog",
    "Translator",
    "build_catalog",
    "get_catalog",
    "get_translator",
    "load_catalog",
    "load_translations",
]
