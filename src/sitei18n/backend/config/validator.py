"""Consistency checks for the translation catalogue and a contributor CLI."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
from typing import Mapping, Sequence

from sitei18n.backend.domain import (
    NAMESPACE_VALUES,
    ROUTE_KEY_VALUES,
    Namespace,
    RouteKey,
    is_valid_slug,
)

from .schema import ConfigurationError, SiteLocaleConfig
from .site_config import load_catalog_documents, load_site_config, read_site_config

CatalogDocuments = Mapping[str, Mapping[str, Mapping[str, str]]]


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_locale_coverage(
    config: SiteLocaleConfig, documents: CatalogDocuments
) -> list[str]:
    errors: list[str] = []

    for locale in config.locales:
        if locale not in documents:
            errors.append(_format_scope(locale, "no catalogue document found"))

    for locale in documents:
        if not config.is_valid_locale(locale):
            errors.append(
                _format_scope(locale, "catalogue document for an unconfigured locale")
            )

    return errors


def _validate_namespaces(locale: str, document: Mapping[str, Mapping[str, str]]) -> list[str]:
    errors: list[str] = []
    defined = set(document)

    missing = NAMESPACE_VALUES - defined
    if missing:
        errors.append(_format_scope(locale, f"missing namespaces {sorted(missing)}"))

    unexpected = defined - NAMESPACE_VALUES
    if unexpected:
        errors.append(_format_scope(locale, f"unexpected namespaces {sorted(unexpected)}"))

    return errors


def _validate_keys(
    base_locale: str, documents: CatalogDocuments
) -> list[str]:
    """Compare every locale's key sets against the base locale."""

    errors: list[str] = []
    base = documents[base_locale]

    for locale, document in documents.items():
        if locale == base_locale:
            continue
        for namespace, messages in base.items():
            if namespace not in document:
                continue
            expected = set(messages)
            actual = set(document[namespace])
            missing = expected - actual
            if missing:
                errors.append(
                    _format_scope(
                        f"{locale}.{namespace}",
                        f"missing {len(missing)} key(s): {', '.join(sorted(missing))}",
                    )
                )
            extra = actual - expected
            if extra:
                errors.append(
                    _format_scope(
                        f"{locale}.{namespace}",
                        f"{len(extra)} key(s) not defined for '{base_locale}': "
                        f"{', '.join(sorted(extra))}",
                    )
                )

    return errors


def _validate_routes(locale: str, routes: Mapping[str, str]) -> list[str]:
    errors: list[str] = []
    scope = f"{locale}.{Namespace.ROUTES.value}"

    missing = ROUTE_KEY_VALUES - set(routes)
    if missing:
        errors.append(_format_scope(scope, f"missing route keys {sorted(missing)}"))

    unknown = set(routes) - ROUTE_KEY_VALUES
    if unknown:
        errors.append(_format_scope(scope, f"unknown route keys {sorted(unknown)}"))

    home_slug = routes.get(RouteKey.HOME.value)
    if home_slug is not None and home_slug != "":
        errors.append(
            _format_scope(scope, f"home route slug must be empty, found '{home_slug}'")
        )

    slugs: list[str] = []
    for route_key, slug in routes.items():
        if route_key == RouteKey.HOME.value:
            continue
        if not slug:
            errors.append(_format_scope(scope, f"route '{route_key}' has an empty slug"))
            continue
        if not is_valid_slug(slug):
            errors.append(
                _format_scope(scope, f"route '{route_key}' has an invalid slug '{slug}'")
            )
        slugs.append(slug)

    collisions = sorted(slug for slug, count in Counter(slugs).items() if count > 1)
    for slug in collisions:
        owners = sorted(key for key, value in routes.items() if value == slug)
        errors.append(
            _format_scope(
                scope,
                f"slug '{slug}' is shared by route keys {owners}",
            )
        )

    return errors


def find_catalog_issues(
    config: SiteLocaleConfig, documents: CatalogDocuments
) -> list[str]:
    """Return every structural problem of ``documents``; empty when well-formed."""

    errors: list[str] = []

    errors.extend(_validate_locale_coverage(config, documents))

    for locale, document in documents.items():
        errors.extend(_validate_namespaces(locale, document))
        routes = document.get(Namespace.ROUTES.value)
        if routes is not None:
            errors.extend(_validate_routes(locale, routes))

    base_locale = config.default_locale
    if base_locale in documents:
        errors.extend(_validate_keys(base_locale, documents))

    return errors


def find_catalog_warnings(
    config: SiteLocaleConfig, documents: CatalogDocuments
) -> list[str]:
    """Report ambiguous but structurally valid catalogue entries.

    A route slug equal to a locale code cannot be told apart from a locale
    prefix when a path is resolved.
    """

    warnings: list[str] = []
    for locale, document in documents.items():
        routes = document.get(Namespace.ROUTES.value) or {}
        for route_key, slug in routes.items():
            if slug and config.is_valid_locale(slug):
                warnings.append(
                    _format_scope(
                        f"{locale}.{Namespace.ROUTES.value}",
                        f"slug '{slug}' of route '{route_key}' equals a locale code",
                    )
                )
    return warnings


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Validate the translation catalogue and report issues helpful to contributors."
        )
    )
    parser.add_argument(
        "--translations-dir",
        type=Path,
        default=None,
        help="Directory containing <locale>.json catalogues (defaults to the packaged ones)",
    )
    parser.add_argument(
        "--site-config",
        type=Path,
        default=None,
        help="Site locale configuration YAML (defaults to the packaged site.yaml)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with an error when warnings are reported",
    )
    parser.add_argument(
        "--list-paths",
        action="store_true",
        help="Print every page path that needs to be pre-rendered",
    )
    return parser


def _load_config(path: Path | None) -> SiteLocaleConfig:
    if path is None:
        return load_site_config()
    return read_site_config(path)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running catalogue validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_config(args.site_config)
        documents = load_catalog_documents(args.translations_dir)
    except (ConfigurationError, FileNotFoundError) as error:
        print(f"[error] failed to load catalogue: {error}")
        return 1

    issues = find_catalog_issues(config, documents)
    warnings = find_catalog_warnings(config, documents)

    for issue in issues:
        print(f"[issue] {issue}")
    for warning in warnings:
        print(f"[warning] {warning}")

    if issues:
        print(f"{len(issues)} issue(s) detected")
        return 1

    if args.list_paths:
        from sitei18n.backend.localization import RouteTable, build_catalog

        table = RouteTable(build_catalog(config, documents))
        for locale in config.locales:
            print(table.build_path(RouteKey.HOME, locale))
        for page in table.static_paths():
            print(page.path)

    if warnings and args.strict:
        return 1

    print("OK")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
