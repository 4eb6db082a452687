"""Unit coverage for localized path building and resolution."""

from __future__ import annotations

import pytest

from sitei18n.backend.domain import RouteKey
from sitei18n.backend.localization import (
    MissingTranslationKey,
    RouteTable,
    build_catalog,
    get_route_table,
)


@pytest.mark.parametrize(
    ("route_key", "expected"),
    [
        ("about", "/about"),
        ("services", "/services"),
        ("contact", "/contact"),
        ("domains", "/domains"),
        ("privacy", "/privacy"),
        ("imprint", "/impressum"),
    ],
)
def test_build_path_default_locale_has_no_prefix(
    route_table: RouteTable, route_key: str, expected: str
) -> None:
    assert route_table.build_path(route_key, "en") == expected


@pytest.mark.parametrize(
    ("route_key", "expected"),
    [
        (RouteKey.ABOUT, "/de/ueber-uns"),
        (RouteKey.SERVICES, "/de/dienstleistungen"),
        (RouteKey.CONTACT, "/de/kontakt"),
        (RouteKey.DOMAINS, "/de/domaenen"),
        (RouteKey.PRIVACY, "/de/datenschutz"),
        (RouteKey.IMPRINT, "/de/impressum"),
    ],
)
def test_build_path_prefixes_other_locales(
    route_table: RouteTable, route_key: RouteKey, expected: str
) -> None:
    assert route_table.build_path(route_key, "de") == expected


def test_build_path_home_identities(route_table: RouteTable) -> None:
    assert route_table.build_path(RouteKey.HOME, "en") == "/"
    assert route_table.build_path("home", "de") == "/de"


def test_build_path_rejects_unknown_route_key(route_table: RouteTable) -> None:
    with pytest.raises(MissingTranslationKey, match="blog"):
        route_table.build_path("blog", "en")


def test_build_path_rejects_unsupported_locale(route_table: RouteTable) -> None:
    with pytest.raises(MissingTranslationKey, match="fr"):
        route_table.build_path(RouteKey.ABOUT, "fr")


def test_built_paths_are_well_formed(route_table: RouteTable) -> None:
    for locale in route_table.catalog.locales:
        for route_key in RouteKey:
            path = route_table.build_path(route_key, locale)
            assert path.startswith("/")
            assert "//" not in path
            assert path == "/" or not path.endswith("/")


def test_round_trip_for_every_locale_and_route(route_table: RouteTable) -> None:
    for locale in route_table.catalog.locales:
        for route_key in RouteKey:
            path = route_table.build_path(route_key, locale)
            assert route_table.resolve_route_key(path) is route_key, (locale, path)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/about", RouteKey.ABOUT),
        ("/impressum", RouteKey.IMPRINT),
        ("/de/ueber-uns", RouteKey.ABOUT),
        ("/de/datenschutz", RouteKey.PRIVACY),
        ("/de/impressum", RouteKey.IMPRINT),
        ("/", RouteKey.HOME),
        ("/de", RouteKey.HOME),
        ("/en", RouteKey.HOME),
    ],
)
def test_resolve_route_key(route_table: RouteTable, path: str, expected: RouteKey) -> None:
    assert route_table.resolve_route_key(path) is expected


@pytest.mark.parametrize("path", ["/about", "/de/ueber-uns", "/de", "/unknown", "/de/kontakt"])
def test_trailing_slash_is_ignored(route_table: RouteTable, path: str) -> None:
    assert route_table.resolve_route_key(path + "/") == route_table.resolve_route_key(path)


@pytest.mark.parametrize("path", ["/unknown", "/de/unknown", "", "/de/ueber-uns-x"])
def test_unknown_paths_resolve_to_none(route_table: RouteTable, path: str) -> None:
    assert route_table.resolve_route_key(path) is None


def test_resolution_is_not_scoped_to_the_path_prefix(route_table: RouteTable) -> None:
    """A German prefix with an English slug still resolves."""

    assert route_table.resolve_route_key("/de/about") is RouteKey.ABOUT
    assert route_table.resolve_route_key("/ueber-uns") is RouteKey.ABOUT
    # The first of several segments is not checked against the locales.
    assert route_table.resolve_route_key("/xx/kontakt/extra") is RouteKey.CONTACT


def test_first_declared_route_key_wins_across_locales(
    site_config, catalog_documents
) -> None:
    """When two locales reuse a slug for different keys, declaration order decides."""

    catalog_documents["de"]["routes"]["domains"] = "contact"
    table = RouteTable(build_catalog(site_config, catalog_documents))

    # ``contact`` precedes ``domains``, so the German domains page is shadowed.
    assert table.build_path(RouteKey.DOMAINS, "de") == "/de/contact"
    assert table.resolve_route_key("/de/contact") is RouteKey.CONTACT
    assert table.resolve_route_key("/contact") is RouteKey.CONTACT


def test_list_slugs_excludes_home_and_keeps_declaration_order(
    route_table: RouteTable,
) -> None:
    assert route_table.list_slugs("de") == (
        "ueber-uns",
        "dienstleistungen",
        "kontakt",
        "domaenen",
        "datenschutz",
        "impressum",
    )
    assert route_table.list_slugs("en") == (
        "about",
        "services",
        "contact",
        "domains",
        "privacy",
        "impressum",
    )


def test_list_slugs_has_no_empty_or_duplicate_entries(route_table: RouteTable) -> None:
    for locale in route_table.catalog.locales:
        slugs = route_table.list_slugs(locale)
        assert "" not in slugs
        assert len(slugs) == len(set(slugs))


def test_list_slugs_rejects_unsupported_locale(route_table: RouteTable) -> None:
    with pytest.raises(MissingTranslationKey):
        route_table.list_slugs("fr")


@pytest.mark.parametrize(
    ("path", "target", "expected"),
    [
        ("/about", "de", "/de/ueber-uns"),
        ("/de/ueber-uns", "en", "/about"),
        ("/", "de", "/de"),
        ("/de", "en", "/"),
        ("/de/kontakt/", "en", "/contact"),
        ("/unknown", "de", "/de"),
        ("/about", "fr", "/about"),
    ],
)
def test_alternate_path_switches_language(
    route_table: RouteTable, path: str, target: str, expected: str
) -> None:
    assert route_table.alternate_path(path, target) == expected


def test_alternates_cover_every_locale(route_table: RouteTable) -> None:
    assert route_table.alternates(RouteKey.SERVICES) == {
        "en": "/services",
        "de": "/de/dienstleistungen",
    }
    assert route_table.alternates("home") == {"en": "/", "de": "/de"}


def test_static_paths_for_non_default_locales(route_table: RouteTable) -> None:
    pages = route_table.static_paths(include_default=False)

    assert {page.locale for page in pages} == {"de"}
    assert [page.slug for page in pages] == list(route_table.list_slugs("de"))
    assert pages[0].route_key is RouteKey.ABOUT
    assert pages[0].path == "/de/ueber-uns"


def test_static_paths_include_default_locale(route_table: RouteTable) -> None:
    pages = route_table.static_paths()

    assert len(pages) == 2 * (len(RouteKey) - 1)
    assert all(page.route_key is not RouteKey.HOME for page in pages)
    assert "/impressum" in {page.path for page in pages}


def test_get_route_table_uses_packaged_catalogue() -> None:
    get_route_table.cache_clear()

    table = get_route_table()

    assert table is get_route_table()
    assert table.build_path(RouteKey.ABOUT, "de") == "/de/ueber-uns"
