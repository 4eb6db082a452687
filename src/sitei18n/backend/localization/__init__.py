"""Translation catalogue and localized routing shared by the API and site builds."""

from .catalog import (
    MissingTranslationKey,
    TranslationCatalog,
    Translator,
    build_catalog,
    get_catalog,
    get_translator,
    load_catalog,
    load_translations,
)
from .paths import RouteTable, StaticPage, get_route_table

__all__ = [
    "MissingTranslationKey",
    "RouteTable",
    "StaticPage",
    "TranslationCatalog",
    "Translator",
    "build_catalog",
    "get_catalog",
    "get_route_table",
    "get_translator",
    "load_catalog",
    "load_translations",
]
