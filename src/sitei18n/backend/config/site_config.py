"""Configuration loader for site locales and the translation catalogue files."""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import CatalogDocument, ConfigurationError, SiteLocaleConfig

logger = logging.getLogger(__name__)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
SITE_CONFIG_FILE = CONFIG_DIRECTORY / "site.yaml"
TRANSLATIONS_PACKAGE = "sitei18n.translations"

SITE_CONFIG_ENV = "SITEI18N_SITE_CONFIG"
TRANSLATIONS_DIR_ENV = "SITEI18N_TRANSLATIONS_DIR"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def site_config_path() -> Path:
    """Return the site configuration file, honouring the environment override."""

    override = os.getenv(SITE_CONFIG_ENV)
    if override and override.strip():
        return Path(override.strip()).expanduser()
    return SITE_CONFIG_FILE


def parse_site_config(raw_config: dict[str, Any]) -> SiteLocaleConfig:
    """Validate raw configuration data into a :class:`SiteLocaleConfig`."""

    try:
        return SiteLocaleConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigurationError(f"Site configuration validation failed: {error}") from error


def read_site_config(config_file: Path) -> SiteLocaleConfig:
    """Load the site locale configuration stored at ``config_file``."""

    if not config_file.exists():
        raise FileNotFoundError(f"Site configuration not found: {config_file}")

    return parse_site_config(_load_yaml(config_file))


@lru_cache(maxsize=1)
def load_site_config() -> SiteLocaleConfig:
    """Load and cache the site locale configuration."""

    return read_site_config(site_config_path())


def _translations_directory(directory: Path | None) -> Path | None:
    if directory is not None:
        return directory
    override = os.getenv(TRANSLATIONS_DIR_ENV)
    if override and override.strip():
        return Path(override.strip()).expanduser()
    return None


def _iter_catalogue_files(directory: Path | None):
    if directory is not None:
        if not directory.is_dir():
            raise FileNotFoundError(f"Missing translations directory: {directory}")
        yield from sorted(directory.glob("*.json"))
        return

    root = resources.files(TRANSLATIONS_PACKAGE)
    yield from sorted(
        (entry for entry in root.iterdir() if entry.name.endswith(".json")),
        key=lambda entry: entry.name,
    )


def parse_catalog_document(locale: str, payload: Any) -> dict[str, dict[str, str]]:
    """Validate the shape of one locale's catalogue payload."""

    try:
        return CatalogDocument.model_validate(payload).namespaces()
    except ValidationError as error:
        raise ConfigurationError(
            f"Catalogue for locale '{locale}' is malformed: {error}"
        ) from error


def load_catalog_documents(directory: Path | None = None) -> dict[str, dict[str, dict[str, str]]]:
    """Read every ``<locale>.json`` catalogue keyed by locale code.

    Catalogues ship inside the ``sitei18n.translations`` package; ``directory``
    or the ``SITEI18N_TRANSLATIONS_DIR`` environment variable point the loader
    elsewhere.
    """

    documents: dict[str, dict[str, dict[str, str]]] = {}
    for entry in _iter_catalogue_files(_translations_directory(directory)):
        locale = entry.name[: -len(".json")]
        with entry.open("r", encoding="utf-8") as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as error:
                raise ConfigurationError(
                    f"Catalogue for locale '{locale}' is not valid JSON: {error}"
                ) from error
        documents[locale] = parse_catalog_document(locale, payload)
        logger.debug("Loaded catalogue for locale %s (%d namespaces)", locale, len(documents[locale]))

    return documents


__all__ = [
    "CONFIG_DIRECTORY",
    "SITE_CONFIG_ENV",
    "SITE_CONFIG_FILE",
    "TRANSLATIONS_DIR_ENV",
    "TRANSLATIONS_PACKAGE",
    "load_catalog_documents",
    "load_site_config",
    "parse_catalog_document",
    "parse_site_config",
    "read_site_config",
    "site_config_path",
]
