"""Test configuration utilities and shared fixtures."""

import copy
import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from sitei18n.backend.app import create_app  # noqa: E402
from sitei18n.backend.config.schema import SiteLocaleConfig  # noqa: E402
from sitei18n.backend.config.site_config import (  # noqa: E402
    load_catalog_documents,
    load_site_config,
)
from sitei18n.backend.localization import (  # noqa: E402
    RouteTable,
    TranslationCatalog,
    build_catalog,
)


@pytest.fixture()
def site_config() -> SiteLocaleConfig:
    """Return the packaged site locale configuration."""

    return load_site_config()


@pytest.fixture()
def catalog_documents() -> dict:
    """Return a mutable copy of the packaged catalogue documents."""

    return copy.deepcopy(load_catalog_documents())


@pytest.fixture()
def catalog(site_config: SiteLocaleConfig, catalog_documents: dict) -> TranslationCatalog:
    return build_catalog(site_config, catalog_documents)


@pytest.fixture()
def route_table(catalog: TranslationCatalog) -> RouteTable:
    return RouteTable(catalog)


@pytest.fixture()
def app(catalog: TranslationCatalog) -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app(catalog)
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
