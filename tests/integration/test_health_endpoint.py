"""Integration tests for application endpoints."""

import json
import logging
from http import HTTPStatus

import pytest
from flask.testing import FlaskClient

from sitei18n.backend.app import create_app
from sitei18n.backend.config.schema import CatalogInconsistency
from sitei18n.backend.localization import get_catalog
from sitei18n.backend.version import get_project_version


def test_health_endpoint(client: FlaskClient) -> None:
    """Ensure the health endpoint returns a successful status payload."""
    response = client.get("/health")
    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()
    assert payload["status"] == "ok"
    assert payload["version"] == get_project_version()
    assert payload["default_locale"] == "en"
    assert payload["locales"] == ["en", "de"]
    assert response.mimetype == "application/json"


def test_create_app_defaults_to_packaged_catalogue() -> None:
    app = create_app()

    assert app.extensions["sitei18n"].catalog is get_catalog()


def test_create_app_aborts_on_inconsistent_catalogue(
    tmp_path, monkeypatch: pytest.MonkeyPatch, catalog_documents
) -> None:
    catalog_documents["de"]["routes"]["about"] = "kontakt"
    for locale, payload in catalog_documents.items():
        tmp_path.joinpath(f"{locale}.json").write_text(json.dumps(payload), encoding="utf-8")
    monkeypatch.setenv("SITEI18N_TRANSLATIONS_DIR", str(tmp_path))
    get_catalog.cache_clear()

    try:
        with pytest.raises(CatalogInconsistency):
            create_app()
    finally:
        get_catalog.cache_clear()


@pytest.fixture()
def package_logger():
    logger = logging.getLogger("sitei18n")
    original = logger.level
    yield logger
    logger.setLevel(original)


def test_create_app_applies_log_level_from_environment(
    monkeypatch: pytest.MonkeyPatch, catalog, package_logger: logging.Logger
) -> None:
    monkeypatch.setenv("SITEI18N_LOG_LEVEL", "debug")

    create_app(catalog)

    assert package_logger.level == logging.DEBUG


def test_create_app_ignores_unknown_log_level(
    monkeypatch: pytest.MonkeyPatch,
    catalog,
    package_logger: logging.Logger,
    caplog: pytest.LogCaptureFixture,
) -> None:
    package_logger.setLevel(logging.INFO)
    monkeypatch.setenv("SITEI18N_LOG_LEVEL", "verbose")

    with caplog.at_level(logging.WARNING, logger="sitei18n.backend.app"):
        app = create_app(catalog)

    assert app.extensions["sitei18n"].catalog is catalog
    assert package_logger.level == logging.INFO
    assert "Ignoring unknown SITEI18N_LOG_LEVEL value 'verbose'" in caplog.text
