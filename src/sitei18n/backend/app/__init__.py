"""Application factory for the localisation API."""

from __future__ import annotations

import logging
import os

from flask import Flask, jsonify
from werkzeug.exceptions import BadRequest, NotFound

from sitei18n.backend.localization import (
    MissingTranslationKey,
    RouteTable,
    TranslationCatalog,
    get_catalog,
)
from sitei18n.backend.version import get_project_version

from .http import EXTENSION_KEY, problem_response
from .routes import register_routes

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "SITEI18N_LOG_LEVEL"


def _configure_log_level(value: str | None) -> None:
    if not value:
        return
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        logger.warning("Ignoring unknown %s value %r", LOG_LEVEL_ENV, value)
        return
    logging.getLogger("sitei18n").setLevel(level)


def create_app(catalog: TranslationCatalog | None = None) -> Flask:
    """Create and configure the Flask application instance.

    The catalogue is built (and validated) here, so an inconsistent catalogue
    aborts start-up instead of failing individual requests.
    """

    app = Flask(__name__)
    app.json.ensure_ascii = False  # type: ignore[attr-defined]

    _configure_log_level(os.getenv(LOG_LEVEL_ENV))

    route_table = RouteTable(catalog or get_catalog())
    app.extensions[EXTENSION_KEY] = route_table
    logger.info(
        "Serving locales %s (default %s)",
        ", ".join(route_table.catalog.locales),
        route_table.catalog.default_locale,
    )

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        active = route_table.catalog
        return jsonify(
            {
                "status": "ok",
                "version": get_project_version(),
                "default_locale": active.default_locale,
                "locales": list(active.locales),
            }
        )

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed requests."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    @app.errorhandler(NotFound)
    def handle_not_found(error: NotFound):
        return problem_response("not_found", status=404, message=error.description).to_response()

    @app.errorhandler(MissingTranslationKey)
    def handle_missing_key(error: MissingTranslationKey):
        """Surface lookups of undefined catalogue entries as 404 problems."""

        return problem_response("not_found", status=404, message=str(error)).to_response()

    return app
