"""Localized route lookups for navigation menus and language switchers."""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, jsonify, request
from werkzeug.exceptions import BadRequest

from sitei18n.backend.app.http import current_route_table, problem_response
from sitei18n.backend.domain import Namespace, RouteKey, is_internal_path

blueprint = Blueprint("routes", __name__, url_prefix="/api/v1/routes")

logger = logging.getLogger(__name__)


@blueprint.get("/resolve")
def resolve_path():
    """Map a site path back to its route key and every localized alternate."""

    path = request.args.get("path")
    if not path:
        raise BadRequest("Query parameter 'path' is required")
    if not is_internal_path(path):
        raise BadRequest("Query parameter 'path' must be a site-relative path")

    table = current_route_table()
    route_key = table.resolve_route_key(path)
    if route_key is None:
        logger.debug("No route matches path %s", path)
        return problem_response(
            "not_found", status=404, message=f"No route matches '{path}'", path=path
        ).to_response()

    payload: dict[str, Any] = {
        "path": path,
        "route_key": route_key.value,
        "alternates": table.alternates(route_key),
    }

    locale_hint = request.args.get("locale")
    if locale_hint is not None:
        locale = table.catalog.resolve_locale(locale_hint)
        payload["locale"] = locale
        payload["alternate_path"] = table.build_path(route_key, locale)

    return jsonify(payload), 200


@blueprint.get("/<locale>")
def list_routes(locale: str):
    """Return the localized navigation entries and slugs of ``locale``."""

    table = current_route_table()
    catalog = table.catalog
    resolved = catalog.resolve_locale(locale)
    labels = catalog.get_namespace(resolved, Namespace.NAV)

    routes = []
    for route_key in catalog.route_keys:
        routes.append(
            {
                "route_key": route_key.value,
                "slug": catalog.route_slug(resolved, route_key),
                "path": table.build_path(route_key, resolved),
                "label": labels.get(route_key.value),
            }
        )

    return (
        jsonify(
            {
                "locale": resolved,
                "home": table.build_path(RouteKey.HOME, resolved),
                "slugs": list(table.list_slugs(resolved)),
                "routes": routes,
            }
        ),
        200,
    )
