"""Expose translation catalogues to front-end consumers."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from sitei18n.backend.app.http import current_route_table
from sitei18n.backend.localization import load_translations

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")


@blueprint.get("/")
def get_default_translations():
    """Return translations for the requested or default locale."""

    catalog = current_route_table().catalog
    payload = load_translations(request.args.get("locale"), catalog=catalog)
    return jsonify(payload), 200


@blueprint.get("/<locale>")
def get_locale_translations(locale: str):
    """Return translations for a specific locale; unknown locales fall back."""

    catalog = current_route_table().catalog
    payload = load_translations(locale, catalog=catalog)
    return jsonify(payload), 200
