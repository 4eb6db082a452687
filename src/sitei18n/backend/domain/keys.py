"""Closed sets of identifiers shared by the catalogue and the router."""

from __future__ import annotations

from enum import Enum


class RouteKey(str, Enum):
    """Locale-independent identifier of a logical page.

    Members are declared in navigation order; the ``routes`` namespace of every
    catalogue document must define exactly these keys.
    """

    HOME = "home"
    ABOUT = "about"
    SERVICES = "services"
    CONTACT = "contact"
    DOMAINS = "domains"
    PRIVACY = "privacy"
    IMPRINT = "imprint"


class Namespace(str, Enum):
    """Named group of translation keys within a locale catalogue."""

    NAV = "nav"
    UI = "ui"
    FOOTER = "footer"
    ROUTES = "routes"
    SECTIONS = "sections"


ROUTE_KEY_VALUES: frozenset[str] = frozenset(member.value for member in RouteKey)
NAMESPACE_VALUES: frozenset[str] = frozenset(member.value for member in Namespace)


__all__ = ["NAMESPACE_VALUES", "Namespace", "ROUTE_KEY_VALUES", "RouteKey"]
