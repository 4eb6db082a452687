"""Framework-free value types used by the localisation layer."""

from .keys import NAMESPACE_VALUES, ROUTE_KEY_VALUES, Namespace, RouteKey
from .slug import (
    assert_slug,
    assert_url,
    is_http_url,
    is_internal_path,
    is_valid_slug,
    is_valid_url,
    to_slug,
)

__all__ = [
    "NAMESPACE_VALUES",
    "Namespace",
    "ROUTE_KEY_VALUES",
    "RouteKey",
    "assert_slug",
    "assert_url",
    "is_http_url",
    "is_internal_path",
    "is_valid_slug",
    "is_valid_url",
    "to_slug",
]
