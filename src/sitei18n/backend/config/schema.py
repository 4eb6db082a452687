"""Pydantic models describing the site locale configuration and catalogues."""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from collections.abc import Mapping
from typing import Any, Sequence

from pydantic import (
    BaseModel,
    ConfigDict,
    PrivateAttr,
    RootModel,
    computed_field,
    field_serializer,
    field_validator,
    model_validator,
)

logger = logging.getLogger(__name__)

LOCALE_CODE_PATTERN = re.compile(r"^[a-z]{2,3}(?:-[a-z0-9]+)*$")


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class CatalogInconsistency(ConfigurationError):
    """Raised at start-up when the translation catalogue is not well-formed."""

    def __init__(self, issues: Sequence[str]) -> None:
        self.issues: tuple[str, ...] = tuple(issues)
        summary = "; ".join(self.issues) if self.issues else "unknown catalogue issue"
        super().__init__(f"Translation catalogue is inconsistent: {summary}")


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class SiteLocaleConfig(ImmutableModel):
    """Supported locales and their presentation metadata."""

    default_locale: str
    locales: tuple[str, ...]
    locale_names: Mapping[str, str]
    date_formats: Mapping[str, str]

    _locale_set: frozenset[str] = PrivateAttr(default=frozenset())

    @field_validator("locales", mode="before")
    @classmethod
    def _coerce_locales(cls, value: Any) -> tuple[str, ...]:
        if isinstance(value, str) or not isinstance(value, Sequence):
            raise ConfigurationError("'locales' must be a list of locale codes")
        return tuple(value)

    @field_validator("locale_names", "date_formats", mode="after")
    @classmethod
    def _freeze_mapping(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("locale_names", "date_formats")
    def _serialize_mapping(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    @model_validator(mode="after")
    def _validate_locales(self) -> SiteLocaleConfig:
        if not self.locales:
            raise ConfigurationError("At least one locale must be configured")

        seen: set[str] = set()
        for locale in self.locales:
            if not LOCALE_CODE_PATTERN.match(locale):
                raise ConfigurationError(f"Invalid locale code '{locale}'")
            if locale in seen:
                raise ConfigurationError(f"Duplicate locale '{locale}' configured")
            seen.add(locale)

        if self.default_locale not in seen:
            raise ConfigurationError(
                f"Default locale '{self.default_locale}' is not a configured locale"
            )

        for label, mapping in (
            ("locale_names", self.locale_names),
            ("date_formats", self.date_formats),
        ):
            if set(mapping) != seen:
                raise ConfigurationError(
                    f"'{label}' must define exactly the configured locales: {sorted(seen)}"
                )
        return self

    def model_post_init(self, __context: Any) -> None:
        self._locale_set = frozenset(self.locales)

    @computed_field
    @property
    def non_default_locales(self) -> tuple[str, ...]:
        return tuple(locale for locale in self.locales if locale != self.default_locale)

    def is_valid_locale(self, value: object) -> bool:
        """Return ``True`` when ``value`` is one of the supported locale codes."""

        return isinstance(value, str) and value in self._locale_set

    def resolve_locale(self, value: object) -> str:
        """Return ``value`` if supported, otherwise the default locale."""

        if self.is_valid_locale(value):
            return value  # type: ignore[return-value]
        logger.debug(
            "Unsupported locale %r; using default locale %s", value, self.default_locale
        )
        return self.default_locale

    def locale_name(self, locale: object) -> str:
        return self.locale_names[self.resolve_locale(locale)]

    def date_format(self, locale: object) -> str:
        return self.date_formats[self.resolve_locale(locale)]


class CatalogDocument(RootModel[dict[str, dict[str, str]]]):
    """One locale's catalogue: ``namespace -> key -> message``."""

    def namespaces(self) -> dict[str, dict[str, str]]:
        return self.root


__all__ = [
    "CatalogDocument",
    "CatalogInconsistency",
    "ConfigurationError",
    "ImmutableModel",
    "LOCALE_CODE_PATTERN",
    "SiteLocaleConfig",
]
