from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ryandata_postcode_utils.models import PostcodeRule, ProvinceInfo


@runtime_checkable
class RuleSourceProtocol(Protocol):
    """Protocol for per-country postcode rule sources.

    Implementations provide read-only access to the rule registry,
    supporting different backends (CSV, database, API, etc.).
    """

    def get_rule(self, country_code: str) -> PostcodeRule | None:
        """Get the rule for a country.

        Args:
            country_code: Two-letter country code (any case).

        Returns:
            PostcodeRule if known, None otherwise.
        """
        ...

    def country_codes(self) -> list[str]:
        """Get the sorted list of countries with a rule."""
        ...

    def clear_cache(self) -> None:
        """Drop any loaded data."""
        ...


@runtime_checkable
class ProvinceSourceProtocol(Protocol):
    """Protocol for province/state reference data sources."""

    def get_provinces(self, country_code: str) -> tuple[ProvinceInfo, ...]:
        """Get all provinces of a country (empty if there is no data)."""
        ...

    def get_province(self, country_code: str, query: str) -> ProvinceInfo | None:
        """Find a province by code, English name or Chinese name.

        Args:
            country_code: Two-letter country code.
            query: Province code or name.

        Returns:
            ProvinceInfo if found, None otherwise.
        """
        ...

    def normalize_province(self, country_code: str, query: str) -> str | None:
        """Normalize a province name to its code."""
        ...

    def is_valid_province(self, country_code: str, query: str) -> bool:
        """Check if a province name or code is known for the country."""
        ...

    def clear_cache(self) -> None:
        """Drop any loaded data."""
        ...
