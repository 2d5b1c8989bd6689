from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from ryandata_postcode_utils.models import PostcodeRule, ProvinceInfo


def clean_country_code(country_code: str | None) -> str:
    """Normalize a country code for registry lookups."""
    return (country_code or "").strip().upper()


def province_key(value: str | None) -> str:
    """Normalize a province string: drop all whitespace and upper-case."""
    return "".join((value or "").split()).upper()


class BaseRuleSource(ABC):
    """Abstract base class for postcode rule sources.

    Rules are loaded once, on first access, into a read-only mapping keyed by
    country code. Loading is guarded by a lock; lookups afterwards are plain
    reads of the immutable mapping.
    """

    def __init__(self) -> None:
        """Initialize the rule source."""
        self._lock = threading.Lock()
        self._rules: Mapping[str, PostcodeRule] | None = None

    @abstractmethod
    def _load_rules(self) -> Iterable[PostcodeRule]:
        """Load rules from the underlying source.

        Returns:
            Rules in table order. The first rule for a country wins.
        """
        ...

    def _ensure_loaded(self) -> Mapping[str, PostcodeRule]:
        """Load rules at most once and return the mapping."""
        rules = self._rules
        if rules is None:
            with self._lock:
                if self._rules is None:
                    loaded: dict[str, PostcodeRule] = {}
                    for rule in self._load_rules():
                        loaded.setdefault(rule.country_code, rule)
                    self._rules = MappingProxyType(loaded)
                rules = self._rules
        return rules

    def get_rule(self, country_code: str) -> PostcodeRule | None:
        """Get the rule for a country.

        Args:
            country_code: Two-letter country code (any case).

        Returns:
            PostcodeRule if known, None otherwise.
        """
        key = clean_country_code(country_code)
        if not key:
            return None
        return self._ensure_loaded().get(key)

    def country_codes(self) -> list[str]:
        """Get the sorted list of countries with a rule."""
        return sorted(self._ensure_loaded())

    def clear_cache(self) -> None:
        """Drop loaded rules so the next lookup reloads them."""
        with self._lock:
            self._rules = None


class BaseProvinceSource(ABC):
    """Abstract base class for province/state reference data.

    The whole table is loaded once, on first access, into a read-only mapping
    of country code to provinces. Countries without data are never stored.
    """

    def __init__(self) -> None:
        """Initialize the province source."""
        self._lock = threading.Lock()
        self._provinces: Mapping[str, tuple[ProvinceInfo, ...]] | None = None

    @abstractmethod
    def _load_provinces(self) -> Iterable[tuple[str, ProvinceInfo]]:
        """Load every province from the underlying source.

        Returns:
            ``(country_code, province)`` pairs in table order.
        """
        ...

    def _ensure_loaded(self) -> Mapping[str, tuple[ProvinceInfo, ...]]:
        """Load provinces at most once and return the mapping."""
        provinces = self._provinces
        if provinces is None:
            with self._lock:
                if self._provinces is None:
                    grouped: dict[str, list[ProvinceInfo]] = {}
                    for country_code, province in self._load_provinces():
                        grouped.setdefault(clean_country_code(country_code), []).append(province)
                    self._provinces = MappingProxyType(
                        {code: tuple(items) for code, items in grouped.items()}
                    )
                provinces = self._provinces
        return provinces

    def get_provinces(self, country_code: str) -> tuple[ProvinceInfo, ...]:
        """Get all provinces of a country (empty if there is no data)."""
        return self._ensure_loaded().get(clean_country_code(country_code), ())

    def country_codes(self) -> list[str]:
        """Get the sorted list of countries with subdivision data."""
        return sorted(self._ensure_loaded())

    def get_province(self, country_code: str, query: str) -> ProvinceInfo | None:
        """Find a province by code, English name or Chinese name.

        Whitespace is ignored and matching is case-insensitive, but otherwise
        exact. The first match in table order wins.

        Args:
            country_code: Two-letter country code.
            query: Province code or name.

        Returns:
            ProvinceInfo if found, None otherwise.
        """
        wanted = province_key(query)
        if not wanted:
            return None

        for province in self.get_provinces(country_code):
            candidates = (province.code, province.en_name, province.cn_name)
            if any(province_key(candidate) == wanted for candidate in candidates if candidate):
                return province
        return None

    def normalize_province(self, country_code: str, query: str) -> str | None:
        """Normalize a province name to its code.

        Returns:
            Province code if found, None otherwise.
        """
        province = self.get_province(country_code, query)
        return province.code if province else None

    def is_valid_province(self, country_code: str, query: str) -> bool:
        """Check if a province name or code is known for the country."""
        return self.get_province(country_code, query) is not None

    def clear_cache(self) -> None:
        """Drop loaded provinces so the next lookup reloads them."""
        with self._lock:
            self._provinces = None
