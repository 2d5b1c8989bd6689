"""Reference data for postcode rules and provinces.

This module provides the rule and province source implementations and
shortcut functions over the bundled tables.
"""

from __future__ import annotations

from ryandata_postcode_utils.data.base import (
    BaseProvinceSource,
    BaseRuleSource,
    clean_country_code,
    province_key,
)
from ryandata_postcode_utils.data.csv_source import (
    PROVINCES_CSV_ENV,
    RULES_CSV_ENV,
    CSVProvinceSource,
    CSVRuleSource,
    get_default_province_source,
    get_default_rule_source,
)
from ryandata_postcode_utils.data.factory import ProvinceSourceFactory, RuleSourceFactory
from ryandata_postcode_utils.models import PostcodeRule, ProvinceInfo

__all__ = [
    "BaseRuleSource",
    "BaseProvinceSource",
    "CSVRuleSource",
    "CSVProvinceSource",
    "RuleSourceFactory",
    "ProvinceSourceFactory",
    "RULES_CSV_ENV",
    "PROVINCES_CSV_ENV",
    "clean_country_code",
    "province_key",
    "get_default_rule_source",
    "get_default_province_source",
    # Shortcuts over the bundled tables
    "get_rule",
    "get_provinces",
    "get_province",
]


def get_rule(country_code: str) -> PostcodeRule | None:
    """Get the bundled rule for a country.

    Args:
        country_code: Two-letter country code (any case).

    Returns:
        PostcodeRule if known, None otherwise.
    """
    return get_default_rule_source().get_rule(country_code)


def get_provinces(country_code: str) -> tuple[ProvinceInfo, ...]:
    """Get the bundled provinces of a country."""
    return get_default_province_source().get_provinces(country_code)


def get_province(country_code: str, query: str) -> ProvinceInfo | None:
    """Find a bundled province by code, English name or Chinese name."""
    return get_default_province_source().get_province(country_code, query)
