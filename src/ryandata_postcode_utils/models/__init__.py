"""Postcode models package.

This package contains the rule, range, province and result models.
"""

from __future__ import annotations

# Import order matters: record pulls in the validation package last
from ryandata_postcode_utils.models.enums import Comparison, ErrorKind
from ryandata_postcode_utils.models.errors import PACKAGE_NAME, RyanDataPostcodeError
from ryandata_postcode_utils.models.province import ProvinceInfo
from ryandata_postcode_utils.models.ranges import PostalRange
from ryandata_postcode_utils.models.results import CheckResult
from ryandata_postcode_utils.models.rule import FormatFix, FormatFixResult, PostcodeRule
from ryandata_postcode_utils.models.record import PostcodeRecord  # noqa: I001

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "RyanDataPostcodeError",
    # Enums
    "Comparison",
    "ErrorKind",
    # Rule
    "FormatFix",
    "FormatFixResult",
    "PostcodeRule",
    # Ranges and reference data
    "PostalRange",
    "ProvinceInfo",
    # Records and results
    "PostcodeRecord",
    "CheckResult",
]
