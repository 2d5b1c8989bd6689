"""Postcode check enumerations."""

from __future__ import annotations

from enum import Enum, IntEnum


class ErrorKind(str, Enum):
    """Kinds of failure a postcode check can report."""

    RULE_NOT_FOUND = "rule_not_found"
    INVALID_INPUT = "invalid_input"
    FORMAT_MISMATCH = "format_mismatch"
    RANGE_REGEX_MISMATCH = "range_regex_mismatch"
    NUMERIC_PARSE_ERROR = "numeric_parse_error"
    RANGE_BOUNDS_INVALID = "range_bounds_invalid"
    START_AFTER_END = "start_after_end"
    BELOW_RANGE = "below_range"
    ABOVE_RANGE = "above_range"
    OUT_OF_RANGE = "out_of_range"
    OVERLAP_DETECTED = "overlap_detected"
    PROVINCE_NOT_FOUND = "province_not_found"


class Comparison(IntEnum):
    """Ordering of two comparable postcode substrings."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left: object, right: object) -> Comparison:
        """Compare two orderable values."""
        if left < right:  # type: ignore[operator]
            return cls.LESS
        if left > right:  # type: ignore[operator]
            return cls.GREATER
        return cls.EQUAL
