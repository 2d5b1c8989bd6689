"""Range substring extraction and comparison."""

from __future__ import annotations

import re

from ryandata_postcode_utils.models.enums import Comparison, ErrorKind
from ryandata_postcode_utils.models.errors import RyanDataPostcodeError
from ryandata_postcode_utils.models.rule import PostcodeRule


def extract_comparable(rule: PostcodeRule, normalized: str) -> str:
    """Pull the range-comparable substring out of a normalized postcode.

    The range pattern is searched for anywhere in the postcode, so it only
    matches at the edges when the pattern itself is anchored.

    Args:
        rule: Country rule.
        normalized: Postcode after ``normalize()``.

    Returns:
        The matched substring.

    Raises:
        RyanDataPostcodeError: ``range_regex_mismatch`` if the rule has no
            range pattern or the pattern does not match.
    """
    if not rule.range_regex:
        raise RyanDataPostcodeError.create(
            ErrorKind.RANGE_REGEX_MISMATCH,
            f"{rule.country_code} postcodes do not support range comparison",
            {"value": normalized},
        )

    match = re.search(rule.range_regex, normalized)
    if match is None:
        raise RyanDataPostcodeError.create(
            ErrorKind.RANGE_REGEX_MISMATCH,
            f"Postcode {normalized!r} does not match the range pattern: {rule.description}",
            {"value": normalized},
        )
    return match.group(0)


def parse_number(value: str) -> int:
    """Parse an extracted substring as a base-10 integer.

    Raises:
        RyanDataPostcodeError: ``numeric_parse_error`` if it is not an integer.
    """
    text = value.strip()
    try:
        if "_" in text:
            raise ValueError(text)
        return int(text)
    except ValueError as exc:
        raise RyanDataPostcodeError.create(
            ErrorKind.NUMERIC_PARSE_ERROR,
            f"Cannot convert {value!r} to a number",
            {"value": value},
        ) from exc


def comparable_value(rule: PostcodeRule, substring: str) -> int | str:
    """Convert an extracted substring into the value ranges are ordered by."""
    if rule.range_is_number:
        return parse_number(substring)
    return substring.upper()


def compare(rule: PostcodeRule, left: str, right: str) -> Comparison:
    """Compare two substrings under the rule's ordering.

    Numeric rules compare integers. Other rules compare case-insensitively by
    code point, with no locale collation.

    Raises:
        RyanDataPostcodeError: ``numeric_parse_error`` for non-integer input
            under a numeric rule.
    """
    return Comparison.of(comparable_value(rule, left), comparable_value(rule, right))
