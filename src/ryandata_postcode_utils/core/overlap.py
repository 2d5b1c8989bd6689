"""Overlap detection for lists of postcode ranges."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ryandata_postcode_utils.core.containment import range_bounds
from ryandata_postcode_utils.models.enums import ErrorKind
from ryandata_postcode_utils.models.errors import RyanDataPostcodeError
from ryandata_postcode_utils.models.ranges import PostalRange
from ryandata_postcode_utils.models.results import CheckResult
from ryandata_postcode_utils.models.rule import PostcodeRule

logger = logging.getLogger(__name__)


def _invalid_range(postal_range: PostalRange, error: RyanDataPostcodeError) -> CheckResult:
    return CheckResult.fail(
        error.kind or ErrorKind.RANGE_BOUNDS_INVALID,
        f"Postcode range [{postal_range}] is invalid: {error.message()}",
        value=error.context.get("value"),
        ranges=(postal_range,),
    )


def _overlap(current: PostalRange, other: PostalRange) -> CheckResult:
    return CheckResult.fail(
        ErrorKind.OVERLAP_DETECTED,
        f"Postcode range [{current}] overlaps with [{other}]",
        ranges=(current, other),
    )


def _shares_endpoint(current: PostalRange, other: PostalRange) -> bool:
    return bool({current.start, current.end} & {other.start, other.end})


def _check_against_others(
    rule: PostcodeRule,
    index: int,
    ranges: list[PostalRange],
) -> CheckResult:
    current = ranges[index]
    try:
        current_start, current_end = range_bounds(rule, current.start, current.end)
    except RyanDataPostcodeError as exc:
        return _invalid_range(current, exc)

    for other_index, other in enumerate(ranges):
        if other_index == index:
            continue
        try:
            other_start, other_end = range_bounds(rule, other.start, other.end)
        except RyanDataPostcodeError as exc:
            return _invalid_range(other, exc)

        if rule.range_is_number:
            # Bounds are ordered, so checking both endpoints of every range
            # against every other range covers containment as well.
            if other_start <= current_start <= other_end:  # type: ignore[operator]
                return _overlap(current, other)
            if other_start <= current_end <= other_end:  # type: ignore[operator]
                return _overlap(current, other)
        elif _shares_endpoint(current, other):
            return _overlap(current, other)

    return CheckResult.ok("Postcode range does not overlap")


def check_no_overlap(
    rule: PostcodeRule | None,
    ranges: Iterable[PostalRange | tuple[str, str]],
) -> CheckResult:
    """Check that no two ranges in a list overlap.

    Every range is validated and compared against every other range; the
    first invalid range or overlapping pair ends the check. Numeric rules
    detect any shared point. Other rules only detect ranges sharing an
    identical raw endpoint string.

    Args:
        rule: Country rule.
        ranges: Ranges in caller order, as PostalRange or ``(start, end)``.

    Returns:
        CheckResult; on overlap ``ranges`` holds the offending pair.
    """
    if rule is None:
        return CheckResult.fail(ErrorKind.INVALID_INPUT, "Postcode rule must not be empty")

    items = [PostalRange.coerce(item) for item in ranges]
    for index in range(len(items)):
        result = _check_against_others(rule, index, items)
        if not result.success:
            logger.debug("Range list rejected for %s: %s", rule.country_code, result.message)
            return result

    return CheckResult.ok("Postcode range list has no overlapping ranges")
