"""Range validation and postcode-in-range checks."""

from __future__ import annotations

import logging

from ryandata_postcode_utils.core.comparison import (
    compare,
    comparable_value,
    extract_comparable,
    parse_number,
)
from ryandata_postcode_utils.core.normalizer import normalize
from ryandata_postcode_utils.models.enums import Comparison, ErrorKind
from ryandata_postcode_utils.models.errors import RyanDataPostcodeError
from ryandata_postcode_utils.models.ranges import PostalRange
from ryandata_postcode_utils.models.results import CheckResult
from ryandata_postcode_utils.models.rule import PostcodeRule

logger = logging.getLogger(__name__)


def _extract_bound(rule: PostcodeRule, bound: str, label: str, apply_format_fix: bool) -> str:
    try:
        return extract_comparable(rule, normalize(rule, bound, apply_format_fix))
    except RyanDataPostcodeError as exc:
        raise RyanDataPostcodeError.create(
            ErrorKind.RANGE_BOUNDS_INVALID,
            f"{label} postcode {bound!r} does not match the range pattern: {rule.description}",
            {"value": bound},
        ) from exc


def range_bounds(
    rule: PostcodeRule,
    start: str,
    end: str,
    apply_format_fix: bool = True,
) -> tuple[int | str, int | str]:
    """Resolve the comparable bounds of a range.

    Both bounds are normalized and their range substrings extracted. Under a
    numeric rule the substrings are parsed and the start must not be greater
    than the end; the bounds are never swapped.

    Args:
        rule: Country rule.
        start: Raw start postcode.
        end: Raw end postcode.
        apply_format_fix: If False, skip the rule's format-fix strategy.

    Returns:
        ``(start, end)`` as integers under a numeric rule, otherwise as
        upper-cased extracted substrings.

    Raises:
        RyanDataPostcodeError: ``range_bounds_invalid``,
            ``numeric_parse_error`` or ``start_after_end``.
    """
    start_value = comparable_value(rule, _extract_bound(rule, start, "Start", apply_format_fix))
    end_value = comparable_value(rule, _extract_bound(rule, end, "End", apply_format_fix))

    if rule.range_is_number and start_value > end_value:  # type: ignore[operator]
        raise RyanDataPostcodeError.create(
            ErrorKind.START_AFTER_END,
            f"Start postcode {start!r} must not be greater than end postcode {end!r}",
            {"value": start},
        )
    return start_value, end_value


def check_range_bounds(
    rule: PostcodeRule | None,
    start: str,
    end: str,
    apply_format_fix: bool = True,
) -> CheckResult:
    """Check that a range is usable under the rule.

    Returns:
        CheckResult identifying the range on failure.
    """
    postal_range = PostalRange(start=start, end=end)
    if rule is None:
        return CheckResult.fail(
            ErrorKind.INVALID_INPUT, "Postcode rule must not be empty", ranges=(postal_range,)
        )

    try:
        range_bounds(rule, start, end, apply_format_fix)
    except RyanDataPostcodeError as exc:
        return CheckResult.from_error(exc, value=exc.context.get("value"), ranges=(postal_range,))
    return CheckResult.ok("Postcode range is valid", ranges=(postal_range,))


def check_in_range(
    rule: PostcodeRule | None,
    start: str,
    end: str,
    postcode: str,
    apply_format_fix: bool = True,
) -> CheckResult:
    """Check whether a postcode lies inside the inclusive range [start, end].

    Under a numeric rule the extracted substrings are compared as integers.
    Otherwise the normalized postcode (not its extracted substring) is
    compared against the raw range bounds, case-insensitively by code point.

    Args:
        rule: Country rule.
        start: Raw start postcode.
        end: Raw end postcode.
        postcode: Postcode to test.
        apply_format_fix: If False, skip the rule's format-fix strategy.

    Returns:
        CheckResult. Failure kinds: ``invalid_input``, ``range_bounds_invalid``,
        ``numeric_parse_error``, ``start_after_end``, ``format_mismatch``,
        ``below_range``, ``above_range`` and ``out_of_range``.
    """
    postal_range = PostalRange(start=start, end=end)
    if rule is None:
        return CheckResult.fail(
            ErrorKind.INVALID_INPUT, "Postcode rule must not be empty", ranges=(postal_range,)
        )

    try:
        lower, upper = range_bounds(rule, start, end, apply_format_fix)
    except RyanDataPostcodeError as exc:
        logger.debug("Invalid range %s for %s: %s", postal_range, rule.country_code, exc)
        return CheckResult.from_error(exc, value=exc.context.get("value"), ranges=(postal_range,))

    normalized = normalize(rule, postcode, apply_format_fix)
    try:
        comparable = extract_comparable(rule, normalized)
    except RyanDataPostcodeError:
        return CheckResult.fail(
            ErrorKind.FORMAT_MISMATCH,
            f"Postcode {postcode!r} does not match the range pattern: {rule.description}",
            value=postcode,
            ranges=(postal_range,),
        )

    if rule.range_is_number:
        try:
            number = parse_number(comparable)
        except RyanDataPostcodeError as exc:
            return CheckResult.from_error(exc, value=postcode, ranges=(postal_range,))

        if number < lower:  # type: ignore[operator]
            return CheckResult.fail(
                ErrorKind.BELOW_RANGE,
                f"Postcode {postcode!r} is below the start of range {postal_range}",
                value=postcode,
                ranges=(postal_range,),
            )
        if number > upper:  # type: ignore[operator]
            return CheckResult.fail(
                ErrorKind.ABOVE_RANGE,
                f"Postcode {postcode!r} is above the end of range {postal_range}",
                value=postcode,
                ranges=(postal_range,),
            )
        return CheckResult.ok("Postcode is within range", value=postcode, ranges=(postal_range,))

    if (
        compare(rule, normalized, start) is Comparison.LESS
        or compare(rule, end, normalized) is Comparison.LESS
    ):
        return CheckResult.fail(
            ErrorKind.OUT_OF_RANGE,
            f"Postcode {postcode!r} is outside range {postal_range}",
            value=postcode,
            ranges=(postal_range,),
        )
    return CheckResult.ok("Postcode is within range", value=postcode, ranges=(postal_range,))
