"""Full-format postcode validation."""

from __future__ import annotations

import re

from ryandata_postcode_utils.models.enums import ErrorKind
from ryandata_postcode_utils.models.results import CheckResult
from ryandata_postcode_utils.models.rule import PostcodeRule


def no_format_message(rule: PostcodeRule) -> str:
    """Explain why a rule has no usable format pattern."""
    reason = rule.description or "No postal code"
    return f"{rule.country_code}: {reason}"


def validate_format(rule: PostcodeRule | None, postcode: str | None) -> CheckResult:
    """Check a complete postcode against the rule's format pattern.

    The postcode is matched as entered: no padding and no format fix.

    Args:
        rule: Country rule.
        postcode: Postcode to check.

    Returns:
        CheckResult echoing the rule description. Fails with ``invalid_input``
        if there is no rule or the rule has no pattern, and with
        ``format_mismatch`` if the postcode does not match.
    """
    if rule is None:
        return CheckResult.fail(ErrorKind.INVALID_INPUT, "Postcode rule must not be empty")
    if not rule.has_format:
        return CheckResult.fail(
            ErrorKind.INVALID_INPUT,
            no_format_message(rule),
            value=postcode,
            description=rule.description,
        )

    if postcode is None or re.search(rule.full_regex, postcode) is None:
        return CheckResult.fail(
            ErrorKind.FORMAT_MISMATCH,
            f"Postcode does not match the format rule: {rule.description}",
            value=postcode,
            description=rule.description,
        )

    return CheckResult.ok(
        "Postcode matches the format rule",
        value=postcode,
        description=rule.description,
    )
