"""Postcode normalization for range operations.

Normalization pads short numeric postcodes and applies the rule's format-fix
strategy. It is only used when comparing against ranges; format validation
always sees the postcode exactly as entered.
"""

from __future__ import annotations

import logging

from ryandata_postcode_utils.models.rule import PostcodeRule

logger = logging.getLogger(__name__)


def pad_postcode(rule: PostcodeRule, postcode: str) -> str:
    """Left-pad a numeric postcode shorter than the rule's minimum length.

    Args:
        rule: Country rule.
        postcode: Raw postcode.

    Returns:
        Padded postcode, or the input unchanged if the rule does not pad.
    """
    if rule.pads_numbers and len(postcode) < rule.min_length:
        return postcode.rjust(rule.min_length, rule.left_padding_char)
    return postcode


def fix_postcode_format(rule: PostcodeRule, postcode: str) -> str:
    """Apply the rule's format-fix strategy, keeping the input if it refuses."""
    if rule.format_fix is None:
        return postcode

    result = rule.format_fix(postcode)
    if not result.success or result.postcode is None:
        logger.debug(
            "Format fix for %s left %r unchanged: %s",
            rule.country_code,
            postcode,
            result.message,
        )
        return postcode
    return result.postcode


def normalize(rule: PostcodeRule, postcode: str, apply_format_fix: bool = True) -> str:
    """Normalize a postcode before range extraction.

    Padding comes first, then the format fix (when enabled).

    Args:
        rule: Country rule.
        postcode: Raw postcode.
        apply_format_fix: If False, skip the rule's format-fix strategy.

    Returns:
        Normalized postcode. The caller's string is never modified.
    """
    normalized = pad_postcode(rule, postcode)
    if apply_format_fix:
        normalized = fix_postcode_format(rule, normalized)
    return normalized
