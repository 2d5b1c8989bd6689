"""Built-in format-fix strategies.

A format-fix reshapes a raw postcode into the canonical layout its country
rule expects (for example re-inserting the space of a UK postcode) before the
range substring is extracted. Strategies are looked up by the name stored in
the rule table.
"""

from __future__ import annotations

from ryandata_postcode_utils.models.rule import FormatFix, FormatFixResult


def gb_inward_split(postcode: str) -> FormatFixResult:
    """Put exactly one space before the three-character inward code.

    Example:
        >>> gb_inward_split("SW1A1AA").postcode
        'SW1A 1AA'
    """
    if not postcode:
        return FormatFixResult(success=False, message="Postcode must not be empty")
    if len(postcode) < 5:
        return FormatFixResult(
            success=False, message="GB postcodes must have at least 5 characters"
        )

    compact = postcode.replace(" ", "")
    return FormatFixResult(success=True, postcode=f"{compact[:-3]} {compact[-3:]}")


def hyphenate(position: int, length: int) -> FormatFix:
    """Build a strategy that inserts a hyphen into an all-digit postcode.

    Spaces and hyphens already present are dropped first, so applying the
    strategy to its own output gives the same result.

    Args:
        position: Number of digits before the hyphen.
        length: Number of digits the postcode must have.

    Returns:
        Format-fix callable.

    Example:
        >>> hyphenate(2, 5)("12345").postcode
        '12-345'
    """

    def fix(postcode: str) -> FormatFixResult:
        compact = postcode.replace(" ", "").replace("-", "")
        if len(compact) != length or not compact.isdigit():
            return FormatFixResult(
                success=False,
                message=f"Expected {length} digits, got {postcode!r}",
            )
        return FormatFixResult(success=True, postcode=f"{compact[:position]}-{compact[position:]}")

    return fix


FORMAT_FIXES: dict[str, FormatFix] = {
    "gb_inward_split": gb_inward_split,
    "br_hyphenate": hyphenate(5, 8),
}


def get_format_fix(name: str) -> FormatFix:
    """Get a registered format-fix strategy by name.

    Raises:
        ValueError: If no strategy is registered under the name.
    """
    try:
        return FORMAT_FIXES[name]
    except KeyError:
        available = ", ".join(sorted(FORMAT_FIXES))
        raise ValueError(
            f"Unknown format fix: {name}. Available format fixes: {available}"
        ) from None
