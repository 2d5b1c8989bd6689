"""RyanData Postcode Utils Core - rule-driven postcode checks.

Everything in this package is a pure function of a ``PostcodeRule`` and the
input strings: no I/O, no shared state, safe to call from any thread.

Usage:
    from ryandata_postcode_utils.core import (
        # Format validation
        validate_format,
        # Normalization
        normalize,
        # Extraction and comparison
        extract_comparable,
        compare,
        # Ranges
        check_range_bounds,
        check_in_range,
        check_no_overlap,
    )
"""

from __future__ import annotations

from ryandata_postcode_utils.core.comparison import (
    compare,
    comparable_value,
    extract_comparable,
    parse_number,
)
from ryandata_postcode_utils.core.containment import (
    check_in_range,
    check_range_bounds,
    range_bounds,
)
from ryandata_postcode_utils.core.factory import PluginFactory
from ryandata_postcode_utils.core.format import no_format_message, validate_format
from ryandata_postcode_utils.core.format_fix import (
    FORMAT_FIXES,
    gb_inward_split,
    get_format_fix,
    hyphenate,
)
from ryandata_postcode_utils.core.normalizer import (
    fix_postcode_format,
    normalize,
    pad_postcode,
)
from ryandata_postcode_utils.core.overlap import check_no_overlap

__all__ = [
    # Format validation
    "validate_format",
    "no_format_message",
    # Normalization
    "normalize",
    "pad_postcode",
    "fix_postcode_format",
    # Format fixes
    "FORMAT_FIXES",
    "gb_inward_split",
    "get_format_fix",
    "hyphenate",
    # Extraction and comparison
    "extract_comparable",
    "comparable_value",
    "compare",
    "parse_number",
    # Ranges
    "range_bounds",
    "check_range_bounds",
    "check_in_range",
    "check_no_overlap",
    # Factory
    "PluginFactory",
]
