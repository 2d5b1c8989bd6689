"""Property-based tests using Hypothesis for the core checks.

This module contains property tests that verify invariants of
normalization, format validation, range containment and overlap
detection using Hypothesis strategies.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from ryandata_postcode_utils import (
    Comparison,
    ErrorKind,
    PostcodeRule,
    check_in_range,
    check_no_overlap,
    compare,
    normalize,
    validate_format,
)
from ryandata_postcode_utils.data import get_province, get_rule
from tests.strategies import (
    NUMERIC_COUNTRIES,
    STRING_COUNTRIES,
    digit_string_strategy,
    gb_compact_strategy,
    malformed_us_zip_strategy,
    numeric_range_strategy,
    padded_number_strategy,
    spaced_query_strategy,
    us_zip5_strategy,
    us_zip_plus4_strategy,
)

PADDED_RULE = PostcodeRule(
    country_code="XX",
    full_regex="^[0-9]{5}$",
    description="5 digits",
    range_is_number=True,
    range_regex="^[0-9]{5}$",
    min_length=5,
    left_padding_char="0",
)

# =============================================================================
# Format Validation Properties
# =============================================================================


class TestFormatProperties:
    @given(st.one_of(us_zip5_strategy(), us_zip_plus4_strategy()))
    def test_well_formed_us_zips_pass(self, postcode: str) -> None:
        assert validate_format(get_rule("US"), postcode).success

    @given(malformed_us_zip_strategy())
    def test_malformed_us_zips_fail(self, postcode: str) -> None:
        result = validate_format(get_rule("US"), postcode)

        assert result.error_kind is ErrorKind.FORMAT_MISMATCH

    @given(st.sampled_from(NUMERIC_COUNTRIES + STRING_COUNTRIES), st.text(max_size=12))
    def test_description_is_always_echoed(self, country: str, postcode: str) -> None:
        rule = get_rule(country)

        assert validate_format(rule, postcode).description == rule.description


# =============================================================================
# Normalization Properties
# =============================================================================


class TestNormalizeProperties:
    @given(digit_string_strategy(0, 5))
    def test_padding_reaches_min_length(self, postcode: str) -> None:
        padded = normalize(PADDED_RULE, postcode)

        assert len(padded) == 5
        assert padded.endswith(postcode)
        assert int(padded) == int(postcode or "0")

    @given(st.sampled_from(NUMERIC_COUNTRIES + STRING_COUNTRIES), st.text(max_size=10))
    def test_idempotent(self, country: str, postcode: str) -> None:
        rule = get_rule(country)
        once = normalize(rule, postcode)

        assert normalize(rule, once) == once

    @given(gb_compact_strategy())
    def test_gb_fix_produces_valid_shape(self, compact: str) -> None:
        fixed = normalize(get_rule("GB"), compact)

        assert fixed.replace(" ", "") == compact
        assert fixed[-4] == " "
        assert validate_format(get_rule("GB"), fixed).success


# =============================================================================
# Range Properties
# =============================================================================


class TestRangeProperties:
    @given(numeric_range_strategy(), padded_number_strategy())
    def test_numeric_containment_matches_integer_order(
        self, bounds: tuple[int, int], value: int
    ) -> None:
        start, end = bounds
        result = check_in_range(PADDED_RULE, str(start), str(end), str(value))

        if value < start:
            assert result.error_kind is ErrorKind.BELOW_RANGE
        elif value > end:
            assert result.error_kind is ErrorKind.ABOVE_RANGE
        else:
            assert result.success

    @given(numeric_range_strategy(), numeric_range_strategy())
    def test_numeric_overlap_matches_interval_intersection(
        self, first: tuple[int, int], second: tuple[int, int]
    ) -> None:
        ranges = [tuple(map(str, first)), tuple(map(str, second))]
        result = check_no_overlap(PADDED_RULE, ranges)
        intersects = max(first[0], second[0]) <= min(first[1], second[1])

        assert result.success is not intersects

    @given(numeric_range_strategy(), numeric_range_strategy())
    def test_overlap_is_order_independent(
        self, first: tuple[int, int], second: tuple[int, int]
    ) -> None:
        forward = check_no_overlap(PADDED_RULE, [tuple(map(str, first)), tuple(map(str, second))])
        backward = check_no_overlap(
            PADDED_RULE, [tuple(map(str, second)), tuple(map(str, first))]
        )

        assert forward.success == backward.success

    @given(digit_string_strategy(1, 5), digit_string_strategy(1, 5))
    def test_compare_is_antisymmetric(self, left: str, right: str) -> None:
        forward = compare(PADDED_RULE, left, right)
        backward = compare(PADDED_RULE, right, left)

        assert forward == Comparison(-backward)


# =============================================================================
# Province Properties
# =============================================================================


class TestProvinceProperties:
    @given(spaced_query_strategy())
    def test_case_and_whitespace_are_ignored(self, case: tuple[str, str]) -> None:
        code, query = case
        province = get_province("US", query)

        assert province is not None
        assert province.code == code
