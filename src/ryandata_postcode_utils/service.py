from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from abstract_validation_base import ValidationResult

from ryandata_postcode_utils import core
from ryandata_postcode_utils.data import ProvinceSourceFactory, RuleSourceFactory, clean_country_code
from ryandata_postcode_utils.models import (
    CheckResult,
    ErrorKind,
    PostalRange,
    PostcodeRecord,
    PostcodeRule,
    ProvinceInfo,
    RyanDataPostcodeError,
)
from ryandata_postcode_utils.validation.validators import create_default_validators

if TYPE_CHECKING:
    import pandas as pd
    from abstract_validation_base import ValidatorProtocol

    from ryandata_postcode_utils.protocols import ProvinceSourceProtocol, RuleSourceProtocol

logger = logging.getLogger(__name__)

RESULT_FIELDS = ("postcode_valid", "postcode_message")


class PostcodeService:
    """High-level facade for postcode checks keyed by country code.

    Resolves the country's rule from the rule source and hands it to the
    pure check functions in ``ryandata_postcode_utils.core``.

    Example:
        >>> service = PostcodeService()
        >>> service.validate_format("US", "12345").success
        True
        >>> service.check_in_range("US", "50000", "99999", "12345").error_kind
        <ErrorKind.BELOW_RANGE: 'below_range'>

        # Custom tables
        >>> from ryandata_postcode_utils.data import CSVRuleSource
        >>> service = PostcodeService(rule_source=CSVRuleSource("/path/to/rules.csv"))
    """

    def __init__(
        self,
        rule_source: RuleSourceProtocol | None = None,
        province_source: ProvinceSourceProtocol | None = None,
        validator: ValidatorProtocol[PostcodeRecord] | None = None,
    ) -> None:
        """Initialize the postcode service.

        Args:
            rule_source: Rule source. Defaults to the bundled CSV table.
            province_source: Province source. Defaults to the bundled CSV table.
            validator: Record validator. Defaults to the composite pipeline.
        """
        self._rule_source = rule_source or RuleSourceFactory.create()
        self._province_source = province_source or ProvinceSourceFactory.create()

        if validator is not None:
            self._validator = validator
        else:
            self._validator = create_default_validators(
                self._rule_source,
                self._province_source,
            )

    @property
    def rule_source(self) -> RuleSourceProtocol:
        """Get the rule source instance."""
        return self._rule_source

    @property
    def province_source(self) -> ProvinceSourceProtocol:
        """Get the province source instance."""
        return self._province_source

    @property
    def validator(self) -> ValidatorProtocol[PostcodeRecord]:
        """Get the record validator instance."""
        return self._validator

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def get_rule(self, country_code: str) -> PostcodeRule | None:
        """Look up the rule for a country.

        Args:
            country_code: Two-letter country code (surrounding whitespace and
                case are ignored).

        Returns:
            PostcodeRule if known, None otherwise.
        """
        return self._rule_source.get_rule(country_code)

    def require_rule(self, country_code: str) -> PostcodeRule:
        """Look up the rule for a country, raising if it is unknown.

        Raises:
            RyanDataPostcodeError: ``rule_not_found``.
        """
        rule = self.get_rule(country_code)
        if rule is None:
            raise RyanDataPostcodeError.create(
                ErrorKind.RULE_NOT_FOUND,
                f"No postcode rule for country: {country_code}",
                {"value": country_code},
            )
        return rule

    def country_codes(self) -> list[str]:
        """Get the sorted list of countries with a rule."""
        return self._rule_source.country_codes()

    def _unknown_country(self, country_code: str, **kwargs: Any) -> CheckResult:
        logger.debug("No postcode rule for %r", country_code)
        return CheckResult.fail(
            ErrorKind.RULE_NOT_FOUND,
            f"No postcode rule for country: {country_code}",
            **kwargs,
        )

    def get_regex(self, country_code: str) -> CheckResult:
        """Get the full-format pattern of a country.

        Returns:
            CheckResult whose ``value`` is the pattern and whose ``message`` is
            the rule description. Fails with ``invalid_input`` for a blank
            country code or a country without postcodes, and with
            ``rule_not_found`` for an unknown country.
        """
        if not clean_country_code(country_code):
            return CheckResult.fail(ErrorKind.INVALID_INPUT, "Country code must not be empty")

        rule = self.get_rule(country_code)
        if rule is None:
            return self._unknown_country(country_code)
        if not rule.has_format:
            return CheckResult.fail(
                ErrorKind.INVALID_INPUT,
                core.no_format_message(rule),
                description=rule.description,
            )
        return CheckResult.ok(rule.description, value=rule.full_regex, description=rule.description)

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def validate_format(self, country_code: str, postcode: str | None) -> CheckResult:
        """Check a complete postcode against the country's format rule."""
        rule = self.get_rule(country_code)
        if rule is None:
            return self._unknown_country(country_code, value=postcode)
        return core.validate_format(rule, postcode)

    def normalize(
        self,
        country_code: str,
        postcode: str,
        apply_format_fix: bool = True,
    ) -> str:
        """Normalize a postcode (padding and format fix) for the country.

        Raises:
            RyanDataPostcodeError: ``rule_not_found`` for an unknown country.
        """
        return core.normalize(self.require_rule(country_code), postcode, apply_format_fix)

    def check_range_bounds(
        self,
        country_code: str,
        start: str,
        end: str,
        apply_format_fix: bool = True,
    ) -> CheckResult:
        """Check that a range is usable under the country's rule."""
        rule = self.get_rule(country_code)
        if rule is None:
            return self._unknown_country(country_code, ranges=(PostalRange(start=start, end=end),))
        return core.check_range_bounds(rule, start, end, apply_format_fix)

    def check_in_range(
        self,
        country_code: str,
        start: str,
        end: str,
        postcode: str,
        apply_format_fix: bool = True,
    ) -> CheckResult:
        """Check whether a postcode lies inside the inclusive range [start, end].

        Args:
            country_code: Two-letter country code.
            start: Range start postcode.
            end: Range end postcode.
            postcode: Postcode to test.
            apply_format_fix: If False, skip the country's format-fix strategy.

        Returns:
            CheckResult; ``rule_not_found`` for an unknown country.
        """
        rule = self.get_rule(country_code)
        if rule is None:
            return self._unknown_country(
                country_code, value=postcode, ranges=(PostalRange(start=start, end=end),)
            )
        return core.check_in_range(rule, start, end, postcode, apply_format_fix)

    def check_no_overlap(
        self,
        country_code: str,
        ranges: Iterable[PostalRange | tuple[str, str]],
    ) -> CheckResult:
        """Check that no two ranges of a list overlap under the country's rule."""
        rule = self.get_rule(country_code)
        if rule is None:
            return self._unknown_country(country_code)
        return core.check_no_overlap(rule, ranges)

    # ------------------------------------------------------------------
    # Provinces
    # ------------------------------------------------------------------

    def get_provinces(self, country_code: str) -> tuple[ProvinceInfo, ...]:
        """Get all provinces of a country (empty if there is no data)."""
        return self._province_source.get_provinces(country_code)

    def get_province(self, country_code: str, query: str) -> ProvinceInfo | None:
        """Find a province by code, English name or Chinese name."""
        return self._province_source.get_province(country_code, query)

    def check_province(self, country_code: str, query: str) -> CheckResult:
        """Check that a province name or code is known for the country.

        Returns:
            CheckResult whose ``value`` is the province code on success.
            Fails with ``province_not_found`` when the country has no
            subdivision data or nothing matches.
        """
        province = self.get_province(country_code, query)
        if province is None:
            return CheckResult.fail(
                ErrorKind.PROVINCE_NOT_FOUND,
                f"Unknown province for {clean_country_code(country_code)}: {query}",
                value=query,
            )
        return CheckResult.ok(province.en_name, value=province.code)

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    def validate_record(
        self,
        record: PostcodeRecord,
        *,
        raise_exception: bool = False,
    ) -> ValidationResult:
        """Run the validator pipeline on a record.

        Errors are also recorded in the record's process log.

        Args:
            record: Record to validate.
            raise_exception: If True, raise on the first error.

        Returns:
            ValidationResult from the pipeline.

        Raises:
            RyanDataPostcodeError: If raise_exception is True and there are errors.
        """
        result = self._validator.validate(record)
        record.apply_validation(result, raise_exception=raise_exception)
        return result

    # ------------------------------------------------------------------
    # Pandas
    # ------------------------------------------------------------------

    def check_value(self, country_code: Any, postcode: Any) -> CheckResult:
        """Validate one tabular cell pair, treating missing values as invalid."""
        import pandas as pd

        if country_code is None or pd.isna(country_code) or not str(country_code).strip():
            return CheckResult.fail(ErrorKind.INVALID_INPUT, "Country code must not be empty")
        if postcode is None or pd.isna(postcode) or not str(postcode).strip():
            return CheckResult.fail(ErrorKind.INVALID_INPUT, "Postcode must not be empty")
        return self.validate_format(str(country_code), str(postcode))

    def to_series(
        self,
        postcode: Any,
        country_code: Any,
        errors: str = "coerce",
    ) -> pd.Series:
        """Validate a postcode and return the outcome as a pandas Series.

        Args:
            postcode: Postcode to validate (missing values are invalid).
            country_code: Country of the postcode.
            errors: "coerce" (report failures in the row) or "raise".

        Returns:
            Series with ``postcode_valid`` and ``postcode_message``.

        Raises:
            RyanDataPostcodeError: If errors="raise" and the check fails.
        """
        import pandas as pd

        result = self.check_value(country_code, postcode)
        if errors == "raise":
            result.raise_for_error()
        return pd.Series(dict(zip(RESULT_FIELDS, (result.success, result.message))))

    def validate_dataframe(
        self,
        df: pd.DataFrame,
        postcode_column: str,
        country_column: str | None = None,
        country_code: str | None = None,
        errors: str = "coerce",
        prefix: str = "",
        inplace: bool = False,
    ) -> pd.DataFrame:
        """Validate postcodes in a DataFrame.

        Args:
            df: Input DataFrame.
            postcode_column: Name of column containing postcodes.
            country_column: Name of column containing country codes.
            country_code: Country for every row (used when country_column
                is None).
            errors: "coerce" (report failures in the row) or "raise".
            prefix: Prefix for new column names.
            inplace: If True, modify df in place.

        Returns:
            DataFrame with ``postcode_valid`` and ``postcode_message`` columns.

        Raises:
            ValueError: If neither country_column nor country_code is given.
        """
        if country_column is None and country_code is None:
            raise ValueError("Either country_column or country_code is required")

        if not inplace:
            df = df.copy()

        if df.empty:
            for field in RESULT_FIELDS:
                df[f"{prefix}{field}"] = []
            return df

        if country_column is not None:
            checked = df.apply(
                lambda row: self.to_series(row[postcode_column], row[country_column], errors),
                axis=1,
            )
        else:
            checked = df[postcode_column].apply(
                lambda value: self.to_series(value, country_code, errors)
            )

        for field in RESULT_FIELDS:
            df[f"{prefix}{field}"] = checked[field]

        return df


# Module-level convenience functions
_default_service: PostcodeService | None = None


def get_default_service() -> PostcodeService:
    """Get the default PostcodeService singleton.

    Returns:
        Shared PostcodeService instance with default configuration.
    """
    global _default_service
    if _default_service is None:
        _default_service = PostcodeService()
    return _default_service


def get_rule(country_code: str) -> PostcodeRule | None:
    """Look up a country's rule using the default service."""
    return get_default_service().get_rule(country_code)


def get_regex(country_code: str) -> CheckResult:
    """Get a country's full-format pattern using the default service."""
    return get_default_service().get_regex(country_code)


def validate_format(country_code: str, postcode: str | None) -> CheckResult:
    """Validate a postcode's format using the default service.

    Args:
        country_code: Two-letter country code.
        postcode: Postcode to check.

    Returns:
        CheckResult describing the outcome.
    """
    return get_default_service().validate_format(country_code, postcode)


def check_in_range(
    country_code: str,
    start: str,
    end: str,
    postcode: str,
    apply_format_fix: bool = True,
) -> CheckResult:
    """Check range containment using the default service."""
    return get_default_service().check_in_range(
        country_code, start, end, postcode, apply_format_fix=apply_format_fix
    )


def check_no_overlap(
    country_code: str,
    ranges: Iterable[PostalRange | tuple[str, str]],
) -> CheckResult:
    """Check a range list for overlaps using the default service."""
    return get_default_service().check_no_overlap(country_code, ranges)


def check_province(country_code: str, query: str) -> CheckResult:
    """Check a province using the default service."""
    return get_default_service().check_province(country_code, query)
