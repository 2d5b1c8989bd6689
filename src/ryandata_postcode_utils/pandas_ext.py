from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import pandas as pd

    from ryandata_postcode_utils.service import PostcodeService


def _is_missing(value: Any) -> bool:
    import pandas as pd

    return value is None or bool(pd.isna(value))


class PostcodeAccessor:
    """Pandas accessor for postcode checks.

    Provides convenient methods for checking postcodes directly
    on pandas Series objects.

    Usage:
        >>> from ryandata_postcode_utils.pandas_ext import register_accessor
        >>> register_accessor()
        >>> s = pd.Series(["12345", "1234"])
        >>> s.postcode.validate("US")
    """

    def __init__(self, pandas_obj: pd.Series) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas Series this accessor is attached to.
        """
        self._obj = pandas_obj
        self._service: PostcodeService | None = None

    def _get_service(self) -> PostcodeService:
        """Get the shared PostcodeService instance."""
        if self._service is None:
            from ryandata_postcode_utils.service import get_default_service

            self._service = get_default_service()
        return self._service

    def validate(
        self,
        country_code: str,
        *,
        service: PostcodeService | None = None,
    ) -> pd.Series:
        """Check every postcode against the country's format rule.

        Missing values are invalid.

        Returns:
            Boolean Series aligned with the input.
        """
        svc = service or self._get_service()
        return self._obj.apply(
            lambda x: False if _is_missing(x) else svc.validate_format(country_code, str(x)).success
        ).astype(bool)

    def normalize(
        self,
        country_code: str,
        apply_format_fix: bool = True,
        *,
        service: PostcodeService | None = None,
    ) -> pd.Series:
        """Normalize every postcode (padding and format fix).

        Missing values stay missing.

        Raises:
            RyanDataPostcodeError: ``rule_not_found`` for an unknown country.
        """
        svc = service or self._get_service()
        rule = svc.require_rule(country_code)

        from ryandata_postcode_utils.core import normalize

        return self._obj.apply(
            lambda x: None if _is_missing(x) else normalize(rule, str(x), apply_format_fix)
        )

    def in_range(
        self,
        country_code: str,
        start: str,
        end: str,
        *,
        service: PostcodeService | None = None,
    ) -> pd.Series:
        """Check every postcode against the inclusive range [start, end].

        Missing values and postcodes that cannot be compared are False.

        Returns:
            Boolean Series aligned with the input.
        """
        svc = service or self._get_service()
        return self._obj.apply(
            lambda x: False
            if _is_missing(x)
            else svc.check_in_range(country_code, start, end, str(x)).success
        ).astype(bool)


def register_accessor(name: str = "postcode") -> None:
    """Register the postcode accessor on pandas Series.

    After calling this, you can use:
        >>> series.postcode.validate("US")

    Args:
        name: Name for the accessor (default: "postcode").
    """
    import pandas as pd

    if not hasattr(pd.Series, name):
        pd.api.extensions.register_series_accessor(name)(PostcodeAccessor)


def validate_postcodes(
    df: pd.DataFrame,
    postcode_column: str,
    country_column: str | None = None,
    country_code: str | None = None,
    errors: str = "coerce",
    prefix: str = "",
    inplace: bool = False,
) -> pd.DataFrame:
    """Validate postcodes in a DataFrame and add result columns.

    Note: Prefer using PostcodeService.validate_dataframe() instead.

    Args:
        df: Input DataFrame containing postcodes.
        postcode_column: Name of the column containing postcodes.
        country_column: Name of the column containing country codes.
        country_code: Country for every row (used when country_column is None).
        errors: How to handle failed checks ("raise", "coerce").
        prefix: Prefix to add to new column names.
        inplace: If True, modify DataFrame in place.

    Returns:
        DataFrame with ``postcode_valid`` and ``postcode_message`` columns.
    """
    from ryandata_postcode_utils.service import get_default_service

    service = get_default_service()
    return service.validate_dataframe(
        df,
        postcode_column,
        country_column=country_column,
        country_code=country_code,
        errors=errors,
        prefix=prefix,
        inplace=inplace,
    )
