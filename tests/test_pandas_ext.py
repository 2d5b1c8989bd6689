"""Tests for the pandas accessor and DataFrame helpers."""

from __future__ import annotations

import pytest

pd = pytest.importorskip("pandas")

from ryandata_postcode_utils import PostcodeService, RyanDataPostcodeError  # noqa: E402
from ryandata_postcode_utils.pandas_ext import register_accessor, validate_postcodes  # noqa: E402


@pytest.fixture(scope="module", autouse=True)
def _accessor() -> None:
    register_accessor()


class TestAccessor:
    def test_validate(self) -> None:
        s = pd.Series(["12345", "1234", None, "12345-6789"])

        assert s.postcode.validate("US").tolist() == [True, False, False, True]

    def test_validate_unknown_country_is_false(self) -> None:
        assert pd.Series(["12345"]).postcode.validate("ZZ").tolist() == [False]

    def test_normalize(self) -> None:
        s = pd.Series(["501", "SW1A1AA", None])

        assert s.postcode.normalize("US").tolist()[0] == "00501"
        assert s.postcode.normalize("GB").tolist()[1] == "SW1A 1AA"
        assert s.postcode.normalize("GB", apply_format_fix=False).tolist()[1] == "SW1A1AA"
        assert s.postcode.normalize("US").tolist()[2] is None

    def test_normalize_unknown_country_raises(self) -> None:
        with pytest.raises(RyanDataPostcodeError):
            pd.Series(["123"]).postcode.normalize("ZZ")

    def test_in_range(self) -> None:
        s = pd.Series(["12345", "20000", None, "ABCDE"])

        assert s.postcode.in_range("US", "10000", "19999").tolist() == [True, False, False, False]

    def test_register_is_idempotent(self) -> None:
        register_accessor()
        assert hasattr(pd.Series, "postcode")


class TestValidatePostcodes:
    def test_single_country(self) -> None:
        df = pd.DataFrame({"zip": ["12345", "1234", None]})

        result = validate_postcodes(df, "zip", country_code="US")

        assert result["postcode_valid"].tolist() == [True, False, False]
        assert result["postcode_message"].iloc[0] == "Postcode matches the format rule"
        assert "postcode_valid" not in df.columns

    def test_country_column(self) -> None:
        df = pd.DataFrame(
            {
                "country": ["US", "GB", "ZZ", None],
                "postcode": ["12345", "SW1A 1AA", "12345", "12345"],
            }
        )

        result = validate_postcodes(df, "postcode", country_column="country")

        assert result["postcode_valid"].tolist() == [True, True, False, False]
        assert "ZZ" in result["postcode_message"].iloc[2]

    def test_errors_raise(self) -> None:
        df = pd.DataFrame({"zip": ["12345", "1234"]})

        with pytest.raises(RyanDataPostcodeError):
            validate_postcodes(df, "zip", country_code="US", errors="raise")

    def test_prefix_and_inplace(self) -> None:
        df = pd.DataFrame({"zip": ["12345"]})

        PostcodeService().validate_dataframe(df, "zip", country_code="US", prefix="us_", inplace=True)

        assert df["us_postcode_valid"].tolist() == [True]

    def test_empty_frame(self) -> None:
        df = pd.DataFrame({"zip": pd.Series([], dtype=object)})

        result = validate_postcodes(df, "zip", country_code="US")

        assert list(result.columns) == ["zip", "postcode_valid", "postcode_message"]
        assert len(result) == 0

    def test_requires_a_country(self) -> None:
        with pytest.raises(ValueError):
            validate_postcodes(pd.DataFrame({"zip": ["12345"]}), "zip")
