"""Postcode record model validated by the validator pipeline."""

from __future__ import annotations

from typing import Self

from abstract_validation_base import ValidationResult
from pydantic import ConfigDict, Field, model_validator

from ryandata_postcode_utils.validation.base import RyanDataValidationBase
from ryandata_postcode_utils.validation.validators import error_kind_for


class PostcodeRecord(RyanDataValidationBase):
    """A postcode (and optionally a province) entered for a country.

    Inherits from RyanDataValidationBase, providing:
    - process_log: ProcessLog field (excluded from serialization)
    - add_error(): Log an error of a given ErrorKind and optionally raise it
    - add_cleaning_process(): Log a cleaning/transformation operation
    - audit_log(): Export combined entries for DataFrame analysis
    """

    model_config = ConfigDict(extra="ignore")

    country_code: str = Field(description="Two-letter country code")
    postcode: str | None = Field(default=None, description="Postcode as entered")
    province: str | None = Field(default=None, description="State or province as entered")

    @model_validator(mode="after")
    def clean_inputs(self) -> Self:
        """Trim inputs and upper-case the country code, logging each change."""
        country_code = self.country_code.strip().upper()
        if country_code != self.country_code:
            self.add_cleaning_process(
                "country_code", self.country_code, country_code, "Normalized country code"
            )
            self.country_code = country_code

        if self.postcode is not None:
            postcode = self.postcode.strip()
            if postcode != self.postcode:
                self.add_cleaning_process(
                    "postcode", self.postcode, postcode, "Stripped surrounding whitespace"
                )
                self.postcode = postcode or None

        if self.province is not None:
            province = self.province.strip()
            if province != self.province:
                self.add_cleaning_process(
                    "province", self.province, province, "Stripped surrounding whitespace"
                )
                self.province = province or None

        return self

    def apply_validation(
        self,
        validation_result: ValidationResult,
        *,
        raise_exception: bool = False,
    ) -> None:
        """Record pipeline errors in this record's process log.

        Each error is tagged with the failure kind of the field it was
        reported on.

        Args:
            validation_result: Result from the validator pipeline.
            raise_exception: If True, raise on the first error.

        Raises:
            RyanDataPostcodeError: If raise_exception is True and there are errors.
        """
        for error in validation_result.errors:
            self.add_error(
                error.field,
                error.message,
                error.value,
                kind=error_kind_for(error.field),
                raise_exception=raise_exception,
            )
