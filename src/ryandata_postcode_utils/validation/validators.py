from __future__ import annotations

from typing import TYPE_CHECKING

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from ryandata_postcode_utils.core.format import validate_format
from ryandata_postcode_utils.models.enums import ErrorKind
from ryandata_postcode_utils.protocols import ProvinceSourceProtocol, RuleSourceProtocol

if TYPE_CHECKING:
    from ryandata_postcode_utils.models import PostcodeRecord

# Failure kind of the errors each field is reported on
ERROR_KINDS_BY_FIELD: dict[str, ErrorKind] = {
    "country_code": ErrorKind.RULE_NOT_FOUND,
    "postcode": ErrorKind.FORMAT_MISMATCH,
    "province": ErrorKind.PROVINCE_NOT_FOUND,
}


def error_kind_for(field: str) -> ErrorKind:
    """Failure kind for an error reported on ``field``."""
    return ERROR_KINDS_BY_FIELD.get(field, ErrorKind.INVALID_INPUT)


class PostcodeFormatValidator(BaseValidator["PostcodeRecord"]):
    """Validates a record's postcode against its country's format rule.

    Unknown countries are reported on ``country_code`` and mismatches on
    ``postcode``. Records without a postcode pass.
    """

    def __init__(self, rule_source: RuleSourceProtocol) -> None:
        """Initialize postcode format validator.

        Args:
            rule_source: Source for country rule lookups.
        """
        self._rule_source = rule_source

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "postcode_format"

    def validate(self, record: PostcodeRecord) -> ValidationResult:
        """Validate the postcode of a record.

        Args:
            record: Record to validate.

        Returns:
            ValidationResult with any postcode errors.
        """
        result = ValidationResult(is_valid=True)

        if not record.postcode:
            return result

        rule = self._rule_source.get_rule(record.country_code)
        if rule is None:
            result.add_error(
                field="country_code",
                message=f"No postcode rule for country: {record.country_code}",
                value=record.country_code,
            )
            return result

        check = validate_format(rule, record.postcode)
        if not check.success:
            result.add_error(field="postcode", message=check.message, value=record.postcode)

        return result


class ProvinceValidator(BaseValidator["PostcodeRecord"]):
    """Validates a record's province against the country's subdivisions.

    Skipped when the record has no province or the country has no
    subdivision data.
    """

    def __init__(self, province_source: ProvinceSourceProtocol) -> None:
        self._province_source = province_source

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "province"

    def validate(self, record: PostcodeRecord) -> ValidationResult:
        result = ValidationResult(is_valid=True)

        if not record.province:
            return result

        if not self._province_source.get_provinces(record.country_code):
            return result

        if self._province_source.get_province(record.country_code, record.province) is None:
            result.add_error(
                field="province",
                message=f"Unknown province for {record.country_code}: {record.province}",
                value=record.province,
            )

        return result


def create_default_validators(
    rule_source: RuleSourceProtocol,
    province_source: ProvinceSourceProtocol | None = None,
) -> CompositeValidator[PostcodeRecord]:
    """Create default postcode record validation pipeline.

    Args:
        rule_source: Source for country rule lookups.
        province_source: Source for province lookups. If None, provinces
            are not validated.

    Returns:
        CompositeValidator with default validators configured.
    """
    builder: ValidatorPipelineBuilder[PostcodeRecord] = ValidatorPipelineBuilder(
        "postcode_validation"
    )

    builder.add(PostcodeFormatValidator(rule_source))
    if province_source is not None:
        builder.add(ProvinceValidator(province_source))

    return builder.build()
