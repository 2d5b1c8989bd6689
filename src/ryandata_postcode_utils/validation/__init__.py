"""Postcode record validation implementations.

This module provides validator implementations for validating
PostcodeRecord instances.
"""

from abstract_validation_base import CompositeValidator, ValidatorPipelineBuilder

from ryandata_postcode_utils.validation.base import BaseValidator
from ryandata_postcode_utils.validation.validators import (
    ERROR_KINDS_BY_FIELD,
    PostcodeFormatValidator,
    ProvinceValidator,
    create_default_validators,
    error_kind_for,
)

__all__ = [
    "BaseValidator",
    "CompositeValidator",
    "ValidatorPipelineBuilder",
    "PostcodeFormatValidator",
    "ProvinceValidator",
    "create_default_validators",
    "ERROR_KINDS_BY_FIELD",
    "error_kind_for",
]
