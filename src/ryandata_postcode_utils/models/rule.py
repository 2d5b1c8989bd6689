"""Per-country postcode rule model.

A ``PostcodeRule`` describes what a complete postcode of a country looks like
and how the part used for range comparisons is pulled out of it.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError


@dataclass(frozen=True)
class FormatFixResult:
    """Outcome of a format-fix strategy.

    Attributes:
        success: True if the postcode could be reshaped.
        postcode: The reshaped postcode (None unless successful).
        message: Why the strategy refused (None on success).
    """

    success: bool
    postcode: str | None = None
    message: str | None = None


FormatFix = Callable[[str], FormatFixResult]


class PostcodeRule(BaseModel):
    """Postcode format and range rule for a single country.

    Rules are immutable. Regex fields are checked for syntax when the rule is
    built, so a loaded rule never fails later on a malformed pattern.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    country_code: str = Field(description="Two-letter country code, upper-case")
    country_name: str = Field(default="", description="English country name")
    country_name_cn: str = Field(default="", description="Chinese country name")
    full_regex: str = Field(
        default="",
        description="Pattern a complete postcode must satisfy; empty if the country has none",
    )
    description: str = Field(default="", description="Human-readable format description")
    format: str = Field(default="", description="Pattern notation: A for letter, N for digit")
    range_is_number: bool = Field(
        default=False,
        description="Compare extracted substrings as integers instead of strings",
    )
    range_regex: str = Field(
        default="",
        description="Pattern extracting the substring compared in range checks",
    )
    min_length: int = Field(default=0, ge=0, description="Length numeric codes are padded to")
    left_padding_char: str = Field(default="", description="Character used for left padding")
    no_post_code: bool = Field(default=False, description="True if the country has no postcodes")
    format_fix_name: str = Field(default="", description="Registered format-fix strategy name")
    format_fix: FormatFix | None = Field(default=None, exclude=True, repr=False)

    @field_validator("country_code")
    @classmethod
    def _upper_country_code(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("full_regex", "range_regex")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise PydanticCustomError(
                "invalid_pattern",
                "Invalid regular expression {pattern}: {reason}",
                {"pattern": value, "reason": str(exc)},
            ) from exc
        return value

    @model_validator(mode="before")
    @classmethod
    def _resolve_format_fix(cls, data: Any) -> Any:
        """Attach the registered strategy named by ``format_fix_name``."""
        if not isinstance(data, dict):
            return data
        name = data.get("format_fix_name")
        if name and data.get("format_fix") is None:
            # Late import to avoid circular dependency with the core package
            from ryandata_postcode_utils.core.format_fix import get_format_fix

            data = {**data, "format_fix": get_format_fix(name)}
        return data

    @property
    def has_format(self) -> bool:
        """True if the rule defines a postcode format at all."""
        return bool(self.full_regex)

    @property
    def pads_numbers(self) -> bool:
        """True if short numeric codes are left-padded before matching."""
        return self.range_is_number and len(self.left_padding_char) == 1
