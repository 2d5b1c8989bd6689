"""Result classes for postcode checks.

Every check returns a ``CheckResult`` instead of raising, so a failed check
is an ordinary value carrying the reason and the offending input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from abstract_validation_base import ValidationResult

from ryandata_postcode_utils.models.enums import ErrorKind
from ryandata_postcode_utils.models.errors import RyanDataPostcodeError
from ryandata_postcode_utils.models.ranges import PostalRange


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a postcode check.

    Attributes:
        success: True if the check passed.
        message: Human-readable explanation.
        error_kind: Failure category (None on success).
        value: Offending postcode, or the regex for regex lookups.
        ranges: Offending range, or the overlapping pair.
        description: Rule description, echoed by format checks.
    """

    success: bool
    message: str
    error_kind: ErrorKind | None = None
    value: str | None = None
    ranges: tuple[PostalRange, ...] = ()
    description: str | None = None

    @classmethod
    def ok(cls, message: str, **kwargs: Any) -> CheckResult:
        """Build a successful result."""
        return cls(success=True, message=message, **kwargs)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str, **kwargs: Any) -> CheckResult:
        """Build a failed result of the given kind."""
        return cls(success=False, message=message, error_kind=kind, **kwargs)

    @classmethod
    def from_error(cls, error: RyanDataPostcodeError, **kwargs: Any) -> CheckResult:
        """Turn a raised postcode error into a failed result."""
        return cls.fail(error.kind or ErrorKind.INVALID_INPUT, error.message(), **kwargs)

    @property
    def is_valid(self) -> bool:
        """Alias of ``success``."""
        return self.success

    def raise_for_error(self) -> None:
        """Raise RyanDataPostcodeError if the check failed.

        Raises:
            RyanDataPostcodeError: With the result's kind and message.
        """
        if self.success:
            return
        context: dict[str, Any] = {}
        if self.value is not None:
            context["value"] = self.value
        if self.ranges:
            context["ranges"] = [str(r) for r in self.ranges]
        raise RyanDataPostcodeError.create(
            self.error_kind or ErrorKind.INVALID_INPUT,
            self.message,
            context,
        )

    def to_validation_result(self, field: str = "postcode") -> ValidationResult:
        """Convert to an abstract_validation_base ValidationResult.

        Args:
            field: Field name to report the error under.

        Returns:
            ValidationResult with one error if the check failed.
        """
        result = ValidationResult(is_valid=True)
        if not self.success:
            result.add_error(field, self.message, self.value)
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "success": self.success,
            "message": self.message,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "value": self.value,
            "ranges": [{"start": r.start, "end": r.end} for r in self.ranges],
            "description": self.description,
        }
