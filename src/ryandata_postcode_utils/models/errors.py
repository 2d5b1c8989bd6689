"""Postcode-specific error classes.

Core primitives raise these errors; the check functions catch them at their
boundary and turn them into ``CheckResult`` values.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

from ryandata_postcode_utils.models.enums import ErrorKind

# Package identifier for error context
PACKAGE_NAME = "ryandata_postcode_utils"


class RyanDataPostcodeError(PydanticCustomError):
    """Custom exception for ryandata_postcode_utils that wraps Pydantic errors.

    Inherits from PydanticCustomError so it can be raised from Pydantic
    validators and still be told apart by its ``type``, which is always an
    ``ErrorKind`` value. The context always carries the package name.
    """

    @classmethod
    def create(
        cls,
        kind: ErrorKind,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> RyanDataPostcodeError:
        """Build an error of the given kind.

        Args:
            kind: Failure category.
            message: Human-readable message.
            context: Additional context (offending value, range, ...).

        Returns:
            RyanDataPostcodeError instance.
        """
        return cls(kind.value, message, {"package": PACKAGE_NAME, **(context or {})})

    @property
    def kind(self) -> ErrorKind | None:
        """The failure category of this error, if it is a known one."""
        try:
            return ErrorKind(self.type)
        except ValueError:
            return None
