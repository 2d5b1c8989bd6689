"""Process-logging base model for postcode records.

Records keep a log of every cleaning step applied to their inputs and every
validation failure reported against them. Failures can optionally be raised
as ``RyanDataPostcodeError`` carrying the matching ``ErrorKind``.
"""

from __future__ import annotations

from typing import Any

from abstract_validation_base import BaseValidator, ProcessEntry, ProcessLog
from pydantic import BaseModel, ConfigDict, Field

from ryandata_postcode_utils.models.enums import ErrorKind
from ryandata_postcode_utils.models.errors import RyanDataPostcodeError

__all__ = ["BaseValidator", "RyanDataValidationBase"]


def _as_text(value: Any) -> str | None:
    return None if value is None else str(value)


class RyanDataValidationBase(BaseModel):
    """Pydantic model with a process log of cleaning steps and errors.

    The log is excluded from serialization; ``audit_log()`` flattens it for
    DataFrame analysis.
    """

    model_config = ConfigDict(extra="ignore")

    process_log: ProcessLog = Field(default_factory=ProcessLog, exclude=True)

    def add_error(
        self,
        field: str,
        message: str,
        value: Any = None,
        *,
        kind: ErrorKind = ErrorKind.INVALID_INPUT,
        raise_exception: bool = False,
    ) -> None:
        """Log a validation failure and optionally raise it.

        Args:
            field: Field the failure is reported on.
            message: Human-readable message.
            value: The offending value.
            kind: Failure category, stored in the entry context.
            raise_exception: If True, raise after logging.

        Raises:
            RyanDataPostcodeError: If raise_exception is True.
        """
        self.process_log.errors.append(
            ProcessEntry(
                entry_type="error",
                field=field,
                message=message,
                original_value=_as_text(value),
                context={"kind": kind.value},
            )
        )

        if raise_exception:
            raise RyanDataPostcodeError.create(
                kind, f"{field}: {message}", {"field": field, "value": value}
            )

    def add_cleaning_process(
        self,
        field: str,
        original_value: Any,
        new_value: Any,
        reason: str,
    ) -> None:
        """Log a change made to an input while cleaning it."""
        self.process_log.cleaning.append(
            ProcessEntry(
                entry_type="cleaning",
                field=field,
                message=reason,
                original_value=_as_text(original_value),
                new_value=_as_text(new_value),
                context={},
            )
        )

    def audit_log(self, source: str | None = None) -> list[dict[str, Any]]:
        """Cleaning and error entries as dicts, oldest first.

        Args:
            source: Optional identifier (file name, batch id) added to each entry.
        """
        entries = [
            entry.model_dump() for entry in (*self.process_log.cleaning, *self.process_log.errors)
        ]
        if source:
            for entry in entries:
                entry["source"] = source
        return sorted(entries, key=lambda entry: entry.get("timestamp", ""))
