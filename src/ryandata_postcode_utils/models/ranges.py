"""Postcode range model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PostalRange(BaseModel):
    """An inclusive range of raw postcodes.

    Bounds are stored exactly as given. Whether ``start`` comes before ``end``
    depends on the country rule and is only checked when the range is used.
    """

    model_config = ConfigDict(frozen=True)

    start: str = Field(description="First postcode of the range (raw)")
    end: str = Field(description="Last postcode of the range (raw)")

    @classmethod
    def parse(cls, text: str, separator: str = "-") -> PostalRange:
        """Parse ``"start<separator>end"`` into a range.

        Args:
            text: Range text such as ``"10000-19999"``.
            separator: String between the two bounds.

        Returns:
            PostalRange with whitespace-trimmed bounds.

        Raises:
            ValueError: If the separator does not occur exactly once.
        """
        if text.count(separator) != 1:
            raise ValueError(
                f"Expected exactly one {separator!r} in postcode range: {text!r}"
            )
        start, end = text.split(separator)
        return cls(start=start.strip(), end=end.strip())

    @classmethod
    def coerce(cls, value: PostalRange | tuple[str, str]) -> PostalRange:
        """Accept either a PostalRange or a ``(start, end)`` pair."""
        if isinstance(value, PostalRange):
            return value
        start, end = value
        return cls(start=start, end=end)

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"
