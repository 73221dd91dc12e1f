"""Color span data model."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ColorSpan(BaseModel):
    """Half-open range [start, end) of the original line tagged with a color identity.

    The identity is abstract; the palette resolves it to escape codes at render time.
    """

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0, description="First offset covered by the span")
    end: int = Field(description="Offset one past the last covered position")
    color_id: int = Field(description="Pattern or capturing group the span came from")

    @model_validator(mode="after")
    def check_not_empty(self) -> Self:
        """Reject empty and inverted ranges."""
        if self.end <= self.start:
            raise ValueError(f"span end {self.end} must be greater than start {self.start}")
        return self

    @property
    def length(self) -> int:
        return self.end - self.start

    def clipped(self, start: int | None = None, end: int | None = None) -> "ColorSpan":
        """Return a copy with new bounds.

        The copy skips validation, so the result may be empty. Callers check
        ``length`` before keeping it.
        """
        return self.model_copy(
            update={
                "start": self.start if start is None else start,
                "end": self.end if end is None else end,
            }
        )

    def __repr__(self) -> str:
        return f"ColorSpan({self.start}, {self.end}, {self.color_id})"
