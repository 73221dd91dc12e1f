"""Terminal color palettes and color identity resolution."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from colorexp.core.constants import BACKGROUND_COLORS, FOREGROUND_COLORS, AnsiCodes


class HighlightMode(StrEnum):
    """Which part of the character cell gets colored."""

    FOREGROUND = "foreground"
    BACKGROUND = "background"
    BOTH = "both"


class ColorCode(BaseModel):
    """Escape sequences that start and end one visual color."""

    model_config = ConfigDict(frozen=True)

    start: str = Field(description="Sequence inserted before the colored text")
    reset: str = Field(description="Sequence inserted after the colored text")


class Palette(BaseModel):
    """Ordered colors available for assignment during one run."""

    model_config = ConfigDict(frozen=True)

    colors: tuple[ColorCode, ...] = Field(min_length=1)

    @classmethod
    def from_codes(cls, starts: tuple[str, ...] | list[str], reset: str) -> "Palette":
        """Build a palette whose colors share one reset sequence."""
        return cls(colors=tuple(ColorCode(start=str(code), reset=str(reset)) for code in starts))

    @classmethod
    def for_mode(cls, mode: HighlightMode) -> "Palette":
        """Build the palette for a highlight mode.

        ``both`` lists the foreground colors first, then the background colors.
        """
        foreground = cls.from_codes(FOREGROUND_COLORS, AnsiCodes.FG_RESET)
        background = cls.from_codes(BACKGROUND_COLORS, AnsiCodes.BG_RESET)
        if mode == HighlightMode.FOREGROUND:
            return foreground
        if mode == HighlightMode.BACKGROUND:
            return background
        return cls(colors=foreground.colors + background.colors)

    @property
    def size(self) -> int:
        return len(self.colors)

    def index_for(self, color_id: int, color_count: int) -> int:
        """Map a color identity to a palette position.

        Identities are counted in reverse, so the first identity lands at the end
        of the palette and the last one at its start.

        Args:
            color_id: Identity assigned by the collector
            color_count: Total identities assigned this run

        Returns:
            Index into ``colors``
        """
        # Python's modulo is already non-negative for a positive size
        return (color_count - color_id - 1) % self.size

    def code_for(self, color_id: int, color_count: int) -> ColorCode:
        """Get the escape sequences for a color identity."""
        return self.colors[self.index_for(color_id, color_count)]
