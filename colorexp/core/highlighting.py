"""Per-line highlighting pipeline."""

import logging
from collections.abc import Iterable, Iterator, Sequence

from pydantic import BaseModel, ConfigDict, Field

from colorexp.core.collector import MatchCollector, compile_patterns, resolve_vary_group_colors
from colorexp.core.palette import HighlightMode, Palette
from colorexp.core.renderer import render_line

logger = logging.getLogger(__name__)


class HighlightSettings(BaseModel):
    """Resolved per-run highlighting options, fixed for the whole process."""

    model_config = ConfigDict(frozen=True)

    fixed_strings: bool = Field(default=False, description="Patterns are literal strings")
    ignore_case: bool = Field(default=False, description="Case insensitive matching")
    vary_group_colors: bool | None = Field(
        default=None,
        description="Distinct color per capturing group (None picks the default)",
    )
    full_match: bool = Field(default=False, description="Color whole matches even when groups exist")
    mode: HighlightMode = Field(default=HighlightMode.FOREGROUND, description="Palette composition")
    only_matching: bool = Field(default=False, description="Drop lines without any match")


class LineHighlighter:
    """Collects spans for a line and renders them with the run's palette."""

    def __init__(self, collector: MatchCollector, palette: Palette, only_matching: bool = False) -> None:
        self.collector = collector
        self.palette = palette
        self.only_matching = only_matching

    def highlight(self, line: str) -> str | None:
        """Apply highlighting to a single line.

        Args:
            line: Line without its terminator

        Returns:
            The rendered line, or None when only matching lines are wanted and
            nothing matched
        """
        intervals = self.collector.collect(line)
        if not intervals:
            return None if self.only_matching else line
        return render_line(line, intervals, self.palette, self.collector.color_count)

    def highlight_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Highlight lines one at a time, skipping those that produce no output."""
        for line in lines:
            rendered = self.highlight(line)
            if rendered is not None:
                yield rendered


def build_highlighter(settings: HighlightSettings, raw_patterns: Sequence[str]) -> LineHighlighter:
    """Compile patterns and assemble the pipeline for one run.

    Raises:
        ConfigurationError: If no pattern was given or modes conflict
        RegexValidationError: If a pattern does not compile
    """
    patterns = compile_patterns(
        raw_patterns,
        fixed_strings=settings.fixed_strings,
        ignore_case=settings.ignore_case,
    )
    vary_group_colors = resolve_vary_group_colors(settings.vary_group_colors, len(patterns), settings.full_match)
    collector = MatchCollector(
        patterns,
        vary_group_colors=vary_group_colors,
        full_match=settings.full_match,
    )
    palette = Palette.for_mode(settings.mode)
    logger.debug(
        f"Highlighter ready: {collector.color_count} color identities, "
        f"{palette.size} colors ({settings.mode.value}), vary_group_colors={vary_group_colors}"
    )
    return LineHighlighter(collector, palette, only_matching=settings.only_matching)
