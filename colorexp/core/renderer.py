"""Insert color escape sequences into a line."""

from collections.abc import Iterable

from colorexp.core.palette import Palette
from colorexp.core.spans import ColorSpan
from colorexp.exceptions import SpanBoundsError


def render_line(line: str, spans: Iterable[ColorSpan], palette: Palette, color_count: int) -> str:
    """Wrap every span of a line in its start and reset sequences.

    Spans refer to offsets of the unmodified line. Instead of shifting pending
    spans after each insertion, the output is assembled from slices of the
    original line, so offsets never go stale.

    Args:
        line: Original line
        spans: Ordered, non-overlapping spans
        palette: Colors for this run
        color_count: Total color identities assigned this run

    Returns:
        The rendered line

    Raises:
        SpanBoundsError: If a span is out of order or reaches past the line
    """
    parts: list[str] = []
    cursor = 0

    for span in spans:
        if span.start < cursor:
            raise SpanBoundsError(span.start, len(line))
        if span.end > len(line):
            raise SpanBoundsError(span.end, len(line))
        code = palette.code_for(span.color_id, color_count)
        parts.extend((line[cursor : span.start], code.start, line[span.start : span.end], code.reset))
        cursor = span.end

    parts.append(line[cursor:])
    return "".join(parts)
