"""Ordered set of non-overlapping color spans."""

from collections.abc import Iterator

from colorexp.core.spans import ColorSpan


def add_span(spans: list[ColorSpan], new_span: ColorSpan) -> list[ColorSpan]:
    """Add a span to an ordered list of non-overlapping spans.

    Spans already in the list keep every position they cover. The new span is
    reduced to the positions nobody claimed yet, which can split it into several
    pieces that all keep its color identity.

    Args:
        spans: Existing spans, ordered by start and non-overlapping
        new_span: Candidate span

    Returns:
        New ordered list; the input list is not modified
    """
    result: list[ColorSpan] = []
    candidate = new_span
    placed = False

    for existing in spans:
        if candidate.end <= existing.start:
            # Candidate lies entirely before the existing span
            if not placed:
                result.append(candidate)
                placed = True
            result.append(existing)
        elif candidate.start >= existing.end:
            # Candidate lies entirely after the existing span
            result.append(existing)
        else:
            # Overlap: keep the unclaimed prefix, drop the covered part
            if not placed and candidate.start < existing.start:
                result.append(candidate.clipped(end=existing.start))
            result.append(existing)
            if candidate.end > existing.end:
                candidate = candidate.clipped(start=existing.end)
            else:
                placed = True
                candidate = candidate.clipped(start=candidate.end)

    if not placed and candidate.length > 0:
        result.append(candidate)

    return result


class IntervalSet:
    """Per-line collection of spans where the first writer of a position wins."""

    def __init__(self) -> None:
        self._spans: list[ColorSpan] = []

    def add(self, span: ColorSpan) -> None:
        """Insert a span, yielding to every span added before it."""
        # Matches of one pattern arrive left to right; appending is what add_span would do
        if not self._spans or span.start >= self._spans[-1].end:
            self._spans.append(span)
            return
        self._spans = add_span(self._spans, span)

    @property
    def spans(self) -> list[ColorSpan]:
        """Copy of the spans in ascending order."""
        return list(self._spans)

    def __iter__(self) -> Iterator[ColorSpan]:
        return iter(list(self._spans))

    def __len__(self) -> int:
        return len(self._spans)

    def __repr__(self) -> str:
        return f"IntervalSet({self._spans!r})"
