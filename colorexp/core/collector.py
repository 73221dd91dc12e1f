"""Run patterns over a line and collect colored spans."""

import logging
import re
from collections.abc import Sequence

from colorexp.core.intervals import IntervalSet
from colorexp.core.spans import ColorSpan
from colorexp.exceptions import ConfigurationError, RegexValidationError

logger = logging.getLogger(__name__)


def compile_patterns(
    raw_patterns: Sequence[str],
    fixed_strings: bool = False,
    ignore_case: bool = False,
) -> list[re.Pattern[str]]:
    """Compile user patterns in reverse of the order they were given.

    The collector lets the first inserted span win, so reversing here makes the
    last pattern on the command line win overlaps.

    Args:
        raw_patterns: Patterns in command line order
        fixed_strings: Treat patterns as literal text
        ignore_case: Match case insensitively

    Returns:
        Compiled patterns, last user pattern first

    Raises:
        ConfigurationError: If no pattern was given
        RegexValidationError: If a pattern does not compile
    """
    if not raw_patterns:
        raise ConfigurationError("At least one pattern argument is required.")

    flags = re.IGNORECASE if ignore_case else 0
    compiled: list[re.Pattern[str]] = []
    for raw in raw_patterns:
        source = re.escape(raw) if fixed_strings else raw
        try:
            compiled.append(re.compile(source, flags))
        except re.error as e:
            raise RegexValidationError(raw, str(e)) from e

    compiled.reverse()
    logger.debug(f"Compiled {len(compiled)} patterns (fixed_strings={fixed_strings}, ignore_case={ignore_case})")
    return compiled


def resolve_vary_group_colors(override: bool | None, pattern_count: int, full_match: bool = False) -> bool:
    """Pick the group coloring mode.

    Without an explicit choice, groups get their own colors only when a single
    pattern was given and whole matches are not forced.
    """
    if override is not None:
        return override
    return pattern_count == 1 and not full_match


class MatchCollector:
    """Turns pattern matches on a line into an interval set of color spans."""

    def __init__(
        self,
        patterns: Sequence[re.Pattern[str]],
        vary_group_colors: bool = False,
        full_match: bool = False,
    ) -> None:
        """Assign color identities to every pattern and group.

        Args:
            patterns: Compiled patterns, the one that should win overlaps first
            vary_group_colors: Give each capturing group its own color identity
            full_match: Color the whole match even when the pattern has groups

        Raises:
            ConfigurationError: If both modes are requested
        """
        if vary_group_colors and full_match:
            raise ConfigurationError("Group colors and full match highlighting are mutually exclusive.")

        self.vary_group_colors = vary_group_colors
        self.full_match = full_match

        # pattern -> ((group index, color identity), ...)
        self._plans: list[tuple[re.Pattern[str], tuple[tuple[int, int], ...]]] = []
        counter = 0
        for pattern in patterns:
            if pattern.groups == 0 or full_match:
                groups = [0]
            else:
                groups = list(range(1, pattern.groups + 1))

            if vary_group_colors:
                # Last group takes the lowest identity of the block
                width = len(groups)
                plan = tuple((group, counter + width - 1 - position) for position, group in enumerate(groups))
            else:
                width = 1
                plan = tuple((group, counter) for group in groups)

            self._plans.append((pattern, plan))
            counter += width

        self.color_count = counter

    def collect(self, line: str) -> IntervalSet:
        """Find all colored spans of a line.

        Every span goes into the set as soon as it is found, so spans from
        earlier patterns claim their positions before later ones.
        """
        intervals = IntervalSet()
        for pattern, plan in self._plans:
            for match in pattern.finditer(line):
                for group, color_id in plan:
                    start, end = match.span(group)
                    # Group did not participate or matched the empty string
                    if start < 0 or start == end:
                        continue
                    intervals.add(ColorSpan(start=start, end=end, color_id=color_id))
        return intervals
