"""CLI utilities module."""

from colorexp.cli.utils.input import enable_byte_passthrough, iter_lines
from colorexp.cli.utils.options import (
    FIXED_STRINGS_OPTION,
    FULL_MATCH_OPTION,
    HIGHLIGHT_OPTION,
    IGNORE_CASE_OPTION,
    MODE_OPTION,
    ONLY_MATCHING_OPTION,
    PATTERNS_ARGUMENT,
    VARY_GROUP_COLORS_OPTION,
    VERBOSE_OPTION,
)
from colorexp.cli.utils.output import report_error, silence_stdout, write_lines

__all__ = [
    "FIXED_STRINGS_OPTION",
    "FULL_MATCH_OPTION",
    "HIGHLIGHT_OPTION",
    "IGNORE_CASE_OPTION",
    "MODE_OPTION",
    "ONLY_MATCHING_OPTION",
    "PATTERNS_ARGUMENT",
    "VARY_GROUP_COLORS_OPTION",
    "VERBOSE_OPTION",
    "enable_byte_passthrough",
    "iter_lines",
    "report_error",
    "silence_stdout",
    "write_lines",
]
