"""Core functionality module."""

from colorexp.core.collector import MatchCollector, compile_patterns, resolve_vary_group_colors
from colorexp.core.constants import PACKAGE_VERSION, ExitCode
from colorexp.core.highlighting import HighlightSettings, LineHighlighter, build_highlighter
from colorexp.core.intervals import IntervalSet, add_span
from colorexp.core.palette import ColorCode, HighlightMode, Palette
from colorexp.core.renderer import render_line
from colorexp.core.spans import ColorSpan

__all__ = [
    "PACKAGE_VERSION",
    "ColorCode",
    "ColorSpan",
    "ExitCode",
    "HighlightMode",
    "HighlightSettings",
    "IntervalSet",
    "LineHighlighter",
    "MatchCollector",
    "Palette",
    "add_span",
    "build_highlighter",
    "compile_patterns",
    "render_line",
    "resolve_vary_group_colors",
]
