from __future__ import annotations

import time

import pytest
from pydantic import ValidationError

from colorexp.core.highlighting import HighlightSettings, build_highlighter
from colorexp.core.palette import HighlightMode
from colorexp.exceptions import ConfigurationError, RegexValidationError

RED = "\x1b[31m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"


def test_single_pattern() -> None:
    highlighter = build_highlighter(HighlightSettings(), ["world"])
    assert highlighter.highlight("Hello, world!") == f"Hello, {RED}world{RESET}!"


def test_unmatched_line_is_unchanged() -> None:
    highlighter = build_highlighter(HighlightSettings(), ["world"])
    assert highlighter.highlight("nothing here") == "nothing here"


def test_patterns_keep_colors_in_user_order() -> None:
    highlighter = build_highlighter(HighlightSettings(), ["foo", "bar"])
    assert highlighter.highlight("foo bar") == f"{RED}foo{RESET} {GREEN}bar{RESET}"


def test_last_pattern_wins_overlap() -> None:
    highlighter = build_highlighter(HighlightSettings(), ["hello world", "world"])
    assert highlighter.highlight("hello world") == f"{RED}hello {RESET}{GREEN}world{RESET}"


def test_single_pattern_varies_group_colors_by_default() -> None:
    highlighter = build_highlighter(HighlightSettings(), [r"(\w+)@(\w+)"])
    assert highlighter.highlight("me@host") == f"{RED}me{RESET}@{GREEN}host{RESET}"


def test_group_colors_can_be_disabled() -> None:
    highlighter = build_highlighter(HighlightSettings(vary_group_colors=False), [r"(\w+)@(\w+)"])
    assert highlighter.highlight("me@host") == f"{RED}me{RESET}@{RED}host{RESET}"


def test_full_match() -> None:
    highlighter = build_highlighter(HighlightSettings(full_match=True), [r"(\w+)@(\w+)"])
    assert highlighter.highlight("me@host") == f"{RED}me@host{RESET}"


def test_background_mode() -> None:
    highlighter = build_highlighter(HighlightSettings(mode=HighlightMode.BACKGROUND), ["x"])
    assert highlighter.highlight("axb") == "a\x1b[41mx\x1b[49mb"


def test_fixed_strings_and_ignore_case() -> None:
    settings = HighlightSettings(fixed_strings=True, ignore_case=True)
    highlighter = build_highlighter(settings, ["A.C"])
    assert highlighter.highlight("abc a.c") == f"abc {RED}a.c{RESET}"


def test_only_matching_drops_unmatched_lines() -> None:
    highlighter = build_highlighter(HighlightSettings(only_matching=True), ["foo"])
    assert highlighter.highlight("bar") is None
    assert list(highlighter.highlight_lines(["a foo", "bar", "foo"])) == [
        f"a {RED}foo{RESET}",
        f"{RED}foo{RESET}",
    ]


def test_highlight_lines_keeps_unmatched_lines_by_default() -> None:
    highlighter = build_highlighter(HighlightSettings(), ["foo"])
    assert list(highlighter.highlight_lines(["bar", ""])) == ["bar", ""]


def test_build_rejects_conflicting_modes() -> None:
    with pytest.raises(ConfigurationError):
        build_highlighter(HighlightSettings(vary_group_colors=True, full_match=True), ["(a)"])


def test_build_rejects_invalid_pattern() -> None:
    with pytest.raises(RegexValidationError):
        build_highlighter(HighlightSettings(), ["[unclosed"])


def test_settings_are_frozen() -> None:
    settings = HighlightSettings()
    with pytest.raises(ValidationError):
        settings.only_matching = True  # type: ignore[misc]


def test_long_line_with_a_span_per_character() -> None:
    highlighter = build_highlighter(HighlightSettings(), ["."])
    line = "x" * 20000

    started = time.perf_counter()
    result = highlighter.highlight(line)
    elapsed = time.perf_counter() - started

    assert result == f"{RED}x{RESET}" * len(line)
    assert elapsed < 5
