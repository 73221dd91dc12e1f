"""Shared CLI options for the colorexp command."""

from typing import Annotated

import typer

from colorexp.core.palette import HighlightMode

PATTERNS_ARGUMENT = Annotated[
    list[str],
    typer.Argument(
        help="Regular expressions to highlight; later patterns win where matches overlap",
        show_default=False,
    ),
]

FIXED_STRINGS_OPTION = Annotated[
    bool,
    typer.Option(
        "--fixed-strings",
        "-F",
        help="Do not interpret regular expression metacharacters.",
    ),
]

IGNORE_CASE_OPTION = Annotated[
    bool,
    typer.Option(
        "--ignore-case",
        "-i",
        help="Perform case insensitive matching.",
    ),
]

HIGHLIGHT_OPTION = Annotated[
    bool,
    typer.Option(
        "--highlight",
        "-H",
        help="Color by changing the background color. Same as --mode background.",
    ),
]

MODE_OPTION = Annotated[
    HighlightMode | None,
    typer.Option(
        "--mode",
        "-M",
        help="Palette to color with (defaults to COLOREXP_HIGHLIGHT_MODE, then foreground)",
        case_sensitive=False,
        show_default=False,
    ),
]

VARY_GROUP_COLORS_OPTION = Annotated[
    bool | None,
    typer.Option(
        "--vary-group-colors/--no-vary-group-colors",
        "-g/-G",
        help="Give each capturing group its own color. On by default for a single pattern without --full-match.",
        show_default=False,
    ),
]

FULL_MATCH_OPTION = Annotated[
    bool,
    typer.Option(
        "--full-match",
        "-m",
        help="Color the whole match even if the pattern has capturing groups.",
    ),
]

ONLY_MATCHING_OPTION = Annotated[
    bool,
    typer.Option(
        "--only-matching",
        "-o",
        help="Only print lines that contain at least one match.",
    ),
]

VERBOSE_OPTION = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable debug logging on stderr",
    ),
]
