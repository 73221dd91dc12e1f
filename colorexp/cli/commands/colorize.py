"""Colorize command implementation."""

import logging
import sys
from typing import Annotated

import typer
from pydantic import ValidationError as SettingsValidationError

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
from colorexp.config import load_config
from colorexp.core.constants import PACKAGE_VERSION, PROGRAM_NAME, ExitCode
from colorexp.core.highlighting import HighlightSettings, build_highlighter
from colorexp.core.palette import HighlightMode
from colorexp.exceptions import ConfigurationError, InputStreamError, ValidationError
from colorexp.utils.logger import setup_logging

logger = logging.getLogger(__name__)

USAGE_HINT = f"Run '{PROGRAM_NAME} --help' for usage."


def _version_callback(value: bool) -> None:
    if value:
        print(f"{PROGRAM_NAME} {PACKAGE_VERSION}")
        raise typer.Exit()


def resolve_mode(highlight: bool, mode: HighlightMode | None, default: HighlightMode) -> HighlightMode:
    """Combine --highlight, --mode and the configured default into one palette choice.

    Raises:
        ConfigurationError: If --highlight is combined with a non-background mode
    """
    if highlight:
        if mode not in (None, HighlightMode.BACKGROUND):
            raise ConfigurationError(f"--highlight cannot be combined with --mode {mode.value}.")
        return HighlightMode.BACKGROUND
    return mode or default


def colorize(
    patterns: PATTERNS_ARGUMENT,
    fixed_strings: FIXED_STRINGS_OPTION = False,
    ignore_case: IGNORE_CASE_OPTION = False,
    highlight: HIGHLIGHT_OPTION = False,
    mode: MODE_OPTION = None,
    vary_group_colors: VARY_GROUP_COLORS_OPTION = None,
    full_match: FULL_MATCH_OPTION = False,
    only_matching: ONLY_MATCHING_OPTION = False,
    verbose: VERBOSE_OPTION = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Display version information and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Colorize parts of standard input that match regular expressions.

    Each pattern gets its own color. Where matches of several patterns overlap,
    the pattern given last wins. Capturing groups restrict coloring to the
    grouped parts of a match.
    """
    try:
        config = load_config()
    except SettingsValidationError as e:
        report_error(f"Invalid configuration: {e}")
        raise typer.Exit(ExitCode.CONFIGURATION_ERROR) from e

    setup_logging(config.log_file, "DEBUG" if verbose else config.log_level)

    try:
        if vary_group_colors and full_match:
            raise ConfigurationError("--vary-group-colors and --full-match are mutually exclusive.")
        settings = HighlightSettings(
            fixed_strings=fixed_strings,
            ignore_case=ignore_case,
            vary_group_colors=vary_group_colors,
            full_match=full_match,
            mode=resolve_mode(highlight, mode, config.highlight_mode),
            only_matching=only_matching,
        )
        highlighter = build_highlighter(settings, patterns)
    except (ConfigurationError, ValidationError) as e:
        report_error(str(e), USAGE_HINT)
        raise typer.Exit(ExitCode.CONFIGURATION_ERROR) from e

    enable_byte_passthrough(sys.stdin, sys.stdout)
    try:
        written = write_lines(highlighter.highlight_lines(iter_lines(sys.stdin, config.max_line_length)))
    except BrokenPipeError as e:
        # Reader went away, as with "| head"
        silence_stdout()
        raise typer.Exit(ExitCode.OK) from e
    except InputStreamError as e:
        # Lines already written must come out before the error
        sys.stdout.flush()
        report_error(str(e))
        raise typer.Exit(ExitCode.INPUT_ERROR) from e

    logger.debug(f"Wrote {written} lines")
