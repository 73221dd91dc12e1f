"""Shared output handlers for CLI commands."""

import logging
import os
import sys
from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)

err_console = Console(stderr=True, highlight=False)


def write_lines(lines: Iterable[str]) -> int:
    """Write rendered lines to stdout as they are produced.

    Lines go out with print, never through rich, so the escape sequences
    reach the terminal untouched.

    Returns:
        Number of lines written
    """
    count = 0
    for line in lines:
        print(line)
        count += 1
    return count


def report_error(message: str, hint: str | None = None) -> None:
    """Print an error, and an optional hint, to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    if hint:
        err_console.print(f"[dim]{escape(hint)}[/dim]")


def silence_stdout() -> None:
    """Point stdout at the null device once the reading end of a pipe has closed.

    The interpreter flushes stdout on exit, which would raise BrokenPipeError again.
    """
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError) as e:
        logger.debug(f"Could not redirect stdout: {e}")
