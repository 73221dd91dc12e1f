"""Line reading from text streams."""

import io
import logging
from collections.abc import Iterator
from typing import TextIO

from colorexp.exceptions import InputStreamError

logger = logging.getLogger(__name__)


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def enable_byte_passthrough(*streams: TextIO) -> None:
    """Let bytes that are invalid in the stream encoding round-trip unchanged.

    Undecodable input bytes become lone surrogates, which the output stream
    writes back as the original bytes.
    """
    for stream in streams:
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(errors="surrogateescape")


def iter_lines(stream: TextIO, max_line_length: int) -> Iterator[str]:
    """Yield lines of a stream without their terminators.

    Args:
        stream: Text stream to read
        max_line_length: Longest accepted line in decoded characters, terminator excluded

    Raises:
        InputStreamError: If a line is too long or the stream cannot be read
    """
    line_number = 0
    while True:
        try:
            # Room for the line plus a "\r\n" terminator
            raw = stream.readline(max_line_length + 2)
        except (OSError, UnicodeDecodeError) as e:
            raise InputStreamError(f"Error reading standard input: {e}", line_number + 1) from e
        if not raw:
            return
        line_number += 1

        line = _strip_terminator(raw)
        if len(line) > max_line_length:
            logger.debug(f"Line {line_number} exceeds {max_line_length} characters")
            raise InputStreamError(
                f"Error reading standard input: line {line_number} is longer than {max_line_length} characters",
                line_number,
            )
        yield line
