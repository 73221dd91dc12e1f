"""
Constants and configuration values for colorexp.
"""

from enum import IntEnum, StrEnum

# Version
PROGRAM_NAME = "colorexp"
PACKAGE_VERSION = "1.0.2"


class ExitCode(IntEnum):
    """Process exit codes."""

    OK = 0
    CONFIGURATION_ERROR = 1
    INPUT_ERROR = 2


class InputLimits(IntEnum):
    """Limits applied while reading standard input."""

    # Same cap as a default line scanner buffer
    MAX_LINE_LENGTH = 65536


class AnsiCodes(StrEnum):
    """Terminal color-control sequences."""

    FG_RED = "\033[31m"
    FG_GREEN = "\033[32m"
    FG_YELLOW = "\033[33m"
    FG_BLUE = "\033[34m"
    FG_MAGENTA = "\033[35m"
    FG_CYAN = "\033[36m"
    FG_RESET = "\033[0m"

    BG_RED = "\033[41m"
    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_BLUE = "\033[44m"
    BG_MAGENTA = "\033[45m"
    BG_CYAN = "\033[46m"
    BG_RESET = "\033[49m"


# Black and white are left out, they vanish on common terminal themes.
FOREGROUND_COLORS: tuple[str, ...] = (
    AnsiCodes.FG_RED,
    AnsiCodes.FG_GREEN,
    AnsiCodes.FG_YELLOW,
    AnsiCodes.FG_BLUE,
    AnsiCodes.FG_MAGENTA,
    AnsiCodes.FG_CYAN,
)

BACKGROUND_COLORS: tuple[str, ...] = (
    AnsiCodes.BG_RED,
    AnsiCodes.BG_BLUE,
    AnsiCodes.BG_MAGENTA,
    AnsiCodes.BG_GREEN,
    AnsiCodes.BG_YELLOW,
    AnsiCodes.BG_CYAN,
)
