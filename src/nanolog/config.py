# ===== MODULE DOCSTRING ===== #
"""
nanolog Configuration Constants

Process-wide constants shared by the level registry, the logger factory and
the emission layer. Nothing in here is mutated at runtime; the mutable color
state lives in `nanolog.levels.ColorPalette`.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, FrozenSet, List

# ===== GLOBALS ===== #

## ===== FORMATTING FLAGS ===== ##
# Bits combined with | to select the metadata written before each message.
DATE: Final[int] = 1            # 2009/01/23
TIME: Final[int] = 2            # 01:23:23
MICROSECONDS: Final[int] = 4    # 01:23:23.123123, implies TIME
LONG_FILE: Final[int] = 8       # /a/b/c/d.py:23
SHORT_FILE: Final[int] = 16     # d.py:23, overrides LONG_FILE
UTC: Final[int] = 32            # render DATE/TIME in UTC
STD_FLAGS: Final[int] = DATE | TIME

# Legacy "explicitly no flags" sentinel. An explicit 0 means the same thing.
NO_FLAGS: Final[int] = -1

## ===== LEVEL DEFAULTS ===== ##
DEFAULT_LEVEL: Final[str] = 'ERROR'
DEFAULT_PREFIX: Final[str] = '[%s] '
DEFAULT_FLAGS: Final[int] = STD_FLAGS

## ===== COLORS ===== ##
# ANSI SGR foreground codes. 0 means "no color".
DEFAULT_DEBUG_COLOR: Final[int] = 32  # green
DEFAULT_INFO_COLOR: Final[int] = 35   # magenta
DEFAULT_WARN_COLOR: Final[int] = 33   # yellow
DEFAULT_ERROR_COLOR: Final[int] = 31  # red

COLOR_START: Final[str] = '\x1b[%dm'
COLOR_RESET: Final[str] = '\x1b[m'

# sys.platform prefixes whose terminals render ANSI escapes
COLOR_PLATFORMS: Final[FrozenSet[str]] = frozenset({'linux', 'darwin'})

## ===== PROCESS ===== ##
FATAL_EXIT_CODE: Final[int] = 1

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'DATE', 'TIME', 'MICROSECONDS', 'LONG_FILE', 'SHORT_FILE', 'UTC',
    'STD_FLAGS', 'NO_FLAGS',
    'DEFAULT_LEVEL', 'DEFAULT_PREFIX', 'DEFAULT_FLAGS',
    'DEFAULT_DEBUG_COLOR', 'DEFAULT_INFO_COLOR', 'DEFAULT_WARN_COLOR', 'DEFAULT_ERROR_COLOR',
    'COLOR_START', 'COLOR_RESET', 'COLOR_PLATFORMS',
    'FATAL_EXIT_CODE',
]
