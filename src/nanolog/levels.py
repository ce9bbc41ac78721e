# ===== MODULE DOCSTRING ===== #
"""
Level registry for nanolog.

Defines the five fixed severities, their priorities, and the built-in
per-level defaults (writer, color, prefix template, flags). Also holds the
`ColorPalette`, the only mutable piece of the registry: four color codes
that `disable()` zeroes for good.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Dict, Final, List, Optional, TextIO
import dataclasses
import enum
import logging
import sys

## ===== LOCAL ===== ##
from .config import (
    DEFAULT_PREFIX, DEFAULT_FLAGS,
    DEFAULT_DEBUG_COLOR, DEFAULT_INFO_COLOR,
    DEFAULT_WARN_COLOR, DEFAULT_ERROR_COLOR
)
from .logging import _log

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'Severity',
    'LevelDefaults',
    'ColorPalette',
    'get_default_options',
    'parse_level',
]

# ===== CLASSES ===== #

class Severity(enum.Enum):
    """A named logging channel, ordered by `priority` (DEBUG lowest)."""
    DEBUG = 'DEBUG'
    INFO = 'INFO'
    WARN = 'WARN'
    ERROR = 'ERROR'
    FATAL = 'FATAL'

    @property
    def tag(self) -> str:
        return self.value

    @property
    def priority(self) -> int:
        return _PRIORITIES[self]

    def __str__(self) -> str:
        return self.value

_PRIORITIES: Final[Dict[Severity, int]] = {
    Severity.DEBUG: 1,
    Severity.INFO: 2,
    Severity.WARN: 3,
    Severity.ERROR: 4,
    Severity.FATAL: 5,
}

@dataclasses.dataclass(frozen=True)
class LevelDefaults:
    """Built-in configuration of one severity.

    Attributes:
        priority (int): Position of the severity in the total order (1..5).
        writer (TextIO): Default destination stream.
        color (int): ANSI color code, 0 for none.
        prefix (str): Prefix template with one `%s` slot for the level tag.
        flags (int): Metadata flag bits (see `nanolog.config`).
    """
    priority: int
    writer: TextIO
    color: int
    prefix: str = DEFAULT_PREFIX
    flags: int = DEFAULT_FLAGS

class ColorPalette:
    """The per-channel color codes in effect for new configurations.

    FATAL has no slot of its own; it shares the ERROR color. Once disabled,
    the palette stays disabled for the rest of its life.
    """

    def __init__(self) -> None:
        self.disabled = False
        self.debug = DEFAULT_DEBUG_COLOR
        self.info = DEFAULT_INFO_COLOR
        self.warn = DEFAULT_WARN_COLOR
        self.error = DEFAULT_ERROR_COLOR

    def disable(self) -> None:
        """Zero every color. Idempotent."""
        self.disabled = True
        self.debug = 0
        self.info = 0
        self.warn = 0
        self.error = 0

    @property
    def enabled(self) -> bool:
        return not self.disabled

    def color_for(self, severity: Severity) -> int:
        if severity is Severity.DEBUG:
            return self.debug
        if severity is Severity.INFO:
            return self.info
        if severity is Severity.WARN:
            return self.warn
        return self.error

    def __repr__(self) -> str:
        return (f"ColorPalette(debug={self.debug}, info={self.info}, "
                f"warn={self.warn}, error={self.error}, disabled={self.disabled})")

# ===== FUNCTIONS ===== #

def get_default_options(palette: ColorPalette) -> Dict[Severity, LevelDefaults]:
    """Build a fresh defaults table using the palette's current colors.

    DEBUG, INFO and WARN default to standard output, ERROR and FATAL to
    standard error. The streams are looked up on every call so a replaced
    `sys.stdout`/`sys.stderr` is honored by the next reconfiguration.
    """
    return {
        severity: LevelDefaults(
            priority=severity.priority,
            writer=sys.stderr if severity.priority >= Severity.ERROR.priority else sys.stdout,
            color=palette.color_for(severity),
        )
        for severity in Severity
    }

def parse_level(text: str) -> Optional[Severity]:
    """Map 'debug', 'INFO', 'Warn', ... to a Severity; anything else gives None."""
    try:
        return Severity(text.upper())
    except (ValueError, AttributeError):
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE levels.parse_level: Unrecognized level {text!r}")
        return None
