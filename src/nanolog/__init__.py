# ===== MODULE DOCSTRING ===== #
"""
nanolog - a minimal leveled logging facade.

Five severity channels (DEBUG, INFO, WARN, ERROR, FATAL), each with its own
writer, prefix, color and metadata flags, behind one minimum-level threshold.

Usage:
    import nanolog

    nanolog.init(nanolog.GlobalConfig(level=nanolog.Severity.DEBUG))

    nanolog.debug().println("debug")
    nanolog.info().printf("%d items", 3)
    nanolog.log(nanolog.Severity.WARN, "warn")
    nanolog.fatal().println("fatal")  # writes, then ends the process
"""

# ===== IMPORTS ===== #

## ===== LOCAL ===== ##
from .config import (
    DATE, TIME, MICROSECONDS, LONG_FILE, SHORT_FILE, UTC,
    STD_FLAGS, NO_FLAGS, DEFAULT_PREFIX
)
from .levels import Severity, ColorPalette, parse_level
from .logger import Logger, DISCARD
from .factory import (
    LevelOverride, GlobalConfig, LoggingContext, NanoLogger,
    format_prefix, resolve, init, get_logger, log, logf, no_color,
    default_logger, debug, info, warn, error, fatal
)

# ===== GLOBALS ===== #

## ===== EXPORTS ===== ##
__all__ = [
    # Flags
    'DATE', 'TIME', 'MICROSECONDS', 'LONG_FILE', 'SHORT_FILE', 'UTC',
    'STD_FLAGS', 'NO_FLAGS', 'DEFAULT_PREFIX',
    # Levels
    'Severity', 'ColorPalette', 'parse_level',
    # Loggers
    'Logger', 'DISCARD',
    # Configuration
    'LevelOverride', 'GlobalConfig', 'LoggingContext', 'NanoLogger',
    'format_prefix', 'resolve', 'init', 'no_color',
    # Access and emission
    'get_logger', 'debug', 'info', 'warn', 'error', 'fatal',
    'log', 'logf', 'default_logger',
]
