# ===== MODULE DOCSTRING ===== #
"""
Logger factory for nanolog.

Turns a `GlobalConfig` (minimum level plus optional per-level overrides) into
one concrete `Logger` per severity, and owns the lock-guarded state that
holds the current set.

Resolution rules:
1. A missing level means ERROR.
2. Colors are disabled first when the caller says the terminal can't render
   them, or, without an explicit answer, when the platform is not one of
   `config.COLOR_PLATFORMS`. This disables the shared palette, not just the
   loggers being built.
3. Severities below the minimum get a DISCARD logger with an empty prefix
   and standard flags. Their overrides are dropped.
4. Other severities merge their override over the built-in defaults field
   by field; `None` means "not supplied".
5. The new set replaces the old one in a single swap.

Usage:
    import io
    import nanolog

    buf = io.StringIO()
    nanolog.init(nanolog.GlobalConfig(
        level=nanolog.Severity.DEBUG,
        debug=nanolog.LevelOverride(writer=buf, flags=0),
    ))
    nanolog.debug().println("x")   # buf: "[\\x1b[32mDEBUG\\x1b[m] x\\n"
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Any, Dict, Final, List, Optional, TextIO, Union
import dataclasses
import threading
import logging
import sys

## ===== LOCAL ===== ##
from .config import (
    DEFAULT_LEVEL, STD_FLAGS, NO_FLAGS,
    COLOR_START, COLOR_RESET, COLOR_PLATFORMS
)
from .levels import Severity, ColorPalette, get_default_options
from .logger import Logger, DISCARD
from .logging import _log

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'LevelOverride',
    'GlobalConfig',
    'LoggingContext',
    'NanoLogger',
    'format_prefix',
    'resolve',
    'platform_supports_color',
    'init',
    'get_logger',
    'debug',
    'info',
    'warn',
    'error',
    'fatal',
    'log',
    'logf',
    'no_color',
    'default_logger',
]

# ===== CLASSES ===== #

## ===== CONFIGURATION ===== ##
@dataclasses.dataclass(frozen=True)
class LevelOverride:
    """Caller-supplied settings for one severity. `None` keeps the default.

    Attributes:
        writer (Optional[TextIO]): Destination stream.
        color (Optional[int]): ANSI color code; 0 turns color off for this level.
        prefix (Optional[str]): Prefix template with one `%s` slot.
        flags (Optional[int]): Metadata flag bits; 0 (or `NO_FLAGS`) turns all
            metadata off.
    """
    writer: Optional[TextIO] = None
    color: Optional[int] = None
    prefix: Optional[str] = None
    flags: Optional[int] = None

@dataclasses.dataclass(frozen=True)
class GlobalConfig:
    """Everything `init` needs to rebuild the logger set.

    Attributes:
        level (Union[Severity, str, None]): Minimum active severity, either a
            Severity or its exact tag ('DEBUG', 'INFO', ...). Empty means ERROR.
        debug, info, warn, error, fatal (Optional[LevelOverride]): Per-level
            overrides.
        color (Optional[bool]): Whether the output can render ANSI colors.
            `False` disables colors for good, `None` decides by platform.
    """
    level: Union[Severity, str, None] = None
    debug: Optional[LevelOverride] = None
    info: Optional[LevelOverride] = None
    warn: Optional[LevelOverride] = None
    error: Optional[LevelOverride] = None
    fatal: Optional[LevelOverride] = None
    color: Optional[bool] = None

    def overrides(self) -> Dict[Severity, LevelOverride]:
        """Per-severity overrides, with an empty override for absent ones."""
        return {
            Severity.DEBUG: self.debug or LevelOverride(),
            Severity.INFO: self.info or LevelOverride(),
            Severity.WARN: self.warn or LevelOverride(),
            Severity.ERROR: self.error or LevelOverride(),
            Severity.FATAL: self.fatal or LevelOverride(),
        }

## ===== CONTEXT ===== ##
class LoggingContext:
    """Owns a palette and the current severity -> Logger mapping.

    Both reconfiguration and lookup hold the same lock, and only around the
    mapping swap/read. Emission happens outside the lock, so a message can
    still go out through a logger that a concurrent `init` is replacing.
    """

    def __init__(self, config: Optional[GlobalConfig] = None) -> None:
        self._lock = threading.Lock()
        self.palette = ColorPalette()
        self._loggers: Dict[Severity, Logger] = {}
        self.init(config)

    def init(self, config: Optional[GlobalConfig] = None) -> None:
        """Rebuild every logger from `config` and swap the set in."""
        with self._lock:
            self._loggers = resolve(config or GlobalConfig(), self.palette)

    def get(self, severity: Union[Severity, str]) -> Logger:
        """Current logger of `severity`, given as a Severity or its exact tag.

        Raises:
            ValueError: If `severity` names no level (e.g. `parse_level`'s None).
        """
        severity = Severity(severity)
        with self._lock:
            return self._loggers[severity]

    def no_color(self) -> None:
        """Disable colors for every later `init`. Idempotent."""
        with self._lock:
            self.palette.disable()

    def debug(self) -> Logger:
        return self.get(Severity.DEBUG)

    def info(self) -> Logger:
        return self.get(Severity.INFO)

    def warn(self) -> Logger:
        return self.get(Severity.WARN)

    def error(self) -> Logger:
        return self.get(Severity.ERROR)

    def fatal(self) -> Logger:
        return self.get(Severity.FATAL)

    def log(self, severity: Union[Severity, str], *values: Any) -> None:
        self.get(severity).println(*values)

    def logf(self, severity: Union[Severity, str], fmt: str, *values: Any) -> None:
        self.get(severity).printf(fmt, *values)

class NanoLogger:
    """Stateless handle on the process-wide loggers.

    Useful where an object with logger-like accessors is expected; every
    call reads the current configuration.
    """

    def debug(self) -> Logger:
        return debug()

    def info(self) -> Logger:
        return info()

    def warn(self) -> Logger:
        return warn()

    def error(self) -> Logger:
        return error()

    def fatal(self) -> Logger:
        return fatal()

# ===== FUNCTIONS ===== #

## ===== RESOLUTION ===== ##
def platform_supports_color(platform: Optional[str] = None) -> bool:
    """Whether `platform` (default `sys.platform`) is on the color allow-list."""
    platform = sys.platform if platform is None else platform
    return any(platform.startswith(name) for name in COLOR_PLATFORMS)

def format_prefix(template: str, color: int, severity: Severity) -> str:
    """Substitute the level tag, color-wrapped when `color` is non-zero, into `template`."""
    tag = severity.tag
    if color:
        tag = (COLOR_START % color) + tag + COLOR_RESET
    if '%s' not in template:
        _log.warning(f"Prefix template {template!r} for {severity} has no '%s' slot; appending the level tag.")
        return template + tag
    try:
        return template % tag
    except (TypeError, ValueError) as e:
        _log.warning(f"Prefix template {template!r} for {severity} is not a valid format ({e}); filling its first '%s' only.")
        return template.replace('%s', tag, 1)

def _threshold(level: Union[Severity, str, None]) -> int:
    """Priority below which severities are silenced.

    Unknown tags give 0, so nothing is silenced.
    """
    if isinstance(level, Severity):
        return level.priority
    try:
        return Severity(level).priority
    except ValueError:
        _log.warning(f"Unknown log level {level!r}; no severity will be suppressed.")
        return 0

def resolve(config: GlobalConfig, palette: ColorPalette) -> Dict[Severity, Logger]:
    """Compute the Logger of every severity for `config`.

    Side effect: disables `palette` when colors are unsupported (see module
    docstring). Callers sharing the palette must hold their lock.
    """
    level = config.level or DEFAULT_LEVEL
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(f"TRACE factory.resolve: Entering with level={level!r}, color={config.color!r}")

    color_capable = platform_supports_color() if config.color is None else config.color
    if not color_capable:
        palette.disable()

    threshold = _threshold(level)
    overrides = config.overrides()
    loggers: Dict[Severity, Logger] = {}

    for severity, defaults in get_default_options(palette).items():
        if defaults.priority < threshold:
            loggers[severity] = Logger(severity, DISCARD, '', STD_FLAGS)
            continue

        override = overrides[severity]
        writer = defaults.writer if override.writer is None else override.writer
        color = defaults.color if override.color is None else override.color
        prefix = override.prefix or defaults.prefix
        flags = defaults.flags if override.flags is None else override.flags
        if flags == NO_FLAGS:
            flags = 0
        if not palette.enabled:
            color = 0

        loggers[severity] = Logger(severity, writer, format_prefix(prefix, color, severity), flags)

    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(f"TRACE factory.resolve: Resolved {loggers!r}")
    return loggers

## ===== PROCESS-WIDE API ===== ##
_context = LoggingContext()
_default_logger = NanoLogger()

def init(config: Optional[GlobalConfig] = None) -> None:
    """Reconfigure the process-wide loggers. Safe to call repeatedly."""
    _context.init(config)

def get_logger(severity: Union[Severity, str]) -> Logger:
    return _context.get(severity)

def debug() -> Logger:
    return _context.debug()

def info() -> Logger:
    return _context.info()

def warn() -> Logger:
    return _context.warn()

def error() -> Logger:
    return _context.error()

def fatal() -> Logger:
    return _context.fatal()

def log(severity: Union[Severity, str], *values: Any) -> None:
    """Write `values` through the current logger of `severity`."""
    _context.log(severity, *values)

def logf(severity: Union[Severity, str], fmt: str, *values: Any) -> None:
    """Write `fmt % values` through the current logger of `severity`."""
    _context.logf(severity, fmt, *values)

def no_color() -> None:
    """Turn ANSI colors off for the next `init`."""
    _context.no_color()

def default_logger() -> NanoLogger:
    return _default_logger
