# ===== MODULE DOCSTRING ===== #
"""
nanolog Diagnostic Logging

nanolog writes user messages straight to the configured writers. Its own
internal diagnostics (reconfiguration traces, accepted-but-odd input) go
through a standard library logger named 'nanolog' so they can be routed
and filtered like any other library's.

The logger is configured with the following defaults:
- Output: Standard error stream (sys.stderr)
- Format: "%(levelname)s:%(name)s: %(message)s"
- Default Level: WARNING

Usage:
    from nanolog.logging import set_verbosity
    import logging

    # See every reconfiguration step
    set_verbosity(logging.DEBUG)
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List
import logging
import sys

# ===== GLOBALS ===== #

## ===== CONSTANTS ===== ##
LOG_FORMAT: Final[str] = '%(levelname)s:%(name)s: %(message)s'

VALID_LEVELS: Final[List[int]] = [
    logging.DEBUG,
    logging.INFO,
    logging.WARNING,
    logging.ERROR,
    logging.CRITICAL
]

## ===== LOGGER SETUP ===== ##
_log: Final[logging.Logger] = logging.getLogger('nanolog')

if not _log.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _log.addHandler(_handler)
    # Own stderr handler; keep records out of the root logger's handlers.
    _log.propagate = False
    _log.setLevel(logging.WARNING)

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'set_verbosity',
]

# ===== FUNCTIONS ===== #

def set_verbosity(level: int) -> None:
    """Set the verbosity of nanolog's internal diagnostics.

    This only affects the 'nanolog' standard library logger, never the
    severity threshold of the leveled loggers (use `nanolog.init` for that).

    Args:
        level: A logging level constant from the logging module
              (e.g., logging.DEBUG, logging.INFO, logging.WARNING)

    Raises:
        ValueError: If an invalid logging level is provided
    """
    if level not in VALID_LEVELS:
        raise ValueError(
            f"Invalid logging level: {level}. "
            f"Use logging module constants (e.g., logging.DEBUG). "
            f"Valid levels: {[logging.getLevelName(l) for l in VALID_LEVELS]}"
        )

    _log.setLevel(level)
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(f"TRACE logging.set_verbosity: nanolog verbosity set to {logging.getLevelName(level)}")
