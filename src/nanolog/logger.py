# ===== MODULE DOCSTRING ===== #
"""
Leveled logger values for nanolog.

A `Logger` is the resolved emission target of one severity: a writer, a
precomputed prefix (color codes already embedded) and a set of metadata
flags. Loggers are immutable; reconfiguration builds new ones.

Each line is written as::

    <prefix><date ><time[.micro] ><file:line: ><message>\\n

and flushed right away. Loggers writing to DISCARD do no formatting at all.

The FATAL logger is special: `println`/`printf` on it hand over to
`fatalln`/`fatalf`, which write the line and then end the process. They
never return.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from datetime import datetime, timezone
from typing import Any, Callable, Final, List, NoReturn, Optional, TextIO, Tuple
import dataclasses
import threading
import logging
import inspect
import sys
import os

## ===== LOCAL ===== ##
from .config import (
    DATE, TIME, MICROSECONDS, LONG_FILE, SHORT_FILE, UTC,
    FATAL_EXIT_CODE
)
from .levels import Severity
from .logging import _log

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'Logger',
    'DISCARD',
]

# ===== CLASSES ===== #

class _Discard:
    """Writer that drops everything written to it."""

    def write(self, text: str) -> int:
        return len(text)

    def flush(self) -> None:
        pass

    def __repr__(self) -> str:
        return 'DISCARD'

DISCARD: Final[_Discard] = _Discard()

def _exit_process(code: int) -> NoReturn:
    """Flush the standard streams and end the process without cleanup."""
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()
    os._exit(code)

@dataclasses.dataclass(frozen=True)
class Logger:
    """Resolved logger for one severity.

    Attributes:
        severity (Severity): Channel this logger serves.
        writer (TextIO): Destination; anything with a `write(str)` method.
        prefix (str): Fully formatted prefix written at the start of each line.
        flags (int): Metadata flag bits (see `nanolog.config`).
        exit_func (Callable[[int], Any]): Called with the exit status after a
            fatal line is written. Defaults to ending the process immediately.
    """
    severity: Severity
    writer: TextIO
    prefix: str = ''
    flags: int = 0
    exit_func: Callable[[int], Any] = _exit_process
    _lock: threading.Lock = dataclasses.field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    @property
    def discarding(self) -> bool:
        return self.writer is DISCARD

    ## ===== EMISSION ===== ##
    def println(self, *values: Any) -> None:
        """Write the values joined by spaces. Ends the process on FATAL."""
        if self.severity is Severity.FATAL:
            self.fatalln(*values)
        if self.writer is DISCARD:
            return
        self._output(' '.join(str(v) for v in values))

    def printf(self, fmt: str, *values: Any) -> None:
        """Write `fmt % values`. Ends the process on FATAL."""
        if self.severity is Severity.FATAL:
            self.fatalf(fmt, *values)
        if self.writer is DISCARD:
            return
        self._output(fmt % values if values else fmt)

    def fatalln(self, *values: Any) -> NoReturn:
        """Write the values joined by spaces, then end the process. Never returns."""
        self._output(' '.join(str(v) for v in values))
        self._terminate()

    def fatalf(self, fmt: str, *values: Any) -> NoReturn:
        """Write `fmt % values`, then end the process. Never returns."""
        self._output(fmt % values if values else fmt)
        self._terminate()

    ## ===== INTERNALS ===== ##
    def _terminate(self) -> NoReturn:
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE logger._terminate: Fatal message written by {self.severity}, exiting with {FATAL_EXIT_CODE}")
        self.exit_func(FATAL_EXIT_CODE)
        # An injected exit hook returned; keep the "never returns" contract.
        raise SystemExit(FATAL_EXIT_CODE)

    def _output(self, message: str) -> None:
        if self.writer is DISCARD:
            return
        header = self._format_header(datetime.now(timezone.utc if self.flags & UTC else None))
        if not message.endswith('\n'):
            message += '\n'
        with self._lock:
            self.writer.write(self.prefix + header + message)
            flush = getattr(self.writer, 'flush', None)
            if flush is not None:
                flush()

    def _format_header(self, now: datetime) -> str:
        header = ''
        if self.flags & DATE:
            header += now.strftime('%Y/%m/%d ')
        if self.flags & (TIME | MICROSECONDS):
            header += now.strftime('%H:%M:%S')
            if self.flags & MICROSECONDS:
                header += f'.{now.microsecond:06d}'
            header += ' '
        if self.flags & (SHORT_FILE | LONG_FILE):
            filename, lineno = _get_caller_location()
            if self.flags & SHORT_FILE:
                filename = os.path.basename(filename)
            header += f'{filename}:{lineno}: '
        return header

# ===== FUNCTIONS ===== #

def _get_caller_location() -> Tuple[str, int]:
    """Find the first stack frame outside the nanolog package.

    Returns:
        (filename, lineno) of that frame, or ('???', 0) if none is found.
    """
    frame: Optional[Any] = inspect.currentframe()
    try:
        search_frame = frame.f_back if frame is not None else None
        while search_frame is not None:
            module_name = search_frame.f_globals.get('__name__', '')
            if module_name != 'nanolog' and not module_name.startswith('nanolog.'):
                return search_frame.f_code.co_filename, search_frame.f_lineno
            search_frame = search_frame.f_back
        return '???', 0
    finally:
        del frame
