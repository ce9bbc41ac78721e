import pytest
import sys
import os
import re

# Add src dir to path to allow importing nanolog without installing it
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from nanolog import factory
from nanolog.factory import LoggingContext, GlobalConfig
from nanolog.logging import _log

# The context built when nanolog was first imported, before any test swapped it out,
# and the standard streams it resolved its default writers against
IMPORT_TIME_CONTEXT = factory._context
IMPORT_TIME_STREAMS = (sys.stdout, sys.stderr)


@pytest.fixture(scope="function", autouse=True)
def fresh_context(monkeypatch):
    """Give every test its own process-wide context with colors on."""
    context = LoggingContext(GlobalConfig(color=True))
    monkeypatch.setattr(factory, '_context', context)
    yield context

@pytest.fixture
def nanolog_records(caplog):
    """caplog wired to the 'nanolog' diagnostic logger, which does not propagate."""
    _log.addHandler(caplog.handler)
    try:
        yield caplog
    finally:
        _log.removeHandler(caplog.handler)

# --- Helper: Strip ANSI Codes ---
_ANSI_RE = re.compile(r'\x1b\[[0-9;]*m')

def strip_ansi(text: str) -> str:
    """Removes ANSI color escape sequences."""
    return _ANSI_RE.sub('', text)
# --- End Helper ---
