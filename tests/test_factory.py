import logging
import pytest
import sys
import io

from nanolog import config
from nanolog.config import STD_FLAGS, NO_FLAGS, DEFAULT_PREFIX, DATE, SHORT_FILE
from nanolog.levels import Severity, ColorPalette
from nanolog.logger import DISCARD
from nanolog.factory import (
    LevelOverride, GlobalConfig,
    format_prefix, resolve, platform_supports_color
)

# --- format_prefix ---

def test_format_prefix_wraps_tag_in_color():
    assert format_prefix(DEFAULT_PREFIX, 32, Severity.DEBUG) == "[\x1b[32mDEBUG\x1b[m] "

def test_format_prefix_without_color_uses_bare_tag():
    assert format_prefix(DEFAULT_PREFIX, 0, Severity.INFO) == "[INFO] "

def test_format_prefix_custom_template():
    assert format_prefix("<%s> ", 0, Severity.WARN) == "<WARN> "

def test_format_prefix_without_slot_appends_tag(nanolog_records):
    with nanolog_records.at_level(logging.WARNING, logger='nanolog'):
        assert format_prefix(">> ", 0, Severity.ERROR) == ">> ERROR"
    assert "has no '%s' slot" in nanolog_records.text

@pytest.mark.parametrize("template, expected", [
    ("[%s] 100% ", "[INFO] 100% "),
    ("%s %s", "INFO %s"),
    ("%s at %d%%", "INFO at %d%%"),
])
def test_format_prefix_with_stray_percent_fills_first_slot(nanolog_records, template, expected):
    with nanolog_records.at_level(logging.WARNING, logger='nanolog'):
        assert format_prefix(template, 0, Severity.INFO) == expected
    assert "not a valid format" in nanolog_records.text

def test_resolve_accepts_prefix_with_stray_percent():
    buf = io.StringIO()
    loggers = resolve(
        GlobalConfig(
            level=Severity.DEBUG,
            debug=LevelOverride(writer=buf, prefix="[%s] 100% ", flags=0),
            color=False,
        ),
        ColorPalette(),
    )
    loggers[Severity.DEBUG].println("x")
    assert buf.getvalue() == "[DEBUG] 100% x\n"

# --- Threshold ---

def test_missing_level_defaults_to_error():
    loggers = resolve(GlobalConfig(color=True), ColorPalette())
    for severity in (Severity.DEBUG, Severity.INFO, Severity.WARN):
        assert loggers[severity].writer is DISCARD
    for severity in (Severity.ERROR, Severity.FATAL):
        assert loggers[severity].writer is sys.stderr

def test_empty_level_string_defaults_to_error():
    loggers = resolve(GlobalConfig(level=''), ColorPalette())
    assert loggers[Severity.WARN].discarding
    assert not loggers[Severity.ERROR].discarding

@pytest.mark.parametrize("level", list(Severity))
def test_levels_below_threshold_are_silenced(level):
    loggers = resolve(GlobalConfig(level=level), ColorPalette())
    for severity, logger in loggers.items():
        assert logger.discarding == (severity.priority < level.priority)

def test_level_accepts_exact_tag_string():
    loggers = resolve(GlobalConfig(level='WARN'), ColorPalette())
    assert loggers[Severity.INFO].discarding
    assert not loggers[Severity.WARN].discarding

def test_unknown_level_silences_nothing(nanolog_records):
    """Level tags are case-sensitive; an unknown tag leaves every level active."""
    with nanolog_records.at_level(logging.WARNING, logger='nanolog'):
        loggers = resolve(GlobalConfig(level='debug'), ColorPalette())
    assert not any(logger.discarding for logger in loggers.values())
    assert "Unknown log level" in nanolog_records.text

def test_fatal_is_always_active():
    loggers = resolve(GlobalConfig(level=Severity.FATAL), ColorPalette())
    assert not loggers[Severity.FATAL].discarding
    assert sum(1 for logger in loggers.values() if logger.discarding) == 4

def test_silenced_level_discards_its_override():
    buf = io.StringIO()
    override = LevelOverride(writer=buf, color=36, prefix="<%s>", flags=DATE)
    loggers = resolve(GlobalConfig(level=Severity.INFO, debug=override), ColorPalette())
    debug = loggers[Severity.DEBUG]
    assert debug.writer is DISCARD
    assert debug.prefix == ''
    assert debug.flags == STD_FLAGS
    debug.println("never")
    assert buf.getvalue() == ''

def test_one_logger_per_severity():
    loggers = resolve(GlobalConfig(level=Severity.DEBUG), ColorPalette())
    assert set(loggers) == set(Severity)
    assert all(loggers[s].severity is s for s in Severity)

# --- Override merging ---

def test_defaults_without_overrides():
    loggers = resolve(GlobalConfig(level=Severity.DEBUG, color=True), ColorPalette())
    info = loggers[Severity.INFO]
    assert info.writer is sys.stdout
    assert info.prefix == format_prefix(DEFAULT_PREFIX, config.DEFAULT_INFO_COLOR, Severity.INFO)
    assert info.flags == STD_FLAGS
    assert loggers[Severity.FATAL].prefix == "[\x1b[31mFATAL\x1b[m] "

def test_override_fields_win():
    buf = io.StringIO()
    override = LevelOverride(writer=buf, color=36, prefix="<%s> ", flags=SHORT_FILE)
    loggers = resolve(GlobalConfig(level=Severity.DEBUG, warn=override, color=True), ColorPalette())
    warn = loggers[Severity.WARN]
    assert warn.writer is buf
    assert warn.prefix == "<\x1b[36mWARN\x1b[m> "
    assert warn.flags == SHORT_FILE

def test_partial_override_keeps_other_defaults():
    buf = io.StringIO()
    loggers = resolve(
        GlobalConfig(level=Severity.DEBUG, error=LevelOverride(writer=buf), color=True),
        ColorPalette(),
    )
    error = loggers[Severity.ERROR]
    assert error.writer is buf
    assert error.prefix == "[\x1b[31mERROR\x1b[m] "
    assert error.flags == STD_FLAGS

def test_empty_prefix_override_falls_back_to_default():
    loggers = resolve(
        GlobalConfig(level=Severity.DEBUG, info=LevelOverride(prefix=''), color=False),
        ColorPalette(),
    )
    assert loggers[Severity.INFO].prefix == "[INFO] "

@pytest.mark.parametrize("flags", [0, NO_FLAGS])
def test_explicit_zero_flags_disable_metadata(flags):
    loggers = resolve(
        GlobalConfig(level=Severity.DEBUG, debug=LevelOverride(flags=flags)),
        ColorPalette(),
    )
    assert loggers[Severity.DEBUG].flags == 0

def test_explicit_zero_color_disables_color_for_one_level():
    loggers = resolve(
        GlobalConfig(level=Severity.DEBUG, debug=LevelOverride(color=0), color=True),
        ColorPalette(),
    )
    assert loggers[Severity.DEBUG].prefix == "[DEBUG] "
    assert "\x1b[" in loggers[Severity.INFO].prefix

def test_override_writer_receives_line():
    buf = io.StringIO()
    loggers = resolve(
        GlobalConfig(level=Severity.DEBUG, debug=LevelOverride(writer=buf, flags=0), color=False),
        ColorPalette(),
    )
    loggers[Severity.DEBUG].println("x")
    assert buf.getvalue() == "[DEBUG] x\n"

# --- Color capability ---

@pytest.mark.parametrize("platform, expected", [
    ("linux", True),
    ("darwin", True),
    ("win32", False),
    ("cygwin", False),
    ("freebsd13", False),
])
def test_platform_allow_list(platform, expected):
    assert platform_supports_color(platform) is expected

def test_color_false_disables_shared_palette():
    palette = ColorPalette()
    loggers = resolve(GlobalConfig(level=Severity.DEBUG, color=False), palette)
    assert palette.disabled
    assert not any("\x1b[" in logger.prefix for logger in loggers.values())

def test_unsupported_platform_disables_shared_palette(monkeypatch):
    monkeypatch.setattr(sys, 'platform', 'win32')
    palette = ColorPalette()
    loggers = resolve(GlobalConfig(level=Severity.DEBUG), palette)
    assert palette.disabled
    assert loggers[Severity.WARN].prefix == "[WARN] "

def test_supported_platform_keeps_colors(monkeypatch):
    monkeypatch.setattr(sys, 'platform', 'linux')
    palette = ColorPalette()
    loggers = resolve(GlobalConfig(level=Severity.DEBUG), palette)
    assert not palette.disabled
    assert loggers[Severity.WARN].prefix == "[\x1b[33mWARN\x1b[m] "

def test_disabled_palette_ignores_override_colors():
    palette = ColorPalette()
    palette.disable()
    loggers = resolve(
        GlobalConfig(level=Severity.DEBUG, info=LevelOverride(color=36), color=True),
        palette,
    )
    assert loggers[Severity.INFO].prefix == "[INFO] "

def test_color_true_does_not_reenable_disabled_palette():
    palette = ColorPalette()
    palette.disable()
    resolve(GlobalConfig(color=True), palette)
    assert palette.disabled
