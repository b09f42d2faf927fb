"""Structured backend.

Writes one record per call, to stderr unless configured otherwise:

    {"time": "2026-10-18T14:03:27+02:00", "level": "warn", "ns": "app.db",
     "message": "pool exhausted", "size": 10}

(on a single line). With config.pretty the same record is rendered for
humans instead, fields on indented continuation lines:

    2026-10-18T14:03:27+02:00 WRN [app.db] pool exhausted
        size=10

Records use the logging module's level scale, which has no TRACE:
trace() calls are written as debug records, and a TRACE threshold
behaves like DEBUG.

The global threshold is cached in record-level form, one cache per
LevelState, kept current through the state's level change notifier.
"""

import logging
import sys
import threading
import weakref
from datetime import datetime, timezone

from pythonjsonlogger.json import JsonFormatter

from ..levels import DEFAULT_LEVEL, Level
from ..logger import SinkLogger
from ..sink import CALLER_STACKLEVEL, RECORD_LEVELS
from ..state import LevelState
from .color import LEVEL_COLORS, colorize

# Above CRITICAL: no record passes
RECORD_LEVEL_OFF = logging.CRITICAL + 10

PRETTY_ABBREVIATIONS = {
    Level.FATAL: 'FTL',
    Level.ERROR: 'ERR',
    Level.WARN: 'WRN',
    Level.INFO: 'INF',
    Level.DEBUG: 'DBG',
}


def record_threshold(level: Level) -> int:
    """Map a Level threshold onto the record-level scale."""
    if level == Level.DISABLED:
        return RECORD_LEVEL_OFF
    if level == Level.NONE:
        level = DEFAULT_LEVEL
    return RECORD_LEVELS[Level(level)]


def native_level(level: Level) -> Level:
    """The level a message is written at (TRACE degrades to DEBUG)."""
    return Level.DEBUG if level == Level.TRACE else level


class _CachedThreshold:
    """Record-level mirror of a LevelState's global level."""

    def __init__(self, level: Level = DEFAULT_LEVEL):
        self.value = record_threshold(level)

    def sync(self, level: Level) -> None:
        self.value = record_threshold(level)


_thresholds: "weakref.WeakKeyDictionary[LevelState, _CachedThreshold]" = weakref.WeakKeyDictionary()
_thresholds_lock = threading.Lock()


def cached_threshold(state: LevelState) -> _CachedThreshold:
    """Return the threshold cache for `state`, registering it on first use.

    Registration takes the state's own lock, so it happens after
    _thresholds_lock is released.
    """
    with _thresholds_lock:
        cached = _thresholds.get(state)
        created = cached is None
        if created:
            cached = _thresholds[state] = _CachedThreshold(state.level)
    if created:
        state.register_level_change_handler(cached.sync, replay=True)
    return cached


def _record_time(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, tz=timezone.utc).astimezone().isoformat(
        timespec='seconds')


class RecordFormatter(JsonFormatter):
    """Single-line JSON: time, level, ns, message, then the fields."""

    def __init__(self):
        super().__init__('%(message)s')

    def add_fields(self, log_record, record, message_dict):
        log_record['time'] = _record_time(record)
        log_record['level'] = record.lvlog_level.name.lower()
        if record.lvlog_ns:
            log_record['ns'] = record.lvlog_ns
        log_record['message'] = record.getMessage()
        for key, value in record.lvlog_fields.items():
            log_record.setdefault(key, value)
        log_record.update(message_dict)


class PrettyFormatter(logging.Formatter):
    """Multi-line human-readable rendering of a record."""

    def format(self, record: logging.LogRecord) -> str:
        level = record.lvlog_level
        abbrev = PRETTY_ABBREVIATIONS[level]
        color = LEVEL_COLORS.get(level)
        if color is not None:
            abbrev = colorize(abbrev, color)
        head = [_record_time(record), abbrev]
        if record.lvlog_ns:
            head.append(f"[{record.lvlog_ns}]")
        head.append(record.getMessage())
        lines = [" ".join(head)]
        for key, value in record.lvlog_fields.items():
            lines.append(f"    {key}={value}")
        return "\n".join(lines)


class StructuredLogger(SinkLogger):
    """Logger writing JSON records (or pretty text with config.pretty)."""

    def __init__(self, config=None, state=None, handler=None):
        super().__init__(config, state, handler)
        self._global_threshold = cached_threshold(self._state)

    def _default_stream(self):
        return sys.stderr

    def _make_formatter(self):
        return PrettyFormatter() if self.config.pretty else RecordFormatter()

    def is_enabled(self, level: Level) -> bool:
        record_level = RECORD_LEVELS.get(level)
        if record_level is None:
            return False
        if self._level is not Level.NONE:
            threshold = record_threshold(self._level)
        else:
            threshold = self._global_threshold.value
        return record_level >= threshold

    def _write(self, level: Level, message: str, fields: dict) -> None:
        self._sink.log(
            RECORD_LEVELS[level], message,
            extra={
                'lvlog_level': native_level(level),
                'lvlog_ns': self.namespace,
                'lvlog_fields': fields,
            },
            stacklevel=CALLER_STACKLEVEL,
        )
