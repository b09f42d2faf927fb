"""Plain console backend.

Lines look like::

    2026/10/18 14:03:27 [WARN] [app.db] pool exhausted size=10

The date/time/file prefix is controlled by config.flags (see Flags).
Writes go to stdout unless the config names another stream or a file.
"""

import logging
import time

from ..config import Flags
from ..levels import Level
from ..logger import SinkLogger
from ..sink import CALLER_STACKLEVEL, RECORD_LEVELS

_CLOCK_FLAGS = Flags.DATE | Flags.TIME | Flags.MICROSECONDS
_FILE_FLAGS = Flags.SHORTFILE | Flags.LONGFILE


class ConsoleFormatter(logging.Formatter):
    """Prefix a pre-rendered line with date, time and caller location."""

    def __init__(self, flags: Flags = Flags.STD):
        super().__init__()
        self.flags = Flags(flags)

    def format(self, record: logging.LogRecord) -> str:
        return self.prefix(record) + record.getMessage()

    def prefix(self, record: logging.LogRecord) -> str:
        flags = self.flags
        parts = []
        if flags & _CLOCK_FLAGS:
            ct = time.gmtime(record.created) if flags & Flags.UTC else time.localtime(record.created)
            if flags & Flags.DATE:
                parts.append(time.strftime("%Y/%m/%d", ct))
            if flags & (Flags.TIME | Flags.MICROSECONDS):
                clock = time.strftime("%H:%M:%S", ct)
                if flags & Flags.MICROSECONDS:
                    clock += ".%06d" % int((record.created % 1) * 1_000_000)
                parts.append(clock)
        if flags & _FILE_FLAGS:
            path = record.filename if flags & Flags.SHORTFILE else record.pathname
            parts.append(f"{path}:{record.lineno}:")
        return " ".join(parts) + " " if parts else ""


def format_fields(fields: dict) -> str:
    """Render structured fields as a ' key=value' suffix."""
    if not fields:
        return ""
    return " " + " ".join(f"{key}={value}" for key, value in fields.items())


class ConsoleLogger(SinkLogger):
    """Writes `[LEVEL] [namespace] message` lines."""

    def _make_formatter(self):
        return ConsoleFormatter(self.config.flags)

    def _write(self, level: Level, message: str, fields: dict) -> None:
        self._sink.log(RECORD_LEVELS[level], self._render(level, message, fields),
                       stacklevel=CALLER_STACKLEVEL)

    def _render(self, level: Level, message: str, fields: dict) -> str:
        return self._line(level.name, message, fields)

    def _line(self, label: str, message: str, fields: dict) -> str:
        return f"[{label}] [{self.namespace}] {message}{format_fields(fields)}"
