"""
Logger — the common call surface of every backend.

The emit rule is: a message shows when is_visible(severity, threshold).
The threshold is the logger's own override if set, otherwise the level
held by its LevelState (the process-wide one unless a state is injected).

Filtering happens before any formatting: a suppressed call costs one
comparison and never touches its arguments.

Call convention::

    log.info("Sent %d value to server %s", 1, "example.com")   # %-style
    log.warn("retrying", attempt=3, delay=0.5)                  # fields

Positional arguments are substituted into the template with %, the same
way the logging module does it. Keyword arguments are structured fields:
the console backends append them as key=value, the structured backend
writes them as record fields.

A template that does not match its arguments never raises: the line is
written with the raw template and the repr of the arguments instead.

fatal() is special: after emitting (or not, if filtered), it ends the
whole process with exit status 1, from whichever thread it is called.
EmptyLogger is the only exception.
"""

import abc
import logging
import os
import sys
from collections.abc import Mapping
from typing import Any, Optional

from .config import LoggerConfig
from .levels import DEFAULT_LEVEL, SEVERITIES, Level, is_visible
from .sink import build_sink, open_handler
from .state import LevelState, get_level_state

FATAL_EXIT_STATUS = 1


def exit_process(status: int) -> None:
    """End the process now with `status`, whichever thread calls it.

    Log handlers and the standard streams are flushed first. atexit
    handlers and finally blocks in other frames do not run.
    """
    try:
        logging.shutdown()
        sys.stdout.flush()
        sys.stderr.flush()
    finally:
        os._exit(status)


class Logger(abc.ABC):
    """Namespaced, leveled logger.

    Subclasses implement _write() to render and output a message that
    has already passed the level check, and sub_logger() to derive a
    child bound to another namespace.
    """

    def __init__(self, config: Optional[LoggerConfig] = None,
                 state: Optional[LevelState] = None):
        self.config = config if config is not None else LoggerConfig()
        self._state = state if state is not None else get_level_state()
        self._level = self.config.level

    @property
    def namespace(self) -> str:
        return self.config.namespace

    @property
    def level(self) -> Level:
        """The instance override (Level.NONE when deferring to global)."""
        return self._level

    @property
    def state(self) -> LevelState:
        return self._state

    def set_level(self, level: Level) -> None:
        """Override the level for this logger only.

        Level.NONE reverts to following the global level.
        """
        self._level = Level(level)

    def effective_level(self) -> Level:
        """The threshold calls are currently checked against."""
        level = self._level if self._level is not Level.NONE else self._state.level
        return DEFAULT_LEVEL if level is Level.NONE else level

    def is_enabled(self, level: Level) -> bool:
        """Check whether a call at `level` would be emitted.

        Used by callers to gate expensive argument preparation.
        """
        return level in SEVERITIES and is_visible(level, self.effective_level())

    # -- severity calls -------------------------------------------------------

    def fatal(self, message: str, *args: Any, **fields: Any) -> None:
        """Emit at FATAL, then exit the process with status 1.

        The exit happens even when the message itself is filtered out, and
        control never returns to the caller.
        """
        self._log(Level.FATAL, message, args, fields)
        self.flush()
        exit_process(FATAL_EXIT_STATUS)

    def error(self, message: str, *args: Any, **fields: Any) -> None:
        self._log(Level.ERROR, message, args, fields)

    def warn(self, message: str, *args: Any, **fields: Any) -> None:
        self._log(Level.WARN, message, args, fields)

    def info(self, message: str, *args: Any, **fields: Any) -> None:
        self._log(Level.INFO, message, args, fields)

    def debug(self, message: str, *args: Any, **fields: Any) -> None:
        self._log(Level.DEBUG, message, args, fields)

    def trace(self, message: str, *args: Any, **fields: Any) -> None:
        self._log(Level.TRACE, message, args, fields)

    def _log(self, level: Level, message: str, args: tuple, fields: dict) -> None:
        if not self.is_enabled(level):
            return
        text = str(message)
        if args:
            # Same convention as logging: a lone mapping feeds %(name)s templates
            if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
                args = args[0]
            try:
                text = text % args
            except (TypeError, ValueError, KeyError):
                text = f"{text} !(BADARGS {args!r})"
        self._write(level, text, fields)

    @abc.abstractmethod
    def _write(self, level: Level, message: str, fields: dict) -> None:
        """Render and output a message that passed the level check."""

    # -- lifecycle ------------------------------------------------------------

    @abc.abstractmethod
    def sub_logger(self, namespace: str, level: Level = Level.NONE) -> "Logger":
        """Derive a child bound to `namespace`.

        The child shares this logger's destination and formatting but has
        its own level override (`level`, by default deferring to global).
        """

    def flush(self) -> None:
        """Flush pending output."""

    def close(self) -> None:
        """Release resources this logger opened itself."""

    def __repr__(self):
        return (f"{type(self).__name__}(namespace={self.namespace!r}, "
                f"level={self._level.name})")


class SinkLogger(Logger):
    """Logger that writes through a logging.Handler.

    The handler comes from the config (stream or output file) unless one
    is passed in, which is how sub-loggers share their parent's sink.
    Only the logger that opened a handler closes it.
    """

    def __init__(self, config: Optional[LoggerConfig] = None,
                 state: Optional[LevelState] = None, handler=None):
        super().__init__(config, state)
        self._owns_handler = handler is None
        if handler is None:
            handler = open_handler(self.config, self._default_stream())
            handler.setFormatter(self._make_formatter())
        self._handler = handler
        self._sink = build_sink(self.namespace, handler)

    def _default_stream(self):
        return sys.stdout

    @abc.abstractmethod
    def _make_formatter(self):
        """Return the logging.Formatter for a freshly opened handler."""

    def sub_logger(self, namespace: str, level: Level = Level.NONE) -> "Logger":
        return type(self)(self.config.derive(namespace, level),
                          state=self._state, handler=self._handler)

    def flush(self) -> None:
        self._handler.flush()

    def close(self) -> None:
        if self._owns_handler:
            self._handler.close()


class EmptyLogger(Logger):
    """Logger that does nothing.

    A safe placeholder when no real logger is wired in. Every call
    returns immediately without output, and unlike every other backend,
    fatal() does NOT exit the process.
    """

    def is_enabled(self, level: Level) -> bool:
        return False

    def fatal(self, message: str, *args: Any, **fields: Any) -> None:
        pass

    def _write(self, level: Level, message: str, fields: dict) -> None:
        pass

    def sub_logger(self, namespace: str, level: Level = Level.NONE) -> "Logger":
        return EmptyLogger(self.config.derive(namespace, level), state=self._state)
