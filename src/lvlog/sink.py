"""
Output sinks for the concrete backends.

A sink is a private ``logging.Logger`` with exactly one handler. The
backends decide visibility themselves; the sink only builds the record
(including caller file/line), formats it and writes it. The handler's
lock serializes writes, so any number of loggers can share one sink
without interleaving lines.

Sinks are constructed directly rather than through logging.getLogger(),
which keeps them out of the logging module's global registry: two
loggers with the same namespace never share state by accident, and
configuring the root logger does not affect them.
"""

import logging
from typing import TextIO

from .config import LoggerConfig
from .errors import LoggerConfigError
from .levels import Level

# Record level for each severity (TRACE has no stdlib counterpart)
RECORD_LEVELS = {
    Level.FATAL: logging.CRITICAL,
    Level.ERROR: logging.ERROR,
    Level.WARN: logging.WARNING,
    Level.INFO: logging.INFO,
    Level.DEBUG: logging.DEBUG,
    Level.TRACE: logging.DEBUG,
}

# Frames between the caller and Logger.log(): caller -> info() -> _log() -> _write()
CALLER_STACKLEVEL = 4


def open_handler(config: LoggerConfig, default_stream: TextIO) -> logging.Handler:
    """Open the handler a config points at.

    Files are created if absent and appended to if present.

    Raises:
        LoggerConfigError: if the output file cannot be opened
    """
    if config.output_file:
        try:
            return logging.FileHandler(config.output_file, mode='a', encoding='utf-8')
        except OSError as exc:
            raise LoggerConfigError(
                'output_file', f"cannot open {config.output_file!r}: {exc.strerror or exc}"
            ) from exc
    return logging.StreamHandler(config.stream if config.stream is not None else default_stream)


def build_sink(name: str, handler: logging.Handler) -> logging.Logger:
    """Wrap a handler in an unregistered, non-propagating logger."""
    sink = logging.Logger(name or 'lvlog')
    sink.propagate = False
    sink.addHandler(handler)
    return sink
