"""
Concrete logger backends and the factory that selects them by name.

    console     plain `[LEVEL] [namespace] message` lines (stdout)
    color       console lines with ANSI-coloured severities (stdout)
    structured  one JSON record per call, or pretty text (stderr)
    empty       discards everything; fatal() does not exit
"""

from typing import Dict, Optional, Type

from ..config import LoggerConfig
from ..errors import LoggerConfigError
from ..logger import EmptyLogger, Logger
from ..state import LevelState
from .color import ColorLogger
from .console import ConsoleLogger
from .structured import StructuredLogger

BACKENDS: Dict[str, Type[Logger]] = {
    'console': ConsoleLogger,
    'color': ColorLogger,
    'structured': StructuredLogger,
    'empty': EmptyLogger,
}


def new_logger(backend: str = 'console', *, state: Optional[LevelState] = None,
               **options) -> Logger:
    """Build a logger for a backend name.

    Args:
        backend: One of BACKENDS ('console', 'color', 'structured', 'empty')
        state: LevelState to follow (default: the process-wide one)
        **options: LoggerConfig fields (namespace, level, output_file,
            stream, flags, pretty, color_message)

    Returns:
        The constructed Logger

    Raises:
        LoggerConfigError: unknown backend, or the output file cannot be opened
        TypeError: unknown option name
    """
    cls = BACKENDS.get(backend)
    if cls is None:
        raise LoggerConfigError('backend', f"unknown backend {backend!r} "
                                           f"(choose from {', '.join(BACKENDS)})")
    return cls(LoggerConfig(**options), state=state)


__all__ = [
    'BACKENDS', 'new_logger',
    'ConsoleLogger', 'ColorLogger', 'StructuredLogger', 'EmptyLogger',
]
