"""
lvlog — leveled logging facade with a runtime-switchable global level.

Application code logs through one call surface while the backend
(plain console, colour console, JSON or pretty structured records) is
picked by configuration. One process-wide level gates every logger that
has no override of its own; backends that cache a threshold stay in
sync through a level change notifier.

Public API:
    Level                         — ordered severities (NONE..TRACE)
    level_from_string             — name -> Level (unknown -> NONE)
    level_to_string               — Level -> name ("" if out of range)
    LevelState                    — global level + change notifier
    set_global_level / get_global_level
    register_level_change_handler — subscribe to global level changes
    Logger, EmptyLogger           — call surface and no-op variant
    ConsoleLogger, ColorLogger, StructuredLogger
    new_logger                    — factory selecting a backend by name
    LoggerConfig, Flags           — logger configuration
    parse_logger_spec             — parse NAMESPACE:LEVEL:DEST:LOCATION
    traced                        — function tracing decorator
    LvlogError, LoggerConfigError — exceptions
"""

from lvlog._version import __version__, __app_name__
from lvlog.levels import (
    Level, DEFAULT_LEVEL, level_from_string, level_to_string, is_visible,
)
from lvlog.state import (
    LevelState, get_level_state, set_global_level, get_global_level,
    register_level_change_handler,
)
from lvlog.config import Flags, LoggerConfig, parse_logger_spec
from lvlog.errors import LvlogError, LoggerConfigError
from lvlog.logger import Logger, EmptyLogger
from lvlog.backends import (
    BACKENDS, new_logger, ConsoleLogger, ColorLogger, StructuredLogger,
)
from lvlog.trace import traced

__all__ = [
    '__version__', '__app_name__',
    'Level', 'DEFAULT_LEVEL', 'level_from_string', 'level_to_string', 'is_visible',
    'LevelState', 'get_level_state', 'set_global_level', 'get_global_level',
    'register_level_change_handler',
    'Flags', 'LoggerConfig', 'parse_logger_spec',
    'LvlogError', 'LoggerConfigError',
    'Logger', 'EmptyLogger',
    'BACKENDS', 'new_logger', 'ConsoleLogger', 'ColorLogger', 'StructuredLogger',
    'traced',
]
