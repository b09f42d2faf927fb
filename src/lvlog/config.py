"""
Logger configuration and spec parsing.

A LoggerConfig describes one logger: its namespace, optional level
override, destination and formatting switches. Backends are built from
it, either directly or through lvlog.backends.new_logger(**options).

Logger spec syntax (compact, positional):
    NAMESPACE:LEVEL:DEST:LOCATION

    Examples:
        db                      # All defaults (defer to global level)
        db:debug                # Override level
        db::stderr              # Default level, stderr
        db:trace:file:db.log    # Trace level, appended to db.log

Console prefix flags (bitmask, combine with |):
    DATE          2026/10/18
    TIME          14:03:27
    MICROSECONDS  14:03:27.123456 (implies TIME)
    LONGFILE      /full/path/to/app.py:42
    SHORTFILE     app.py:42 (wins over LONGFILE)
    UTC           date/time in UTC instead of local time
"""

import enum
import sys
from dataclasses import dataclass, replace
from typing import Optional, TextIO

from .errors import LoggerConfigError
from .levels import Level, level_from_string


class Flags(enum.IntFlag):
    """Prefix flags for the console backends."""
    NONE = 0
    DATE = 1
    TIME = 2
    MICROSECONDS = 4
    LONGFILE = 8
    SHORTFILE = 16
    UTC = 32
    STD = DATE | TIME


DESTINATIONS = ('stdout', 'stderr', 'file')


@dataclass
class LoggerConfig:
    """Configuration for a single logger.

    Attributes:
        namespace: Label prefixed to every line/record
        level: Instance override; Level.NONE defers to the global level
        output_file: Append to this file instead of writing to a stream
        stream: Stream to write to (None = backend default)
        flags: Date/time/file prefix for the console backends
        pretty: Structured backend renders human-readable text, not JSON
        color_message: Colour backend colours the message, not just the label
    """
    namespace: str = ''
    level: Level = Level.NONE
    output_file: Optional[str] = None
    stream: Optional[TextIO] = None
    flags: Flags = Flags.STD
    pretty: bool = False
    color_message: bool = True

    def __post_init__(self):
        try:
            self.level = Level(self.level)
        except ValueError:
            raise LoggerConfigError('level', f"unknown level {self.level!r}")
        self.flags = Flags(self.flags)
        if self.output_file is not None:
            self.output_file = str(self.output_file)

    def derive(self, namespace: str, level: Level = Level.NONE) -> "LoggerConfig":
        """Copy of this config for a sub-logger: new namespace, own level."""
        return replace(self, namespace=namespace, level=level)


def parse_logger_spec(spec: str) -> LoggerConfig:
    """Parse a logger spec string into a LoggerConfig.

    Handles the compact positional syntax:
        NAMESPACE:LEVEL:DEST:LOCATION

    Empty slots use :: (empty between colons).
    Windows drive letters (e.g., C:\\path) are detected and rejoined.

    Args:
        spec: Logger spec string like "db:debug" or "db::file:C:\\logs\\db.log"

    Returns:
        LoggerConfig with parsed values

    Raises:
        LoggerConfigError: on an unknown level or destination, or a file
            destination without a location
    """
    parts = spec.split(':')

    # Rejoin 'C' + '\\path' into 'C:\\path' (only in the LOCATION slot)
    if len(parts) > 4 and len(parts[3]) == 1 and parts[3].isalpha():
        parts = parts[:3] + [':'.join(parts[3:])]
    if len(parts) > 4:
        raise LoggerConfigError('spec', f"too many fields in {spec!r}")

    namespace = parts[0]
    level = Level.NONE
    dest = location = None

    if len(parts) > 1 and parts[1]:
        level = level_from_string(parts[1])
        if level is Level.NONE:
            raise LoggerConfigError('level', f"unknown level {parts[1]!r}")
    if len(parts) > 2 and parts[2]:
        dest = parts[2].lower()
        if dest not in DESTINATIONS:
            raise LoggerConfigError('destination', f"unknown destination {parts[2]!r}")
    if len(parts) > 3 and parts[3]:
        location = parts[3]

    if dest == 'file' and not location:
        raise LoggerConfigError('output_file', f"file destination needs a location in {spec!r}")

    config = LoggerConfig(namespace=namespace, level=level)
    if dest == 'file':
        config.output_file = location
    elif dest == 'stderr':
        config.stream = sys.stderr
    elif dest == 'stdout':
        config.stream = sys.stdout
    return config
