"""
Log level constants and conversions.

Levels are ordered by verbosity. The emit rule is simple:

    message.level <= threshold  →  message is shown

The threshold is either a logger's own override or the global level.

Level assignments:
    ←── quieter ──────────────────────────── louder ──→
    0     1         2      3      4     5     6      7
    none  disabled  fatal  error  warn  info  debug  trace

NONE is the "unset" sentinel: a logger whose level is NONE defers to the
global level, and unrecognized level names convert to NONE.
DISABLED is the hard wall: nothing is shown at all.
"""

import enum


class Level(enum.IntEnum):
    """Ordered severities, most severe (FATAL) to most verbose (TRACE)."""
    NONE = 0
    DISABLED = 1
    FATAL = 2
    ERROR = 3
    WARN = 4
    INFO = 5
    DEBUG = 6
    TRACE = 7

    def __str__(self):
        return self.name

    @classmethod
    def from_string(cls, name: str) -> "Level":
        """Case-insensitive lookup. Unknown names give Level.NONE."""
        return level_from_string(name)


# Threshold used when neither a logger nor the global state sets one
DEFAULT_LEVEL = Level.INFO

# Severities a message can be emitted at (NONE/DISABLED are thresholds only)
SEVERITIES = (
    Level.FATAL, Level.ERROR, Level.WARN,
    Level.INFO, Level.DEBUG, Level.TRACE,
)


def level_from_string(name) -> Level:
    """Convert a level name to a Level.

    Never raises: anything unrecognized (including non-strings) yields
    Level.NONE, so callers that care about bad configuration must check.
    """
    if not isinstance(name, str):
        return Level.NONE
    return Level.__members__.get(name.strip().upper(), Level.NONE)


def level_to_string(level) -> str:
    """Return the canonical name of a level, or "" if out of range."""
    try:
        return Level(level).name
    except ValueError:
        return ""


def is_visible(level, threshold) -> bool:
    """True when a message at `level` passes `threshold`."""
    if threshold == Level.DISABLED:
        return False
    return level <= threshold


def format_level_list() -> str:
    """Format the selectable levels for display (quietest first)."""
    lines = ["Available levels:"]
    for level in (Level.DISABLED,) + SEVERITIES:
        marker = " (default)" if level is DEFAULT_LEVEL else ""
        lines.append(f"  {level.value}  {level.name.lower()}{marker}")
    return "\n".join(lines)
