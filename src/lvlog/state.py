"""
LevelState — the process-wide level knob and its change notifier.

Many loggers are constructed independently, yet all of them defer to one
runtime-configurable threshold. LevelState holds that threshold and a
registry of handlers that are called whenever it changes, so backends
that cache a threshold of their own can re-synchronize without anyone
holding a reference to each logger instance.

Reads are a single attribute load and never block. Writes are serialized
together with handler notification, so handlers always observe changes
in the order they were made.

The module keeps one default LevelState for the whole process and
exposes it through set_global_level() / get_global_level() /
register_level_change_handler(). Loggers take an explicit ``state=``
argument, which tests use to get a fresh, isolated instance.
"""

import threading
from typing import Callable, List, Optional

from .levels import DEFAULT_LEVEL, Level

LevelChangeHandler = Callable[[Level], None]


class LevelState:
    """Shared minimum-severity cell plus an append-only handler registry.

    Usage::

        state = LevelState()
        state.register_level_change_handler(lambda lvl: print("now", lvl))
        state.set_level(Level.DEBUG)      # prints "now DEBUG"
        state.level                       # Level.DEBUG
    """

    def __init__(self, level: Level = DEFAULT_LEVEL):
        self._level = Level(level)
        self._handlers: List[LevelChangeHandler] = []
        self._set_lock = threading.RLock()
        self._registry_lock = threading.Lock()

    @property
    def level(self) -> Level:
        """Current global level (lock-free read)."""
        return self._level

    def set_level(self, level: Level) -> None:
        """Store `level`, then notify every handler in registration order.

        Handlers run synchronously on the calling thread; a slow handler
        stalls every setter. A handler that raises propagates to the
        caller and the remaining handlers are not called, but the new
        level has already been stored.
        """
        level = Level(level)
        with self._set_lock:
            self._level = level
            with self._registry_lock:
                handlers = list(self._handlers)
            for handler in handlers:
                handler(level)

    def register_level_change_handler(self, handler: LevelChangeHandler,
                                      replay: bool = False) -> None:
        """Append a handler. No dedup, no removal.

        Args:
            handler: Called with the new Level on every set_level()
            replay: Also call the handler once with the current level,
                without racing a concurrent set_level()
        """
        if replay:
            with self._set_lock:
                self._append(handler)
                handler(self._level)
        else:
            self._append(handler)

    def _append(self, handler: LevelChangeHandler) -> None:
        with self._registry_lock:
            self._handlers.append(handler)

    @property
    def handler_count(self) -> int:
        """Number of registered handlers."""
        return len(self._handlers)


# =============================================================================
# Module-level singleton
# =============================================================================

_state: Optional[LevelState] = None
_state_lock = threading.Lock()


def get_level_state() -> LevelState:
    """Get the process default LevelState, creating it if needed."""
    global _state
    if _state is None:
        with _state_lock:
            if _state is None:
                _state = LevelState()
    return _state


def set_global_level(level: Level) -> None:
    """Set the process-wide level and notify registered handlers."""
    get_level_state().set_level(level)


def get_global_level() -> Level:
    """Return the process-wide level."""
    return get_level_state().level


def register_level_change_handler(handler: LevelChangeHandler,
                                  replay: bool = False) -> None:
    """Register a handler on the process default LevelState."""
    get_level_state().register_level_change_handler(handler, replay=replay)
