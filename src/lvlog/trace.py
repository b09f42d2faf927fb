"""
Function tracing decorator.

Routes call tracing through a Logger at TRACE level, so it follows the
same level rules as everything else that logger emits.
"""

import functools
import inspect
from pathlib import Path

from .levels import Level


def _abbrev(value):
    """Short repr for trace lines: long strings and lists are elided."""
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def traced(logger):
    """Decorator factory tracing calls on `logger`.

    Shows function entry/exit with arguments and return values when the
    logger has TRACE enabled; otherwise the call goes straight through.

    Usage::

        @traced(log)
        def load(path, strict=False):
            ...
    """
    def decorator(func):
        module = inspect.getmodule(func)
        module_name = module.__name__ if module else "unknown"
        func_name = func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not logger.is_enabled(Level.TRACE):
                return func(*args, **kwargs)

            args_repr = [_abbrev(arg) for arg in args]
            args_repr.extend(f"{key}={_abbrev(value)}" for key, value in kwargs.items())
            logger.trace(">> %s.%s(%s)", module_name, func_name, ', '.join(args_repr))

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.trace("!! %s.%s raised: %s: %s",
                             module_name, func_name, type(e).__name__, e)
                raise

            if result is not None:
                logger.trace("<< %s.%s returned: %s", module_name, func_name, _abbrev(result))
            return result

        return wrapper
    return decorator
