"""
errors.py – Exception hierarchy for lvlog.

Only configuration can fail: logging calls themselves never raise
lvlog errors.
"""

from __future__ import annotations


class LvlogError(Exception):
    """Base exception for lvlog. All library errors inherit from this."""


class LoggerConfigError(LvlogError):
    """
    Raised when a logger cannot be built from its configuration.

    Attributes
    ----------
    option:
        Name of the configuration option that failed (e.g. ``output_file``).
    detail:
        Human-readable diagnostic.
    """

    def __init__(self, option: str, detail: str) -> None:
        self.option = option
        self.detail = detail
        super().__init__(f"Invalid logger option '{option}': {detail}")
