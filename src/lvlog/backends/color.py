"""Colour console backend.

Same layout as the plain console backend, with the level label padded to
five characters and wrapped in bright ANSI colour. By default the
message is coloured too (config.color_message=False leaves it plain).

    FATAL, ERROR  red
    WARN          yellow
    INFO          green
    DEBUG, TRACE  uncoloured
"""

from colorama import Fore, Style, just_fix_windows_console

from ..levels import Level
from .console import ConsoleLogger

# Enables ANSI handling on legacy Windows consoles; no-op elsewhere
just_fix_windows_console()

LEVEL_COLORS = {
    Level.FATAL: Fore.RED,
    Level.ERROR: Fore.RED,
    Level.WARN: Fore.YELLOW,
    Level.INFO: Fore.GREEN,
}


def colorize(text: str, color: str) -> str:
    """Wrap text in a bright colour and reset afterwards."""
    return f"{color}{Style.BRIGHT}{text}{Style.RESET_ALL}"


class ColorLogger(ConsoleLogger):
    """Console logger with colour-coded severities."""

    def _render(self, level: Level, message: str, fields: dict) -> str:
        label = f"{level.name:<5}"
        color = LEVEL_COLORS.get(level)
        if color is not None:
            label = colorize(label, color)
            if self.config.color_message:
                message = colorize(message, color)
        return self._line(label, message, fields)
