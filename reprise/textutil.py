"""Text helpers for terminal output: truncation, padding, rules and colour."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

DEFAULT_TERMINAL_WIDTH = 100

_STYLE_CODES = {
    "bold": "1",
    "dimmed": "2",
    "italic": "3",
    "underline": "4",
}

_COLOR_CODES = {
    "black": "30",
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
    "white": "37",
}

_RESET = "\x1b[0m"


@dataclass
class _ColorSettings:
    # None means "decide from the environment".
    override: bool | None = None


_settings = _ColorSettings()


def truncate_str(s: str, max_chars: int) -> str:
    """Shorten ``s`` to ``max_chars`` characters, ending in "..." if cut."""
    if len(s) > max_chars:
        return s[: max(max_chars - 3, 0)] + "..."
    return s


def fit_str(s: str, width: int) -> str:
    """Pad with spaces or truncate ``s`` so it is exactly ``width`` characters."""
    if len(s) > width:
        if width <= 3:
            return s[:width]
        return s[: width - 3] + "..."
    return s.ljust(width)


def first_n_chars(s: str, n: int) -> str:
    """Return at most the first ``n`` characters of ``s``."""
    return s[:n]


def terminal_width() -> int:
    """Width of the terminal attached to stdout, or 100 if unknown."""
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (OSError, ValueError, AttributeError):
        return DEFAULT_TERMINAL_WIDTH


def set_color_enabled(enabled: bool | None) -> bool | None:
    """Force colour on or off; ``None`` restores detection from the environment.

    Returns the previous setting so callers can restore it.
    """
    previous = _settings.override
    _settings.override = None if enabled is None else bool(enabled)
    return previous


def color_enabled() -> bool:
    """Whether styled output should carry ANSI escape sequences."""
    if _settings.override is not None:
        return _settings.override
    if "NO_COLOR" in os.environ:
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def style(text: str, *args: str) -> str:
    """Wrap ``text`` in ANSI codes for the named styles and colour.

    Accepted names are the text styles (bold, dimmed, italic, underline)
    and the basic foreground colours. Unknown names raise ``ValueError``.
    """
    styles: list[str] = []
    color: str | None = None
    for name in args:
        if name in _STYLE_CODES:
            code = _STYLE_CODES[name]
            if code not in styles:
                styles.append(code)
        elif name in _COLOR_CODES:
            color = _COLOR_CODES[name]
        else:
            raise ValueError(f"unknown style: {name!r}")

    codes = sorted(styles)
    if color is not None:
        codes.append(color)
    if not codes or not color_enabled():
        return text
    return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


def rule(width: int) -> str:
    """A horizontal line of box-drawing characters ``width`` long."""
    return "─" * max(width, 0)