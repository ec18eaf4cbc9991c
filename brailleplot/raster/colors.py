from __future__ import annotations

from enum import Enum

from rich.color import ColorSystem
from rich.style import Style


class PixelColor(str, Enum):
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"


DEFAULT_COLOR = PixelColor.WHITE

DEFAULT_PALETTE: tuple[PixelColor, ...] = (
    PixelColor.BRIGHT_WHITE,
    PixelColor.BRIGHT_RED,
    PixelColor.BRIGHT_BLUE,
    PixelColor.BRIGHT_YELLOW,
    PixelColor.CYAN,
)


def parse_color(name: str | PixelColor) -> PixelColor:
    if isinstance(name, PixelColor):
        return name
    key = str(name).strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return PixelColor(key)
    except ValueError as exc:
        raise ValueError(f"unknown color: {name!r}") from exc


def colorize(text: str, color: PixelColor) -> str:
    return Style(color=color.value).render(text, color_system=ColorSystem.STANDARD)
