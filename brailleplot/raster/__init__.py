from .canvas import BrailleCanvas, CellState, DotCell, EmptyCell
from .colors import DEFAULT_COLOR, DEFAULT_PALETTE, PixelColor, colorize, parse_color
from .draw_lines import draw_bars, draw_line, draw_polyline, draw_steps, line_points
from .draw_markers import draw_markers

__all__ = [
    "BrailleCanvas",
    "CellState",
    "DEFAULT_COLOR",
    "DEFAULT_PALETTE",
    "DotCell",
    "EmptyCell",
    "PixelColor",
    "colorize",
    "draw_bars",
    "draw_line",
    "draw_markers",
    "draw_polyline",
    "draw_steps",
    "line_points",
    "parse_color",
]
