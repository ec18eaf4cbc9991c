from __future__ import annotations

import shutil

from brailleplot.chart import MIN_CHART_SIZE
from brailleplot.config import DEFAULT_MAX_X, DEFAULT_MAX_Y, TAB

DEFAULT_FALLBACK_SIZE = (DEFAULT_MAX_X, DEFAULT_MAX_Y)
DEFAULT_DISPLAY_FRACTION = 0.8
# y-axis label after the first row plus the indent.
LABEL_COLUMNS = 10


def resolve_default_chart_size(
    *,
    display_fraction: float = DEFAULT_DISPLAY_FRACTION,
    indent: str = TAB,
) -> tuple[int, int]:
    """Chart size in dots that fits the current terminal.

    Falls back to ``DEFAULT_FALLBACK_SIZE`` when no terminal is attached.
    """
    if display_fraction <= 0:
        raise ValueError("display_fraction must be > 0")

    terminal = _detect_terminal_size()
    if terminal is None:
        return DEFAULT_FALLBACK_SIZE

    columns, lines = terminal
    usable_cols = max(1, int((columns - len(indent) - LABEL_COLUMNS) * display_fraction))
    # Two label rows below the canvas.
    usable_rows = max(1, int((lines - 2) * display_fraction))
    width = max(MIN_CHART_SIZE, usable_cols * 2)
    height = max(MIN_CHART_SIZE, usable_rows * 4)
    return (width, height)


def _detect_terminal_size() -> tuple[int, int] | None:
    size = shutil.get_terminal_size(fallback=(0, 0))
    if size.columns <= 0 or size.lines <= 0:
        return None
    return (size.columns, size.lines)
