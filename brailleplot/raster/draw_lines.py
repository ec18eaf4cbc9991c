from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from brailleplot.raster.colors import PixelColor

if TYPE_CHECKING:
    from brailleplot.raster.canvas import BrailleCanvas


DotPoint = tuple[int, int]


def line_points(x1: int, y1: int, x2: int, y2: int) -> Iterator[DotPoint]:
    """Yield the dots of the segment (x1, y1)-(x2, y2), start and end included.

    Steps ``max(|dx|, |dy|)`` times; each axis advances by the truncated
    ``i * diff // r`` so both endpoints are always hit exactly.
    """
    xdiff = abs(x2 - x1)
    ydiff = abs(y2 - y1)
    xdir = 1 if x1 <= x2 else -1
    ydir = 1 if y1 <= y2 else -1
    r = max(xdiff, ydiff)

    for i in range(r + 1):
        x = x1
        y = y1
        if ydiff != 0:
            y += (i * ydiff) // r * ydir
        if xdiff != 0:
            x += (i * xdiff) // r * xdir
        yield x, y


def draw_line(
    dst: "BrailleCanvas",
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: PixelColor | None = None,
) -> None:
    if color is None:
        dst.line(x1, y1, x2, y2)
    else:
        dst.line_colored(x1, y1, x2, y2, color)


def draw_polyline(dst: "BrailleCanvas", points: Sequence[DotPoint], color: PixelColor | None = None) -> None:
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        draw_line(dst, x1, y1, x2, y2, color)


def draw_steps(dst: "BrailleCanvas", points: Sequence[DotPoint], color: PixelColor | None = None) -> None:
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        draw_line(dst, x1, y2, x2, y2, color)
        draw_line(dst, x1, y1, x1, y2, color)


def draw_bars(
    dst: "BrailleCanvas",
    points: Sequence[DotPoint],
    baseline: int,
    color: PixelColor | None = None,
) -> None:
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        draw_line(dst, x1, y2, x2, y2, color)
        draw_line(dst, x1, y1, x1, y2, color)
        draw_line(dst, x1, baseline, x1, y1, color)
        draw_line(dst, x2, baseline, x2, y2, color)
