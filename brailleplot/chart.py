from __future__ import annotations

from collections.abc import Callable
from enum import Enum
import logging
import math

import numpy as np

from brailleplot.errors import ChartSizeError
from brailleplot.raster import (
    BrailleCanvas,
    PixelColor,
    draw_bars,
    draw_markers,
    draw_polyline,
    draw_steps,
)
from brailleplot.scales import Scale, extent, format_label, is_normal, round_half_away
from brailleplot.series import Bars, Continuous, Lines, Points, Shape, Steps

LOGGER = logging.getLogger(__name__)

MIN_CHART_SIZE = 32
DEFAULT_CHART_SIZE = (120, 60)
DEFAULT_X_RANGE = (-10.0, 10.0)

DotPoint = tuple[int, int]


class RangeMode(str, Enum):
    AUTO = "auto"
    FIXED = "fixed"


def _check_size(width: int, height: int) -> None:
    if width < MIN_CHART_SIZE:
        raise ChartSizeError(f"width should be at least {MIN_CHART_SIZE}, {width} is provided")
    if height < MIN_CHART_SIZE:
        raise ChartSizeError(f"height should be at least {MIN_CHART_SIZE}, {height} is provided")


def _sample(function: Callable[[float], float], x: float) -> float | None:
    try:
        with np.errstate(all="ignore"):
            y = float(function(x))
    except (ArithmeticError, ValueError) as exc:
        LOGGER.debug("dropping sample at x=%r: %s", x, exc)
        return None
    return y if is_normal(y) else None


class Chart:
    """Line/step/bar/point chart rendered onto a Braille canvas.

    ``width`` and ``height`` are in dots. In auto mode every registered shape
    widens ``[ymin, ymax]``; the range starts out empty (``+inf``/``-inf``).
    Rendering never clears the canvas, so repeated renders of the same shapes
    produce the same frame.
    """

    def __init__(self, width: int, height: int, xmin: float, xmax: float) -> None:
        _check_size(width, height)
        self.width = int(width)
        self.height = int(height)
        self.xmin = float(xmin)
        self.xmax = float(xmax)
        self.ymin = math.inf
        self.ymax = -math.inf
        self.range_mode = RangeMode.AUTO
        self.shapes: list[tuple[Shape, PixelColor | None]] = []
        self.canvas = BrailleCanvas(self.width, self.height)

    @classmethod
    def with_y_range(
        cls,
        width: int,
        height: int,
        xmin: float,
        xmax: float,
        ymin: float,
        ymax: float,
    ) -> "Chart":
        chart = cls(width, height, xmin, xmax)
        chart.ymin = float(ymin)
        chart.ymax = float(ymax)
        chart.range_mode = RangeMode.FIXED
        return chart

    @classmethod
    def default(cls) -> "Chart":
        return cls(DEFAULT_CHART_SIZE[0], DEFAULT_CHART_SIZE[1], *DEFAULT_X_RANGE)

    def lineplot(self, shape: Shape) -> "Chart":
        return self._register(shape, None)

    def linecolorplot(self, shape: Shape, color: PixelColor) -> "Chart":
        return self._register(shape, color)

    def x_scale(self) -> Scale:
        return Scale((self.xmin, self.xmax), (0.0, float(self.width)))

    def y_scale(self) -> Scale:
        return Scale((self.ymin, self.ymax), (0.0, float(self.height)))

    def y_extent(self, shape: Shape) -> tuple[float, float]:
        if isinstance(shape, Continuous):
            x_scale = self.x_scale()
            ys = [_sample(shape.function, x_scale.inv_linear(i)) for i in range(self.width)]
            return extent([y for y in ys if y is not None])
        ys = [y for x, y in shape.samples if self.xmin <= x <= self.xmax and math.isfinite(y)]
        return extent(ys)

    def project(self, shape: Shape) -> list[DotPoint]:
        """Map a shape into dot coordinates; unplottable samples are dropped, not replaced."""
        x_scale = self.x_scale()
        y_scale = self.y_scale()
        points: list[DotPoint] = []

        if isinstance(shape, Continuous):
            for i in range(self.width):
                y = _sample(shape.function, x_scale.inv_linear(i))
                if y is None:
                    continue
                j = y_scale.linear(y)
                if not math.isfinite(j):
                    continue
                j = round_half_away(j)
                if 0 <= j <= self.height:
                    points.append((i, self.height - j))
            return points

        for x, y in shape.samples:
            i = x_scale.linear(x)
            j = y_scale.linear(y)
            if not (math.isfinite(i) and math.isfinite(j)):
                continue
            i = round_half_away(i)
            j = round_half_away(j)
            if 0 <= i <= self.width and 0 <= j <= self.height:
                points.append((i, self.height - j))
        return points

    def figures(self) -> None:
        for shape, color in self.shapes:
            points = self.project(shape)
            if isinstance(shape, (Continuous, Lines)):
                draw_polyline(self.canvas, points, color)
            elif isinstance(shape, Points):
                draw_markers(self.canvas, points, color)
            elif isinstance(shape, Steps):
                draw_steps(self.canvas, points, color)
            elif isinstance(shape, Bars):
                draw_bars(self.canvas, points, self.height, color)
            else:
                raise TypeError(f"unsupported shape: {type(shape).__name__}")

    def vline(self, i: int) -> None:
        if 0 <= i <= self.width:
            for j in range(0, self.height + 1, 3):
                self.canvas.set(i, j)

    def hline(self, j: int) -> None:
        if 0 <= j <= self.height:
            for i in range(0, self.width + 1, 3):
                self.canvas.set(i, self.height - j)

    def axis(self) -> None:
        if self.xmin <= 0.0 <= self.xmax:
            i = self.x_scale().linear(0.0)
            if math.isfinite(i):
                self.vline(int(i))
        if self.ymin <= 0.0 <= self.ymax:
            j = self.y_scale().linear(0.0)
            if math.isfinite(j):
                self.hline(int(j))

    def borders(self) -> None:
        self.vline(0)
        self.vline(self.width)
        self.hline(0)
        self.hline(self.height)

    def frame(self) -> str:
        return self.canvas.frame()

    def to_string(self) -> str:
        self.figures()
        self.axis()

        frame = self.canvas.frame()
        idx = frame.find("\n")
        if idx < 0:
            return frame
        label_width = self.width // 2 - 3
        frame = f"{frame[:idx]} {format_label(self.ymax)}{frame[idx:]}"
        frame += (
            f" {format_label(self.ymin)}\n"
            f"{format_label(self.xmin, label_width)}{format_label(self.xmax)}\n"
        )
        return frame

    def __str__(self) -> str:
        return self.to_string()

    def display(self) -> None:
        print(self.to_string())

    def nice(self) -> None:
        self.borders()
        self.display()

    def _register(self, shape: Shape, color: PixelColor | None) -> "Chart":
        self.shapes.append((shape, color))
        if self.range_mode is RangeMode.AUTO:
            lo, hi = self.y_extent(shape)
            self.ymin = min(self.ymin, lo)
            self.ymax = max(self.ymax, hi)
            LOGGER.debug(
                "registered %s (color=%s); y range now [%s, %s]",
                type(shape).__name__,
                color.value if color is not None else None,
                self.ymin,
                self.ymax,
            )
        return self
