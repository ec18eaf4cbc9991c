from __future__ import annotations

import logging
from typing import Any

from brailleplot.adapters import normalize_series, series_bounds
from brailleplot.chart import Chart
from brailleplot.config import PlotOptions
from brailleplot.errors import PlotDataError
from brailleplot.histogram import histogram_shape
from brailleplot.raster import DEFAULT_COLOR, PixelColor, colorize
from brailleplot.series import make_shape

LOGGER = logging.getLogger(__name__)

LEGEND_SWATCH = "---"


def plot(values: Any, *, options: PlotOptions | None = None) -> str:
    """Render a flat list, or a list of up to ``max_series`` equal-length lists, as a chart."""
    opts = options or PlotOptions()
    series = normalize_series(values, max_series=opts.max_series)
    xmin, xmax = series_bounds(series)
    chart = new_chart(opts, xmin, xmax)

    colors: list[PixelColor | None]
    if len(series) == 1:
        colors = [None]
        chart.lineplot(make_shape(opts.kind, series[0].samples()))
    else:
        palette = [opts.palette[idx % len(opts.palette)] for idx in range(len(series))]
        for data, color in zip(series, palette):
            chart.linecolorplot(make_shape(opts.kind, data.samples()), color)
        colors = list(palette)
    LOGGER.debug("plotting %d series over x=[%s, %s]", len(series), xmin, xmax)
    return render(chart, opts, legend_colors=colors)


def hist(values: Any, *, options: PlotOptions | None = None) -> str:
    """Bin a flat list of numbers into ``options.bins`` bins and render the counts."""
    opts = options or PlotOptions()
    series = normalize_series(values, max_series=opts.max_series)
    if len(series) != 1:
        raise PlotDataError("Nested list error.", "A histogram takes a single list of numbers.")
    shape, lo, hi = histogram_shape(series[0].y, opts.bins, kind=opts.hist_kind)
    if opts.y_range is None:
        top = max(y for _, y in shape.samples)
        opts = opts.merged(y_range=(0.0, top if top > 0 else 1.0))
    chart = new_chart(opts, lo, hi).lineplot(shape)
    return render(chart, opts, legend_colors=[None])


def new_chart(opts: PlotOptions, xmin: float, xmax: float) -> Chart:
    if opts.y_range is None:
        return Chart(opts.max_x, opts.max_y, xmin, xmax)
    ymin, ymax = opts.y_range
    return Chart.with_y_range(opts.max_x, opts.max_y, xmin, xmax, ymin, ymax)


def render(chart: Chart, opts: PlotOptions, *, legend_colors: list[PixelColor | None]) -> str:
    if opts.nice:
        chart.borders()
    text = opts.indent + chart.to_string().replace("\n", "\n" + opts.indent)
    if opts.title:
        text = f"{opts.indent}{opts.title}\n{text}"
    if opts.legend:
        text += legend(legend_colors)
    return text


def legend(colors: list[PixelColor | None]) -> str:
    if len(colors) == 1 and colors[0] is None:
        return f"Line 1: {colorize(LEGEND_SWATCH, DEFAULT_COLOR)}"
    return "".join(
        f"Line {idx + 1}: {colorize(LEGEND_SWATCH, color or DEFAULT_COLOR)} " for idx, color in enumerate(colors)
    )
