from brailleplot.api import hist, plot
from brailleplot.chart import Chart, RangeMode
from brailleplot.config import PlotOptions, load_plot_options
from brailleplot.errors import ChartSizeError, PlotDataError, PlotError
from brailleplot.histogram import histogram, histogram_shape
from brailleplot.raster import BrailleCanvas, PixelColor
from brailleplot.scales import Scale
from brailleplot.series import Bars, Continuous, Lines, Points, Steps

__all__ = [
    "Bars",
    "BrailleCanvas",
    "Chart",
    "ChartSizeError",
    "Continuous",
    "Lines",
    "PixelColor",
    "PlotDataError",
    "PlotError",
    "PlotOptions",
    "Points",
    "RangeMode",
    "Scale",
    "Steps",
    "hist",
    "histogram",
    "histogram_shape",
    "load_plot_options",
    "plot",
]
