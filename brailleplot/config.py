from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
import tomllib
from typing import Any

from brailleplot.chart import MIN_CHART_SIZE
from brailleplot.histogram import DEFAULT_BINS
from brailleplot.raster import DEFAULT_PALETTE, PixelColor, parse_color
from brailleplot.series import SHAPE_KINDS

DEFAULT_MAX_X = 200
DEFAULT_MAX_Y = 50
DEFAULT_MAX_SERIES = 5
TAB = "    "


@dataclass(frozen=True)
class PlotOptions:
    max_x: int = DEFAULT_MAX_X
    max_y: int = DEFAULT_MAX_Y
    kind: str = "lines"
    hist_kind: str = "bars"
    title: str | None = None
    legend: bool = False
    bins: int = DEFAULT_BINS
    nice: bool = False
    y_range: tuple[float, float] | None = None
    palette: tuple[PixelColor, ...] = DEFAULT_PALETTE
    max_series: int = DEFAULT_MAX_SERIES
    indent: str = TAB

    def __post_init__(self) -> None:
        if self.max_x < MIN_CHART_SIZE or self.max_y < MIN_CHART_SIZE:
            raise ValueError(f"max_x/max_y must be >= {MIN_CHART_SIZE}")
        if self.kind not in SHAPE_KINDS or self.hist_kind not in SHAPE_KINDS:
            raise ValueError(f"kind must be one of {', '.join(SHAPE_KINDS)}")
        if self.bins < 1:
            raise ValueError("bins must be >= 1")
        if not self.palette:
            raise ValueError("palette must not be empty")
        if self.max_series < 1:
            raise ValueError("max_series must be >= 1")
        if self.y_range is not None and len(self.y_range) != 2:
            raise ValueError("y_range must be a (min, max) pair")

    def merged(self, **overrides: Any) -> "PlotOptions":
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def load_plot_options(path: str | Path, base: PlotOptions | None = None) -> PlotOptions:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"plot config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("plot", raw)
    if not isinstance(table, dict):
        raise ValueError("[plot] must be a table")
    return (base or PlotOptions()).merged(**_coerce_options(table))


def _coerce_options(table: dict[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(PlotOptions)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ValueError(f"unknown plot option(s): {', '.join(unknown)}")
    out = dict(table)
    if "palette" in out:
        palette = out["palette"]
        if not isinstance(palette, list):
            raise ValueError("palette must be a list of color names")
        out["palette"] = tuple(parse_color(name) for name in palette)
    if "y_range" in out:
        y_range = out["y_range"]
        if not isinstance(y_range, list) or len(y_range) != 2:
            raise ValueError("y_range must be a two-element list")
        out["y_range"] = (float(y_range[0]), float(y_range[1]))
    for key in ("max_x", "max_y", "bins", "max_series"):
        if key in out:
            out[key] = int(out[key])
    return out
