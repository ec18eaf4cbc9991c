from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from brailleplot.errors import PlotDataError
from brailleplot.series import DiscreteShape, Sample, make_shape

DEFAULT_BINS = 20


def histogram(values: Sequence[float] | np.ndarray, lo: float, hi: float, bins: int = DEFAULT_BINS) -> tuple[Sample, ...]:
    """Count ``values`` into ``bins`` equal-width bins spanning ``[lo, hi]``.

    Bins are half-open except the last, which includes ``hi``. Values outside
    the range and non-finite values are not counted. Each bin is reported as
    ``(right_edge, count)``, which is where step and bar shapes draw the
    height of the interval ending at that sample.
    """
    if bins < 1:
        raise PlotDataError("Invalid bin count.", f"Need at least one bin, got {bins}.")
    if not (np.isfinite(lo) and np.isfinite(hi)) or hi <= lo:
        raise PlotDataError("Invalid histogram range.", f"Need finite lo < hi, got [{lo}, {hi}].")

    arr = np.asarray(values, dtype=np.float64).ravel()
    arr = arr[np.isfinite(arr)]
    counts, edges = np.histogram(arr, bins=bins, range=(float(lo), float(hi)))
    return tuple((float(edge), float(count)) for edge, count in zip(edges[1:], counts))


def histogram_shape(
    values: Sequence[float] | np.ndarray,
    bins: int = DEFAULT_BINS,
    *,
    kind: str = "bars",
) -> tuple[DiscreteShape, float, float]:
    """Bin ``values`` over their own min/max and wrap the counts as a shape.

    The first count is repeated at ``lo`` so that joined shapes open the first
    bin. Returns the shape together with its x bounds. A constant input gets a
    unit-wide range centred on the value.
    """
    arr = np.asarray(values, dtype=np.float64).ravel()
    finite = arr[np.isfinite(arr)]
    if finite.size == 0:
        raise PlotDataError("No finite values.", "Can't build a histogram without finite values.")
    lo = float(np.min(finite))
    hi = float(np.max(finite))
    if lo == hi:
        lo -= 0.5
        hi += 0.5
    samples = histogram(finite, lo, hi, bins)
    samples = ((lo, samples[0][1]),) + samples
    return make_shape(kind, samples), lo, hi
