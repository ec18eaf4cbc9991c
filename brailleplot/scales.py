from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np


Interval = tuple[float, float]

_TINY = float(np.finfo(np.float64).tiny)


@dataclass(frozen=True)
class Scale:
    """Affine map between a data domain and a dot range.

    A zero-length domain or range is not rejected: the division follows IEEE
    rules and the result is ``inf``/``nan``, which callers must filter.
    """

    domain: Interval
    range: Interval

    def linear(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        return _affine(value, d0, d1, r0, r1)

    def inv_linear(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        return _affine(value, r0, r1, d0, d1)


def _affine(value: float, src0: float, src1: float, dst0: float, dst1: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        out = np.float64(dst0) + (np.float64(value) - src0) * (np.float64(dst1) - dst0) / (np.float64(src1) - src0)
    return float(out)


def is_normal(value: float) -> bool:
    """True for finite, nonzero, non-subnormal floats."""
    return math.isfinite(value) and abs(value) >= _TINY


def round_half_away(value: float) -> int:
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def extent(values: list[float]) -> tuple[float, float]:
    if not values:
        return (0.0, 0.0)
    arr = np.asarray(values, dtype=np.float64)
    return (float(np.min(arr)), float(np.max(arr)))


def format_label(value: float, width: int = 0) -> str:
    return f"{value:<{width}.1f}" if width > 0 else f"{value:.1f}"
