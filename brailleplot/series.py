from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Literal, Union

import numpy as np


Sample = tuple[float, float]
ShapeKind = Literal["points", "lines", "steps", "bars"]

SHAPE_KINDS: tuple[str, ...] = ("points", "lines", "steps", "bars")


@dataclass(frozen=True)
class SeriesData:
    x: np.ndarray
    y: np.ndarray
    source_name: str | None = None

    def samples(self) -> tuple[Sample, ...]:
        return tuple(zip(self.x.tolist(), self.y.tolist()))


def _coerce_samples(samples: Iterable[tuple[float, float]]) -> tuple[Sample, ...]:
    return tuple((float(x), float(y)) for x, y in samples)


@dataclass(frozen=True)
class Continuous:
    """A real function sampled once per horizontal dot."""

    function: Callable[[float], float]


@dataclass(frozen=True)
class _Discrete:
    samples: tuple[Sample, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "samples", _coerce_samples(self.samples))


@dataclass(frozen=True)
class Points(_Discrete):
    pass


@dataclass(frozen=True)
class Lines(_Discrete):
    pass


@dataclass(frozen=True)
class Steps(_Discrete):
    pass


@dataclass(frozen=True)
class Bars(_Discrete):
    pass


DiscreteShape = Union[Points, Lines, Steps, Bars]
Shape = Union[Continuous, Points, Lines, Steps, Bars]

_SHAPE_BY_KIND: dict[str, type[_Discrete]] = {
    "points": Points,
    "lines": Lines,
    "steps": Steps,
    "bars": Bars,
}


def make_shape(kind: str, samples: Iterable[tuple[float, float]]) -> DiscreteShape:
    try:
        cls = _SHAPE_BY_KIND[kind]
    except KeyError as exc:
        raise ValueError(f"unsupported shape kind: {kind}") from exc
    return cls(tuple(samples))  # type: ignore[return-value]
