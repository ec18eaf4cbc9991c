from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from brailleplot.errors import PlotDataError
from brailleplot.series import SeriesData


def normalize_series(values: Any, *, max_series: int = 5) -> tuple[SeriesData, ...]:
    """Turn a flat or one-level nested list of numbers into indexed series.

    A flat list yields one series, a list of equal-length lists one series per
    inner list. Sample ``i`` of each series is plotted at ``x = i``.
    """
    items = _as_list(values)
    if items is None:
        raise PlotDataError(
            "Incorrect input type.",
            f"Input type is {_type_name(values)}, but should be a List.",
        )
    if not items:
        raise PlotDataError("No elements in the list.", "Can't plot a zero element list.")

    kinds = [_value_kind(item) for item in items]
    if any(kind != kinds[0] for kind in kinds):
        raise PlotDataError("Type differences.", "Can't plot a list of multiple types.")

    if kinds[0].startswith("list"):
        return _normalize_nested([_as_list(item) or [] for item in items], max_series=max_series)
    if kinds[0] not in {"int", "float"}:
        raise PlotDataError(
            "Incorrect List type.",
            f"List type is {kinds[0]}, but should be float or int.",
        )
    return (_series_from_values(items, source_name="Line 1"),)


def series_bounds(series: Sequence[SeriesData]) -> tuple[float, float]:
    if not series:
        raise PlotDataError("No elements in the list.", "Can't plot a zero element list.")
    xmin = min(float(np.min(s.x)) for s in series)
    xmax = max(float(np.max(s.x)) for s in series)
    return xmin, xmax


def _normalize_nested(lists: list[list[Any]], *, max_series: int) -> tuple[SeriesData, ...]:
    lengths = {len(inner) for inner in lists}
    if len(lengths) != 1:
        raise PlotDataError("List length differences.", "Can't plot a list of differing length lists.")
    if lengths == {0}:
        raise PlotDataError("No elements in the list.", "Can't plot a zero element list.")
    if len(lists) > max_series:
        raise PlotDataError(
            "Nested list error.",
            f"Nested list can't contain more than {max_series} inner lists.",
        )
    if _value_kind(lists[0][0]) not in {"int", "float"}:
        raise PlotDataError("Incorrect type.", "Nested list elements not float or int.")
    return tuple(
        _series_from_values(inner, source_name=f"Line {idx + 1}") for idx, inner in enumerate(lists)
    )


def _series_from_values(values: list[Any], *, source_name: str) -> SeriesData:
    for value in values:
        kind = _value_kind(value)
        if kind not in {"int", "float"}:
            raise PlotDataError("Incorrect type supplied.", f"Got {kind}, need integer or float.")
    y = np.asarray([float(v) for v in values], dtype=np.float64)
    x = np.arange(y.size, dtype=np.float64)
    return SeriesData(x=x, y=y, source_name=source_name)


def _as_list(value: Any) -> list[Any] | None:
    if isinstance(value, np.ndarray):
        return value.tolist() if value.ndim > 0 else None
    if isinstance(value, (list, tuple)):
        return list(value)
    return None


def _value_kind(value: Any) -> str:
    if isinstance(value, (bool, np.bool_)):
        return "bool"
    if isinstance(value, (int, np.integer)):
        return "int"
    if isinstance(value, (float, np.floating)):
        return "float"
    items = _as_list(value)
    if items is not None:
        return f"list<{_element_kind(items)}>"
    return _type_name(value)


def _element_kind(items: list[Any]) -> str:
    kinds = {_value_kind(item) for item in items}
    if not kinds:
        return "nothing"
    if len(kinds) == 1:
        return kinds.pop()
    if kinds <= {"int", "float"}:
        return "number"
    return "any"


def _type_name(value: Any) -> str:
    if value is None:
        return "nothing"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "record"
    return type(value).__name__
