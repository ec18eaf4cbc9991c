from __future__ import annotations


class PlotError(Exception):
    pass


class ChartSizeError(PlotError, ValueError):
    pass


class PlotDataError(PlotError, ValueError):
    """Rejected plot input, with a short label and a longer message."""

    def __init__(self, label: str, msg: str | None = None) -> None:
        self.label = label
        self.msg = msg if msg is not None else label
        super().__init__(f"{label} {self.msg}" if msg is not None else label)
