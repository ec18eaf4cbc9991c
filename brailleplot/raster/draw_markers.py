from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from brailleplot.raster.colors import PixelColor

if TYPE_CHECKING:
    from brailleplot.raster.canvas import BrailleCanvas


def draw_markers(dst: "BrailleCanvas", points: Iterable[tuple[int, int]], color: PixelColor | None = None) -> None:
    """Set one dot per point. A series color is applied to point markers too,
    so colored scatter series match their legend entry.
    """
    for x, y in points:
        if color is None:
            dst.set(x, y)
        else:
            dst.set_colored(x, y, color)
