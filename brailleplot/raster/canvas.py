from __future__ import annotations

from dataclasses import dataclass

from brailleplot.raster.colors import PixelColor, colorize
from brailleplot.raster.draw_lines import line_points


BRAILLE_BASE = 0x2800

# Indexed as PIXEL_MAP[y % 4][x % 2].
PIXEL_MAP: tuple[tuple[int, int], ...] = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)

CellKey = tuple[int, int]


@dataclass(frozen=True)
class EmptyCell:
    char: str = " "
    # Kept while no dot is lit so that unset/toggle round-trip the color.
    color: PixelColor | None = None

    def render(self) -> str:
        return self.char


@dataclass(frozen=True)
class DotCell:
    mask: int
    color: PixelColor | None = None
    # Shown again once the last dot is cleared.
    char: str = " "

    def render(self) -> str:
        glyph = chr(BRAILLE_BASE + self.mask)
        if self.color is None:
            return glyph
        return colorize(glyph, self.color)


CellState = EmptyCell | DotCell

BLANK = EmptyCell()


def _cell_key(x: int, y: int) -> CellKey:
    if x < 0 or y < 0:
        raise ValueError(f"dot coordinates must be >= 0, got ({x}, {y})")
    return (x // 2, y // 4)


def _dot_bit(x: int, y: int) -> int:
    return PIXEL_MAP[y % 4][x % 2]


def _with_mask(cell: CellState, mask: int) -> CellState:
    if mask:
        return DotCell(mask=mask, color=cell.color, char=cell.char)
    return EmptyCell(char=cell.char, color=cell.color)


class BrailleCanvas:
    """Sparse grid of Braille cells addressed in dots (2 wide, 4 tall per cell).

    The canvas grows past its nominal size when a dot is set outside of it;
    ``rows()`` always covers the larger of the nominal and touched extents.
    Color and override characters are attributes of a whole cell and the last
    write to a cell decides them. ``unset`` and ``toggle`` only flip dot bits,
    so a cell keeps its color and override character across them.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas width/height must be >= 0")
        self.width = width // 2
        self.height = height // 4
        self._cells: dict[CellKey, CellState] = {}

    def clear(self) -> None:
        self._cells.clear()

    def set(self, x: int, y: int) -> None:
        key = _cell_key(x, y)
        self._cells[key] = DotCell(mask=self._mask_at(key) | _dot_bit(x, y))

    def set_colored(self, x: int, y: int, color: PixelColor) -> None:
        key = _cell_key(x, y)
        self._cells[key] = DotCell(mask=self._mask_at(key) | _dot_bit(x, y), color=color)

    def set_char(self, x: int, y: int, char: str) -> None:
        if len(char) != 1:
            raise ValueError("set_char expects a single character")
        self._cells[_cell_key(x, y)] = EmptyCell(char)

    def text(self, x: int, y: int, max_width: int, text: str) -> None:
        for i, char in enumerate(text):
            offset = i * 2
            if offset > max_width:
                return
            self.set_char(x + offset, y, char)

    def unset(self, x: int, y: int) -> None:
        key = _cell_key(x, y)
        cell = self._cells.get(key, BLANK)
        self._cells[key] = _with_mask(cell, self._mask_at(key) & ~_dot_bit(x, y))

    def toggle(self, x: int, y: int) -> None:
        key = _cell_key(x, y)
        cell = self._cells.get(key, BLANK)
        self._cells[key] = _with_mask(cell, self._mask_at(key) ^ _dot_bit(x, y))

    def get(self, x: int, y: int) -> bool:
        return bool(self._mask_at(_cell_key(x, y)) & _dot_bit(x, y))

    def cell(self, x: int, y: int) -> CellState:
        return self._cells.get(_cell_key(x, y), BLANK)

    def line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        for x, y in line_points(x1, y1, x2, y2):
            self.set(x, y)

    def line_colored(self, x1: int, y1: int, x2: int, y2: int, color: PixelColor) -> None:
        for x, y in line_points(x1, y1, x2, y2):
            self.set_colored(x, y, color)

    def extent(self) -> tuple[int, int]:
        max_col = self.width
        max_row = self.height
        for col, row in self._cells:
            max_col = max(max_col, col)
            max_row = max(max_row, row)
        return max_col, max_row

    def rows(self) -> list[str]:
        max_col, max_row = self.extent()
        out: list[str] = []
        for row in range(max_row + 1):
            out.append("".join(self._cells.get((col, row), BLANK).render() for col in range(max_col + 1)))
        return out

    def frame(self) -> str:
        return "\n".join(self.rows())

    def _mask_at(self, key: CellKey) -> int:
        cell = self._cells.get(key)
        return cell.mask if isinstance(cell, DotCell) else 0
