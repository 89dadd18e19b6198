from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence, Tuple

Coord = Tuple[int, int]


class CellState(Enum):
    """Marker carried by every cell."""
    EMPTY = "empty"
    CROSS = "cross"
    QUEEN = "queen"

    def next(self) -> 'CellState':
        """Successor in the manual cycle empty -> cross -> queen -> empty."""
        return _NEXT_STATE[self]

    @classmethod
    def parse(cls, value: Optional[str]) -> 'CellState':
        """Reads a wire value; a missing state counts as empty."""
        if value is None or value == "":
            return cls.EMPTY
        return cls(value)


_NEXT_STATE = {
    CellState.EMPTY: CellState.CROSS,
    CellState.CROSS: CellState.QUEEN,
    CellState.QUEEN: CellState.EMPTY,
}


@dataclass(frozen=True)
class Cell:
    zone: int
    state: CellState = CellState.EMPTY
    invalid: Optional[bool] = None  # reserved for rule-violation highlighting

    def with_state(self, state: CellState) -> 'Cell':
        return replace(self, state=state)


@dataclass(frozen=True)
class Board:
    """Rectangular grid of cells; dimensions never change after construction."""
    width: int
    height: int
    grid: Tuple[Cell, ...]  # row-major, length == width * height

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.width + c

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.height and 0 <= c < self.width

    def at(self, r: int, c: int) -> Cell:
        """Gets the cell at a given row and column. No wrap-around."""
        if not self.in_bounds(r, c):
            raise ValueError(f'Coordinates {(r, c)} out of bounds for {self.height}x{self.width} board')
        return self.grid[self.index(r, c)]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board, row-major."""
        for r in range(self.height):
            for c in range(self.width):
                yield (r, c)

    def rows(self) -> List[Tuple[Cell, ...]]:
        return [self.grid[r * self.width:(r + 1) * self.width] for r in range(self.height)]

    def with_cell(self, coord: Coord, cell: Cell) -> 'Board':
        """Returns a copy of the board with one cell replaced."""
        r, c = coord
        if not self.in_bounds(r, c):
            raise ValueError(f'Coordinates {coord} out of bounds for {self.height}x{self.width} board')
        cells = list(self.grid)
        cells[self.index(r, c)] = cell
        return Board(width=self.width, height=self.height, grid=tuple(cells))

    def queens(self) -> List[Coord]:
        return [coord for coord in self.coords() if self.at(*coord).state is CellState.QUEEN]

    def zones(self) -> List[int]:
        return sorted({cell.zone for cell in self.grid})

    def pretty(self) -> str:
        """Human-readable grid: zone id followed by a marker (. empty, x cross, Q queen)."""
        marks = {CellState.EMPTY: '.', CellState.CROSS: 'x', CellState.QUEEN: 'Q'}
        lines: List[str] = []
        for row in self.rows():
            lines.append(" ".join(f"{cell.zone}{marks[cell.state]}" for cell in row))
        return "\n".join(lines)


def require_int(value: Any, what: str) -> int:
    # bool is an int subclass; reject it along with floats and strings
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f'{what} must be an integer, got {value!r}')
    return value


def require_grid(rows: Any, what: str) -> int:
    """Checks for a rectangular list of lists and returns its width."""
    if not isinstance(rows, (list, tuple)):
        raise ValueError(f'{what} must be a list of rows, got {type(rows).__name__}')
    width = None
    for r, row in enumerate(rows):
        if not isinstance(row, (list, tuple)):
            raise ValueError(f'{what} row {r} must be a list, got {type(row).__name__}')
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise ValueError(f'{what} is not rectangular: row {r} has {len(row)} cells, expected {width}')
    return width or 0


def board_from_layout(layout: Sequence[Sequence[int]]) -> Board:
    """Builds an all-empty board from a rectangular grid of zone ids."""
    width = require_grid(layout, 'Layout')
    cells: List[Cell] = []
    for row in layout:
        cells.extend(Cell(zone=require_int(zone, 'zone')) for zone in row)
    return Board(width=width, height=len(layout), grid=tuple(cells))
