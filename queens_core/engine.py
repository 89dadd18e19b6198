from __future__ import annotations

import logging
from typing import Iterable, List, Set

from .actions import Action, ActionKind
from .board import Board, CellState, Coord

logger = logging.getLogger(__name__)

DIAGONAL_OFFSETS = ((-1, -1), (1, -1), (-1, 1), (1, 1))


def _require_in_bounds(board: Board, coord: Coord) -> None:
    r, c = coord
    if not board.in_bounds(r, c):
        raise ValueError(f'Coordinates {coord} out of bounds for {board.height}x{board.width} board')


def cycle(board: Board, coord: Coord) -> Board:
    """Advances one cell through empty -> cross -> queen -> empty. Neighbours are not consulted."""
    _require_in_bounds(board, coord)
    cell = board.at(*coord)
    return board.with_cell(coord, cell.with_state(cell.state.next()))


def diagonal_neighbors(board: Board, coord: Coord) -> List[Coord]:
    """Gets the in-bounds cells touching a coordinate at a corner."""
    r, c = coord
    return [(r + dr, c + dc) for dr, dc in DIAGONAL_OFFSETS if board.in_bounds(r + dr, c + dc)]


def eliminated_by(board: Board, coord: Coord) -> Set[Coord]:
    """
    Coordinates a queen at `coord` rules out: same row, same column, same zone,
    and the diagonal neighbours. The target itself is excluded.
    """
    _require_in_bounds(board, coord)
    r, c = coord
    zone = board.at(r, c).zone
    ruled_out: Set[Coord] = set()
    for rr, cc in board.coords():
        if rr == r or cc == c or board.at(rr, cc).zone == zone:
            ruled_out.add((rr, cc))
    ruled_out.update(diagonal_neighbors(board, coord))
    ruled_out.discard(coord)
    return ruled_out


def place_and_propagate(board: Board, coord: Coord) -> Board:
    """
    Places a queen at `coord` and crosses out every empty cell it rules out.
    Cells already crossed or holding a queen are left alone, so applying it
    twice gives the same board as applying it once.
    """
    ruled_out = eliminated_by(board, coord)
    target = board.index(*coord)
    cells = list(board.grid)
    cells[target] = cells[target].with_state(CellState.QUEEN)
    crossed = 0
    # row-major sweep
    for rr, cc in board.coords():
        if (rr, cc) not in ruled_out:
            continue
        i = board.index(rr, cc)
        if cells[i].state is CellState.EMPTY:
            cells[i] = cells[i].with_state(CellState.CROSS)
            crossed += 1
    logger.debug("queen at %s crossed out %d cells", coord, crossed)
    return Board(width=board.width, height=board.height, grid=tuple(cells))


def apply_action(action: Action, board: Board) -> Board:
    """Applies one player action to the board and returns the resulting board."""
    if action.kind is ActionKind.CLICK:
        return cycle(board, action.coords)
    if action.kind is ActionKind.CONTEXT:
        return place_and_propagate(board, action.coords)
    raise ValueError(f'Unknown action kind: {action.kind!r}')


def replay(actions: Iterable[Action], board: Board) -> Board:
    """Applies a sequence of actions in order, oldest first."""
    count = 0
    for action in actions:
        board = apply_action(action, board)
        count += 1
    logger.debug("replayed %d actions", count)
    return board
