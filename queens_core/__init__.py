"""
Queens rule engine package.

Pure board model and state transitions for the one-queen-per-zone puzzle.
Modules:
- board.py: Board, Cell, CellState, Coord, board_from_layout
- actions.py: Action, ActionKind
- engine.py: cycle, place_and_propagate, apply_action, replay
- codec.py: JSON wire encoding of cells, boards and actions
- cli.py: replay a layout and a list of actions from the command line
"""
from .board import Board, Cell, CellState, Coord, board_from_layout
from .actions import Action, ActionKind
from .engine import (
    apply_action,
    cycle,
    diagonal_neighbors,
    eliminated_by,
    place_and_propagate,
    replay,
)

__all__ = [
    'Board', 'Cell', 'CellState', 'Coord', 'board_from_layout',
    'Action', 'ActionKind',
    'apply_action', 'cycle', 'diagonal_neighbors', 'eliminated_by', 'place_and_propagate', 'replay',
]
