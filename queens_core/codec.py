from __future__ import annotations

from typing import Any, Dict, List

from .actions import Action, ActionKind
from .board import Board, Cell, CellState, require_grid, require_int


def cell_to_json(cell: Cell) -> Dict[str, Any]:
    out: Dict[str, Any] = {"zone": int(cell.zone), "state": cell.state.value}
    if cell.invalid is not None:
        out["invalid"] = bool(cell.invalid)
    return out


def cell_from_json(obj: Dict[str, Any]) -> Cell:
    invalid = obj.get("invalid")
    if invalid is not None and not isinstance(invalid, bool):
        raise ValueError(f'invalid must be a boolean, got {invalid!r}')
    return Cell(
        zone=require_int(obj["zone"], "zone"),
        state=CellState.parse(obj.get("state")),
        invalid=invalid,
    )


def board_to_json(b: Board) -> List[List[Dict[str, Any]]]:
    return [[cell_to_json(cell) for cell in row] for row in b.rows()]


def board_from_json(rows: List[List[Dict[str, Any]]]) -> Board:
    width = require_grid(rows, 'Board')
    cells: List[Cell] = []
    for row in rows:
        cells.extend(cell_from_json(obj) for obj in row)
    return Board(width=width, height=len(rows), grid=tuple(cells))


def action_to_json(a: Action) -> Dict[str, Any]:
    return {"type": a.kind.value, "coords": [int(a.coords[0]), int(a.coords[1])]}


def json_to_action(obj: Dict[str, Any]) -> Action:
    kind_in = obj.get("type")
    try:
        kind = ActionKind(kind_in)
    except ValueError:
        raise ValueError(f'Unknown action type: {kind_in!r}') from None
    coords = obj.get("coords")
    if not isinstance(coords, (list, tuple)) or len(coords) != 2:
        raise ValueError(f'coords must be a [row, col] pair, got {coords!r}')
    r, c = coords
    return Action(kind=kind, coords=(require_int(r, "row"), require_int(c, "col")))


def parse_action_arg(text: str) -> Action:
    """Parses 'click:r,c' or 'context:r,c' (a space also separates r and c)."""
    kind_s, sep, coords_s = text.strip().partition(':')
    if not sep:
        raise ValueError(f'Expected kind:r,c but got {text!r}')
    split_on = ',' if ',' in coords_s else ' '
    parts = [t for t in coords_s.split(split_on) if t != '']
    if len(parts) != 2:
        raise ValueError(f'Expected two coordinates in {text!r}')
    return json_to_action({"type": kind_s.strip(), "coords": [int(parts[0]), int(parts[1])]})
