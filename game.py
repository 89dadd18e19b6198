from __future__ import annotations

# Facade module that re-exports the queens rule engine.
# The Flask app and tests import from here; single-responsibility modules live under queens_core/*.

from queens_core.board import Board, Cell, CellState, Coord, board_from_layout
from queens_core.actions import Action, ActionKind
from queens_core.engine import (
    cycle,
    diagonal_neighbors,
    eliminated_by,
    place_and_propagate,
    apply_action,
    replay,
)
from queens_core.codec import (
    cell_to_json,
    cell_from_json,
    board_to_json,
    board_from_json,
    action_to_json,
    json_to_action,
    parse_action_arg,
)


def main() -> None:
    # CLI driver delegated to queens_core.cli
    from queens_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
