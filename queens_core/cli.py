from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .board import board_from_layout
from .codec import board_to_json, parse_action_arg
from .engine import replay

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Queens rule engine: replay actions over a zone layout')
    parser.add_argument('--layout', required=True, help='JSON file holding a 2D array of zone ids')
    parser.add_argument('--action', action='append', default=[], metavar='KIND:R,C',
                        help='Action to apply, e.g. click:0,1 or context:2,2 (repeatable, applied in order)')
    parser.add_argument('--json', action='store_true', help='Print the resulting board as JSON')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS,
                        default=os.getenv('QUEENS_LOG_LEVEL', 'WARNING').upper(),
                        help='Logging level (default from QUEENS_LOG_LEVEL)')
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid QUEENS_LOG_LEVEL: {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")

    logging.basicConfig(level=args.log_level, format='%(levelname)s %(name)s: %(message)s')

    try:
        with open(args.layout, 'r', encoding='utf-8') as f:
            layout = json.load(f)
        board = board_from_layout(layout)
        actions = [parse_action_arg(text) for text in args.action]
        board = replay(actions, board)
    except (OSError, ValueError, TypeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(board_to_json(board)))
    else:
        print(board.pretty())
        print('Queens:', board.queens())
    return 0


if __name__ == '__main__':
    sys.exit(main())
