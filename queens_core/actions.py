from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .board import Coord


class ActionKind(Enum):
    """The two player inputs: plain click cycles a cell, context click places a queen."""
    CLICK = "click"
    CONTEXT = "context"


@dataclass(frozen=True)
class Action:
    """A single player input event aimed at one cell."""
    kind: ActionKind
    coords: Coord

    @classmethod
    def click(cls, r: int, c: int) -> 'Action':
        return cls(ActionKind.CLICK, (r, c))

    @classmethod
    def context(cls, r: int, c: int) -> 'Action':
        return cls(ActionKind.CONTEXT, (r, c))
