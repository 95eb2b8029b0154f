from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from dropfour.core.board import Board
from dropfour.types import Coord, Token


class GameAborted(Exception):
    """A player walked away from the game (e.g. a human typed q)."""


@dataclass(slots=True)
class MatchResult:
    winner: Optional[Token]
    board: Board
    plies: int
    rejected_moves: int = 0
    winning_line: List[Coord] = field(default_factory=list)

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    @property
    def outcome(self) -> str:
        """'R', 'Y' or 'D'."""
        return self.winner if self.winner is not None else "D"
