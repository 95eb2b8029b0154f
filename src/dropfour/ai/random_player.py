from __future__ import annotations
import random
from dataclasses import dataclass, field

from dropfour.ai.base import SilentOutcomes
from dropfour.config import WIDTH
from dropfour.core.board import Board
from dropfour.types import Move


@dataclass
class RandomPlayer(SilentOutcomes):
    """
    Picks any column in [0, WIDTH). It never looks at the board, so it can
    pick a full column; the match driver rejects that and asks again.
    """
    name: str = "Random AI"
    seed: int | None = None
    rng: random.Random = field(init=False, repr=False)
    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def choose_move(self, board: Board) -> Move:
        col = self.rng.randrange(WIDTH)
        self.last_info = {"depth": 0, "nodes": 0, "move_col": col + 1, "time_ms": 0}
        return Move(col)
