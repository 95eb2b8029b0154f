
from __future__ import annotations

from dataclasses import dataclass, field
import time

from dropfour.ai.base import SilentOutcomes
from dropfour.core.board import Board, ColumnFull
from dropfour.core.lines import heuristic_score, relative_score
from dropfour.types import Move


@dataclass
class OnePlyPlayer(SilentOutcomes):
    """
    Best-next-ply evaluation.

    Tries each column for its own color, scores the result with the
    unsaturated squared-run heuristic (own minus opponent) and keeps the
    strictly best column. Ties keep the earliest column; the running best
    starts at the first legal column rather than at column 0.
    """
    name: str = "One-ply"
    last_info: dict = field(default_factory=dict)

    def choose_move(self, board: Board) -> Move:
        me = self.token
        sim = board.copy()

        start = time.perf_counter()
        best_move: Move | None = None
        best_score = 0
        nodes = 0

        for col in range(sim.width):
            try:
                sim.place(col, me)
            except ColumnFull:
                continue

            score = relative_score(heuristic_score(sim, saturate=False), me)
            sim.remove_top(col)
            nodes += 1

            if best_move is None or score > best_score:
                best_move = Move(col)
                best_score = score

        if best_move is None:
            raise ValueError("No valid moves.")

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": 1,
            "nodes": nodes,
            "eval": best_score,
            "move_col": int(best_move) + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return best_move
