from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import Tuple

from dropfour.ai.base import SilentOutcomes
from dropfour.config import MINIMAX_DEPTH, SCORE_MAX
from dropfour.core.board import Board, ColumnFull
from dropfour.core.lines import leaf_score
from dropfour.types import Move, Token, other

log = logging.getLogger(__name__)


class SearchInconsistency(RuntimeError):
    """An interior node had no legal move. The terminal checks were bypassed."""


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    leaves: int = 0


def minimax(board: Board, depth: int, to_play: Token, maximizer: Token, stats: SearchStats | None = None) -> int:
    """
    Score `board` for `maximizer` with `to_play` about to move.

    The board is mutated while searching and restored before returning.
    """
    if stats is not None:
        stats.nodes += 1

    if depth == 0:
        if stats is not None:
            stats.leaves += 1
        return leaf_score(board, maximizer)

    w = board.winner()
    if w is not None:
        return SCORE_MAX if w == maximizer else -SCORE_MAX

    if board.remaining_capacity() == 0:
        return 0

    maximizing = to_play == maximizer
    best: int | None = None

    for col in range(board.width):
        try:
            board.place(col, to_play)
        except ColumnFull:
            continue
        try:
            score = minimax(board, depth - 1, other(to_play), maximizer, stats)
        finally:
            board.remove_top(col)

        if best is None:
            best = score
        elif maximizing and score > best:
            best = score
        elif not maximizing and score < best:
            best = score

    if best is None:
        raise SearchInconsistency(
            f"no legal move for {to_play} with {board.remaining_capacity()} empty cells"
        )
    return best


def search(board: Board, token: Token, depth: int, stats: SearchStats | None = None) -> Tuple[Move, int]:
    """
    Pick a column for `token`.

    Every legal root move is tried and its position scored with
    minimax(depth); `depth` is the number of plies looked at after the
    candidate move, so depth 0 is a plain one-ply heuristic choice.
    Returns (column, score). Equal scores keep the lower column.
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")
    if board.winner() is not None or board.remaining_capacity() == 0:
        raise ValueError("Game is already over.")

    best_move: Move | None = None
    best_score = 0

    for col in range(board.width):
        try:
            board.place(col, token)
        except ColumnFull:
            continue
        try:
            score = minimax(board, depth, other(token), token, stats)
        finally:
            board.remove_top(col)

        if best_move is None or score > best_score:
            best_move = Move(col)
            best_score = score

    if best_move is None:
        raise SearchInconsistency("no legal root move on a board that is not full")
    return best_move, best_score


@dataclass
class MinimaxPlayer(SilentOutcomes):
    name: str = "Minimax AI"
    depth: int = MINIMAX_DEPTH

    # Stats
    last_info: dict = field(default_factory=dict)
    last_score: int = 0

    def choose_move(self, board: Board) -> Move:
        # Search a private copy; the caller's board is never touched.
        sim = board.copy()
        stats = SearchStats()

        start = time.perf_counter()
        move, score = search(sim, self.token, self.depth, stats)
        elapsed = time.perf_counter() - start

        self.last_score = score
        self.last_info = {
            "depth": self.depth,
            "nodes": stats.nodes,
            "leaves": stats.leaves,
            "eval": score,
            "move_col": int(move) + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        log.debug(
            "%s (%s) chose column %d, score=%d, nodes=%d, %dms",
            self.name, self.token, int(move), score, stats.nodes, self.last_info["time_ms"],
        )
        return move
