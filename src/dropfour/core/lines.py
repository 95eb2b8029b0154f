# src/dropfour/core/lines.py

from __future__ import annotations
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from dropfour.config import SCORE_MAX
from dropfour.types import Coord, Token, RED, YELLOW

if TYPE_CHECKING:
    from dropfour.core.board import BoardView

Direction = Tuple[int, int]  # (d_row, d_col)

VERTICAL: Direction = (1, 0)
HORIZONTAL: Direction = (0, 1)
RISING: Direction = (1, 1)    # up-right
FALLING: Direction = (1, -1)  # up-left, i.e. falling when read left to right

# Scan order matters only for which window is reported first.
DIRECTIONS: Tuple[Direction, ...] = (VERTICAL, HORIZONTAL, RISING, FALLING)


def window_origins(board: "BoardView", direction: Direction) -> Iterator[Coord]:
    """
    Every (row, col) where a window of board.line_length cells along
    `direction` stays in bounds. Column-major, then row-major.
    """
    n = board.line_length
    d_row, d_col = direction
    rows = range(board.height - n + 1) if d_row else range(board.height)
    if d_col > 0:
        cols = range(board.width - n + 1)
    elif d_col < 0:
        cols = range(n - 1, board.width)
    else:
        cols = range(board.width)

    for c in cols:
        for r in rows:
            yield r, c


def window(board: "BoardView", row: int, column: int, direction: Direction) -> List[Coord]:
    d_row, d_col = direction
    return [(row + i * d_row, column + i * d_col) for i in range(board.line_length)]


def run_counts(board: "BoardView", row: int, column: int, direction: Direction) -> Tuple[int, int]:
    """Return (red, yellow) token counts in the window; empty cells are ignored."""
    red = 0
    yellow = 0
    for r, c in window(board, row, column, direction):
        p = board.cell_at(r, c)
        if p == RED:
            red += 1
        elif p == YELLOW:
            yellow += 1
    return red, yellow


def winner_with_line(board: "BoardView") -> Optional[Tuple[Token, List[Coord]]]:
    n = board.line_length
    for direction in DIRECTIONS:
        for r, c in window_origins(board, direction):
            red, yellow = run_counts(board, r, c, direction)
            if red == n:
                return RED, window(board, r, c, direction)
            if yellow == n:
                return YELLOW, window(board, r, c, direction)
    return None


def winner(board: "BoardView") -> Optional[Token]:
    res = winner_with_line(board)
    return res[0] if res else None


def is_draw(board: "BoardView") -> bool:
    return board.remaining_capacity() == 0 and winner(board) is None


def heuristic_score(board: "BoardView", *, saturate: bool = True) -> Tuple[int, int]:
    """
    Sum of squared counts over every single-colored window, per color.

    Squaring rewards longer runs super-linearly, so a position with a couple
    of open threes outscores one with many isolated tokens. With `saturate`
    a completed four pins that color's score at SCORE_MAX.
    """
    n = board.line_length
    red_score = 0
    yellow_score = 0
    red_done = False
    yellow_done = False

    for direction in DIRECTIONS:
        for r, c in window_origins(board, direction):
            red, yellow = run_counts(board, r, c, direction)
            if red and yellow:
                continue
            if red:
                if saturate and red == n:
                    red_done = True
                else:
                    red_score += red * red
            elif yellow:
                if saturate and yellow == n:
                    yellow_done = True
                else:
                    yellow_score += yellow * yellow

    if red_done:
        red_score = SCORE_MAX
    if yellow_done:
        yellow_score = SCORE_MAX
    return red_score, yellow_score


def clamp_score(score: int) -> int:
    return max(-SCORE_MAX, min(SCORE_MAX, score))


def relative_score(scores: Tuple[int, int], token: Token) -> int:
    red_score, yellow_score = scores
    if token == RED:
        return clamp_score(red_score - yellow_score)
    return clamp_score(yellow_score - red_score)


def leaf_score(board: "BoardView", token: Token) -> int:
    """Saturated heuristic from `token`'s side: own minus opponent."""
    return relative_score(heuristic_score(board, saturate=True), token)
