from __future__ import annotations
from typing import Optional, Iterable, Set

from dropfour import config
from dropfour.core.board import BoardView
from dropfour.core.lines import heuristic_score
from dropfour.types import Cell, Coord, RED
from dropfour.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE, RESET


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    if cell == RED:
        return c("R", FG_RED)
    return c("Y", FG_YELLOW)


def board_text(board: BoardView) -> str:
    """
    Plain framed board, top row first:

        +-------+
        |       |
        |R Y    |
        +-------+
    """
    edge = "+" + "-" * board.width + "+"
    lines = [edge]
    for r in range(board.height - 1, -1, -1):
        lines.append("|" + "".join(board.cell_at(r, col) or " " for col in range(board.width)) + "|")
    lines.append(edge)
    return "\n".join(lines)


def score_lines(board: BoardView) -> str:
    red, yellow = heuristic_score(board, saturate=False)
    return f"Red: {red}\nYellow: {yellow}"


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: BoardView, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    hl: Set[Coord] = set(highlight) if highlight else set()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    nums = "   " + " ".join(str(i + 1) for i in range(board.width))
    print(c(nums, DIM))

    for r in range(board.height - 1, -1, -1):
        parts = []
        for col in range(board.width):
            p = _piece(board.cell_at(r, col))
            if (r, col) in hl:
                # without color the winning pieces are shown in lower case
                p = f"{REVERSE}{p}{RESET}" if config.USE_COLOR else p.lower()
            parts.append(p)
        print(" | " + " ".join(parts) + " |")

    print(c("   " + "—" * (2 * board.width - 1), DIM))
    print(c(f"   Enter 1-{board.width} to drop. Enter q to quit.", DIM))
