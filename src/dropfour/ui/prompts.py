from __future__ import annotations
from typing import Optional

from dropfour.types import Move

QUIT_WORDS = {"q", "quit", "exit"}


def parse_move(raw: str, cols: int) -> Optional[Move]:
    """
    Turn the 1-based column a person typed into a Move.
    Returns None for a quit request; raises ValueError with a message fit
    for the status line otherwise.
    """
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Move(col)
