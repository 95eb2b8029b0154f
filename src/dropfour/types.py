# src/dropfour/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType, Tuple

Token = Literal["R", "Y"]
Cell = Optional[Token]
Move = NewType("Move", int)   # column index 0..6
Coord = Tuple[int, int]       # (row, col), row 0 is the bottom

RED: Token = "R"
YELLOW: Token = "Y"


def other(token: Token) -> Token:
    return YELLOW if token == RED else RED


def color_name(token: Token) -> str:
    return "Red" if token == RED else "Yellow"
