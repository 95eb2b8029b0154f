# src/dropfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from dropfour.config import WIDTH, HEIGHT, LINE
from dropfour.types import Cell, Token, Move, RED, other
from dropfour.core.lines import winner as _winner


class ColumnFull(ValueError):
    def __init__(self, column: int) -> None:
        super().__init__("Column is full.")
        self.column = column


class BoardView(Protocol):
    """Read-only surface handed to renderers and players."""

    width: int
    height: int
    line_length: int

    def cell_at(self, row: int, column: int) -> Cell:
        ...

    def remaining_capacity(self) -> int:
        ...

    def winner(self) -> Optional[Token]:
        ...


@dataclass(slots=True)
class Board:
    """
    Grid of column stacks. columns[c] holds the tokens of column c
    bottom-up, so row 0 is the bottom row and a column never has gaps.
    """
    width: int = WIDTH
    height: int = HEIGHT
    line_length: int = LINE
    columns: List[List[Token]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.columns:
            self.columns = [[] for _ in range(self.width)]
        if len(self.columns) != self.width:
            raise ValueError("Board needs exactly one stack per column.")
        if any(len(col) > self.height for col in self.columns):
            raise ValueError("Column taller than the board.")

    def copy(self) -> "Board":
        return Board(
            self.width,
            self.height,
            self.line_length,
            [col[:] for col in self.columns],
        )

    def can_accept(self, column: int) -> bool:
        if column < 0 or column >= self.width:
            return False
        return len(self.columns[column]) < self.height

    def place(self, column: Move | int, token: Token) -> int:
        """
        Drop `token` into `column` and return the row it lands in.
        The board is left untouched when the move is refused.
        """
        c = int(column)
        if c < 0 or c >= self.width:
            raise ValueError("Column out of range.")
        stack = self.columns[c]
        if len(stack) >= self.height:
            raise ColumnFull(c)
        stack.append(token)
        return len(stack) - 1

    def remove_top(self, column: Move | int) -> Optional[Token]:
        """
        Remove the top-most piece from a column.
        Exact inverse of place(); used by AI search.
        """
        stack = self.columns[int(column)]
        if not stack:
            return None
        return stack.pop()

    def remaining_capacity(self) -> int:
        return self.width * self.height - sum(len(col) for col in self.columns)

    def plies_played(self) -> int:
        return sum(len(col) for col in self.columns)

    def height_of(self, column: int) -> int:
        return len(self.columns[column])

    def cell_at(self, row: int, column: int) -> Cell:
        if column < 0 or column >= self.width or row < 0 or row >= self.height:
            return None
        stack = self.columns[column]
        if row < len(stack):
            return stack[row]
        return None

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.width) if len(self.columns[c]) < self.height]

    def is_full(self) -> bool:
        return self.remaining_capacity() == 0

    def winner(self) -> Optional[Token]:
        return _winner(self)

    @classmethod
    def from_moves(cls, moves: str | List[int], first: Token = RED) -> "Board":
        """
        Build a position from alternating moves, e.g. "3344" (0-based columns).
        Handy for tests and for replaying a game.
        """
        board = cls()
        token = first
        for m in moves:
            board.place(int(m), token)
            token = other(token)
        return board
