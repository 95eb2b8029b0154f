from __future__ import annotations
from typing import Protocol

from dropfour.core.board import Board
from dropfour.types import Move, Token, RED


class Player(Protocol):
    name: str

    def start(self, token: Token) -> None:
        ...

    def choose_move(self, board: Board) -> Move:
        ...

    def notify_win(self, board: Board) -> None:
        ...

    def notify_lose(self, board: Board) -> None:
        ...

    def notify_draw(self, board: Board) -> None:
        ...


class SilentOutcomes:
    """
    Shared plumbing for computer players: remember the assigned color and
    ignore end-of-game notifications.
    """
    token: Token = RED

    def start(self, token: Token) -> None:
        self.token = token

    def notify_win(self, board: Board) -> None:
        pass

    def notify_lose(self, board: Board) -> None:
        pass

    def notify_draw(self, board: Board) -> None:
        pass
