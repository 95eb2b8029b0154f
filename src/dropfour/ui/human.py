from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from dropfour.core.board import Board
from dropfour.game.results import GameAborted
from dropfour.types import Move, Token, RED, color_name
from dropfour.ui.prompts import parse_move
from dropfour.ui.render import board_text, render, score_lines


@dataclass
class HumanPlayer:
    """
    Terminal player. Malformed input is handled here and never reaches the
    driver; typing q raises GameAborted.
    """
    name: str = "Human"
    read: Callable[[str], str] = input
    write: Callable[[str], None] = print
    show_board: bool = True
    token: Token = RED
    interactive: bool = field(default=True, init=False)

    def start(self, token: Token) -> None:
        self.token = token
        self.write(f"Player {self.name} is playing {color_name(token)}")

    def choose_move(self, board: Board) -> Move:
        status = f"{self.name} ({self.token}) to play"
        while True:
            if self.show_board:
                render(board, f"{status}\n{score_lines(board)}")
            raw = self.read(f"Player {self.token} move: ")
            try:
                move = parse_move(raw, board.width)
            except ValueError as e:
                status = str(e)
                if not self.show_board:
                    self.write(status)
                continue
            if move is None:
                raise GameAborted(f"{self.name} quit")
            return move

    def notify_win(self, board: Board) -> None:
        self.write(f"{self.name} wins!")
        self.write(f"\n{board_text(board)}\n")

    def notify_lose(self, board: Board) -> None:
        self.write(f"{self.name} loses!")
        self.write(f"\n{board_text(board)}\n")

    def notify_draw(self, board: Board) -> None:
        self.write("This is a draw!")
        self.write(f"\n{board_text(board)}\n")
