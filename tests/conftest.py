"""Shared fixtures."""

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from dropfour import config
from dropfour.core.board import Board
from dropfour.game.results import GameAborted


@pytest.fixture(autouse=True)
def quiet_terminal(monkeypatch):
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "AI_THINK_DELAY_SEC", 0)


def drawn_columns():
    """
    A full 7x6 grid with no four in a row: colors follow (row // 2 + col) % 2,
    so no line ever has more than two equal neighbours.
    """
    return [
        ["R" if (r // 2 + c) % 2 == 0 else "Y" for r in range(config.HEIGHT)]
        for c in range(config.WIDTH)
    ]


@pytest.fixture
def drawn_board():
    return Board(columns=drawn_columns())


class ScriptedPlayer:
    """Plays a fixed list of moves and records what it was told."""

    def __init__(self, moves, name="Scripted"):
        self.name = name
        self.moves = list(moves)
        self.token = None
        self.asked = 0
        self.outcomes = []

    def start(self, token):
        self.token = token

    def choose_move(self, board):
        self.asked += 1
        if not self.moves:
            raise GameAborted(f"{self.name} ran out of moves")
        return self.moves.pop(0)

    def notify_win(self, board):
        self.outcomes.append("win")

    def notify_lose(self, board):
        self.outcomes.append("lose")

    def notify_draw(self, board):
        self.outcomes.append("draw")


@pytest.fixture
def scripted():
    return ScriptedPlayer
