from __future__ import annotations

import time
from typing import Callable, Dict

from dropfour import config
from dropfour.ai.base import Player
from dropfour.ai.minimax import MinimaxPlayer
from dropfour.ai.one_ply import OnePlyPlayer
from dropfour.ai.random_player import RandomPlayer
from dropfour.game.controller import run_game
from dropfour.ui.human import HumanPlayer

PLAYER_KINDS = ("human", "random", "one-ply", "minimax")


def make_player(kind: str, *, depth: int | None = None, seed: int | None = None, name: str | None = None) -> Player:
    factories: Dict[str, Callable[[], Player]] = {
        "human": lambda: HumanPlayer(name=name or "Human"),
        "random": lambda: RandomPlayer(name=name or "Random AI", seed=seed),
        "one-ply": lambda: OnePlyPlayer(name=name or "One-ply"),
        "minimax": lambda: MinimaxPlayer(
            name=name or f"Minimax (d{depth if depth is not None else config.MINIMAX_DEPTH})",
            depth=depth if depth is not None else config.MINIMAX_DEPTH,
        ),
    }
    try:
        return factories[kind]()
    except KeyError:
        raise ValueError(f"Unknown player kind {kind!r}; pick one of {', '.join(PLAYER_KINDS)}") from None


def _pause(message: str) -> None:
    print(message)
    time.sleep(3)


def run_menu(depth: int | None = None) -> None:
    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human vs Minimax AI")
    print("3) Human vs One-ply AI")
    print("4) Watch Minimax AI vs One-ply AI")

    choice = input("Choice: ").strip()

    if choice == "1":
        red, yellow = make_player("human", name="Player 1"), make_player("human", name="Player 2")
    elif choice == "2":
        red, yellow = make_player("human"), make_player("minimax", depth=depth)
    elif choice == "3":
        red, yellow = make_player("human"), make_player("one-ply")
    elif choice == "4":
        red, yellow = make_player("minimax", depth=depth), make_player("one-ply")
    else:
        _pause("\nInvalid choice. Defaulting to Human vs Human.\n")
        run_game(make_player("human"), make_player("human"))
        return

    _pause(f"\nStarting game: {red.name} vs {yellow.name}\nGame will start in 3 seconds...\n")
    run_game(red, yellow)
