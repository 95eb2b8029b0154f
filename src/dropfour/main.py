from __future__ import annotations

import argparse
import logging

from dropfour import config
from dropfour.game.controller import run_game
from dropfour.ui.menu import PLAYER_KINDS, make_player, run_menu

log = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dropfour", description="Play Connect Four in the terminal.")
    ap.add_argument("--red", choices=PLAYER_KINDS, default=None, help="Who plays Red (moves first). Omit both sides for the menu.")
    ap.add_argument("--yellow", choices=PLAYER_KINDS, default=None, help="Who plays Yellow.")
    ap.add_argument("--depth", type=int, default=None, help=f"Minimax lookahead in plies (default {config.MINIMAX_DEPTH})")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the random player")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--no-thinking", action="store_true", help="Skip the AI thinking spinner")
    ap.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING, ... (default from DROPFOUR_LOG_LEVEL)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    config.configure_logging(args.log_level)

    if args.no_color:
        config.USE_COLOR = False
    if args.depth is not None and args.depth < 0:
        print("--depth must be >= 0")
        return 2

    if args.red is None and args.yellow is None:
        run_menu(depth=args.depth)
        return 0

    red = make_player(args.red or "human", depth=args.depth, seed=args.seed)
    yellow = make_player(args.yellow or "minimax", depth=args.depth, seed=args.seed)
    log.info("starting %s vs %s", red.name, yellow.name)
    run_game(red, yellow, show_thinking=not args.no_thinking)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
