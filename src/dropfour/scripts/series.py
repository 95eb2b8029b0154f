from __future__ import annotations

import argparse
import csv
import logging
import os
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from functools import partial
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from dropfour import config
from dropfour.core.board import Board
from dropfour.game.controller import play_match
from dropfour.types import Move, Token, RED, YELLOW, other
from dropfour.ui.menu import make_player

from .series_scoring import avg_depth, avg_ms_per_move, ppg, strength_score
from .series_types import Agg, Team

log = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms", "nodes", "avg_depth",
    "invalid_moves",
]

Stats = Dict[Token, Dict[str, int]]
GameRecord = Tuple[str, str, bool, str, Stats]  # (A, B, a_is_red, outcome, stats)


def seed_player(player, seed: int) -> None:
    rng = getattr(player, "rng", None)
    if isinstance(rng, random.Random):
        rng.seed(seed)


def random_opening(board: Board, plies: int, rng: random.Random) -> None:
    """Play a few random legal moves so deterministic players don't repeat one game."""
    token: Token = RED
    for _ in range(plies):
        moves = board.valid_moves()
        if not moves or board.winner() is not None:
            break
        board.place(rng.choice(moves), token)
        token = other(token)


def play_headless(red, yellow, seed_base: int = 0, opening_plies: int = 2) -> Tuple[str, Stats]:
    """
    Play one game with no rendering. Returns the outcome ('R', 'Y' or 'D')
    and per-color counters built from each player's last_info.
    """
    stats: Stats = {
        RED: {"moves": 0, "time_ms": 0, "nodes": 0, "depth": 0, "invalid": 0},
        YELLOW: {"moves": 0, "time_ms": 0, "nodes": 0, "depth": 0, "invalid": 0},
    }
    players = {RED: red, YELLOW: yellow}

    seed_player(red, seed_base + 101)
    seed_player(yellow, seed_base + 202)

    board = Board()
    random_opening(board, opening_plies, random.Random(seed_base))

    def on_move(_board: Board, token: Token, _move: Move) -> None:
        info = getattr(players[token], "last_info", None) or {}
        side = stats[token]
        side["moves"] += 1
        side["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side["nodes"] += int(info.get("nodes", 0))
        side["depth"] += int(info.get("depth", 0))

    def on_reject(_board: Board, token: Token, _move: object, _reason: str) -> None:
        stats[token]["invalid"] += 1

    result = play_match(red, yellow, board=board, on_move=on_move, on_reject=on_reject)
    return result.outcome, stats


def add_result(agg_a: Agg, agg_b: Agg, outcome: str, a_is_red: bool) -> None:
    agg_a.games += 1
    agg_b.games += 1

    if outcome == "D":
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    a_won = (outcome == RED) == a_is_red
    winner, loser = (agg_a, agg_b) if a_won else (agg_b, agg_a)
    winner.wins += 1
    winner.points += 1.0
    loser.losses += 1


def add_stats(agg: Agg, side: Dict[str, int]) -> None:
    agg.moves += side["moves"]
    agg.time_ms += side["time_ms"]
    agg.nodes += side["nodes"]
    agg.depth_sum += side["depth"]
    agg.invalid_moves += side["invalid"]


def play_batch(a: Team, b: Team, game_ids: List[int], seed: int, opening_plies: int) -> List[GameRecord]:
    out: List[GameRecord] = []
    for g in game_ids:
        a_is_red = g % 2 == 0
        pa, pb = a.make(), b.make()
        red, yellow = (pa, pb) if a_is_red else (pb, pa)
        outcome, stats = play_headless(red, yellow, seed_base=seed + g * 1_000, opening_plies=opening_plies)
        out.append((a.name, b.name, a_is_red, outcome, stats))
    return out


def chunked(lst, size: int):
    for i in range(0, len(lst), size):
        yield lst[i : i + size]


def run_series(
    a: Team,
    b: Team,
    games: int = 10,
    seed: int = 1234,
    workers: int = 1,
    batch_games: int = 4,
    opening_plies: int = 2,
) -> Dict[str, Agg]:
    """
    Play `games` games between two teams, swapping colors every game.
    With workers > 1 batches of games run in separate processes; each game
    builds its own board and players.
    """
    if a.name == b.name:
        raise ValueError("Teams need distinct names.")
    agg: Dict[str, Agg] = {a.name: Agg(), b.name: Agg()}

    def apply(record: GameRecord) -> None:
        a_name, b_name, a_is_red, outcome, stats = record
        add_result(agg[a_name], agg[b_name], outcome, a_is_red=a_is_red)
        add_stats(agg[a_name], stats[RED] if a_is_red else stats[YELLOW])
        add_stats(agg[b_name], stats[YELLOW] if a_is_red else stats[RED])
        log.debug("%s (%s) vs %s: %s", a_name, "R" if a_is_red else "Y", b_name, outcome)

    ids = list(range(games))
    if workers <= 1:
        for record in play_batch(a, b, ids, seed, opening_plies):
            apply(record)
    else:
        with ProcessPoolExecutor(max_workers=workers) as ex:
            futures = [ex.submit(play_batch, a, b, chunk, seed, opening_plies) for chunk in chunked(ids, batch_games)]
            for fut in as_completed(futures):
                for record in fut.result():
                    apply(record)

    for name, s in agg.items():
        log.info("%s: W-D-L %d-%d-%d, ppg %.3f", name, s.wins, s.draws, s.losses, ppg(s))
    return agg


def export_csv(rows: Iterable[Tuple[str, Agg]], out_path: Path, z: float = 1.28) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for name, a in rows:
            w.writerow([
                name,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(ppg(a), 6),
                round(strength_score(a, z), 6),
                round(avg_ms_per_move(a), 3),
                a.moves, a.time_ms, a.nodes, round(avg_depth(a), 3),
                a.invalid_moves,
            ])
    return out_path


def make_team(kind: str, depth: int | None, seed: int | None) -> Team:
    label = kind if kind != "minimax" else f"minimax d{depth if depth is not None else config.MINIMAX_DEPTH}"
    return Team(label, partial(make_player, kind, depth=depth, seed=seed, name=label))


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play a headless Connect Four series and export results.")
    kinds = ["random", "one-ply", "minimax"]
    ap.add_argument("--a", choices=kinds, default="minimax", help="First player kind")
    ap.add_argument("--b", choices=kinds, default="one-ply", help="Second player kind")
    ap.add_argument("--depth-a", type=int, default=None, help="Minimax depth for --a")
    ap.add_argument("--depth-b", type=int, default=None, help="Minimax depth for --b")
    ap.add_argument("--games", type=int, default=10, help="Number of games (colors alternate)")
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--opening-plies", type=int, default=2, help="Random plies before the players take over")
    ap.add_argument("--workers", type=int, default=1, help="Worker processes (1 = in-process)")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Where series_results_*.csv is written")
    ap.add_argument("--no-csv", action="store_true", help="Skip the CSV export")
    ap.add_argument("--log-level", type=str, default=None)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    config.configure_logging(args.log_level)

    a = make_team(args.a, args.depth_a, args.seed)
    b = make_team(args.b, args.depth_b, args.seed + 1)
    if a.name == b.name:
        a = Team(f"{a.name} (A)", a.make)
        b = Team(f"{b.name} (B)", b.make)

    workers = args.workers if args.workers > 0 else min(os.cpu_count() or 2, 6)
    start = time.perf_counter()
    agg = run_series(a, b, games=args.games, seed=args.seed, workers=workers, opening_plies=args.opening_plies)
    elapsed = time.perf_counter() - start

    print(f"\n=== SERIES RESULTS ({args.games} games, {elapsed:.1f}s) ===")
    for name, s in agg.items():
        print(
            f"{name:<20} W-D-L={s.wins}-{s.draws}-{s.losses}  ppg={ppg(s):.3f}  "
            f"avg_ms/move={avg_ms_per_move(s):.1f}  nodes={s.nodes}  invalid={s.invalid_moves}"
        )

    if not args.no_csv:
        ts = time.strftime("%Y%m%d_%H%M%S")
        path = export_csv(agg.items(), Path(args.results_dir) / f"series_results_{ts}.csv")
        print(f"Wrote CSV: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
