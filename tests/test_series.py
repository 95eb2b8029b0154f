"""Tests for the headless series runner."""

import csv
import random
from functools import partial

import pytest

from dropfour.scripts.series import (
    CSV_COLUMNS,
    add_result,
    export_csv,
    main,
    play_headless,
    random_opening,
    run_series,
)
from dropfour.scripts.series_scoring import avg_ms_per_move, ppg, strength_score, wilson_lcb
from dropfour.scripts.series_types import Agg, Team
from dropfour.ai.minimax import MinimaxPlayer
from dropfour.ai.one_ply import OnePlyPlayer
from dropfour.ai.random_player import RandomPlayer
from dropfour.core.board import Board
from dropfour.ui.menu import make_player


def test_add_result():
    a, b = Agg(), Agg()
    add_result(a, b, "R", a_is_red=True)
    add_result(a, b, "R", a_is_red=False)
    add_result(a, b, "D", a_is_red=True)
    add_result(a, b, "Y", a_is_red=False)

    assert (a.wins, a.draws, a.losses) == (2, 1, 1)
    assert (b.wins, b.draws, b.losses) == (1, 1, 2)
    assert a.points == 2.5
    assert b.points == 1.5
    assert a.games == b.games == 4


def test_scoring_helpers():
    a = Agg(games=4, points=3.0, moves=10, time_ms=50)
    assert ppg(a) == 0.75
    assert avg_ms_per_move(a) == 5.0
    assert 0.0 < strength_score(a, 1.28) < 0.75
    assert wilson_lcb(0.5, 0, 1.28) == 0.0
    assert ppg(Agg()) == 0.0


def test_random_opening_is_seeded():
    a, b = Board(), Board()
    random_opening(a, 4, random.Random(5))
    random_opening(b, 4, random.Random(5))
    assert a.columns == b.columns
    assert a.plies_played() == 4


def test_play_headless_collects_stats():
    outcome, stats = play_headless(MinimaxPlayer(depth=1), RandomPlayer(seed=1), seed_base=3)
    assert outcome in ("R", "Y", "D")
    assert stats["R"]["moves"] > 0
    assert stats["R"]["nodes"] > 0
    assert stats["Y"]["depth"] == 0
    assert stats["R"]["invalid"] == 0


def test_run_series_alternates_colors():
    a = Team("one-ply", OnePlyPlayer)
    b = Team("minimax d1", partial(MinimaxPlayer, depth=1))
    agg = run_series(a, b, games=4, seed=11, opening_plies=2)

    sa, sb = agg["one-ply"], agg["minimax d1"]
    assert sa.games == sb.games == 4
    assert sa.wins == sb.losses
    assert sa.losses == sb.wins
    assert sa.draws == sb.draws
    assert sa.points + sb.points == 4.0
    assert sb.nodes > 0


def test_run_series_is_reproducible():
    a = Team("random a", partial(make_player, "random", seed=1))
    b = Team("random b", partial(make_player, "random", seed=2))
    first = run_series(a, b, games=3, seed=5)
    second = run_series(a, b, games=3, seed=5)
    assert first["random a"].wins == second["random a"].wins
    assert first["random a"].invalid_moves == second["random a"].invalid_moves


def test_run_series_needs_distinct_names():
    team = Team("same", OnePlyPlayer)
    with pytest.raises(ValueError):
        run_series(team, team, games=1)


def test_export_csv(tmp_path):
    agg = {"x": Agg(games=2, points=1.5, wins=1, draws=1, moves=8, time_ms=16, nodes=100, depth_sum=16), "y": Agg(games=2, points=0.5, draws=1, losses=1)}
    path = export_csv(agg.items(), tmp_path / "out" / "series.csv")

    with open(path, newline="") as f:
        rows = list(csv.reader(f))

    assert rows[0] == CSV_COLUMNS
    assert [r[0] for r in rows[1:]] == ["x", "y"]
    x = dict(zip(CSV_COLUMNS, rows[1]))
    assert float(x["ppg"]) == 0.75
    assert float(x["avg_ms_per_move"]) == 2.0
    assert float(x["avg_depth"]) == 2.0


def test_main_writes_csv(tmp_path, capsys):
    code = main(["--a", "one-ply", "--b", "random", "--games", "2", "--results-dir", str(tmp_path)])
    assert code == 0
    assert len(list(tmp_path.glob("series_results_*.csv"))) == 1
    assert "SERIES RESULTS" in capsys.readouterr().out
