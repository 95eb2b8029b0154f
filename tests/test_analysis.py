"""Tests for the results analysis package."""

from pathlib import Path

import pandas as pd
import pytest

from dropfour.scripts.series import export_csv
from dropfour.scripts.series_types import Agg
from dropfour_analysis.cli.analyze_csv import main as analyze_main
from dropfour_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_many, load_results
from dropfour_analysis.metrics.summarize import SummaryConfig, combine_by_name, numeric_summary, top_table
from dropfour_analysis.plots import plot_histograms, plot_speed_vs_strength, plot_top_bar, plot_wdl


def write_series(path: Path, fast_wins: int = 3) -> Path:
    agg = {
        "minimax d4": Agg(games=4, points=fast_wins, wins=fast_wins, losses=4 - fast_wins, moves=40, time_ms=800, nodes=50_000, depth_sum=160),
        "one-ply": Agg(games=4, points=4 - fast_wins, wins=4 - fast_wins, losses=fast_wins, moves=40, time_ms=40, nodes=280, depth_sum=40),
    }
    return export_csv(agg.items(), path)


@pytest.fixture
def results_csv(tmp_path):
    return write_series(tmp_path / "series_results_20260101_000000.csv")


def test_load_results(results_csv):
    df = load_results(LoadSpec(csv_path=results_csv))
    assert list(df["name"]) == ["minimax d4", "one-ply"]
    assert pd.api.types.is_numeric_dtype(df["ppg"])


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_results(LoadSpec(csv_path=tmp_path / "nope.csv"))


def test_load_requires_columns(tmp_path):
    bad = tmp_path / "bad.csv"
    bad.write_text("player,score\na,1\n")
    with pytest.raises(ValueError):
        load_results(LoadSpec(csv_path=bad))


def test_latest_from_dir(tmp_path):
    write_series(tmp_path / "series_results_20260101_000000.csv")
    newest = write_series(tmp_path / "series_results_20260102_000000.csv")
    assert load_latest_from_dir(tmp_path) == newest

    with pytest.raises(FileNotFoundError):
        load_latest_from_dir(tmp_path / "missing")
    with pytest.raises(FileNotFoundError):
        load_latest_from_dir(tmp_path, pattern="league_*.csv")


def test_top_table_ranks(results_csv):
    df = load_results(LoadSpec(csv_path=results_csv))
    table = top_table(df, SummaryConfig(metric="ppg"))
    assert list(table["rk"]) == [1, 2]
    assert table.loc[0, "name"] == "minimax d4"

    fastest = top_table(df, SummaryConfig(metric="avg_ms_per_move"))
    assert fastest.loc[0, "name"] == "one-ply"

    none = top_table(df, SummaryConfig(metric="ppg", min_games=10))
    assert none.empty


def test_combine_by_name(tmp_path):
    a = write_series(tmp_path / "a.csv", fast_wins=4)
    b = write_series(tmp_path / "b.csv", fast_wins=2)
    combined = combine_by_name(load_many([a, b]))
    row = combined.set_index("name").loc["minimax d4"]
    assert row["games"] == 8
    assert row["wins"] == 6
    assert row["ppg"] == pytest.approx(0.75)
    assert 0 < row["strength_wilson_lcb"] < 0.75


def test_numeric_summary(results_csv):
    desc = numeric_summary(load_results(LoadSpec(csv_path=results_csv)))
    assert "ppg" in desc.index
    assert "mean" in desc.columns


def test_plots_write_files(results_csv, tmp_path):
    df = load_results(LoadSpec(csv_path=results_csv))
    out = tmp_path / "figs"

    hists = plot_histograms(df, out, ["ppg", "not_a_column"], show=False)
    assert [p.name for p in hists] == ["hist_ppg.png"]
    assert plot_speed_vs_strength(df, out, "ppg", show=False).exists()
    assert plot_top_bar(df, out, "ppg", 5, show=False).exists()
    assert plot_wdl(df, out, show=False).exists()
    assert plot_top_bar(df, out, "missing", 5, show=False) is None


def test_cli(results_csv, tmp_path, capsys):
    code = analyze_main(["--csv", str(results_csv), "--outdir", str(tmp_path / "figs")])
    out = capsys.readouterr().out
    assert code == 0
    assert "=== Top table ===" in out
    assert (tmp_path / "figs" / "wdl.png").exists()
