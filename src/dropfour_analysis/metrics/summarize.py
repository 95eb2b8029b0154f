from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd

from dropfour.scripts.series_scoring import wilson_lcb


MetricKey = Literal[
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "wins",
    "points",
    "nodes",
]

# Lower is better for these; everything else ranks descending.
ASCENDING_METRICS = {"avg_ms_per_move", "invalid_moves"}


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "strength_wilson_lcb"
    top_n: int = 20
    min_games: int = 0
    max_avg_ms_per_move: float | None = None


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df
    if cfg.min_games > 0:
        _require_cols(out, ["games"])
        out = out[out["games"].fillna(0) >= cfg.min_games]
    if cfg.max_avg_ms_per_move is not None:
        _require_cols(out, ["avg_ms_per_move"])
        out = out[out["avg_ms_per_move"].fillna(float("inf")) <= cfg.max_avg_ms_per_move]
    return out.copy()


def combine_by_name(df: pd.DataFrame, z: float = 1.28) -> pd.DataFrame:
    """
    Merge rows for the same player across several series: counters are
    summed and the per-game / per-move rates recomputed from the sums.
    """
    _require_cols(df, ["name", "games", "points"])
    summed_cols = [c for c in ("games", "wins", "draws", "losses", "points", "moves", "time_ms", "nodes", "invalid_moves") if c in df.columns]
    out = df.groupby("name", as_index=False)[summed_cols].sum()
    out["ppg"] = (out["points"] / out["games"]).where(out["games"] > 0, 0.0)
    out["strength_wilson_lcb"] = [wilson_lcb(p, int(n), z) for p, n in zip(out["ppg"], out["games"])]
    if "moves" in out.columns and "time_ms" in out.columns:
        out["avg_ms_per_move"] = (out["time_ms"] / out["moves"]).where(out["moves"] > 0, 0.0)
    return out


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    _require_cols(df, ["name", cfg.metric])

    out = filter_rows(df, cfg)
    out = out.sort_values(cfg.metric, ascending=cfg.metric in ASCENDING_METRICS, kind="stable")

    cols = [
        "name",
        "games", "wins", "draws", "losses",
        "ppg",
        "strength_wilson_lcb",
        "avg_ms_per_move",
        "points",
        "moves", "nodes", "avg_depth",
        "invalid_moves",
    ]
    keep = [c for c in cols if c in out.columns]

    out = out[keep].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.25, 0.5, 0.75]).T
