from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

log = logging.getLogger(__name__)

NUMERIC_COLS = (
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms", "nodes", "avg_depth",
    "invalid_moves",
)

DEFAULT_PATTERN = "series_results_*.csv"


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    required_cols: tuple[str, ...] = ("name", "games", "wins", "draws", "losses")


def load_results(spec: LoadSpec) -> pd.DataFrame:
    """Read one series CSV, coerce the numeric columns and drop unnamed rows."""
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path)
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in spec.required_cols if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")

    for c in NUMERIC_COLS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")

    df["name"] = df["name"].astype(str).str.strip()
    df = df[df["name"].str.len() > 0].reset_index(drop=True)
    log.debug("loaded %d rows from %s", len(df), spec.csv_path)
    return df


def load_many(paths: list[Path]) -> pd.DataFrame:
    """Concatenate several series CSVs, tagging each row with its source file."""
    frames = []
    for p in paths:
        df = load_results(LoadSpec(csv_path=p))
        df["source"] = p.name
        frames.append(df)
    if not frames:
        raise FileNotFoundError("No CSV files given.")
    return pd.concat(frames, ignore_index=True)


def load_latest_from_dir(results_dir: Path, pattern: str = DEFAULT_PATTERN) -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Timestamped names sort chronologically.
    return files[-1]
