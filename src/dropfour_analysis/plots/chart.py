from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import matplotlib.pyplot as plt
import pandas as pd


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> List[Path]:
    written: List[Path] = []
    for c in cols:
        if c not in df.columns or not pd.api.types.is_numeric_dtype(df[c]):
            continue
        fig, ax = plt.subplots()
        ax.hist(df[c].dropna(), bins=30)
        ax.set_title(f"Histogram: {c}")
        ax.set_xlabel(c)
        ax.set_ylabel("count")
        out = _finish(fig, outdir, f"hist_{c}.png", show=show)
        if out is not None:
            written.append(out)
    return written


def plot_speed_vs_strength(df: pd.DataFrame, outdir: Path, metric: str, *, show: bool) -> Path | None:
    """Scatter of a strength metric against average think time, one labelled dot per player."""
    x = "avg_ms_per_move"
    if x not in df.columns or metric not in df.columns:
        return None
    if not (pd.api.types.is_numeric_dtype(df[x]) and pd.api.types.is_numeric_dtype(df[metric])):
        return None

    fig, ax = plt.subplots()
    ax.scatter(df[x], df[metric], alpha=0.7)
    if "name" in df.columns:
        for _, row in df.iterrows():
            ax.annotate(str(row["name"]), (row[x], row[metric]), fontsize=7, alpha=0.8)
    ax.set_xscale("symlog")
    ax.set_title(f"{metric} vs {x}")
    ax.set_xlabel(x)
    ax.set_ylabel(metric)
    return _finish(fig, outdir, f"scatter_{metric}_vs_{x}.png", show=show)


def plot_top_bar(df: pd.DataFrame, outdir: Path, metric: str, top_n: int, *, show: bool) -> Path | None:
    if "name" not in df.columns or metric not in df.columns:
        return None
    if not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    top = df[["name", metric]].dropna().sort_values(metric, ascending=False).head(top_n)
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar(top["name"].astype(str), top[metric].astype(float))
    ax.set_title(f"Top {min(top_n, len(top))}: {metric}")
    ax.set_xlabel("player")
    ax.set_ylabel(metric)
    ax.tick_params(axis="x", labelrotation=45)
    return _finish(fig, outdir, f"top_{top_n}_{metric}.png", show=show)


def plot_wdl(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Stacked win/draw/loss bars per player."""
    cols = ["wins", "draws", "losses"]
    if "name" not in df.columns or any(c not in df.columns for c in cols):
        return None

    data = df.set_index("name")[cols].fillna(0)
    fig, ax = plt.subplots(figsize=(10, 5))
    data.plot(kind="bar", stacked=True, ax=ax, color=["tab:green", "tab:gray", "tab:red"])
    ax.set_title("Wins / draws / losses")
    ax.set_xlabel("player")
    ax.set_ylabel("games")
    ax.tick_params(axis="x", labelrotation=45)
    return _finish(fig, outdir, "wdl.png", show=show)
