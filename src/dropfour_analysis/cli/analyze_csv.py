from __future__ import annotations

import argparse
import logging
from pathlib import Path

from dropfour import config

from ..io.load_results import DEFAULT_PATTERN, LoadSpec, load_latest_from_dir, load_many, load_results
from ..metrics.summarize import SummaryConfig, combine_by_name, filter_rows, numeric_summary, top_table
from ..plots.chart import plot_histograms, plot_speed_vs_strength, plot_top_bar, plot_wdl

log = logging.getLogger(__name__)

DEFAULT_NUMERIC_PLOTS = [
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "nodes",
    "avg_depth",
]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze Connect Four series CSV results.")
    ap.add_argument("--csv", type=str, nargs="*", default=None, help="One or more results CSVs. If omitted, uses the latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing series_results_*.csv")
    ap.add_argument("--pattern", type=str, default=DEFAULT_PATTERN, help="Glob pattern for selecting the latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")

    ap.add_argument("--top", type=int, default=20, help="Top N for tables/bar charts")
    ap.add_argument("--metric", type=str, default="strength_wilson_lcb", help="Ranking metric (e.g. strength_wilson_lcb, ppg, avg_ms_per_move)")
    ap.add_argument("--min-games", type=int, default=0, help="Filter out players with fewer than this many games")
    ap.add_argument("--max-ms", type=float, default=None, help="Filter out players slower than this avg_ms_per_move")
    ap.add_argument("--log-level", type=str, default=None)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    config.configure_logging(args.log_level)

    if args.csv:
        paths = [Path(p) for p in args.csv]
    else:
        paths = [load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)]

    if len(paths) == 1:
        df = load_results(LoadSpec(csv_path=paths[0]))
    else:
        # Several series: one row per player with counters summed.
        df = combine_by_name(load_many(paths))

    print(f"\nLoaded: {', '.join(str(p) for p in paths)}")
    print(f"Rows: {len(df):,}  Cols: {len(df.columns)}")

    cfg = SummaryConfig(
        metric=args.metric,  # type: ignore[arg-type]
        top_n=args.top,
        min_games=args.min_games,
        max_avg_ms_per_move=args.max_ms,
    )

    print("\n=== Top table ===")
    print(top_table(df, cfg).to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    filtered = filter_rows(df, cfg)
    plot_histograms(filtered, outdir, DEFAULT_NUMERIC_PLOTS, show=args.show)
    plot_speed_vs_strength(filtered, outdir, metric=args.metric, show=args.show)
    plot_top_bar(filtered, outdir, metric=args.metric, top_n=args.top, show=args.show)
    plot_wdl(filtered, outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")
        log.info("figures written to %s", outdir)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
