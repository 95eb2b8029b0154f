from .chart import (
    plot_histograms,
    plot_speed_vs_strength,
    plot_top_bar,
    plot_wdl,
)

__all__ = [
    "plot_histograms",
    "plot_speed_vs_strength",
    "plot_top_bar",
    "plot_wdl",
]
