"""Visualization utilities for benchmark outputs.

Charts are written as PNG files into ``out_dir`` with the same filename
suffix as the CSV exports (see ``reporting.build_suffix``):

- 01_time_vs_N_log_scale.png: mean wall time per N on a log scale, with error
    bars (population std) and an exponential trend ``t ~ a * b**N`` fitted by
    least squares on ``log(t)``. The fitted growth factor ``b`` is shown in the
    legend.
- 02_nodes_vs_N_log_scale.png: explored nodes per N (hardware-independent
    effort), symmetric and plain strategies drawn with distinct markers.
"""
from __future__ import annotations

import os
from typing import List, Optional, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import seaborn as sns  # noqa: E402

from .reporting import build_suffix  # noqa: E402
from .stats import BenchmarkResults  # noqa: E402


def fit_growth_factor(N_values: List[int], times: List[float]) -> Optional[Tuple[float, float]]:
    """Fit ``t = a * b**N`` and return ``(a, b)``.

    Returns None when fewer than two strictly positive timings are available.
    """
    points = [(n, t) for n, t in zip(N_values, times) if t and t > 0]
    if len(points) < 2:
        return None
    xs = np.array([p[0] for p in points], dtype=float)
    ys = np.log(np.array([p[1] for p in points], dtype=float))
    slope, intercept = np.polyfit(xs, ys, 1)
    return float(np.exp(intercept)), float(np.exp(slope))


def plot_benchmark(results: BenchmarkResults, N_values: List[int], out_dir: str) -> List[str]:
    """Generate the benchmark charts and return the written paths."""
    os.makedirs(out_dir, exist_ok=True)
    sns.set_theme(style="whitegrid")
    suffix = build_suffix()
    written: List[str] = []

    means = [results[N].get("time", {}).get("mean") or 0.0 for N in N_values]
    stds = [results[N].get("time", {}).get("std") or 0.0 for N in N_values]
    means_plot = [max(t, 1e-6) for t in means]

    plt.figure(figsize=(12, 8))
    plt.errorbar(N_values, means_plot, yerr=stds, marker="o", linewidth=2, markersize=8, capsize=4, label="Mean time")
    fit = fit_growth_factor(N_values, means)
    if fit is not None:
        a, b = fit
        x_trend = np.linspace(min(N_values), max(N_values), 100)
        plt.plot(x_trend, a * np.power(b, x_trend), "--", alpha=0.8, label=f"Trend (x{b:.2f} per N)")
    plt.yscale("log")
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Mean time [s] (log scale)", fontsize=12)
    plt.title("Exhaustive Enumeration Time vs Board Size", fontsize=14)
    plt.legend(fontsize=11)
    plt.xticks(N_values)

    fname = os.path.join(out_dir, f"01_time_vs_N_log_scale{suffix}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved execution-time chart (log scale): {fname}")
    written.append(fname)

    sym_n = [N for N in N_values if results[N].get("symmetric")]
    plain_n = [N for N in N_values if not results[N].get("symmetric")]

    plt.figure(figsize=(12, 8))
    if sym_n:
        plt.semilogy(sym_n, [max(results[N].get("nodes", 0), 1) for N in sym_n],
                     marker="s", linestyle="", markersize=9, label="Mirrored search")
    if plain_n:
        plt.semilogy(plain_n, [max(results[N].get("nodes", 0), 1) for N in plain_n],
                     marker="^", linestyle="", markersize=9, label="Plain search")
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Explored nodes (log scale)", fontsize=12)
    plt.title("Search Effort vs Board Size", fontsize=14)
    plt.legend(fontsize=11)
    plt.xticks(N_values)

    fname = os.path.join(out_dir, f"02_nodes_vs_N_log_scale{suffix}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved search-effort chart (log scale): {fname}")
    written.append(fname)

    return written
