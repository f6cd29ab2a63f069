"""
graphgen/viz/figures.py — Figures for generated realizations.

Usage:
    from graphgen.viz.figures import plot_degree_comparison, draw_realization
    plot_degree_comparison(target, edges, "out/degrees.png")
    draw_realization(edges, len(target), "out/graph.png", seed=41)
"""

from __future__ import annotations

import logging
import os
from typing import Iterable

import matplotlib
try:
    matplotlib.use("Agg")
except Exception:
    pass  # backend already set

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from graphgen.graph.generator import Edge, realized_degrees
from graphgen.graph.graphical import as_degree_list
from graphgen.graph.materialize import to_networkx

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Shared colour palette
# ---------------------------------------------------------------------------
C_TARGET = "#2196A6"    # teal: requested degree
C_REALIZED = "#F2B134"  # amber: realized degree
C_MISMATCH = "#E05E3A"  # orange-red: degree mismatch
C_DARK = "#1A2B3C"      # near-black
C_LIGHT = "#E8EFF5"     # background tint

STYLE = {
    "figure.facecolor": "white",
    "axes.facecolor": C_LIGHT,
    "axes.edgecolor": C_DARK,
    "axes.labelcolor": C_DARK,
    "xtick.color": C_DARK,
    "ytick.color": C_DARK,
    "text.color": C_DARK,
    "grid.color": "white",
    "grid.linewidth": 1.0,
    "axes.spines.top": False,
    "axes.spines.right": False,
}


def _prepare_path(output_path: str) -> str:
    parent = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(parent, exist_ok=True)
    return output_path


def plot_degree_comparison(target: Iterable, edges: Iterable[Edge], output_path: str) -> str:
    """
    Bar chart of requested vs realized degree for every node.

    Nodes whose realized degree differs from the request are outlined in
    red, which for output of generate() never happens.

    Returns:
        Absolute path of the written PNG.
    """
    target_degrees = as_degree_list(target)
    n = len(target_degrees)
    realized = realized_degrees(edges, n)

    plt.rcParams.update(STYLE)
    fig, ax = plt.subplots(figsize=(max(6, min(0.35 * n, 24)), 4.5))

    x = np.arange(n)
    width = 0.4
    ax.bar(x - width / 2, target_degrees, width, color=C_TARGET, label="requested", zorder=3)
    bars = ax.bar(x + width / 2, realized, width, color=C_REALIZED, label="realized", zorder=3)

    mismatches = 0
    for i, bar in enumerate(bars):
        if realized[i] != target_degrees[i]:
            bar.set_edgecolor(C_MISMATCH)
            bar.set_linewidth(2.0)
            mismatches += 1

    ax.set_xlabel("Node id", fontsize=12)
    ax.set_ylabel("Degree", fontsize=12)
    ax.set_title(
        f"Requested vs realized degree — {n} nodes, {mismatches} mismatch(es)",
        fontsize=13, fontweight="bold", pad=12,
    )
    if n <= 40:
        ax.set_xticks(x)
    ax.set_ylim(bottom=0)
    ax.yaxis.grid(True, zorder=0)
    ax.legend(fontsize=10, loc="upper right")

    fig.tight_layout()
    path = _prepare_path(output_path)
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    logger.info("Degree comparison figure written: %s", path)
    return os.path.abspath(path)


def draw_realization(
    edges: Iterable[Edge],
    node_count: int,
    output_path: str,
    seed: int | None = 42,
) -> str:
    """
    Spring-layout drawing of a realized graph, nodes sized by degree.

    Returns:
        Absolute path of the written PNG.
    """
    G = to_networkx(edges, node_count)
    degrees = dict(G.degree())
    sizes = [80 + 40 * degrees[v] for v in G.nodes]

    plt.rcParams.update(STYLE)
    fig, ax = plt.subplots(figsize=(7, 7))
    pos = nx.spring_layout(G, seed=seed)
    nx.draw_networkx_edges(G, pos, ax=ax, edge_color=C_DARK, alpha=0.35, width=1.0)
    nx.draw_networkx_nodes(G, pos, ax=ax, node_color=C_TARGET, node_size=sizes,
                           edgecolors="white", linewidths=0.8)
    if node_count <= 50:
        nx.draw_networkx_labels(G, pos, ax=ax, font_size=8, font_color="white")

    ax.set_title(
        f"Realization — {G.number_of_nodes()} nodes, {G.number_of_edges()} edges",
        fontsize=13, fontweight="bold", pad=12,
    )
    ax.set_axis_off()

    fig.tight_layout()
    path = _prepare_path(output_path)
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    logger.info("Realization figure written: %s", path)
    return os.path.abspath(path)
