"""
graphgen/tests/test_figures.py — Smoke tests for the matplotlib figures.

All output goes to tmp_path; parent directories are created on demand.
"""

import os

from graphgen.graph.generator import generate
from graphgen.viz.figures import draw_realization, plot_degree_comparison


def test_plot_degree_comparison_writes_png(tmp_path, seed):
    sequence = [3, 2, 2, 1]
    edges = generate(sequence, seed=seed)
    path = plot_degree_comparison(sequence, edges, str(tmp_path / "figs" / "degrees.png"))
    assert os.path.isabs(path)
    assert os.path.getsize(path) > 0


def test_plot_degree_comparison_with_mismatch(tmp_path):
    path = plot_degree_comparison([2, 2, 2], {(0, 1)}, str(tmp_path / "mismatch.png"))
    assert os.path.exists(path)


def test_draw_realization_writes_png(tmp_path, seed):
    sequence = [2] * 8
    edges = generate(sequence, seed=seed)
    path = draw_realization(edges, len(sequence), str(tmp_path / "graph.png"), seed=seed)
    assert os.path.getsize(path) > 0
