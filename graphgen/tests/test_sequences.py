"""
graphgen/tests/test_sequences.py — Tests for degree sequence sources.

Tests verify:
- parse_degree_list handles commas, whitespace, brackets and signs.
- read_degree_sequence_csv reads one column in row order and rejects
  missing columns, blanks and non-integral values.
- powerlaw_degree_sequence returns reproducible, bounded, graphical samples
  and fails loudly on bad parameters or exhausted attempts.
"""

import pandas as pd
import pytest

from graphgen import sequences
from graphgen.graph.graphical import is_graphical
from graphgen.sequences import (
    parse_degree_list,
    powerlaw_degree_sequence,
    read_degree_sequence_csv,
)


# ── parse_degree_list ────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text, expected",
    [
        ("3,3,3,3", [3, 3, 3, 3]),
        ("2 2  2\t2", [2, 2, 2, 2]),
        ("[5, 1]", [5, 1]),
        (" 1,\n1 ", [1, 1]),
        ("-1 1", [-1, 1]),
        ("", []),
    ],
)
def test_parse_degree_list(text, expected):
    assert parse_degree_list(text) == expected


def test_parse_degree_list_rejects_non_integer():
    with pytest.raises(ValueError, match="not an integer degree"):
        parse_degree_list("1, two, 3")


# ── read_degree_sequence_csv ─────────────────────────────────────────────────

def test_read_csv_default_column(tmp_path):
    path = tmp_path / "degrees.csv"
    pd.DataFrame({"node": [0, 1, 2, 3], "degree": [3, 2, 2, 1]}).to_csv(path, index=False)
    assert read_degree_sequence_csv(str(path)) == [3, 2, 2, 1]


def test_read_csv_named_column(tmp_path):
    path = tmp_path / "degrees.csv"
    pd.DataFrame({"k": [1, 1]}).to_csv(path, index=False)
    assert read_degree_sequence_csv(str(path), column="k") == [1, 1]


def test_read_csv_missing_column(tmp_path):
    path = tmp_path / "degrees.csv"
    pd.DataFrame({"k": [1, 1]}).to_csv(path, index=False)
    with pytest.raises(ValueError, match="not found"):
        read_degree_sequence_csv(str(path))


def test_read_csv_blank_value(tmp_path):
    path = tmp_path / "degrees.csv"
    path.write_text("degree\n1\n\n1\nx\n")
    with pytest.raises(ValueError, match="non-numeric"):
        read_degree_sequence_csv(str(path))


def test_read_csv_non_integral_value(tmp_path):
    path = tmp_path / "degrees.csv"
    path.write_text("degree\n1.5\n0.5\n")
    with pytest.raises(ValueError, match="non-integral"):
        read_degree_sequence_csv(str(path))


# ── powerlaw_degree_sequence ─────────────────────────────────────────────────

def test_powerlaw_is_graphical_and_bounded():
    seq = powerlaw_degree_sequence(200, gamma=2.2, seed=41, max_degree=30)
    assert len(seq) == 200
    assert is_graphical(seq)
    assert max(seq) <= 30
    assert all(isinstance(d, int) for d in seq)


def test_powerlaw_is_reproducible():
    a = powerlaw_degree_sequence(50, gamma=2.5, seed=7)
    b = powerlaw_degree_sequence(50, gamma=2.5, seed=7)
    assert a == b


def test_powerlaw_respects_node_count_cap():
    seq = powerlaw_degree_sequence(10, gamma=2.0, seed=3)
    assert max(seq) <= 9


def test_powerlaw_empty():
    assert powerlaw_degree_sequence(0) == []


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n": 10, "gamma": 1.0},
        {"n": -1},
        {"n": 5, "min_degree": 5},
        {"n": 5, "min_degree": -1},
    ],
)
def test_powerlaw_bad_parameters(kwargs):
    with pytest.raises(ValueError):
        powerlaw_degree_sequence(**kwargs)


def test_powerlaw_gives_up_after_max_attempts(monkeypatch):
    monkeypatch.setattr(sequences, "is_graphical", lambda seq: False)
    with pytest.raises(RuntimeError, match="no graphical sample"):
        powerlaw_degree_sequence(20, seed=1, max_attempts=5)
