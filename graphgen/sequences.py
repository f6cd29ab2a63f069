"""
graphgen/sequences.py — Degree sequence sources.

Produces the integer lists fed to graphgen.graph.generator.generate():

    parse_degree_list          — "3,3,2 2" style text from the command line.
    read_degree_sequence_csv   — one column of a CSV file (pandas).
    powerlaw_degree_sequence   — random heavy-tailed graphical sequence (NumPy).
"""

import logging
import re
from typing import Optional

import numpy as np
import pandas as pd

from graphgen.graph.graphical import is_graphical

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[,\s]+")


def parse_degree_list(text: str) -> list[int]:
    """
    Parse integers separated by commas and/or whitespace.

    Brackets around the list are tolerated ("[2, 2, 2, 2]"). Signs are kept
    so that negative entries reach the feasibility test instead of being
    dropped here.

    Raises:
        ValueError: a token is not an integer.
    """
    stripped = text.strip().strip("[]()")
    tokens = [t for t in _SEPARATORS.split(stripped) if t]
    degrees: list[int] = []
    for token in tokens:
        try:
            degrees.append(int(token))
        except ValueError:
            raise ValueError(f"not an integer degree: {token!r}") from None
    return degrees


def read_degree_sequence_csv(path: str, column: str = "degree") -> list[int]:
    """
    Load a degree sequence from one column of a CSV file.

    Row order is node-id order: row 0 is node 0.

    Raises:
        ValueError: the column is missing, has blanks, or holds
            non-integral values.
    """
    logger.info("Loading degree sequence from: %s (column=%s)", path, column)
    df = pd.read_csv(path)
    if column not in df.columns:
        raise ValueError(
            f"column {column!r} not found in {path} (columns: {list(df.columns)})"
        )

    values = pd.to_numeric(df[column], errors="coerce")
    if values.isna().any():
        bad_rows = [int(i) for i in values[values.isna()].index[:5]]
        raise ValueError(f"non-numeric or missing degrees in {path} at rows {bad_rows}")
    if (values % 1 != 0).any():
        raise ValueError(f"non-integral degrees in column {column!r} of {path}")

    return [int(v) for v in values]


def powerlaw_degree_sequence(
    n: int,
    gamma: float = 2.5,
    seed: Optional[int] = None,
    min_degree: int = 1,
    max_degree: Optional[int] = None,
    max_attempts: int = 1000,
) -> list[int]:
    """
    Sample a graphical degree sequence with a power-law tail P(k) ~ k^-gamma.

    Algorithm:
        1. Draw n classical Pareto variates with shape gamma - 1 and scale
           min_degree, floor them and clip to [min_degree, max_degree].
        2. If the sum is odd, bump one random entry by +1 (or -1 when it
           already sits at max_degree).
        3. Keep the sample if it passes the Erdős–Gallai test, otherwise
           draw again.

    Args:
        n:            Number of nodes.
        gamma:        Power-law exponent, must be > 1.
        seed:         Seed for numpy.random.default_rng.
        min_degree:   Smallest degree drawn (before the parity fix).
        max_degree:   Largest degree allowed; capped at n - 1.
        max_attempts: Draws before giving up.

    Returns:
        List of n non-negative ints that is graphical.

    Raises:
        ValueError: bad parameters.
        RuntimeError: no graphical sample within max_attempts.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if gamma <= 1:
        raise ValueError(f"gamma must be > 1, got {gamma}")
    if n == 0:
        return []

    cap = n - 1 if max_degree is None else min(max_degree, n - 1)
    if min_degree < 0 or min_degree > cap:
        raise ValueError(f"min_degree must lie in [0, {cap}], got {min_degree}")

    rng = np.random.default_rng(seed)
    scale = max(min_degree, 1)

    for attempt in range(1, max_attempts + 1):
        raw = (rng.pareto(gamma - 1, size=n) + 1.0) * scale
        degrees = np.clip(np.floor(raw), min_degree, cap).astype(np.int64)

        if int(degrees.sum()) % 2 != 0:
            idx = int(rng.integers(n))
            degrees[idx] += 1 if degrees[idx] < cap else -1

        sequence = [int(d) for d in degrees]
        if is_graphical(sequence):
            logger.debug(
                "Power-law sequence (n=%d, gamma=%.2f) accepted on attempt %d, max degree %d.",
                n, gamma, attempt, max(sequence),
            )
            return sequence

    raise RuntimeError(
        f"powerlaw_degree_sequence: no graphical sample in {max_attempts} attempts "
        f"(n={n}, gamma={gamma})"
    )
