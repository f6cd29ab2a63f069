"""
graphgen/graph/graphical.py — Feasibility Tester (graphicality of degree sequences).

A degree sequence is *graphical* when at least one simple graph (undirected,
no self-loops, no parallel edges) has exactly those node degrees. This module
is the single source of truth for that question. The sampler asks it once for
the input and again for every tentative residual sequence, so it is called
O(edges × attempts) times per run and is kept to one sort plus a linear scan.

Two tests are provided:
    is_graphical               — Erdős–Gallai inequality (canonical oracle).
    is_graphical_havel_hakimi  — Havel–Hakimi reduction (independent check).

Neither test mutates its argument.
"""

import operator
from itertools import accumulate
from typing import Callable, Iterable


def as_degree_list(sequence: Iterable) -> list[int]:
    """
    Copy a degree sequence into a list of plain ints.

    Anything implementing __index__ (int, bool, NumPy integers) is accepted.
    Floats and strings raise TypeError rather than being silently truncated.
    """
    return [operator.index(d) for d in sequence]


def _passes_parity_and_sign(degrees: list[int]) -> bool:
    # Handshake lemma: the degree sum of any graph is even.
    if any(d < 0 for d in degrees):
        return False
    return sum(degrees) % 2 == 0


def is_graphical(sequence: Iterable) -> bool:
    """
    Decide whether a sequence is graphical using the Erdős–Gallai test.

    Algorithm (O(n log n)):
        1. Reject any negative entry or an odd degree sum.
        2. Sort a private copy in descending order: d_1 >= ... >= d_n.
        3. For every k = 1..n-1 the sequence fails if

               sum(d_1..d_k) > k(k-1) + sum_{j>k} min(k, d_j)

           The right-hand tail is evaluated in O(1) per k from prefix sums and
           a pointer p marking where entries drop below k (p only moves left
           as k grows).

    Args:
        sequence: Degrees indexed by node id. Never mutated.

    Returns:
        True if some simple graph realizes the sequence, False otherwise.
        Invalid input never raises; it simply is not graphical.

    Notes:
        - The k = n inequality is implied by k = 1 whenever n >= 2, so the
          scan stops at n-1. A single entry has no k to scan and is graphical
          only when it is 0.
    """
    degrees = as_degree_list(sequence)
    if not _passes_parity_and_sign(degrees):
        return False

    n = len(degrees)
    if n == 1:
        return degrees[0] == 0

    d = sorted(degrees, reverse=True)
    prefix = list(accumulate(d, initial=0))
    total = prefix[n]

    p = n
    for k in range(1, n):
        while p > 0 and d[p - 1] < k:
            p -= 1
        # Tail entries j in [k, n) contribute k while d_j >= k (j < p),
        # and d_j themselves once they fall below k.
        if p > k:
            right = k * (p - k) + (total - prefix[p])
        else:
            right = total - prefix[k]
        if prefix[k] > k * (k - 1) + right:
            return False

    return True


def is_graphical_havel_hakimi(sequence: Iterable) -> bool:
    """
    Decide whether a sequence is graphical using the Havel–Hakimi reduction.

    Repeatedly removes the largest remaining degree d and decrements the next
    d largest entries. The sequence is graphical iff this always succeeds
    until only zeros remain.

    Same contract as is_graphical(): negative entries and odd sums return
    False, the argument is never mutated. O(n² log n) in the worst case, so
    the Erdős–Gallai test stays the default inside the sampler.
    """
    degrees = as_degree_list(sequence)
    if not _passes_parity_and_sign(degrees):
        return False

    remaining = sorted((d for d in degrees if d > 0), reverse=True)
    while remaining:
        largest = remaining.pop(0)
        if largest > len(remaining):
            return False
        for i in range(largest):
            remaining[i] -= 1
        remaining = sorted((d for d in remaining if d > 0), reverse=True)

    return True


FEASIBILITY_TESTS: dict[str, Callable[[Iterable], bool]] = {
    "erdos_gallai": is_graphical,
    "havel_hakimi": is_graphical_havel_hakimi,
}


def get_feasibility_test(name: str) -> Callable[[Iterable], bool]:
    """Resolve a configured feasibility test name to its predicate."""
    try:
        return FEASIBILITY_TESTS[name]
    except KeyError:
        raise ValueError(
            f"unknown feasibility test: {name!r} "
            f"(expected one of {sorted(FEASIBILITY_TESTS)})"
        ) from None
