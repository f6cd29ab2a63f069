"""
graphgen/graph/generator.py — Stub Matcher / Edge Sampler.

Builds a random simple graph whose degree sequence equals a prescribed one,
following the sequential scheme of Blitzstein & Diaconis ("A sequential
importance sampling algorithm for generating random graphs with prescribed
degrees", 2006), without the importance weights:

    1. Validate the input with the feasibility test.
    2. Pick the node with the smallest positive residual degree (pivot).
    3. Draw a uniformly random partner j != pivot among those not yet tried
       for this pivot. Reject it if the edge already exists or if the
       residual sequence with both endpoints decremented is no longer
       graphical. Otherwise commit the edge.
    4. Repeat until every residual degree is zero.

With the lowest-index tie-break a pivot keeps its turn until its demand is
met, so every placed edge touches a finished node or the current pivot. By
the Blitzstein & Diaconis theorem an acceptable partner then always exists
under a sound graphicality test, and a run only fails when the
max_attempts_per_edge budget runs out. Such runs are restarted from scratch
a bounded number of times before GenerationExhausted is raised. A pivot
whose every partner is rejected (only possible with an unsound custom test)
ends the run the same way.

The sampled graphs are NOT uniformly distributed over all realizations.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Optional

from graphgen.config import DEFAULT_CONFIG, GeneratorConfig
from graphgen.exceptions import GenerationExhausted, InvalidDistributionException
from graphgen.graph.graphical import as_degree_list, get_feasibility_test

logger = logging.getLogger(__name__)

Edge = tuple[int, int]


def normalize_edge(a: int, b: int) -> Edge:
    """Return the unordered pair {a, b} as a (low, high) tuple."""
    return (a, b) if a < b else (b, a)


@dataclass
class GenerationResult:
    """
    Outcome of a successful generation run.

    Fields:
        edges:              Unordered node-id pairs as (low, high) tuples.
        edge_order:         The same edges in the order they were committed
                            (final, successful run only).
        outer_iterations:   Committed edges of the final run (one per pivot).
        attempts:           Random partner draws over all runs, restarts
                            included.
        feasibility_checks: Feasibility test calls inside the candidate
                            search over all runs (the entry check excluded).
        restarts:           Runs abandoned before the final one.
        seed:               Seed of the internally created RNG, or None when
                            an RNG was injected or no seed was given.
    """

    edges: set[Edge] = field(default_factory=set)
    edge_order: list[Edge] = field(default_factory=list)
    outer_iterations: int = 0
    attempts: int = 0
    feasibility_checks: int = 0
    restarts: int = 0
    seed: Optional[int] = None


class _PivotExhausted(Exception):
    """A single run could not find an acceptable partner for a pivot."""

    def __init__(self, pivot: int, attempts: int, checks: int):
        super().__init__(pivot)
        self.pivot = pivot
        self.attempts = attempts
        self.checks = checks


def select_pivot(residual: list[int]) -> Optional[int]:
    """
    Index of the smallest positive residual degree, or None if all are zero.

    Ties go to the lowest index so that seeded runs are reproducible.
    """
    pivot = None
    smallest = None
    for i, d in enumerate(residual):
        if d > 0 and (smallest is None or d < smallest):
            pivot, smallest = i, d
    return pivot


def _sample_once(
    degrees: list[int],
    rng: random.Random,
    config: GeneratorConfig,
    feasible,
) -> GenerationResult:
    n = len(degrees)
    residual = list(degrees)
    result = GenerationResult()

    while True:
        pivot = select_pivot(residual)
        if pivot is None:
            return result

        # Partners not yet tried for this pivot. Rejection of j depends only
        # on (residual, edges), which are fixed until a commit, so each partner
        # is tested at most once and the accepted one is still uniform over
        # the acceptable partners.
        candidates = [j for j in range(n) if j != pivot]
        draws = 0
        while True:
            if not candidates or (
                config.max_attempts_per_edge is not None
                and draws >= config.max_attempts_per_edge
            ):
                logger.debug(
                    "Pivot %d (residual %d) exhausted after %d draws, %d/%d partners untried.",
                    pivot, residual[pivot], draws, len(candidates), n - 1,
                )
                raise _PivotExhausted(pivot, result.attempts + draws, result.feasibility_checks)

            draws += 1
            k = rng.randrange(len(candidates))
            j = candidates[k]
            candidates[k] = candidates[-1]
            candidates.pop()

            candidate = normalize_edge(pivot, j)
            if candidate in result.edges:
                continue
            if config.skip_exhausted_candidates and residual[j] == 0:
                continue

            tentative = list(residual)
            tentative[pivot] -= 1
            tentative[j] -= 1
            result.feasibility_checks += 1
            if feasible(tentative):
                residual = tentative
                result.edges.add(candidate)
                result.edge_order.append(candidate)
                result.outer_iterations += 1
                break

        result.attempts += draws


def realize_degree_sequence(
    sequence: Iterable,
    config: GeneratorConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> GenerationResult:
    """
    Sample a simple graph realizing a degree sequence, with run statistics.

    Args:
        sequence: Target degree per node id 0..n-1. Never mutated.
        config:   GeneratorConfig. Uses max_attempts_per_edge, max_restarts,
                  skip_exhausted_candidates, feasibility_test and seed.
        rng:      Injected random.Random. Takes precedence over any seed.
        seed:     Seed for a fresh random.Random when rng is None. Falls back
                  to config.seed.

    Returns:
        GenerationResult whose edges realize the sequence exactly.

    Raises:
        InvalidDistributionException: the sequence is not graphical. Raised
            before any sampling.
        GenerationExhausted: every run, restarts included, ran out of
            attempts for a pivot (or found no acceptable partner).
        TypeError: an entry is not an integer.
    """
    degrees = as_degree_list(sequence)
    feasible = get_feasibility_test(config.feasibility_test)

    if not feasible(degrees):
        raise InvalidDistributionException(degrees)

    used_seed = None
    if rng is None:
        used_seed = seed if seed is not None else config.seed
        rng = random.Random(used_seed)

    restarts = 0
    attempts = 0
    checks = 0
    while True:
        try:
            result = _sample_once(degrees, rng, config, feasible)
        except _PivotExhausted as exc:
            attempts += exc.attempts
            checks += exc.checks
            if restarts >= config.max_restarts:
                raise GenerationExhausted(exc.pivot, attempts, restarts) from None
            restarts += 1
            logger.warning(
                "Sampling gave up at pivot %d; restarting (%d/%d).",
                exc.pivot, restarts, config.max_restarts,
            )
            continue
        break

    result.attempts += attempts
    result.feasibility_checks += checks
    result.restarts = restarts
    result.seed = used_seed

    logger.info(
        "Generated %d edges for %d nodes: %d draws, %d feasibility checks, %d restart(s).",
        len(result.edges), len(degrees), result.attempts,
        result.feasibility_checks, restarts,
    )
    return result


def generate(
    sequence: Iterable,
    config: GeneratorConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> set[Edge]:
    """
    Return the edge set of a random simple graph realizing `sequence`.

    Thin wrapper over realize_degree_sequence() for callers that only need
    the edges. Same arguments and exceptions.
    """
    return realize_degree_sequence(sequence, config=config, rng=rng, seed=seed).edges


def realized_degrees(edges: Iterable[Edge], node_count: int) -> list[int]:
    """Degree of every node id 0..node_count-1 in an edge collection."""
    degrees = [0] * node_count
    for u, v in edges:
        degrees[u] += 1
        degrees[v] += 1
    return degrees


def is_realization(edges: Iterable[Edge], sequence: Iterable) -> bool:
    """
    True if `edges` form a simple graph whose degrees equal `sequence`.

    Checks for self-loops, duplicate unordered pairs, node ids outside
    0..n-1 and the per-node degree count.
    """
    target = as_degree_list(sequence)
    n = len(target)
    seen: set[Edge] = set()
    for u, v in edges:
        if u == v or not (0 <= u < n and 0 <= v < n):
            return False
        pair = normalize_edge(u, v)
        if pair in seen:
            return False
        seen.add(pair)
    return realized_degrees(seen, n) == target
