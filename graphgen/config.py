"""
graphgen/config.py — All tunable parameters for the degree-sequence generator.

No retry budget, label or relationship name should be hardcoded in the
sampler or the materializer. Every knob lives here so that a change of
behaviour is a single-file diff.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Immutable configuration for a generation run.

    All fields have documented defaults. Override by constructing a new
    GeneratorConfig (or dataclasses.replace(DEFAULT_CONFIG, ...)).
    """

    # ── Candidate search ──────────────────────────────────────────────────────
    max_attempts_per_edge: Optional[int] = 100_000
    # Random partner draws allowed for a single pivot before the run is
    # abandoned. Each draw tests a partner not yet tried for that pivot. None
    # removes the cap (the search then ends after at most n-1 draws).

    max_restarts: int = 3
    # Number of times a run that exhausted its budget is restarted from the original
    # sequence before GenerationExhausted is raised.

    skip_exhausted_candidates: bool = True
    # Reject a partner whose residual is already 0 without calling the
    # feasibility test. Same outcome as the test (negative entry), fewer calls.

    feasibility_test: str = "erdos_gallai"
    # "erdos_gallai" (canonical) or "havel_hakimi".

    seed: Optional[int] = None
    # Seed for the default random.Random when no rng is injected.
    # None keeps full randomness.

    # ── Materialization ───────────────────────────────────────────────────────
    node_label: str = "Node"
    # Label given to every materialized node.

    key_property: str = "name"
    # Node property holding the stable external key (str(node_id)).

    relationship_type: str = "relto"
    # Type given to every materialized edge.

    materialize_isolated_nodes: bool = False
    # Also create nodes of degree 0. Off by default: only endpoints of
    # generated edges are written.


# Shared default; construct a new GeneratorConfig only to override fields.
DEFAULT_CONFIG = GeneratorConfig()
