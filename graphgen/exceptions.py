"""
graphgen/exceptions.py — Error taxonomy for graph generation.

    GraphGenError                 base class for everything raised here
    InvalidDistributionException  input degree sequence is not graphical
    GenerationExhausted           the randomized search gave up

Infeasible candidate edges are an expected, internal condition of the
sampler and never surface as exceptions.
"""


class GraphGenError(Exception):
    """Base class for graphgen errors."""


class InvalidDistributionException(GraphGenError, ValueError):
    """
    Raised when a degree sequence cannot be realized by any simple graph.

    The sequence has an odd sum, a negative entry, or violates the
    Erdős–Gallai inequality for some prefix. Raised before any edge is
    committed, so no partial state is observable.
    """

    def __init__(self, sequence=None, message: str = "the supplied distribution is not graphical"):
        super().__init__(message)
        self.sequence = list(sequence) if sequence is not None else None


class GenerationExhausted(GraphGenError, RuntimeError):
    """
    Raised when the candidate search cannot complete a graphical sequence.

    The configured attempt budget for a pivot ran out (or, with an unsound
    custom feasibility test, every partner was rejected) on the initial run
    and on every restart.
    """

    def __init__(self, pivot: int, attempts: int, restarts: int):
        super().__init__(
            f"edge sampling exhausted at pivot {pivot} after {attempts} attempts "
            f"({restarts} restart(s))"
        )
        self.pivot = pivot
        self.attempts = attempts
        self.restarts = restarts
