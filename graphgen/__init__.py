"""
graphgen — Random simple graphs with a prescribed degree sequence.

Given one target degree per node, graphgen either samples a simple graph
(undirected, no self-loops, no parallel edges) realizing that sequence exactly
or reports that no such graph exists.

Modules:
- graphgen.graph.graphical   — Erdős–Gallai / Havel–Hakimi feasibility tests
- graphgen.graph.generator   — randomized stub matcher (edge sampler)
- graphgen.graph.materialize — write edge sets to a graph store
- graphgen.sequences         — degree sequence parsing, loading and sampling
- graphgen.viz               — figures of generated graphs
- graphgen.cli               — command-line entry point
"""

__version__ = "0.1.0"

from graphgen.exceptions import GenerationExhausted, InvalidDistributionException
from graphgen.graph.generator import generate, realize_degree_sequence
from graphgen.graph.graphical import is_graphical
