"""
graphgen.graph — Graph construction layer.

Modules:
    graphical    — Feasibility Tester: is a degree sequence graphical?
    generator    — Stub Matcher / Edge Sampler: sample a realization.
    materialize  — Materializer: find-or-create nodes and edges in a store.

Layering is strict: graphical ← generator ← materialize.
Edges are (low, high) tuples of node ids 0..n-1.
"""
