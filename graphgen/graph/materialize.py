"""
graphgen/graph/materialize.py — Materializer: write a generated edge set to a graph store.

The sampler only produces node-id pairs. This module turns them into nodes
and relationships in a store that offers three primitives:

    find_or_create_node(label, key, key_property)   idempotent lookup-or-create
    create_edge(a, b, relationship)                 one relationship between two handles
    transaction()                                   scoped unit: commit on success,
                                                    roll back and re-raise on error

NetworkXGraphStore implements them in memory on a networkx.MultiGraph. Any
other backend only has to satisfy the GraphStore protocol.

Materialization happens once, after generation has fully completed, inside a
single transaction, so a partially written graph is never visible.
"""

import csv
import logging
import os
import random
from contextlib import contextmanager
from typing import Hashable, Iterable, Iterator, Optional, Protocol

import networkx as nx
import pandas as pd

from graphgen.config import DEFAULT_CONFIG, GeneratorConfig
from graphgen.graph.generator import Edge, GenerationResult, normalize_edge, realize_degree_sequence

logger = logging.getLogger(__name__)


class GraphStore(Protocol):
    """Collaborator interface required from an external graph store."""

    def find_or_create_node(self, label: str, key: str, key_property: str) -> Hashable:
        ...

    def create_edge(self, a: Hashable, b: Hashable, relationship_type: str) -> None:
        ...

    def transaction(self):
        ...


class NetworkXGraphStore:
    """
    In-memory graph store backed by a networkx.MultiGraph.

    Nodes are integer handles carrying a 'label' attribute and the key under
    the requested key property (store default: config.key_property). A node
    is identified by (label, key property, key). Edges carry
    'relationship_type'. A MultiGraph is used so that every create_edge()
    call is recorded, exactly as a database would record repeated
    relationship creation.

    transaction() snapshots the graph and the key index; an exception inside
    the block restores the snapshot and propagates. Nested transactions are
    not supported.
    """

    def __init__(self, key_property: str = DEFAULT_CONFIG.key_property):
        self.key_property = key_property
        self.graph = nx.MultiGraph()
        self._index: dict[tuple[str, str, str], int] = {}
        self._next_handle = 0
        self._in_transaction = False

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "NetworkXGraphStore":
        """Empty store whose default key property is config.key_property."""
        return cls(key_property=config.key_property)

    def find_or_create_node(self, label: str, key: str, key_property: Optional[str] = None) -> int:
        prop = key_property or self.key_property
        existing = self._index.get((label, prop, key))
        if existing is not None:
            return existing

        handle = self._next_handle
        self._next_handle += 1
        self.graph.add_node(handle, label=label, **{prop: key})
        self._index[(label, prop, key)] = handle
        return handle

    def create_edge(self, a: int, b: int, relationship_type: str) -> None:
        if a not in self.graph or b not in self.graph:
            raise KeyError(f"unknown node handle in edge ({a}, {b})")
        self.graph.add_edge(a, b, relationship_type=relationship_type)

    @contextmanager
    def transaction(self) -> Iterator["NetworkXGraphStore"]:
        if self._in_transaction:
            raise RuntimeError("nested transactions are not supported")

        snapshot = (self.graph.copy(), dict(self._index), self._next_handle)
        self._in_transaction = True
        try:
            yield self
        except BaseException:
            self.graph, self._index, self._next_handle = snapshot
            logger.warning("Transaction rolled back; store restored to %d nodes.",
                           self.graph.number_of_nodes())
            raise
        finally:
            self._in_transaction = False

    def find_node(self, label: str, key: str, key_property: Optional[str] = None) -> Optional[int]:
        """Handle of an existing node, or None."""
        return self._index.get((label, key_property or self.key_property, key))

    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def to_graph(self) -> nx.Graph:
        """
        Simple nx.Graph over the store's node handles.

        Node attributes (label and key) are copied, so nodes sharing a key
        under different labels stay distinct. Parallel relationships collapse
        into one edge.
        """
        G = nx.Graph()
        G.add_nodes_from(self.graph.nodes(data=True))
        G.add_edges_from(self.graph.edges(data=True))
        return G


def materialize_edges(
    edges: Iterable[Edge],
    store: GraphStore,
    config: GeneratorConfig = DEFAULT_CONFIG,
    node_count: Optional[int] = None,
) -> int:
    """
    Write an edge set into a graph store inside one transaction.

    Args:
        edges:      Unordered node-id pairs from generate().
        store:      Any GraphStore implementation.
        config:     Uses node_label, key_property, relationship_type and
                    materialize_isolated_nodes.
        node_count: Size of the node-id domain 0..n-1. Only needed to create
                    degree-zero nodes when materialize_isolated_nodes is set.

    Returns:
        Number of edges written.

    Notes:
        - Node keys are str(node_id) so that repeated materialization into
          the same store resolves to the same nodes.
        - Edges are written in sorted order for a stable store layout.
        - Store errors propagate unchanged after the store rolls back.
    """
    ordered = sorted(normalize_edge(u, v) for u, v in edges)
    label = config.node_label
    key_property = config.key_property

    with store.transaction():
        if config.materialize_isolated_nodes and node_count is not None:
            for node_id in range(node_count):
                store.find_or_create_node(label, str(node_id), key_property)

        for u, v in ordered:
            a = store.find_or_create_node(label, str(u), key_property)
            b = store.find_or_create_node(label, str(v), key_property)
            store.create_edge(a, b, config.relationship_type)

    logger.info(
        "Materialized %d edges (label=%s, key=%s, relationship=%s).",
        len(ordered), label, key_property, config.relationship_type,
    )
    return len(ordered)


def generate_graph(
    sequence: Iterable,
    store: GraphStore,
    config: GeneratorConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> GenerationResult:
    """
    Generate a realization of `sequence` and write it to `store`.

    Generation completes fully before the store is touched, so an invalid
    sequence or an exhausted search leaves the store unchanged.
    """
    degrees = list(sequence)
    result = realize_degree_sequence(degrees, config=config, rng=rng, seed=seed)
    materialize_edges(result.edges, store, config=config, node_count=len(degrees))
    return result


# ── Export helpers ────────────────────────────────────────────────────────────

def to_networkx(edges: Iterable[Edge], node_count: int) -> nx.Graph:
    """nx.Graph over nodes 0..node_count-1 with the given edges."""
    G = nx.Graph()
    G.add_nodes_from(range(node_count))
    G.add_edges_from(edges)
    return G


def edges_to_dataframe(edges: Iterable[Edge]) -> pd.DataFrame:
    """Sorted edge list as a DataFrame with columns 'source' and 'target'."""
    rows = sorted(normalize_edge(u, v) for u, v in edges)
    return pd.DataFrame(rows, columns=["source", "target"], dtype="int64")


def write_edge_list(edges: Iterable[Edge], path: str) -> str:
    """Write the sorted edge list as CSV (source,target) atomically. Returns the path."""
    rows = sorted(normalize_edge(u, v) for u, v in edges)
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    tmp = path + ".tmp"
    with open(tmp, "w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=["source", "target"])
        writer.writeheader()
        for u, v in rows:
            writer.writerow({"source": u, "target": v})
    os.replace(tmp, path)
    logger.info("Wrote %d edges to %s", len(rows), path)
    return path
