"""
graphgen/tests/conftest.py — Shared pytest fixtures for the graphgen test suite.

All randomized tests run from fixed seeds (SEED=41) so that every run of the
suite samples the same graphs.

Fixtures:
    seed            — the suite-wide seed.
    rng             — random.Random seeded with SEED.
    store           — empty NetworkXGraphStore.
    lenient_config  — DEFAULT_CONFIG with a generous restart budget, for
                      larger sequences that may need a restart.
"""

import random
from dataclasses import replace

import pytest

from graphgen.config import DEFAULT_CONFIG
from graphgen.graph.materialize import NetworkXGraphStore

SEED = 41


@pytest.fixture
def seed():
    return SEED


@pytest.fixture
def rng():
    """Fresh seeded RNG per test."""
    return random.Random(SEED)


@pytest.fixture
def store():
    return NetworkXGraphStore()


@pytest.fixture
def lenient_config():
    return replace(DEFAULT_CONFIG, max_restarts=50)
