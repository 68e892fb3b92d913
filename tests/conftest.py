"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dsatrace import (
    EngineSettings,
    ListKind,
    ManualTickSource,
    PlaybackController,
    PlaybackSettings,
    make_graph,
    make_list,
    make_tree,
)


@pytest.fixture
def settings():
    """Default engine settings, independent of the environment."""
    return EngineSettings(_env_file=None)


@pytest.fixture
def singly():
    return make_list(ListKind.SINGLY, (1, 3, 5))


@pytest.fixture
def doubly():
    return make_list(ListKind.DOUBLY, (1, 3, 5))


@pytest.fixture
def circular():
    return make_list(ListKind.CIRCULAR, (1, 3, 5))


@pytest.fixture
def bst():
    """Balanced BST: 50 / 30 70 / 20 40 60 80."""
    return make_tree()


@pytest.fixture
def triangle():
    """Undirected weighted triangle A-B:1, B-C:1, A-C:5."""
    return make_graph([("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])


@pytest.fixture
def dag():
    """Directed acyclic graph with a diamond A->B, A->C, B->D, C->D."""
    return make_graph([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")], directed=True)


@pytest.fixture
def ticks():
    return ManualTickSource()


@pytest.fixture
def controller(ticks):
    """Controller driven by manual ticks."""
    return PlaybackController(ticks, PlaybackSettings(_env_file=None))
