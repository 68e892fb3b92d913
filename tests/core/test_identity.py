"""Tests for node identity and allocation.

Critical Invariants:
- Node ids are never recycled within a lineage
- reserve() moves the high-water mark past ids assigned elsewhere
- Edge references match either orientation only in undirected graphs
"""

import pytest

from dsatrace.core.identity import EdgeRef, NodeId
from dsatrace.working import NodeAllocator


@pytest.fixture
def allocator():
    return NodeAllocator()


def test_allocation_is_monotonic(allocator):
    """CRITICAL: Every allocate() returns a fresh, larger id.

    Why: A recycled id would let a stale highlight land on a newer node.
    """
    ids = [allocator.allocate() for _ in range(5)]
    assert ids == [NodeId(i) for i in range(5)]
    assert allocator.next_index == 5


def test_allocator_start_offset():
    allocator = NodeAllocator(start=7)
    assert allocator.allocate() == NodeId(7)


def test_reserve_advances_high_water_mark(allocator):
    allocator.reserve(NodeId(10))
    assert allocator.allocate() == NodeId(11)


def test_reserve_never_moves_backwards(allocator):
    for _ in range(4):
        allocator.allocate()
    allocator.reserve(NodeId(1))
    assert allocator.next_index == 4


def test_node_id_is_hashable_and_ordered():
    assert len({NodeId(1), NodeId(1), NodeId(2)}) == 2
    assert NodeId(1) < NodeId(2)
    assert str(NodeId(3)) == "#3"


def test_edge_ref_matches_orientation():
    ref = EdgeRef("A", "B")
    assert ref.matches("A", "B", directed=True)
    assert not ref.matches("B", "A", directed=True)
    assert ref.matches("B", "A", directed=False)
    assert ref.reversed() == EdgeRef("B", "A")
    assert str(ref) == "A-B"
