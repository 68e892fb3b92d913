"""Tests for the algorithm catalog."""

import pytest

from dsatrace.core.catalog import AlgorithmId, Family


@pytest.mark.parametrize(
    "kind, family",
    [
        (AlgorithmId.ARRAY_INSERT, Family.ARRAY),
        (AlgorithmId.QUICK_SORT, Family.ARRAY),
        (AlgorithmId.STACK_PUSH, Family.STACK),
        (AlgorithmId.INFIX_TO_POSTFIX, Family.STACK),
        (AlgorithmId.ENQUEUE, Family.QUEUE),
        (AlgorithmId.DEQUEUE_REAR, Family.QUEUE),
        (AlgorithmId.LIST_INSERT_HEAD, Family.LINKED_LIST),
        (AlgorithmId.LIST_MERGE_SORTED, Family.LINKED_LIST),
        (AlgorithmId.TREE_INSERT, Family.TREE),
        (AlgorithmId.TREE_MIRROR, Family.TREE),
        (AlgorithmId.GRAPH_ADD_VERTEX, Family.GRAPH),
        (AlgorithmId.BIPARTITE, Family.GRAPH),
        (AlgorithmId.STRING_TRAVERSE, Family.STRING),
        (AlgorithmId.CHAR_FREQUENCY, Family.STRING),
    ],
)
def test_family_boundaries(kind, family):
    assert kind.family is family


def test_every_algorithm_has_a_family():
    for kind in AlgorithmId:
        assert isinstance(kind.family, Family)


def test_every_family_has_algorithms():
    assert {kind.family for kind in AlgorithmId} == set(Family)
