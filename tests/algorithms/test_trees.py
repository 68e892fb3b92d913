"""Tests for binary search tree operations."""

import pytest

from dsatrace import AlgorithmId, NodeId, RejectionKind, run_algorithm
from dsatrace.working import make_tree


def _is_bst(value):
    values = value.values()
    return values == sorted(values)


def test_insert_keeps_bst_order(bst):
    trace = run_algorithm(AlgorithmId.TREE_INSERT, bst, {"value": 65})
    value = trace.final_snapshot
    assert _is_bst(value)
    assert trace.outcome["node"] == NodeId(7)
    assert value.node(NodeId(5)).right == NodeId(7)
    assert trace[-1].message == "Inserted right"


def test_insert_into_empty_tree():
    trace = run_algorithm(AlgorithmId.TREE_INSERT, make_tree(()), {"value": 1})
    assert trace.final_snapshot.values() == [1]
    assert trace[-1].message == "Inserted as root"


def test_search_path(bst):
    trace = run_algorithm(AlgorithmId.TREE_SEARCH, bst, {"value": 40})
    assert trace.outcome["found"] is True
    assert trace.outcome["node"] == NodeId(4)
    visited = [next(iter(f.highlight)) for f in trace if f.pseudocode_line == 1]
    assert visited == [NodeId(0), NodeId(1), NodeId(4)]


def test_search_missing(bst):
    trace = run_algorithm(AlgorithmId.TREE_SEARCH, bst, {"value": 45})
    assert trace.outcome["found"] is False
    assert trace[-1].message == "Not found"


def test_delete_leaf(bst):
    trace = run_algorithm(AlgorithmId.TREE_DELETE, bst, {"value": 20})
    assert trace.outcome["case"] == "leaf"
    assert trace.final_snapshot.values() == [30, 40, 50, 60, 70, 80]


def test_delete_one_child():
    tree = make_tree((50, 30, 20))
    trace = run_algorithm(AlgorithmId.TREE_DELETE, tree, {"value": 30})
    assert trace.outcome["case"] == "one_child"
    value = trace.final_snapshot
    assert value.node(value.root).left == NodeId(2)


def test_delete_two_children_keeps_node_identity(bst):
    """CRITICAL: The surviving node keeps its id; the successor's node disappears."""
    trace = run_algorithm(AlgorithmId.TREE_DELETE, bst, {"value": 50})
    value = trace.final_snapshot
    assert trace.outcome["case"] == "two_children"
    assert trace.outcome["removed"] == NodeId(5)
    assert value.root == NodeId(0)
    assert value.node(NodeId(0)).value == 60
    assert NodeId(5) not in value
    assert _is_bst(value)


def test_delete_missing_value(bst):
    trace = run_algorithm(AlgorithmId.TREE_DELETE, bst, {"value": 99})
    assert trace.outcome["deleted"] is False
    assert not trace.is_rejected


def test_delete_from_empty_tree():
    trace = run_algorithm(AlgorithmId.TREE_DELETE, make_tree(()), {"value": 1})
    assert trace.rejection.kind is RejectionKind.STRUCTURAL


@pytest.mark.parametrize(
    "kind, order",
    [
        (AlgorithmId.TREE_INORDER, [20, 30, 40, 50, 60, 70, 80]),
        (AlgorithmId.TREE_PREORDER, [50, 30, 20, 40, 70, 60, 80]),
        (AlgorithmId.TREE_POSTORDER, [20, 40, 30, 60, 80, 70, 50]),
        (AlgorithmId.TREE_LEVEL_ORDER, [50, 30, 70, 20, 40, 60, 80]),
    ],
)
def test_traversals(bst, kind, order):
    trace = run_algorithm(kind, bst)
    assert trace.outcome["order"] == order
    assert len(trace) == len(order) + 2


def test_traversal_of_empty_tree():
    trace = run_algorithm(AlgorithmId.TREE_INORDER, make_tree(()))
    assert trace.outcome["order"] == []
    assert not trace.is_rejected


def test_min_max(bst):
    trace = run_algorithm(AlgorithmId.TREE_MIN_MAX, bst)
    assert (trace.outcome["min"], trace.outcome["max"]) == (20, 80)


def test_height_and_diameter():
    tree = make_tree((50, 30, 70, 20, 10))
    assert run_algorithm(AlgorithmId.TREE_HEIGHT, tree).outcome["height"] == 4
    assert run_algorithm(AlgorithmId.TREE_DIAMETER, tree).outcome["diameter"] == 5


def test_is_balanced(bst):
    assert run_algorithm(AlgorithmId.TREE_IS_BALANCED, bst).outcome["balanced"] is True
    skewed = make_tree((1, 2, 3))
    assert run_algorithm(AlgorithmId.TREE_IS_BALANCED, skewed).outcome["balanced"] is False


@pytest.mark.parametrize("first, second, lca", [(20, 40, 30), (20, 80, 50), (60, 70, 70)])
def test_lca(bst, first, second, lca):
    trace = run_algorithm(AlgorithmId.TREE_LCA, bst, {"first": first, "second": second})
    assert trace.outcome["value"] == lca


def test_lca_requires_present_values(bst):
    trace = run_algorithm(AlgorithmId.TREE_LCA, bst, {"first": 20, "second": 99})
    assert trace.rejection.kind is RejectionKind.PRECONDITION


def test_mirror(bst):
    trace = run_algorithm(AlgorithmId.TREE_MIRROR, bst)
    assert trace.outcome["order"] == [80, 70, 60, 50, 40, 30, 20]


@pytest.mark.parametrize(
    "kind", [AlgorithmId.TREE_MIN_MAX, AlgorithmId.TREE_HEIGHT, AlgorithmId.TREE_MIRROR]
)
def test_queries_on_empty_tree_rejected(kind):
    trace = run_algorithm(kind, make_tree(()))
    assert trace.rejection.kind is RejectionKind.STRUCTURAL
