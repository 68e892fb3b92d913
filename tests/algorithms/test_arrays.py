"""Tests for array operations, searches and sorts."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsatrace import AlgorithmId, EngineSettings, RejectionKind, run_algorithm

SORTS = [
    AlgorithmId.BUBBLE_SORT,
    AlgorithmId.SELECTION_SORT,
    AlgorithmId.INSERTION_SORT,
    AlgorithmId.MERGE_SORT,
    AlgorithmId.QUICK_SORT,
]


def test_insert_at_index():
    trace = run_algorithm(AlgorithmId.ARRAY_INSERT, [1, 2, 3], {"value": 9, "index": 1})
    assert trace.final_snapshot == (1, 9, 2, 3)
    assert trace[-1].highlight == frozenset({1})
    assert trace.outcome["index"] == 1


def test_insert_appends_by_default():
    trace = run_algorithm(AlgorithmId.ARRAY_INSERT, [1], {"value": 2})
    assert trace.final_snapshot == (1, 2)


def test_insert_into_full_array():
    trace = run_algorithm(
        AlgorithmId.ARRAY_INSERT, [1, 2], {"value": 3}, EngineSettings(array_capacity=2)
    )
    assert trace.rejection.kind is RejectionKind.STRUCTURAL
    assert trace[0].message == "Array full! Cannot insert."
    assert trace.final_snapshot == (1, 2)


def test_delete_invalid_index():
    trace = run_algorithm(AlgorithmId.ARRAY_DELETE, [1, 2], {"index": 5})
    assert trace.rejection.kind is RejectionKind.STRUCTURAL
    assert trace[0].message == "Invalid delete index."


def test_delete():
    trace = run_algorithm(AlgorithmId.ARRAY_DELETE, [1, 2, 3], {"index": 0})
    assert trace.final_snapshot == (2, 3)
    assert trace.outcome["value"] == 1


def test_peek_empty():
    trace = run_algorithm(AlgorithmId.ARRAY_PEEK, [])
    assert trace.rejection.kind is RejectionKind.STRUCTURAL


def test_is_empty_and_full():
    assert run_algorithm(AlgorithmId.ARRAY_IS_EMPTY, []).outcome["result"] is True
    full = run_algorithm(AlgorithmId.ARRAY_IS_FULL, [1], settings=EngineSettings(array_capacity=1))
    assert full.outcome["result"] is True


def test_linear_search():
    trace = run_algorithm(AlgorithmId.LINEAR_SEARCH, [4, 8, 15], {"target": 15})
    assert trace.outcome["index"] == 2
    assert [f.message for f in trace][-1] == "Found at index 2"
    missing = run_algorithm(AlgorithmId.LINEAR_SEARCH, [4], {"target": 1})
    assert missing.outcome["index"] == -1


def test_binary_search_found():
    trace = run_algorithm(AlgorithmId.BINARY_SEARCH, [1, 3, 5, 7, 9], {"target": 7})
    assert trace.outcome["index"] == 3
    assert trace[0].message == "mid = 2"


def test_binary_search_unsorted_is_precondition():
    trace = run_algorithm(AlgorithmId.BINARY_SEARCH, [3, 1, 2], {"target": 1})
    assert trace.rejection.kind is RejectionKind.PRECONDITION
    assert len(trace) == 1
    assert "requires sorted array" in trace[0].message


def test_binary_search_missing():
    trace = run_algorithm(AlgorithmId.BINARY_SEARCH, [1, 3], {"target": 2})
    assert trace.outcome["index"] == -1
    assert trace[-1].message == "Not found"


def test_bubble_sort_frames():
    trace = run_algorithm(AlgorithmId.BUBBLE_SORT, [2, 1])
    assert [f.message for f in trace] == ["Compare 2 and 1", "Swapped", "Sorted with Bubble Sort"]
    assert trace[1].snapshot == (1, 2)
    assert trace[1].highlight == frozenset({0, 1})


@pytest.mark.parametrize("kind", SORTS)
def test_sorts_on_edge_inputs(kind):
    for data in ([], [1], [2, 2, 1]):
        trace = run_algorithm(kind, data)
        assert trace.final_snapshot == tuple(sorted(data))
        assert trace[-1].message.startswith("Sorted with")


@pytest.mark.parametrize("kind", SORTS)
@given(data=st.lists(st.integers(min_value=-50, max_value=50), max_size=10))
def test_sorts_produce_sorted_output(kind, data):
    """PROPERTY: The final frame is the sorted input; highlights stay in bounds."""
    trace = run_algorithm(kind, data)
    assert trace.final_snapshot == tuple(sorted(data))
    assert trace.outcome["sorted"] == sorted(data)
    for frame in trace:
        assert all(0 <= i < len(data) for i in frame.highlight)


@pytest.mark.parametrize("kind", [AlgorithmId.BUBBLE_SORT, AlgorithmId.SELECTION_SORT, AlgorithmId.QUICK_SORT])
@given(data=st.lists(st.integers(min_value=-50, max_value=50), max_size=10))
def test_swap_sorts_keep_a_permutation(kind, data):
    """PROPERTY: Swap-based sorts show a permutation of the input in every frame."""
    for frame in run_algorithm(kind, data):
        assert sorted(frame.snapshot) == sorted(data)
