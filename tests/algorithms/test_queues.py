"""Tests for queue operations across queue kinds."""

import pytest

from dsatrace import AlgorithmId, QueueKind, RejectionKind, run_algorithm
from dsatrace.core import PriorityItem
from dsatrace.working import make_queue


def test_linear_enqueue_dequeue():
    queue = make_queue(QueueKind.LINEAR, (4, 5))
    enqueued = run_algorithm(AlgorithmId.ENQUEUE, queue, {"value": 6})
    assert enqueued.final_snapshot.elements() == [4, 5, 6]
    dequeued = run_algorithm(AlgorithmId.DEQUEUE, queue)
    assert dequeued.outcome["value"] == 4
    assert dequeued[-1].message == "Dequeued 4"
    assert dequeued.final_snapshot.elements() == [5]


def test_linear_queue_full():
    queue = make_queue(QueueKind.LINEAR, (1, 2), capacity=2)
    trace = run_algorithm(AlgorithmId.ENQUEUE, queue, {"value": 3})
    assert trace.rejection.kind is RejectionKind.STRUCTURAL
    assert trace[0].message == "Queue full! Cannot enqueue."


def test_circular_queue_wraps():
    queue = make_queue(QueueKind.CIRCULAR, (1, 2, 3), capacity=4)
    full = run_algorithm(AlgorithmId.ENQUEUE, queue, {"value": 4})
    assert full.rejection.kind is RejectionKind.STRUCTURAL

    after_dequeue = run_algorithm(AlgorithmId.DEQUEUE, queue).final_snapshot
    wrapped = run_algorithm(AlgorithmId.ENQUEUE, after_dequeue, {"value": 4})
    value = wrapped.final_snapshot
    assert wrapped.outcome["index"] == 3
    assert value.elements() == [2, 3, 4]
    assert value.front == 1 and value.rear == 0


def test_priority_enqueue_requires_priority():
    queue = make_queue(QueueKind.PRIORITY, ())
    trace = run_algorithm(AlgorithmId.ENQUEUE, queue, {"value": 1})
    assert trace.rejection.kind is RejectionKind.PRECONDITION
    assert trace[0].message == "Enter priority value."


def test_priority_order():
    queue = make_queue(QueueKind.PRIORITY, (PriorityItem(1, 1), PriorityItem(2, 3)))
    trace = run_algorithm(AlgorithmId.ENQUEUE, queue, {"value": 9, "priority": 2})
    assert [item.value for item in trace.final_snapshot.elements()] == [2, 9, 1]
    assert trace.outcome["index"] == 1
    assert run_algorithm(AlgorithmId.DEQUEUE, trace.final_snapshot).outcome["value"] == 2


@pytest.mark.parametrize("kind", [AlgorithmId.DEQUEUE, AlgorithmId.QUEUE_PEEK])
def test_empty_queue_rejected(kind):
    trace = run_algorithm(kind, make_queue(values=()))
    assert trace.rejection.kind is RejectionKind.STRUCTURAL


def test_peek_and_predicates():
    queue = make_queue(QueueKind.LINEAR, (7, 8), capacity=2)
    assert run_algorithm(AlgorithmId.QUEUE_PEEK, queue).outcome["value"] == 7
    assert run_algorithm(AlgorithmId.QUEUE_IS_FULL, queue).outcome["result"] is True
    assert run_algorithm(AlgorithmId.QUEUE_IS_EMPTY, queue).outcome["result"] is False


def test_deque_both_ends():
    queue = make_queue(QueueKind.DEQUE, (1, 2))
    front = run_algorithm(AlgorithmId.ENQUEUE_FRONT, queue, {"value": 0})
    assert front.final_snapshot.elements() == [0, 1, 2]
    rear = run_algorithm(AlgorithmId.DEQUEUE_REAR, front.final_snapshot)
    assert rear.outcome["value"] == 2
    assert rear.final_snapshot.elements() == [0, 1]


@pytest.mark.parametrize("kind", [AlgorithmId.ENQUEUE_FRONT, AlgorithmId.DEQUEUE_REAR])
def test_deque_operations_need_a_deque(kind):
    params = {"value": 1} if kind is AlgorithmId.ENQUEUE_FRONT else None
    trace = run_algorithm(kind, make_queue(QueueKind.LINEAR), params)
    assert trace.rejection.kind is RejectionKind.PRECONDITION
