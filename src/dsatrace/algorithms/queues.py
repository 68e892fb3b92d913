"""Queue operations for linear, circular, double-ended and priority queues."""

from __future__ import annotations

from typing import Any

from dsatrace.algorithms.params import EnqueueParams, ValueParams
from dsatrace.algorithms.registry import AlgorithmRun, algorithm
from dsatrace.core.catalog import AlgorithmId
from dsatrace.core.values import PriorityItem, QueueKind
from dsatrace.tracing import Trace
from dsatrace.working import WorkingQueue


def _plain(item: Any) -> Any:
    return item.value if isinstance(item, PriorityItem) else item


@algorithm(AlgorithmId.ENQUEUE, params=EnqueueParams)
def enqueue(run: AlgorithmRun[EnqueueParams], queue: WorkingQueue) -> Trace:
    if queue.is_full():
        return run.structural(queue, "Queue full! Cannot enqueue.")
    value = run.params.value

    if queue.kind is QueueKind.PRIORITY:
        priority = run.params.priority
        if priority is None:
            return run.precondition(queue, "Enter priority value.")
        position = queue.priority_position(priority)
        run.step(queue, line=0, message=f"Enqueuing {value} with priority {priority}")
        queue.slots.insert(position, PriorityItem(value, priority))
        queue.sync_bounds()
        run.step(queue, [position], 1, "Enqueued")
        return run.finish(index=position)

    if queue.is_circular:
        slot = queue.rear
        run.step(queue, [slot], 0, f"Enqueuing {value} at rear {slot}")
        queue.slots[slot] = value
        queue.rear = (slot + 1) % queue.capacity
        run.step(queue, [slot], 1, "Enqueued")
        return run.finish(index=slot)

    run.step(queue, line=0, message=f"Enqueuing {value} at rear")
    queue.slots.append(value)
    queue.sync_bounds()
    run.step(queue, [queue.rear_index()], 1, "Enqueued")
    return run.finish(index=queue.rear_index())


@algorithm(AlgorithmId.DEQUEUE)
def dequeue(run: AlgorithmRun[None], queue: WorkingQueue) -> Trace:
    if queue.is_empty():
        return run.structural(queue, "Queue empty! Cannot dequeue.")
    front = queue.front_index()
    value = _plain(queue.slots[front])
    if queue.is_circular:
        run.step(queue, [front], 0, f"Dequeuing {value} from front {front}")
        queue.slots[front] = None
        queue.front = (front + 1) % queue.capacity
    else:
        run.step(queue, [front], 0, f"Dequeuing {value} from front")
        queue.slots.pop(0)
        queue.sync_bounds()
    run.step(queue, line=1, message=f"Dequeued {value}")
    return run.finish(value=value)


@algorithm(AlgorithmId.QUEUE_PEEK)
def queue_peek(run: AlgorithmRun[None], queue: WorkingQueue) -> Trace:
    if queue.is_empty():
        return run.structural(queue, "Queue empty! Cannot peek.")
    front = queue.front_index()
    value = _plain(queue.slots[front])
    run.step(queue, [front], 0, f"Peeking front: {value}")
    return run.finish(value=value)


@algorithm(AlgorithmId.QUEUE_IS_EMPTY)
def queue_is_empty(run: AlgorithmRun[None], queue: WorkingQueue) -> Trace:
    empty = queue.is_empty()
    run.step(queue, line=0, message=f"Is Empty: {empty}")
    return run.finish(result=empty)


@algorithm(AlgorithmId.QUEUE_IS_FULL)
def queue_is_full(run: AlgorithmRun[None], queue: WorkingQueue) -> Trace:
    full = queue.is_full()
    run.step(queue, line=0, message=f"Is Full: {full}")
    return run.finish(result=full)


@algorithm(AlgorithmId.ENQUEUE_FRONT, params=ValueParams)
def enqueue_front(run: AlgorithmRun[ValueParams], queue: WorkingQueue) -> Trace:
    if queue.kind is not QueueKind.DEQUE:
        return run.precondition(queue, "Enqueue at front is only supported by a deque.")
    if queue.is_full():
        return run.structural(queue, "Queue full! Cannot enqueue.")
    value = run.params.value
    run.step(queue, line=0, message=f"Enqueuing {value} at front")
    queue.slots.insert(0, value)
    queue.sync_bounds()
    run.step(queue, [0], 1, "Enqueued")
    return run.finish(index=0)


@algorithm(AlgorithmId.DEQUEUE_REAR)
def dequeue_rear(run: AlgorithmRun[None], queue: WorkingQueue) -> Trace:
    if queue.kind is not QueueKind.DEQUE:
        return run.precondition(queue, "Dequeue from rear is only supported by a deque.")
    if queue.is_empty():
        return run.structural(queue, "Queue empty! Cannot dequeue.")
    rear = queue.rear_index()
    value = queue.slots[rear]
    run.step(queue, [rear], 0, f"Dequeuing {value} from rear")
    queue.slots.pop()
    queue.sync_bounds()
    run.step(queue, line=1, message=f"Dequeued {value}")
    return run.finish(value=value)
