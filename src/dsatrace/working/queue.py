"""Mutable queue used while an algorithm runs."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from dsatrace.config import EngineSettings
from dsatrace.core.values import PriorityItem, QueueKind


class WorkingQueue:
    """Linear, circular, double-ended or priority queue.

    CIRCULAR queues use a fixed slot array with `front`/`rear` indices and keep
    one slot empty, so they hold at most capacity - 1 elements. The other kinds
    store their elements front to back in `slots`. PRIORITY queues keep
    PriorityItems ordered by descending priority (FIFO among equals) and are
    unbounded.

    Args:
        kind: Queue variant.
        capacity: Slot count.
    """

    def __init__(self, kind: QueueKind = QueueKind.LINEAR, capacity: int = 10):
        self.kind = kind
        self.capacity = capacity
        self.front = 0
        self.rear = 0
        self.slots: list[Any] = [None] * capacity if kind is QueueKind.CIRCULAR else []

    @property
    def is_circular(self) -> bool:
        return self.kind is QueueKind.CIRCULAR

    def is_empty(self) -> bool:
        if self.is_circular:
            return self.front == self.rear
        return not self.slots

    def is_full(self) -> bool:
        if self.is_circular:
            return (self.rear + 1) % self.capacity == self.front
        if self.kind is QueueKind.PRIORITY:
            return False
        return len(self.slots) >= self.capacity

    def __len__(self) -> int:
        if self.is_circular:
            return (self.rear - self.front) % self.capacity
        return len(self.slots)

    def front_index(self) -> int:
        """Slot index of the front element."""
        return self.front if self.is_circular else 0

    def rear_index(self) -> int:
        """Slot index of the back element."""
        if self.is_circular:
            return (self.rear - 1) % self.capacity
        return len(self.slots) - 1

    def elements(self) -> list[Any]:
        if not self.is_circular:
            return list(self.slots)
        return [self.slots[(self.front + i) % self.capacity] for i in range(len(self))]

    def sync_bounds(self) -> None:
        """Recompute front/rear for non-circular kinds after `slots` changed."""
        if not self.is_circular:
            self.front = 0
            self.rear = len(self.slots)

    def priority_position(self, priority: int) -> int:
        """Index where an item of this priority belongs (after equal priorities)."""
        for i, item in enumerate(self.slots):
            if item.priority < priority:
                return i
        return len(self.slots)

    def push(self, value: Any) -> None:
        """Enqueue without tracing; used to build initial queues."""
        if self.is_circular:
            self.slots[self.rear] = value
            self.rear = (self.rear + 1) % self.capacity
            return
        if self.kind is QueueKind.PRIORITY:
            item = value if isinstance(value, PriorityItem) else PriorityItem(value, 0)
            self.slots.insert(self.priority_position(item.priority), item)
        else:
            self.slots.append(value)
        self.sync_bounds()


def make_queue(
    kind: QueueKind = QueueKind.LINEAR,
    values: Iterable[Any] = (4, 5, 6),
    capacity: int | None = None,
) -> WorkingQueue:
    """Build a queue of the given kind holding values front to back.

    Args:
        kind: Queue variant.
        values: Initial values, front first.
        capacity: Slot count (EngineSettings().queue_capacity by default).

    Returns:
        New WorkingQueue.

    Raises:
        ValueError: If values do not fit: more than capacity elements, or more
            than capacity - 1 for a CIRCULAR queue. PRIORITY queues never fill.
    """
    queue = WorkingQueue(kind, capacity or EngineSettings().queue_capacity)
    initial = list(values)
    room = queue.capacity - 1 if queue.is_circular else queue.capacity
    if kind is not QueueKind.PRIORITY and len(initial) > room:
        raise ValueError(f"{len(initial)} values do not fit a {kind.name} queue of capacity {queue.capacity}")
    for value in initial:
        queue.push(value)
    return queue
