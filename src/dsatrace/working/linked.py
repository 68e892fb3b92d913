"""Mutable linked list used while an algorithm runs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from dsatrace.core.identity import NodeId
from dsatrace.core.values import ListKind
from dsatrace.working.allocator import NodeAllocator


class ListNode:
    """Live linked-list node with real object pointers."""

    __slots__ = ("node_id", "value", "next", "prev")

    def __init__(self, node_id: NodeId, value: int):
        self.node_id = node_id
        self.value = value
        self.next: ListNode | None = None
        self.prev: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.node_id}, {self.value!r})"


class LinkedList:
    """Singly, doubly or circular linked list.

    Circular lists are singly linked with the tail pointing back at head.
    Doubly lists keep `prev` consistent with `next` after every mutation the
    algorithm library performs; `relink()` restores it after bulk rewiring.

    Args:
        kind: List variant.
        allocator: Source of node ids (a fresh allocator by default).
    """

    def __init__(self, kind: ListKind = ListKind.SINGLY, allocator: NodeAllocator | None = None):
        self.kind = kind
        self.head: ListNode | None = None
        self.allocator = allocator or NodeAllocator()

    @property
    def is_circular(self) -> bool:
        return self.kind is ListKind.CIRCULAR

    @property
    def is_doubly(self) -> bool:
        return self.kind is ListKind.DOUBLY

    def new_node(self, value: int) -> ListNode:
        return ListNode(self.allocator.allocate(), value)

    def nodes(self) -> Iterator[ListNode]:
        """Yield nodes from head until the end or the first revisited node."""
        seen: set[int] = set()
        current = self.head
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            yield current
            current = current.next

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self.nodes())

    def tail(self) -> ListNode | None:
        last = None
        for last in self.nodes():
            pass
        return last

    def node_at(self, position: int) -> ListNode | None:
        for i, node in enumerate(self.nodes()):
            if i == position:
                return node
        return None

    def append(self, value: int) -> ListNode:
        """Append without tracing; used to build initial lists."""
        node = self.new_node(value)
        tail = self.tail()
        if tail is None:
            self.head = node
        else:
            tail.next = node
            if self.is_doubly:
                node.prev = tail
        if self.is_circular:
            node.next = self.head
        return node

    def relink(self) -> None:
        """Restore the variant invariant after pointers were rewired in bulk.

        Doubly lists get `prev` recomputed from `next`; circular lists get the
        tail pointed back at head.
        """
        ordered = list(self.nodes())
        if self.is_doubly:
            previous = None
            for node in ordered:
                node.prev = previous
                previous = node
        if self.is_circular and ordered:
            ordered[-1].next = self.head


def make_list(
    kind: ListKind = ListKind.SINGLY,
    values: Iterable[int] = (1, 3, 5),
    loop_to: int | None = None,
) -> LinkedList:
    """Build a linked list of the given kind holding values in order.

    Args:
        kind: List variant.
        values: Initial values, head first.
        loop_to: If set, point the tail's `next` back at the node at this
            position, creating a loop (for loop detection and removal).

    Returns:
        New LinkedList with freshly allocated node ids.

    Raises:
        IndexError: If loop_to is not a valid position.
    """
    linked = LinkedList(kind)
    for value in values:
        linked.append(value)
    if loop_to is not None:
        tail = linked.tail()
        target = linked.node_at(loop_to)
        if tail is None or target is None:
            raise IndexError(f"Cannot loop back to position {loop_to}")
        tail.next = target
    return linked
