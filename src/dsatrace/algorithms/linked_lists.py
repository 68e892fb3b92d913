"""Linked list operations for singly, doubly and circular lists.

End detection differs per variant: singly and doubly lists end at a None
`next`, circular lists end on revisiting head. Walks that only read the list
use the cycle-safe node order from LinkedList.nodes(); Floyd loop detection
and removal follow the real `next` pointers, since finding a loop is their
purpose.
"""

from __future__ import annotations

from collections.abc import Callable

from dsatrace.algorithms.params import (
    CountParams,
    InsertAtParams,
    KeyParams,
    PositionParams,
    RotateParams,
    ValueParams,
    ValuesParams,
)
from dsatrace.algorithms.registry import AlgorithmRun, algorithm
from dsatrace.core.catalog import AlgorithmId
from dsatrace.core.errors import EngineInvariantError
from dsatrace.core.identity import NodeId
from dsatrace.tracing import Trace
from dsatrace.working import LinkedList, ListNode

type Successor = Callable[[ListNode | None], ListNode | None]


def _id(node: ListNode | None) -> NodeId | None:
    return None if node is None else node.node_id


def _show(node: ListNode | None) -> str:
    return "null" if node is None else str(node.value)


def _present(node: ListNode | None, role: str) -> ListNode:
    """Node a walk has already proven to exist."""
    if node is None:
        raise EngineInvariantError(f"Linked list has no {role} node")
    return node


def _successor(linked: LinkedList) -> Successor:
    """Next node in walk order, None past the end (or at a loop's revisit)."""
    order = list(linked.nodes())
    following = {id(a): b for a, b in zip(order, order[1:])}

    def step(node: ListNode | None) -> ListNode | None:
        return None if node is None else following.get(id(node))

    return step


def _link_head(linked: LinkedList, node: ListNode) -> None:
    if linked.head is None:
        linked.head = node
        if linked.is_circular:
            node.next = node
        return
    tail = linked.tail() if linked.is_circular else None
    node.next = linked.head
    if linked.is_doubly:
        linked.head.prev = node
    linked.head = node
    if tail is not None:
        tail.next = node


def _delete_head(run: AlgorithmRun, linked: LinkedList, line: int = 0) -> Trace:
    head = _present(linked.head, "head")
    run.step(linked, [head.node_id], line, f"Deleting head: {head.value}")
    tail = linked.tail()
    successor = head.next if head.next is not head else None
    head.next = None
    if successor is None:
        linked.head = None
        run.step(linked, line=line + 1, message="List emptied")
        return run.finish(value=head.value)
    linked.head = successor
    if linked.is_doubly:
        successor.prev = None
    if linked.is_circular and tail is not None:
        tail.next = successor
    run.step(linked, line=line + 1, message="Head deleted")
    return run.finish(value=head.value)


def _unlink_after(
    run: AlgorithmRun,
    linked: LinkedList,
    previous: ListNode,
    before: str,
    after: str,
    line: int = 0,
) -> Trace:
    target = _present(previous.next, "target")
    run.step(linked, [previous.node_id, target.node_id], line, before)
    following = target.next
    previous.next = following
    target.next = None
    if linked.is_doubly:
        target.prev = None
        if following is not None:
            following.prev = previous
        run.step(linked, [previous.node_id, _id(following)], line + 1, "Updating prev pointer")
    run.step(linked, line=line + 2, message=after)
    return run.finish(value=target.value)


# Insertion


@algorithm(AlgorithmId.LIST_INSERT_HEAD, params=ValueParams)
def list_insert_head(run: AlgorithmRun[ValueParams], linked: LinkedList) -> Trace:
    value = run.params.value
    node = linked.new_node(value)
    run.step(linked, line=0, message=f"Creating new node with value {value}")
    _link_head(linked, node)
    run.step(linked, [node.node_id], 1, "Inserting at head")
    return run.finish(node=node.node_id)


@algorithm(AlgorithmId.LIST_INSERT_TAIL, params=ValueParams)
def list_insert_tail(run: AlgorithmRun[ValueParams], linked: LinkedList) -> Trace:
    value = run.params.value
    node = linked.new_node(value)
    tail = linked.tail()
    if tail is None:
        run.step(linked, line=0, message=f"Creating new node with value {value}")
        _link_head(linked, node)
        run.step(linked, [node.node_id], 1, "Inserted as first node.")
        return run.finish(node=node.node_id)

    run.step(linked, [tail.node_id], 0, "Traversing to tail")
    tail.next = node
    if linked.is_circular:
        node.next = linked.head
    if linked.is_doubly:
        node.prev = tail
        run.step(linked, [tail.node_id, node.node_id], 1, "Updating prev pointer")
    run.step(linked, [node.node_id], 1, "Inserting at tail")
    return run.finish(node=node.node_id)


@algorithm(AlgorithmId.LIST_INSERT_AT, params=InsertAtParams)
def list_insert_at(run: AlgorithmRun[InsertAtParams], linked: LinkedList) -> Trace:
    value, position = run.params.value, run.params.position
    if position < 0:
        return run.structural(linked, "Invalid position.")
    if position > len(linked):
        return run.structural(linked, "Position exceeds list length.")

    node = linked.new_node(value)
    if position == 0:
        run.step(linked, line=0, message=f"Creating new node with value {value}")
        _link_head(linked, node)
        run.step(linked, [node.node_id], 2, "Inserting at head (pos 0)")
        return run.finish(node=node.node_id)

    previous = _present(linked.node_at(position - 1), "previous")
    current = previous.next
    run.step(linked, [previous.node_id], 0, f"Traversing to position {position - 1}")
    node.next = current
    if linked.is_doubly:
        node.prev = previous
        if current is not None:
            current.prev = node
    previous.next = node
    if linked.is_doubly:
        run.step(
            linked, [previous.node_id, node.node_id, _id(current)], 1, "Updating prev pointers"
        )
    run.step(linked, [node.node_id], 2, f"Inserting at position {position}")
    return run.finish(node=node.node_id)


# Deletion


@algorithm(AlgorithmId.LIST_DELETE_HEAD)
def list_delete_head(run: AlgorithmRun[None], linked: LinkedList) -> Trace:
    if linked.head is None:
        return run.structural(linked, "List empty! Cannot delete.")
    return _delete_head(run, linked)


@algorithm(AlgorithmId.LIST_DELETE_TAIL)
def list_delete_tail(run: AlgorithmRun[None], linked: LinkedList) -> Trace:
    if linked.head is None:
        return run.structural(linked, "List empty! Cannot delete.")
    order = list(linked.nodes())
    if len(order) == 1:
        only = order[0]
        run.step(linked, [only.node_id], 0, "Deleting only node")
        only.next = None
        linked.head = None
        run.step(linked, line=1, message="List emptied")
        return run.finish(value=only.value)

    previous, tail = order[-2], order[-1]
    run.step(linked, [previous.node_id, tail.node_id], 0, "Traversing to tail")
    previous.next = linked.head if linked.is_circular else None
    tail.next = None
    if linked.is_doubly:
        tail.prev = None
        run.step(linked, [previous.node_id], 1, "Updating pointers for doubly")
    run.step(linked, line=2, message="Tail deleted")
    return run.finish(value=tail.value)


@algorithm(AlgorithmId.LIST_DELETE_AT, params=PositionParams)
def list_delete_at(run: AlgorithmRun[PositionParams], linked: LinkedList) -> Trace:
    if linked.head is None:
        return run.structural(linked, "List empty! Cannot delete.")
    position = run.params.position
    if not 0 <= position < len(linked):
        return run.structural(linked, "Invalid position.")
    if position == 0:
        return _delete_head(run, linked)
    previous = _present(linked.node_at(position - 1), "previous")
    return _unlink_after(
        run,
        linked,
        previous,
        f"Deleting at position {position}",
        f"Deleted at position {position}",
    )


@algorithm(AlgorithmId.LIST_DELETE_VALUE, params=KeyParams)
def list_delete_value(run: AlgorithmRun[KeyParams], linked: LinkedList) -> Trace:
    if linked.head is None:
        return run.structural(linked, "List empty! Cannot delete.")
    key = run.params.key
    previous: ListNode | None = None
    for node in linked.nodes():
        run.step(linked, [node.node_id], 0, f"Checking {node.value}")
        if node.value == key:
            if previous is None:
                return _delete_head(run, linked, line=1)
            return _unlink_after(
                run,
                linked,
                previous,
                f"Deleting node with value {key}",
                f"Deleted node with value {key}",
                line=1,
            )
        previous = node
    run.step(linked, line=4, message="Key not found.")
    return run.finish(value=None)


# Queries


@algorithm(AlgorithmId.LIST_SEARCH_VALUE, params=KeyParams)
def list_search_value(run: AlgorithmRun[KeyParams], linked: LinkedList) -> Trace:
    key = run.params.key
    for index, node in enumerate(linked.nodes()):
        run.step(linked, [node.node_id], 0, f"Checking index {index}: {node.value}")
        if node.value == key:
            run.step(linked, [node.node_id], 1, f"Found {key} at index {index}.")
            return run.finish(index=index, node=node.node_id)
    run.step(linked, line=2, message="Key not found.")
    return run.finish(index=-1, node=None)


@algorithm(AlgorithmId.LIST_SEARCH_INDEX, params=PositionParams)
def list_search_index(run: AlgorithmRun[PositionParams], linked: LinkedList) -> Trace:
    position = run.params.position
    if not 0 <= position < len(linked):
        return run.structural(linked, "Invalid index.")
    for index, node in enumerate(linked.nodes()):
        if index == position:
            run.step(linked, [node.node_id], 1, f"Value at index {position}: {node.value}")
            return run.finish(value=node.value, node=node.node_id)
        run.step(linked, [node.node_id], 0, f"Index {index}: {node.value}")
    raise AssertionError("position was checked against the list length")


@algorithm(AlgorithmId.LIST_TRAVERSE)
def list_traverse(run: AlgorithmRun[None], linked: LinkedList) -> Trace:
    run.step(linked, line=0, message="Traversing list")
    values = []
    for index, node in enumerate(linked.nodes()):
        values.append(node.value)
        run.step(linked, [node.node_id], 1, f"Visiting node {index}: {node.value}")
    run.step(linked, line=2, message="Traversal complete.")
    return run.finish(values=values)


@algorithm(AlgorithmId.LIST_LENGTH)
def list_length(run: AlgorithmRun[None], linked: LinkedList) -> Trace:
    run.step(linked, line=0, message="Initializing count = 0")
    count = 0
    for node in linked.nodes():
        count += 1
        run.step(linked, [node.node_id], 1, f"Count: {count}, node: {node.value}")
    run.step(linked, line=2, message=f"Length: {count}")
    return run.finish(length=count)


@algorithm(AlgorithmId.LIST_FIND_MIDDLE)
def list_find_middle(run: AlgorithmRun[None], linked: LinkedList) -> Trace:
    if linked.head is None:
        return run.structural(linked, "List empty.")
    step = _successor(linked)
    slow = fast = linked.head
    run.step(linked, [slow.node_id], 0, "Slow = head, Fast = head")
    while fast is not None and step(fast) is not None:
        slow = step(slow)
        fast = step(step(fast))
        run.step(linked, [_id(slow), _id(fast)], 1, f"Slow: {_show(slow)}, Fast: {_show(fast)}")
    slow = _present(slow, "middle")
    run.step(linked, [slow.node_id], 2, f"Middle node: {slow.value}")
    return run.finish(value=slow.value, node=slow.node_id)


@algorithm(AlgorithmId.LIST_NTH_FROM_END, params=CountParams)
def list_nth_from_end(run: AlgorithmRun[CountParams], linked: LinkedList) -> Trace:
    if linked.head is None:
        return run.structural(linked, "List empty.")
    n = run.params.n
    if n > len(linked):
        return run.structural(linked, "n exceeds list length.")
    step = _successor(linked)
    first: ListNode | None = linked.head
    run.step(linked, [_id(first)], 0, f"Advancing first pointer by {n} steps")
    for i in range(n):
        first = step(first)
        run.step(linked, [_id(first)], 1, f"First at step {i + 1}: {_show(first)}")
    second = linked.head
    while first is not None:
        first = step(first)
        second = step(second)
        run.step(
            linked,
            [_id(first), _id(second)],
            2,
            f"Moving both: First={_show(first)}, Second={_show(second)}",
        )
    second = _present(second, "nth from end")
    run.step(linked, [second.node_id], 3, f"Nth from end ({n}): {second.value}")
    return run.finish(value=second.value, node=second.node_id)


@algorithm(AlgorithmId.LIST_PALINDROME)
def list_palindrome(run: AlgorithmRun[None], linked: LinkedList) -> Trace:
    step = _successor(linked)
    slow = fast = linked.head
    run.step(linked, [_id(slow)], 0, "Slow = head, Fast = head")
    first_half: list[int] = []
    while fast is not None and step(fast) is not None:
        slow = _present(slow, "slow")
        first_half.append(slow.value)
        slow = step(slow)
        fast = step(step(fast))
        run.step(linked, [_id(slow), _id(fast)], 1, f"Pushed {first_half[-1]}, Slow: {_show(slow)}")
    if fast is not None:
        slow = step(slow)
        run.step(linked, [_id(slow)], 2, "Odd length: skip middle node")
    while slow is not None:
        expected = first_half.pop()
        run.step(linked, [slow.node_id], 3, f"Compare {expected} with {slow.value}")
        if expected != slow.value:
            run.step(linked, [slow.node_id], 4, "Not a palindrome")
            return run.finish(palindrome=False)
        slow = step(slow)
    run.step(linked, line=5, message="Palindrome!")
    return run.finish(palindrome=True)


# Rewiring


@algorithm(AlgorithmId.LIST_REVERSE)
def list_reverse(run: AlgorithmRun[None], linked: LinkedList) -> Trace:
    if linked.head is None:
        return run.structural(linked, "List empty.")
    order = list(linked.nodes())
    step = _successor(linked)
    run.step(linked, line=0, message="Starting reverse: prev = null, curr = head")
    previous: ListNode | None = None
    for current in order:
        following = step(current)
        run.step(
            linked,
            [current.node_id, _id(following)],
            1,
            f"Next = {_show(following)}, curr.next = prev",
        )
        current.next = previous
        if linked.is_doubly:
            current.prev = following
            run.step(linked, [current.node_id], 2, f"For doubly: curr.prev = {_show(following)}")
        previous = current
    linked.head = previous
    if linked.is_circular:
        order[0].next = linked.head
    run.step(linked, line=3, message="Reversed: head = prev")
    return run.finish(values=list(linked))


@algorithm(AlgorithmId.LIST_ROTATE, params=RotateParams)
def list_rotate(run: AlgorithmRun[RotateParams], linked: LinkedList) -> Trace:
    if linked.head is None:
        return run.structural(linked, "List empty.")
    order = list(linked.nodes())
    k = run.params.k % len(order)
    if k == 0:
        run.step(linked, line=0, message="No rotation needed.")
        return run.finish(values=list(linked))

    run.step(linked, line=0, message=f"Rotating left by {k} positions")
    previous = order[0]
    for i in range(1, k):
        previous = order[i]
        run.step(linked, [previous.node_id], 1, f"Finding kth prev at step {i}: {previous.value}")
    new_head = order[k]
    if not linked.is_circular:
        previous.next = None
        order[-1].next = linked.head
    linked.head = new_head
    linked.relink()
    run.step(linked, [new_head.node_id], 2, f"New head after rotation: {new_head.value}")
    return run.finish(values=list(linked))


def _floyd_meet(run: AlgorithmRun, linked: LinkedList) -> ListNode | None:
    """Advance slow/fast along real pointers; return the meeting node, if any."""
    slow = fast = linked.head
    run.step(linked, [_id(slow)], 0, "Slow = head, Fast = head")
    while fast is not None and fast.next is not None:
        slow = _present(slow, "slow").next
        fast = fast.next.next
        message = f"Slow: {_show(slow)}, Fast: {_show(fast)}"
        if slow is fast:
            run.step(linked, [_id(slow)], 1, f"{message} - Loop detected!")
            return slow
        run.step(linked, [_id(slow), _id(fast)], 1, message)
    return None


@algorithm(AlgorithmId.LIST_DETECT_LOOP)
def list_detect_loop(run: AlgorithmRun[None], linked: LinkedList) -> Trace:
    if linked.head is None:
        return run.structural(linked, "List empty.")
    meeting = _floyd_meet(run, linked)
    if meeting is None:
        run.step(linked, line=2, message="No loop detected.")
        return run.finish(loop=False)
    return run.finish(loop=True, meeting=meeting.node_id)


@algorithm(AlgorithmId.LIST_REMOVE_LOOP)
def list_remove_loop(run: AlgorithmRun[None], linked: LinkedList) -> Trace:
    if linked.head is None:
        return run.structural(linked, "List empty.")
    if linked.is_circular:
        return run.precondition(linked, "A circular list is a loop by design; nothing to remove.")
    meeting = _floyd_meet(run, linked)
    if meeting is None:
        run.step(linked, line=2, message="No loop to remove.")
        return run.finish(removed=False)

    slow: ListNode = linked.head
    fast: ListNode = meeting
    while slow is not fast:
        slow = _present(slow.next, "slow")
        fast = _present(fast.next, "fast")
        run.step(linked, [slow.node_id, fast.node_id], 3, f"Moving both: {slow.value}, {fast.value}")
    start = slow
    run.step(linked, [start.node_id], 3, f"Loop starts at {start.value}")

    last = start
    while last.next is not start:
        last = _present(last.next, "loop")
        run.step(linked, [last.node_id], 4, f"Walking the loop: {last.value}")
    last.next = None
    if linked.is_doubly:
        linked.relink()
    run.step(linked, [last.node_id], 5, f"Removed link {last.value} -> {start.value}")
    return run.finish(removed=True, start=start.node_id)


@algorithm(AlgorithmId.LIST_INSERTION_SORT)
def list_insertion_sort(run: AlgorithmRun[None], linked: LinkedList) -> Trace:
    run.step(linked, line=0, message="Sorted prefix = head")
    count = len(linked)
    last_sorted = linked.head
    for _ in range(count - 1):
        last_sorted = _present(last_sorted, "sorted prefix")
        head = _present(linked.head, "head")
        current = _present(last_sorted.next, "unsorted")
        run.step(linked, [current.node_id], 1, f"Take {current.value}")
        if current.value >= last_sorted.value:
            last_sorted = current
            continue

        last_sorted.next = current.next
        if current.value < head.value:
            current.next = head
            linked.head = current
        else:
            probe = head
            while probe.next is not None and probe.next.value <= current.value:
                run.step(
                    linked,
                    [probe.next.node_id, current.node_id],
                    2,
                    f"{probe.next.value} <= {current.value}",
                )
                probe = probe.next
            current.next = probe.next
            probe.next = current
        linked.relink()
        run.step(linked, [current.node_id], 3, f"Inserted {current.value}")
    run.step(linked, line=4, message="List sorted")
    return run.finish(values=list(linked))


@algorithm(AlgorithmId.LIST_MERGE_SORTED, params=ValuesParams)
def list_merge_sorted(run: AlgorithmRun[ValuesParams], linked: LinkedList) -> Trace:
    values = run.params.values
    current_values = list(linked)
    if current_values != sorted(current_values) or values != sorted(values):
        return run.precondition(linked, "Both lists must be sorted before merging.")

    run.step(linked, line=0, message="Merging two sorted lists")

    def successor(node: ListNode) -> ListNode | None:
        return None if node.next is None or node.next is linked.head else node.next

    previous: ListNode | None = None
    current = linked.head
    for value in values:
        while current is not None and current.value <= value:
            run.step(linked, [current.node_id], 1, f"{current.value} <= {value}, advance")
            previous, current = current, successor(current)
        node = linked.new_node(value)
        if previous is None:
            _link_head(linked, node)
        else:
            node.next = previous.next if current is not None else None
            previous.next = node
            linked.relink()
        run.step(linked, [node.node_id], 2, f"Linked {value}")
        previous = node
    run.step(linked, line=3, message="Merged list created")
    return run.finish(values=list(linked))
