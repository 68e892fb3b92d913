"""Snapshot codec: working structures to immutable values and back.

snapshot() walks linked structures with a visited map keyed by object
identity, so it terminates on cycles of any length and maps a node reached
twice onto a single record. thaw() rebuilds a fresh working structure from a
value, keeping node ids and the allocator high-water mark.
"""

from __future__ import annotations

import copy as cp
from collections.abc import Iterator
from typing import Any

from dsatrace.core.errors import MalformedStructureError
from dsatrace.core.identity import NodeId
from dsatrace.core.types import Copy, ElementRef
from dsatrace.core.values import (
    GraphValue,
    ListNodeValue,
    ListValue,
    QueueValue,
    TreeNodeValue,
    TreeValue,
)
from dsatrace.working.allocator import NodeAllocator
from dsatrace.working.graph import WorkingGraph
from dsatrace.working.linked import LinkedList, ListNode
from dsatrace.working.queue import WorkingQueue
from dsatrace.working.tree import BinaryTree, TreeNode

type StructureValue = tuple[Any, ...] | str | QueueValue | ListValue | TreeValue | GraphValue

_VALUE_TYPES = (str, QueueValue, ListValue, TreeValue, GraphValue)


def snapshot(structure: Any) -> Copy[StructureValue]:
    """Capture a structure as an immutable value.

    Values pass through unchanged; sequences become tuples of deep copies.

    Args:
        structure: Working structure, Python sequence, or snapshot value.

    Returns:
        Value sharing nothing with the working structure.

    Raises:
        MalformedStructureError: If a pointer leads somewhere it should not,
            or the structure type is not supported.
    """
    if isinstance(structure, _VALUE_TYPES):
        return structure
    if isinstance(structure, (list, tuple)):
        return tuple(cp.deepcopy(list(structure)))
    if isinstance(structure, LinkedList):
        return _snapshot_list(structure)
    if isinstance(structure, BinaryTree):
        return _snapshot_tree(structure)
    if isinstance(structure, WorkingQueue):
        return QueueValue(
            kind=structure.kind,
            items=tuple(cp.deepcopy(structure.slots)),
            front=structure.front,
            rear=structure.rear,
            capacity=structure.capacity,
        )
    if isinstance(structure, WorkingGraph):
        return GraphValue(
            vertices=tuple(structure.vertices),
            edges=tuple(structure.edges),
            directed=structure.directed,
            weighted=structure.weighted,
        )
    raise MalformedStructureError(f"Cannot snapshot {type(structure).__name__}")


def _check_pointer(owner: Any, name: str, target: Any, node_type: type) -> None:
    if target is not None and not isinstance(target, node_type):
        raise MalformedStructureError(
            f"{owner!r}.{name} points to {type(target).__name__}, expected {node_type.__name__}"
        )


def _collect[N](roots: list[N | None], pointers: tuple[str, ...], node_type: type) -> list[N]:
    """Every node reachable from roots, each distinct object exactly once."""
    visited: dict[int, N] = {}
    order: list[N] = []
    pending = [r for r in roots if r is not None]
    while pending:
        node = pending.pop()
        if not isinstance(node, node_type):
            raise MalformedStructureError(f"Expected {node_type.__name__}, got {type(node).__name__}")
        if id(node) in visited:
            continue
        visited[id(node)] = node
        order.append(node)
        for name in pointers:
            target = getattr(node, name)
            _check_pointer(node, name, target, node_type)
            if target is not None and id(target) not in visited:
                pending.append(target)

    seen_ids: dict[NodeId, int] = {}
    for node in order:
        node_id = node.node_id  # type: ignore[attr-defined]
        if seen_ids.setdefault(node_id, id(node)) != id(node):
            raise MalformedStructureError(f"Node id {node_id} is carried by two distinct nodes")
    return order


def _ref(node: Any) -> NodeId | None:
    return None if node is None else node.node_id


def _snapshot_list(linked: LinkedList) -> ListValue:
    nodes = _collect([linked.head], ("next", "prev"), ListNode)
    records = {
        node.node_id: ListNodeValue(
            node_id=node.node_id,
            value=cp.deepcopy(node.value),
            next=_ref(node.next),
            prev=_ref(node.prev),
        )
        for node in nodes
    }
    high_water = max([linked.allocator.next_index, *(n.node_id.index + 1 for n in nodes)])
    return ListValue(kind=linked.kind, head=_ref(linked.head), nodes=records, next_index=high_water)


def _snapshot_tree(tree: BinaryTree) -> TreeValue:
    nodes = _collect([tree.root], ("left", "right"), TreeNode)
    records = {
        node.node_id: TreeNodeValue(
            node_id=node.node_id,
            value=cp.deepcopy(node.value),
            left=_ref(node.left),
            right=_ref(node.right),
        )
        for node in nodes
    }
    high_water = max([tree.allocator.next_index, *(n.node_id.index + 1 for n in nodes)])
    return TreeValue(root=_ref(tree.root), nodes=records, next_index=high_water)


def thaw(value: StructureValue) -> Any:
    """Rebuild a fresh working structure from a snapshot value.

    Args:
        value: Snapshot value (a tuple thaws to a list, a str to itself).

    Returns:
        Working structure that shares no mutable state with value.

    Raises:
        MalformedStructureError: If a node points at an id missing from value.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, tuple):
        return cp.deepcopy(list(value))
    if isinstance(value, QueueValue):
        queue = WorkingQueue(value.kind, value.capacity)
        queue.slots = cp.deepcopy(list(value.items))
        queue.front = value.front
        queue.rear = value.rear
        return queue
    if isinstance(value, ListValue):
        linked = LinkedList(value.kind, NodeAllocator(value.next_index))
        list_nodes = {nid: ListNode(nid, cp.deepcopy(rec.value)) for nid, rec in value.nodes.items()}
        for nid, rec in value.nodes.items():
            list_nodes[nid].next = _resolve(list_nodes, rec.next)
            list_nodes[nid].prev = _resolve(list_nodes, rec.prev)
        for nid in list_nodes:
            linked.allocator.reserve(nid)
        linked.head = _resolve(list_nodes, value.head)
        return linked
    if isinstance(value, TreeValue):
        tree = BinaryTree(NodeAllocator(value.next_index))
        tree_nodes = {nid: TreeNode(nid, cp.deepcopy(rec.value)) for nid, rec in value.nodes.items()}
        for nid, rec in value.nodes.items():
            tree_nodes[nid].left = _resolve(tree_nodes, rec.left)
            tree_nodes[nid].right = _resolve(tree_nodes, rec.right)
        for nid in tree_nodes:
            tree.allocator.reserve(nid)
        tree.root = _resolve(tree_nodes, value.root)
        return tree
    if isinstance(value, GraphValue):
        graph = WorkingGraph(directed=value.directed, weighted=value.weighted)
        graph.vertices = list(value.vertices)
        graph.edges = list(value.edges)
        return graph
    raise MalformedStructureError(f"Cannot thaw {type(value).__name__}")


def _resolve[N](nodes: dict[NodeId, N], node_id: NodeId | None) -> N | None:
    if node_id is None:
        return None
    try:
        return nodes[node_id]
    except KeyError:
        raise MalformedStructureError(f"Dangling pointer to node {node_id}") from None


def working_copy(structure: Any) -> Any:
    """Private working structure equal to structure (live or snapshot)."""
    return thaw(snapshot(structure))


def walk(value: ListValue) -> Iterator[ListNodeValue]:
    """Yield list nodes from head following `next` until None or a revisit."""
    return value.walk()


def inorder(value: TreeValue) -> list[TreeNodeValue]:
    """Tree nodes in left-root-right order."""
    return value.inorder()


def contains_ref(value: StructureValue, ref: ElementRef) -> bool:
    """Check whether a highlight reference names an element of value."""
    if isinstance(value, (tuple, str)):
        return isinstance(ref, int) and not isinstance(ref, bool) and 0 <= ref < len(value)
    return ref in value
