"""Mutable binary search tree used while an algorithm runs."""

from __future__ import annotations

from collections.abc import Iterable

from dsatrace.core.identity import NodeId
from dsatrace.working.allocator import NodeAllocator


class TreeNode:
    """Live tree node with real child pointers."""

    __slots__ = ("node_id", "value", "left", "right")

    def __init__(self, node_id: NodeId, value: int):
        self.node_id = node_id
        self.value = value
        self.left: TreeNode | None = None
        self.right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.node_id}, {self.value!r})"


class BinaryTree:
    """Binary search tree; duplicates are placed in the right subtree.

    Args:
        allocator: Source of node ids (a fresh allocator by default).
    """

    def __init__(self, allocator: NodeAllocator | None = None):
        self.root: TreeNode | None = None
        self.allocator = allocator or NodeAllocator()

    def new_node(self, value: int) -> TreeNode:
        return TreeNode(self.allocator.allocate(), value)

    def insert(self, value: int) -> TreeNode:
        """Insert without tracing; used to build initial trees."""
        node = self.new_node(value)
        if self.root is None:
            self.root = node
            return node
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return node
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return node
                current = current.right

    def is_empty(self) -> bool:
        return self.root is None


def make_tree(values: Iterable[int] = (50, 30, 70, 20, 40, 60, 80)) -> BinaryTree:
    """Build a binary search tree by inserting values in order."""
    tree = BinaryTree()
    for value in values:
        tree.insert(value)
    return tree
