"""Working structures: the live, mutable state an algorithm run owns.

This is the only place in dsatrace where real object pointers, aliasing and
cycles exist. Each algorithm run gets a private copy, mutates it, and lets the
snapshot codec turn it into immutable values frame by frame.
"""

from dsatrace.working.allocator import NodeAllocator
from dsatrace.working.graph import WorkingGraph, make_graph
from dsatrace.working.linked import LinkedList, ListNode, make_list
from dsatrace.working.queue import WorkingQueue, make_queue
from dsatrace.working.tree import BinaryTree, TreeNode, make_tree

__all__ = [
    "BinaryTree",
    "LinkedList",
    "ListNode",
    "NodeAllocator",
    "TreeNode",
    "WorkingGraph",
    "WorkingQueue",
    "make_graph",
    "make_list",
    "make_queue",
    "make_tree",
]
