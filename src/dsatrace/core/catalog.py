"""Closed catalog of algorithm identifiers.

Every operation the engine can trace has exactly one AlgorithmId. The enum is
closed: dsatrace.algorithms.missing_handlers() lists any member that has no
registered handler.
"""

from __future__ import annotations

from enum import Enum, auto


class Family(Enum):
    """Structure family an algorithm operates on."""

    ARRAY = auto()
    STACK = auto()
    QUEUE = auto()
    LINKED_LIST = auto()
    TREE = auto()
    GRAPH = auto()
    STRING = auto()


class AlgorithmId(Enum):
    """Identifier of one traceable operation."""

    # Array
    ARRAY_INSERT = auto()
    ARRAY_DELETE = auto()
    ARRAY_PEEK = auto()
    ARRAY_IS_EMPTY = auto()
    ARRAY_IS_FULL = auto()
    LINEAR_SEARCH = auto()
    BINARY_SEARCH = auto()
    BUBBLE_SORT = auto()
    SELECTION_SORT = auto()
    INSERTION_SORT = auto()
    MERGE_SORT = auto()
    QUICK_SORT = auto()

    # Stack
    STACK_PUSH = auto()
    STACK_POP = auto()
    STACK_PEEK = auto()
    STACK_IS_EMPTY = auto()
    STACK_IS_FULL = auto()
    BALANCED_PARENTHESES = auto()
    POSTFIX_EVAL = auto()
    INFIX_TO_POSTFIX = auto()
    UNDO_SIMULATION = auto()
    STACK_PALINDROME = auto()
    NEXT_GREATER = auto()
    STACK_REVERSE = auto()

    # Queue
    ENQUEUE = auto()
    DEQUEUE = auto()
    QUEUE_PEEK = auto()
    QUEUE_IS_EMPTY = auto()
    QUEUE_IS_FULL = auto()
    ENQUEUE_FRONT = auto()
    DEQUEUE_REAR = auto()

    # Linked list
    LIST_INSERT_HEAD = auto()
    LIST_INSERT_TAIL = auto()
    LIST_INSERT_AT = auto()
    LIST_DELETE_HEAD = auto()
    LIST_DELETE_TAIL = auto()
    LIST_DELETE_AT = auto()
    LIST_DELETE_VALUE = auto()
    LIST_SEARCH_VALUE = auto()
    LIST_SEARCH_INDEX = auto()
    LIST_TRAVERSE = auto()
    LIST_LENGTH = auto()
    LIST_FIND_MIDDLE = auto()
    LIST_NTH_FROM_END = auto()
    LIST_REVERSE = auto()
    LIST_ROTATE = auto()
    LIST_DETECT_LOOP = auto()
    LIST_REMOVE_LOOP = auto()
    LIST_PALINDROME = auto()
    LIST_INSERTION_SORT = auto()
    LIST_MERGE_SORTED = auto()

    # Binary search tree
    TREE_INSERT = auto()
    TREE_DELETE = auto()
    TREE_SEARCH = auto()
    TREE_INORDER = auto()
    TREE_PREORDER = auto()
    TREE_POSTORDER = auto()
    TREE_LEVEL_ORDER = auto()
    TREE_MIN_MAX = auto()
    TREE_HEIGHT = auto()
    TREE_DIAMETER = auto()
    TREE_LCA = auto()
    TREE_IS_BALANCED = auto()
    TREE_MIRROR = auto()

    # Graph
    GRAPH_ADD_VERTEX = auto()
    GRAPH_REMOVE_VERTEX = auto()
    GRAPH_ADD_EDGE = auto()
    GRAPH_REMOVE_EDGE = auto()
    BFS = auto()
    DFS = auto()
    DIJKSTRA = auto()
    BELLMAN_FORD = auto()
    FLOYD_WARSHALL = auto()
    A_STAR = auto()
    PRIM = auto()
    KRUSKAL = auto()
    TOPOLOGICAL_SORT = auto()
    CYCLE_DETECTION = auto()
    SCC = auto()
    BIPARTITE = auto()

    # String
    STRING_TRAVERSE = auto()
    STRING_REVERSE = auto()
    SUBSTRING = auto()
    CONCATENATE = auto()
    STRING_PALINDROME = auto()
    ANAGRAM = auto()
    NAIVE_PATTERN_SEARCH = auto()
    KMP_SEARCH = auto()
    LCS = auto()
    RUN_LENGTH_ENCODE = auto()
    CHAR_FREQUENCY = auto()

    @property
    def family(self) -> Family:
        """Structure family this algorithm operates on."""
        return _FAMILY_OF[self]


def _span(first: AlgorithmId, last: AlgorithmId) -> list[AlgorithmId]:
    members = list(AlgorithmId)
    return members[members.index(first) : members.index(last) + 1]


_FAMILY_OF: dict[AlgorithmId, Family] = {
    **dict.fromkeys(_span(AlgorithmId.ARRAY_INSERT, AlgorithmId.QUICK_SORT), Family.ARRAY),
    **dict.fromkeys(_span(AlgorithmId.STACK_PUSH, AlgorithmId.STACK_REVERSE), Family.STACK),
    **dict.fromkeys(_span(AlgorithmId.ENQUEUE, AlgorithmId.DEQUEUE_REAR), Family.QUEUE),
    **dict.fromkeys(
        _span(AlgorithmId.LIST_INSERT_HEAD, AlgorithmId.LIST_MERGE_SORTED), Family.LINKED_LIST
    ),
    **dict.fromkeys(_span(AlgorithmId.TREE_INSERT, AlgorithmId.TREE_MIRROR), Family.TREE),
    **dict.fromkeys(_span(AlgorithmId.GRAPH_ADD_VERTEX, AlgorithmId.BIPARTITE), Family.GRAPH),
    **dict.fromkeys(_span(AlgorithmId.STRING_TRAVERSE, AlgorithmId.CHAR_FREQUENCY), Family.STRING),
}
