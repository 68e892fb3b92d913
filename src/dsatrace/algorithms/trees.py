"""Binary search tree operations, traversals and queries.

Nodes keep their NodeId for the whole run: deleting a node with two children
copies the in-order successor's value into it and removes the successor node,
so the surviving node's highlight stays attached to the same id.
"""

from __future__ import annotations

from collections import deque

from dsatrace.algorithms.params import PairParams, ValueParams
from dsatrace.algorithms.registry import AlgorithmRun, algorithm
from dsatrace.core.catalog import AlgorithmId
from dsatrace.tracing import Trace
from dsatrace.working import BinaryTree, TreeNode


def _descend(
    run: AlgorithmRun, tree: BinaryTree, value: int
) -> tuple[TreeNode | None, TreeNode | None]:
    """Walk from the root towards value, one frame per node; return (node, parent)."""
    parent: TreeNode | None = None
    node = tree.root
    while node is not None:
        run.step(tree, [node.node_id], 1, f"At {node.value}")
        if value == node.value:
            return node, parent
        parent = node
        if value < node.value:
            run.step(tree, [node.node_id], 2, f"{value} < {node.value}, go left")
            node = node.left
        else:
            run.step(tree, [node.node_id], 3, f"{value} > {node.value}, go right")
            node = node.right
    return None, parent


def _replace_child(
    tree: BinaryTree, parent: TreeNode | None, old: TreeNode, new: TreeNode | None
) -> None:
    if parent is None:
        tree.root = new
    elif parent.left is old:
        parent.left = new
    else:
        parent.right = new


@algorithm(AlgorithmId.TREE_INSERT, params=ValueParams)
def tree_insert(run: AlgorithmRun[ValueParams], tree: BinaryTree) -> Trace:
    value = run.params.value
    run.step(tree, line=0, message=f"Insert {value}")
    node = tree.new_node(value)
    if tree.root is None:
        tree.root = node
        run.step(tree, [node.node_id], 4, "Inserted as root")
        return run.finish(node=node.node_id)

    current = tree.root
    while True:
        run.step(tree, [current.node_id], 1, f"At {current.value}")
        if value < current.value:
            run.step(tree, [current.node_id], 2, f"{value} < {current.value}, go left")
            if current.left is None:
                current.left = node
                run.step(tree, [node.node_id], 4, "Inserted left")
                return run.finish(node=node.node_id)
            current = current.left
        else:
            run.step(tree, [current.node_id], 3, f"{value} >= {current.value}, go right")
            if current.right is None:
                current.right = node
                run.step(tree, [node.node_id], 4, "Inserted right")
                return run.finish(node=node.node_id)
            current = current.right


@algorithm(AlgorithmId.TREE_SEARCH, params=ValueParams)
def tree_search(run: AlgorithmRun[ValueParams], tree: BinaryTree) -> Trace:
    value = run.params.value
    run.step(tree, line=0, message=f"Search {value}")
    node, _ = _descend(run, tree, value)
    if node is None:
        run.step(tree, line=5, message="Not found")
        return run.finish(found=False, node=None)
    run.step(tree, [node.node_id], 4, "Found!")
    return run.finish(found=True, node=node.node_id)


@algorithm(AlgorithmId.TREE_DELETE, params=ValueParams)
def tree_delete(run: AlgorithmRun[ValueParams], tree: BinaryTree) -> Trace:
    if tree.root is None:
        return run.structural(tree, "Tree empty.")
    value = run.params.value
    run.step(tree, line=0, message=f"Delete {value}")
    target, parent = _descend(run, tree, value)
    if target is None:
        run.step(tree, line=0, message=f"Delete {value} - not found")
        return run.finish(deleted=False)
    run.step(tree, [target.node_id], 0, f"Found {value} to delete")

    if target.left is None and target.right is None:
        run.step(tree, [target.node_id], 5, "Leaf node - remove directly")
        _replace_child(tree, parent, target, None)
        run.step(tree, line=8, message="Deleted leaf")
        return run.finish(deleted=True, case="leaf")

    child = target.left or target.right
    if child is not None and (target.left is None or target.right is None):
        run.step(tree, [target.node_id, child.node_id], 6, "One child - replace with child")
        _replace_child(tree, parent, target, child)
        target.left = target.right = None
        run.step(tree, [child.node_id], 8, "Replaced with child")
        return run.finish(deleted=True, case="one_child")

    run.step(tree, [target.node_id], 7, "Two children - find inorder successor")
    successor_parent = target
    successor = target.right
    run.step(tree, [successor.node_id], 7, f"Go right to {successor.value}")
    while successor.left is not None:
        successor_parent = successor
        successor = successor.left
        run.step(tree, [successor.node_id], 7, f"Go left to {successor.value}")
    run.step(tree, [target.node_id, successor.node_id], 7, f"Successor: {successor.value}")
    target.value = successor.value
    _replace_child(tree, successor_parent, successor, successor.right)
    successor.right = None
    run.step(tree, [target.node_id], 8, "Replaced value and removed successor")
    return run.finish(deleted=True, case="two_children", removed=successor.node_id)


# Traversals


def _traversal(
    run: AlgorithmRun, tree: BinaryTree, title: str, ordered: list[TreeNode], line: int
) -> Trace:
    run.step(tree, line=0, message=title)
    for node in ordered:
        run.step(tree, [node.node_id], line, f"Visit {node.value}")
    order = [node.value for node in ordered]
    run.step(tree, line=-1, message=f"Visited: {', '.join(map(str, order)) or '(none)'}")
    return run.finish(order=order, nodes=[node.node_id for node in ordered])


def _inorder(node: TreeNode | None) -> list[TreeNode]:
    if node is None:
        return []
    return [*_inorder(node.left), node, *_inorder(node.right)]


def _preorder(node: TreeNode | None) -> list[TreeNode]:
    if node is None:
        return []
    return [node, *_preorder(node.left), *_preorder(node.right)]


def _postorder(node: TreeNode | None) -> list[TreeNode]:
    if node is None:
        return []
    return [*_postorder(node.left), *_postorder(node.right), node]


@algorithm(AlgorithmId.TREE_INORDER)
def tree_inorder(run: AlgorithmRun[None], tree: BinaryTree) -> Trace:
    return _traversal(run, tree, "Inorder Traversal", _inorder(tree.root), 3)


@algorithm(AlgorithmId.TREE_PREORDER)
def tree_preorder(run: AlgorithmRun[None], tree: BinaryTree) -> Trace:
    return _traversal(run, tree, "Preorder Traversal", _preorder(tree.root), 1)


@algorithm(AlgorithmId.TREE_POSTORDER)
def tree_postorder(run: AlgorithmRun[None], tree: BinaryTree) -> Trace:
    return _traversal(run, tree, "Postorder Traversal", _postorder(tree.root), 4)


@algorithm(AlgorithmId.TREE_LEVEL_ORDER)
def tree_level_order(run: AlgorithmRun[None], tree: BinaryTree) -> Trace:
    ordered: list[TreeNode] = []
    pending = deque([tree.root] if tree.root is not None else [])
    while pending:
        node = pending.popleft()
        ordered.append(node)
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return _traversal(run, tree, "Level Order Traversal", ordered, 3)


# Queries


@algorithm(AlgorithmId.TREE_MIN_MAX)
def tree_min_max(run: AlgorithmRun[None], tree: BinaryTree) -> Trace:
    if tree.root is None:
        return run.structural(tree, "Tree empty.")
    run.step(tree, [tree.root.node_id], 0, "Find Min/Max")
    low = tree.root
    while low.left is not None:
        low = low.left
        run.step(tree, [low.node_id], 1, "Go left for min")
    high = tree.root
    while high.right is not None:
        high = high.right
        run.step(tree, [high.node_id], 2, "Go right for max")
    run.step(tree, [low.node_id, high.node_id], 3, f"Min: {low.value}, Max: {high.value}")
    return run.finish(min=low.value, max=high.value)


def _measure(run: AlgorithmRun, tree: BinaryTree) -> dict[int, tuple[int, int]]:
    """Post-order pass computing (height, diameter) per node, one frame each.

    Both are counted in nodes: a single node has height 1 and diameter 1.
    """
    measures: dict[int, tuple[int, int]] = {}
    for node in _postorder(tree.root):
        left = measures.get(id(node.left), (0, 0))
        right = measures.get(id(node.right), (0, 0))
        height = 1 + max(left[0], right[0])
        diameter = max(left[0] + right[0] + 1, left[1], right[1])
        measures[id(node)] = (height, diameter)
        run.step(tree, [node.node_id], 1, f"Height of {node.value} = {height}")
    return measures


@algorithm(AlgorithmId.TREE_HEIGHT)
def tree_height(run: AlgorithmRun[None], tree: BinaryTree) -> Trace:
    if tree.root is None:
        return run.structural(tree, "Tree empty.")
    height = _measure(run, tree)[id(tree.root)][0]
    run.step(tree, [tree.root.node_id], 2, f"Height: {height}")
    return run.finish(height=height)


@algorithm(AlgorithmId.TREE_DIAMETER)
def tree_diameter(run: AlgorithmRun[None], tree: BinaryTree) -> Trace:
    if tree.root is None:
        return run.structural(tree, "Tree empty.")
    diameter = _measure(run, tree)[id(tree.root)][1]
    run.step(tree, line=2, message=f"Diameter: {diameter}")
    return run.finish(diameter=diameter)


@algorithm(AlgorithmId.TREE_IS_BALANCED)
def tree_is_balanced(run: AlgorithmRun[None], tree: BinaryTree) -> Trace:
    if tree.root is None:
        return run.structural(tree, "Tree empty.")
    heights: dict[int, int] = {}
    balanced = True
    for node in _postorder(tree.root):
        left = heights.get(id(node.left), 0)
        right = heights.get(id(node.right), 0)
        heights[id(node)] = 1 + max(left, right)
        if abs(left - right) > 1:
            balanced = False
            run.step(tree, [node.node_id], 1, f"Unbalanced at {node.value}: {left} vs {right}")
        else:
            run.step(tree, [node.node_id], 1, f"{node.value}: left {left}, right {right}")
    run.step(tree, line=2, message=f"Balanced: {balanced}")
    return run.finish(balanced=balanced)


@algorithm(AlgorithmId.TREE_LCA, params=PairParams)
def tree_lca(run: AlgorithmRun[PairParams], tree: BinaryTree) -> Trace:
    if tree.root is None:
        return run.structural(tree, "Tree empty.")
    first, second = run.params.first, run.params.second
    values = {node.value for node in _inorder(tree.root)}
    for value in (first, second):
        if value not in values:
            return run.precondition(tree, f"Value {value} not in tree.")

    node = tree.root
    while True:
        run.step(tree, [node.node_id], 0, f"At {node.value}")
        if first < node.value and second < node.value and node.left is not None:
            node = node.left
        elif first > node.value and second > node.value and node.right is not None:
            node = node.right
        else:
            break
    run.step(tree, [node.node_id], 1, f"LCA of {first} and {second}: {node.value}")
    return run.finish(value=node.value, node=node.node_id)


@algorithm(AlgorithmId.TREE_MIRROR)
def tree_mirror(run: AlgorithmRun[None], tree: BinaryTree) -> Trace:
    if tree.root is None:
        return run.structural(tree, "Tree empty.")
    for node in _preorder(tree.root):
        node.left, node.right = node.right, node.left
        run.step(tree, [node.node_id], 0, f"Swapped children of {node.value}")
    run.step(tree, line=1, message="Tree mirrored")
    return run.finish(order=[node.value for node in _inorder(tree.root)])
