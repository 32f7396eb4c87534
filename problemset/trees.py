"""Binary trees: construction from level order and common traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None

    @classmethod
    def from_level_order(cls, values: Iterable[int | None]) -> TreeNode | None:
        """Build a tree from level-order values where None marks a missing child."""
        items = iter(values)
        first = next(items, None)
        if first is None:
            return None
        root = cls(first)
        pending = deque([root])
        while pending:
            node = pending.popleft()
            for side in ("left", "right"):
                try:
                    value = next(items)
                except StopIteration:
                    return root
                if value is not None:
                    child = cls(value)
                    setattr(node, side, child)
                    pending.append(child)
        return root


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values of the tree in in-order."""
    result = []
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values of the tree level by level, left to right."""
    if root is None:
        return []
    levels = []
    current = [root]
    while current:
        levels.append([node.val for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def min_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the shortest path from the root to a leaf."""
    if root is None:
        return 0
    queue = deque([(root, 1)])
    while queue:
        node, depth = queue.popleft()
        if node.left is None and node.right is None:
            return depth
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, depth + 1))
    raise AssertionError("a finite tree always has a leaf")