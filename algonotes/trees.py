"""Binary trees: level-order parsing, traversal and path sums."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(text: str) -> TreeNode | None:
    """Build a tree from whitespace-separated values in level order.

    ``N`` marks a missing child. An empty string, or one whose first value
    is ``N``, gives an empty tree.
    """
    parts = text.split()
    if not parts or parts[0] == "N":
        return None
    root = TreeNode(int(parts[0]))
    tokens = iter(parts[1:])
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(tokens, None)
        if left is None:
            break
        if left != "N":
            node.left = TreeNode(int(left))
            queue.append(node.left)
        right = next(tokens, None)
        if right is None:
            break
        if right != "N":
            node.right = TreeNode(int(right))
            queue.append(node.right)
    return root


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values in in-order (left, node, right)."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.value)
        node = node.right
    return values


def sum_of_longest_path(root: TreeNode | None) -> int:
    """Return the sum along the longest root-to-leaf path.

    Among paths of equal length the largest sum wins; an empty tree gives 0.
    """
    best = (0, 0)
    stack = [(root, 1, root.value)] if root is not None else []
    while stack:
        node, length, total = stack.pop()
        for child in (node.left, node.right):
            if child is None:
                best = max(best, (length, total))
            else:
                stack.append((child, length + 1, total + child.value))
    return best[1]


def is_same_tree(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Return True if both trees have the same shape and values."""
    stack = [(first, second)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.value != b.value:
            return False
        stack.append((a.left, b.left))
        stack.append((a.right, b.right))
    return True