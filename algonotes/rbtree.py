"""A red-black tree of comparable values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any


class Color(Enum):
    """Colour of a red-black tree node."""

    RED = 0
    BLACK = 1


class _Node:
    __slots__ = ("value", "color", "parent", "left", "right")

    def __init__(self, value: Any, color: Color, parent: Any, left: Any, right: Any) -> None:
        self.value = value
        self.color = color
        self.parent = parent
        self.left = left
        self.right = right


class RedBlackTree:
    """A self-balancing binary search tree; equal values are kept and go right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._nil = _Node(None, Color.BLACK, None, None, None)
        self._nil.parent = self._nil.left = self._nil.right = self._nil
        self._root = self._nil
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return self._find(value) is not self._nil

    def __iter__(self) -> Iterator[Any]:
        for value, _ in self._walk():
            yield value

    def inorder(self) -> list[tuple[Any, Color]]:
        """Return (value, colour) pairs in ascending order of value."""
        return list(self._walk())

    def root(self) -> tuple[Any, Color] | None:
        """Return the root's value and colour, or None for an empty tree."""
        if self._root is self._nil:
            return None
        return self._root.value, self._root.color

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        nil = self._nil
        parent = nil
        node = self._root
        while node is not nil:
            parent = node
            node = node.left if value < node.value else node.right
        new = _Node(value, Color.RED, parent, nil, nil)
        if parent is nil:
            self._root = new
        elif value < parent.value:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        self._insert_fixup(new)

    def delete(self, value: Any) -> bool:
        """Remove one occurrence of ``value``; return whether one was found."""
        node = self._find(value)
        if node is self._nil:
            return False
        self._delete_node(node)
        self._size -= 1
        return True

    def _walk(self) -> Iterator[tuple[Any, Color]]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value, node.color
            node = node.right

    def _find(self, value: Any) -> _Node:
        node = self._root
        while node is not self._nil:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return self._nil

    def _minimum(self, node: _Node) -> _Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def _rotate_left(self, node: _Node) -> None:
        child = node.right
        node.right = child.left
        if child.left is not self._nil:
            child.left.parent = node
        child.parent = node.parent
        if node.parent is self._nil:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child
        child.left = node
        node.parent = child

    def _rotate_right(self, node: _Node) -> None:
        child = node.left
        node.left = child.right
        if child.right is not self._nil:
            child.right.parent = node
        child.parent = node.parent
        if node.parent is self._nil:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child
        child.right = node
        node.parent = child

    def _insert_fixup(self, node: _Node) -> None:
        while node.parent.color is Color.RED:
            grandparent = node.parent.parent
            if node.parent is grandparent.left:
                uncle = grandparent.right
                if uncle.color is Color.RED:
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                else:
                    if node is node.parent.right:
                        node = node.parent
                        self._rotate_left(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_right(node.parent.parent)
            else:
                uncle = grandparent.left
                if uncle.color is Color.RED:
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                else:
                    if node is node.parent.left:
                        node = node.parent
                        self._rotate_right(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_left(node.parent.parent)
        self._root.color = Color.BLACK

    def _transplant(self, old: _Node, new: _Node) -> None:
        if old.parent is self._nil:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        new.parent = old.parent

    def _delete_node(self, node: _Node) -> None:
        nil = self._nil
        moved = node
        original_color = moved.color
        if node.left is nil:
            child = node.right
            self._transplant(node, node.right)
        elif node.right is nil:
            child = node.left
            self._transplant(node, node.left)
        else:
            moved = self._minimum(node.right)
            original_color = moved.color
            child = moved.right
            if moved.parent is node:
                child.parent = moved
            else:
                self._transplant(moved, moved.right)
                moved.right = node.right
                moved.right.parent = moved
            self._transplant(node, moved)
            moved.left = node.left
            moved.left.parent = moved
            moved.color = node.color
        if original_color is Color.BLACK:
            self._delete_fixup(child)

    def _delete_fixup(self, node: _Node) -> None:
        while node is not self._root and node.color is Color.BLACK:
            if node is node.parent.left:
                sibling = node.parent.right
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    node.parent.color = Color.RED
                    self._rotate_left(node.parent)
                    sibling = node.parent.right
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.right.color is Color.BLACK:
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_right(sibling)
                        sibling = node.parent.right
                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.right.color = Color.BLACK
                    self._rotate_left(node.parent)
                    node = self._root
            else:
                sibling = node.parent.left
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    node.parent.color = Color.RED
                    self._rotate_right(node.parent)
                    sibling = node.parent.left
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.left.color is Color.BLACK:
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_left(sibling)
                        sibling = node.parent.left
                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.left.color = Color.BLACK
                    self._rotate_right(node.parent)
                    node = self._root
        node.color = Color.BLACK