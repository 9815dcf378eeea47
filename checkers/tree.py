"""A self-balancing search tree keyed by board position (x, then y)."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator
from typing import Any


def _height(node: TreeNode | None) -> int:
    return node.height if node is not None else 0


class TreeNode:
    """A node holding one value and links to its subtrees."""

    def __init__(self, value: Any) -> None:
        self.value = value
        self.height = 1
        self.left: TreeNode | None = None
        self.right: TreeNode | None = None

    @property
    def primary(self) -> int:
        return self.value.x

    @property
    def secondary(self) -> int:
        return self.value.y

    def update_height(self) -> None:
        """Recompute the height from the children's stored heights."""
        self.height = 1 + max(_height(self.left), _height(self.right))

    def __str__(self) -> str:
        return f"[{self.height} {self.value}]"


class PositionTree:
    """Stores values with ``x`` and ``y`` attributes, ordered by (x, y)."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def insert(self, value: Any) -> None:
        """Store a copy of the value and rebalance."""
        self._root = self._insert(copy.copy(value), self._root)
        self._size += 1
        self._rebalance()

    def remove(self, value: Any) -> None:
        """Remove every stored value at the position of the given value."""
        self._root = self._remove(value.x, value.y, self._root)
        self._size -= 1
        self._rebalance()

    def get_item(self, primary: int, secondary: int) -> TreeNode | None:
        """Return the node at the given position, or None."""
        cur = self._root
        while cur is not None:
            key = (cur.primary, cur.secondary)
            if (primary, secondary) == key:
                return cur
            cur = cur.left if (primary, secondary) < key else cur.right
        return None

    def preorder(self) -> list[Any]:
        return list(self._walk(self._root, "pre"))

    def inorder(self) -> list[Any]:
        return list(self._walk(self._root, "in"))

    def postorder(self) -> list[Any]:
        return list(self._walk(self._root, "post"))

    def tree_rep(self) -> str:
        """Draw the tree sideways, right subtree first."""
        return self._tree_rep(self._root, 0)

    @staticmethod
    def _goes_left(x: int, y: int, node: TreeNode) -> bool:
        return x < node.primary or (x == node.primary and y <= node.secondary)

    def _insert(self, value: Any, cur: TreeNode | None) -> TreeNode:
        if cur is None:
            return TreeNode(value)
        if self._goes_left(value.x, value.y, cur):
            cur.left = self._insert(value, cur.left)
        else:
            cur.right = self._insert(value, cur.right)
        cur.update_height()
        return cur

    def _merge(self, sub: TreeNode | None, cur: TreeNode | None) -> TreeNode | None:
        if cur is None:
            return sub
        if sub is None:
            return cur
        if self._goes_left(sub.primary, sub.secondary, cur):
            cur.left = self._merge(sub, cur.left)
        else:
            cur.right = self._merge(sub, cur.right)
        cur.update_height()
        return cur

    def _remove(self, x: int, y: int, cur: TreeNode | None) -> TreeNode | None:
        if cur is None:
            return None
        key = (cur.primary, cur.secondary)
        if (x, y) < key:
            cur.left = self._remove(x, y, cur.left)
        elif (x, y) == key:
            return self._merge(self._remove(x, y, cur.left), cur.right)
        else:
            cur.right = self._remove(x, y, cur.right)
        return cur

    def _rebalance(self) -> None:
        self._root = self._balance(self._root)
        if self._root is not None:
            self._root.update_height()

    def _balance(self, cur: TreeNode | None) -> TreeNode | None:
        if cur is None:
            return None
        cur.right = self._balance(cur.right)
        cur.left = self._balance(cur.left)
        cur.update_height()
        bal = _height(cur.left) - _height(cur.right)
        if -2 < bal < 2:
            return cur
        if bal <= -2:
            pivot = cur.right
            cur.right = pivot.left
            pivot.left = cur
            cur.update_height()
            return pivot
        pivot = cur.left
        cur.left = pivot.right
        pivot.right = cur
        cur.update_height()
        return pivot

    def _walk(self, node: TreeNode | None, order: str) -> Iterator[Any]:
        if node is None:
            return
        if order == "pre":
            yield copy.copy(node.value)
        yield from self._walk(node.left, order)
        if order == "in":
            yield copy.copy(node.value)
        yield from self._walk(node.right, order)
        if order == "post":
            yield copy.copy(node.value)

    def _tree_rep(self, node: TreeNode | None, depth: int) -> str:
        if node is None:
            return ""
        return (
            self._tree_rep(node.right, depth + 1)
            + "\n"
            + "--" * depth
            + ">>"
            + str(node)
            + self._tree_rep(node.left, depth + 1)
        )