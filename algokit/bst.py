"""Unbalanced binary search tree with the usual traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("data", "left", "right")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """Values smaller or equal go left, greater values go right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for v in values:
            self.insert(v)

    def insert(self, val: Any) -> None:
        """Add val; duplicates are kept."""
        node = _Node(val)
        if self._root is None:
            self._root = node
            return
        cur = self._root
        while True:
            if val > cur.data:
                if cur.right is None:
                    cur.right = node
                    return
                cur = cur.right
            else:
                if cur.left is None:
                    cur.left = node
                    return
                cur = cur.left

    def __contains__(self, val: object) -> bool:
        cur = self._root
        while cur is not None:
            if cur.data == val:
                return True
            cur = cur.right if val > cur.data else cur.left
        return False

    def delete(self, key: Any) -> None:
        """Remove one occurrence of key; nothing happens if it is absent."""
        self._root = self._delete(self._root, key)

    def _delete(self, node: _Node | None, key: Any) -> _Node | None:
        if node is None:
            return None
        if key < node.data:
            node.left = self._delete(node.left, key)
        elif key > node.data:
            node.right = self._delete(node.right, key)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            succ = node.right
            while succ.left is not None:
                succ = succ.left
            node.data = succ.data
            node.right = self._delete(node.right, succ.data)
        return node

    def _inorder(self, node: _Node | None) -> Iterator[Any]:
        if node is not None:
            yield from self._inorder(node.left)
            yield node.data
            yield from self._inorder(node.right)

    def _preorder(self, node: _Node | None) -> Iterator[Any]:
        if node is not None:
            yield node.data
            yield from self._preorder(node.left)
            yield from self._preorder(node.right)

    def _postorder(self, node: _Node | None) -> Iterator[Any]:
        if node is not None:
            yield from self._postorder(node.left)
            yield from self._postorder(node.right)
            yield node.data

    def inorder(self) -> list[Any]:
        """Values in sorted order."""
        return list(self._inorder(self._root))

    def preorder(self) -> list[Any]:
        """Values node first, then left and right subtrees."""
        return list(self._preorder(self._root))

    def postorder(self) -> list[Any]:
        """Values left and right subtrees first, then the node."""
        return list(self._postorder(self._root))

    def level_order(self) -> list[Any]:
        """Values level by level from the root."""
        out = []
        queue = deque([self._root] if self._root else [])
        while queue:
            node = queue.popleft()
            out.append(node.data)
            if node.left:
                queue.append(node.left)
            if node.right:
                queue.append(node.right)
        return out

    def min(self) -> Any:
        """Smallest value."""
        if self._root is None:
            raise ValueError("empty tree")
        cur = self._root
        while cur.left is not None:
            cur = cur.left
        return cur.data

    def max(self) -> Any:
        """Largest value."""
        if self._root is None:
            raise ValueError("empty tree")
        cur = self._root
        while cur.right is not None:
            cur = cur.right
        return cur.data