"""A binary search tree that keeps each value at most once."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class TreeNode(Generic[T]):
    """One node of a binary search tree."""

    value: T
    left: Optional[TreeNode[T]] = None
    right: Optional[TreeNode[T]] = None


class BinarySearchTree(Generic[T]):
    """An unbalanced binary search tree; inserting a duplicate does nothing."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode[T]] = None

    def insert(self, value: T) -> None:
        """Insert ``value`` unless an equal value is already stored."""
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value < node.value:  # type: ignore[operator]
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            elif value > node.value:  # type: ignore[operator]
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            else:
                return

    def search(self, value: T) -> bool:
        """Return True when ``value`` is stored in the tree."""
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False

    def __contains__(self, value: Any) -> bool:
        return self.search(value)