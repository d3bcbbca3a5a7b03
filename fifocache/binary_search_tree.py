"""Unbalanced binary search tree keyed by integer, pointing at cached records."""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Optional, Tuple

from .nodes import Record, TreeNode


def _size(node: Optional[TreeNode]) -> int:
    return node.number_of_nodes if node is not None else 0


def _height(node: Optional[TreeNode]) -> int:
    return node.height if node is not None else -1


def _refresh(node: TreeNode) -> None:
    node.number_of_nodes = 1 + _size(node.left) + _size(node.right)
    node.height = 1 + max(_height(node.left), _height(node.right))


class BinarySearchTree:
    """Binary search tree whose nodes track subtree size and height."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def __len__(self) -> int:
        return _size(self.root)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self._find(key) is not None

    def _find(self, key: int) -> Optional[TreeNode]:
        node = self.root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def add(self, key: int, record: Optional[Record] = None) -> bool:
        """Insert ``key``; False if it is already in the tree."""
        path: List[TreeNode] = []
        node = self.root
        while node is not None:
            if key == node.key:
                return False
            path.append(node)
            node = node.left if key < node.key else node.right
        new_node = TreeNode(key=key, record=record)
        if not path:
            self.root = new_node
        else:
            parent = path[-1]
            if key < parent.key:
                parent.left = new_node
            else:
                parent.right = new_node
        for ancestor in reversed(path):
            _refresh(ancestor)
        return True

    def remove(self, key: int) -> bool:
        """Remove ``key``; False if it was not in the tree."""
        path: List[TreeNode] = []
        node = self.root
        while node is not None and node.key != key:
            path.append(node)
            node = node.left if key < node.key else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            path.append(node)
            successor = node.right
            while successor.left is not None:
                path.append(successor)
                successor = successor.left
            node.key = successor.key
            node.record = successor.record
            node = successor

        child = node.left if node.left is not None else node.right
        if not path:
            self.root = child
        else:
            parent = path[-1]
            if parent.left is node:
                parent.left = child
            else:
                parent.right = child
        for ancestor in reversed(path):
            _refresh(ancestor)
        return True

    def height(self) -> int:
        """Longest root-to-leaf path length; -1 for an empty tree."""
        return _height(self.root)

    def is_empty(self) -> bool:
        """Whether the tree has no nodes."""
        return self.root is None

    def clear(self) -> None:
        """Remove every node."""
        self.root = None

    def in_order(self) -> Iterator[TreeNode]:
        """Nodes in ascending key order."""
        stack: List[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def reverse_order(self) -> Iterator[TreeNode]:
        """Nodes in descending key order."""
        stack: List[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            yield node
            node = node.left

    def pre_order(self) -> Iterator[TreeNode]:
        """Each node before its left and then right subtree."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[TreeNode]:
        """Each node after its left and then right subtree."""
        stack: List[Tuple[TreeNode, bool]] = (
            [(self.root, False)] if self.root is not None else []
        )
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def depth_first(self) -> Iterator[TreeNode]:
        """Depth-first traversal, the same as pre-order."""
        return self.pre_order()

    def breadth_first(self) -> Iterator[TreeNode]:
        """Nodes level by level, left to right."""
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            yield node
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def in_range(self, low: int, high: int) -> Iterator[TreeNode]:
        """Nodes with ``low <= key <= high`` in ascending order."""
        stack: List[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left if node.key > low else None
            node = stack.pop()
            if low <= node.key <= high:
                yield node
            node = node.right if node.key < high else None

    def describe_node(self, node: TreeNode) -> str:
        """Line giving a node's key, subtree size and height."""
        return (
            f"key: {node.key}; number of nodes: {node.number_of_nodes}; "
            f"height: {node.height}"
        )