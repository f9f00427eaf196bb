"""Iterative AVL tree with parent back-references.

Every mutation ends in a single upward walk (``_rebalance``) from the point
where the structure changed. The walk refreshes cached heights all the way to
the root and applies at most one single or double rotation.
"""

import logging
from collections import deque
from typing import TypeVar, Generic, List, Iterator, Optional

log = logging.getLogger(__name__)

T = TypeVar('T')

EMPTY_HEIGHT = -1


class AVLTree(Generic[T]):
    class Node:
        def __init__(self, value: T, parent: Optional['AVLTree.Node'] = None) -> None:
            self.value: T = value
            self.parent: Optional['AVLTree.Node'] = parent
            self.left: Optional['AVLTree.Node'] = None
            self.right: Optional['AVLTree.Node'] = None
            self.height: int = 0

        def __repr__(self) -> str:
            return f"Node({self.value!r}, height={self.height})"

    def __init__(self) -> None:
        self._root: Optional[AVLTree.Node] = None
        self._size: int = 0

    def _get_height(self, node: Optional[Node]) -> int:
        if node is None:
            return EMPTY_HEIGHT
        return node.height

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _get_balance(self, node: Node) -> int:
        return self._get_height(node.left) - self._get_height(node.right)

    def _replace_child(self, parent: Optional[Node], old: Node, new: Optional[Node]) -> None:
        """Point whatever referenced ``old`` from above at ``new``."""
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def _rotate_right(self, pivot: Node) -> Node:
        child = pivot.left
        assert child is not None
        moved = child.right

        pivot.left = moved
        if moved is not None:
            moved.parent = pivot

        self._replace_child(pivot.parent, pivot, child)
        child.right = pivot
        pivot.parent = child

        self._update_height(pivot)
        self._update_height(child)
        return child

    def _rotate_left(self, pivot: Node) -> Node:
        child = pivot.right
        assert child is not None
        moved = child.left

        pivot.right = moved
        if moved is not None:
            moved.parent = pivot

        self._replace_child(pivot.parent, pivot, child)
        child.left = pivot
        pivot.parent = child

        self._update_height(pivot)
        self._update_height(child)
        return child

    def _rebalance(self, node: Optional[Node]) -> None:
        while node is not None:
            balance = self._get_balance(node)

            if balance > 1:
                left = node.left
                assert left is not None
                if self._get_height(left.left) < self._get_height(left.right):
                    log.debug("left-right rotation at %r", node.value)
                    self._rotate_left(left)
                else:
                    log.debug("right rotation at %r", node.value)
                node = self._rotate_right(node)
            elif balance < -1:
                right = node.right
                assert right is not None
                if self._get_height(right.right) < self._get_height(right.left):
                    log.debug("right-left rotation at %r", node.value)
                    self._rotate_right(right)
                else:
                    log.debug("left rotation at %r", node.value)
                node = self._rotate_left(node)

            self._update_height(node)
            if node.parent is None:
                self._root = node
            node = node.parent

    def insert(self, value: T) -> None:
        if self._root is None:
            self._root = AVLTree.Node(value)
            self._size += 1
            return

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = AVLTree.Node(value, node)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = AVLTree.Node(value, node)
                    break
                node = node.right
            else:
                return

        self._size += 1
        self._rebalance(node)

    def delete(self, value: T) -> None:
        node = self._root
        went_left = False
        while node is not None:
            if value < node.value:
                went_left = True
                node = node.left
            elif value > node.value:
                went_left = False
                node = node.right
            else:
                break

        if node is None:
            return

        self._size -= 1

        if node.left is not None and node.right is not None:
            successor = self._find_min_node(node.right)
            node.value = successor.value
            parent = successor.parent
            assert parent is not None
            self._replace_child(parent, successor, successor.right)
            self._rebalance(parent)
            return

        child = node.left if node.left is not None else node.right
        parent = node.parent
        if parent is None:
            # a root with at most one child: that child is a leaf
            self._root = child
            if child is not None:
                child.parent = None
            return

        if went_left:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent
        self._rebalance(parent)

    def contains(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def _find_min_node(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def minimum(self) -> Optional[T]:
        """Smallest value, or None when the tree is empty."""
        if self._root is None:
            return None
        return self._find_min_node(self._root).value

    def maximum(self) -> Optional[T]:
        """Largest value, or None when the tree is empty."""
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        """Height of the root (0 for a single node), EMPTY_HEIGHT when empty."""
        return self._get_height(self._root)

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[AVLTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def level_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def is_balanced(self) -> bool:
        return all(abs(self._get_balance(node)) <= 1 for node in self._nodes())

    def is_valid(self) -> bool:
        """Check search order, balance, cached heights and parent links."""
        if self._root is not None and self._root.parent is not None:
            return False
        count = 0
        stack = [(self._root, None, None)]
        while stack:
            node, low, high = stack.pop()
            if node is None:
                continue
            count += 1
            if low is not None and not node.value > low.value:
                return False
            if high is not None and not node.value < high.value:
                return False
            for child in (node.left, node.right):
                if child is not None and child.parent is not node:
                    return False
            expected = 1 + max(self._get_height(node.left), self._get_height(node.right))
            if node.height != expected or abs(self._get_balance(node)) > 1:
                return False
            stack.append((node.left, low, node))
            stack.append((node.right, node, high))
        return count == self._size

    def _nodes(self) -> Iterator[Node]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
