import logging
from typing import TypeVar, Optional, Tuple

from binary_search_tree import BinarySearchTree
from tree_errors import ValueAlreadyStored, ValueNotFound

T = TypeVar('T')

logger = logging.getLogger(__name__)

_OPPOSITE = {'left': 'right', 'right': 'left'}


class AVLTree(BinarySearchTree[T]):
    """Self-balancing binary search tree of unique values.

    Every node caches the height of its subtree. Insertion and deletion
    recurse from the root, each call returning the node that replaces its
    subtree; on the way back up heights are recomputed and a node is rotated
    when the balance factor ``height(right) - height(left)`` leaves [-1, 1].
    Recursion depth is bounded by the height, which stays logarithmic.
    Rotations relink nodes; they never copy values between them.
    """

    class Node(BinarySearchTree.Node):
        def __init__(self, value: T) -> None:
            super().__init__(value)
            self.height: int = 1

    def _height(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return node.height

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self._height(node.left), self._height(node.right))

    def _balance_factor(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return self._height(node.right) - self._height(node.left)

    def _rotate(self, node: Node, side: str) -> Node:
        """Lift the ``side`` child of ``node`` into its place and return it."""
        other = _OPPOSITE[side]
        pivot = getattr(node, side)
        assert pivot is not None

        setattr(node, side, getattr(pivot, other))
        setattr(pivot, other, node)

        self._update_height(node)
        self._update_height(pivot)

        return pivot

    def _rebalance(self, node: Node) -> Node:
        self._update_height(node)
        balance = self._balance_factor(node)
        if -1 <= balance <= 1:
            return node

        heavy = 'right' if balance > 0 else 'left'
        light = _OPPOSITE[heavy]
        child = getattr(node, heavy)
        lean = self._balance_factor(child)
        if heavy == 'left':
            lean = -lean

        if lean < 0:
            logger.debug("%s-%s rotation at %r", heavy, light, node.value)
            setattr(node, heavy, self._rotate(child, light))
        else:
            logger.debug("%s rotation at %r", light, node.value)
        return self._rotate(node, heavy)

    def _add(self, node: Optional[Node], value: T) -> Node:
        if node is None:
            return self.Node(value)

        if value == node.value:
            raise ValueAlreadyStored(value)

        if value < node.value:
            node.left = self._add(node.left, value)
        else:
            node.right = self._add(node.right, value)

        return self._rebalance(node)

    def add(self, value: T) -> None:
        self._root = self._add(self._root, value)
        self._size += 1

    def _detach_min(self, node: Node) -> Tuple[Node, Optional[Node]]:
        if node.left is None:
            return node, node.right
        minimum, node.left = self._detach_min(node.left)
        return minimum, self._rebalance(node)

    def _drop(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            raise ValueNotFound(value)

        if value == node.value:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            successor, node.right = self._detach_min(node.right)
            node.value = successor.value
        elif value < node.value:
            node.left = self._drop(node.left, value)
        else:
            node.right = self._drop(node.right, value)

        return self._rebalance(node)

    def drop_value(self, value: T) -> None:
        self._root = self._drop(self._root, value)
        self._size -= 1

    def _is_balanced(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        if abs(self._balance_factor(node)) > 1:
            return False
        return self._is_balanced(node.left) and self._is_balanced(node.right)

    def is_balanced(self) -> bool:
        return self._is_balanced(self._root)
