import copy
import logging
from typing import TypeVar, Generic, Iterable, List, Iterator, Optional

from tree_errors import ValueAlreadyStored, ValueNotFound

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BinarySearchTree(Generic[T]):
    """Unbalanced binary search tree holding unique values in order.

    Insertion and deletion walk the tree with loops, so degenerate (sorted)
    input only costs time, never stack depth. Subclasses change behaviour
    through the ``Node`` class and the ``_add_duplicate``, ``_drop_match``,
    ``_adopt`` and ``_occurrences`` hooks.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

    def __init__(self) -> None:
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0

    @classmethod
    def from_collection(cls, collection: Iterable[T]) -> 'BinarySearchTree[T]':
        tree = cls()
        tree.add_all(collection)
        return tree

    def _add_duplicate(self, node: Node) -> None:
        raise ValueAlreadyStored(node.value)

    def add(self, value: T) -> None:
        """Insert ``value``.

        Raises:
            ValueAlreadyStored: if the value is already in the tree. The tree
                is left exactly as it was.
        """
        if self._root is None:
            self._root = self.Node(value)
            self._size += 1
            return

        node = self._root
        while True:
            if value == node.value:
                self._add_duplicate(node)
                break
            if value < node.value:
                if node.left is None:
                    node.left = self.Node(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = self.Node(value)
                    break
                node = node.right
        self._size += 1

    def add_all_skipping_duplicates(self, collection: Iterable[T]) -> None:
        for value in collection:
            try:
                self.add(value)
            except ValueAlreadyStored:
                logger.debug("skipping duplicate value %r", value)

    def add_all(self, collection: Iterable[T]) -> None:
        self.add_all_skipping_duplicates(collection)

    def _adopt(self, node: Node, successor: Node) -> None:
        node.value = successor.value

    def _drop_match(self, node: Node) -> Optional[Node]:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left

        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        if successor_parent is node:
            node.right = successor.right
        else:
            successor_parent.left = successor.right
        self._adopt(node, successor)
        return node

    def drop_value(self, value: T) -> None:
        """Remove ``value``.

        Raises:
            ValueNotFound: if the value is not in the tree. The tree is left
                exactly as it was.
        """
        parent: Optional[BinarySearchTree.Node] = None
        node = self._root
        is_left_child = False

        while node is not None and not value == node.value:
            parent = node
            if value < node.value:
                node = node.left
                is_left_child = True
            else:
                node = node.right
                is_left_child = False

        if node is None:
            raise ValueNotFound(value)

        replacement = self._drop_match(node)
        if parent is None:
            self._root = replacement
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1

    def _occurrences(self, node: Node) -> List[T]:
        return [node.value]

    def contains(self, value: T) -> bool:
        return self._find_node(self._root, value) is not None

    def least_value(self) -> Optional[T]:
        if self._root is None:
            return None
        return self._find_extreme(self._root, 'left').value

    def greatest_value(self) -> Optional[T]:
        if self._root is None:
            return None
        return self._find_extreme(self._root, 'right').value

    def get_size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def _height(self, node: Optional[Node]) -> int:
        height = 0
        level = [node] if node is not None else []
        while level:
            height += 1
            level = [child for n in level for child in (n.left, n.right) if child is not None]
        return height

    def height(self) -> int:
        return self._height(self._root)

    def _in_order(self, first: str, second: str) -> List[T]:
        result: List[T] = []
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = getattr(node, first)
            node = stack.pop()
            result.extend(self._occurrences(node))
            node = getattr(node, second)
        return result

    def as_vec(self) -> List[T]:
        return self.as_vec_l_to_r()

    def as_vec_l_to_r(self) -> List[T]:
        return self._in_order('left', 'right')

    def as_vec_r_to_l(self) -> List[T]:
        return self._in_order('right', 'left')

    def _root_first(self, first: str, second: str) -> List[T]:
        result: List[T] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.extend(self._occurrences(node))
            for child in (getattr(node, second), getattr(node, first)):
                if child is not None:
                    stack.append(child)
        return result

    def pre_order(self) -> List[T]:
        return self._root_first('left', 'right')

    def post_order(self) -> List[T]:
        result = self._root_first('right', 'left')
        result.reverse()
        return result

    def copy(self) -> 'BinarySearchTree[T]':
        """Return an independent tree with the same shape and node payloads."""
        clone = type(self)()
        clone._size = self._size
        if self._root is None:
            return clone

        clone._root = copy.copy(self._root)
        stack = [clone._root]
        while stack:
            node = stack.pop()
            if node.left is not None:
                node.left = copy.copy(node.left)
                stack.append(node.left)
            if node.right is not None:
                node.right = copy.copy(node.right)
                stack.append(node.right)
        return clone

    def _find_node(self, node: Optional[Node], value: T) -> Optional[Node]:
        while node is not None:
            if value == node.value:
                return node
            if value < node.value:
                node = node.left
            else:
                node = node.right
        return None

    def _find_extreme(self, node: Node, side: str) -> Node:
        while getattr(node, side) is not None:
            node = getattr(node, side)
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.as_vec_l_to_r())

    def __reversed__(self) -> Iterator[T]:
        return iter(self.as_vec_r_to_l())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_vec_l_to_r()})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, height={self.height()})"
