from typing import TypeVar, List, Optional

from binary_search_tree import BinarySearchTree

T = TypeVar('T')


class CountingSearchTree(BinarySearchTree[T]):
    """Unbalanced search tree that keeps duplicates as a per-node count.

    Behaves as an ordered list: ``add`` never fails, traversals repeat each
    value as many times as it was stored and ``get_size`` counts every
    occurrence.
    """

    class Node(BinarySearchTree.Node):
        def __init__(self, value: T) -> None:
            super().__init__(value)
            self.count: int = 1

    def _add_duplicate(self, node: Node) -> None:
        node.count += 1

    def _drop_match(self, node: Node) -> Optional[Node]:
        if node.count > 1:
            node.count -= 1
            return node
        return super()._drop_match(node)

    def _adopt(self, node: Node, successor: Node) -> None:
        node.value = successor.value
        node.count = successor.count

    def _occurrences(self, node: Node) -> List[T]:
        return [node.value] * node.count

    def count(self, value: T) -> int:
        node = self._find_node(self._root, value)
        if node is None:
            return 0
        return node.count
