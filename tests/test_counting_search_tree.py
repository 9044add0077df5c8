import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from counting_search_tree import CountingSearchTree
from tree_errors import ValueNotFound


class TestCountingSearchTree(unittest.TestCase):

    def test_new_tree_is_empty(self):
        tree = CountingSearchTree()
        self.assertEqual(tree.get_size(), 0)
        self.assertEqual(tree.as_vec(), [])
        self.assertEqual(tree.count(1), 0)

    def test_add_in_order(self):
        tree = CountingSearchTree()
        tree.add(2)
        tree.add(1)
        tree.add(3)
        self.assertEqual(tree.get_size(), 3)
        self.assertEqual(tree.as_vec(), [1, 2, 3])

    def test_duplicates_are_counted(self):
        tree = CountingSearchTree.from_collection([3, 3, 2, 2, 1, 1])
        self.assertEqual(tree.get_size(), 6)
        self.assertEqual(tree.as_vec(), [1, 1, 2, 2, 3, 3])
        self.assertEqual(tree.as_vec_r_to_l(), [3, 3, 2, 2, 1, 1])
        self.assertEqual(tree.count(2), 2)
        self.assertTrue(tree.contains(2))
        self.assertEqual(tree.height(), 3)

    def test_add_all_keeps_duplicates(self):
        tree = CountingSearchTree()
        tree.add_all([5, 5, 5])
        self.assertEqual(tree.get_size(), 3)
        self.assertEqual(tree.count(5), 3)
        self.assertIsNone(tree._root.left)
        self.assertIsNone(tree._root.right)

    def test_drop_decrements_count(self):
        tree = CountingSearchTree.from_collection([4, 4, 2])
        tree.drop_value(4)
        self.assertEqual(tree.count(4), 1)
        self.assertEqual(tree.get_size(), 2)
        self.assertEqual(tree._root.value, 4)
        tree.drop_value(4)
        self.assertFalse(tree.contains(4))
        self.assertEqual(tree._root.value, 2)
        self.assertEqual(tree.get_size(), 1)

    def test_drop_two_children_moves_successor_count(self):
        tree = CountingSearchTree.from_collection([5, 3, 8, 7, 7, 7, 9])
        tree.drop_value(5)
        self.assertEqual(tree._root.value, 7)
        self.assertEqual(tree.count(7), 3)
        self.assertEqual(tree.as_vec(), [3, 7, 7, 7, 8, 9])
        self.assertEqual(tree.get_size(), 6)

    def test_drop_absent_raises(self):
        tree = CountingSearchTree.from_collection([1, 1])
        with self.assertRaises(ValueNotFound):
            tree.drop_value(2)
        self.assertEqual(tree.get_size(), 2)
        self.assertEqual(tree.count(1), 2)

    def test_least_and_greatest(self):
        tree = CountingSearchTree.from_collection([2, 9, 9, -4])
        self.assertEqual(tree.least_value(), -4)
        self.assertEqual(tree.greatest_value(), 9)

    def test_copy_keeps_counts(self):
        tree = CountingSearchTree.from_collection([2, 1, 2, 3, 3, 3])
        clone = tree.copy()
        self.assertIsInstance(clone, CountingSearchTree)
        self.assertEqual(clone.as_vec(), tree.as_vec())
        self.assertEqual(clone.get_size(), 6)
        tree.drop_value(3)
        self.assertEqual(clone.count(3), 3)

    def test_copy_keeps_shape_and_counts(self):
        tree = CountingSearchTree.from_collection([5, 2, 8, 2, 9, 9, 1])
        clone = tree.copy()
        self.assertEqual(clone._root.value, 5)
        self.assertEqual(clone._root.left.value, 2)
        self.assertEqual(clone._root.left.count, 2)
        self.assertEqual(clone._root.right.right.count, 2)
        self.assertEqual(clone.pre_order(), tree.pre_order())
        clone.drop_value(2)
        self.assertEqual(tree.count(2), 2)
        self.assertEqual(clone.count(2), 1)

    def test_long_sorted_chain(self):
        tree = CountingSearchTree.from_collection(range(5000))
        tree.add(4999)
        self.assertEqual(tree.get_size(), 5001)
        self.assertEqual(tree.height(), 5000)
        self.assertEqual(tree.count(4999), 2)
        tree.drop_value(4999)
        tree.drop_value(4999)
        self.assertFalse(tree.contains(4999))
        self.assertEqual(tree.get_size(), 4999)
        self.assertEqual(tree.greatest_value(), 4998)

    def test_dunder_methods(self):
        tree = CountingSearchTree.from_collection([1, 2, 2])
        self.assertEqual(len(tree), 3)
        self.assertIn(2, tree)
        self.assertEqual(list(tree), [1, 2, 2])
        self.assertEqual(repr(tree), "CountingSearchTree([1, 2, 2])")


if __name__ == "__main__":
    unittest.main()
