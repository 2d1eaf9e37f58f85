"""Unit tests for TreeNode construction, navigation and search.

Covers the derived attributes (is_root, is_leaf, count, ...), the weak
parent link, and the descriptive rendering.
"""

import gc
import unittest
import weakref

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import TreeNode, EmptySequenceError


class TestConstruction(unittest.TestCase):
    """Test building nodes and trees."""

    def test_singleton_node(self):
        """A new node has no parent and no children."""
        node = TreeNode(42)
        self.assertEqual(node.value, 42)
        self.assertIsNone(node.parent)
        self.assertIsNone(node.left)
        self.assertIsNone(node.right)
        self.assertEqual(node.count, 1)

    def test_from_values_first_value_is_root(self):
        """The first value of the sequence becomes the root."""
        root = TreeNode.from_values([3, 2, 1, 4, 5])
        self.assertEqual(root.value, 3)
        self.assertEqual(root.left.value, 2)
        self.assertEqual(root.left.left.value, 1)
        self.assertEqual(root.right.value, 4)
        self.assertEqual(root.right.right.value, 5)

    def test_from_values_insertion_order_determines_shape(self):
        """Same values in another order give another shape."""
        root = TreeNode.from_values([1, 2, 3])
        self.assertIsNone(root.left)
        self.assertEqual(root.right.value, 2)
        self.assertEqual(root.right.right.value, 3)
        self.assertEqual(root.height, 2)

    def test_from_values_empty_raises(self):
        """Building from an empty sequence is a precondition violation."""
        with self.assertRaises(EmptySequenceError):
            TreeNode.from_values([])

    def test_empty_sequence_error_is_value_error(self):
        """EmptySequenceError can be caught as ValueError."""
        with self.assertRaises(ValueError):
            TreeNode.from_values(iter(()))

    def test_from_values_accepts_generators(self):
        root = TreeNode.from_values(v for v in [2, 1, 3])
        self.assertEqual(root.to_list(), [1, 2, 3])


class TestDerivedAttributes(unittest.TestCase):
    """Test computed attributes on the [3, 2, 1, 4, 5] tree."""

    def setUp(self):
        self.root = TreeNode.from_values([3, 2, 1, 4, 5])
        self.two = self.root.left
        self.one = self.two.left
        self.four = self.root.right
        self.five = self.four.right

    def test_is_root(self):
        self.assertTrue(self.root.is_root)
        self.assertFalse(self.two.is_root)
        self.assertFalse(self.five.is_root)

    def test_is_leaf(self):
        self.assertTrue(self.one.is_leaf)
        self.assertTrue(self.five.is_leaf)
        self.assertFalse(self.root.is_leaf)
        self.assertFalse(self.four.is_leaf)

    def test_is_left_and_right_child(self):
        self.assertTrue(self.two.is_left_child)
        self.assertFalse(self.two.is_right_child)
        self.assertTrue(self.four.is_right_child)
        self.assertFalse(self.four.is_left_child)
        self.assertFalse(self.root.is_left_child)
        self.assertFalse(self.root.is_right_child)

    def test_child_presence(self):
        self.assertTrue(self.root.has_both_children)
        self.assertTrue(self.root.has_any_child)
        self.assertTrue(self.four.has_right_child)
        self.assertFalse(self.four.has_left_child)
        self.assertFalse(self.four.has_both_children)
        self.assertTrue(self.two.has_left_child)
        self.assertFalse(self.two.has_right_child)
        self.assertFalse(self.one.has_any_child)

    def test_count(self):
        """count is the size of the subtree."""
        self.assertEqual(self.root.count, 5)
        self.assertEqual(self.two.count, 2)
        self.assertEqual(self.four.count, 2)
        self.assertEqual(self.five.count, 1)

    def test_height_and_depth(self):
        self.assertEqual(self.root.height, 2)
        self.assertEqual(self.four.height, 1)
        self.assertEqual(self.five.height, 0)
        self.assertEqual(self.root.depth, 0)
        self.assertEqual(self.four.depth, 1)
        self.assertEqual(self.five.depth, 2)

    def test_parent_links(self):
        self.assertIs(self.two.parent, self.root)
        self.assertIs(self.one.parent, self.two)
        self.assertIs(self.five.parent, self.four)


class TestParentLink(unittest.TestCase):
    """The parent link must not keep the parent alive."""

    def test_parent_is_weak(self):
        root = TreeNode.from_values([2, 1])
        child = root.left
        root_ref = weakref.ref(root)

        del root
        gc.collect()

        self.assertIsNone(root_ref())
        self.assertIsNone(child.parent)

    def test_children_are_owned(self):
        """Children stay alive as long as their parent does."""
        root = TreeNode.from_values([2, 1, 3])
        left_ref = weakref.ref(root.left)
        gc.collect()
        self.assertIsNotNone(left_ref())
        self.assertEqual(left_ref().value, 1)


class TestSearch(unittest.TestCase):
    """Test search, contains, minimum and maximum."""

    def setUp(self):
        self.root = TreeNode.from_values([3, 2, 1, 4, 5])

    def test_search_finds_node(self):
        node = self.root.search(1)
        self.assertIsNotNone(node)
        self.assertEqual(node.value, 1)
        self.assertIs(node, self.root.left.left)

    def test_search_root(self):
        self.assertIs(self.root.search(3), self.root)

    def test_search_missing_returns_none(self):
        self.assertIsNone(self.root.search(6))
        self.assertIsNone(self.root.search(0))
        self.assertIsNone(self.root.search(3.5))

    def test_search_is_limited_to_subtree(self):
        """Searching from a child only looks below it."""
        self.assertIsNone(self.root.left.search(4))

    def test_contains(self):
        self.assertTrue(self.root.contains(5))
        self.assertFalse(self.root.contains(6))
        self.assertIn(2, self.root)
        self.assertNotIn(7, self.root)

    def test_minimum_and_maximum(self):
        self.assertEqual(self.root.minimum().value, 1)
        self.assertEqual(self.root.maximum().value, 5)

    def test_minimum_and_maximum_of_subtree(self):
        self.assertEqual(self.root.right.minimum().value, 4)
        self.assertEqual(self.root.left.maximum().value, 2)

    def test_minimum_of_leaf_is_itself(self):
        leaf = self.root.search(5)
        self.assertIs(leaf.minimum(), leaf)
        self.assertIs(leaf.maximum(), leaf)

    def test_strings_are_ordered(self):
        root = TreeNode.from_values(["m", "c", "x", "a"])
        self.assertEqual(root.to_list(), ["a", "c", "m", "x"])
        self.assertEqual(root.search("c").left.value, "a")


class TestInsert(unittest.TestCase):
    """Test node-level insertion."""

    def test_insert_returns_new_node(self):
        root = TreeNode(10)
        node = root.insert(5)
        self.assertIsNotNone(node)
        self.assertEqual(node.value, 5)
        self.assertIs(root.left, node)
        self.assertIs(node.parent, root)

    def test_insert_duplicate_is_noop(self):
        root = TreeNode.from_values([10, 5, 15])
        self.assertIsNone(root.insert(5))
        self.assertIsNone(root.insert(10))
        self.assertEqual(root.count, 3)
        self.assertEqual(root.to_list(), [5, 10, 15])

    def test_insert_with_placeholder_strategy(self):
        """AVL strategy currently inserts like a plain BST."""
        root = TreeNode(1)
        root.insert(2, strategy="avl")
        root.insert(3, strategy="avl")
        self.assertEqual(root.height, 2)
        self.assertEqual(root.to_list(), [1, 2, 3])


class TestDescription(unittest.TestCase):
    """Test the debugging string rendering."""

    def test_description_of_sample_tree(self):
        root = TreeNode.from_values([3, 2, 1, 4, 5])
        self.assertEqual(str(root), "1<- 2<- 3 ->4 ->5")

    def test_description_of_balanced_tree(self):
        root = TreeNode.from_values([2, 1, 3])
        self.assertEqual(str(root), "1<- 2 ->3")

    def test_description_of_singleton(self):
        self.assertEqual(str(TreeNode(7)), "7")

    def test_repr(self):
        self.assertEqual(repr(TreeNode(7)), "TreeNode(value=7)")


if __name__ == '__main__':
    unittest.main()
