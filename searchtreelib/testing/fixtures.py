"""Test fixtures for SearchTreeLib consumers.

These fixtures provide controlled access to tree structure for testing
purposes without making structural details part of the public API.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from ..config import TraversalOrder
from ..core.node import TreeNode
from ..core.traverser import create_traverser
from ..core.validation import validate_tree
from ..tree import SearchTree


class TreeTestHelper:
    """Public test fixture for tree structure verification.

    Example:
        tree = SearchTree([3, 2, 1, 4, 5])
        helper = TreeTestHelper(tree)

        helper.assert_valid()
        assert helper.shape() == [(3, 0), (2, 1), (1, 2), (4, 1), (5, 2)]
        assert helper.parent_of(1) == 2
    """

    def __init__(self, tree: Union[SearchTree, TreeNode]):
        """Initialize with a SearchTree or a root TreeNode.

        Args:
            tree: The tree to inspect
        """
        self._tree = tree

    @property
    def root(self) -> Optional[TreeNode]:
        if isinstance(self._tree, SearchTree):
            return self._tree.root
        return self._tree

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - count: Number of nodes
            - height: Height of the root (-1 when empty)
            - values: In-order values
            - is_valid: Whether all invariants hold
        """
        root = self.root
        if root is None:
            return {'count': 0, 'height': -1, 'values': [], 'is_valid': True}

        return {
            'count': root.count,
            'height': root.height,
            'values': root.to_list(),
            'is_valid': not validate_tree(root),
        }

    def shape(self) -> List[Tuple[Any, int]]:
        """Pre-order (value, depth) pairs, enough to pin down the exact shape."""
        root = self.root
        if root is None:
            return []
        return [
            (node.value, depth)
            for node, depth in create_traverser(TraversalOrder.PRE_ORDER).traverse(root)
        ]

    def parent_of(self, value: Any) -> Optional[Any]:
        """Value of the parent of the node holding value.

        Returns:
            Parent value, or None if value is the root or not present
        """
        root = self.root
        node = root.search(value) if root is not None else None
        if node is None or node.parent is None:
            return None
        return node.parent.value

    def assert_valid(self) -> None:
        """Assert that all structural invariants hold.

        Raises:
            AssertionError: Listing every violation found
        """
        violations = validate_tree(self.root)
        if violations:
            raise AssertionError("Tree invariants violated:\n  " + "\n  ".join(violations))
