"""Tree traversal strategies for SearchTreeLib.

Traversers implement the different orders for walking a binary search
tree. They only read the tree; nothing here mutates links or values.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple, Union, TYPE_CHECKING

from ..config import TraversalOrder
from ..exceptions import UnknownTraversalError

if TYPE_CHECKING:
    from .node import TreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers walk a subtree and yield every node with its depth
    relative to the starting node. Subclasses decide the order in which
    a node and its two children are visited.
    """

    order: TraversalOrder

    @abstractmethod
    def traverse(self,
                 root: 'TreeNode',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['TreeNode', int]]:
        """Traverse the subtree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth


class InOrderTraverser(TreeTraverser):
    """In-order traversal: left subtree, node, right subtree.

    On a valid search tree this yields values in ascending order.
    """

    order = TraversalOrder.IN_ORDER

    def traverse(self,
                 root: 'TreeNode',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['TreeNode', int]]:
        """Traverse tree in order.

        Uses an explicit stack, so degenerate trees of any height work.
        """
        # Stack stores (node, depth) tuples whose left side is pending
        stack: List[Tuple['TreeNode', int]] = []
        node: Optional['TreeNode'] = root
        depth = 0

        while stack or node is not None:
            # Walk down the left spine
            while node is not None:
                stack.append((node, depth))
                node = node.left if self._should_explore(depth, max_depth) else None
                depth += 1

            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            node = node.right if self._should_explore(depth, max_depth) else None
            depth += 1


class PreOrderTraverser(TreeTraverser):
    """Pre-order traversal: node, left subtree, right subtree.

    Re-inserting values in this order reproduces the same tree shape.
    """

    order = TraversalOrder.PRE_ORDER

    def traverse(self,
                 root: 'TreeNode',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['TreeNode', int]]:
        stack: List[Tuple['TreeNode', int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            # Right goes on first so left is visited first
            if self._should_explore(depth, max_depth):
                if node.right is not None:
                    stack.append((node.right, depth + 1))
                if node.left is not None:
                    stack.append((node.left, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Post-order traversal as this library defines it: right subtree, node, left subtree.

    Note this is not the textbook left/right/node post-order. It walks
    the tree mirrored, so on a valid search tree values come out in
    descending order.
    """

    order = TraversalOrder.POST_ORDER

    def traverse(self,
                 root: 'TreeNode',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['TreeNode', int]]:
        stack: List[Tuple['TreeNode', int]] = []
        node: Optional['TreeNode'] = root
        depth = 0

        while stack or node is not None:
            # Walk down the right spine
            while node is not None:
                stack.append((node, depth))
                node = node.right if self._should_explore(depth, max_depth) else None
                depth += 1

            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            node = node.left if self._should_explore(depth, max_depth) else None
            depth += 1


_TRAVERSERS = {
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
}

_ORDER_ALIASES = {
    'in': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'pre': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from string or enum.

    Raises:
        UnknownTraversalError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    order_lower = order.lower().replace('-', '_') if isinstance(order, str) else str(order)
    if order_lower in _ORDER_ALIASES:
        return _ORDER_ALIASES[order_lower]

    raise UnknownTraversalError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


def create_traverser(order: Union[TraversalOrder, str]) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder or one of its names (in, pre, post, ...)

    Returns:
        TreeTraverser instance

    Raises:
        UnknownTraversalError: If order name is not recognized
    """
    return _TRAVERSERS[parse_order(order)]()
