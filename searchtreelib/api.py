"""High-level API for SearchTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use
in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union

from .config import BalancingStrategy, TraversalOrder
from .core.node import TreeNode
from .core.traverser import create_traverser
from .tree import SearchTree

TreeLike = Union[SearchTree, TreeNode]


def build_tree(
    values: Iterable[Any],
    strategy: Union[BalancingStrategy, str] = BalancingStrategy.NONE,
) -> SearchTree:
    """Build a search tree from a non-empty sequence of values.

    Args:
        values: Values to insert, in insertion order
        strategy: Balancing strategy (none, avl, rbt)

    Returns:
        SearchTree holding the values

    Raises:
        EmptySequenceError: If values is empty

    Example:
        >>> tree = build_tree([3, 2, 1, 4, 5])
        >>> tree.to_list()
        [1, 2, 3, 4, 5]
    """
    return SearchTree.from_values(values, strategy=strategy)


def traverse_tree(
    tree: TreeLike,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Any]:
    """Yield the values of a tree in the given order.

    Args:
        tree: SearchTree or TreeNode to walk
        order: Traversal order (in, pre, post)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding values

    Yields:
        Values in traversal order

    Example:
        >>> list(traverse_tree(build_tree([3, 2, 1, 4, 5]), "pre"))
        [3, 2, 1, 4, 5]
    """
    root = _root_of(tree)
    if root is None:
        return
    traverser = create_traverser(order)
    for node, _ in traverser.traverse(root, max_depth=max_depth, min_depth=min_depth):
        yield node.value


def find_values(
    tree: TreeLike,
    predicate: Callable[[Any], bool],
    **kwargs
) -> Iterator[Any]:
    """Yield values that match a predicate.

    Args:
        tree: SearchTree or TreeNode to walk
        predicate: Function that returns True for matching values
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Matching values in traversal order
    """
    for value in traverse_tree(tree, **kwargs):
        if predicate(value):
            yield value


def count_nodes(tree: TreeLike, **kwargs) -> int:
    """Count the nodes of a tree within the traversal options.

    Args:
        tree: SearchTree or TreeNode to walk
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes visited
    """
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def get_leaf_values(tree: TreeLike) -> List[Any]:
    """Values of all leaf nodes, in ascending order."""
    root = _root_of(tree)
    if root is None:
        return []
    return [
        node.value
        for node, _ in create_traverser(TraversalOrder.IN_ORDER).traverse(root)
        if node.is_leaf
    ]


def get_tree_stats(tree: TreeLike) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: SearchTree or TreeNode to inspect

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(build_tree([3, 2, 1, 4, 5]))
        >>> stats['total_nodes'], stats['height'], stats['leaf_nodes']
        (5, 2, 2)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': -1,
        'minimum': None,
        'maximum': None,
        'depths': {},
    }

    root = _root_of(tree)
    if root is None:
        stats['internal_nodes'] = 0
        stats['is_degenerate'] = False
        return stats

    for node, depth in create_traverser(TraversalOrder.IN_ORDER).traverse(root):
        stats['total_nodes'] += 1

        if node.is_leaf:
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['minimum'] = root.minimum().value
    stats['maximum'] = root.maximum().value
    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    # Every level holds exactly one node, e.g. a tree built from sorted input
    stats['is_degenerate'] = stats['total_nodes'] > 2 and stats['height'] == stats['total_nodes'] - 1

    return stats


# Helper functions

def _root_of(tree: TreeLike) -> Optional[TreeNode]:
    """Return the root node of a SearchTree, or the node itself."""
    if isinstance(tree, SearchTree):
        return tree.root
    return tree
