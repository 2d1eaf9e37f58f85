"""SearchTreeLib - Binary Search Trees with Pluggable Balancing.

SearchTreeLib provides a binary search tree whose insert and remove
behavior is delegated to a balancing strategy, plus traversal, search
and functional helpers (map, filter, reduce) over its values.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from searchtreelib import SearchTree

    tree = SearchTree([3, 2, 1, 4, 5])
    tree.remove(3)
    tree.to_list()      # [1, 2, 4, 5]
━━━━━━━━━━━━━━━━━━━━━━━━━━

Use TreeNode directly when you want to work with subtrees and handle
root replacement yourself.
"""

__version__ = "0.1.0"

from .config import BalancingStrategy, TraversalOrder, TreeConfig
from .exceptions import (
    TreeError,
    EmptySequenceError,
    EmptyTreeError,
    UnknownStrategyError,
    UnknownTraversalError,
    ConfigurationError,
    InvariantViolationError,
)
from .core.node import TreeNode
from .core.traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)
from .core.balancer import (
    TreeBalancer,
    PlainBalancer,
    AVLBalancer,
    RedBlackBalancer,
    create_balancer,
)
from .core.validation import validate_tree, is_valid_tree
from .tree import SearchTree
from .api import (
    build_tree,
    traverse_tree,
    find_values,
    count_nodes,
    get_leaf_values,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Config
    "BalancingStrategy",
    "TraversalOrder",
    "TreeConfig",
    # Exceptions
    "TreeError",
    "EmptySequenceError",
    "EmptyTreeError",
    "UnknownStrategyError",
    "UnknownTraversalError",
    "ConfigurationError",
    "InvariantViolationError",
    # Core
    "TreeNode",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
    "TreeBalancer",
    "PlainBalancer",
    "AVLBalancer",
    "RedBlackBalancer",
    "create_balancer",
    "validate_tree",
    "is_valid_tree",
    "SearchTree",
    # API
    "build_tree",
    "traverse_tree",
    "find_values",
    "count_nodes",
    "get_leaf_values",
    "get_tree_stats",
]
