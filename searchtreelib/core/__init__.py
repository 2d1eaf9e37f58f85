"""Core abstractions for SearchTreeLib.

This package contains the node type, the traversal strategies and the
balancing strategies that define how a tree is walked and mutated.
"""

from .node import TreeNode
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
    parse_order,
)
from .balancer import (
    TreeBalancer,
    PlainBalancer,
    AVLBalancer,
    RedBlackBalancer,
    create_balancer,
    parse_strategy,
)
from .validation import validate_tree, is_valid_tree

__all__ = [
    "TreeNode",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
    "parse_order",
    "TreeBalancer",
    "PlainBalancer",
    "AVLBalancer",
    "RedBlackBalancer",
    "create_balancer",
    "parse_strategy",
    "validate_tree",
    "is_valid_tree",
]
