"""Configuration system for SearchTreeLib.

This module defines how users specify the behavior of a tree: which
balancing strategy governs insertion and removal, which traversal order
is used by default, and whether invariants are checked after mutations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class BalancingStrategy(Enum):
    """How the tree keeps itself balanced on insert and remove.

    Only NONE is implemented. AVL and RED_BLACK are extension points
    that currently behave exactly like NONE.
    """
    NONE = "none"           # Plain, unbalanced BST
    AVL = "avl"             # AVL rotations (not yet implemented)
    RED_BLACK = "rbt"       # Red-black recoloring (not yet implemented)


class TraversalOrder(Enum):
    """Order in which traversals visit values."""
    IN_ORDER = "in"         # left, self, right
    PRE_ORDER = "pre"       # self, left, right
    POST_ORDER = "post"     # right, self, left


@dataclass
class TreeConfig:
    """Complete configuration for a SearchTree.

    Attributes:
        strategy: Balancing strategy used for insert and remove
        check_invariants: Validate ordering, parent links and single
            ownership of nodes after every mutation. Costs O(n) per
            mutation, meant for debugging and tests.
        default_order: Order used by SearchTree.traverse() when no
            order is passed explicitly
    """

    strategy: BalancingStrategy = BalancingStrategy.NONE
    check_invariants: bool = False
    default_order: TraversalOrder = TraversalOrder.IN_ORDER

    @classmethod
    def plain(cls) -> 'TreeConfig':
        """Create config for a plain BST with no extra checking."""
        return cls(strategy=BalancingStrategy.NONE)

    @classmethod
    def debug(cls, strategy: BalancingStrategy = BalancingStrategy.NONE) -> 'TreeConfig':
        """Create config that validates the tree after every mutation.

        Args:
            strategy: Balancing strategy to use

        Returns:
            TreeConfig with invariant checking enabled
        """
        return cls(strategy=strategy, check_invariants=True)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, BalancingStrategy):
            errors.append(f"strategy must be a BalancingStrategy, got {self.strategy!r}")

        if not isinstance(self.default_order, TraversalOrder):
            errors.append(f"default_order must be a TraversalOrder, got {self.default_order!r}")

        if not isinstance(self.check_invariants, bool):
            errors.append("check_invariants must be a bool")

        return errors
