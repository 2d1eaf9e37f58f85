"""Balancing strategies for SearchTreeLib.

A TreeBalancer decides how insert and remove change the structure of a
tree. The plain balancer implements an unbalanced binary search tree.
AVL and red-black balancers are declared so callers can select them
today, but they still route to the plain behavior.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Union, TYPE_CHECKING

from ..config import BalancingStrategy
from ..exceptions import UnknownStrategyError

if TYPE_CHECKING:
    from .node import TreeNode

logger = logging.getLogger(__name__)


class TreeBalancer(ABC):
    """Abstract base class for balancing strategies.

    Balancers own the mutation logic of a tree. Nodes delegate insert
    and remove to a balancer, so swapping the balancer changes how the
    structure evolves without touching navigation or traversal code.
    """

    strategy: BalancingStrategy

    @abstractmethod
    def insert(self, value: Any, tree: 'TreeNode') -> Optional['TreeNode']:
        """Insert a value into the subtree rooted at tree.

        Args:
            value: Value to insert
            tree: Root of the subtree to insert into

        Returns:
            The newly created node, or None if the value was already present
        """
        pass

    @abstractmethod
    def remove_node(self, node: 'TreeNode') -> Optional['TreeNode']:
        """Remove a node known to be in the tree.

        Args:
            node: The node to unlink

        Returns:
            The node that took its position, or None if the position is now empty
        """
        pass

    def remove(self, value: Any, tree: 'TreeNode') -> Optional['TreeNode']:
        """Remove a value from the subtree rooted at tree.

        Removing a value that is not present is a no-op.

        Args:
            value: Value to remove
            tree: Root of the subtree to search

        Returns:
            The replacement node, or None if nothing took the removed
            node's place (or nothing was removed)
        """
        node = tree.search(value)
        if node is None:
            logger.debug("Value %r not in tree, nothing to remove", value)
            return None
        return self.remove_node(node)

    def is_self_balancing(self) -> bool:
        """Check if this balancer actually rebalances the tree.

        Returns:
            True if insert/remove keep the tree height logarithmic
        """
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(strategy={self.strategy.value!r})"


class PlainBalancer(TreeBalancer):
    """Unbalanced binary search tree.

    The shape of the tree depends only on insertion order. Sorted input
    produces a degenerate, list-like tree.
    """

    strategy = BalancingStrategy.NONE

    def insert(self, value: Any, tree: 'TreeNode') -> Optional['TreeNode']:
        node = tree
        while True:
            if value == node.value:
                logger.debug("Value %r already in tree, ignoring insert", value)
                return None

            if value < node.value:
                if node.left is None:
                    node.left = type(node)(value)
                    node.left.parent = node
                    return node.left
                node = node.left
            else:
                if node.right is None:
                    node.right = type(node)(value)
                    node.right.parent = node
                    return node.right
                node = node.right

    def remove_node(self, node: 'TreeNode') -> Optional['TreeNode']:
        # Each node in the chain is replaced by the next one, which must
        # itself be removed first. The last one is a leaf.
        chain = [node]
        while True:
            replacement = self._replacement_for(chain[-1])
            if replacement is None:
                break
            chain.append(replacement)

        for i in range(len(chain) - 1, -1, -1):
            replacement = chain[i + 1] if i + 1 < len(chain) else None
            self._splice(chain[i], replacement)

        return chain[1] if len(chain) > 1 else None

    @staticmethod
    def _replacement_for(node: 'TreeNode') -> Optional['TreeNode']:
        """Successor if there is a right subtree, predecessor otherwise."""
        if node.right is not None:
            return node.right.minimum()
        if node.left is not None:
            return node.left.maximum()
        return None

    @staticmethod
    def _splice(node: 'TreeNode', replacement: Optional['TreeNode']) -> None:
        """Put an already detached replacement in node's position and detach node."""
        if replacement is not None:
            replacement.left = node.left
            replacement.right = node.right

        if node.left is not None:
            node.left.parent = replacement
        if node.right is not None:
            node.right.parent = replacement
        node.reconnect_parent_to(replacement)

        node.parent = None
        node.left = None
        node.right = None


class AVLBalancer(PlainBalancer):
    """AVL balancing extension point.

    Rotations are not implemented yet; inserts and removes behave like
    PlainBalancer.
    """

    strategy = BalancingStrategy.AVL
    _fallback_logged = False

    def __init__(self):
        if not AVLBalancer._fallback_logged:
            logger.debug("AVL rebalancing not implemented, using plain BST behavior")
            AVLBalancer._fallback_logged = True


class RedBlackBalancer(PlainBalancer):
    """Red-black balancing extension point.

    Recoloring and rotations are not implemented yet; inserts and
    removes behave like PlainBalancer.
    """

    strategy = BalancingStrategy.RED_BLACK
    _fallback_logged = False

    def __init__(self):
        if not RedBlackBalancer._fallback_logged:
            logger.debug("Red-black rebalancing not implemented, using plain BST behavior")
            RedBlackBalancer._fallback_logged = True


_BALANCERS = {
    BalancingStrategy.NONE: PlainBalancer,
    BalancingStrategy.AVL: AVLBalancer,
    BalancingStrategy.RED_BLACK: RedBlackBalancer,
}

_STRATEGY_ALIASES = {
    'none': BalancingStrategy.NONE,
    'plain': BalancingStrategy.NONE,
    'bst': BalancingStrategy.NONE,
    'avl': BalancingStrategy.AVL,
    'rbt': BalancingStrategy.RED_BLACK,
    'red_black': BalancingStrategy.RED_BLACK,
}


def parse_strategy(strategy: Union[BalancingStrategy, str]) -> BalancingStrategy:
    """Parse a balancing strategy from string or enum.

    Raises:
        UnknownStrategyError: If the name is not recognized
    """
    if isinstance(strategy, BalancingStrategy):
        return strategy

    strategy_lower = strategy.lower().replace('-', '_') if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[strategy_lower]

    raise UnknownStrategyError(
        f"Unknown balancing strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
    )


def create_balancer(strategy: Union[BalancingStrategy, str] = BalancingStrategy.NONE) -> TreeBalancer:
    """Create a balancer instance by strategy.

    Args:
        strategy: BalancingStrategy or one of its names (none, avl, rbt, ...)

    Returns:
        TreeBalancer instance

    Raises:
        UnknownStrategyError: If strategy name is not recognized
    """
    return _BALANCERS[parse_strategy(strategy)]()
