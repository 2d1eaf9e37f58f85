"""SearchTree handle for SearchTreeLib.

A TreeNode is a handle to its own subtree, but once the root itself is
removed the caller has to pick up the replacement. SearchTree does that
bookkeeping: it owns the current root, the configuration and the
balancer, and it can be empty.
"""

import dataclasses
import logging
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union

from .config import BalancingStrategy, TraversalOrder, TreeConfig
from .core.balancer import TreeBalancer, create_balancer, parse_strategy
from .core.node import TreeNode
from .core.validation import validate_tree
from .exceptions import (
    ConfigurationError,
    EmptySequenceError,
    EmptyTreeError,
    InvariantViolationError,
)

T = TypeVar('T')
R = TypeVar('R')

logger = logging.getLogger(__name__)


class SearchTree(Generic[T]):
    """Binary search tree with a stable handle.

    Example:
        >>> tree = SearchTree([3, 2, 1, 4, 5])
        >>> tree.remove(3)
        >>> tree.to_list()
        [1, 2, 4, 5]
        >>> 3 in tree
        False
    """

    def __init__(self,
                 values: Optional[Iterable[T]] = None,
                 *,
                 strategy: Union[BalancingStrategy, str, None] = None,
                 config: Optional[TreeConfig] = None):
        """Create a tree, optionally filled with values in sequence order.

        Args:
            values: Values to insert; None creates an empty tree
            strategy: Balancing strategy, overrides config.strategy
            config: Tree configuration (defaults to TreeConfig())

        Raises:
            ConfigurationError: If the configuration is invalid
            UnknownStrategyError: If strategy is not recognized
        """
        config = config if config is not None else TreeConfig()
        if strategy is not None:
            config = dataclasses.replace(config, strategy=parse_strategy(strategy))

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.config = config
        self._balancer: TreeBalancer = create_balancer(config.strategy)
        self._root: Optional[TreeNode[T]] = None

        if values is not None:
            for value in values:
                self.insert(value)

    @classmethod
    def from_values(cls,
                    values: Iterable[T],
                    *,
                    strategy: Union[BalancingStrategy, str, None] = None,
                    config: Optional[TreeConfig] = None) -> 'SearchTree[T]':
        """Build a tree from a non-empty sequence of values.

        Raises:
            EmptySequenceError: If values is empty
        """
        values = list(values)
        if not values:
            raise EmptySequenceError("Cannot build a tree from an empty sequence")
        return cls(values, strategy=strategy, config=config)

    @property
    def root(self) -> Optional[TreeNode[T]]:
        return self._root

    @property
    def strategy(self) -> BalancingStrategy:
        return self.config.strategy

    @property
    def balancer(self) -> TreeBalancer:
        return self._balancer

    @property
    def is_empty(self) -> bool:
        return self._root is None

    @property
    def count(self) -> int:
        return self._root.count if self._root is not None else 0

    @property
    def height(self) -> int:
        """Height of the root, -1 for an empty tree."""
        return self._root.height if self._root is not None else -1

    # Mutation

    def insert(self, value: T) -> Optional[TreeNode[T]]:
        """Insert value; inserting a present value is a no-op.

        Returns:
            The new node, or None if value was already present
        """
        if self._root is None:
            self._root = TreeNode(value)
            self._after_mutation()
            return self._root

        node = self._balancer.insert(value, self._root)
        if node is not None:
            self._after_mutation()
        return node

    def remove(self, value: T) -> None:
        """Remove value; removing an absent value is a no-op."""
        if self._root is None:
            logger.debug("Tree is empty, nothing to remove")
            return

        removing_root = self._root.value == value
        replacement = self._balancer.remove(value, self._root)
        if removing_root:
            self._root = replacement
        self._after_mutation()

    def clear(self) -> None:
        self._root = None

    def rebalance(self, strategy: Union[BalancingStrategy, str]) -> 'SearchTree[T]':
        """Build a new tree holding the same values under another strategy.

        The current in-order contents are inserted into a fresh tree
        using the new strategy. This tree is left untouched.

        Returns:
            The new tree
        """
        new_strategy = parse_strategy(strategy)
        logger.debug("Rebuilding %d values with strategy %s", self.count, new_strategy.value)
        config = dataclasses.replace(self.config, strategy=new_strategy)
        return SearchTree(self.to_list(), config=config)

    def validate(self) -> List[str]:
        """Check structural invariants.

        Returns:
            List of violations (empty if the tree is valid)
        """
        return validate_tree(self._root)

    def _after_mutation(self) -> None:
        if not self.config.check_invariants:
            return
        violations = self.validate()
        if violations:
            raise InvariantViolationError(violations)

    # Search

    def search(self, value: T) -> Optional[TreeNode[T]]:
        if self._root is None:
            return None
        return self._root.search(value)

    def contains(self, value: T) -> bool:
        return self.search(value) is not None

    def minimum(self) -> TreeNode[T]:
        """Node holding the smallest value.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self._root is None:
            raise EmptyTreeError("minimum of empty tree")
        return self._root.minimum()

    def maximum(self) -> TreeNode[T]:
        """Node holding the largest value.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self._root is None:
            raise EmptyTreeError("maximum of empty tree")
        return self._root.maximum()

    # Traversal

    def traverse(self,
                 order: Union[TraversalOrder, str, None] = None,
                 max_depth: Optional[int] = None) -> Iterator[T]:
        """Yield values in the given order (config.default_order if None)."""
        if self._root is None:
            return
        yield from self._root.traverse(order or self.config.default_order, max_depth=max_depth)

    def traverse_in_order(self, visit: Callable[[T], Any]) -> None:
        if self._root is not None:
            self._root.traverse_in_order(visit)

    def traverse_pre_order(self, visit: Callable[[T], Any]) -> None:
        if self._root is not None:
            self._root.traverse_pre_order(visit)

    def traverse_post_order(self, visit: Callable[[T], Any]) -> None:
        if self._root is not None:
            self._root.traverse_post_order(visit)

    def map(self, transform: Callable[[T], R]) -> List[R]:
        return self._root.map(transform) if self._root is not None else []

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return self._root.filter(predicate) if self._root is not None else []

    def reduce(self, initial: R, combine: Callable[[R, T], R]) -> R:
        if self._root is None:
            return initial
        return self._root.reduce(initial, combine)

    def to_list(self) -> List[T]:
        return self._root.to_list() if self._root is not None else []

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[T]:
        if self._root is None:
            return iter(())
        return iter(self._root)

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        return str(self._root) if self._root is not None else ""

    def __repr__(self) -> str:
        return f"SearchTree({self.to_list()!r}, strategy={self.strategy.value!r})"
