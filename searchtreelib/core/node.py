"""TreeNode for SearchTreeLib.

A TreeNode is both a node and a handle to the subtree rooted at it. It
owns its left and right children; the parent link is a weak reference
used only for navigation and for reconnecting the tree during removal.

Mutation is delegated to a TreeBalancer, which keeps the balancing
policy separate from navigation and traversal.
"""

import functools
import weakref
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union

from ..config import BalancingStrategy, TraversalOrder
from ..exceptions import EmptySequenceError
from .balancer import create_balancer
from .traverser import create_traverser

T = TypeVar('T')
R = TypeVar('R')


class TreeNode(Generic[T]):
    """A node in a binary search tree.

    Every value in the left subtree is smaller than value and every
    value in the right subtree is larger. Duplicates are never stored.

    Example:
        >>> root = TreeNode.from_values([3, 2, 1, 4, 5])
        >>> root.to_list()
        [1, 2, 3, 4, 5]
        >>> str(root)
        '1<- 2<- 3 ->4 ->5'
    """

    def __init__(self, value: T) -> None:
        self.value: T = value
        self.left: Optional['TreeNode[T]'] = None
        self.right: Optional['TreeNode[T]'] = None
        self._parent: Optional[weakref.ref] = None

    @classmethod
    def from_values(cls,
                    values: Iterable[T],
                    strategy: Union[BalancingStrategy, str] = BalancingStrategy.NONE) -> 'TreeNode[T]':
        """Build a tree from values in sequence order.

        The first value becomes the root; the rest are inserted one by
        one, so insertion order determines the shape of the tree.

        Args:
            values: Values to insert, at least one
            strategy: Balancing strategy used for these inserts only;
                the returned node does not remember it

        Returns:
            The root node

        Raises:
            EmptySequenceError: If values is empty
        """
        iterator = iter(values)
        try:
            first = next(iterator)
        except StopIteration:
            raise EmptySequenceError("Cannot build a tree from an empty sequence") from None

        root = cls(first)
        balancer = create_balancer(strategy)
        for value in iterator:
            balancer.insert(value, root)
        return root

    # Links

    @property
    def parent(self) -> Optional['TreeNode[T]']:
        """The parent node, or None for a root (or if the parent is gone)."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: Optional['TreeNode[T]']) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def reconnect_parent_to(self, node: Optional['TreeNode[T]']) -> None:
        """Point this node's parent at node instead of at this node.

        Used when node takes over this node's position in the tree. If
        this node is a root, node becomes a root too.
        """
        parent = self.parent
        if parent is not None:
            if self.is_left_child:
                parent.left = node
            else:
                parent.right = node
        if node is not None:
            node.parent = parent

    # Derived attributes

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def is_left_child(self) -> bool:
        parent = self.parent
        return parent is not None and parent.left is self

    @property
    def is_right_child(self) -> bool:
        parent = self.parent
        return parent is not None and parent.right is self

    @property
    def has_left_child(self) -> bool:
        return self.left is not None

    @property
    def has_right_child(self) -> bool:
        return self.right is not None

    @property
    def has_any_child(self) -> bool:
        return self.left is not None or self.right is not None

    @property
    def has_both_children(self) -> bool:
        return self.left is not None and self.right is not None

    @property
    def count(self) -> int:
        """Number of nodes in this subtree, including this one."""
        return sum(1 for _ in create_traverser(TraversalOrder.PRE_ORDER).traverse(self))

    @property
    def height(self) -> int:
        """Edges on the longest path down to a leaf (0 for a leaf)."""
        return max(depth for _, depth in create_traverser(TraversalOrder.PRE_ORDER).traverse(self))

    @property
    def depth(self) -> int:
        """Edges on the path up to the root (0 for a root)."""
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    # Mutation

    def insert(self,
               value: T,
               strategy: Union[BalancingStrategy, str] = BalancingStrategy.NONE) -> Optional['TreeNode[T]']:
        """Insert value into this subtree.

        A bare node keeps no active strategy: strategy applies to this
        call only, including for a tree built by from_values with another
        strategy. SearchTree keeps one for the whole tree.

        Returns:
            The new node, or None if value was already present
        """
        return create_balancer(strategy).insert(value, self)

    def remove(self,
               value: T,
               strategy: Union[BalancingStrategy, str] = BalancingStrategy.NONE) -> Optional['TreeNode[T]']:
        """Remove value from this subtree.

        Removing an absent value is a no-op. If this node itself is
        removed it is fully detached, and the returned replacement (if
        any) is the root of what remains. As with insert, strategy
        applies to this call only.

        Returns:
            The node that took the removed node's position, or None
        """
        return create_balancer(strategy).remove(value, self)

    # Search

    def search(self, value: T) -> Optional['TreeNode[T]']:
        """Find the node holding value in this subtree.

        The returned node is a reference into the tree and may be
        detached by later removals.
        """
        node = self
        while node is not None:
            if value == node.value:
                return node
            node = node.right if value > node.value else node.left
        return None

    def contains(self, value: T) -> bool:
        return self.search(value) is not None

    def minimum(self) -> 'TreeNode[T]':
        """Leftmost node of this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node

    def maximum(self) -> 'TreeNode[T]':
        """Rightmost node of this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node

    # Traversal

    def traverse(self,
                 order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
                 max_depth: Optional[int] = None) -> Iterator[T]:
        """Yield values of this subtree in the given order."""
        for node, _ in create_traverser(order).traverse(self, max_depth=max_depth):
            yield node.value

    def traverse_in_order(self, visit: Callable[[T], Any]) -> None:
        """Call visit on every value: left subtree, this node, right subtree."""
        for value in self.traverse(TraversalOrder.IN_ORDER):
            visit(value)

    def traverse_pre_order(self, visit: Callable[[T], Any]) -> None:
        """Call visit on every value: this node, left subtree, right subtree."""
        for value in self.traverse(TraversalOrder.PRE_ORDER):
            visit(value)

    def traverse_post_order(self, visit: Callable[[T], Any]) -> None:
        """Call visit on every value: right subtree, this node, left subtree."""
        for value in self.traverse(TraversalOrder.POST_ORDER):
            visit(value)

    def map(self, transform: Callable[[T], R]) -> List[R]:
        """Apply transform to every value in in-order sequence."""
        return [transform(value) for value in self]

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """In-order values for which predicate is true."""
        return [value for value in self if predicate(value)]

    def reduce(self, initial: R, combine: Callable[[R, T], R]) -> R:
        """Left-fold combine over the in-order values.

        Exceptions raised by combine propagate to the caller.
        """
        return functools.reduce(combine, self, initial)

    def to_list(self) -> List[T]:
        """In-order values as a new list."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        return self.traverse(TraversalOrder.IN_ORDER)

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        # "<left><- value ->right" nested, flattened in order: the next
        # value is in the previous node's right subtree exactly when that
        # node has a right child.
        parts = []
        previous = None
        for node, _ in create_traverser(TraversalOrder.IN_ORDER).traverse(self):
            if previous is not None:
                parts.append(" ->" if previous.right is not None else "<- ")
            parts.append(f"{node.value}")
            previous = node
        return "".join(parts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"
