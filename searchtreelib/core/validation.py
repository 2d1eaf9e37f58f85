"""Structural invariant checks for SearchTreeLib trees.

These checks walk the whole tree and are meant for debugging, tests and
TreeConfig.check_invariants. They report problems instead of raising,
in the same style as TreeConfig.validate().
"""

from typing import Any, List, Optional, Set, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .node import TreeNode


def validate_tree(root: Optional['TreeNode'], expect_root: bool = True) -> List[str]:
    """Check ordering, parent linkage and ownership of a tree.

    Args:
        root: Node to start from (None is a valid, empty tree)
        expect_root: Require root to have no parent

    Returns:
        List of violations (empty if the tree is valid)
    """
    errors: List[str] = []
    if root is None:
        return errors

    if expect_root and root.parent is not None:
        errors.append(f"root {root.value!r} has a parent ({root.parent.value!r})")

    seen: Set[int] = set()
    # Entries are (node, exclusive lower bound, exclusive upper bound)
    stack: List[Tuple['TreeNode', Optional[Any], Optional[Any]]] = [(root, None, None)]

    while stack:
        node, lower, upper = stack.pop()

        # A node owned twice would be counted twice
        if id(node) in seen:
            errors.append(f"node {node.value!r} is reachable more than once")
            continue
        seen.add(id(node))

        if lower is not None and not lower < node.value:
            errors.append(f"node {node.value!r} is not greater than ancestor {lower!r}")
        if upper is not None and not node.value < upper:
            errors.append(f"node {node.value!r} is not less than ancestor {upper!r}")

        for child, side in ((node.left, "left"), (node.right, "right")):
            if child is None:
                continue
            if child.parent is not node:
                errors.append(
                    f"{side} child {child.value!r} of {node.value!r} does not link back to it"
                )

        if node.right is not None:
            stack.append((node.right, node.value, upper))
        if node.left is not None:
            stack.append((node.left, lower, node.value))

    return errors


def is_valid_tree(root: Optional['TreeNode']) -> bool:
    """Check if a tree satisfies all structural invariants."""
    return not validate_tree(root)
