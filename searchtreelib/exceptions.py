"""Exceptions raised by SearchTreeLib.

Duplicate inserts and removals of absent values are not errors; they are
silent no-ops. Exceptions raised by caller-supplied visitors, predicates
and combiners are never wrapped or swallowed.
"""


class TreeError(Exception):
    """Base exception for SearchTreeLib errors."""
    pass


class EmptySequenceError(TreeError, ValueError):
    """Raised when a tree is built from an empty sequence of values."""
    pass


class EmptyTreeError(TreeError, ValueError):
    """Raised when an operation needs at least one node but the tree is empty."""
    pass


class UnknownStrategyError(TreeError, ValueError):
    """Raised when a balancing strategy name is not recognized."""
    pass


class UnknownTraversalError(TreeError, ValueError):
    """Raised when a traversal order name is not recognized."""
    pass


class ConfigurationError(TreeError):
    """Raised when a TreeConfig fails validation."""
    pass


class InvariantViolationError(TreeError):
    """Raised when invariant checking is enabled and a mutation corrupted the tree."""

    def __init__(self, violations):
        self.violations = list(violations)
        super().__init__(f"Tree invariants violated: {'; '.join(self.violations)}")
