"""Testing utilities for SearchTreeLib."""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']
