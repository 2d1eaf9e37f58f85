#!/usr/bin/env python3
"""
Basic search tree usage.

This example demonstrates:
- Building a tree from a sequence
- Searching and the three traversal orders
- map / filter / reduce over the values
- Removing values, including the root
"""

import logging
import operator
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import SearchTree, get_tree_stats


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sequence = [3, 2, 1, 4, 5]
    print(f"Building tree from {sequence}")
    tree = SearchTree.from_values(sequence)
    print(f"  {tree}")

    print(f"\nsearch(1) -> {tree.search(1)!r}")
    print(f"search(6) -> {tree.search(6)!r}")

    for name, traverse in (("in-order", tree.traverse_in_order),
                           ("pre-order", tree.traverse_pre_order),
                           ("post-order", tree.traverse_post_order)):
        values = []
        traverse(values.append)
        print(f"{name:>10}: {values}")

    print(f"\nmap(+1):      {tree.map(lambda v: v + 1)}")
    print(f"filter(odd):  {tree.filter(lambda v: v % 2 != 0)}")
    print(f"reduce(+):    {tree.reduce(0, operator.add)}")

    tree.insert(3)  # duplicate, ignored
    tree.remove(3)
    tree.remove(1)
    tree.remove(42)  # absent, ignored
    print(f"\nAfter removing 3 and 1: {tree.to_list()}  ({tree})")

    stats = get_tree_stats(tree)
    print(f"Nodes: {stats['total_nodes']}, height: {stats['height']}, leaves: {stats['leaf_nodes']}")

    rebuilt = tree.rebalance("avl")
    print(f"\nRebuilt with {rebuilt.strategy.value}: {rebuilt!r}")


if __name__ == "__main__":
    main()
