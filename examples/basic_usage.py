#!/usr/bin/env python3
"""Demo script for TernaryTreeLib.

Shows stable ordering of duplicates, removal during iteration, the
structural statistics helper and the decimal string parser.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from ternarytreelib import (
    ParseError,
    TernaryTree,
    case_insensitive_order,
    string_to_long,
    tree_stats,
)
from ternarytreelib.core import DepthFirstPreOrderTraverser
from ternarytreelib.testing import format_path


def demo_stable_ordering():
    """Equal values come back in insertion order."""
    print("\n=== Stable Ordering ===")
    tree = TernaryTree(case_insensitive_order)
    tree.extend(["banana", "Apple", "cherry", "apple", "BANANA", "APPLE"])
    print(f"Sorted: {list(tree)}")


def demo_remove_while_iterating():
    """Drop odd numbers in a single pass."""
    print("\n=== Remove While Iterating ===")
    tree = TernaryTree.create()
    tree.extend([1, 7, 3, 5, 0, 4, 1, 3, 3, 7, 4, 1, 4, 5, 3, 8, 8, 7, 8, 9, 1])
    print(f"Before: {list(tree)}")

    it = tree.iterator()
    while it.has_next():
        if it.next() % 2 == 1:
            it.remove()

    print(f"After:  {list(tree)} ({len(tree)} values)")


def demo_structure():
    """Print the node layout and summary statistics."""
    print("\n=== Tree Structure ===")
    tree = TernaryTree.create()
    tree.extend([5, 4, 9, 5, 7, 2, 2])

    for visit in DepthFirstPreOrderTraverser().traverse(tree.root):
        indent = "  " * visit.depth
        label = format_path(visit.path) or "root"
        print(f"{indent}{visit.node.value} [{label}]")

    stats = tree_stats(tree)
    print(f"\nHeight: {stats['height']}, distinct: {stats['distinct_values']}, "
          f"longest equal chain: {stats['longest_equal_chain']}")


def demo_parser():
    """Parse signed decimal strings with 64-bit wrap-around."""
    print("\n=== String Parsing ===")
    for text in ["1234", "-0004242", "9223372036854775808", "12-3"]:
        try:
            print(f"{text!r:>24} -> {string_to_long(text)}")
        except ParseError as e:
            print(f"{text!r:>24} -> error: {e}")


def main():
    demo_stable_ordering()
    demo_remove_while_iterating()
    demo_structure()
    demo_parser()
    return 0


if __name__ == "__main__":
    sys.exit(main())
