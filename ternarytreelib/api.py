"""High-level API for TernaryTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use
in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

from .config import TreeConfig
from .core.node import Branch
from .core.traversal import BreadthFirstTraverser
from .ordering import Ordering
from .tree import TernaryTree

T = TypeVar("T")


def build_tree(
    values: Iterable[T],
    ordering: Optional[Ordering] = None,
    *,
    key: Optional[Callable[[Any], Any]] = None,
    reverse: bool = False,
) -> TernaryTree:
    """Create a tree and insert ``values`` in order.

    Args:
        values: Values to insert (None is rejected)
        ordering: Explicit cmp-style ordering
        key: Key function, mutually exclusive with ordering
        reverse: Order descending

    Returns:
        Populated TernaryTree

    Raises:
        ConfigurationError: If both ordering and key are given
        InvalidValueError: If any value is None

    Example:
        >>> tree = build_tree(["pear", "fig", "apple"], key=len)
        >>> list(tree)
        ['fig', 'pear', 'apple']
    """
    tree = TernaryTree.from_config(TreeConfig(ordering=ordering, key=key, reverse=reverse))
    tree.extend(values)
    return tree


def stable_sorted(
    values: Iterable[T],
    ordering: Optional[Ordering] = None,
    *,
    key: Optional[Callable[[Any], Any]] = None,
    reverse: bool = False,
) -> List[T]:
    """Sort values through a ternary tree.

    Values comparing equal keep their input order, including when
    ``reverse`` is set.

    Example:
        >>> stable_sorted(["b", "A", "a", "B"], key=str.lower)
        ['A', 'a', 'b', 'B']
    """
    return list(build_tree(values, ordering, key=key, reverse=reverse))


def remove_matching(tree: TernaryTree, predicate: Callable[[Any], bool]) -> int:
    """Remove every value matching ``predicate`` in one forward pass.

    Cheaper than repeated delete() calls when many values go, because each
    removal acts on the node in hand instead of searching from the root.

    Args:
        tree: Tree to prune
        predicate: Returns True for values to remove

    Returns:
        Number of values removed

    Example:
        >>> tree = build_tree([1, 2, 3, 4])
        >>> remove_matching(tree, lambda v: v % 2)
        2
        >>> list(tree)
        [2, 4]
    """
    removed = 0
    it = tree.iterator()
    while it.has_next():
        if predicate(it.next()):
            it.remove()
            removed += 1
    return removed


def tree_stats(tree: TernaryTree) -> Dict[str, Any]:
    """Get statistics about a tree's shape.

    Returns:
        Dictionary with:
        - total_nodes: Number of stored values
        - distinct_values: Number of equal-chain heads
        - leaf_nodes: Nodes with no children
        - height: Number of levels (0 for an empty tree)
        - longest_equal_chain: Most values sharing one equal chain
        - depths: Mapping of depth to node count

    Example:
        >>> stats = tree_stats(build_tree([5, 4, 9, 5, 7, 2, 2]))
        >>> stats['height'], stats['distinct_values']
        (4, 5)
    """
    stats = {
        'total_nodes': 0,
        'distinct_values': 0,
        'leaf_nodes': 0,
        'height': 0,
        'longest_equal_chain': 0,
        'depths': {}
    }

    for visit in BreadthFirstTraverser().traverse(tree.root):
        stats['total_nodes'] += 1

        if visit.node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], visit.depth + 1)

        if visit.depth not in stats['depths']:
            stats['depths'][visit.depth] = 0
        stats['depths'][visit.depth] += 1

        if visit.branch is not Branch.EQUAL:
            stats['distinct_values'] += 1
            chain = 0
            node = visit.node
            while node is not None:
                chain += 1
                node = node.equal
            stats['longest_equal_chain'] = max(stats['longest_equal_chain'], chain)

    return stats
