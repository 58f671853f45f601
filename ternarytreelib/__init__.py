"""TernaryTreeLib - Ordered multiset on a ternary search tree.

Each node holds one value and three subtrees for values comparing less
than, equal to, and greater than it. Equal values are all kept and come
back in insertion order.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from ternarytreelib import TernaryTree

    tree = TernaryTree.create()
    tree.extend([5, 4, 9, 5, 7, 2, 2])
    tree.delete(5)
    for value in tree:
        ...
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .tree import TernaryTree
from .core import (
    NodeSlot,
    Branch,
    TernaryNode,
    NodeView,
    InOrderIterator,
    IteratorState,
)
from .config import TreeConfig, OrderingSource
from .ordering import (
    Comparison,
    Ordering,
    compare,
    natural_order,
    key_order,
    reversed_order,
    case_insensitive_order,
)
from .errors import (
    TernaryTreeError,
    InvalidValueError,
    IteratorStateError,
    DetachedNodeError,
    ConfigurationError,
    ParseError,
)
from .api import build_tree, stable_sorted, remove_matching, tree_stats
from .strutil import string_to_long, LONG_MIN, LONG_MAX

__all__ = [
    "__version__",
    # Tree
    "TernaryTree",
    "NodeSlot",
    "Branch",
    "TernaryNode",
    "NodeView",
    "InOrderIterator",
    "IteratorState",
    # Config
    "TreeConfig",
    "OrderingSource",
    # Ordering
    "Comparison",
    "Ordering",
    "compare",
    "natural_order",
    "key_order",
    "reversed_order",
    "case_insensitive_order",
    # Errors
    "TernaryTreeError",
    "InvalidValueError",
    "IteratorStateError",
    "DetachedNodeError",
    "ConfigurationError",
    "ParseError",
    # API
    "build_tree",
    "stable_sorted",
    "remove_matching",
    "tree_stats",
    # Utilities
    "string_to_long",
    "LONG_MIN",
    "LONG_MAX",
]
