"""Core building blocks for TernaryTreeLib.

This module contains the node, slot and iterator types the TernaryTree
facade is assembled from, plus structural traversers.
"""

from .slot import NodeSlot
from .node import Branch, NodeView, TernaryNode
from .iterator import InOrderIterator, IteratorState
from .traversal import (
    NodeVisit,
    NodeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    create_traverser,
)

__all__ = [
    "NodeSlot",
    "Branch",
    "TernaryNode",
    "NodeView",
    "InOrderIterator",
    "IteratorState",
    "NodeVisit",
    "NodeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "create_traverser",
]
