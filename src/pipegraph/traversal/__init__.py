"""
Cycle-safe graph walks.
"""

from pipegraph.traversal.base import Traversal, ADJACENCY
from pipegraph.traversal.breadth_first import BreadthFirst
from pipegraph.traversal.depth_first import DepthFirst

STRATEGIES = {
    "breadth_first": BreadthFirst,
    "depth_first": DepthFirst,
}

__all__ = [
    "Traversal",
    "BreadthFirst",
    "DepthFirst",
    "ADJACENCY",
    "STRATEGIES",
]
