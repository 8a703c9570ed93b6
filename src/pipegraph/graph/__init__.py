"""
Graph subsystem for pipegraph.

Defines the core graph abstractions:
- keyed nodes with in/out edge sets
- labelled, directed edges with similarity-based duplicate detection
- the graph which owns nodes and cascades deletions
"""

from pipegraph.graph.graph_schema import Node, Edge
from pipegraph.graph.graph_store import Graph
from pipegraph.graph.graph_builder import GraphBuilder

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "GraphBuilder",
]
