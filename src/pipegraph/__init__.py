"""
pipegraph
=========

An in-memory property graph with a lazy, pull-based query pipeline.

Core idea:
- Build a graph of keyed nodes and labelled edges, then query it by
  chaining small streaming stages.

Public API:
- Graph, Node, Edge, GraphBuilder
- BreadthFirst, DepthFirst
- Tarjan, FilteredTarjan
- dsl, DSL and the pipeline segments
- configure_logging
"""

import logging
from typing import Optional

from pipegraph.config import PipegraphConfig, get_config
from pipegraph.graph.graph_schema import Node, Edge
from pipegraph.graph.graph_store import Graph
from pipegraph.graph.graph_builder import GraphBuilder
from pipegraph.traversal import BreadthFirst, DepthFirst
from pipegraph.algorithms import Tarjan, FilteredTarjan
from pipegraph.pipeline import DSL, dsl


def configure_logging(config: Optional[PipegraphConfig] = None) -> logging.Logger:
    """
    Applies the configured level to the "pipegraph" logger. Handlers are
    left to the application.
    """
    config = config or get_config()
    logger = logging.getLogger("pipegraph")
    logger.setLevel(config.logging.level.upper())
    return logger


__all__ = [
    "Graph",
    "Node",
    "Edge",
    "GraphBuilder",
    "BreadthFirst",
    "DepthFirst",
    "Tarjan",
    "FilteredTarjan",
    "DSL",
    "dsl",
    "configure_logging",
]

__version__ = "0.1.0"
