from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

import networkx as nx

from pipegraph.errors import DuplicateNodeError, NoSuchNodeError
from pipegraph.graph.graph_schema import Edge, Node


class Graph:
    """
    Authoritative in-memory graph: owns nodes by key.

    Edges live in the edge sets of their two endpoints. The graph is not
    synchronised; mutating it while a traversal or pipeline is being
    pulled is undefined behaviour.
    """

    def __init__(self) -> None:
        self._nodes: Dict[Any, Node] = {}

    # -------------------- Nodes --------------------

    def add(self, node: Node) -> Node:
        if node.key in self._nodes:
            raise DuplicateNodeError(node.key)

        self._nodes[node.key] = node
        logging.getLogger("pipegraph.graph").debug("added %r", node)
        return node

    def delete(self, node: Node) -> Node:
        """
        Removes the node, and every edge touching it from both endpoints.
        """
        if self._nodes.get(node.key) is not node:
            raise NoSuchNodeError(node)

        incident = list(node.edges("in")) + list(node.edges("out"))
        for edge in incident:
            edge.from_node.disconnect_via(edge)
            edge.to.disconnect_via(edge)

        del self._nodes[node.key]

        logging.getLogger("pipegraph.graph").debug(
            "deleted %r and %d incident edges", node, len(set(incident))
        )
        return node

    def node(self, key: Any) -> Optional[Node]:
        return self._nodes.get(key)

    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    # -------------------- Edges --------------------

    def edges(self) -> List[Edge]:
        """
        Every edge in the graph; each appears once, in its from node's
        out set.
        """
        return [edge for node in self._nodes.values() for edge in node.edges("out")]

    # -------------------- Algorithms --------------------

    def tsort(self, label: Any = None) -> List[Node]:
        from pipegraph.algorithms.tarjan import Tarjan

        return Tarjan(self, label).tsort()

    def strongly_connected_components(self, label: Any = None) -> List[List[Node]]:
        from pipegraph.algorithms.tarjan import Tarjan

        return Tarjan(self, label).strongly_connected_components()

    # -------------------- Export --------------------

    def to_networkx(
        self,
        edge_filter: Optional[Callable[[Edge], bool]] = None,
    ) -> nx.DiGraph:
        """
        Projects the graph onto a networkx DiGraph keyed by Node.

        Only out edges accepted by edge_filter become arcs; parallel edges
        with different labels collapse into one arc.
        """
        digraph = nx.DiGraph()
        digraph.add_nodes_from(self._nodes.values())

        for node in self._nodes.values():
            for edge in node.edges("out"):
                if edge_filter is None or edge_filter(edge):
                    digraph.add_edge(edge.from_node, edge.to)

        return digraph

    # -------------------- Analytics --------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Node) and self._nodes.get(node.key) is node

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} ({len(self._nodes)} nodes, "
            f"{len(self.edges())} edges)>"
        )
