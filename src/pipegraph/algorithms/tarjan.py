from __future__ import annotations

import logging
from typing import Any, Callable, List, TYPE_CHECKING

import networkx as nx

from pipegraph.errors import CyclicError

if TYPE_CHECKING:
    from pipegraph.graph.graph_schema import Edge, Node
    from pipegraph.graph.graph_store import Graph


class Tarjan:
    """
    Strongly connected components and topological sort over a graph's out
    edges, optionally restricted to edges with a given label.

    The heavy lifting is done by networkx on a projection of the graph
    which contains only the permitted edges.
    """

    def __init__(self, graph: "Graph", label: Any = None) -> None:
        self.graph = graph
        self.label = label

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def strongly_connected_components(self) -> List[List["Node"]]:
        """
        Groups of mutually reachable nodes, in topological order of the
        groups; members keep the graph's node order. Nodes without a
        cyclic relationship form singleton groups.
        """
        digraph = self._digraph()
        condensed = nx.condensation(digraph)
        position = {node: index for index, node in enumerate(digraph.nodes)}

        members = {
            component: sorted(data["members"], key=position.__getitem__)
            for component, data in condensed.nodes(data=True)
        }
        order = nx.lexicographical_topological_sort(
            condensed, key=lambda component: position[members[component][0]]
        )
        components = [members[component] for component in order]

        logging.getLogger("pipegraph.algorithms").debug(
            "%d strongly connected components over %d nodes",
            len(components),
            len(position),
        )
        return components

    def tsort(self) -> List["Node"]:
        """
        Every node, ordered so that each permitted edge points from an
        earlier node to a later one. Self-loops are tolerated.

        Raises CyclicError if the permitted edges contain a cycle.
        """
        digraph = self._digraph()
        digraph.remove_edges_from(list(nx.selfloop_edges(digraph)))
        position = {node: index for index, node in enumerate(digraph.nodes)}

        try:
            return list(
                nx.lexicographical_topological_sort(digraph, key=position.__getitem__)
            )
        except nx.NetworkXUnfeasible as exc:
            cycle = nx.find_cycle(digraph)
            logging.getLogger("pipegraph.algorithms").warning(
                "tsort failed; cycle through %d nodes", len(cycle)
            )
            raise CyclicError(cycle) from exc

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _permitted(self, edge: "Edge") -> bool:
        return self.label is None or edge.label == self.label

    def _digraph(self) -> nx.DiGraph:
        return self.graph.to_networkx(self._permitted)


class FilteredTarjan(Tarjan):
    """
    Tarjan restricted to the edges for which predicate returns true.

    When filtering by label alone, Tarjan is the simpler choice.
    """

    def __init__(self, graph: "Graph", predicate: Callable[["Edge"], Any]) -> None:
        if not callable(predicate):
            raise TypeError("FilteredTarjan requires a callable edge predicate")

        super().__init__(graph)
        self.predicate = predicate

    def _permitted(self, edge: "Edge") -> bool:
        return bool(self.predicate(edge))
