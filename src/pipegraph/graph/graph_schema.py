from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Literal, Optional, TYPE_CHECKING

from pipegraph.errors import DuplicateEdgeError, InvalidEdgeFilterError
from pipegraph.properties import Properties
from pipegraph.pipeline.dsl import dsl

if TYPE_CHECKING:
    from pipegraph.pipeline.dsl import DSL

Direction = Literal["in", "out"]
EdgePredicate = Callable[["Edge"], Any]


class Edge(Properties):
    """
    Directed connection from one node to another, with an optional label.

    Creating an Edge does not wire it into either node; use
    ``Node.connect_to`` or call ``Node.connect_via`` on both endpoints.
    """

    def __init__(
        self,
        from_node: "Node",
        to: "Node",
        label: Any = None,
        properties: Optional[Dict[Any, Any]] = None,
    ) -> None:
        self.from_node = from_node
        self.to = to
        self.label = label
        self.properties = properties

    @property
    def parent(self) -> "Node":
        return self.from_node

    @property
    def child(self) -> "Node":
        return self.to

    def similar(self, other: Optional["Edge"]) -> bool:
        """
        Two edges are similar when they share from node, to node and label.
        """
        return (
            other is not None
            and other.from_node is self.from_node
            and other.to is self.to
            and other.label == self.label
        )

    def nodes(self, direction: Direction, label: Any = None) -> "Node":
        # label is accepted so edges answer the same calls as nodes
        return self.to if direction == "out" else self.from_node

    def __str__(self) -> str:
        return f"{self.from_node.key!r} -{self.label!r}-> {self.to.key!r}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class Node(Properties):
    """
    Uniquely-keyed vertex holding properties and its in/out edge sets.

    Key uniqueness is checked when the node is added to a Graph, not on
    construction. Edge sets are insertion ordered.
    """

    def __init__(self, key: Any, properties: Optional[Dict[Any, Any]] = None) -> None:
        self.key = key
        self._in_edges: Dict[Edge, None] = {}
        self._out_edges: Dict[Edge, None] = {}

        if properties is not None:
            self.properties = properties

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def in_(self, label: Any = None) -> "DSL":
        """
        Nodes with an edge pointing at this node.
        """
        return dsl(self).in_(label)

    def out(self, label: Any = None) -> "DSL":
        """
        Nodes this node has an edge pointing to.
        """
        return dsl(self).out(label)

    def in_edges(
        self, label: Any = None, predicate: Optional[EdgePredicate] = None
    ) -> "DSL":
        return dsl(self).in_edges(label, predicate)

    def out_edges(
        self, label: Any = None, predicate: Optional[EdgePredicate] = None
    ) -> "DSL":
        return dsl(self).out_edges(label, predicate)

    def ancestors(self, label: Any = None) -> "DSL":
        """
        Every node reachable by walking in edges, nearest first.
        """
        return dsl(self).ancestors(label)

    def descendants(self, label: Any = None) -> "DSL":
        """
        Every node reachable by walking out edges, nearest first.
        """
        return dsl(self).descendants(label)

    def edges(
        self,
        direction: Direction,
        label: Any = None,
        predicate: Optional[EdgePredicate] = None,
    ) -> Iterator[Edge]:
        """
        Lazily yields the in or out edges, restricted to those with label
        or those for which predicate returns true.

        Raises InvalidEdgeFilterError when given both a label and a predicate.
        """
        if label is not None and predicate is not None:
            raise InvalidEdgeFilterError()
        if predicate is not None and not callable(predicate):
            raise TypeError(f"Edge predicate must be callable, got {predicate!r}")

        collection = self._in_edges if direction == "in" else self._out_edges
        return self._select(list(collection), label, predicate)

    @staticmethod
    def _select(
        edges: List[Edge], label: Any, predicate: Optional[EdgePredicate]
    ) -> Iterator[Edge]:
        for edge in edges:
            if predicate is not None:
                if predicate(edge):
                    yield edge
            elif label is None or edge.label == label:
                yield edge

    def nodes(self, direction: Direction, label: Any = None) -> Iterator["Node"]:
        for edge in self.edges(direction, label):
            yield edge.from_node if direction == "in" else edge.to

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def connect_to(
        self,
        target: "Node",
        label: Any = None,
        properties: Optional[Dict[Any, Any]] = None,
    ) -> Edge:
        """
        Creates an edge from this node to target and wires it into both.

        Raises DuplicateEdgeError, leaving neither node changed, if a
        similar edge already exists.
        """
        edge = Edge(self, target, label, properties)

        self.connect_via(edge)
        try:
            target.connect_via(edge)
        except DuplicateEdgeError:
            self.disconnect_via(edge)
            raise

        logging.getLogger("pipegraph.graph").debug("connected %s", edge)
        return edge

    def connect_via(self, edge: Edge) -> Edge:
        """
        Wires an existing edge into whichever of this node's edge sets
        match its endpoints. A loop edge goes into both.
        """
        targets = []
        if edge.to is self:
            targets.append(self._in_edges)
        if edge.from_node is self:
            targets.append(self._out_edges)

        for collection in targets:
            for other in collection:
                if other is not edge and edge.similar(other):
                    raise DuplicateEdgeError(self, edge)

        for collection in targets:
            collection[edge] = None

        return edge

    def disconnect_from(self, target: "Node", label: Any = None) -> None:
        """
        Removes out edges to target (optionally only those with label).
        Does nothing when no edge matches.
        """
        for edge in self.edges("out", label):
            if edge.to is target:
                self.disconnect_via(edge)
                target.disconnect_via(edge)

    def disconnect_via(self, edge: Edge) -> None:
        self._in_edges.pop(edge, None)
        self._out_edges.pop(edge, None)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} key={self.key!r}>"
