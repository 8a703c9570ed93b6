from __future__ import annotations

from typing import Any, List, Tuple


class PipegraphError(Exception):
    """
    Base class for every error raised by pipegraph.
    """


class DuplicateNodeError(PipegraphError):
    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Graph already has a node with the key {key!r}")


class NoSuchNodeError(PipegraphError):
    def __init__(self, node: Any) -> None:
        self.node = node
        super().__init__(f"Graph does not contain {node!r}")


class DuplicateEdgeError(PipegraphError):
    """
    Raised when connecting an edge to a node which already holds a similar
    edge (same from node, to node and label).
    """

    def __init__(self, node: Any, edge: Any) -> None:
        self.node = node
        self.edge = edge
        super().__init__(
            f"Another edge '{edge}' already exists on {node!r}"
        )


class InvalidPropertiesError(PipegraphError):
    def __init__(self, model: Any, properties: Any) -> None:
        self.model = model
        self.properties = properties
        super().__init__(
            f"Tried to assign properties {properties!r} on {model!r} - "
            "it must be a dict, or None."
        )


class CyclicError(PipegraphError):
    """
    Raised when topologically sorting a graph which contains a cycle.

    The offending cycle is kept as a list of (from, to) node pairs; the
    underlying networkx failure is chained as ``__cause__``.
    """

    def __init__(self, cycle: List[Tuple[Any, Any]]) -> None:
        self.cycle = cycle
        path = " -> ".join(repr(u.key) for u, _ in cycle)
        if cycle:
            path = f"{path} -> {cycle[0][0].key!r}"
        super().__init__(f"Graph is not acyclic: {path}")


class NoSuchJournalError(PipegraphError):
    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(f"No such upstream journal: {name!r}")


class TracingNotEnabledError(PipegraphError):
    def __init__(self, segment: Any) -> None:
        self.segment = segment
        super().__init__(
            f"You cannot get the trace of a pipeline segment ({segment}) "
            "which does not have tracing enabled"
        )


class NotTraceableError(PipegraphError):
    def __init__(self, segment: Any) -> None:
        self.segment = segment
        super().__init__(f"Tracing cannot be enabled on {segment}")


class InvalidEdgeFilterError(PipegraphError):
    def __init__(self) -> None:
        super().__init__(
            "Edges may be filtered by a label or by a predicate, but not both"
        )
