from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pipegraph.graph.graph_schema import Edge, Node
from pipegraph.graph.graph_store import Graph

NodeSpec = Union[Node, Any, Tuple[Any, Dict[Any, Any]]]
EdgeSpec = Union[
    Tuple[Any, Any],
    Tuple[Any, Any, Any],
    Tuple[Any, Any, Any, Dict[Any, Any]],
]


class GraphBuilder:
    """
    Populates a graph from plain keys and (from, to, label) tuples.
    """

    def __init__(self, graph: Optional[Graph] = None) -> None:
        self.graph = graph if graph is not None else Graph()

    def add_nodes(self, nodes: Iterable[NodeSpec]) -> List[Node]:
        """
        Accepts Node instances, bare keys, or (key, properties) pairs. A
        tuple is only read as a pair when its second item is a dict (or
        None); any other tuple is itself the key.
        """
        added: List[Node] = []
        for spec in nodes:
            if isinstance(spec, Node):
                node = spec
            elif _is_keyed_properties(spec):
                key, properties = spec
                node = Node(key, properties)
            else:
                node = Node(spec)
            added.append(self.graph.add(node))
        return added

    def add_edges(self, edges: Iterable[EdgeSpec]) -> List[Edge]:
        """
        Connects existing nodes by key; endpoints must already be present.
        """
        added: List[Edge] = []
        for spec in edges:
            from_key, to_key, *rest = spec
            label = rest[0] if rest else None
            properties = rest[1] if len(rest) > 1 else None

            added.append(
                self._require(from_key).connect_to(
                    self._require(to_key), label, properties
                )
            )
        return added

    def _require(self, key: Any) -> Node:
        node = self.graph.node(key)
        if node is None:
            raise KeyError(f"No node with the key {key!r} in {self.graph!r}")
        return node


def _is_keyed_properties(spec: Any) -> bool:
    return (
        isinstance(spec, tuple)
        and len(spec) == 2
        and (spec[1] is None or isinstance(spec[1], dict))
    )
