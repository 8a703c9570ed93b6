from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Set, Union

Adjacency = Callable[[Any, Any], Iterable[Any]]
Fetcher = Callable[[Any], Any]

ADJACENCY: Dict[str, Adjacency] = {
    "in": lambda item, label: item.nodes("in", label),
    "out": lambda item, label: item.nodes("out", label),
    "in_edges": lambda item, label: item.edges("in", label),
    "out_edges": lambda item, label: item.edges("out", label),
}


class Traversal:
    """
    Lazily enumerates the items reachable from a start node.

    Subclasses define the order (breadth or depth first); each distinct
    item is emitted at most once, so cycles terminate. The start item is
    never emitted.

    To walk edges rather than nodes, give a fetcher which maps each
    emitted item to the vertex whose adjacency is explored next::

        BreadthFirst(node, "out_edges", fetcher="out")  # yields Edges
    """

    def __init__(
        self,
        start: Any,
        adjacency: Union[str, Adjacency],
        label: Any = None,
        fetcher: Union[str, Fetcher, None] = None,
    ) -> None:
        self.start = start
        self.adjacency = adjacency
        self.label = label
        self.fetcher = fetcher

        if isinstance(adjacency, str):
            if adjacency not in ADJACENCY:
                raise ValueError(
                    f"Unknown adjacency {adjacency!r}; expected one of "
                    f"{sorted(ADJACENCY)} or a callable"
                )
            self._adjacency = ADJACENCY[adjacency]
        else:
            self._adjacency = adjacency

        if isinstance(fetcher, str):
            self._fetcher: Optional[Fetcher] = lambda item: item.nodes(fetcher)
        else:
            self._fetcher = fetcher

        self.rewind()

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def __next__(self) -> Any:
        if self._cursor is None:
            self._cursor = self._visit(self.start)
        return next(self._cursor)

    def __iter__(self) -> Iterator[Any]:
        """
        Iterates from the beginning, regardless of earlier pulls.
        """
        self.rewind()
        return self

    def rewind(self) -> None:
        self._seen: Set[Any] = {self.start}
        self._cursor: Optional[Iterator[Any]] = None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _visit(self, start: Any) -> Iterator[Any]:
        raise NotImplementedError("Define _visit in a subclass")

    def _adjacent(self, item: Any) -> Iterable[Any]:
        return self._adjacency(item, self.label)

    def _fetch(self, item: Any) -> Any:
        return self._fetcher(item) if self._fetcher is not None else item

    def __repr__(self) -> str:
        fetcher = f" fetcher={self.fetcher!r}" if self.fetcher is not None else ""
        return (
            f"<{type(self).__name__} start={self.start!r} "
            f"adjacency={self.adjacency!r}{fetcher}>"
        )
