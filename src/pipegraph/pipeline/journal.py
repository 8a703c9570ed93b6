from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional, Set

from pipegraph.errors import TracingNotEnabledError
from pipegraph.pipeline.segment import Segment


class Journal(Segment):
    """
    Records every value produced upstream so that segments further down
    the chain can ask whether a value passed this point.

    On the first pull the whole upstream is drained into ``values``; those
    values are then replayed unchanged. A Journal adds nothing to a trace:
    each replayed value carries the trace it had upstream.
    """

    def __init__(self, name: Any) -> None:
        self.name = name
        self._forget()
        super().__init__()

    @property
    def values(self) -> List[Any]:
        """
        Every value emitted by the upstream segment.
        """
        if self._values is None:
            self._record()
        return self._values

    def include(self, value: Any) -> bool:
        """
        True if value was among the upstream values.
        """
        if self._lookup is None:
            self._index_values()

        try:
            return value in self._lookup
        except TypeError:
            return value in self._unhashable

    __contains__ = include

    def rewind(self) -> None:
        self._forget()
        super().rewind()

    def trace(self) -> List[Any]:
        if not self._tracing:
            raise TracingNotEnabledError(self)

        if self._position is not None and self._position < len(self._traces):
            return list(self._traces[self._position])

        return self._upstream_trace()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _process(self) -> Iterator[Any]:
        for position, value in enumerate(self.values):
            self._position = position
            yield value

    def _record(self) -> None:
        values: List[Any] = []
        traces: List[List[Any]] = []
        upstream = self._source
        record_traces = self._tracing and isinstance(upstream, Segment)

        for value in upstream:
            values.append(value)
            if record_traces:
                traces.append(upstream.trace())

        self._values = values
        self._traces = traces

        logging.getLogger("pipegraph.pipeline").debug(
            "Journal %r recorded %d values", self.name, len(values)
        )

    def _index_values(self) -> None:
        lookup: Set[Any] = set()
        unhashable: List[Any] = []

        for value in self.values:
            try:
                lookup.add(value)
            except TypeError:
                unhashable.append(value)

        self._lookup = lookup
        self._unhashable = unhashable

    def _forget(self) -> None:
        self._values: Optional[List[Any]] = None
        self._traces: List[List[Any]] = []
        self._lookup: Optional[Set[Any]] = None
        self._unhashable: List[Any] = []
        self._position: Optional[int] = None

    def _describe(self) -> str:
        return f"as({self.name!r})"
