from __future__ import annotations

from itertools import islice
from typing import Any, Callable, Iterator, List, Optional, Union, TYPE_CHECKING

from pipegraph.errors import NoSuchJournalError, TracingNotEnabledError

if TYPE_CHECKING:
    from pipegraph.pipeline.journal import Journal


class Segment:
    """
    A single stage in a pipeline.

    Each segment pulls values from its upstream ``source`` (another segment
    or any iterator) only when asked for its own next value, so a chain is
    evaluated lazily, one value at a time. The plain Segment emits every
    value it is given; Pump, Transform, Filter and friends do real work.

    Segments are chained left to right with ``append`` or ``|``::

        (Pump(range(100, 10000)) | Transform(lambda x: x // 100)
            | Filter(lambda x: x == 42))

    A chain is rewindable but not safe to pull from two places at once.
    """

    def __init__(self) -> None:
        self._source: Any = None
        self._tracing = False
        self._previous: Any = None
        self._reset()

    # ------------------------------------------------------------------
    # Chaining
    # ------------------------------------------------------------------

    @property
    def source(self) -> Any:
        """
        The upstream segment (or iterator) feeding this one.
        """
        return self._source

    @source.setter
    def source(self, upstream: Any) -> None:
        self._source = upstream

    def append(self, other: Union["Segment", Callable[[Any], Any]]) -> "Segment":
        """
        Sets self as the source of other and returns other. A plain
        callable is wrapped in a Transform.
        """
        if not isinstance(other, Segment):
            if not callable(other):
                raise TypeError(f"Cannot append {other!r} to a pipeline")

            from pipegraph.pipeline.transform import Transform

            other = Transform(other)

        other.source = self
        return other

    __or__ = append

    # ------------------------------------------------------------------
    # Pulling values
    # ------------------------------------------------------------------

    def __next__(self) -> Any:
        return next(self._fiber)

    def __iter__(self) -> Iterator[Any]:
        """
        Rewinds, then yields every value the pipeline produces.
        """
        self.rewind()
        while True:
            try:
                value = next(self)
            except StopIteration:
                return
            yield value

    def each(self, fn: Callable[[Any], Any]) -> None:
        for value in self:
            fn(value)

    def to_list(self) -> List[Any]:
        return list(self)

    def take(self, count: int) -> List[Any]:
        """
        The first count values; pulls no more than needed.
        """
        return list(islice(iter(self), count))

    def rewind(self) -> None:
        """
        Resets this segment and everything upstream so that iteration
        starts again from the first input.
        """
        if isinstance(self._source, Segment):
            self._source.rewind()

        self._previous = None
        self._reset()

    def journal(self, name: Any) -> "Journal":
        """
        The nearest upstream Journal called name.
        """
        from pipegraph.pipeline.journal import Journal

        upstream = self._source
        while isinstance(upstream, Segment):
            if isinstance(upstream, Journal) and upstream.name == name:
                return upstream
            upstream = upstream.source

        raise NoSuchJournalError(name)

    # ------------------------------------------------------------------
    # Tracing
    # ------------------------------------------------------------------

    @property
    def tracing(self) -> bool:
        return self._tracing

    @tracing.setter
    def tracing(self, use_tracing: bool) -> None:
        """
        Enables or disables recording of the last emitted value, here and
        on every upstream segment.
        """
        self._tracing = use_tracing

        if isinstance(self._source, Segment):
            self._source.tracing = use_tracing

    def trace(self) -> List[Any]:
        """
        The most recently emitted value of every upstream segment, ending
        with this segment's own.

        Raises TracingNotEnabledError unless tracing was switched on,
        normally by appending a Trace segment.
        """
        if not self._tracing:
            raise TracingNotEnabledError(self)

        trace = self._upstream_trace()
        trace.append(self._previous)
        return trace

    # ------------------------------------------------------------------
    # Description
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        upstream = self._source_str()
        return self._describe() if upstream is None else f"{upstream} | {self._describe()}"

    def __repr__(self) -> str:
        return str(self)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _process(self) -> Iterator[Any]:
        while True:
            try:
                value = self._input()
            except StopIteration:
                return
            yield from self._handle_value(value)

    def _input(self) -> Any:
        return next(self._source)

    def _handle_value(self, value: Any) -> Iterator[Any]:
        yield self._output(value)

    def _output(self, value: Any) -> Any:
        if self._tracing:
            self._previous = value
        return value

    def _reset(self) -> None:
        self._fiber = self._process()

    def _upstream_trace(self) -> List[Any]:
        if isinstance(self._source, Segment):
            return list(self._source.trace())
        return []

    def _describe(self) -> str:
        return type(self).__name__

    def _source_str(self) -> Optional[str]:
        return str(self._source) if isinstance(self._source, Segment) else None
