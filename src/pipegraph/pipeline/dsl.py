from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable, Iterator, List, Optional, Union

from pipegraph.pipeline.expander import Expander
from pipegraph.pipeline.filter import Filter
from pipegraph.pipeline.journal import Journal
from pipegraph.pipeline.journal_filter import JournalFilter
from pipegraph.pipeline.pump import Pump
from pipegraph.pipeline.segment import Segment
from pipegraph.pipeline.sender import Sender
from pipegraph.pipeline.split import Also, Split
from pipegraph.pipeline.trace import Trace
from pipegraph.pipeline.transform import Transform
from pipegraph.pipeline.traverse import Traverse
from pipegraph.pipeline.unique import Unique


class DSL:
    """
    Fluent wrapper around the last segment of a pipeline.

    Every step returns a new DSL whose source is the newly appended
    segment, so queries read left to right::

        dsl(node).out("child").uniq().get("name").to_list()

    Nothing is evaluated until the DSL is iterated.
    """

    def __init__(self, source: Segment) -> None:
        self.source = source

    def append(self, downstream: Union[Segment, Callable[[Any], Any]]) -> "DSL":
        return DSL(self.source.append(downstream))

    # -------------------- Graph steps --------------------

    def in_(self, label: Any = None) -> "DSL":
        return self.append(Sender("in", label))

    def out(self, label: Any = None) -> "DSL":
        return self.append(Sender("out", label))

    def in_edges(
        self, label: Any = None, predicate: Optional[Callable[[Any], Any]] = None
    ) -> "DSL":
        return self.append(Sender("in_edges", label, predicate))

    def out_edges(
        self, label: Any = None, predicate: Optional[Callable[[Any], Any]] = None
    ) -> "DSL":
        return self.append(Sender("out_edges", label, predicate))

    def ancestors(self, label: Any = None, strategy: Optional[str] = None) -> "DSL":
        return self.append(Traverse("in", label, strategy)).append(Expander())

    def descendants(self, label: Any = None, strategy: Optional[str] = None) -> "DSL":
        return self.append(Traverse("out", label, strategy)).append(Expander())

    def get(self, key: Any) -> "DSL":
        return self.append(Sender("get", key))

    # -------------------- Value steps --------------------

    def select(self, predicate: Callable[[Any], Any]) -> "DSL":
        return self.append(Filter(predicate))

    def reject(self, predicate: Callable[[Any], Any]) -> "DSL":
        if not callable(predicate):
            raise TypeError(f"reject requires a callable predicate, got {predicate!r}")
        return self.append(Filter(lambda value: not predicate(value)))

    def map(self, fn: Callable[[Any], Any]) -> "DSL":
        return self.append(Transform(fn))

    def uniq(self, key: Optional[Callable[[Any], Any]] = None) -> "DSL":
        return self.append(Unique(key))

    # -------------------- Journals --------------------

    def as_(self, name: Any) -> "DSL":
        return self.append(Journal(name))

    def only(self, name: Any) -> "DSL":
        return self.append(JournalFilter("only", name))

    def except_(self, name: Any) -> "DSL":
        return self.append(JournalFilter("except", name))

    # -------------------- Branching and tracing --------------------

    def split(self, *branches: Callable[["DSL"], Any]) -> "DSL":
        return self.append(Split(*branches))

    def also(
        self,
        *branches: Callable[["DSL"], Any],
        block: Optional[Callable[["DSL"], Any]] = None,
    ) -> "DSL":
        return self.append(Also(*branches, block=block))

    def trace(self) -> "DSL":
        return self.append(Trace())

    # -------------------- Consumption --------------------

    def __iter__(self) -> Iterator[Any]:
        return iter(self.source)

    def __next__(self) -> Any:
        return next(self.source)

    def each(self, fn: Callable[[Any], Any]) -> None:
        self.source.each(fn)

    def to_list(self) -> List[Any]:
        return self.source.to_list()

    def take(self, count: int) -> List[Any]:
        return self.source.take(count)

    def rewind(self) -> None:
        self.source.rewind()

    def __str__(self) -> str:
        return str(self.source)

    def __repr__(self) -> str:
        return f"<DSL {{{self.source}}}>"


def dsl(source: Any) -> DSL:
    """
    Starts a pipeline over source: any iterable, or a single value such as
    a Node. Strings and mappings count as single values.
    """
    if isinstance(source, (str, bytes, bytearray, Mapping)) or not isinstance(
        source, Iterable
    ):
        source = [source]

    return DSL(Pump(source))
