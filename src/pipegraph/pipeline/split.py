from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, List, NamedTuple, Optional

from pipegraph.errors import TracingNotEnabledError
from pipegraph.pipeline.pump import Pump
from pipegraph.pipeline.segment import Segment

Branch = Callable[[Any], Any]


class _Branch(NamedTuple):
    pump: Pump
    tail: Segment


class Split(Segment):
    """
    Runs every input value through each of several sub-pipelines and
    emits their results, branch by branch.

    Each branch is a callable given a DSL over an empty pump; whatever
    chain it returns is kept and re-run for every input::

        Split(lambda pipe: pipe.map(lambda x: x * 10),
              lambda pipe: pipe.map(lambda x: x * 100))
        # 1, 2 -> 10, 100, 20, 200

    An input for which every branch produces nothing is dropped.
    """

    def __init__(self, *branches: Branch) -> None:
        if not branches:
            raise ValueError("Split requires at least one branch")

        from pipegraph.pipeline.dsl import DSL

        self._branches: List[_Branch] = []
        for branch in branches:
            pump = Pump([])
            result = branch(DSL(pump))
            tail = result.source if isinstance(result, DSL) else result

            if not isinstance(tail, Segment):
                raise TypeError(
                    f"A Split branch must return a pipeline, got {result!r}"
                )

            self._branches.append(_Branch(pump, tail))

        self._previous_trace: List[Any] = []
        super().__init__()

        logging.getLogger("pipegraph.pipeline").debug(
            "Split with %d branches: %s",
            len(self._branches),
            ", ".join(str(branch.tail) for branch in self._branches),
        )

    @Segment.tracing.setter
    def tracing(self, use_tracing: bool) -> None:
        Segment.tracing.fset(self, use_tracing)

        for branch in self._branches:
            branch.tail.tracing = use_tracing

    def trace(self) -> List[Any]:
        if not self._tracing:
            raise TracingNotEnabledError(self)

        return self._upstream_trace() + list(self._previous_trace)

    def rewind(self) -> None:
        self._previous_trace = []
        super().rewind()

    def _handle_value(self, value: Any) -> Iterator[Any]:
        for branch in self._branches:
            branch.pump.source = [value]
            results = branch.tail.to_list()

            if self._tracing:
                # The first entry is the seed value, already in the upstream trace.
                self._previous_trace = branch.tail.trace()[1:]

            for result in results:
                yield self._output(result)


class Also(Split):
    """
    A Split whose first branch passes each input value through untouched::

        Also(lambda pipe: pipe.out())  # each node, then its children
    """

    def __init__(self, *branches: Branch, block: Optional[Branch] = None) -> None:
        extra = (block,) if block is not None else ()
        super().__init__(_identity, *branches, *extra)


def _identity(pipe: Any) -> Any:
    return pipe
