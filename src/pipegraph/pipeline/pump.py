from __future__ import annotations

from typing import Any, Iterable, Iterator

from pipegraph.pipeline.segment import Segment


class Pump(Segment):
    """
    The head of a pipeline; emits each member of an iterable.

    Rewinding restarts iteration of the iterable, so a Pump given a one-shot
    iterator (a generator, say) is exhausted after the first pass.
    """

    def __init__(self, source: Iterable[Any]) -> None:
        super().__init__()
        self._source = source

    def rewind(self) -> None:
        self._previous = None
        self._reset()

    def _process(self) -> Iterator[Any]:
        for value in self._source:
            yield self._output(value)
