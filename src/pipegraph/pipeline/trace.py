from __future__ import annotations

from typing import Any, List

from pipegraph.pipeline.segment import Segment


class Trace(Segment):
    """
    Emits, for each value reaching it, the list of values which produced
    it: the latest output of every upstream segment, head first::

        Pump([1, 2]) | Transform(lambda x: x * 10) | Trace()
        # [1, 10], [2, 20]

    Attaching a Trace switches tracing on for the whole upstream chain.
    """

    @Segment.source.setter
    def source(self, upstream: Any) -> None:
        upstream.tracing = True
        self._source = upstream

    def __next__(self) -> List[Any]:
        next(self._source)
        return self._source.trace()
