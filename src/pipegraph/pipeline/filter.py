from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from pipegraph.pipeline.segment import Segment


class Filter(Segment):
    """
    Emits only the input values for which fn returns true.
    """

    def __init__(self, fn: Optional[Callable[[Any], Any]] = None) -> None:
        if fn is not None and not callable(fn):
            raise TypeError(f"Filter requires a callable predicate, got {fn!r}")

        self._filter = fn or self.filter
        super().__init__()

    def filter(self, value: Any) -> bool:
        return True

    def _handle_value(self, value: Any) -> Iterator[Any]:
        if self._filter(value):
            yield from super()._handle_value(value)
