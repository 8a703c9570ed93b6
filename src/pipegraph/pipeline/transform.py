from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from pipegraph.pipeline.segment import Segment


class Transform(Segment):
    """
    Emits the result of calling fn with each input value.

    Subclasses may override ``transform`` instead of passing fn.
    """

    def __init__(self, fn: Optional[Callable[[Any], Any]] = None) -> None:
        if fn is not None and not callable(fn):
            raise TypeError(f"Transform requires a callable, got {fn!r}")

        self._transform = fn or self.transform
        super().__init__()

    def transform(self, value: Any) -> Any:
        return value

    def _handle_value(self, value: Any) -> Iterator[Any]:
        yield from super()._handle_value(self._transform(value))
