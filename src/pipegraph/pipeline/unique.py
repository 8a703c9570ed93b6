from __future__ import annotations

from typing import Any, Callable, List, Optional, Set

from pipegraph.pipeline.filter import Filter


class Unique(Filter):
    """
    Emits only the first occurrence of each value, or of each result of
    key(value) when a key is given::

        Pump([1, 2, 3, 4, 5, 6]) | Unique(key=lambda x: x // 3)  # 1, 3, 6

    Unhashable markers (lists, traces) are compared by equality instead.
    Everything seen is forgotten on rewind.
    """

    def __init__(self, key: Optional[Callable[[Any], Any]] = None) -> None:
        if key is not None and not callable(key):
            raise TypeError(f"Unique requires a callable key, got {key!r}")

        self._key = key
        self._seen: Set[Any] = set()
        self._unhashable: List[Any] = []
        super().__init__(self._unseen)

    def rewind(self) -> None:
        self._seen.clear()
        self._unhashable.clear()
        super().rewind()

    def _unseen(self, value: Any) -> bool:
        marker = self._key(value) if self._key is not None else value

        try:
            if marker in self._seen:
                return False
            self._seen.add(marker)
        except TypeError:
            if marker in self._unhashable:
                return False
            self._unhashable.append(marker)

        return True
