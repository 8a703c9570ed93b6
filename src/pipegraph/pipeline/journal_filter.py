from __future__ import annotations

from typing import Any, Optional

from pipegraph.pipeline.filter import Filter
from pipegraph.pipeline.journal import Journal
from pipegraph.pipeline.segment import Segment

MODES = ("only", "except")


class JournalFilter(Filter):
    """
    Keeps values which were (mode "only") or were not (mode "except")
    recorded by the upstream Journal called name::

        Pump([1, 2, 3, 4, 2, 5]) | Journal("a") | Transform(lambda x: x * 2)
            | JournalFilter("only", "a")  # 2, 4, 4

    The journal is looked up when the filter is attached to a chain.
    """

    def __init__(self, mode: str, name: Any) -> None:
        if mode not in MODES:
            raise ValueError(
                f"Unknown journal filter mode {mode!r}; expected one of {MODES}"
            )

        self.mode = mode
        self.journal_name = name
        self._journal: Optional[Journal] = None

        super().__init__(self._recorded if mode == "only" else self._unrecorded)

    @Segment.source.setter
    def source(self, upstream: Any) -> None:
        self._source = upstream
        self._journal = self.journal(self.journal_name)

    def _recorded(self, value: Any) -> bool:
        return self._journal.include(value)

    def _unrecorded(self, value: Any) -> bool:
        return not self._journal.include(value)

    def _describe(self) -> str:
        return f"{self.mode}({self.journal_name!r})"
