from __future__ import annotations

from typing import Any, Optional

from pipegraph.config import get_config
from pipegraph.errors import NotTraceableError
from pipegraph.pipeline.segment import Segment
from pipegraph.pipeline.transform import Transform
from pipegraph.traversal import STRATEGIES, Traversal


class Traverse(Transform):
    """
    Turns each input node into a lazy walk over the nodes reachable from
    it, following edges in direction ("in" or "out").

    Follow with an Expander to emit the nodes themselves. Without an
    explicit strategy, ``traversal.strategy`` from the config decides
    between breadth and depth first.

    Tracing cannot be enabled through a Traverse.
    """

    def __init__(
        self,
        direction: str,
        label: Any = None,
        strategy: Optional[str] = None,
    ) -> None:
        if strategy is not None and strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown traversal strategy {strategy!r}; expected one of "
                f"{sorted(STRATEGIES)}"
            )

        self.direction = direction
        self.label = label
        self.strategy = strategy
        super().__init__()

    def transform(self, value: Any) -> Traversal:
        strategy = self.strategy or get_config().traversal.strategy
        return STRATEGIES[strategy](value, self.direction, self.label)

    @Segment.tracing.setter
    def tracing(self, use_tracing: bool) -> None:
        if use_tracing:
            raise NotTraceableError(self)

        Segment.tracing.fset(self, use_tracing)

    def _describe(self) -> str:
        args = [repr(self.direction)]
        if self.label is not None:
            args.append(repr(self.label))
        return f"traverse({', '.join(args)})"
