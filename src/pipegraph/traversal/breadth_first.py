from __future__ import annotations

from collections import deque
from typing import Any, Iterator

from pipegraph.traversal.base import Traversal


class BreadthFirst(Traversal):
    """
    Visits every adjacent item before any of their own adjacent items.

           A
          / \\
         B   C
        /   / \\
       D   E   F

    Starting from A: B, C, D, E, F.
    """

    def _visit(self, start: Any) -> Iterator[Any]:
        queue = deque(self._adjacent(start))

        while queue:
            item = queue.popleft()
            if item in self._seen:
                continue

            self._seen.add(item)
            yield item

            queue.extend(self._adjacent(self._fetch(item)))
