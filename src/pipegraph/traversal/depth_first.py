from __future__ import annotations

from typing import Any, Iterator, List

from pipegraph.traversal.base import Traversal


class DepthFirst(Traversal):
    """
    Follows each adjacent item all the way down before its next sibling.

           A
          / \\
         B   C
        /   / \\
       D   E   F

    Starting from A: B, D, C, E, F.
    """

    def _visit(self, start: Any) -> Iterator[Any]:
        # One iterator of unvisited siblings per level, deepest last.
        stack: List[Iterator[Any]] = [iter(list(self._adjacent(start)))]

        while stack:
            for item in stack[-1]:
                if item in self._seen:
                    continue

                self._seen.add(item)
                yield item

                stack.append(iter(list(self._adjacent(self._fetch(item)))))
                break
            else:
                stack.pop()
