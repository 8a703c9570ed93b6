from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Iterator

from pipegraph.config import get_config
from pipegraph.pipeline.segment import Segment


def expandable(value: Any) -> bool:
    """
    True for containers whose members should be emitted one at a time.
    Strings, bytes and mappings are treated as single values.
    """
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Iterable)


class Expander(Segment):
    """
    Emits each member of every iterable input value, in order, and any
    other value as-is.

    A container is consumed lazily: its remaining members are held over
    until the downstream asks for more. None members are skipped while
    ``pipeline.compact_expanded`` is set.
    """

    def _handle_value(self, value: Any) -> Iterator[Any]:
        if not expandable(value):
            yield from super()._handle_value(value)
            return

        compact = get_config().pipeline.compact_expanded

        for member in value:
            if compact and member is None:
                continue
            yield self._output(member)
