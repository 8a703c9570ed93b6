from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, Optional, Union

from pipegraph.pipeline.expander import Expander

Operation = Callable[..., Any]

# Operations a Sender may apply by name. Each receives the input value
# followed by the Sender's extra arguments.
OPERATIONS: Dict[str, Operation] = {
    "get": lambda item, key: item.get(key),
    "in": lambda item, label=None: item.nodes("in", label),
    "out": lambda item, label=None: item.nodes("out", label),
    "in_edges": lambda item, label=None, predicate=None: item.edges(
        "in", label, predicate
    ),
    "out_edges": lambda item, label=None, predicate=None: item.edges(
        "out", label, predicate
    ),
}


class Sender(Expander):
    """
    Applies an operation to each input value and emits the result, which
    is flattened in the same way as by an Expander.

    operation is either a name from OPERATIONS or a callable taking the
    input value and then args::

        Sender("get", "age")
        Sender(lambda node, key: node.key == key, "a", name="is")
    """

    def __init__(
        self,
        operation: Union[str, Operation],
        *args: Any,
        name: Optional[str] = None,
    ) -> None:
        if isinstance(operation, str):
            if operation not in OPERATIONS:
                raise ValueError(
                    f"Unknown operation {operation!r}; expected one of "
                    f"{sorted(OPERATIONS)} or a callable"
                )
            self.name = name or operation
            self.operation = OPERATIONS[operation]
        elif callable(operation):
            self.name = name or getattr(operation, "__name__", "send")
            self.operation = operation
        else:
            raise TypeError(f"Sender requires an operation, got {operation!r}")

        self.args = args
        super().__init__()

    def _handle_value(self, value: Any) -> Iterator[Any]:
        yield from super()._handle_value(self.operation(value, *self.args))

    def _describe(self) -> str:
        args = list(self.args)

        while args and args[-1] is None:
            args.pop()

        return f"{self.name}({', '.join(repr(arg) for arg in args)})"
