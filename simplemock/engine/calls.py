"""
Call identifiers: one frozen model per mocked operation.

A mocked interface declares one ``CallIdentifier`` subclass per method, with the
method's arguments as fields::

    class Save(CallIdentifier):
        id: str
        value: int

    class Load(CallIdentifier):
        id: str

Instances compare and hash structurally, and two operations never compare equal even
when their fields do, so they can be used directly as expectation keys.
"""
from typing import Any, Hashable, Tuple

from pydantic import BaseModel, ConfigDict

Sequence = Tuple[Hashable, ...]


class CallIdentifier(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def operation(self) -> str:
        return type(self).__name__

    @property
    def arguments(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def __repr__(self) -> str:
        args = ", ".join(repr(a) for a in self.arguments)
        return f"{self.operation}({args})"

    __str__ = __repr__


def as_sequence(*calls: Hashable) -> Sequence:
    return tuple(calls)
