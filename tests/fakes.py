from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from functionalpp import NonCopyable


@dataclass
class FakeVector:
    """Mutable container that does not inherit from list.

    Supports integer indexing only, so operations must not rely on slices.
    """

    items: list[Any] = field(default_factory=list)
    reads: int = 0

    def __iter__(self) -> Iterator[Any]:
        for i in range(len(self.items)):
            yield self[i]

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Any:
        if not isinstance(index, int):
            raise TypeError("FakeVector only supports integer indices")
        self.reads += 1
        return self.items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        if not isinstance(index, int):
            raise TypeError("FakeVector only supports integer indices")
        self.items[index] = value

    def __delitem__(self, index: int) -> None:
        if not isinstance(index, int):
            raise TypeError("FakeVector only supports integer indices")
        del self.items[index]

    def append(self, value: Any) -> None:
        self.items.append(value)


@dataclass(frozen=True)
class FakeView:
    """Read-only ordered container."""

    items: tuple[Any, ...] = ()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: Any) -> Any:
        return self.items[index]


@dataclass
class FakeRecord:
    """Plain record with no traversal at all."""

    name: str = ""
    size: int = 0


class OwnedBuffer(NonCopyable):
    def __init__(self, data: list[int] | None = None) -> None:
        self.data = data or []


@dataclass
class CallRecorder:
    """Callback double recording the arguments it was called with."""

    calls: list[Any] = field(default_factory=list)
    result: Any = None

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args[0] if len(args) == 1 else args)
        return self.result


class Boom(Exception):
    pass


def explode_on(value: Any, result: Any = False):
    """Callback raising Boom when it sees ``value``."""

    def callback(item: Any) -> Any:
        if item == value:
            raise Boom(f"callback failed on {item!r}")
        return result

    return callback
