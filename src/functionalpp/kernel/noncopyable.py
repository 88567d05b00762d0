"""Ownership marker for types that must not be duplicated."""

from __future__ import annotations

from typing import Any


class NonCopyable:
    """Mixin that makes instances refuse ``copy.copy`` and ``copy.deepcopy``.

    Example:
        class Buffer(NonCopyable):
            ...

        copy.copy(Buffer())  # TypeError
    """

    __slots__ = ()

    def __copy__(self) -> Any:
        raise TypeError(f"'{type(self).__name__}' object is not copyable")

    def __deepcopy__(self, memo: dict[int, Any]) -> Any:
        raise TypeError(f"'{type(self).__name__}' object is not copyable")
