"""Capability traits - structural checks for sequence containers."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Container(Protocol[T_co]):
    """Ordered, read-only traversal.

    Anything that can be walked front to back in a fixed order and indexed
    by position qualifies: list, tuple, str, range, deque, array.array and
    user classes with the same shape.
    """

    def __iter__(self) -> Iterator[T_co]: ...
    def __len__(self) -> int: ...
    def __getitem__(self, index: Any) -> Any: ...


@runtime_checkable
class MutableContainer(Protocol[T]):
    """Container that also supports in-place replacement, removal and append."""

    def __iter__(self) -> Iterator[T]: ...
    def __len__(self) -> int: ...
    def __getitem__(self, index: Any) -> Any: ...
    def __setitem__(self, index: Any, value: Any) -> None: ...
    def __delitem__(self, index: Any) -> None: ...
    def append(self, value: T) -> None: ...


def _conforms(tp: Any, protocol: type) -> bool:
    if not isinstance(tp, type):
        return False
    # Mappings have the right dunders but index by key, not position
    if issubclass(tp, Mapping):
        return False
    return issubclass(tp, protocol)


def is_container(tp: Any) -> bool:
    """Return True if ``tp`` is a class with ordered sequence semantics.

    Non-class values (``is_container(5)``) and classes lacking the shape
    (``int``, ``set``, ``dict``) are rejected.
    """
    return _conforms(tp, Container)


def is_mutable_container(tp: Any) -> bool:
    """Return True if ``tp`` supports the mutating operations as well."""
    return _conforms(tp, MutableContainer)


def type_of(target: type, value: Any) -> bool:
    """Exact type identity: no subclass equivalence, no conversion."""
    return type(value) is target


@dataclass(frozen=True)
class Type(Generic[T]):
    """Type identity predicate bound to a target type.

    ``Type(int).of(5)`` is ``True``; ``Type(int).of(True)`` is ``False``.
    """

    target: type[T]

    def of(self, value: Any) -> bool:
        return type_of(self.target, value)
