"""Chain - fluent wrapper threading one container through operations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, fields
from typing import Any, Generic, TypeVar

from functionalpp.config import DEFAULT_CONFIG, FunctionalConfig
from functionalpp.core import iterate, text
from functionalpp.core.iterate import _MISSING
from functionalpp.kernel.errors import NotAContainerError
from functionalpp.kernel.traits import is_container

C = TypeVar("C")
A = TypeVar("A")


# Extension registry - class-level storage for Chain operations
_extensions_registry: dict[str, Callable[..., Any]] = {}


@dataclass(frozen=True)
class Chain(Generic[C]):
    """Fluent view over a caller-owned container.

    Operations that return the container return the chain, so calls can
    be strung together; aggregations end the chain with their value.
    The container itself is mutated in place, exactly as with the free
    functions.

    Extra operations can be registered via register_op().
    """

    _sequence: C
    config: FunctionalConfig = field(default_factory=lambda: DEFAULT_CONFIG)

    def __post_init__(self) -> None:
        if not is_container(type(self._sequence)):
            raise NotAContainerError("chain", self._sequence)

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register an operation on the Chain class.

        Args:
            name: Method name the operation is exposed under.
            fn: Called as ``fn(container, *args, **kwargs)``. If it returns
                the container itself the chain continues, otherwise its
                result is handed back to the caller.
        """
        taken = name.startswith("_") or hasattr(cls, name)
        if taken or name in {f.name for f in fields(cls)}:
            raise ValueError(f"Cannot register operation '{name}' on Chain")
        _extensions_registry[name] = fn

    @classmethod
    def unregister_op(cls, name: str) -> None:
        _extensions_registry.pop(name, None)

    def __getattr__(self, name: str) -> Any:
        """Allow calling registered extension operations."""
        if name in _extensions_registry:
            fn = _extensions_registry[name]
            return lambda *args, **kwargs: self._continue(fn(self._sequence, *args, **kwargs))
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def _continue(self, result: Any) -> Any:
        if result is self._sequence:
            return self
        return result

    def value(self) -> C:
        """Return the wrapped container."""
        return self._sequence

    def each(self, callback: Callable[[Any], Any]) -> Chain[C]:
        return self._continue(iterate.each(self._sequence, callback))

    def map(self, callback: Callable[[Any], Any]) -> Chain[C]:
        return self._continue(iterate.map(self._sequence, callback))

    def filter(self, predicate: Callable[[Any], bool]) -> Chain[C]:
        return self._continue(iterate.filter(self._sequence, predicate))

    def range(self, start: Any, stop: Any, step: int | None = None) -> Chain[C]:
        """Append start..stop; ``step`` defaults to ``config.range_step``."""
        step = self.config.range_step if step is None else step
        return self._continue(iterate.range(self._sequence, start, stop, step))

    def reduce(self, combine: Callable[[A, Any], A], initial: A = _MISSING) -> A:
        return iterate.reduce(self._sequence, combine, initial)

    def every(self, predicate: Callable[[Any], bool]) -> bool:
        return iterate.every(self._sequence, predicate)

    def some(self, predicate: Callable[[Any], bool]) -> bool:
        return iterate.some(self._sequence, predicate)

    def none(self, predicate: Callable[[Any], bool]) -> bool:
        return iterate.none(self._sequence, predicate)

    def join(self, delimiter: Any = None, *, start: int = 0, end: int | None = None) -> str:
        return text.join(self._sequence, delimiter, start=start, end=end, config=self.config)


def chain(sequence: C, config: FunctionalConfig | None = None) -> Chain[C]:
    """Wrap ``sequence`` in a Chain.

    Raises:
        NotAContainerError: If ``sequence`` is not a sequence container.
    """
    return Chain(sequence, config or DEFAULT_CONFIG)
