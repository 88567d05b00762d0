"""Algorithm engine: each, map, filter, reduce, range, every, some, none.

Every operation is eager, sequential and walks the container in its native
order. Operations that return a sequence return the very object they were
given, so calls compose:

    join(filter(map(values, square), is_odd), "-")

Shape checks run before the first element is visited. Faults raised by a
callback propagate unchanged; elements already visited keep whatever state
the pass had produced.
"""

from __future__ import annotations

import builtins
import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from functionalpp.kernel.errors import NotAContainerError
from functionalpp.kernel.traits import is_container, is_mutable_container

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A")
C = TypeVar("C")
F = TypeVar("F", bound=Callable[..., Any])

Predicate = Callable[[T], bool]

_MISSING: Any = object()

__all__ = [
    "each",
    "map",
    "filter",
    "reduce",
    "range",
    "every",
    "some",
    "none",
    "requires_container",
    "default_element",
]


def requires_container(*, mutable: bool = False) -> Callable[[F], F]:
    """Reject calls whose first argument is not a sequence container.

    Args:
        mutable: Also require in-place replacement, removal and append.

    Returns:
        Decorator raising NotAContainerError before the wrapped body runs.
    """
    check = is_mutable_container if mutable else is_container

    def decorate(fn: F) -> F:
        @functools.wraps(fn)
        def guarded(sequence: Any, *args: Any, **kwargs: Any) -> Any:
            if not check(type(sequence)):
                logger.debug("%s() rejected %s", fn.__name__, type(sequence).__name__)
                raise NotAContainerError(fn.__name__, sequence, mutable=mutable)
            return fn(sequence, *args, **kwargs)

        return guarded  # type: ignore[return-value]

    return decorate


@requires_container()
def each(sequence: C, callback: Callable[[Any], Any]) -> C:
    """Execute ``callback`` once per element, for its side effect only.

    Returns:
        The same sequence object, unchanged.
    """
    for item in sequence:  # type: ignore[attr-defined]
        callback(item)
    return sequence


@requires_container(mutable=True)
def map(sequence: C, callback: Callable[[Any], Any]) -> C:
    """Replace every element with ``callback(element)``, in place.

    Each position is read once, before it is written once, so the callback
    always sees the original value at that position. The pass is O(n) on
    list; containers with slow positional access (deque) pay O(n) per step.

    Returns:
        The same sequence object, mutated. Its size is unchanged.
    """
    for index in builtins.range(len(sequence)):  # type: ignore[arg-type]
        sequence[index] = callback(sequence[index])  # type: ignore[index]
    return sequence


@requires_container(mutable=True)
def filter(sequence: C, predicate: Predicate[Any]) -> C:
    """Remove every element for which ``predicate`` is true.

    Note the direction: a true predicate means *remove*. Survivors are
    compacted towards the front in their original relative order, then the
    leftover tail is erased.

    Each position is read at most once and survivors are written at most
    once, so the pass is O(n) on list; containers with slow positional
    access (deque) pay O(n) per step.

    Returns:
        The same sequence object, possibly shorter.
    """
    size = len(sequence)  # type: ignore[arg-type]
    write = 0
    for read in builtins.range(size):
        item = sequence[read]  # type: ignore[index]
        if predicate(item):
            continue
        if write != read:
            sequence[write] = item  # type: ignore[index]
        write += 1

    # Erase from the back so positions below `write` never shift
    for index in builtins.range(size - 1, write - 1, -1):
        del sequence[index]  # type: ignore[attr-defined]
    return sequence


def default_element(sequence: Any) -> Any:
    """Default-constructed value of the sequence's element type.

    The element type is taken from the first element; an empty sequence has
    no observable element type and yields None.
    """
    for first in sequence:
        return type(first)()
    return None


@requires_container()
def reduce(
    sequence: Any,
    combine: Callable[[A, Any], A],
    initial: A = _MISSING,
) -> A:
    """Fold the sequence left to right into a single value.

    acc_0 = initial; acc_i = combine(acc_{i-1}, element_i). The fold is
    strictly sequential since ``combine`` need not be associative.

    Args:
        sequence: Container to fold; never mutated.
        combine: Binary function (accumulator, element) -> accumulator.
        initial: Starting accumulator. Defaults to default_element().

    Returns:
        The final accumulator, or ``initial`` for an empty sequence.
    """
    current = default_element(sequence) if initial is _MISSING else initial
    for item in sequence:
        current = combine(current, item)
    return current


@requires_container(mutable=True)
def range(sequence: C, start: Any, stop: Any, step: int = 1) -> C:
    """Append an arithmetic progression from ``start`` to ``stop`` inclusive.

    The current value is appended first and only then advanced and compared
    against ``stop``, so ``start`` is always appended, even when
    ``start > stop``. Single characters advance by code point.

    Raises:
        ValueError: If ``step`` is not positive.

    Returns:
        The same sequence object with the generated values appended.
    """
    if step <= 0:
        raise ValueError("step must be positive")

    as_char = isinstance(start, str)
    if as_char:
        current, limit = ord(start), ord(stop)
    else:
        current, limit = start, stop

    emitted = 0
    while True:
        sequence.append(chr(current) if as_char else current)  # type: ignore[attr-defined]
        emitted += 1
        current += step
        if not current <= limit:
            break

    logger.debug("range() appended %d values", emitted)
    return sequence


@requires_container()
def every(sequence: Any, predicate: Predicate[Any]) -> bool:
    """True if ``predicate`` holds for all elements; True when empty."""
    return all(predicate(item) for item in sequence)


@requires_container()
def some(sequence: Any, predicate: Predicate[Any]) -> bool:
    """True if ``predicate`` holds for at least one element; False when empty."""
    return any(predicate(item) for item in sequence)


@requires_container()
def none(sequence: Any, predicate: Predicate[Any]) -> bool:
    """True if ``predicate`` holds for no element; True when empty."""
    return not any(predicate(item) for item in sequence)
