"""Join - serialise a container into delimited text."""

from __future__ import annotations

import io
import itertools
from collections.abc import Iterable
from typing import Any

from functionalpp.config import DEFAULT_CONFIG, FunctionalConfig
from functionalpp.core.iterate import requires_container

__all__ = ["join", "join_iter"]

_END: Any = object()


def join_iter(
    items: Iterable[Any],
    delimiter: Any = None,
    *,
    config: FunctionalConfig | None = None,
) -> str:
    """Join ``str()`` of every item with ``delimiter`` between neighbours.

    Accepts any iterable, including a partially consumed iterator.

    Args:
        items: Values to serialise, in iteration order.
        delimiter: Separator; defaults to ``config.delimiter``.
        config: Defaults to FunctionalConfig().

    Returns:
        The delimited text, without leading or trailing delimiter. With
        ``config.legacy_join`` a single item yields "" instead of its text.
    """
    config = config or DEFAULT_CONFIG
    separator = str(config.delimiter if delimiter is None else delimiter)

    iterator = iter(items)
    stream = io.StringIO()
    first = next(iterator, _END)
    if first is _END:
        return ""
    stream.write(str(first))

    count = 1
    for item in iterator:
        stream.write(separator)
        stream.write(str(item))
        count += 1

    if count == 1 and config.legacy_join:
        return ""
    return stream.getvalue()


@requires_container()
def join(
    sequence: Any,
    delimiter: Any = None,
    *,
    start: int = 0,
    end: int | None = None,
    config: FunctionalConfig | None = None,
) -> str:
    """Join the elements of a container into a string.

    ``start`` and ``end`` bound the joined slice (half-open, like slicing,
    negative values count from the end); by default the whole container
    is joined.

    Example:
        join(["a", "b", "c"], "-")  # "a-b-c"
        join([1, 2, 3, 4], start=1, end=3)  # "2,3"
        join([1, 2, 3, 4], end=-1)  # "1,2,3"
    """
    items = iter(sequence)
    if start or end is not None:
        lower, upper, _ = slice(start, end).indices(len(sequence))
        items = itertools.islice(sequence, lower, max(lower, upper))
    return join_iter(items, delimiter, config=config)
