# Core operations - names shadow builtins on purpose, import them qualified
# or through this package rather than with a star import.
from .iterate import (
    default_element,
    each,
    every,
    filter,
    map,
    none,
    range,
    reduce,
    requires_container,
    some,
)
from .text import join, join_iter

__all__ = [
    "each",
    "map",
    "filter",
    "reduce",
    "range",
    "every",
    "some",
    "none",
    "join",
    "join_iter",
    "default_element",
    "requires_container",
]
