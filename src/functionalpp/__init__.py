from .chain import Chain, chain
from .config import FunctionalConfig
from .core import (
    each,
    every,
    filter,
    join,
    join_iter,
    map,
    none,
    range,
    reduce,
    some,
)
from .kernel import (
    Container,
    FunctionalError,
    MutableContainer,
    NonCopyable,
    NotAContainerError,
    Type,
    is_container,
    is_mutable_container,
    type_of,
)

__all__ = [
    # Operations
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
    # Traits
    "Container",
    "MutableContainer",
    "is_container",
    "is_mutable_container",
    "type_of",
    "Type",
    # Chaining
    "Chain",
    "chain",
    # Config & errors
    "FunctionalConfig",
    "FunctionalError",
    "NotAContainerError",
    # Ownership
    "NonCopyable",
]
