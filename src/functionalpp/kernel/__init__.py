"""Kernel layer - capability traits and shared error types."""

from functionalpp.kernel.errors import FunctionalError, NotAContainerError
from functionalpp.kernel.noncopyable import NonCopyable
from functionalpp.kernel.traits import (
    Container,
    MutableContainer,
    Type,
    is_container,
    is_mutable_container,
    type_of,
)

__all__ = [
    # Traits
    "Container",
    "MutableContainer",
    "is_container",
    "is_mutable_container",
    "type_of",
    "Type",
    # Errors
    "FunctionalError",
    "NotAContainerError",
    # Ownership
    "NonCopyable",
]
