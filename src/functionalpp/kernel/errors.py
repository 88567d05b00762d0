"""Error types raised when an operation is applied to the wrong shape."""

from __future__ import annotations


class FunctionalError(Exception):
    """Base class for errors raised by functionalpp itself.

    Faults raised by user callbacks are never wrapped in this type.
    """


class NotAContainerError(FunctionalError, TypeError):
    """Raised when a value does not satisfy the container protocol.

    This error preserves the rejected value and the operation name
    for debugging purposes.
    """

    def __init__(self, operation: str, value: object, *, mutable: bool = False) -> None:
        self.operation = operation
        self.value = value
        self.mutable = mutable
        kind = "mutable sequence container" if mutable else "sequence container"
        super().__init__(
            f"{operation}() requires a {kind}, got {type(value).__name__}"
        )

    def __repr__(self) -> str:
        return (
            f"NotAContainerError(operation={self.operation!r}, "
            f"value={self.value!r}, mutable={self.mutable!r})"
        )
