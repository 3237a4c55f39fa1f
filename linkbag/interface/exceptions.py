"""Errors raised by bag implementations."""

from typing import Any


class BagError(Exception):
    """Base class for all errors raised by bags."""


class InvalidCapacity(BagError, ValueError):
    """Raised when a bag is constructed with a non-positive maximum size."""

    def __init__(self, max_size: int) -> None:
        super().__init__(f"Maximum bag size must be positive, got {max_size}")
        self.max_size = max_size


class BagFull(BagError):
    """Raised when a new distinct value is added to a bag that is already at capacity."""

    def __init__(self, value: Any, max_size: int) -> None:
        super().__init__(f"Cannot add {value!r}: bag already holds {max_size} distinct values")
        self.value = value
        self.max_size = max_size


class ValueNotInBag(BagError, ValueError):
    """Raised when removing a value that has no occurrences in the bag."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Value {value!r} is not in the bag")
        self.value = value
