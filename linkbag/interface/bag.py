"""
Base class shared by bag implementations.

A bag (multi-set) stores each distinct value once together with the number of times it occurs.
Which values count as "the same" is decided by a comparison function supplied at construction,
rather than by object identity or hashing, so unhashable values and custom notions of equality
(e.g. case-insensitive strings) are supported.
"""

from __future__ import annotations

import abc
from collections.abc import Collection
from typing import Any, Callable, Generic, Iterator, Optional, Protocol, Tuple, TypeVar

from linkbag.interface.exceptions import InvalidCapacity


class Comparable(Protocol):
    def __lt__(self, __other) -> bool:
        ...


ElementT = TypeVar("ElementT")
BagT = TypeVar("BagT", bound="AbstractBag")

# Returns a negative number, zero or a positive number (like `cmp` in Python 2).
Comparator = Callable[[Any, Any], int]


def natural_compare(a: Comparable, b: Comparable) -> int:
    """Compare two values using their natural ordering.

    Values that are equal compare as 0. Unequal values that cannot be ordered against each other
    (e.g. dicts, or `None` and an int) compare as 1, since bags only need to tell them apart.
    """
    if a == b:
        return 0
    try:
        return -1 if a < b else 1
    except TypeError:
        return 1


def _merged_max_size(a: Optional[int], b: Optional[int]) -> Optional[int]:
    if a is None or b is None:
        return None
    return a + b


class AbstractBag(Collection, Generic[ElementT]):
    """Abstract bag holding the comparison strategy and the optional capacity.

    The capacity (`max_size`) limits the number of *distinct* values, not the total number of
    occurrences. Subclasses implement the primitive operations; whole-bag operations such as
    merging are implemented here on top of them.

    Subclasses are expected to accept `max_size` and `compare` as keyword arguments, since
    `copy_empty` relies on it.
    """

    def __init__(self, max_size: Optional[int] = None, compare: Optional[Comparator] = None) -> None:
        if max_size is not None:
            if isinstance(max_size, bool) or not isinstance(max_size, int):
                raise TypeError(f"Maximum bag size must be an integer, got {type(max_size)}")
            if max_size <= 0:
                raise InvalidCapacity(max_size)

        self._max_size = max_size
        self._compare: Comparator = compare if compare is not None else natural_compare

    @property
    def max_size(self) -> Optional[int]:
        return self._max_size

    @property
    def compare(self) -> Comparator:
        return self._compare

    def compare_values(self, a: Any, b: Any) -> int:
        return self._compare(a, b)

    @abc.abstractmethod
    def add(self, value: ElementT) -> None:
        """Add a single occurrence of `value`."""

    @abc.abstractmethod
    def add_with_occurrences(self, value: ElementT, occurrences: int) -> None:
        """Add `occurrences` occurrences of `value` (no-op if `occurrences` is not positive)."""

    @abc.abstractmethod
    def contains(self, value: Any) -> bool:
        """Whether `value` occurs at least once."""

    @abc.abstractmethod
    def count_of(self, value: Any) -> int:
        """Number of occurrences of `value`, zero if absent."""

    @abc.abstractmethod
    def remove(self, value: Any) -> None:
        """Remove a single occurrence of `value`."""

    @abc.abstractmethod
    def size(self) -> int:
        """Number of distinct values in the bag."""

    @abc.abstractmethod
    def is_empty(self) -> bool:
        """Whether the bag holds no values at all."""

    @abc.abstractmethod
    def all_occurrences_iterator(self) -> Iterator[ElementT]:
        """Iterate over all values, yielding each one as many times as it occurs."""

    @abc.abstractmethod
    def __iter__(self) -> Iterator[ElementT]:
        """Iterate over distinct values, yielding each one once."""

    def is_full(self) -> bool:
        return self._max_size is not None and self.size() >= self._max_size

    def items(self) -> Iterator[Tuple[ElementT, int]]:
        """Iterate over `(value, count)` pairs, one per distinct value."""
        for value in self:
            yield value, self.count_of(value)

    def total_occurrences(self) -> int:
        return sum(count for _, count in self.items())

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self.size()

    def copy_empty(self: BagT) -> BagT:
        """Return a new empty bag with the same type, capacity and comparator."""
        return self._new_empty(self._max_size)

    def _new_empty(self: BagT, max_size: Optional[int]) -> BagT:
        return type(self)(max_size=max_size, compare=self._compare)

    def create_merged_all_occurrences(self: BagT, other: AbstractBag) -> BagT:
        """Return a new bag with all occurrences from both `self` and `other`."""
        result = self._new_empty(_merged_max_size(self._max_size, other.max_size))
        for source in (self, other):
            for value, count in source.items():
                result.add_with_occurrences(value, count)
        return result

    def create_merged_all_unique(self: BagT, other: AbstractBag) -> BagT:
        """Return a new bag containing each distinct value from `self` and `other` exactly once."""
        result = self._new_empty(_merged_max_size(self._max_size, other.max_size))
        for source in (self, other):
            for value in source:
                if not result.contains(value):
                    result.add(value)
        return result

    def subtract(self: BagT, other: AbstractBag) -> BagT:
        """Return a new bag with the occurrences in `other` taken away from those in `self`."""
        result = self.copy_empty()
        for value, count in self.items():
            result.add_with_occurrences(value, count - other.count_of(value))
        return result

    def __str__(self) -> str:
        return "[" + ", ".join(f"{value}: {count}" for value, count in self.items()) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"
