"""
Bag implemented as a singly linked chain of entries.

Each entry holds one distinct value and the number of times it occurs. New values are appended
at the tail, so both iteration views follow insertion order. All operations are linear scans
over the chain.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Iterator, Optional, Tuple

from linkbag.interface.bag import AbstractBag, Comparator, ElementT
from linkbag.interface.exceptions import BagFull, ValueNotInBag

logger = logging.getLogger(__name__)

# Changes to the chain structure are very low level, so log them below DEBUG.
CHAIN_LOG_LEVEL = logging.DEBUG - 1


class _Entry(Generic[ElementT]):
    __slots__ = ("value", "occurrences", "next")

    def __init__(
        self, value: ElementT, occurrences: int, next: Optional[_Entry[ElementT]] = None
    ) -> None:
        self.value = value
        self.occurrences = occurrences
        self.next = next

    def __repr__(self) -> str:
        return f"_Entry({self.value!r}, occurrences={self.occurrences})"


class LinkedBag(AbstractBag[ElementT]):
    """Bag storing its distinct values in a linked chain of entries, in insertion order.

    Args:
        values: Optional iterable of values to add (one occurrence each, in order).
        max_size: Maximum number of distinct values, or `None` for no limit.
        compare: Comparison function deciding which values are the same (result 0). Defaults to
            the natural ordering of the values.
    """

    def __init__(
        self,
        values: Optional[Iterable[ElementT]] = None,
        max_size: Optional[int] = None,
        compare: Optional[Comparator] = None,
    ) -> None:
        super().__init__(max_size=max_size, compare=compare)
        self._head: Optional[_Entry[ElementT]] = None

        if values is not None:
            for value in values:
                self.add(value)

    def _find_entry(self, value: Any) -> Optional[_Entry[ElementT]]:
        entry = self._head
        while entry is not None:
            if self.compare_values(value, entry.value) == 0:
                return entry
            entry = entry.next
        return None

    def _find_with_predecessor(
        self, value: Any
    ) -> Tuple[Optional[_Entry[ElementT]], Optional[_Entry[ElementT]]]:
        """Return the entry matching `value` together with the entry before it (if any)."""
        previous = None
        entry = self._head
        while entry is not None:
            if self.compare_values(value, entry.value) == 0:
                return previous, entry
            previous, entry = entry, entry.next
        return None, None

    def add(self, value: ElementT) -> None:
        self.add_with_occurrences(value, 1)

    def add_with_occurrences(self, value: ElementT, occurrences: int) -> None:
        if occurrences <= 0:
            return

        if self._head is None:
            self._head = _Entry(value, occurrences)
            self._log_chain_change("Created head entry for %r", value)
            return

        # Walk to either the matching entry or the tail, counting entries on the way.
        num_entries = 1
        entry = self._head
        while True:
            if self.compare_values(value, entry.value) == 0:
                entry.occurrences += occurrences
                return
            if entry.next is None:
                break
            entry = entry.next
            num_entries += 1

        if self.max_size is not None and num_entries >= self.max_size:
            self._log_chain_change("Rejected %r: bag holds %d distinct values", value, num_entries)
            raise BagFull(value, self.max_size)

        entry.next = _Entry(value, occurrences)
        self._log_chain_change("Appended entry for %r at position %d", value, num_entries)

    def contains(self, value: Any) -> bool:
        return self._find_entry(value) is not None

    def count_of(self, value: Any) -> int:
        entry = self._find_entry(value)
        return 0 if entry is None else entry.occurrences

    def remove(self, value: Any) -> None:
        """Remove a single occurrence of `value`.

        The entry is unlinked from the chain once its last occurrence is removed.

        Raises:
            ValueNotInBag: if `value` does not occur in the bag.
        """
        previous, entry = self._find_with_predecessor(value)
        if entry is None:
            raise ValueNotInBag(value)

        entry.occurrences -= 1
        if entry.occurrences > 0:
            return

        if previous is None:
            self._head = entry.next
        else:
            previous.next = entry.next
        self._log_chain_change("Unlinked entry for %r", entry.value)

    def size(self) -> int:
        count = 0
        entry = self._head
        while entry is not None:
            count += 1
            entry = entry.next
        return count

    def is_empty(self) -> bool:
        return self._head is None

    def total_occurrences(self) -> int:
        total = 0
        entry = self._head
        while entry is not None:
            total += entry.occurrences
            entry = entry.next
        return total

    def items(self) -> Iterator[Tuple[ElementT, int]]:
        entry = self._head
        while entry is not None:
            yield entry.value, entry.occurrences
            entry = entry.next

    def all_occurrences_iterator(self) -> AllOccurrencesIterator[ElementT]:
        return AllOccurrencesIterator(self._head)

    def unique_iterator(self) -> UniqueIterator[ElementT]:
        return UniqueIterator(self._head)

    def __iter__(self) -> UniqueIterator[ElementT]:
        return self.unique_iterator()

    def _log_chain_change(self, message: str, *args: Any) -> None:
        if logger.isEnabledFor(CHAIN_LOG_LEVEL):
            logger.log(CHAIN_LOG_LEVEL, message, *args)


class AllOccurrencesIterator(Iterator[ElementT]):
    """Yields every occurrence of every value, repeats of a value being consecutive.

    Mutating the bag while the iterator is in use leads to undefined results.
    """

    def __init__(self, head: Optional[_Entry[ElementT]]) -> None:
        self._current = head
        self._num_yielded = 0  # occurrences of the current entry yielded so far

    def has_next(self) -> bool:
        return self._current is not None

    def __next__(self) -> ElementT:
        entry = self._current
        if entry is None:
            raise StopIteration

        self._num_yielded += 1
        if self._num_yielded >= entry.occurrences:
            self._current = entry.next
            self._num_yielded = 0
        return entry.value


class UniqueIterator(Iterator[ElementT]):
    """Yields each distinct value once, in insertion order.

    Mutating the bag while the iterator is in use leads to undefined results.
    """

    def __init__(self, head: Optional[_Entry[ElementT]]) -> None:
        self._current = head

    def has_next(self) -> bool:
        return self._current is not None

    def __next__(self) -> ElementT:
        entry = self._current
        if entry is None:
            raise StopIteration

        self._current = entry.next
        return entry.value
