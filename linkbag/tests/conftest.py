from __future__ import annotations

import pytest

from linkbag.linked_bag import LinkedBag


@pytest.fixture
def empty_bag() -> LinkedBag[str]:
    return LinkedBag()


@pytest.fixture
def fruit_bag() -> LinkedBag[str]:
    """Returns the bag {apple: 2, banana: 1, cherry: 3}, inserted in that order."""
    bag: LinkedBag[str] = LinkedBag()
    bag.add_with_occurrences("apple", 2)
    bag.add("banana")
    bag.add_with_occurrences("cherry", 3)
    return bag
