"""Tests for the operations shared by all bags, exercised through `LinkedBag`."""

from __future__ import annotations

import pytest

from linkbag.interface.bag import AbstractBag, natural_compare
from linkbag.interface.exceptions import BagError, BagFull, InvalidCapacity, ValueNotInBag
from linkbag.linked_bag import LinkedBag


def compare_by_length(a: str, b: str) -> int:
    return natural_compare(len(a), len(b))


def test_natural_compare() -> None:
    assert natural_compare(1, 1) == 0
    assert natural_compare(1, 2) < 0
    assert natural_compare("b", "a") > 0

    # Unequal values without an ordering still compare as different.
    assert natural_compare({"a": 1}, {"b": 2}) != 0
    assert natural_compare(None, 1) != 0
    assert natural_compare({"a": 1}, {"a": 1}) == 0


def test_abstract_bag_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        AbstractBag()  # type: ignore[abstract]


@pytest.mark.parametrize("max_size", [1.5, "3", True])
def test_non_integer_capacity(max_size) -> None:
    with pytest.raises(TypeError):
        LinkedBag(max_size=max_size)


def test_configuration_properties() -> None:
    bag = LinkedBag(max_size=5, compare=compare_by_length)

    assert bag.max_size == 5
    assert bag.compare is compare_by_length
    assert bag.compare_values("ab", "cd") == 0
    assert LinkedBag().max_size is None
    assert LinkedBag().compare is natural_compare


def test_error_hierarchy() -> None:
    for error_cls in [BagFull, InvalidCapacity, ValueNotInBag]:
        assert issubclass(error_cls, BagError)

    assert issubclass(InvalidCapacity, ValueError)
    assert issubclass(ValueNotInBag, ValueError)
    assert str(InvalidCapacity(0)) == "Maximum bag size must be positive, got 0"


def test_string_representation(fruit_bag: LinkedBag[str], empty_bag: LinkedBag[str]) -> None:
    assert str(fruit_bag) == "[apple: 2, banana: 1, cherry: 3]"
    assert str(empty_bag) == "[]"
    assert repr(fruit_bag) == "LinkedBag([apple: 2, banana: 1, cherry: 3])"


def test_copy_empty() -> None:
    bag = LinkedBag(["a", "bb"], max_size=4, compare=compare_by_length)
    copy = bag.copy_empty()

    assert isinstance(copy, LinkedBag)
    assert copy.is_empty()
    assert copy.max_size == 4
    assert copy.compare is compare_by_length
    assert bag.size() == 2


def test_create_merged_all_occurrences(fruit_bag: LinkedBag[str]) -> None:
    other = LinkedBag(["cherry", "durian", "durian"])
    merged = fruit_bag.create_merged_all_occurrences(other)

    assert list(merged.items()) == [("apple", 2), ("banana", 1), ("cherry", 4), ("durian", 2)]

    # Inputs are left untouched.
    assert fruit_bag.count_of("cherry") == 3
    assert other.count_of("cherry") == 1


def test_create_merged_all_unique(fruit_bag: LinkedBag[str]) -> None:
    other = LinkedBag(["cherry", "durian", "durian"])
    merged = fruit_bag.create_merged_all_unique(other)

    assert list(merged.all_occurrences_iterator()) == ["apple", "banana", "cherry", "durian"]


def test_merge_capacity() -> None:
    bag_1 = LinkedBag(["a", "b"], max_size=2)
    bag_2 = LinkedBag(["c", "d"], max_size=2)

    # The merged bag can hold the distinct values of both inputs.
    merged = bag_1.create_merged_all_occurrences(bag_2)
    assert merged.max_size == 4
    assert merged.is_full()

    # If either input is unbounded, so is the result.
    assert bag_1.create_merged_all_unique(LinkedBag(["x", "y", "z"])).max_size is None


def test_subtract(fruit_bag: LinkedBag[str]) -> None:
    other = LinkedBag()
    other.add_with_occurrences("apple", 5)
    other.add("cherry")
    other.add("durian")

    difference = fruit_bag.subtract(other)

    assert list(difference.items()) == [("banana", 1), ("cherry", 2)]
    assert not difference.contains("apple")
    assert not difference.contains("durian")


def test_merge_uses_comparator() -> None:
    bag_1 = LinkedBag(["a", "bb"], compare=compare_by_length)
    bag_2 = LinkedBag(["x", "ccc"], compare=compare_by_length)

    merged = bag_1.create_merged_all_occurrences(bag_2)
    assert list(merged.items()) == [("a", 2), ("bb", 1), ("ccc", 1)]
