from linkbag.interface.bag import AbstractBag, natural_compare
from linkbag.interface.exceptions import BagError, BagFull, InvalidCapacity, ValueNotInBag
from linkbag.linked_bag import AllOccurrencesIterator, LinkedBag, UniqueIterator

__all__ = [
    "AbstractBag",
    "LinkedBag",
    "AllOccurrencesIterator",
    "UniqueIterator",
    "natural_compare",
    "BagError",
    "BagFull",
    "InvalidCapacity",
    "ValueNotInBag",
]
