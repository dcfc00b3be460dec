"""In-place comparison sorts suited to nearly sorted data such as depth orderings."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import TypeVar

T = TypeVar("T")

LessThan = Callable[[T, T], bool]


def bubble_sort(values: MutableSequence[T], less_than: LessThan) -> MutableSequence[T]:
    """Sort ``values`` in place with bubble sort, stopping early once a pass makes no swap."""
    size = len(values)
    for done in range(size - 1):
        swapped = False
        for j in range(size - done - 1):
            if less_than(values[j + 1], values[j]):
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break
    return values


def selection_sort(values: MutableSequence[T], less_than: LessThan) -> MutableSequence[T]:
    """Sort ``values`` in place with selection sort."""
    size = len(values)
    for i in range(size):
        smallest = min(range(i, size), key=_IndexKey(values, less_than))
        if smallest != i:
            values[i], values[smallest] = values[smallest], values[i]
    return values


def insertion_sort(values: MutableSequence[T], less_than: LessThan) -> MutableSequence[T]:
    """Sort ``values`` in place with insertion sort."""
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and less_than(current, values[j]):
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current
    return values


class _IndexKey:
    """Key factory ordering indices by the element they point at under ``less_than``.

    ``min`` keeps the first of equal keys, matching a scan that only moves on strict less-than.
    """

    def __init__(self, values: MutableSequence[T], less_than: LessThan) -> None:
        self._values = values
        self._less_than = less_than

    def __call__(self, index: int) -> "_Keyed":
        return _Keyed(self._values[index], self._less_than)


class _Keyed:
    __slots__ = ("value", "less_than")

    def __init__(self, value, less_than: LessThan) -> None:
        self.value = value
        self.less_than = less_than

    def __lt__(self, other: "_Keyed") -> bool:
        return bool(self.less_than(self.value, other.value))