from __future__ import annotations
import typing
import numpy as np
from bisect import bisect_left, bisect_right
from ..types import *
from ..numeric import as_numeric_array, search_sorted
from ..logger import logger

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

# binary-search queries over a sequence that is already sorted ascending.
# unsorted input gives an unspecified (but never raising) answer.


def _numeric_target(sequence: Sequence[T], value: Any) -> Optional[np.ndarray]:
    """the array to hand to numpy, when the sequence is already a numeric ndarray"""
    if not isinstance(sequence, np.ndarray):
        return None
    if not isinstance(value, (int, float, np.number)) or isinstance(value, bool):
        return None
    arr = as_numeric_array(sequence)
    if arr is not None:
        logger.debug("sorted search delegated to numpy.searchsorted (%d elements)", len(arr))
    return arr


def sorted_index(sequence: Sequence[T], value: T) -> int:
    """
    lowest index at which `value` could be inserted into the sorted `sequence`
    while keeping it sorted, i.e. the first position holding something >= value.
    """
    arr = _numeric_target(sequence, value)
    if arr is not None:
        return search_sorted(arr, value, 'left')
    return bisect_left(sequence, value)


def sorted_index_by(sequence: Sequence[T], value: T, iteratee: KeySelector[T, K]) -> int:
    """sorted_index, ranking every element (and `value`) by `iteratee`"""
    return bisect_left(sequence, iteratee(value), key=iteratee)


def sorted_index_of(sequence: Sequence[T], value: T) -> int:
    """position of the first `value` in the sorted `sequence`, or -1 if it is absent"""
    i = sorted_index(sequence, value)
    if i < len(sequence) and sequence[i] == value:
        return i
    return -1


def sorted_last_index(sequence: Sequence[T], value: T) -> int:
    """
    highest index at which `value` could be inserted into the sorted `sequence`
    while keeping it sorted: one past the last element equal to `value`.
    """
    i = sorted_index(sequence, value)
    # the run of equal elements can only start at i, so search the suffix for its end
    arr = _numeric_target(sequence, value)
    if arr is not None:
        return search_sorted(arr, value, 'right', lo=i)
    return bisect_right(sequence, value, lo=i)


def sorted_last_index_by(sequence: Sequence[T], value: T, iteratee: KeySelector[T, K]) -> int:
    """sorted_last_index, ranking every element (and `value`) by `iteratee`"""
    i = sorted_index_by(sequence, value, iteratee)
    return bisect_right(sequence, iteratee(value), lo=i, key=iteratee)


def sorted_last_index_of(sequence: Sequence[T], value: T) -> int:
    """position of the last `value` in the sorted `sequence`, or -1 if it is absent"""
    if sorted_index_of(sequence, value) == -1:
        return -1
    return sorted_last_index(sequence, value) - 1


class SearchAccessor(Generic[T]):
    """
    binary-search lookups on an enumerable whose data is already sorted.
    an ordered enumerable passes its own sort key, so lookups rank by that key.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]',
                 key_selector: Optional[KeySelector[T, K]] = None):
        self._enumerable = enumerable_instance
        self._key_selector = key_selector

    def sorted_index(self, value: T, iteratee: Optional[KeySelector[T, K]] = None) -> int:
        """lowest insertion index for value that keeps the data sorted"""
        key = iteratee or self._key_selector
        data = self._enumerable._get_data()
        return sorted_index_by(data, value, key) if key else sorted_index(data, value)

    def sorted_last_index(self, value: T, iteratee: Optional[KeySelector[T, K]] = None) -> int:
        """highest insertion index for value that keeps the data sorted"""
        key = iteratee or self._key_selector
        data = self._enumerable._get_data()
        return sorted_last_index_by(data, value, key) if key else sorted_last_index(data, value)

    def sorted_index_of(self, value: T) -> int:
        """first index ranking equal to value, or -1"""
        data = self._enumerable._get_data()
        key = self._key_selector
        if key is None:
            return sorted_index_of(data, value)
        i = sorted_index_by(data, value, key)
        if i < len(data) and key(data[i]) == key(value):
            return i
        return -1

    def sorted_last_index_of(self, value: T) -> int:
        """last index ranking equal to value, or -1"""
        data = self._enumerable._get_data()
        key = self._key_selector
        if key is None:
            return sorted_last_index_of(data, value)
        if self.sorted_index_of(value) == -1:
            return -1
        return sorted_last_index_by(data, value, key) - 1

    def equal_range(self, value: T, iteratee: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """the run of elements ranking equal to value, located with two binary searches"""
        from ..enumerable import Enumerable
        def equal_range_data():
            data = self._enumerable._get_data()
            start = self.sorted_index(value, iteratee)
            end = self.sorted_last_index(value, iteratee)
            return list(data[start:end])
        return Enumerable(equal_range_data)
