from __future__ import annotations
import typing
from itertools import chain
from ..types import *
from ..numeric import as_numeric_array, first_occurrences, not_in_mask
from ..logger import logger

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

# every family below has one comparator-driven implementation (the *_with form).
# the plain and *_by forms only build a comparator and delegate, so all three
# share the same ordering and uniqueness rules. lookups are linear scans, which
# keeps arbitrary comparators working at o(n * m).


def _contains(sequence: Iterable[T], item: T, comparator: Comparator[T]) -> bool:
    return any(comparator(item, other) for other in sequence)


# --- difference ---

def difference(sequence: Sequence[T], *others: Sequence[T]) -> List[T]:
    """
    items of `sequence` that are not present in any of the `others`.
    duplicates in `sequence` are kept. comparison is `==`.
    """
    data = list(sequence)
    arr = as_numeric_array(data)
    if arr is not None:
        excluded = as_numeric_array(list(chain.from_iterable(others)))
        if excluded is not None and excluded.dtype.kind == arr.dtype.kind:
            logger.debug("difference delegated to numpy.isin (%d x %d)", len(arr), len(excluded))
            return [item for item, keep in zip(data, not_in_mask(arr, excluded)) if keep]
    return difference_with(data, equals, *others)


def difference_by(sequence: Sequence[T], iteratee: KeySelector[T, K], *others: Sequence[T]) -> List[T]:
    """difference, comparing the results of `iteratee` with `==`"""
    return difference_with(sequence, key_equals(iteratee), *others)


def difference_with(sequence: Sequence[T], comparator: Comparator[T], *others: Sequence[T]) -> List[T]:
    """difference, deciding equality with `comparator`"""
    return [item for item in sequence
            if not any(_contains(other, item, comparator) for other in others)]


# --- intersection ---

def intersection(sequence: Sequence[T], *others: Sequence[T]) -> List[T]:
    """
    unique values of `sequence` that are also included in every one of `others`.
    the order of the result is the order of first appearance in `sequence`.
    """
    return intersection_with(equals, sequence, *others)


def intersection_by(iteratee: KeySelector[T, K], sequence: Sequence[T], *others: Sequence[T]) -> List[T]:
    """intersection, comparing the results of `iteratee` with `==`"""
    return intersection_with(key_equals(iteratee), sequence, *others)


def intersection_with(comparator: Comparator[T], sequence: Sequence[T], *others: Sequence[T]) -> List[T]:
    """intersection, deciding equality with `comparator`"""
    output = []
    for item in sequence:
        if _contains(output, item, comparator):
            continue
        if all(_contains(other, item, comparator) for other in others):
            output.append(item)
    return output


# --- union / uniq ---

def union(*sequences: Sequence[T]) -> List[T]:
    """unique values of all the given sequences, in order of first appearance. uses `==`."""
    data = list(chain.from_iterable(sequences))
    arr = as_numeric_array(data)
    if arr is not None:
        logger.debug("union delegated to numpy.unique (%d elements)", len(arr))
        return [data[i] for i in first_occurrences(arr)]
    return union_with(equals, data)


def union_by(iteratee: KeySelector[T, K], *sequences: Sequence[T]) -> List[T]:
    """union, comparing the results of `iteratee` with `==`"""
    return union_with(key_equals(iteratee), *sequences)


def union_with(comparator: Comparator[T], *sequences: Sequence[T]) -> List[T]:
    """union, deciding equality with `comparator`"""
    output = []
    for item in chain.from_iterable(sequences):
        if not _contains(output, item, comparator):
            output.append(item)
    return output


def uniq(sequence: Sequence[T]) -> List[T]:
    """the sequence without duplicates, keeping only the first occurrence of each element"""
    return union(sequence)


def uniq_by(iteratee: KeySelector[T, K], sequence: Sequence[T]) -> List[T]:
    """uniq, comparing the results of `iteratee` with `==`"""
    return union_by(iteratee, sequence)


def uniq_with(comparator: Comparator[T], sequence: Sequence[T]) -> List[T]:
    """uniq, deciding equality with `comparator`"""
    return union_with(comparator, sequence)


# --- xor ---

def xor(*sequences: Sequence[T]) -> List[T]:
    """
    unique values that are in any of the sequences but not in their intersection.
    the order is the order of first appearance across the sequences.
    """
    return xor_with(equals, *sequences)


def xor_by(iteratee: KeySelector[T, K], *sequences: Sequence[T]) -> List[T]:
    """xor, comparing the results of `iteratee` with `==`"""
    return xor_with(key_equals(iteratee), *sequences)


def xor_with(comparator: Comparator[T], *sequences: Sequence[T]) -> List[T]:
    """xor, deciding equality with `comparator`"""
    if not sequences:
        return []
    common = intersection_with(comparator, *sequences)
    output = []
    for item in chain.from_iterable(sequences):
        if not _contains(common, item, comparator) and not _contains(output, item, comparator):
            output.append(item)
    return output


# --- removal helpers ---

def without(sequence: Sequence[T], *values: T) -> List[T]:
    """the sequence without any of the given values. uses `==`."""
    return [item for item in sequence if not any(equals(item, value) for value in values)]


def pull(sequence: Sequence[T], *values: T) -> List[T]:
    """the sequence without all the given values"""
    return pull_all(sequence, values)


def pull_all(sequence: Sequence[T], values: Sequence[T]) -> List[T]:
    """the sequence without the items in `values`. uses `==`."""
    return pull_all_with(sequence, values, equals)


def pull_all_by(sequence: Sequence[T], values: Sequence[T], iteratee: KeySelector[T, K]) -> List[T]:
    """pull_all, comparing the results of `iteratee` with `==`"""
    return pull_all_with(sequence, values, key_equals(iteratee))


def pull_all_with(sequence: Sequence[T], values: Sequence[T], comparator: Comparator[T]) -> List[T]:
    """pull_all, deciding equality with `comparator`"""
    return [item for item in sequence if not any(comparator(value, item) for value in values)]


def pull_at(sequence: Sequence[T], *indexes: int) -> List[T]:
    """the sequence without the items at the given positions"""
    return [item for i, item in enumerate(sequence) if i not in indexes]


class SetAccessor(Generic[T]):
    """
    order-preserving set algebra over the enumerable's data.
    each method takes the receiver as the first (or only anchored) sequence.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _wrap(self, compute: Callable[[List[T]], List[T]]) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: compute(self._enumerable._get_data()))

    def difference(self, *others: Sequence[T]) -> 'Enumerable[T]':
        """elements not present in any of the others"""
        return self._wrap(lambda data: difference(data, *others))

    def difference_by(self, iteratee: KeySelector[T, K], *others: Sequence[T]) -> 'Enumerable[T]':
        return self._wrap(lambda data: difference_by(data, iteratee, *others))

    def difference_with(self, comparator: Comparator[T], *others: Sequence[T]) -> 'Enumerable[T]':
        return self._wrap(lambda data: difference_with(data, comparator, *others))

    def intersection(self, *others: Sequence[T]) -> 'Enumerable[T]':
        """unique elements also present in every one of the others"""
        return self._wrap(lambda data: intersection(data, *others))

    def intersection_by(self, iteratee: KeySelector[T, K], *others: Sequence[T]) -> 'Enumerable[T]':
        return self._wrap(lambda data: intersection_by(iteratee, data, *others))

    def intersection_with(self, comparator: Comparator[T], *others: Sequence[T]) -> 'Enumerable[T]':
        return self._wrap(lambda data: intersection_with(comparator, data, *others))

    def union(self, *others: Sequence[T]) -> 'Enumerable[T]':
        """unique elements of this sequence followed by those of the others"""
        return self._wrap(lambda data: union(data, *others))

    def union_by(self, iteratee: KeySelector[T, K], *others: Sequence[T]) -> 'Enumerable[T]':
        return self._wrap(lambda data: union_by(iteratee, data, *others))

    def union_with(self, comparator: Comparator[T], *others: Sequence[T]) -> 'Enumerable[T]':
        return self._wrap(lambda data: union_with(comparator, data, *others))

    def uniq(self, iteratee: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """distinct elements, first occurrence wins"""
        if iteratee is None:
            return self._wrap(uniq)
        return self._wrap(lambda data: uniq_by(iteratee, data))

    def uniq_with(self, comparator: Comparator[T]) -> 'Enumerable[T]':
        return self._wrap(lambda data: uniq_with(comparator, data))

    def xor(self, *others: Sequence[T]) -> 'Enumerable[T]':
        """elements outside the intersection of this sequence and the others"""
        return self._wrap(lambda data: xor(data, *others))

    def xor_by(self, iteratee: KeySelector[T, K], *others: Sequence[T]) -> 'Enumerable[T]':
        return self._wrap(lambda data: xor_by(iteratee, data, *others))

    def xor_with(self, comparator: Comparator[T], *others: Sequence[T]) -> 'Enumerable[T]':
        return self._wrap(lambda data: xor_with(comparator, data, *others))

    def without(self, *values: T) -> 'Enumerable[T]':
        return self._wrap(lambda data: without(data, *values))

    def pull_all(self, values: Sequence[T], iteratee: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """drop every element matching one of values, optionally by key"""
        if iteratee is None:
            return self._wrap(lambda data: pull_all(data, values))
        return self._wrap(lambda data: pull_all_by(data, values, iteratee))

    def pull_at(self, *indexes: int) -> 'Enumerable[T]':
        return self._wrap(lambda data: pull_at(data, *indexes))

    # --- boolean set checks ---

    def is_subset_of(self, other: Sequence[T]) -> bool:
        """whether every element also occurs in other"""
        return not difference(self._enumerable._get_data(), other)

    def is_disjoint_with(self, other: Sequence[T]) -> bool:
        """whether no element occurs in other"""
        return not intersection(self._enumerable._get_data(), other)
