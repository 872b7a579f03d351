from __future__ import annotations
from ..types import *

# callbacks here receive (value, index, sequence) unless noted otherwise.


def each(sequence: Sequence[T], iteratee: IndexedIteratee[T, Any]) -> None:
    """invoke `iteratee` for every element, from left to right"""
    for i, item in enumerate(sequence):
        iteratee(item, i, sequence)


def each_right(sequence: Sequence[T], iteratee: IndexedIteratee[T, Any]) -> None:
    """invoke `iteratee` for every element, from right to left"""
    for i in range(len(sequence) - 1, -1, -1):
        iteratee(sequence[i], i, sequence)


def every(sequence: Sequence[T], predicate: IndexedPredicate[T]) -> bool:
    """true if `predicate` holds for every element (vacuously true when empty)"""
    return all(predicate(item, i, sequence) for i, item in enumerate(sequence))


def some(sequence: Sequence[T], predicate: IndexedPredicate[T]) -> bool:
    """true if `predicate` holds for any element"""
    return any(predicate(item, i, sequence) for i, item in enumerate(sequence))


# one primitive each, two names
all_ = every
any_ = some


def filter_(sequence: Sequence[T], predicate: IndexedPredicate[T]) -> List[T]:
    """the elements `predicate` returns true for"""
    return [item for i, item in enumerate(sequence) if predicate(item, i, sequence)]


def reject(sequence: Sequence[T], predicate: IndexedPredicate[T]) -> List[T]:
    """the elements `predicate` returns false for"""
    return [item for i, item in enumerate(sequence) if not predicate(item, i, sequence)]


def find(sequence: Sequence[T], predicate: IndexedPredicate[T], default: Optional[T] = None) -> Optional[T]:
    """the first element `predicate` returns true for, else `default`"""
    for i, item in enumerate(sequence):
        if predicate(item, i, sequence):
            return item
    return default


def flat_map(sequence: Sequence[T], iteratee: IndexedIteratee[T, Iterable[U]]) -> List[U]:
    """map every element to a sequence and flatten the results one level"""
    return [out for i, item in enumerate(sequence) for out in iteratee(item, i, sequence)]


def map_(sequence: Sequence[T], iteratee: Selector[T, U]) -> List[U]:
    """run each element through `iteratee` (which takes only the value)"""
    return [iteratee(item) for item in sequence]


def reduce(sequence: Sequence[T], iteratee: Reducer[U, T], accumulator: U) -> U:
    """
    fold the sequence from left to right. each call receives
    (accumulated value, element, index, sequence); `accumulator` is the seed.
    """
    for i, item in enumerate(sequence):
        accumulator = iteratee(accumulator, item, i, sequence)
    return accumulator


def reduce_right(sequence: Sequence[T], iteratee: Reducer[U, T], accumulator: U) -> U:
    """fold the sequence from right to left"""
    for i in range(len(sequence) - 1, -1, -1):
        accumulator = iteratee(accumulator, sequence[i], i, sequence)
    return accumulator


def includes(sequence: Iterable[T], value: T) -> bool:
    """whether `value` is in the sequence, using `==`"""
    return any(item == value for item in sequence)
