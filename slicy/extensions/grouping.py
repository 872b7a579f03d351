from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *
from .arrays import chunk

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def count_by(sequence: Iterable[T], iteratee: KeySelector[T, K]) -> Dict[K, int]:
    """map each key produced by `iteratee` to the number of elements that produced it"""
    counts = defaultdict(int)
    for item in sequence:
        counts[iteratee(item)] += 1
    return dict(counts)


def group_by(sequence: Iterable[T], iteratee: KeySelector[T, K]) -> Dict[K, List[T]]:
    """
    map each key produced by `iteratee` to the elements that produced it.
    groups keep the order the elements have in the sequence.
    """
    groups = defaultdict(list)
    for item in sequence:
        groups[iteratee(item)].append(item)
    return dict(groups)


def key_by(sequence: Iterable[T], iteratee: KeySelector[T, K]) -> Dict[K, T]:
    """map each key produced by `iteratee` to the last element that produced it"""
    return {iteratee(item): item for item in sequence}


def partition(sequence: Iterable[T], predicate: Predicate[T]) -> Tuple[List[T], List[T]]:
    """split into (elements predicate is true for, elements it is false for)"""
    truths, falsehoods = [], []
    for item in sequence:
        (truths if predicate(item) else falsehoods).append(item)
    return truths, falsehoods


class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """group elements by a key"""
        return group_by(self._enumerable._get_data(), key_selector)

    def count_by(self, key_selector: KeySelector[T, K]) -> Dict[K, int]:
        """count elements per key"""
        return count_by(self._enumerable._get_data(), key_selector)

    def key_by(self, key_selector: KeySelector[T, K]) -> Dict[K, T]:
        """index elements by key, later elements winning"""
        return key_by(self._enumerable._get_data(), key_selector)

    def partition(self, predicate: Predicate[T]) -> Tuple[List[T], List[T]]:
        """partition elements based on predicate"""
        return partition(self._enumerable._get_data(), predicate)

    def chunk(self, size: int) -> 'Enumerable[List[T]]':
        """split into chunks of specified size"""
        from ..enumerable import Enumerable
        if size < 1:
            raise ValueError("chunk size must be positive")
        return Enumerable(lambda: [list(part) for part in chunk(self._enumerable._get_data(), size)])
