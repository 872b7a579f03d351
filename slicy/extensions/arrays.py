from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable


def chunk(sequence: Sequence[T], size: int) -> List[Sequence[T]]:
    """
    split the sequence into groups the length of `size`.
    if it cannot be split evenly, the last chunk holds the remaining elements.
    """
    if size < 1:
        raise ValueError("chunk size must be positive")
    return [sequence[start:start + size] for start in range(0, len(sequence), size)]


def concat(*sequences: Iterable[T]) -> List[T]:
    """combine all the elements of all the given sequences into a single list"""
    return list(chain.from_iterable(sequences))


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("count must be non-negative")


def drop(sequence: Sequence[T], n: int) -> Sequence[T]:
    """the sequence with `n` elements dropped from the beginning"""
    _check_count(n)
    return sequence[min(n, len(sequence)):]


def drop_right(sequence: Sequence[T], n: int) -> Sequence[T]:
    """the sequence with `n` elements dropped from the end"""
    _check_count(n)
    return sequence[:len(sequence) - min(n, len(sequence))]


def drop_while(sequence: Sequence[T], predicate: IndexedPredicate[T]) -> Sequence[T]:
    """drop elements from the beginning until `predicate` returns false"""
    i = 0
    while i < len(sequence) and predicate(sequence[i], i, sequence):
        i += 1
    return sequence[i:]


def drop_right_while(sequence: Sequence[T], predicate: IndexedPredicate[T]) -> Sequence[T]:
    """drop elements from the end until `predicate` returns false"""
    i = len(sequence) - 1
    while i >= 0 and predicate(sequence[i], i, sequence):
        i -= 1
    return sequence[:i + 1]


def take(sequence: Sequence[T], n: int) -> Sequence[T]:
    """the first `n` elements"""
    _check_count(n)
    return sequence[:min(n, len(sequence))]


def take_right(sequence: Sequence[T], n: int) -> Sequence[T]:
    """the last `n` elements"""
    _check_count(n)
    return sequence[len(sequence) - min(n, len(sequence)):]


def take_while(sequence: Sequence[T], predicate: IndexedPredicate[T]) -> Sequence[T]:
    """take elements from the beginning until `predicate` returns false"""
    i = 0
    while i < len(sequence) and predicate(sequence[i], i, sequence):
        i += 1
    return sequence[:i]


def take_right_while(sequence: Sequence[T], predicate: IndexedPredicate[T]) -> Sequence[T]:
    """take elements from the end until `predicate` returns false"""
    i = len(sequence) - 1
    while i >= 0 and predicate(sequence[i], i, sequence):
        i -= 1
    return sequence[i + 1:]


def fill(sequence: List[T], value: T, start: int, end: int) -> None:
    """
    overwrite the elements from `start` up to, but not including, `end` with `value`.
    this is the one function here that mutates its argument.
    """
    if start < 0 or end > len(sequence):
        raise IndexError(f"fill range [{start}, {end}) out of bounds for length {len(sequence)}")
    for i in range(start, end):
        sequence[i] = value


def find_index(sequence: Sequence[T], predicate: Predicate[T]) -> int:
    """index of the first element `predicate` returns true for, or -1"""
    for i, item in enumerate(sequence):
        if predicate(item):
            return i
    return -1


def find_last_index(sequence: Sequence[T], predicate: Predicate[T]) -> int:
    """index of the last element `predicate` returns true for, or -1"""
    for i in range(len(sequence) - 1, -1, -1):
        if predicate(sequence[i]):
            return i
    return -1


def index_of(sequence: Sequence[T], value: T) -> int:
    """index of the first occurrence of `value`, or -1"""
    return find_index(sequence, lambda item: item == value)


def last_index_of(sequence: Sequence[T], value: T) -> int:
    """index of the last occurrence of `value`, or -1"""
    return find_last_index(sequence, lambda item: item == value)


def nth(sequence: Sequence[T], n: int) -> T:
    """element at index `n`. a negative `n` counts from the end."""
    if n < 0:
        n = len(sequence) + n
    if not 0 <= n < len(sequence):
        raise IndexError("index out of range")
    return sequence[n]


def join(sequence: Iterable[Any], separator: str) -> str:
    """the string form of every element, separated by `separator`. mixed types are fine."""
    return separator.join(str(item) for item in sequence)


def remove(sequence: Sequence[T], predicate: IndexedPredicate[T]) -> List[T]:
    """a new list without the elements `predicate` returns true for"""
    return [item for i, item in enumerate(sequence) if not predicate(item, i, sequence)]


def reverse(sequence: Sequence[T]) -> List[T]:
    """a reversed copy: first element last, second element second-to-last, and so on"""
    return list(reversed(sequence))


class _CoreOperations(Generic[T]):
    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(take(self._get_data(), count)))

    def take_right(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the last 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(take_right(self._get_data(), count)))

    def drop(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(drop(self._get_data(), count)))

    def drop_right(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the last 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(drop_right(self._get_data(), count)))

    def take_while(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        """take elements while predicate(value, index, data) is true"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(take_while(self._get_data(), predicate)))

    def drop_while(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate(value, index, data) is true"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(drop_while(self._get_data(), predicate)))

    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: [x for x in self._get_data() if predicate(x)])

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: [selector(x) for x in self._get_data()])

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: concat(*(selector(x) for x in self._get_data())))

    def remove(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        """drop the elements predicate(value, index, data) is true for"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: remove(self._get_data(), predicate))

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: reverse(self._get_data()))

    def concat(self: 'Enumerable[T]', *others: Iterable[T]) -> 'Enumerable[T]':
        """append every element of the other sequences, in order"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: concat(self._get_data(), *others))

    def order_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """sort elements by a key, ascending"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self._data_func, [key_selector])

    def as_ordered(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None) -> 'OrderedEnumerable[T]':
        """
        treats the current sequence as already sorted by key_selector (or by value),
        enabling the binary-search helpers without sorting again.
        """
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self._data_func, [key_selector or (lambda x: x)], presorted=True)
