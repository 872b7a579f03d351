from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Sequence, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparator = Callable[[T, T], bool]

# callables that also see the position and the whole sequence
IndexedPredicate = Callable[[T, int, Sequence[T]], bool]
IndexedIteratee = Callable[[T, int, Sequence[T]], U]
Reducer = Callable[[U, T, int, Sequence[T]], U]


def equals(x: Any, y: Any) -> bool:
    """plain `==` comparator used by the non-keyed variants"""
    return x == y


def key_equals(iteratee: KeySelector[T, K]) -> Comparator[T]:
    """build a comparator that checks `==` on the iteratee's results"""
    return lambda x, y: iteratee(x) == iteratee(y)
