from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from .arrays import find_index, index_of, nth, join
from .grouping import count_by
from .iteration import every, some, find, includes, reduce

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    """eager operations that leave the fluent chain and return plain values"""
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable._get_data()

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable._get_data()}

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def frame(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    def value_counts(self, key_selector: KeySelector[T, K]) -> pd.Series:
        """counts per key as a pandas series, keys in order of first appearance"""
        counts = count_by(self._enumerable._get_data(), key_selector)
        return pd.Series(counts, dtype='int64')

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._enumerable._get_data())
        return sum(1 for x in self._enumerable._get_data() if predicate(x))

    def every(self, predicate: IndexedPredicate[T]) -> bool:
        """check if predicate(value, index, data) holds for all elements"""
        return every(self._enumerable._get_data(), predicate)

    def some(self, predicate: IndexedPredicate[T]) -> bool:
        """check if predicate(value, index, data) holds for any element"""
        return some(self._enumerable._get_data(), predicate)

    def find(self, predicate: IndexedPredicate[T], default: Optional[T] = None) -> Optional[T]:
        """first element matching predicate, or default"""
        return find(self._enumerable._get_data(), predicate, default)

    def find_index(self, predicate: Predicate[T]) -> int:
        """index of the first element matching predicate, or -1"""
        return find_index(self._enumerable._get_data(), predicate)

    def index_of(self, value: T) -> int:
        """index of the first occurrence of value, or -1"""
        return index_of(self._enumerable._get_data(), value)

    def includes(self, value: T) -> bool:
        return includes(self._enumerable._get_data(), value)

    def nth(self, n: int) -> T:
        """element at n, negative counting from the end"""
        return nth(self._enumerable._get_data(), n)

    def join(self, separator: str = ",") -> str:
        return join(self._enumerable._get_data(), separator)

    def reduce(self, iteratee: Reducer[U, T], accumulator: U) -> U:
        """fold left with iteratee(acc, value, index, data)"""
        return reduce(self._enumerable._get_data(), iteratee, accumulator)
