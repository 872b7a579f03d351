from __future__ import annotations

from abc import ABC, abstractmethod
from bisect import bisect_left, bisect_right
from .types import *

# --- core functionality ---
from .extensions.arrays import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.search import SearchAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, chainable wrapper over a sequence exposing the slicy functions."""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.search = SearchAccessor(self)
        self.group = GroupingAccessor(self)
        self.to = TerminalAccessor(self)

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """represents a sequence sorted ascending by one or more keys."""

    def __init__(self, data_func: Callable[[], List[T]], sort_keys: List[KeySelector[T, Any]],
                 presorted: bool = False):
        super().__init__(data_func)
        self._original_data_func = data_func
        self._sort_keys = sort_keys
        self._presorted = presorted
        # binary searches rank elements by the full composite sort key
        self.search = SearchAccessor(self, self._get_full_key_selector())

    def _get_data(self) -> List[T]:
        """overrides base to apply all sorts at once using stable sort."""
        if not self._is_cached:
            data = list(self._original_data_func())
            if not self._presorted:
                # python's sort is stable, so we sort from the last key to the first
                for key_selector in reversed(self._sort_keys):
                    data = sorted(data, key=key_selector)
            self._cached_result = data
            self._is_cached = True
        return self._cached_result

    def _get_full_key_selector(self) -> Callable[[T], Tuple]:
        """creates a single selector that returns a tuple of all sort keys."""
        sort_keys = self._sort_keys
        return lambda item: tuple(key_selector(item) for key_selector in sort_keys)

    def then_by(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        if self._presorted:
            raise TypeError("then_by cannot refine a sequence marked as already ordered.")
        return OrderedEnumerable(self._original_data_func, self._sort_keys + [key_selector])

    def find_by_key(self, *key_prefix: Any) -> 'Enumerable[T]':
        """
        finds all items whose sort key starts with key_prefix using binary search (o(log n)).
        """
        def find_data():
            if len(key_prefix) > len(self._sort_keys):
                raise ValueError("more search keys provided than sort levels exist.")

            full_key = self._get_full_key_selector()
            prefix_len = len(key_prefix)

            def key_wrapper(item):
                return full_key(item)[:prefix_len]

            sorted_data = self._get_data()
            start_index = bisect_left(sorted_data, key_prefix, key=key_wrapper)
            end_index = bisect_right(sorted_data, key_prefix, lo=start_index, key=key_wrapper)

            return sorted_data[start_index:end_index]

        return Enumerable(find_data)

    def between_keys(self, lower_bound: Union[Any, Tuple], upper_bound: Union[Any, Tuple]) -> 'Enumerable[T]':
        """
        gets the items whose sort key prefix lies between the bounds, both inclusive.
        """
        def between_data():
            lower = lower_bound if isinstance(lower_bound, tuple) else (lower_bound,)
            upper = upper_bound if isinstance(upper_bound, tuple) else (upper_bound,)

            if len(lower) != len(upper):
                raise ValueError("lower and upper bound tuples must have the same length.")
            if len(lower) > len(self._sort_keys):
                raise ValueError("more bound keys provided than sort levels exist.")

            full_key = self._get_full_key_selector()
            bound_len = len(lower)

            def key_wrapper(item):
                return full_key(item)[:bound_len]

            sorted_data = self._get_data()
            start_index = bisect_left(sorted_data, lower, key=key_wrapper)
            end_index = bisect_right(sorted_data, upper, key=key_wrapper)

            return sorted_data[start_index:end_index]

        return Enumerable(between_data)
