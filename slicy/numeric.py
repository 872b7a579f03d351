from __future__ import annotations
import numpy as np
from .types import *
from .config import numpy_enabled
from .logger import logger

# python scalar types that survive a numpy round trip without changing equality
_NUMERIC_TYPES = (int, float)


def as_numeric_array(data: Sequence[Any]) -> Optional[np.ndarray]:
    """
    try to view the data as a 1-d numeric numpy array.
    returns none whenever numpy could change the meaning of `==` or `<`:
    mixed element types, nan, huge ints, non-numeric objects.
    """
    if not numpy_enabled():
        return None
    try:
        if isinstance(data, np.ndarray):
            # arrays are taken as-is, only the dtype matters
            if data.ndim != 1 or data.dtype.kind not in 'biuf':
                return None
            if data.dtype.kind == 'f' and np.isnan(data).any():
                return None
            return data
        if not data:
            return None
        # a single concrete type keeps int/float coercion from merging 2**53 + 1 with 2**53
        kind = type(data[0])
        if kind not in _NUMERIC_TYPES or any(type(x) is not kind for x in data):
            return None
        arr = np.array(data)
        if arr.dtype.kind not in 'iuf':
            return None
        if arr.dtype.kind == 'f' and np.isnan(arr).any():
            return None
        return arr
    except (TypeError, ValueError, OverflowError):  # numpy refused the data
        logger.debug("numpy conversion failed for %d elements", len(data))
        return None


def first_occurrences(arr: np.ndarray) -> List[int]:
    """indexes of the first occurrence of each distinct value, in encounter order"""
    _, first_index = np.unique(arr, return_index=True)
    return sorted(first_index.tolist())


def not_in_mask(arr: np.ndarray, others: np.ndarray) -> List[bool]:
    """for each element of arr, whether it is absent from others"""
    return np.isin(arr, others, invert=True).tolist()


def search_sorted(arr: np.ndarray, value: Any, side: str = 'left', lo: int = 0) -> int:
    """binary search on a sorted numeric array, returning a python int"""
    return lo + int(np.searchsorted(arr[lo:], value, side=side))
