r"""
      _ _
  ___| (_) ___ _   _
 / __| | |/ __| | | |
 \__ \ | | (__| |_| |
 |___/_|_|\___|\__, |
               |___/

functional-style utilities for ordered sequences.
"""

# expose the standalone functions
from .extensions.arrays import (
    chunk, concat, drop, drop_right, drop_while, drop_right_while,
    take, take_right, take_while, take_right_while, fill,
    find_index, find_last_index, index_of, last_index_of, nth, join, remove, reverse
)
from .extensions.search import (
    sorted_index, sorted_index_by, sorted_index_of,
    sorted_last_index, sorted_last_index_by, sorted_last_index_of
)
from .extensions.set import (
    difference, difference_by, difference_with,
    intersection, intersection_by, intersection_with,
    union, union_by, union_with,
    uniq, uniq_by, uniq_with,
    xor, xor_by, xor_with,
    without, pull, pull_all, pull_all_by, pull_all_with, pull_at
)
from .extensions.iteration import (
    each, each_right, every, all_, some, any_, filter_, reject, find,
    flat_map, map_, reduce, reduce_right, includes
)
from .extensions.grouping import count_by, group_by, key_by, partition

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable

# expose the factory functions
from .factories import from_iterable, from_range, repeat, empty, S

# define what `import *` does
__all__ = [
    # arrays
    "chunk", "concat", "drop", "drop_right", "drop_while", "drop_right_while",
    "take", "take_right", "take_while", "take_right_while", "fill",
    "find_index", "find_last_index", "index_of", "last_index_of", "nth", "join",
    "remove", "reverse",
    # sorted search
    "sorted_index", "sorted_index_by", "sorted_index_of",
    "sorted_last_index", "sorted_last_index_by", "sorted_last_index_of",
    # set algebra
    "difference", "difference_by", "difference_with",
    "intersection", "intersection_by", "intersection_with",
    "union", "union_by", "union_with",
    "uniq", "uniq_by", "uniq_with",
    "xor", "xor_by", "xor_with",
    "without", "pull", "pull_all", "pull_all_by", "pull_all_with", "pull_at",
    # iteration
    "each", "each_right", "every", "all_", "some", "any_", "filter_", "reject",
    "find", "flat_map", "map_", "reduce", "reduce_right", "includes",
    # grouping
    "count_by", "group_by", "key_by", "partition",
    # fluent api
    "Enumerable",
    "OrderedEnumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "S",
]
