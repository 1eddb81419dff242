"""Functional primitives for fputil.

This module provides generic higher-order operations over sequences and
mappings. Utilities are stateless and, apart from ``sort`` (which reorders in
place) and caller-supplied side effects in ``for_each``, side-effect-free, so
they can be composed into pipelines.
"""

from fputil.functional.composition import chain, compose, curry, pipe
from fputil.functional.mappings import clone_list, clone_map, filter_map
from fputil.functional.ordering import (
    count,
    distinct,
    distinct_func,
    exists,
    max_,
    max_by,
    min_,
    min_by,
    partition,
    sort,
    sum_,
)
from fputil.functional.transforms import (
    filter_,
    flat_map,
    for_each,
    for_each_with_error,
    map_,
    map_return_with_error,
    reduce_,
)

__all__ = [
    # transforms
    "map_",
    "filter_",
    "flat_map",
    "reduce_",
    "for_each",
    "for_each_with_error",
    "map_return_with_error",
    # ordering
    "sort",
    "distinct",
    "distinct_func",
    "exists",
    "max_",
    "min_",
    "max_by",
    "min_by",
    "partition",
    "count",
    "sum_",
    # composition
    "curry",
    "compose",
    "pipe",
    "chain",
    # mappings
    "filter_map",
    "clone_map",
    "clone_list",
]
