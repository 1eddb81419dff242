"""Sequence transforms: map, filter, flatten, fold and iteration helpers.

Every function here walks its input exactly once, front to back, and never
modifies it. Functions that build a sequence always return a fresh ``list``;
an empty or absent (``None``) source yields ``[]`` rather than ``None``.

Two helpers let per-element work fail without raising out of the loop:

    - ``for_each_with_error`` returns the first exception raised by the action.
    - ``map_return_with_error`` returns ``(None, MappingError)`` on the first
      failure, where the error records the zero-based index of the element.

Examples:
    >>> from fputil.functional.transforms import map_, reduce_
    >>> map_([1, 2, 3], lambda x: x * 2)
    [2, 4, 6]
    >>> reduce_(["D", "a", "r", "k"], lambda acc, c: acc + c, "")
    'Dark'
"""

import typing as tp

from fputil.core.errors import MappingError
from fputil.core.types import R, T
from fputil.logger.logger import logger

__all__ = [
    "map_",
    "filter_",
    "flat_map",
    "reduce_",
    "for_each",
    "for_each_with_error",
    "map_return_with_error",
]


def map_(
    source: tp.Optional[tp.Iterable[T]], transform: tp.Callable[[T], R]
) -> tp.List[R]:
    """Apply ``transform`` to every item and collect the results.

    Args:
        source: Items to transform. ``None`` is treated as empty.
        transform: Function applied to each item.

    Returns:
        A new list with one result per input item, in input order.
    """
    if source is None:
        return []
    return [transform(item) for item in source]


def filter_(
    source: tp.Optional[tp.Iterable[T]], predicate: tp.Callable[[T], bool]
) -> tp.List[T]:
    """Keep the items for which ``predicate`` holds, in input order."""
    if source is None:
        return []
    return [item for item in source if predicate(item)]


def flat_map(
    source: tp.Optional[tp.Iterable[tp.Optional[tp.Iterable[T]]]],
) -> tp.List[T]:
    """Concatenate a sequence of sequences into one flat list.

    ``None`` entries in ``source`` contribute nothing.
    """
    result: tp.List[T] = []
    if source is None:
        return result
    for inner in source:
        if inner is not None:
            result.extend(inner)
    return result


def reduce_(
    source: tp.Optional[tp.Iterable[T]],
    combine: tp.Callable[[R, T], R],
    initial: R,
) -> R:
    """Left-fold ``source`` with ``combine`` starting from ``initial``.

    Args:
        source: Items to fold. ``None`` is treated as empty.
        combine: Called as ``combine(accumulator, item)`` for each item.
        initial: Starting accumulator, returned unchanged for empty input.

    Returns:
        The final accumulator.
    """
    acc = initial
    if source is None:
        return acc
    for item in source:
        acc = combine(acc, item)
    return acc


def for_each(
    source: tp.Optional[tp.Iterable[T]], action: tp.Callable[[T], tp.Any]
) -> None:
    """Call ``action`` once per item, in order. Return values are ignored."""
    if source is None:
        return
    for item in source:
        action(item)


def for_each_with_error(
    source: tp.Optional[tp.Iterable[T]], action: tp.Callable[[T], tp.Any]
) -> tp.Optional[Exception]:
    """Call ``action`` once per item until it raises.

    Iteration halts at the first item whose action raises an ``Exception``;
    remaining items are not visited.

    Args:
        source: Items to visit. ``None`` is treated as empty.
        action: Side-effecting function that signals failure by raising.

    Returns:
        The first exception raised by ``action``, or ``None`` if every call
        succeeded.
    """
    if source is None:
        return None
    for idx, item in enumerate(source):
        try:
            action(item)
        except Exception as e:
            logger.debug(f"for_each_with_error halted at index {idx}: {e!r}")
            return e
    return None


def map_return_with_error(
    source: tp.Optional[tp.Iterable[T]], transform: tp.Callable[[T], R]
) -> tp.Tuple[tp.Optional[tp.List[R]], tp.Optional[MappingError]]:
    """Map ``transform`` over ``source``, stopping at the first failure.

    On failure no partial result is returned. The error message has the form
    ``"error mapping at index:'<index>', error: <cause>"`` and the original
    exception is available as both ``error.cause`` and ``error.__cause__``.

    Args:
        source: Items to transform. ``None`` is treated as empty.
        transform: Function applied to each item; signals failure by raising.

    Returns:
        ``(results, None)`` on success, ``(None, MappingError)`` on failure.
    """
    result: tp.List[R] = []
    if source is None:
        return result, None
    for idx, item in enumerate(source):
        try:
            result.append(transform(item))
        except Exception as e:
            error = MappingError(idx, e)
            error.__cause__ = e
            logger.debug(str(error))
            return None, error
    return result, None
