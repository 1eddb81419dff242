"""Ordering and selection over sequences.

This module covers the operations that compare elements with one another:

    - **sort**: in-place reorder driven by an index-based ``less(i, j)``
    - **distinct / distinct_func**: first-seen de-duplication
    - **max_ / min_ / max_by / min_by**: extreme element plus a found-flag
    - **partition / count / exists**: predicate-driven selection
    - **sum_**: arithmetic total

Found-flag:
    The extreme-value helpers never raise on empty input. They return a pair
    ``(value, found)`` where ``found`` is ``False`` and ``value`` is the
    caller-provided ``default`` (``None`` unless given) when there is no
    element to return. Callers must check ``found`` before trusting ``value``.

    >>> max_([1, 5, 3])
    (5, True)
    >>> min_([], default=0)
    (0, False)

Ties:
    When several elements share the extreme value, the first one in input
    order is returned.
"""

import functools
import typing as tp

from fputil.core.types import OrderedT, SummableT, SupportsLessThan, T

__all__ = [
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
]


def sort(
    items: tp.Optional[tp.List[T]], less: tp.Callable[[int, int], bool]
) -> tp.List[T]:
    """Sort ``items`` in place using an index-based ordering.

    ``less(i, j)`` must report whether the element at position ``i`` orders
    before the element at position ``j``, and usually reads ``items`` directly.
    All comparisons are made while ``items`` still holds its original
    arrangement; the reordered elements are written back in one step at the
    end, so ``less`` never observes a half-sorted list.

    Elements that compare equal keep their input order. Break ties inside
    ``less`` when a specific secondary order is needed.

    Args:
        items: The list to reorder. ``None`` yields a new empty list.
        less: Strict weak ordering over positions in ``items``.

    Returns:
        The same ``items`` list, now reordered.
    """
    if items is None:
        return []

    def compare(i: int, j: int) -> int:
        if less(i, j):
            return -1
        if less(j, i):
            return 1
        return 0

    snapshot = list(items)
    order = sorted(range(len(snapshot)), key=functools.cmp_to_key(compare))
    items[:] = [snapshot[i] for i in order]
    return items


def distinct(items: tp.Optional[tp.Iterable[T]]) -> tp.List[T]:
    """Remove duplicates by equality, keeping first occurrences in order.

    Elements must be hashable.
    """
    seen: tp.Set[T] = set()
    unique: tp.List[T] = []
    if items is None:
        return unique
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def distinct_func(
    items: tp.Optional[tp.Iterable[T]], equal: tp.Callable[[T, T], bool]
) -> tp.List[T]:
    """Remove duplicates using a caller-supplied equality.

    An item is dropped when ``equal(kept, item)`` is true for any item already
    kept. Elements need not be hashable; the cost is quadratic in the number
    of unique elements.

    Some collection libraries ship a ``DistinctFunc`` that ignores its
    comparison argument and falls back to plain equality. This one always
    consults ``equal``, so ``distinct_func([1, 2, 3], lambda a, b: True)``
    returns ``[1]``.

    Args:
        items: Items to de-duplicate. ``None`` is treated as empty.
        equal: Equivalence relation between two items.

    Returns:
        First-seen representatives of each equivalence class, in input order.
    """
    unique: tp.List[T] = []
    if items is None:
        return unique
    for item in items:
        if not any(equal(kept, item) for kept in unique):
            unique.append(item)
    return unique


def exists(
    items: tp.Optional[tp.Iterable[T]], predicate: tp.Callable[[T], bool]
) -> bool:
    """Whether any item satisfies ``predicate``. Stops at the first match."""
    if items is None:
        return False
    for item in items:
        if predicate(item):
            return True
    return False


def _extreme_by(
    items: tp.Optional[tp.Iterable[T]],
    key: tp.Callable[[T], SupportsLessThan],
    better: tp.Callable[[tp.Any, tp.Any], bool],
    default: tp.Any,
) -> tp.Tuple[tp.Any, bool]:
    if items is None:
        return default, False
    iterator = iter(items)
    try:
        best = next(iterator)
    except StopIteration:
        return default, False

    best_value = key(best)
    for item in iterator:
        value = key(item)
        # Strict comparison so the first extreme element wins ties
        if better(value, best_value):
            best = item
            best_value = value
    return best, True


def _greater(a: tp.Any, b: tp.Any) -> bool:
    return b < a


def _less(a: tp.Any, b: tp.Any) -> bool:
    return a < b


def _identity(x: T) -> T:
    return x


def max_(
    items: tp.Optional[tp.Iterable[OrderedT]], default: tp.Any = None
) -> tp.Tuple[tp.Any, bool]:
    """Greatest element under natural ordering.

    Args:
        items: Orderable elements. ``None`` is treated as empty.
        default: Value returned alongside ``found=False`` for empty input.

    Returns:
        ``(greatest, True)``, or ``(default, False)`` if there are no items.
    """
    return _extreme_by(items, _identity, _greater, default)


def min_(
    items: tp.Optional[tp.Iterable[OrderedT]], default: tp.Any = None
) -> tp.Tuple[tp.Any, bool]:
    """Least element under natural ordering.

    Args:
        items: Orderable elements. ``None`` is treated as empty.
        default: Value returned alongside ``found=False`` for empty input.

    Returns:
        ``(least, True)``, or ``(default, False)`` if there are no items.
    """
    return _extreme_by(items, _identity, _less, default)


def max_by(
    items: tp.Optional[tp.Iterable[T]],
    key: tp.Callable[[T], SupportsLessThan],
    default: tp.Any = None,
) -> tp.Tuple[tp.Any, bool]:
    """Element with the greatest ``key(element)``; the first one wins ties."""
    return _extreme_by(items, key, _greater, default)


def min_by(
    items: tp.Optional[tp.Iterable[T]],
    key: tp.Callable[[T], SupportsLessThan],
    default: tp.Any = None,
) -> tp.Tuple[tp.Any, bool]:
    """Element with the least ``key(element)``; the first one wins ties."""
    return _extreme_by(items, key, _less, default)


def partition(
    items: tp.Optional[tp.Iterable[T]], predicate: tp.Callable[[T], bool]
) -> tp.Tuple[tp.List[T], tp.List[T]]:
    """Split items into those matching ``predicate`` and the rest.

    Returns:
        ``(matching, non_matching)``, both lists in input order.
    """
    matching: tp.List[T] = []
    rest: tp.List[T] = []
    if items is None:
        return matching, rest
    for item in items:
        if predicate(item):
            matching.append(item)
        else:
            rest.append(item)
    return matching, rest


def count(items: tp.Optional[tp.Iterable[T]], predicate: tp.Callable[[T], bool]) -> int:
    """Number of items satisfying ``predicate``."""
    if items is None:
        return 0
    total = 0
    for item in items:
        if predicate(item):
            total += 1
    return total


def sum_(items: tp.Optional[tp.Iterable[SummableT]], start: tp.Any = 0) -> tp.Any:
    """Arithmetic sum of numeric items.

    Args:
        items: Numbers to add. ``None`` is treated as empty.
        start: Value the total starts from; returned as-is for empty input.
            Pass ``start=0.0`` when summing floats so an empty input still
            yields a float.

    Returns:
        ``start`` plus every item, added left to right.
    """
    total = start
    if items is None:
        return total
    for item in items:
        total = total + item
    return total
