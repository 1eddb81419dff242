"""Mapping filters and shallow clones of mappings and lists."""

import typing as tp

from fputil.core.types import K, T, V

__all__ = ["filter_map", "clone_map", "clone_list"]


def filter_map(
    source: tp.Optional[tp.Mapping[K, V]], predicate: tp.Callable[[K, V], bool]
) -> tp.Dict[K, V]:
    """Keep the key/value pairs for which ``predicate(key, value)`` holds.

    Args:
        source: Mapping to filter. ``None`` is treated as empty.
        predicate: Called with each key and its value.

    Returns:
        A new dict with the retained pairs.
    """
    if source is None:
        return {}
    return {key: value for key, value in source.items() if predicate(key, value)}


def clone_map(source: tp.Optional[tp.Mapping[K, V]]) -> tp.Dict[K, V]:
    """Shallow copy of ``source``; values are shared, not copied."""
    if source is None:
        return {}
    return dict(source)


def clone_list(source: tp.Optional[tp.Iterable[T]]) -> tp.List[T]:
    """Shallow copy of ``source`` in the same order."""
    if source is None:
        return []
    return list(source)
