"""Function composition helpers.

``compose`` and ``pipe`` build the same function and differ only in argument
order: ``compose(f, g)`` reads right-to-left, ``pipe(g, f)`` reads
left-to-right, and both evaluate ``f(g(x))``.

Examples:
    >>> add = lambda a, b: a + b
    >>> curry(add)(5)(3)
    8
    >>> compose(lambda x: x * 2, lambda x: x + 3)(5)
    16
    >>> chain(2, lambda x: x + 1, lambda x: x * 10)
    30
"""

import functools
import typing as tp

from fputil.core.types import A, B, C, T

__all__ = ["curry", "compose", "pipe", "chain"]


def curry(fn: tp.Callable[[A, B], C]) -> tp.Callable[[A], tp.Callable[[B], C]]:
    """Turn a two-argument function into a chain of one-argument functions.

    Args:
        fn: Function of two positional arguments.

    Returns:
        A function taking the first argument and returning a function of the
        second argument that calls ``fn(first, second)``.
    """

    @functools.wraps(fn)
    def take_first(first: A) -> tp.Callable[[B], C]:
        def take_second(second: B) -> C:
            return fn(first, second)

        return take_second

    return take_first


def compose(f: tp.Callable[[B], C], g: tp.Callable[[A], B]) -> tp.Callable[[A], C]:
    """Right-to-left composition: the result computes ``f(g(x))``."""

    def composed(x: A) -> C:
        return f(g(x))

    return composed


def pipe(g: tp.Callable[[A], B], f: tp.Callable[[B], C]) -> tp.Callable[[A], C]:
    """Left-to-right composition: apply ``g`` then ``f``."""
    return compose(f, g)


def chain(value: T, *functions: tp.Callable[[T], T]) -> T:
    """Thread ``value`` through ``functions`` in order.

    With no functions, ``value`` is returned unchanged.
    """
    for fn in functions:
        value = fn(value)
    return value
