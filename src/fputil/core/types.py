"""Reusable type definitions for the fputil functional module.

This module provides the type variables and capability protocols used to bound
the generic collection operations.

Type Aliases:
    T, R: Element and result types of sequence operations.
    K, V: Key and value types of mapping operations.
    OrderedT: Element type that supports ``<`` (natural ordering).
    SummableT: Element type that supports ``+`` (arithmetic sum).

Protocols:
    SupportsLessThan: Anything comparable with ``<``.
    SupportsAdd: Anything that can be added to itself with ``+``.
"""

import typing as tp

__all__ = [
    "T",
    "R",
    "K",
    "V",
    "A",
    "B",
    "C",
    "SupportsLessThan",
    "SupportsAdd",
    "OrderedT",
    "SummableT",
]

T = tp.TypeVar("T")
R = tp.TypeVar("R")
K = tp.TypeVar("K", bound=tp.Hashable)
V = tp.TypeVar("V")

# Argument/result types of composed callables
A = tp.TypeVar("A")
B = tp.TypeVar("B")
C = tp.TypeVar("C")


class SupportsLessThan(tp.Protocol):
    def __lt__(self, other: tp.Any, /) -> bool: ...


class SupportsAdd(tp.Protocol):
    def __add__(self, other: tp.Any, /) -> tp.Any: ...


OrderedT = tp.TypeVar("OrderedT", bound=SupportsLessThan)
SummableT = tp.TypeVar("SummableT", bound=SupportsAdd)
