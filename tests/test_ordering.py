from dataclasses import dataclass

import numpy as np
import pytest

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


@dataclass
class Order:
    customer_code: str
    sales_order_number: str


@dataclass(frozen=True)
class Player:
    name: str
    score: int


@pytest.fixture
def orders():
    return [
        Order("C2", "S2"),
        Order("C1", "S3"),
        Order("C2", "S4"),
        Order("C1", "S1"),
    ]


@pytest.fixture
def players():
    return [
        Player("ana", 30),
        Player("bo", 70),
        Player("cy", 10),
        Player("di", 70),
        Player("ed", 10),
    ]


def test_sort_multi_key(orders):
    def less(i, j):
        if orders[i].customer_code != orders[j].customer_code:
            return orders[i].customer_code < orders[j].customer_code
        return orders[i].sales_order_number < orders[j].sales_order_number

    result = sort(orders, less)

    assert result is orders
    assert [(o.customer_code, o.sales_order_number) for o in orders] == [
        ("C1", "S1"),
        ("C1", "S3"),
        ("C2", "S2"),
        ("C2", "S4"),
    ]


def test_sort_integers_descending():
    items = [3, 1, 4, 1, 5, 9, 2, 6]
    sort(items, lambda i, j: items[i] > items[j])
    assert items == [9, 6, 5, 4, 3, 2, 1, 1]


def test_sort_ties_keep_input_order(players):
    sort(players, lambda i, j: players[i].score < players[j].score)
    assert [p.name for p in players] == ["cy", "ed", "ana", "bo", "di"]


def test_sort_empty_and_absent():
    empty = []
    assert sort(empty, lambda i, j: False) is empty
    assert sort(None, lambda i, j: False) == []


def test_distinct_first_seen_order():
    assert distinct([1, 2, 3, 2, 4, 5, 4, 6]) == [1, 2, 3, 4, 5, 6]


def test_distinct_empty():
    assert distinct([]) == []
    assert distinct(None) == []


def test_distinct_func_uses_equality():
    words = ["Apple", "banana", "apple", "BANANA", "cherry"]
    result = distinct_func(words, lambda a, b: a.lower() == b.lower())
    assert result == ["Apple", "banana", "cherry"]


def test_distinct_func_unhashable_items():
    items = [[1, 2], [2, 1], [3]]
    result = distinct_func(items, lambda a, b: sorted(a) == sorted(b))
    assert result == [[1, 2], [3]]


def test_distinct_func_absent():
    assert distinct_func(None, lambda a, b: a == b) == []


def test_exists():
    assert exists([1, 2, 3], lambda x: x == 2)
    assert not exists([1, 2, 3], lambda x: x == 5)
    assert not exists([], lambda x: True)
    assert not exists(None, lambda x: True)


def test_exists_short_circuits():
    seen = []

    def predicate(x):
        seen.append(x)
        return x == 2

    assert exists([1, 2, 3, 4], predicate)
    assert seen == [1, 2]


def test_max_min_values():
    assert max_([1, 2, 3, 4, 5]) == (5, True)
    assert min_([-10, -3, -6, -1]) == (-10, True)
    assert max_(["pear", "apple", "zucchini"]) == ("zucchini", True)


@pytest.mark.parametrize("fn", [max_, min_])
def test_max_min_empty(fn):
    assert fn([]) == (None, False)
    assert fn(None) == (None, False)
    assert fn([], default=0) == (0, False)


def test_max_min_numpy_array():
    value, found = max_(np.array([2.5, 7.0, 1.0]))
    assert found
    assert value == pytest.approx(7.0)


def test_max_by_min_by(players):
    assert max_by(players, lambda p: p.score) == (Player("bo", 70), True)
    assert min_by(players, lambda p: p.score) == (Player("cy", 10), True)


@pytest.mark.parametrize("fn", [max_by, min_by])
def test_by_variants_empty(fn):
    value, found = fn([], lambda p: p.score)
    assert not found
    assert value is None


@pytest.mark.parametrize("fn", [max_by, min_by])
def test_by_variants_single_element(fn):
    only = Player("solo", 1)
    assert fn([only], lambda p: p.score) == (only, True)


def test_partition_buckets(players):
    high, low = partition(players, lambda p: p.score >= 30)

    assert [p.name for p in high] == ["ana", "bo", "di"]
    assert [p.name for p in low] == ["cy", "ed"]
    assert sorted(high + low, key=lambda p: p.name) == sorted(
        players, key=lambda p: p.name
    )


def test_partition_empty():
    assert partition([], lambda x: True) == ([], [])
    assert partition(None, lambda x: True) == ([], [])


def test_count():
    assert count([1, 2, 3, 4, 5, 6], lambda x: x % 3 == 0) == 2
    assert count([], lambda x: True) == 0


def test_sum():
    assert sum_([1, 2, 3]) == 6
    assert sum_([0.5, 0.25]) == pytest.approx(0.75)
    assert sum_([]) == 0
    assert sum_(None) == 0
    assert sum_([], start=0.0) == 0.0


def test_sum_numpy_array():
    assert sum_(np.array([1.5, 2.0, 3.5])) == pytest.approx(7.0)


def test_distinct_func_always_consults_equal():
    assert distinct_func([1, 2, 3], lambda a, b: True) == [1]
    assert distinct_func([1, 1, 2], lambda a, b: False) == [1, 1, 2]


def test_sum_float_start_on_empty():
    total = sum_([], start=0.0)
    assert isinstance(total, float)
    assert total == 0.0
