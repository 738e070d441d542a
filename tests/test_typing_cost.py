#!/usr/bin/env python3
"""
Typing Cost Model Tests
"""

import pytest

from hunfreq.frequency import accumulate
from hunfreq.models import (
    DEFAULT_METHODS,
    IRREGULAR_SPEED,
    MOUSE_SPEED,
    REGULAR_SPEED,
    LetterFrequencyTable,
    TypingMethodSpec,
)
from hunfreq.typing_cost import compute_typing_costs, cost_for_method, rank, wpm


R = REGULAR_SPEED.seconds_per_letter
I = IRREGULAR_SPEED.seconds_per_letter


def table_of(data):
    table = LetterFrequencyTable()
    accumulate(data, table)
    return table


def test_default_speeds():
    assert R == pytest.approx(60 / 237.5)
    assert I == pytest.approx(60 / 114.75)
    assert MOUSE_SPEED.seconds_per_letter == 2.0


def test_wpm_rounds_half_up():
    assert wpm(R) == 48  # 47.5
    assert wpm(I) == 23  # 22.95
    assert wpm(2.0) == 6
    assert wpm(R * 2) == 24  # 23.75
    assert wpm(1.0, letters_per_word=6) == 10


def test_cost_for_method():
    # a, b regular on every method; á and space are not
    table = table_of(b"ab\xe1 ")
    method_a, method_b, method_c = DEFAULT_METHODS

    assert cost_for_method(table, method_a) == pytest.approx(2 * R + 2 * I)
    assert cost_for_method(table, method_b) == pytest.approx(2 * R + 2 * 2.0)
    assert cost_for_method(table, method_c) == pytest.approx(2 * R + 2 * 2 * R)


def test_regular_set_is_case_insensitive():
    method = TypingMethodSpec("t", "test", "xY", 1.0, 10.0)
    assert method.regular_set == {ord("X"), ord("Y")}
    assert cost_for_method(table_of(b"xXyYz"), method) == pytest.approx(4 * 1.0 + 10.0)


def test_hungarian_keyboard_positions():
    # y, z and 0 move on a Hungarian keyboard
    method_a = DEFAULT_METHODS[0]
    table = table_of(b"yz0")
    assert cost_for_method(table, method_a) == pytest.approx(3 * I)


def test_empty_table_costs_nothing():
    for method in DEFAULT_METHODS:
        assert cost_for_method(LetterFrequencyTable(), method) == 0.0


def test_rank_slowest_first():
    assert rank([100, 50, 25]) == [0, 1, 2]
    assert rank([25, 100, 50]) == [1, 2, 0]


def test_rank_ties_keep_method_order():
    assert rank([5, 5, 1]) == [0, 1, 2]
    assert rank([1, 5, 5]) == [1, 2, 0]
    assert rank([3, 3, 3]) == [0, 1, 2]


def test_compute_typing_costs_stores_results():
    table = table_of("Árvíztűrő tükörfúrógép".encode("cp1250"))
    results = compute_typing_costs(table, DEFAULT_METHODS)

    assert table.typing_results is results
    assert len(results) == 3
    # Mouse is the slowest, shortcut key the fastest
    assert [r.rank for r in results] == [1, 0, 2]
    assert results[1].hours == pytest.approx(results[1].seconds / 3600)
