#!/usr/bin/env python3
"""
Frequency Accumulation Tests

Counting, merging and significance ordering of letter frequency tables.
"""

from hunfreq.codepage import classify
from hunfreq.frequency import (
    accumulate,
    merge,
    merge_into,
    select_displayable,
    sort_by_significance,
)
from hunfreq.models import LetterFrequencyTable


SAMPLE = b"Alma a fa alatt.\n"
HUNGARIAN_SAMPLE = "Árvíztűrő tükörfúrógép, 1999.\r\n".encode("cp1250")


def table_of(*chunks):
    table = LetterFrequencyTable()
    for chunk in chunks:
        accumulate(chunk, table)
    return table


# =============================================================================
# Accumulation
# =============================================================================

def test_accumulate_counts_and_totals():
    table = LetterFrequencyTable()
    assert accumulate(SAMPLE, table) == len(SAMPLE)

    assert table.counts[ord("A")] == 6
    assert table.counts[ord("a")] == 0
    assert table.counts[ord("L")] == 2
    assert table.counts[ord("T")] == 2
    assert table.counts[ord(" ")] == 3
    assert table.counts[ord("\n")] == 1
    assert table.total_alphabetic == 12
    assert table.total_punctuation == 1
    assert table.total_digit == 0
    assert table.total_hungarian == 0
    assert table.total_non_whitespace == 13


def test_accumulate_hungarian():
    table = table_of(HUNGARIAN_SAMPLE)

    # Á í ű ő ü ö ú ó é
    assert table.total_hungarian == 9
    assert table.total_digit == 4
    assert table.total_punctuation == 2
    assert table.counts[0xC1] == 1  # Á
    assert table.counts[0xD6] == 1  # ö -> Ö
    assert table.counts[0xD3] == 1  # ó -> Ó
    assert table.counts[0xD5] == 1  # ő -> Ő
    assert table.counts[0xF3] == 0


def test_whitespace_invariant():
    for data in (SAMPLE, HUNGARIAN_SAMPLE, bytes(range(256)), b"", b" \t\n"):
        table = table_of(data)
        whitespace = sum(1 for b in data if classify(b).is_whitespace)
        assert sum(table.counts) == table.total_non_whitespace + whitespace
        assert table.whitespace_count == whitespace
        assert table.total_hungarian <= table.total_alphabetic <= table.total_non_whitespace


def test_accumulate_into_two_tables():
    book = LetterFrequencyTable()
    grand = LetterFrequencyTable()
    accumulate(HUNGARIAN_SAMPLE, book, grand)
    accumulate(SAMPLE, grand)

    assert book == table_of(HUNGARIAN_SAMPLE)
    assert grand == table_of(HUNGARIAN_SAMPLE, SAMPLE)


def test_accumulate_accepts_chunks():
    data = HUNGARIAN_SAMPLE * 7
    chunked = table_of(*(data[i:i + 5] for i in range(0, len(data), 5)))
    assert chunked == table_of(data)


# =============================================================================
# Merging
# =============================================================================

def test_merge_equals_direct_accumulation():
    books = [SAMPLE, HUNGARIAN_SAMPLE, bytes(range(256)), b"zzz 123"]
    tables = [table_of(b) for b in books]
    direct = table_of(*books)

    assert merge(tables) == direct
    assert merge(reversed(tables)) == direct
    assert merge([merge(tables[:2]), merge(tables[2:])]) == direct


def test_merge_into_returns_target():
    total = LetterFrequencyTable()
    assert merge_into(total, table_of(SAMPLE)) is total
    assert total.total_non_whitespace == 13


def test_merge_of_nothing_is_empty():
    assert merge([]) == LetterFrequencyTable()


# =============================================================================
# Ordering
# =============================================================================

def test_sort_by_descending_count_then_byte_value():
    table = table_of(b"ccbbbaaa")
    order = sort_by_significance(table)

    assert order[:3] == [ord("A"), ord("B"), ord("C")]
    # Zero counts keep ascending byte order
    assert order[3:6] == [0, 1, 2]
    assert sorted(order) == list(range(256))


def test_sort_is_idempotent():
    table = table_of(HUNGARIAN_SAMPLE, SAMPLE)
    first = list(sort_by_significance(table))
    assert sort_by_significance(table) == first


def test_select_displayable():
    table = table_of(b"Aa1.,\xe4 b\x01")
    sort_by_significance(table)

    # Digits, punctuation (including a-umlaut) and whitespace are dropped,
    # control bytes are kept for the chart to report
    assert select_displayable(table) == [ord("A"), 0x01, ord("B")]


def test_select_displayable_empty_table():
    table = LetterFrequencyTable()
    sort_by_significance(table)
    assert select_displayable(table) == []
