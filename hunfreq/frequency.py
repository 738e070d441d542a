#!/usr/bin/env python3
"""
Letter Frequency Accumulation

One pass over the bytes of a book updates every table handed to
`accumulate` (the book's own table and the grand total). Bytes are tallied
per chunk first, so the per-byte work is done by Counter.
"""

from collections import Counter
from typing import Iterable, List

from .codepage import CLASSES, UPPER_FOLD, classify
from .models import TABLE_SIZE, LetterFrequencyTable


def accumulate(data: Iterable[int], *tables: LetterFrequencyTable) -> int:
    """
    Count a chunk of CP1250 bytes into one or more tables.

    Args:
        data: Bytes (or any iterable of byte values 0-255).
        tables: Tables to update, e.g. a book table and the grand total.

    Returns:
        Number of bytes consumed.
    """
    histogram = Counter(data)
    consumed = 0

    for b, n in histogram.items():
        cls = CLASSES[b]
        slot = UPPER_FOLD[b]
        consumed += n
        for table in tables:
            table.counts[slot] += n
            if cls.is_punctuation:
                table.total_punctuation += n
            if cls.is_digit:
                table.total_digit += n
            if cls.is_hungarian:
                table.total_hungarian += n
            if cls.is_letter:
                table.total_alphabetic += n
            if not cls.is_whitespace:
                table.total_non_whitespace += n

    return consumed


def merge_into(total: LetterFrequencyTable, table: LetterFrequencyTable) -> LetterFrequencyTable:
    """Add the counters of `table` to `total` and return `total`."""
    for b in range(TABLE_SIZE):
        total.counts[b] += table.counts[b]
    total.total_alphabetic += table.total_alphabetic
    total.total_hungarian += table.total_hungarian
    total.total_punctuation += table.total_punctuation
    total.total_digit += table.total_digit
    total.total_non_whitespace += table.total_non_whitespace
    return total


def merge(tables: Iterable[LetterFrequencyTable]) -> LetterFrequencyTable:
    """Byte-wise sum of tables. Typing results and sort order are not carried."""
    total = LetterFrequencyTable()
    for table in tables:
        merge_into(total, table)
    return total


def sort_by_significance(table: LetterFrequencyTable) -> List[int]:
    """
    Order byte slots by descending count, ties by ascending byte value.

    The permutation is stored in `table.sort_order` and returned.
    """
    table.sort_order = sorted(range(TABLE_SIZE), key=lambda b: (-table.counts[b], b))
    return table.sort_order


def select_displayable(table: LetterFrequencyTable) -> List[int]:
    """
    Byte values to chart, in significance order.

    Keeps slots with a nonzero count that are not punctuation, whitespace
    or digits. Call sort_by_significance() first.
    """
    symbols = []
    for b in table.sort_order:
        if not table.counts[b]:
            continue
        cls = classify(b)
        if cls.is_punctuation or cls.is_whitespace or cls.is_digit:
            continue
        symbols.append(b)
    return symbols
