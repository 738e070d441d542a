#!/usr/bin/env python3
"""
Typing Cost Model

Estimates how long a table's text takes to type with each input method.
Every byte slot is priced at the method's regular speed when the letter is
in its regular set, and at the irregular speed otherwise.
"""

from typing import List, Sequence

from .models import (
    LETTERS_PER_WORD,
    TABLE_SIZE,
    LetterFrequencyTable,
    TypingMethodResult,
    TypingMethodSpec,
)


def cost_for_method(table: LetterFrequencyTable, method: TypingMethodSpec) -> float:
    """Total seconds to type every counted byte with a method."""
    regular = method.regular_set
    seconds = 0.0
    for b in range(TABLE_SIZE):
        count = table.counts[b]
        if not count:
            continue
        speed = method.regular_speed if b in regular else method.irregular_speed
        seconds += speed * count
    return seconds


def wpm(seconds_per_letter: float, letters_per_word: int = LETTERS_PER_WORD) -> int:
    """Words per minute, rounded half up."""
    return int(60.0 / (seconds_per_letter * letters_per_word) + 0.5)


def rank(seconds: Sequence[float]) -> List[int]:
    """Method indices from slowest to fastest; ties keep method order."""
    return sorted(range(len(seconds)), key=lambda i: -seconds[i])


def compute_typing_costs(
    table: LetterFrequencyTable,
    methods: Sequence[TypingMethodSpec],
) -> List[TypingMethodResult]:
    """
    Price a table with every method and rank the results.

    The results are stored in table.typing_results (one per method, in
    method order) and returned.
    """
    results = [TypingMethodResult(seconds=cost_for_method(table, m)) for m in methods]
    for position, index in enumerate(rank([r.seconds for r in results])):
        results[index].rank = position
    table.typing_results = results
    return results
