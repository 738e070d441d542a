#!/usr/bin/env python3
"""
Business Impact Model

Given a yearly typing budget, the slowest method sets how many words can be
typed in a year. Every faster method types the same words in less time; the
difference is reported as hours (and business days) saved.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .errors import ConfigurationError, EmptyScopeError
from .models import (
    LETTERS_PER_WORD,
    MIN_TYPING_METHODS,
    BusinessConfig,
    LetterFrequencyTable,
    TypingMethodResult,
)
from .typing_cost import rank


@dataclass
class HoursSaved:
    """Time one method saves compared to a slower one."""
    method: int  # Index of the faster method
    baseline: int  # Index of the slower method
    seconds: float
    typing_hours_per_day: int

    @property
    def hours(self) -> float:
        return self.seconds / 3600

    @property
    def business_days(self) -> float:
        return self.hours / self.typing_hours_per_day


@dataclass
class BusinessImpact:
    """Yearly comparison of typing methods for one table."""
    ranking: List[int]  # Method indices, slowest first
    words_per_year: float  # Words the slowest method types in the budget
    savings: List[HoursSaved] = field(default_factory=list)  # Each faster method vs. the slowest
    pairwise: Optional[HoursSaved] = None  # Fastest vs. second fastest

    @property
    def slowest(self) -> int:
        return self.ranking[0]


def cost_per_letter(seconds: float, table: LetterFrequencyTable) -> float:
    if table.total_non_whitespace == 0:
        raise EmptyScopeError("No non-whitespace letters: typing cost per letter is undefined")
    return seconds / table.total_non_whitespace


def business_impact(
    table: LetterFrequencyTable,
    results: Sequence[TypingMethodResult],
    business: BusinessConfig,
    letters_per_word: int = LETTERS_PER_WORD,
) -> BusinessImpact:
    """
    Compare typing methods over one business year.

    Args:
        table: Frequency table the results were computed from.
        results: Typing cost per method, in method order.
        business: Business calendar.
        letters_per_word: Letters in one word.

    Raises:
        ConfigurationError: Fewer than three methods.
        EmptyScopeError: The table has no non-whitespace letters.
    """
    if len(results) < MIN_TYPING_METHODS:
        raise ConfigurationError(
            f"Business comparison needs {MIN_TYPING_METHODS} typing methods, got {len(results)}"
        )

    budget = business.yearly_budget_seconds
    ranking = rank([r.seconds for r in results])
    slowest = ranking[0]

    slowest_cost = cost_per_letter(results[slowest].seconds, table)
    if slowest_cost <= 0:
        raise EmptyScopeError("Slowest typing method has no cost")
    letters_per_year = budget / slowest_cost

    impact = BusinessImpact(
        ranking=ranking,
        words_per_year=letters_per_year / letters_per_word,
    )

    saved = {}
    for index in ranking[1:]:
        need = letters_per_year * cost_per_letter(results[index].seconds, table)
        saved[index] = budget - need
        impact.savings.append(
            HoursSaved(index, slowest, saved[index], business.typing_hours_per_day)
        )

    # Literal slowest / middle / fastest triple
    middle, fastest = ranking[1], ranking[2]
    impact.pairwise = HoursSaved(
        fastest, middle, saved[fastest] - saved[middle], business.typing_hours_per_day
    )
    return impact
