#!/usr/bin/env python3
r"""
Text Bar Chart

Renders letter percentages as fixed width bars, three charts per line,
filled column-major:

     /---------------------\   /---------------------\   ...
     |E|10.4% xxxxxxxxxxx  |   |L| 5.9% xxxxxx.      |   ...
     \--------+-+-+-+-+-+-*/   \--------+-+-+-+-+-+-*/   ...
              0 2 4 6 8 10              0 2 4 6 8 10       ...
              % % % % % % 12%+          % % % % % % 12%+   ...

A bar cell is saturation/width percent. The last cell shows the remainder
as '' / '.' / ':' (by thirds); values over saturation end in '*'.
"""

import math
import warnings
from typing import List, Optional, Sequence, Tuple

from .codepage import classify, to_printable
from .errors import UnclassifiedCharacterWarning
from .frequency import select_displayable, sort_by_significance
from .models import (
    BARCHART_BAR_WIDTH,
    BARCHART_COLUMNS,
    BARCHART_SATURATION,
    LetterFrequencyTable,
)


# =============================================================================
# Constants
# =============================================================================

# Length of "00.0% "
PERCENT_PREFIX_LEN = 6

BAR_CELL = "x"
OVERFLOW_MARK = "*"
LIGHT_MARK = "."
HEAVY_MARK = ":"

COLUMN_GAP = "   "

# Footer drawn for the default 13 cell / 12% geometry
FOOTER_AXIS = "\\--------+-+-+-+-+-+-*/"
FOOTER_TICKS = "          0 2 4 6 8 10    "
FOOTER_UNITS = "          % % % % % % 12%+"


# =============================================================================
# Bars
# =============================================================================

def bar_geometry(
    value: float,
    width: int = BARCHART_BAR_WIDTH,
    saturation: float = BARCHART_SATURATION,
) -> Tuple[int, str]:
    """
    Return (filled_cells, last_mark) for a percentage value.

    filled_cells is floor(value / saturation * width). Anything above
    saturation plus a third of a cell collapses to width-1 cells and the
    overflow mark.
    """
    third = saturation / width / 3
    filled = int(value / saturation * width)
    remainder = value - filled / width * saturation

    if saturation + third < value:
        return width - 1, OVERFLOW_MARK
    if remainder <= third:
        return filled, ""
    if remainder < third * 2:
        return filled, LIGHT_MARK
    return filled, HEAVY_MARK


def render_bar(
    value: float,
    width: int = BARCHART_BAR_WIDTH,
    saturation: float = BARCHART_SATURATION,
) -> str:
    """
    Render one bar with its percentage prefix.

    Zero renders without a percentage. The result is clipped to
    width + PERCENT_PREFIX_LEN characters.
    """
    filled, mark = bar_geometry(value, width, saturation)
    bar = BAR_CELL * filled + mark
    bar += " " * (width - len(bar))

    if value == 0:
        prefix = " " * (PERCENT_PREFIX_LEN + 1)
    else:
        prefix = "%4.1f%% " % value
    return (prefix + bar)[: width + PERCENT_PREFIX_LEN]


def bar_header(width: int = BARCHART_BAR_WIDTH) -> str:
    return "/--" + "-" * (width + PERCENT_PREFIX_LEN) + "\\"


# =============================================================================
# Layout
# =============================================================================

def layout(symbols: Sequence[int], columns: int = BARCHART_COLUMNS) -> List[List[Optional[int]]]:
    """
    Distribute symbols column-major over ceil(N / columns) rows.

    Symbol i goes to row i % rows, column i // rows. Unused cells are None.
    """
    rows = math.ceil(len(symbols) / columns)
    grid: List[List[Optional[int]]] = [[None] * columns for _ in range(rows)]
    for i, symbol in enumerate(symbols):
        grid[i % rows][i // rows] = symbol
    return grid


def render_chart(
    table: LetterFrequencyTable,
    width: int = BARCHART_BAR_WIDTH,
    saturation: float = BARCHART_SATURATION,
    columns: int = BARCHART_COLUMNS,
) -> List[str]:
    """
    Render the letter chart of a table as text lines.

    Percentages are relative to table.total_alphabetic, which must be
    nonzero. Returns an empty list when nothing is displayable.
    """
    sort_by_significance(table)
    grid = layout(select_displayable(table), columns)
    if not grid:
        return []

    lines = [" " + COLUMN_GAP.join(bar_header(width) for _ in range(columns))]

    for row in grid:
        cells = []
        for b in row:
            if b is None:
                cells.append(f"| |{render_bar(0.0, width, saturation)}|")
                continue
            char = to_printable(b)
            if not classify(b).is_letter:
                warnings.warn(
                    f"Found {char}({b:02x}) in the chart, not classified as a letter",
                    UnclassifiedCharacterWarning,
                )
            value = 100.0 * table.counts[b] / table.total_alphabetic
            cells.append(f"|{char}|{render_bar(value, width, saturation)}|")
        lines.append(" " + COLUMN_GAP.join(cells))

    lines.append(" " + COLUMN_GAP.join(FOOTER_AXIS for _ in range(columns)))
    lines.append(FOOTER_TICKS * columns)
    lines.append(FOOTER_UNITS * columns)
    return lines
