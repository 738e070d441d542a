#!/usr/bin/env python3
"""
Report Writer

Writes the UTF-8 (with BOM) text report: one section per book, the grand
total section and the configuration dump.

Section layout:
    ---------<title>
    <bar chart>
    Total letters / punctuation / digits / alphabets / Hungarian letters
    [Typing Speed]
    <business hours comparison>
"""

import logging
from typing import IO, List, Optional

from .business import business_impact
from .chart import render_chart
from .errors import EmptyScopeError, OutputOpenFailure
from .models import LetterFrequencyTable, ReportConfig
from .typing_cost import compute_typing_costs, wpm


# =============================================================================
# Constants
# =============================================================================

# utf-8-sig writes the byte order mark
REPORT_ENCODING = "utf-8-sig"

SECTION_RULE = "-" * 9
CONFIG_RULE = "-" * 83
LABEL_WIDTH = 46


logger = logging.getLogger(__name__)


def percent(part: int, whole: int) -> float:
    """Percentage, 0.0 for an empty whole."""
    return 100.0 * part / whole if whole else 0.0


class ReportWriter:
    """Text report for one run."""

    def __init__(self, config: ReportConfig, stream: Optional[IO[str]] = None):
        """
        Initialize the writer.

        Args:
            config: Report configuration.
            stream: Text stream to write to. When omitted, open() creates
                config.output.
        """
        self.config = config
        self._stream = stream
        self._owns_stream = False

    def open(self) -> "ReportWriter":
        """Create the report file. Raises OutputOpenFailure."""
        if self._stream is None:
            try:
                self._stream = open(self.config.output, "w", encoding=REPORT_ENCODING, newline="\n")
            except OSError as e:
                raise OutputOpenFailure(f"Cannot create report {self.config.output}: {e}") from e
            self._owns_stream = True
        return self

    def close(self) -> None:
        if self._owns_stream and self._stream is not None:
            self._stream.close()
            self._stream = None
            self._owns_stream = False

    def __enter__(self) -> "ReportWriter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _write(self, lines: List[str]) -> None:
        self._stream.write("".join(line + "\n" for line in lines))

    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------

    def write_scope(self, title: str, table: LetterFrequencyTable) -> None:
        """Write the full section for a book or the grand total."""
        lines = ["", f"{SECTION_RULE}{title}"]
        if table.total_alphabetic:
            lines += render_chart(table)
        else:
            logger.warning(f"{title}: no alphabetic letters, chart skipped")
        lines += self.category_lines(table)
        lines += self.typing_lines(table)
        lines += self.business_lines(title, table)
        self._write(lines)

    def category_lines(self, table: LetterFrequencyTable) -> List[str]:
        letters = table.total_non_whitespace
        return [
            "Total letters                          : %8d" % letters,
            " - Punctuations    in Total letters    : %8d (%4.1f%%)"
            % (table.total_punctuation, percent(table.total_punctuation, letters)),
            " - [0-9] numbers   in Total letters    : %8d (%4.1f%%)"
            % (table.total_digit, percent(table.total_digit, letters)),
            " - Total Alphabets in Total letters    : %8d (%4.1f%%)"
            % (table.total_alphabetic, percent(table.total_alphabetic, letters)),
            "    -  Hungarian áéíóőöúűü in Alphabets: %8d (%4.1f%%)"
            % (table.total_hungarian, percent(table.total_hungarian, table.total_alphabetic)),
        ]

    def typing_lines(self, table: LetterFrequencyTable) -> List[str]:
        methods = self.config.methods
        lpw = self.config.letters_per_word
        lines = ["[Typing Speed]"]
        for method, result in zip(methods, compute_typing_costs(table, methods)):
            lines.append(
                "  %-10s: %7.1f hours - %s (using %d to %dwpm)" % (
                    method.short_name,
                    result.hours,
                    method.name,
                    wpm(method.irregular_speed, lpw),
                    wpm(method.regular_speed, lpw),
                )
            )
        return lines

    def business_lines(self, title: str, table: LetterFrequencyTable) -> List[str]:
        business = self.config.business
        methods = self.config.methods
        lines = [
            "If %.0f%% of business hours need to type whole in a year,"
            % business.typing_share_percent
        ]
        try:
            impact = business_impact(
                table, table.typing_results, business, self.config.letters_per_word
            )
        except EmptyScopeError as e:
            logger.warning(f"{title}: {e}")
            lines.append("  no letters to compare.")
            return lines

        lines.append(
            "  %s is the slowest, able to type %d words in a year."
            % (methods[impact.slowest].short_name, int(impact.words_per_year))
        )
        for saved in impact.savings + [impact.pairwise]:
            lines.append(
                "  %s reduces %5.1f hours (%5.1f business days %dh typing) than %s" % (
                    methods[saved.method].short_name,
                    saved.hours,
                    saved.business_days,
                    saved.typing_hours_per_day,
                    methods[saved.baseline].short_name,
                )
            )
        return lines

    def write_configuration(self) -> None:
        """Write the constants the estimates were made with."""
        config = self.config
        lpw = config.letters_per_word
        lines = [CONFIG_RULE, "[Configuration]"]
        for speed in config.speeds:
            lines.append(
                "  %-*s: % 6.1f [wpm] (%f sec/letter)"
                % (LABEL_WIDTH, f"Typing Speed ({speed.label}", speed.wpm(lpw), speed.seconds_per_letter)
            )
        lines += [
            "  %-*s: % 4d   [days]" % (LABEL_WIDTH, config.business.calendar_label, config.business.days_in_year),
            "  %-*s: % 4d   [hours]"
            % (LABEL_WIDTH, "Business typing hours in a day", config.business.typing_hours_per_day),
            "  %-*s: % 4d   [letters]" % (LABEL_WIDTH, "wpm:  word per minute (common sense)", lpw),
        ]
        self._write(lines)
