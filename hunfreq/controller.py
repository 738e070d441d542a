#!/usr/bin/env python3
"""
Report Controller

Runs one report: reads the book list, counts every book into its own table,
adds each successfully read book to the grand total and writes the report.

Flow:
    Book list (UTF-8)
        │
        ▼
    Book (CP1250 bytes) ──► book table ──► report section
        │                       │
        │                       └──► grand total (merged after a clean read)
        ▼
    [Grand Total] section, [Configuration]

Errors:
- Book list or report file cannot be opened: fatal, raised to the caller
- A book cannot be read: logged, skipped, grand total unaffected
"""

import logging
import sys
import warnings
from typing import List, Optional

from .errors import BookOpenFailure, UnclassifiedCharacterWarning
from .frequency import merge_into
from .models import BookRecord, GrandTotal, ReportConfig
from .report import ReportWriter
from .sources import read_book, read_book_list


class ReportController:
    """
    Produces the letter frequency report for a book list.

    The grand total is owned by the controller for one run and handed
    back from run().
    """

    def __init__(self, config: ReportConfig, setup_logging: bool = True):
        """
        Initialize the controller.

        Args:
            config: Report configuration object.
            setup_logging: Configure the root logger from the config.
        """
        self.config = config
        if setup_logging:
            self._setup_logging()

        self.logger = logging.getLogger("ReportController")
        self.skipped: List[str] = []

    def _setup_logging(self):
        """Configure logging."""
        level = logging.getLevelName(self.config.log_level.upper())

        handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
        if self.config.log_file:
            handlers.append(logging.FileHandler(self.config.log_file))

        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            handlers=handlers,
        )
        # Unclassified chart characters are reported through logging
        logging.captureWarnings(True)
        warnings.simplefilter("always", UnclassifiedCharacterWarning)

    def process_book(self, record: BookRecord, grand_total: GrandTotal) -> bool:
        """
        Count one book and add it to the grand total.

        Returns False (and logs) if the book cannot be read.
        """
        try:
            size = read_book(record.title, record.table)
        except BookOpenFailure as e:
            self.logger.error(str(e))
            self.skipped.append(record.title)
            return False

        merge_into(grand_total.table, record.table)
        grand_total.books += 1
        self.logger.info(
            f"{record.title}: {size} bytes, {record.table.total_non_whitespace} letters"
        )
        return True

    def run(self, writer: Optional[ReportWriter] = None) -> GrandTotal:
        """
        Produce the report.

        Raises:
            BookListOpenFailure: The book list cannot be read.
            OutputOpenFailure: The report file cannot be created.
        """
        records = read_book_list(self.config.book_list)
        grand_total = GrandTotal()

        with writer or ReportWriter(self.config) as report:
            for record in records:
                if self.process_book(record, grand_total):
                    report.write_scope(record.title, record.table)

            if records:
                report.write_scope(GrandTotal.title, grand_total.table)
            report.write_configuration()

        self.logger.info(
            f"Report written to {self.config.output}: {grand_total.books} books, "
            f"{len(self.skipped)} skipped"
        )
        return grand_total
