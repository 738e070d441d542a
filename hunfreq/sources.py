#!/usr/bin/env python3
"""
Book Sources

Reads the book list (UTF-8, optional BOM) and streams each book's raw
CP1250 bytes into frequency tables.
"""

import logging
from functools import partial
from pathlib import Path
from typing import List, Union

from .errors import BookListOpenFailure, BookOpenFailure
from .frequency import accumulate
from .models import COMMENT_SYMBOL, BookRecord, LetterFrequencyTable


# =============================================================================
# Constants
# =============================================================================

# Read books in 64KB chunks
READ_CHUNK_SIZE = 64 * 1024


logger = logging.getLogger(__name__)


def parse_book_list(text: str) -> List[str]:
    """
    Book paths from the book list text.

    Blank lines and lines starting with COMMENT_SYMBOL (after leading
    whitespace) are skipped; other lines are stripped.
    """
    titles = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_SYMBOL):
            continue
        titles.append(stripped)
    return titles


def read_book_list(path: Union[str, Path]) -> List[BookRecord]:
    """Load the book list file. Raises BookListOpenFailure if unreadable."""
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise BookListOpenFailure(f"Cannot read book list {path}: {e}") from e

    records = [BookRecord(title) for title in parse_book_list(text)]
    logger.info(f"Book list {path}: {len(records)} books")
    return records


def read_book(path: Union[str, Path], *tables: LetterFrequencyTable) -> int:
    """
    Stream a book's bytes into the given tables.

    Returns the number of bytes read. Raises BookOpenFailure if the file
    cannot be opened or read.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise BookOpenFailure(f"Cannot open book {path}: {e}") from e

    total = 0
    with f:
        try:
            for chunk in iter(partial(f.read, READ_CHUNK_SIZE), b""):
                total += accumulate(chunk, *tables)
        except OSError as e:
            raise BookOpenFailure(f"Cannot read book {path}: {e}") from e
    return total
