#!/usr/bin/env python3
"""
Error Types

Fatal errors (book list, report file, configuration) abort the run with a
nonzero exit status. Per-book errors are logged and the book is skipped.
"""


class HunfreqError(Exception):
    """Base class for all hunfreq errors."""


class BookListOpenFailure(HunfreqError):
    """The book list file cannot be read."""
    exit_code = 1


class OutputOpenFailure(HunfreqError):
    """The report file cannot be created."""
    exit_code = 2


class BookOpenFailure(HunfreqError):
    """A listed book cannot be opened or read."""


class ConfigurationError(HunfreqError, ValueError):
    """Invalid configuration (speeds, methods, business constants)."""
    exit_code = 1


class EmptyScopeError(ConfigurationError):
    """A frequency table has no non-whitespace letters to compare."""


class UnclassifiedCharacterWarning(UserWarning):
    """A charted byte is not classified as a letter."""
