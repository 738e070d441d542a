#!/usr/bin/env python3
"""
Code Page 1250 Character Classification

Fixed lookup tables for the single-byte Central European code page (CP1250)
used by legacy Hungarian text files. Every byte value 0-255 is classified;
nothing here depends on the process locale.

Hungarian special letters:
    Lower: E1 E9 ED F3 F5 F6 FA FB FC   (á é í ó ő ö ú ű ü)
    Upper: C1 C9 CD D3 D5 D6 DA DB DC   (Á É Í Ó Ő Ö Ú Ű Ü)

Extra punctuation (beyond ASCII punctuation):
    96 93 92 91 85 84 82 AB B0 BB D7 E4 E7 F4
    (– “ ’ ‘ … „ ‚ « ° » × ä ç ô)

Note that ä ç ô are letters AND punctuation: they are counted as alphabetic
but never charted.
"""

import string
from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple


# =============================================================================
# Constants
# =============================================================================

CODEC = "cp1250"

# Glyph used for bytes that cannot be shown (control, undefined, whitespace)
PLACEHOLDER = "_"

HUNGARIAN_LOWER = bytes.fromhex("e1 e9 ed f3 f5 f6 fa fb fc")
HUNGARIAN_UPPER = bytes.fromhex("c1 c9 cd d3 d5 d6 da db dc")

EXTRA_PUNCTUATION = bytes.fromhex("96 93 92 91 85 84 82 ab b0 bb d7 e4 e7 f4")

# C isspace() set
WHITESPACE_BYTES = b" \t\n\v\f\r"


# =============================================================================
# Lookup Tables (built once at import)
# =============================================================================

def _decode(b: int) -> str:
    """CP1250 character for a byte, or '' for the five undefined slots."""
    try:
        return bytes([b]).decode(CODEC)
    except UnicodeDecodeError:
        return ""


_CHARS: Tuple[str, ...] = tuple(_decode(b) for b in range(256))

HUNGARIAN: FrozenSet[int] = frozenset(HUNGARIAN_LOWER) | frozenset(HUNGARIAN_UPPER)

WHITESPACE: FrozenSet[int] = frozenset(WHITESPACE_BYTES)

DIGITS: FrozenSet[int] = frozenset(string.digits.encode("ascii"))

PUNCTUATION: FrozenSet[int] = (
    frozenset(string.punctuation.encode("ascii")) | frozenset(EXTRA_PUNCTUATION)
)

LETTERS: FrozenSet[int] = frozenset(
    b for b in range(256)
    if b in HUNGARIAN
    or (b < 0x80 and chr(b) in string.ascii_letters)
    or (b >= 0x80 and _CHARS[b].isalpha())
)

_UPPER: Dict[int, int] = dict(zip(HUNGARIAN_LOWER, HUNGARIAN_UPPER))
_UPPER.update(
    (ord(lo), ord(up)) for lo, up in zip(string.ascii_lowercase, string.ascii_uppercase)
)

UPPER_FOLD: Tuple[int, ...] = tuple(_UPPER.get(b, b) for b in range(256))


# =============================================================================
# Classification
# =============================================================================

@dataclass(frozen=True)
class CharClass:
    """Category flags for one byte value."""
    is_letter: bool
    is_hungarian: bool
    is_punctuation: bool
    is_digit: bool
    is_whitespace: bool


CLASSES: Tuple[CharClass, ...] = tuple(
    CharClass(
        is_letter=b in LETTERS,
        is_hungarian=b in HUNGARIAN,
        is_punctuation=b in PUNCTUATION,
        is_digit=b in DIGITS,
        is_whitespace=b in WHITESPACE,
    )
    for b in range(256)
)


def classify(b: int) -> CharClass:
    """Classify a byte value (0-255)."""
    return CLASSES[b]


def to_upper_folded(b: int) -> int:
    """Uppercase a byte: Hungarian lower letters and ASCII a-z only."""
    return UPPER_FOLD[b]


def to_printable(b: int) -> str:
    """
    Display form of a byte as a Unicode string.

    Space is kept; other whitespace, control characters and undefined
    code points become PLACEHOLDER.
    """
    char = _CHARS[b]
    if char == " ":
        return char
    if not char or b in WHITESPACE or not char.isprintable():
        return PLACEHOLDER
    return char
