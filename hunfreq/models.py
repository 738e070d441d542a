#!/usr/bin/env python3
"""
Data Models for the Hungarian Letter Frequency Counter

This module contains the frequency tables, typing method definitions and the
report configuration (loaded from YAML).
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Tuple, Union

import yaml

from .codepage import CODEC, to_upper_folded
from .errors import ConfigurationError


# =============================================================================
# Constants
# =============================================================================

# Number of byte slots in a frequency table
TABLE_SIZE = 256

# Default file names (same directory as the working directory)
DEFAULT_BOOK_LIST = "hlfcBookList.txt"
DEFAULT_OUTPUT = "hlfcResult.txt"
DEFAULT_CONFIG = "config.yaml"

# Comment marker in the book list
COMMENT_SYMBOL = "#"

# 1 word = 5 letters
LETTERS_PER_WORD = 5

# Business calendar (Hungary, 2022)
BUSINESS_DAYS_IN_YEAR = 254
BUSINESS_WORKING_HOURS = 8
BUSINESS_TYPING_HOURS = 4
BUSINESS_CALENDAR_LABEL = "Hungarian business days in a year, 2022"

# Bar chart geometry
BARCHART_BAR_WIDTH = 13
BARCHART_SATURATION = 12.0
BARCHART_COLUMNS = 3

# The pairwise fastest vs. second fastest comparison needs three ranks
MIN_TYPING_METHODS = 3

# Keyboard letters. JP and US keyboards carry the same letters.
KEYBOARD_LETTERS_JP = "1234567890abcdefghijklmnopqrstuvwxyz" "!\"#$%&'()=~|`{+*}<>?_-^\\@[;:],./"
# Keys in the same position on a Hungarian keyboard as on the JP keyboard
KEYBOARD_REGULAR_POS_JP = "123456789abcdefghijklmnopqrstuvwx,.\"%()"


# =============================================================================
# Typing Speeds and Methods
# =============================================================================

# Default speeds and methods, in the same form as config.yaml
DEFAULT_SPEED_ENTRIES: Dict[str, Dict[str, Any]] = {
    # 40-60wpm, average 50 at 95% accuracy
    "regular": {"label": "same as familiar keyboard", "wpm": 50, "accuracy": 0.95},
    # Slow two-finger typing, 27wpm at 85% accuracy
    "irregular": {"label": "different from familiar keyboard", "wpm": 27, "accuracy": 0.85},
    # Screen keyboard: reach for the mouse and back to the keyboard
    "mouse": {"label": "using mouse back to the keyboard", "seconds_per_letter": 2.0},
}

DEFAULT_METHOD_ENTRIES: Tuple[Dict[str, Any], ...] = (
    {
        "short_name": "Method[a]",
        "name": "Hungarian keyboard",
        "regular_letters": KEYBOARD_REGULAR_POS_JP,
        "regular_speed": "regular",
        "irregular_speed": "irregular",
    },
    {
        "short_name": "Method[b]",
        "name": "Use mouse",
        "regular_letters": KEYBOARD_LETTERS_JP,
        "regular_speed": "regular",
        "irregular_speed": "mouse",
    },
    {
        # Shortcut key such as Ctrl+' then a = á: two keystrokes
        "short_name": "Method[c]",
        "name": "Use shortcut key",
        "regular_letters": KEYBOARD_LETTERS_JP,
        "regular_speed": "regular",
        "irregular_speed": "regular",
        "irregular_keystrokes": 2,
    },
)


@dataclass(frozen=True)
class TypingSpeed:
    """A named typing speed in seconds per letter."""
    name: str
    label: str
    seconds_per_letter: float

    @classmethod
    def from_wpm(
        cls,
        name: str,
        label: str,
        wpm: float,
        accuracy: float = 1.0,
        letters_per_word: int = LETTERS_PER_WORD,
    ) -> "TypingSpeed":
        """Speed from words per minute corrected by typing accuracy."""
        return cls(name, label, 60.0 / (wpm * accuracy * letters_per_word))

    @classmethod
    def from_entry(
        cls,
        name: str,
        entry: Dict[str, Any],
        letters_per_word: int = LETTERS_PER_WORD,
    ) -> "TypingSpeed":
        """Speed from a config entry with either wpm (+ accuracy) or seconds_per_letter."""
        label = str(entry.get("label", name))
        if "seconds_per_letter" in entry:
            seconds = _number(entry["seconds_per_letter"], f"speeds.{name}.seconds_per_letter")
            if seconds <= 0:
                raise ConfigurationError(f"Speed '{name}' must be positive")
            return cls(name, label, seconds)
        if "wpm" in entry:
            wpm = _number(entry["wpm"], f"speeds.{name}.wpm")
            accuracy = _number(entry.get("accuracy", 1.0), f"speeds.{name}.accuracy")
            if wpm <= 0 or accuracy <= 0:
                raise ConfigurationError(f"Speed '{name}' must be positive")
            return cls.from_wpm(name, label, wpm, accuracy, letters_per_word)
        raise ConfigurationError(f"Speed '{name}' needs either 'wpm' or 'seconds_per_letter'")

    def wpm(self, letters_per_word: int = LETTERS_PER_WORD) -> float:
        return 60.0 / self.seconds_per_letter / letters_per_word


@dataclass(frozen=True)
class TypingMethodSpec:
    """
    An input method for Hungarian text.

    Letters in `regular_letters` are typed at `regular_speed`, every other
    byte slot (whitespace included) at `irregular_speed`. The letters must
    be CP1250 characters; `regular_set` holds their case folded bytes.
    """
    short_name: str  # Max 10 chars, used in report lines
    name: str
    regular_letters: str
    regular_speed: float  # Seconds per letter
    irregular_speed: float  # Seconds per letter
    regular_set: FrozenSet[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        try:
            encoded = self.regular_letters.encode(CODEC)
        except UnicodeEncodeError as e:
            raise ConfigurationError(
                f"{self.short_name}: regular letters must be {CODEC} characters, "
                f"got {self.regular_letters[e.start:e.end]!r}"
            ) from e
        object.__setattr__(self, "regular_set", frozenset(to_upper_folded(b) for b in encoded))

    @classmethod
    def from_entry(cls, entry: Dict[str, Any], speeds: Dict[str, TypingSpeed]) -> "TypingMethodSpec":
        """Method from a config entry. Speeds are speed names or seconds per letter."""
        entry = _mapping(entry, "methods entry")
        try:
            short_name = str(entry["short_name"])
            regular_speed = _resolve_speed(entry["regular_speed"], speeds)
            irregular_speed = _resolve_speed(entry["irregular_speed"], speeds)
        except KeyError as e:
            raise ConfigurationError(f"Typing method is missing {e}")
        keystrokes = _number(entry.get("irregular_keystrokes", 1), f"{short_name}: irregular_keystrokes")

        regular_letters = entry.get("regular_letters", KEYBOARD_LETTERS_JP)
        if not isinstance(regular_letters, str):
            raise ConfigurationError(f"{short_name}: regular_letters must be a string")

        return cls(
            short_name=short_name,
            name=str(entry.get("name", short_name)),
            regular_letters=regular_letters,
            regular_speed=regular_speed,
            irregular_speed=irregular_speed * keystrokes,
        )


def _number(value: Any, what: str, kind: type = float) -> Any:
    """Convert a config value, raising ConfigurationError if it is not a number."""
    if isinstance(value, bool):
        raise ConfigurationError(f"{what} must be a number, got {value!r}")
    try:
        return kind(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{what} must be a number, got {value!r}")


def _mapping(value: Any, what: str) -> Dict[str, Any]:
    """A config section as a dict. Empty sections are empty dicts."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"{what} must be a mapping, got {type(value).__name__}")
    return value


def _resolve_speed(value: Union[str, float, int], speeds: Dict[str, TypingSpeed]) -> float:
    """A speed reference is either a speed name or seconds per letter."""
    if isinstance(value, str):
        try:
            return speeds[value].seconds_per_letter
        except KeyError:
            raise ConfigurationError(f"Unknown typing speed: {value}")
    return _number(value, "typing speed")


def default_speeds(letters_per_word: int = LETTERS_PER_WORD) -> List[TypingSpeed]:
    return [
        TypingSpeed.from_entry(name, entry, letters_per_word)
        for name, entry in DEFAULT_SPEED_ENTRIES.items()
    ]


REGULAR_SPEED, IRREGULAR_SPEED, MOUSE_SPEED = default_speeds()

DEFAULT_METHODS = tuple(
    TypingMethodSpec.from_entry(entry, {s.name: s for s in default_speeds()})
    for entry in DEFAULT_METHOD_ENTRIES
)


@dataclass
class TypingMethodResult:
    """Typing cost of one method for one frequency table."""
    seconds: float = 0.0
    rank: int = 0  # 0 = slowest

    @property
    def hours(self) -> float:
        return self.seconds / 3600


# =============================================================================
# Frequency Tables
# =============================================================================

@dataclass
class LetterFrequencyTable:
    """
    Letter frequency for one scope (a book or the grand total).

    `counts` is indexed by case folded byte value. Whitespace bytes are
    counted in `counts` but in none of the category totals.
    """
    counts: List[int] = field(default_factory=lambda: [0] * TABLE_SIZE)
    sort_order: List[int] = field(default_factory=lambda: list(range(TABLE_SIZE)))
    total_alphabetic: int = 0
    total_hungarian: int = 0
    total_punctuation: int = 0
    total_digit: int = 0
    total_non_whitespace: int = 0
    typing_results: List[TypingMethodResult] = field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        return sum(self.counts)

    @property
    def whitespace_count(self) -> int:
        return self.total_bytes - self.total_non_whitespace

    @property
    def is_empty(self) -> bool:
        return self.total_non_whitespace == 0


@dataclass
class BookRecord:
    """A listed book and its frequency table."""
    title: str
    table: LetterFrequencyTable = field(default_factory=LetterFrequencyTable)


@dataclass
class GrandTotal:
    """Sum of every successfully read book."""
    books: int = 0
    table: LetterFrequencyTable = field(default_factory=LetterFrequencyTable)

    title = "[Grand Total]"


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class BusinessConfig:
    """Business calendar used by the yearly comparison."""
    days_in_year: int = BUSINESS_DAYS_IN_YEAR
    working_hours_per_day: int = BUSINESS_WORKING_HOURS
    typing_hours_per_day: int = BUSINESS_TYPING_HOURS
    calendar_label: str = BUSINESS_CALENDAR_LABEL

    @property
    def yearly_budget_seconds(self) -> float:
        return float(self.days_in_year * self.typing_hours_per_day * 60 * 60)

    @property
    def typing_share_percent(self) -> float:
        return self.typing_hours_per_day / self.working_hours_per_day * 100.0


@dataclass
class ReportConfig:
    """Configuration for one report run."""
    book_list: str = DEFAULT_BOOK_LIST
    output: str = DEFAULT_OUTPUT

    letters_per_word: int = LETTERS_PER_WORD
    speeds: List[TypingSpeed] = field(
        default_factory=lambda: [REGULAR_SPEED, IRREGULAR_SPEED, MOUSE_SPEED]
    )
    methods: List[TypingMethodSpec] = field(default_factory=lambda: list(DEFAULT_METHODS))

    business: BusinessConfig = field(default_factory=BusinessConfig)

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise ConfigurationError if the configuration cannot be reported."""
        if len(self.methods) < MIN_TYPING_METHODS:
            raise ConfigurationError(
                f"At least {MIN_TYPING_METHODS} typing methods are required, got {len(self.methods)}"
            )
        for method in self.methods:
            if method.regular_speed <= 0 or method.irregular_speed <= 0:
                raise ConfigurationError(f"{method.short_name}: typing speeds must be positive")
        if self.letters_per_word <= 0:
            raise ConfigurationError("letters_per_word must be positive")
        if self.business.typing_hours_per_day <= 0 or self.business.working_hours_per_day <= 0:
            raise ConfigurationError("business hours per day must be positive")
        # getLevelName maps known level names to their number
        if not isinstance(self.log_level, str) or not isinstance(
            logging.getLevelName(self.log_level.upper()), int
        ):
            raise ConfigurationError(f"Unknown logging level: {self.log_level}")

    @classmethod
    def from_yaml(cls, path: str) -> "ReportConfig":
        """Load configuration from YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ReportConfig":
        """
        Build configuration from a parsed YAML mapping.

        Missing sections and keys keep their defaults. Speeds override the
        default speeds by name, so the default methods follow a changed
        `regular` speed.
        """
        data = _mapping(data, "configuration")
        files = _mapping(data.get("files"), "files")
        business = _mapping(data.get("business"), "business")
        log = _mapping(data.get("logging"), "logging")
        letters_per_word = _number(
            data.get("letters_per_word", LETTERS_PER_WORD), "letters_per_word", int
        )
        if letters_per_word <= 0:
            raise ConfigurationError("letters_per_word must be positive")

        speed_entries = dict(DEFAULT_SPEED_ENTRIES)
        for name, entry in _mapping(data.get("speeds"), "speeds").items():
            entry = _mapping(entry, f"speeds.{name}")
            label = DEFAULT_SPEED_ENTRIES.get(name, {}).get("label", name)
            speed_entries[name] = {"label": label, **entry}
        speeds = [
            TypingSpeed.from_entry(str(name), entry, letters_per_word)
            for name, entry in speed_entries.items()
        ]
        by_name = {s.name: s for s in speeds}

        method_entries = data.get("methods")
        if method_entries is None:
            method_entries = DEFAULT_METHOD_ENTRIES
        elif not isinstance(method_entries, list):
            raise ConfigurationError(f"methods must be a list, got {type(method_entries).__name__}")
        methods = [TypingMethodSpec.from_entry(entry, by_name) for entry in method_entries]

        return cls(
            book_list=str(files.get("book_list", DEFAULT_BOOK_LIST)),
            output=str(files.get("output", DEFAULT_OUTPUT)),
            letters_per_word=letters_per_word,
            speeds=speeds,
            methods=methods,
            business=BusinessConfig(
                days_in_year=_number(
                    business.get("days_in_year", BUSINESS_DAYS_IN_YEAR), "business.days_in_year", int
                ),
                working_hours_per_day=_number(
                    business.get("working_hours_per_day", BUSINESS_WORKING_HOURS),
                    "business.working_hours_per_day", int,
                ),
                typing_hours_per_day=_number(
                    business.get("typing_hours_per_day", BUSINESS_TYPING_HOURS),
                    "business.typing_hours_per_day", int,
                ),
                calendar_label=str(business.get("calendar_label", BUSINESS_CALENDAR_LABEL)),
            ),
            log_level=log.get("level", "INFO"),
            log_file=log.get("file"),
        )

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {
            "files": {
                "book_list": self.book_list,
                "output": self.output,
            },
            "letters_per_word": self.letters_per_word,
            "speeds": {
                s.name: {"label": s.label, "seconds_per_letter": s.seconds_per_letter}
                for s in self.speeds
            },
            "methods": [
                {
                    "short_name": m.short_name,
                    "name": m.name,
                    "regular_letters": m.regular_letters,
                    "regular_speed": m.regular_speed,
                    "irregular_speed": m.irregular_speed,
                }
                for m in self.methods
            ],
            "business": {
                "days_in_year": self.business.days_in_year,
                "working_hours_per_day": self.business.working_hours_per_day,
                "typing_hours_per_day": self.business.typing_hours_per_day,
                "calendar_label": self.business.calendar_label,
            },
            "logging": {
                "level": self.log_level,
                "file": self.log_file,
            },
        }
