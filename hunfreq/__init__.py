"""
Hungarian Letter Frequency Counter

Counts letter frequencies in Hungarian books stored in code page 1250
(Central European) and reports, per book and for all books together:

    - a bar chart of the letter distribution
    - punctuation / digit / alphabet / Hungarian letter totals
    - typing time with three input methods
    - business hours saved in a year by the faster methods

Architecture:
    Book list (UTF-8, optional BOM)
        │
        ▼
    Books (CP1250 bytes)
        │
        ├── codepage     byte classification, case folding
        ├── frequency    per-book tables, grand total
        ├── chart        text bar chart
        ├── typing_cost  seconds per method, ranking
        └── business     yearly hours saved
        ▼
    Report (UTF-8 with BOM)

Usage:
    from hunfreq import ReportConfig, ReportController

    config = ReportConfig.from_yaml("config.yaml")
    ReportController(config).run()

    # Or use the pieces directly
    from hunfreq import LetterFrequencyTable, accumulate, render_chart

    table = LetterFrequencyTable()
    accumulate(open("book.txt", "rb").read(), table)
    print("\\n".join(render_chart(table)))
"""

from .business import BusinessImpact, HoursSaved, business_impact
from .chart import layout, render_bar, render_chart
from .codepage import CharClass, classify, to_printable, to_upper_folded
from .controller import ReportController
from .errors import (
    BookListOpenFailure,
    BookOpenFailure,
    ConfigurationError,
    EmptyScopeError,
    HunfreqError,
    OutputOpenFailure,
    UnclassifiedCharacterWarning,
)
from .frequency import accumulate, merge, select_displayable, sort_by_significance
from .models import (
    BookRecord,
    BusinessConfig,
    GrandTotal,
    LetterFrequencyTable,
    ReportConfig,
    TypingMethodResult,
    TypingMethodSpec,
    TypingSpeed,
)
from .report import ReportWriter
from .typing_cost import compute_typing_costs, cost_for_method, rank, wpm

__version__ = "0.5.0"
__all__ = [
    # Controller
    "ReportController",
    "ReportConfig",
    "ReportWriter",
    # Classification
    "CharClass",
    "classify",
    "to_printable",
    "to_upper_folded",
    # Frequency
    "LetterFrequencyTable",
    "BookRecord",
    "GrandTotal",
    "accumulate",
    "merge",
    "sort_by_significance",
    "select_displayable",
    # Chart
    "layout",
    "render_bar",
    "render_chart",
    # Typing cost
    "TypingSpeed",
    "TypingMethodSpec",
    "TypingMethodResult",
    "compute_typing_costs",
    "cost_for_method",
    "rank",
    "wpm",
    # Business
    "BusinessConfig",
    "BusinessImpact",
    "HoursSaved",
    "business_impact",
    # Errors
    "HunfreqError",
    "BookListOpenFailure",
    "BookOpenFailure",
    "OutputOpenFailure",
    "ConfigurationError",
    "EmptyScopeError",
    "UnclassifiedCharacterWarning",
]
