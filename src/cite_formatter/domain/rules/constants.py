"""Citation constants: pure domain values.

Fallback text, the default key template, BibTeX type mapping and the
English month tables used by the date renderers. They have NO dependency
on configuration files or external libraries.
"""

from cite_formatter.domain.models.enums import SourceBranch, SourceType


# ---------------------------------------------------------------------------
# Fallback text
# ---------------------------------------------------------------------------

UNKNOWN_AUTHOR: str = "Unknown Author"
UNTITLED: str = "Untitled"
NO_DATE: str = "n.d."

# Key generator defaults (applied before token evaluation)
KEY_UNKNOWN_AUTHOR: str = "unknown"
KEY_UNTITLED: str = "untitled"
KEY_FALLBACK: str = "citation"

DEFAULT_KEY_FORMAT: str = "auth.lower + shorttitle(3,3) + year"

# Sample record shown when previewing a key format without metadata
SAMPLE_AUTHOR: str = "Smith, John"
SAMPLE_TITLE: str = "Machine Learning Fundamentals"
SAMPLE_YEAR: str = "2024"

# Words skipped by ``shorttitle(n,m)`` before picking title words
TITLE_FUNCTION_WORDS: frozenset[str] = frozenset(
    {
        "a", "an", "the",
        "and", "or", "nor", "but", "yet", "so",
        "of", "in", "on", "at", "to", "for", "by", "with", "from",
        "as", "into", "onto", "upon", "via", "per", "vs",
    }
)

# ---------------------------------------------------------------------------
# Author lists
# ---------------------------------------------------------------------------

APA_MAX_LISTED_AUTHORS: int = 20  # 21+ collapse to first 19, ..., last
APA_LEADING_AUTHORS: int = 19
CHICAGO_MAX_LISTED_AUTHORS: int = 3

# ---------------------------------------------------------------------------
# Source types
# ---------------------------------------------------------------------------

SOURCE_BRANCHES: dict[SourceType, SourceBranch] = {
    SourceType.WEBPAGE: SourceBranch.ONLINE,
    SourceType.NEWS: SourceBranch.ONLINE,
    SourceType.JOURNAL: SourceBranch.PERIODICAL,
    SourceType.ARTICLE: SourceBranch.PERIODICAL,
    SourceType.BOOK: SourceBranch.BOOK,
    SourceType.OTHER: SourceBranch.OTHER,
}

BIBTEX_ENTRY_TYPES: dict[SourceType, str] = {
    SourceType.WEBPAGE: "online",
    SourceType.ARTICLE: "article",
    SourceType.BOOK: "book",
    SourceType.JOURNAL: "article",
    SourceType.NEWS: "article",
}
BIBTEX_FALLBACK_TYPE: str = "misc"

DOI_URL_PREFIX: str = "https://doi.org/"

# ---------------------------------------------------------------------------
# Dates (English only)
# ---------------------------------------------------------------------------

MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "June",
    "July", "Aug", "Sept", "Oct", "Nov", "Dec",
)
