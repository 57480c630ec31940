"""Date rendering for the citation styles.

Dates in a metadata record are free-form. They are parsed against a small
set of English/ISO layouts and remember how precise they were, so a bare
``2024`` is never rendered as ``1 Jan. 2024``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import NamedTuple, Optional

from cite_formatter.domain.models.enums import CitationStyle
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.rules.constants import MONTH_ABBREVIATIONS, MONTH_NAMES, NO_DATE

_DAY_LAYOUTS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%m/%d/%Y",
)
_MONTH_LAYOUTS = ("%Y-%m", "%Y/%m", "%B %Y", "%b %Y")
_YEAR_LAYOUTS = ("%Y",)


class ParsedDate(NamedTuple):
    value: date
    precision: str  # "day", "month" or "year"


def parse_date(text: str) -> Optional[ParsedDate]:
    """Parse a free-form date, returning ``None`` when no layout matches."""
    raw = text.strip()
    text = " ".join(raw.replace(".", " ").split())
    if not text:
        return None
    for precision, layouts in (
        ("day", _DAY_LAYOUTS),
        ("month", _MONTH_LAYOUTS),
        ("year", _YEAR_LAYOUTS),
    ):
        for layout in layouts:
            try:
                return ParsedDate(datetime.strptime(text, layout).date(), precision)
            except ValueError:
                continue
    try:
        # ISO timestamps such as 2024-03-15T10:00:00Z
        return ParsedDate(datetime.fromisoformat(raw.replace("Z", "+00:00")).date(), "day")
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Month / day layouts
# ---------------------------------------------------------------------------


def _mla_month(month: int) -> str:
    """MLA abbreviation: ``Jan.``, ``Oct.``; short names (May, June, July) stay whole."""
    name = MONTH_NAMES[month - 1]
    if len(name) <= 4:
        return name
    return f"{MONTH_ABBREVIATIONS[month - 1]}."


def long_date(value: date) -> str:
    """``October 19, 2026``"""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


def mla_date(value: date) -> str:
    """``19 Oct. 2026``"""
    return f"{value.day} {_mla_month(value.month)} {value.year}"


def day_month_year(value: date) -> str:
    """``19 October 2026``"""
    return f"{value.day} {MONTH_NAMES[value.month - 1]} {value.year}"


def ieee_date(value: date) -> str:
    """``Oct. 19, 2026``"""
    return f"{_mla_month(value.month)} {value.day}, {value.year}"


# ---------------------------------------------------------------------------
# Publication dates
# ---------------------------------------------------------------------------


def format_date(metadata: MetadataRecord, style: CitationStyle) -> str:
    """Render the publication date the way ``style`` expects.

    APA uses the bare year, MLA ``D Mon. YYYY``, Chicago ``Month D, YYYY``;
    every other style uses the year or the raw date. Missing dates render
    as ``n.d.``.
    """
    year, raw = metadata.year, metadata.date
    if not year and not raw:
        return NO_DATE

    parsed = parse_date(raw) if raw else None

    if style == CitationStyle.APA:
        if year:
            return year
        return str(parsed.value.year) if parsed else raw

    if style == CitationStyle.MLA and parsed:
        if parsed.precision == "day":
            return mla_date(parsed.value)
        if parsed.precision == "month":
            return f"{_mla_month(parsed.value.month)} {parsed.value.year}"
        return str(parsed.value.year)

    if style == CitationStyle.CHICAGO and parsed:
        if parsed.precision == "day":
            return long_date(parsed.value)
        if parsed.precision == "month":
            return f"{MONTH_NAMES[parsed.value.month - 1]} {parsed.value.year}"
        return str(parsed.value.year)

    return year or raw


# ---------------------------------------------------------------------------
# Access dates
# ---------------------------------------------------------------------------

_ACCESS_LAYOUTS = {
    CitationStyle.BIBTEX: date.isoformat,
    CitationStyle.APA: long_date,
    CitationStyle.MLA: mla_date,
    CitationStyle.CHICAGO: long_date,
    CitationStyle.HARVARD: day_month_year,
    CitationStyle.IEEE: ieee_date,
}


def access_date(style: CitationStyle, today: Optional[date] = None) -> str:
    """Today's date in the convention of ``style``."""
    today = today or date.today()
    return _ACCESS_LAYOUTS.get(style, long_date)(today)
