"""Harvard (author-date) renderer.

``Smith, J. (2024) 'Title', Publisher, Available at: URL (Accessed: 19 October 2026).``
"""

from __future__ import annotations

from datetime import date

from cite_formatter.domain.models.enums import CitationStyle, SourceBranch
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.rules.constants import NO_DATE, UNKNOWN_AUTHOR, UNTITLED
from cite_formatter.domain.services.authors import format_authors_harvard
from cite_formatter.domain.services.dates import access_date
from cite_formatter.domain.styles.base import Renderer, join_clauses, normalize_doi, terminate


def _author_year(record: MetadataRecord) -> str:
    authors = format_authors_harvard(record.author) or UNKNOWN_AUTHOR
    return f"{authors} ({record.year or NO_DATE})"


def _available_at(record: MetadataRecord, today: date) -> str:
    """``Available at: URL (Accessed: D Month YYYY)`` or empty without a URL."""
    if not record.url:
        return ""
    clause = f"Available at: {record.url}"
    if record.wants_access_date:
        clause += f" (Accessed: {access_date(CitationStyle.HARVARD, today)})"
    return clause


def render_online(record: MetadataRecord, today: date) -> str:
    body = join_clauses(
        [f"'{record.title or UNTITLED}'", record.publisher, _available_at(record, today)],
        ", ",
    )
    return join_clauses([_author_year(record), terminate(body)])


def render_periodical(record: MetadataRecord, today: date) -> str:
    locator = record.volume
    if record.issue:
        locator += f"({record.issue})"
    body = join_clauses(
        [
            f"'{record.title or UNTITLED}'",
            record.journal,
            locator,
            f"pp. {record.pages}" if record.pages else "",
        ],
        ", ",
    )
    if record.doi:
        link = f"doi: {normalize_doi(record.doi)}."
    elif record.url:
        link = f"Available at: {record.url}."
    else:
        link = ""
    return join_clauses([_author_year(record), terminate(body), link])


def render_book(record: MetadataRecord, today: date) -> str:
    return join_clauses(
        [
            _author_year(record),
            terminate(record.title or UNTITLED),
            terminate(record.publisher),
        ]
    )


def render_other(record: MetadataRecord, today: date) -> str:
    return join_clauses(
        [
            _author_year(record),
            terminate(f"'{record.title or UNTITLED}'"),
            terminate(_available_at(record, today)),
        ]
    )


RENDERERS: dict[SourceBranch, Renderer] = {
    SourceBranch.ONLINE: render_online,
    SourceBranch.PERIODICAL: render_periodical,
    SourceBranch.BOOK: render_book,
    SourceBranch.OTHER: render_other,
}
