"""Chicago 17th edition renderer (notes-bibliography).

``Last, First. "Title." Journal 12, no. 3 (2024): 45-67. https://doi.org/...``
"""

from __future__ import annotations

from datetime import date

from cite_formatter.domain.models.enums import CitationStyle, SourceBranch
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.rules.constants import NO_DATE, UNTITLED
from cite_formatter.domain.services.authors import format_authors_chicago
from cite_formatter.domain.services.dates import access_date, format_date
from cite_formatter.domain.styles.base import Renderer, doi_or_url, join_clauses, quoted, terminate


def _author_part(record: MetadataRecord) -> str:
    return terminate(format_authors_chicago(record.author))


def _accessed(record: MetadataRecord, today: date) -> str:
    # Chicago places the access date before the URL.
    if not record.wants_access_date:
        return ""
    return f"Accessed {access_date(CitationStyle.CHICAGO, today)}."


def render_online(record: MetadataRecord, today: date) -> str:
    published = ""
    if record.date or record.year:
        published = terminate(format_date(record, CitationStyle.CHICAGO))
    return join_clauses(
        [
            _author_part(record),
            quoted(record.title or UNTITLED, "."),
            terminate(record.publisher),
            published,
            _accessed(record, today),
            terminate(record.url),
        ]
    )


def render_periodical(record: MetadataRecord, today: date) -> str:
    source = join_clauses([record.journal, record.volume])
    if record.issue:
        source = f"{source}, no. {record.issue}" if source else f"no. {record.issue}"
    source = join_clauses([source, f"({record.year or NO_DATE})"])
    if record.pages:
        source += f": {record.pages}"
    return join_clauses(
        [
            _author_part(record),
            quoted(record.title or UNTITLED, "."),
            terminate(source),
            doi_or_url(record),
        ]
    )


def render_book(record: MetadataRecord, today: date) -> str:
    return join_clauses(
        [
            _author_part(record),
            terminate(record.title or UNTITLED),
            terminate(join_clauses([record.publisher, record.year or NO_DATE], ", ")),
        ]
    )


def render_other(record: MetadataRecord, today: date) -> str:
    return join_clauses(
        [
            _author_part(record),
            quoted(record.title or UNTITLED, "."),
            _accessed(record, today),
            terminate(record.url),
        ]
    )


RENDERERS: dict[SourceBranch, Renderer] = {
    SourceBranch.ONLINE: render_online,
    SourceBranch.PERIODICAL: render_periodical,
    SourceBranch.BOOK: render_book,
    SourceBranch.OTHER: render_other,
}
