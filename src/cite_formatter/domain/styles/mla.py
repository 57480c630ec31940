"""MLA 9th edition renderer.

``Last, First. "Title." Container, vol. 1, no. 2, Date, pp. 3-4. Location.``
"""

from __future__ import annotations

from datetime import date

from cite_formatter.domain.models.enums import CitationStyle, SourceBranch
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.rules.constants import NO_DATE, UNTITLED
from cite_formatter.domain.services.authors import format_authors_mla
from cite_formatter.domain.services.dates import access_date, format_date
from cite_formatter.domain.styles.base import Renderer, doi_or_url, join_clauses, quoted, terminate


def _author_part(record: MetadataRecord) -> str:
    return terminate(format_authors_mla(record.author))


def _accessed(record: MetadataRecord, today: date) -> str:
    if not record.wants_access_date:
        return ""
    return f"Accessed {access_date(CitationStyle.MLA, today)}."


def render_online(record: MetadataRecord, today: date) -> str:
    containers = [record.publisher, format_date(record, CitationStyle.MLA), record.url]
    return join_clauses(
        [
            _author_part(record),
            quoted(record.title or UNTITLED, "."),
            terminate(join_clauses(containers, ", ")),
            _accessed(record, today),
        ]
    )


def render_periodical(record: MetadataRecord, today: date) -> str:
    containers = [
        record.journal,
        f"vol. {record.volume}" if record.volume else "",
        f"no. {record.issue}" if record.issue else "",
        format_date(record, CitationStyle.MLA),
        f"pp. {record.pages}" if record.pages else "",
    ]
    return join_clauses(
        [
            _author_part(record),
            quoted(record.title or UNTITLED, "."),
            terminate(join_clauses(containers, ", ")),
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
            terminate(record.url),
            _accessed(record, today),
        ]
    )


RENDERERS: dict[SourceBranch, Renderer] = {
    SourceBranch.ONLINE: render_online,
    SourceBranch.PERIODICAL: render_periodical,
    SourceBranch.BOOK: render_book,
    SourceBranch.OTHER: render_other,
}
