"""IEEE renderer.

``J. Smith, A. B. Jones, "Title," Journal, vol. 1, no. 2, pp. 3-4, 2024. doi: 10.xxxx/yyy.``
"""

from __future__ import annotations

from datetime import date

from cite_formatter.domain.models.enums import CitationStyle, SourceBranch
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.rules.constants import NO_DATE, UNTITLED
from cite_formatter.domain.services.authors import format_authors_ieee
from cite_formatter.domain.services.dates import access_date
from cite_formatter.domain.styles.base import Renderer, join_clauses, normalize_doi, quoted, terminate


def _author_part(record: MetadataRecord) -> str:
    authors = format_authors_ieee(record.author)
    return f"{authors}," if authors else ""


def _online_locator(record: MetadataRecord, today: date) -> str:
    """``[Online]. Available: URL.`` plus the bracketed access date."""
    if not record.url:
        return ""
    clause = f"[Online]. Available: {record.url}."
    if record.wants_access_date:
        clause += f" [Accessed: {access_date(CitationStyle.IEEE, today)}]."
    return clause


def render_online(record: MetadataRecord, today: date) -> str:
    tail = [terminate(record.publisher), _online_locator(record, today)]
    title_mark = "," if any(tail) else "."
    return join_clauses(
        [_author_part(record), quoted(record.title or UNTITLED, title_mark), *tail]
    )


def render_periodical(record: MetadataRecord, today: date) -> str:
    details = join_clauses(
        [
            record.journal,
            f"vol. {record.volume}" if record.volume else "",
            f"no. {record.issue}" if record.issue else "",
            f"pp. {record.pages}" if record.pages else "",
            record.year or NO_DATE,
        ],
        ", ",
    )
    if record.doi:
        link = f"doi: {normalize_doi(record.doi)}."
    elif record.url:
        link = f"[Online]. Available: {record.url}."
    else:
        link = ""
    return join_clauses(
        [_author_part(record), quoted(record.title or UNTITLED, ","), terminate(details), link]
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
            _online_locator(record, today),
        ]
    )


RENDERERS: dict[SourceBranch, Renderer] = {
    SourceBranch.ONLINE: render_online,
    SourceBranch.PERIODICAL: render_periodical,
    SourceBranch.BOOK: render_book,
    SourceBranch.OTHER: render_other,
}
