"""APA 7th edition renderer.

``Author, A. A., & Author, B. (Year). Title. Source. https://doi.org/...``
"""

from __future__ import annotations

from datetime import date

from cite_formatter.domain.models.enums import CitationStyle, SourceBranch
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.rules.constants import UNKNOWN_AUTHOR, UNTITLED
from cite_formatter.domain.services.authors import format_authors_apa
from cite_formatter.domain.services.dates import access_date, format_date
from cite_formatter.domain.styles.base import Renderer, doi_link, doi_or_url, join_clauses, terminate


def _author_year_parts(record: MetadataRecord) -> list[str]:
    """Build the common ``Author (Year).`` prefix."""
    authors = format_authors_apa(record.author) or UNKNOWN_AUTHOR
    return [authors, f"({format_date(record, CitationStyle.APA)})."]


def _link_with_retrieval(record: MetadataRecord, today: date) -> str:
    """Bare URL, or ``Retrieved <date>, from <url>`` when access dates are on."""
    if record.wants_access_date:
        return f"Retrieved {access_date(CitationStyle.APA, today)}, from {record.url}"
    return record.url


def render_online(record: MetadataRecord, today: date) -> str:
    """Webpage / news: APA 7 §10.16 and §10.1."""
    parts = _author_year_parts(record)
    parts.append(terminate(record.title or UNTITLED))
    parts.append(terminate(record.publisher))
    parts.append(_link_with_retrieval(record, today))
    return join_clauses(parts)


def render_periodical(record: MetadataRecord, today: date) -> str:
    """Journal article: APA 7 §10.1."""
    parts = _author_year_parts(record)
    parts.append(terminate(record.title or UNTITLED))
    if record.journal:
        source = record.journal
        if record.volume:
            source += f", {record.volume}"
        if record.issue:
            source += f"({record.issue})"
        if record.pages:
            source += f", {record.pages}"
        parts.append(terminate(source))
    parts.append(doi_or_url(record))
    return join_clauses(parts)


def render_book(record: MetadataRecord, today: date) -> str:
    """Book: APA 7 §10.2."""
    parts = _author_year_parts(record)
    parts.append(terminate(record.title or UNTITLED))
    parts.append(terminate(record.publisher))
    parts.append(doi_link(record))
    return join_clauses(parts)


def render_other(record: MetadataRecord, today: date) -> str:
    parts = _author_year_parts(record)
    parts.append(terminate(record.title or UNTITLED))
    parts.append(_link_with_retrieval(record, today))
    return join_clauses(parts)


RENDERERS: dict[SourceBranch, Renderer] = {
    SourceBranch.ONLINE: render_online,
    SourceBranch.PERIODICAL: render_periodical,
    SourceBranch.BOOK: render_book,
    SourceBranch.OTHER: render_other,
}
