"""BibTeX renderer.

Unlike the prose styles, BibTeX emits a typed, keyed record::

    @article{smith_mac_lea_2024,
      author = {Smith, John and Jones, Alice},
      title = {Machine Learning Fundamentals},
      year = {2024}
    }

Fields are emitted in a fixed order and only when present.
"""

from __future__ import annotations

from datetime import date

from cite_formatter.domain.models.enums import CitationStyle, SourceBranch, SourceType
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.rules.constants import BIBTEX_ENTRY_TYPES, BIBTEX_FALLBACK_TYPE
from cite_formatter.domain.services.authors import format_authors_bibtex
from cite_formatter.domain.services.dates import access_date
from cite_formatter.domain.services.key_generator import generate_key
from cite_formatter.domain.styles.base import Renderer

_FIELD_INDENT = "  "


def entry_type(record: MetadataRecord) -> str:
    """Map the source type to a BibTeX entry type.

    Articles and journals without a journal name degrade to ``misc``
    (preprints such as arXiv papers).
    """
    source = record.source
    if source in (SourceType.ARTICLE, SourceType.JOURNAL) and not record.journal:
        return BIBTEX_FALLBACK_TYPE
    return BIBTEX_ENTRY_TYPES.get(source, BIBTEX_FALLBACK_TYPE)


def entry_fields(record: MetadataRecord, today: date) -> list[tuple[str, str]]:
    """Ordered ``(name, value)`` pairs for the non-empty fields."""
    fields = [
        ("author", format_authors_bibtex(record.author)),
        ("title", record.title),
        ("year", record.year),
        ("url", record.url),
        ("publisher", record.publisher),
        ("journal", record.journal),
        ("volume", record.volume),
        ("number", record.issue),
        ("pages", record.pages),
        ("doi", record.doi),
        ("isbn", record.isbn),
    ]
    if record.wants_access_date:
        fields.append(("urldate", access_date(CitationStyle.BIBTEX, today)))
    return [(name, value) for name, value in fields if value]


def render(record: MetadataRecord, today: date) -> str:
    key = generate_key(record, today=today)
    lines = [f"@{entry_type(record)}{{{key},"]
    fields = entry_fields(record, today)
    if fields:
        lines.append(",\n".join(f"{_FIELD_INDENT}{name} = {{{value}}}" for name, value in fields))
    lines.append("}")
    return "\n".join(lines)


RENDERERS: dict[SourceBranch, Renderer] = {branch: render for branch in SourceBranch}
