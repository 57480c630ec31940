"""Enumerations for citation rendering."""

from __future__ import annotations

from enum import Enum


class CitationStyle(str, Enum):
    """Supported citation styles."""

    BIBTEX = "bibtex"
    APA = "apa"
    MLA = "mla"
    CHICAGO = "chicago"
    HARVARD = "harvard"
    IEEE = "ieee"

    @classmethod
    def parse(cls, value: CitationStyle | str | None) -> CitationStyle:
        """Resolve a style name, falling back to BibTeX for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.BIBTEX


class SourceType(str, Enum):
    """Kinds of cited work. ``OTHER`` catches anything unrecognized."""

    WEBPAGE = "webpage"
    ARTICLE = "article"
    JOURNAL = "journal"
    BOOK = "book"
    NEWS = "news"
    OTHER = "other"

    @classmethod
    def parse(cls, value: SourceType | str | None) -> SourceType:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.OTHER


class SourceBranch(str, Enum):
    """Rendering branch shared by the prose styles."""

    ONLINE = "online"  # webpage, news
    PERIODICAL = "periodical"  # journal, article
    BOOK = "book"
    OTHER = "other"


class OutputFormat(str, Enum):
    """Representation a finished citation is wrapped in."""

    PLAIN = "plain"
    MARKDOWN = "markdown"
    HTML = "html"
