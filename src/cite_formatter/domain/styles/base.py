"""Shared building blocks for the style renderers.

Every renderer has the signature ``(record, today) -> str`` and assembles
its citation from clauses; empty clauses are dropped so a missing field
never leaves stray punctuation behind.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from datetime import date

from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.rules.constants import DOI_URL_PREFIX

Renderer = Callable[[MetadataRecord, date], str]

_DOI_PREFIX_RE = re.compile(r"^(?:https?://(?:dx\.)?doi\.org/|doi:\s*)", re.IGNORECASE)
_TERMINAL_MARKS = (".", "?", "!")


def normalize_doi(doi: str) -> str:
    """Strip ``https://doi.org/`` or ``doi:`` prefixes from a DOI."""
    return _DOI_PREFIX_RE.sub("", doi.strip())


def doi_link(record: MetadataRecord) -> str:
    """``https://doi.org/<doi>`` or empty string."""
    return f"{DOI_URL_PREFIX}{normalize_doi(record.doi)}" if record.doi else ""


def doi_or_url(record: MetadataRecord) -> str:
    """DOI link when available, otherwise the bare URL, otherwise empty."""
    return doi_link(record) or record.url


def terminate(text: str, mark: str = ".") -> str:
    """Close a clause with ``mark`` unless it already ends a sentence."""
    text = text.rstrip()
    if not text or text.endswith(_TERMINAL_MARKS):
        return text
    return f"{text}{mark}"


def quoted(title: str, mark: str) -> str:
    """``"Title<mark>"``, without doubling a question or exclamation mark."""
    if title.endswith(_TERMINAL_MARKS):
        return f'"{title}"'
    return f'"{title}{mark}"'


def join_clauses(clauses: Iterable[str], sep: str = " ") -> str:
    return sep.join(c for c in clauses if c)
