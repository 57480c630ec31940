"""Style formatter: dispatch a metadata record to the right renderer.

Renderers are looked up in a flat table keyed by ``(style, branch)``, where
the branch groups source types the way every prose style does: online
(webpage, news), periodical (journal, article), book, and everything else.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any, Optional, Union

from cite_formatter.domain.models.enums import CitationStyle, SourceBranch
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.styles import apa, bibtex, chicago, harvard, ieee, mla
from cite_formatter.domain.styles.base import Renderer

_STYLE_MODULES = {
    CitationStyle.BIBTEX: bibtex,
    CitationStyle.APA: apa,
    CitationStyle.MLA: mla,
    CitationStyle.CHICAGO: chicago,
    CitationStyle.HARVARD: harvard,
    CitationStyle.IEEE: ieee,
}

RENDERERS: dict[tuple[CitationStyle, SourceBranch], Renderer] = {
    (style, branch): renderer
    for style, module in _STYLE_MODULES.items()
    for branch, renderer in module.RENDERERS.items()
}


def get_renderer(style: Union[CitationStyle, str], branch: SourceBranch) -> Renderer:
    """Return the renderer for ``style``; unknown styles resolve to BibTeX."""
    return RENDERERS[(CitationStyle.parse(style), branch)]


def format_citation(
    metadata: Union[MetadataRecord, Mapping[str, Any]],
    style: Union[CitationStyle, str] = CitationStyle.BIBTEX,
    today: Optional[date] = None,
) -> str:
    """Render ``metadata`` as a citation in ``style``.

    Args:
        metadata: The record (or a mapping of record fields).
        style: One of ``bibtex, apa, mla, chicago, harvard, ieee``.
        today: Date used for access-date clauses; defaults to today.

    Returns:
        The citation text. Missing fields degrade to fallback text and
        never raise.

    Raises:
        MetadataValidationError: If ``metadata`` is structurally invalid.
    """
    record = MetadataRecord.from_data(metadata)
    renderer = get_renderer(style, record.branch)
    return renderer(record, today or date.today()).strip()
