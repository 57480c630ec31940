"""Output wrapping: present a finished citation as plain text, Markdown or HTML.

BibTeX is code and goes into a fenced/preformatted block; prose styles
become a block quote or a paragraph.
"""

from __future__ import annotations

import html
from typing import Union

from cite_formatter.domain.models.enums import CitationStyle, OutputFormat


def wrap_citation(
    citation: str,
    style: Union[CitationStyle, str],
    output_format: Union[OutputFormat, str] = OutputFormat.PLAIN,
) -> str:
    """Wrap ``citation`` for the chosen output representation.

    Unknown output formats are treated as plain text.
    """
    is_bibtex = CitationStyle.parse(style) == CitationStyle.BIBTEX
    try:
        fmt = OutputFormat(output_format)
    except ValueError:
        fmt = OutputFormat.PLAIN

    if fmt == OutputFormat.MARKDOWN:
        if is_bibtex:
            return f"```bibtex\n{citation}\n```"
        return f"> {citation}"
    if fmt == OutputFormat.HTML:
        if is_bibtex:
            return f'<pre><code class="language-bibtex">{html.escape(citation)}</code></pre>'
        return f'<p class="citation">{html.escape(citation)}</p>'
    return citation
