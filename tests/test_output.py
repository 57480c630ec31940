"""Tests for output wrapping (plain / markdown / html)."""

from cite_formatter.application.output import wrap_citation
from cite_formatter.domain.models.enums import CitationStyle, OutputFormat

BIBTEX = "@book{smith_2024,\n  title = {A & B}\n}"
PROSE = "Smith, J. & Jones, A. (2024). <Title>."


class TestWrapCitation:
    def test_plain_is_unchanged(self):
        assert wrap_citation(PROSE, "apa") == PROSE
        assert wrap_citation(BIBTEX, CitationStyle.BIBTEX, OutputFormat.PLAIN) == BIBTEX

    def test_markdown_bibtex_is_fenced(self):
        assert wrap_citation(BIBTEX, "bibtex", "markdown") == f"```bibtex\n{BIBTEX}\n```"

    def test_markdown_prose_is_quoted(self):
        assert wrap_citation(PROSE, "mla", "markdown") == f"> {PROSE}"

    def test_html_bibtex_is_preformatted_and_escaped(self):
        result = wrap_citation(BIBTEX, "bibtex", "html")
        assert result.startswith('<pre><code class="language-bibtex">@book{')
        assert "A &amp; B" in result
        assert result.endswith("</code></pre>")

    def test_html_prose_is_escaped_paragraph(self):
        assert wrap_citation(PROSE, "apa", OutputFormat.HTML) == (
            '<p class="citation">Smith, J. &amp; Jones, A. (2024). &lt;Title&gt;.</p>'
        )

    def test_unknown_format_is_plain(self):
        assert wrap_citation(PROSE, "apa", "rtf") == PROSE

    def test_unknown_style_wraps_as_bibtex(self):
        assert wrap_citation(BIBTEX, "turabian", "markdown").startswith("```bibtex")
