"""Tests for the style formatter: every style against every source branch."""

from __future__ import annotations

from datetime import date

import bibtexparser
import pytest

from cite_formatter.domain.models.enums import CitationStyle, SourceBranch, SourceType
from cite_formatter.domain.services.citation_formatter import (
    RENDERERS,
    format_citation,
    get_renderer,
)
from cite_formatter.domain.styles import bibtex

TODAY = date(2026, 10, 19)

WEBPAGE = {
    "title": "How Transformers Work",
    "author": "Alice Jones",
    "date": "2024-03-15",
    "url": "https://example.com/transformers",
    "publisher": "Example Blog",
    "sourceType": "webpage",
    "includeAccessDate": True,
}

ARTICLE = {
    "title": "Deep Learning for Protein Folding",
    "author": "Smith, John; Doe, Jane",
    "year": "2023",
    "journal": "Nature Methods",
    "volume": "20",
    "issue": "4",
    "pages": "123-130",
    "doi": "https://doi.org/10.1038/s41592-023-0001",
    "url": "https://nature.com/x",
    "sourceType": "journal",
    "includeAccessDate": True,
}

BOOK = {
    "title": "Pattern Recognition and Machine Learning",
    "author": "Bishop, Christopher M.",
    "year": "2006",
    "publisher": "Springer",
    "isbn": "978-0387310732",
    "sourceType": "book",
}

PREPRINT = {
    "title": "Attention Is All You Need",
    "author": "Ashish Vaswani",
    "year": "2017",
    "url": "https://arxiv.org/abs/1706.03762",
    "sourceType": "article",
}


def _cite(record: dict, style: str) -> str:
    return format_citation(record, style, today=TODAY)


def _without_access(record: dict) -> dict:
    return {**record, "includeAccessDate": False}


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


class TestDispatch:
    def test_table_is_complete(self):
        assert len(RENDERERS) == len(CitationStyle) * len(SourceBranch)

    def test_unknown_style_falls_back_to_bibtex(self):
        assert _cite(BOOK, "turabian").startswith("@book{")
        assert get_renderer("turabian", SourceBranch.BOOK) is bibtex.render

    def test_style_is_case_insensitive(self):
        assert _cite(BOOK, "APA") == _cite(BOOK, "apa")

    def test_default_style_is_bibtex(self):
        assert format_citation(BOOK, today=TODAY).startswith("@book{")


# ---------------------------------------------------------------------------
# Webpage
# ---------------------------------------------------------------------------


class TestWebpage:
    def test_apa(self):
        assert _cite(WEBPAGE, "apa") == (
            "Jones, A. (2024). How Transformers Work. Example Blog. "
            "Retrieved October 19, 2026, from https://example.com/transformers"
        )

    def test_apa_without_access_date(self):
        assert _cite(_without_access(WEBPAGE), "apa") == (
            "Jones, A. (2024). How Transformers Work. Example Blog. "
            "https://example.com/transformers"
        )

    def test_mla(self):
        assert _cite(WEBPAGE, "mla") == (
            'Jones, Alice. "How Transformers Work." Example Blog, 15 Mar. 2024, '
            "https://example.com/transformers. Accessed 19 Oct. 2026."
        )

    def test_chicago(self):
        assert _cite(WEBPAGE, "chicago") == (
            'Jones, Alice. "How Transformers Work." Example Blog. March 15, 2024. '
            "Accessed October 19, 2026. https://example.com/transformers."
        )

    def test_harvard(self):
        assert _cite(WEBPAGE, "harvard") == (
            "Jones, A. (2024) 'How Transformers Work', Example Blog, Available at: "
            "https://example.com/transformers (Accessed: 19 October 2026)."
        )

    def test_harvard_without_url(self):
        record = {**WEBPAGE, "url": ""}
        assert _cite(record, "harvard") == "Jones, A. (2024) 'How Transformers Work', Example Blog."

    def test_ieee(self):
        assert _cite(WEBPAGE, "ieee") == (
            'A. Jones, "How Transformers Work," Example Blog. [Online]. Available: '
            "https://example.com/transformers. [Accessed: Oct. 19, 2026]."
        )

    def test_bibtex(self):
        assert _cite(WEBPAGE, "bibtex") == (
            "@online{jones_how_tra_2024,\n"
            "  author = {Alice Jones},\n"
            "  title = {How Transformers Work},\n"
            "  year = {2024},\n"
            "  url = {https://example.com/transformers},\n"
            "  publisher = {Example Blog},\n"
            "  urldate = {2026-10-19}\n"
            "}"
        )


# ---------------------------------------------------------------------------
# Journal article
# ---------------------------------------------------------------------------


class TestJournalArticle:
    def test_apa(self):
        assert _cite(ARTICLE, "apa") == (
            "Smith, J. & Doe, J. (2023). Deep Learning for Protein Folding. "
            "Nature Methods, 20(4), 123-130. https://doi.org/10.1038/s41592-023-0001"
        )

    def test_mla(self):
        assert _cite(ARTICLE, "mla") == (
            'Smith, John, and Jane Doe. "Deep Learning for Protein Folding." '
            "Nature Methods, vol. 20, no. 4, 2023, pp. 123-130. "
            "https://doi.org/10.1038/s41592-023-0001"
        )

    def test_chicago(self):
        assert _cite(ARTICLE, "chicago") == (
            'Smith, John, and Jane Doe. "Deep Learning for Protein Folding." '
            "Nature Methods 20, no. 4 (2023): 123-130. "
            "https://doi.org/10.1038/s41592-023-0001"
        )

    def test_harvard(self):
        assert _cite(ARTICLE, "harvard") == (
            "Smith, J., Doe, J. (2023) 'Deep Learning for Protein Folding', "
            "Nature Methods, 20(4), pp. 123-130. doi: 10.1038/s41592-023-0001."
        )

    def test_ieee(self):
        assert _cite(ARTICLE, "ieee") == (
            'J. Smith, J. Doe, "Deep Learning for Protein Folding," Nature Methods, '
            "vol. 20, no. 4, pp. 123-130, 2023. doi: 10.1038/s41592-023-0001."
        )

    def test_bibtex_field_order(self):
        assert _cite(ARTICLE, "bibtex") == (
            "@article{smith_dee_lea_2023,\n"
            "  author = {Smith, John and Doe, Jane},\n"
            "  title = {Deep Learning for Protein Folding},\n"
            "  year = {2023},\n"
            "  url = {https://nature.com/x},\n"
            "  journal = {Nature Methods},\n"
            "  volume = {20},\n"
            "  number = {4},\n"
            "  pages = {123-130},\n"
            "  doi = {https://doi.org/10.1038/s41592-023-0001},\n"
            "  urldate = {2026-10-19}\n"
            "}"
        )

    def test_preprint_is_misc(self):
        assert _cite(PREPRINT, "bibtex").startswith("@misc{vaswani_")

    def test_apa_preprint_without_journal(self):
        assert _cite(PREPRINT, "apa") == (
            "Vaswani, A. (2017). Attention Is All You Need. https://arxiv.org/abs/1706.03762"
        )


# ---------------------------------------------------------------------------
# Book
# ---------------------------------------------------------------------------


class TestBook:
    @pytest.mark.parametrize(
        ("style", "expected"),
        [
            ("apa", "Bishop, C. M. (2006). Pattern Recognition and Machine Learning. Springer."),
            ("mla", "Bishop, Christopher M. Pattern Recognition and Machine Learning. Springer, 2006."),
            (
                "chicago",
                "Bishop, Christopher M. Pattern Recognition and Machine Learning. Springer, 2006.",
            ),
            ("harvard", "Bishop, C. M. (2006) Pattern Recognition and Machine Learning. Springer."),
            ("ieee", "C. M. Bishop, Pattern Recognition and Machine Learning. Springer, 2006."),
        ],
    )
    def test_prose_styles(self, style, expected):
        assert _cite(BOOK, style) == expected

    def test_bibtex(self):
        result = _cite(BOOK, "bibtex")
        assert result.startswith("@book{bishop_pat_rec_2006,\n")
        assert "  isbn = {978-0387310732}\n}" in result
        assert "urldate" not in result


# ---------------------------------------------------------------------------
# Properties across every style and source type
# ---------------------------------------------------------------------------

ALL_STYLES = [style.value for style in CitationStyle]
ALL_SOURCES = [source.value for source in SourceType] + ["podcast"]


class TestProperties:
    @pytest.mark.parametrize("style", ALL_STYLES)
    @pytest.mark.parametrize("source", ALL_SOURCES)
    @pytest.mark.parametrize("base", [WEBPAGE, ARTICLE, BOOK, {}], ids=["web", "article", "book", "empty"])
    def test_output_is_clean(self, style, source, base):
        result = _cite({**base, "sourceType": source}, style)
        assert result
        assert result == result.strip()
        for bad in ("undefined", "NaN", "None", " ,", ",,", ", .", ". ."):
            assert bad not in result

    @pytest.mark.parametrize("style", ALL_STYLES)
    @pytest.mark.parametrize("source", ALL_SOURCES)
    def test_access_date_toggle(self, style, source):
        result = _cite(_without_access({**WEBPAGE, "sourceType": source}), style)
        for marker in ("Accessed", "Retrieved", "urldate"):
            assert marker not in result

    @pytest.mark.parametrize("style", ALL_STYLES)
    def test_access_date_requires_url(self, style):
        result = _cite({**WEBPAGE, "url": ""}, style)
        for marker in ("Accessed", "Retrieved", "urldate"):
            assert marker not in result

    @pytest.mark.parametrize("style", ALL_STYLES)
    def test_deterministic(self, style):
        assert _cite(ARTICLE, style) == _cite(ARTICLE, style)

    def test_empty_record_fallbacks(self):
        assert _cite({}, "apa") == "Unknown Author (n.d.). Untitled."
        assert _cite({}, "harvard") == "Unknown Author (n.d.) 'Untitled'."
        assert _cite({}, "bibtex") == "@online{unknown_unt_2026,\n}"

    def test_title_question_mark_not_doubled(self):
        record = {**WEBPAGE, "title": "Is Attention Enough?"}
        assert '"Is Attention Enough?"' in _cite(record, "mla")
        assert "Enough?." not in _cite(record, "apa")


# ---------------------------------------------------------------------------
# BibTeX well-formedness
# ---------------------------------------------------------------------------


class TestBibtexParses:
    """Emitted entries are readable by a real BibTeX parser."""

    def test_article(self):
        library = bibtexparser.loads(_cite(ARTICLE, "bibtex"))
        entry = library.entries[0]
        assert entry["ENTRYTYPE"] == "article"
        assert entry["ID"] == "smith_dee_lea_2023"
        assert entry["journal"] == "Nature Methods"
        assert entry["number"] == "4"
        assert entry["urldate"] == "2026-10-19"

    def test_book(self):
        entry = bibtexparser.loads(_cite(BOOK, "bibtex")).entries[0]
        assert entry["ENTRYTYPE"] == "book"
        assert entry["author"] == "Bishop, Christopher M."
        assert entry["isbn"] == "978-0387310732"

    def test_preprint_misc(self):
        entry = bibtexparser.loads(_cite(PREPRINT, "bibtex")).entries[0]
        assert entry["ENTRYTYPE"] == "misc"
        assert entry["url"] == "https://arxiv.org/abs/1706.03762"
