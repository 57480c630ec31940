"""Tests for date parsing and per-style date rendering."""

from datetime import date

import pytest

from cite_formatter.domain.models.enums import CitationStyle
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.services.dates import access_date, format_date, parse_date

TODAY = date(2026, 10, 19)


class TestParseDate:
    @pytest.mark.parametrize(
        "text",
        ["2024-03-15", "2024/03/15", "March 15, 2024", "Mar. 15, 2024", "15 March 2024", "03/15/2024"],
    )
    def test_day_precision(self, text):
        assert parse_date(text) == (date(2024, 3, 15), "day")

    def test_iso_timestamp(self):
        assert parse_date("2024-03-15T10:30:00Z") == (date(2024, 3, 15), "day")

    def test_month_precision(self):
        assert parse_date("March 2024") == (date(2024, 3, 1), "month")

    def test_year_precision(self):
        assert parse_date("2024") == (date(2024, 1, 1), "year")

    def test_unparseable(self):
        assert parse_date("sometime soon") is None
        assert parse_date("") is None


class TestFormatDate:
    def test_missing_is_nd(self):
        for style in CitationStyle:
            assert format_date(MetadataRecord(), style) == "n.d."

    def test_apa_uses_year(self):
        assert format_date(MetadataRecord(date="2024-03-15"), CitationStyle.APA) == "2024"

    def test_mla_day(self):
        assert format_date(MetadataRecord(date="2024-03-15"), CitationStyle.MLA) == "15 Mar. 2024"

    def test_mla_short_month_written_in_full(self):
        assert format_date(MetadataRecord(date="2024-06-05"), CitationStyle.MLA) == "5 June 2024"

    def test_mla_month(self):
        assert format_date(MetadataRecord(date="September 2023"), CitationStyle.MLA) == "Sept. 2023"

    def test_mla_year_only(self):
        assert format_date(MetadataRecord(year="2023"), CitationStyle.MLA) == "2023"

    def test_chicago_day(self):
        record = MetadataRecord(date="2024-03-15")
        assert format_date(record, CitationStyle.CHICAGO) == "March 15, 2024"

    def test_unparseable_without_year_is_kept_raw(self):
        record = MetadataRecord(date="Spring")
        assert format_date(record, CitationStyle.MLA) == "Spring"
        assert format_date(record, CitationStyle.HARVARD) == "Spring"


class TestAccessDate:
    @pytest.mark.parametrize(
        ("style", "expected"),
        [
            (CitationStyle.BIBTEX, "2026-10-19"),
            (CitationStyle.APA, "October 19, 2026"),
            (CitationStyle.MLA, "19 Oct. 2026"),
            (CitationStyle.CHICAGO, "October 19, 2026"),
            (CitationStyle.HARVARD, "19 October 2026"),
            (CitationStyle.IEEE, "Oct. 19, 2026"),
        ],
    )
    def test_layouts(self, style, expected):
        assert access_date(style, TODAY) == expected
