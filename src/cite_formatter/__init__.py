"""Cite Formatter: citation keys and BibTeX/APA/MLA/Chicago/Harvard/IEEE citations."""

from cite_formatter.domain.models.enums import CitationStyle, OutputFormat, SourceType
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.rules.constants import DEFAULT_KEY_FORMAT
from cite_formatter.domain.services.citation_formatter import format_citation
from cite_formatter.domain.services.key_generator import generate_key

__version__ = "1.0.0"

__all__ = [
    "CitationStyle",
    "DEFAULT_KEY_FORMAT",
    "MetadataRecord",
    "OutputFormat",
    "SourceType",
    "format_citation",
    "generate_key",
]
