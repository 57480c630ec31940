"""Domain models: public API.

Provides convenient imports for the most commonly used domain entities.
"""

from cite_formatter.domain.models.enums import (
    CitationStyle,
    OutputFormat,
    SourceBranch,
    SourceType,
)
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.models.settings import UserSettings

__all__ = [
    # Enums
    "CitationStyle",
    "OutputFormat",
    "SourceBranch",
    "SourceType",
    # Records
    "MetadataRecord",
    "UserSettings",
]
