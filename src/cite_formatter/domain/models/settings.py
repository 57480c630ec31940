"""User preferences model for Cite Formatter.

This module defines the ``UserSettings`` Pydantic model that captures the
persisted defaults the metadata record falls back to (key template and
access-date toggle) plus the last chosen style, source type and output
format.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from cite_formatter.domain.models.enums import CitationStyle, OutputFormat, SourceType
from cite_formatter.domain.rules.constants import DEFAULT_KEY_FORMAT


class UserSettings(BaseModel):
    """Root user preferences, persisted to ``user_settings.json``."""

    citation_style: CitationStyle = Field(
        default=CitationStyle.APA,
        description="Style selected when none is given.",
    )
    source_type: SourceType = Field(
        default=SourceType.WEBPAGE,
        description="Source type assumed for new records.",
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.PLAIN,
        description="Representation the citation is wrapped in.",
    )
    include_access_date: bool = Field(
        default=True,
        description="Append an access-date clause for online sources.",
    )
    key_format: str = Field(
        default=DEFAULT_KEY_FORMAT,
        min_length=1,
        description="Citation-key template.",
    )

    @field_validator("key_format", mode="before")
    @classmethod
    def _strip_key_format(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v
