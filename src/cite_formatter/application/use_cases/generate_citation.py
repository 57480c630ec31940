"""Use Case: Generate Citation.

Fills record defaults from the persisted user settings, renders the
citation in the requested style and wraps it for the output format.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any, Optional, Union

from cite_formatter.application.output import wrap_citation
from cite_formatter.domain.models.enums import CitationStyle, OutputFormat
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.models.settings import UserSettings
from cite_formatter.domain.ports.settings_port import SettingsPort
from cite_formatter.domain.services.citation_formatter import format_citation

logger = logging.getLogger(__name__)

# Record fields that fall back to the user's persisted defaults
_SETTINGS_BACKED_FIELDS = ("key_format", "include_access_date", "source_type")


def apply_settings(record: MetadataRecord, settings: UserSettings) -> MetadataRecord:
    """Fill fields the record did not set explicitly from ``settings``."""
    updates: dict[str, Any] = {}
    for name in _SETTINGS_BACKED_FIELDS:
        if name not in record.model_fields_set:
            value = getattr(settings, name)
            updates[name] = value.value if hasattr(value, "value") else value
    if not updates:
        return record
    return record.model_copy(update=updates)


class GenerateCitationUseCase:
    """Format a metadata record and wrap it for presentation."""

    def __init__(self, settings: Optional[SettingsPort] = None) -> None:
        self._settings = settings

    def _load_settings(self) -> UserSettings:
        return self._settings.load() if self._settings else UserSettings()

    def execute(
        self,
        metadata: Union[MetadataRecord, Mapping[str, Any]],
        style: Union[CitationStyle, str, None] = None,
        output_format: Union[OutputFormat, str, None] = None,
        today: Optional[date] = None,
    ) -> str:
        """Render and wrap a citation.

        Args:
            metadata: The record (or a mapping of record fields).
            style: Citation style; defaults to the saved style.
            output_format: Output representation; defaults to the saved one.
            today: Date for access-date clauses.

        Returns:
            The wrapped citation string.
        """
        settings = self._load_settings()
        record = apply_settings(MetadataRecord.from_data(metadata), settings)
        resolved_style = CitationStyle.parse(style or settings.citation_style)
        fmt = output_format or settings.output_format

        logger.debug(
            "Formatting %s citation (source_type=%s, output=%s)",
            resolved_style.value,
            record.source_type,
            fmt,
        )
        citation = format_citation(record, resolved_style, today=today)
        return wrap_citation(citation, resolved_style, fmt)
