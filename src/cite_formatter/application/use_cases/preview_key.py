"""Use Case: Preview Citation Key.

Shows what a key format produces. Without an author or a title the
preview runs against a fixed sample record so the user still sees the
shape of the key.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any, Optional, Union

from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.rules.constants import SAMPLE_AUTHOR, SAMPLE_TITLE, SAMPLE_YEAR
from cite_formatter.domain.services.key_generator import generate_key


class PreviewKeyUseCase:
    """Generate a key for a record, or for the sample record."""

    def execute(
        self,
        metadata: Union[MetadataRecord, Mapping[str, Any], None] = None,
        key_format: Optional[str] = None,
        today: Optional[date] = None,
    ) -> str:
        record = MetadataRecord.from_data(metadata or {})
        if not record.author and not record.title:
            record = record.model_copy(
                update={"author": SAMPLE_AUTHOR, "title": SAMPLE_TITLE, "year": SAMPLE_YEAR}
            )
        return generate_key(record, key_format or None, today=today)
