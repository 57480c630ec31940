"""JSON repository: implements MetadataRepositoryPort using JSON files.

A file holds either one record object or a list of them. Keys may use the
snake_case field names or the camelCase names the browser collaborators
produce (``sourceType``, ``includeAccessDate``, ``keyFormat``).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from cite_formatter.domain.errors import ConfigurationError
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.ports.metadata_repository import MetadataRepositoryPort

logger = logging.getLogger(__name__)


class JsonMetadataRepository(MetadataRepositoryPort):
    """Persist metadata records as JSON files."""

    def save(self, records: list[MetadataRecord], path: Path) -> None:
        """Serialize records to JSON (camelCase keys) and write to *path*."""
        path.parent.mkdir(parents=True, exist_ok=True)
        data = [record.model_dump(mode="json", by_alias=True) for record in records]
        path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        logger.debug("Wrote %d record(s) to %s", len(records), path)

    def load(self, path: Path) -> list[MetadataRecord]:
        """Load records from a JSON file at *path*."""
        if not path.exists():
            raise ConfigurationError(f"Metadata file not found: {path}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in {path}: {exc}") from exc

        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise ConfigurationError(f"Unexpected JSON format in {path}")
        records = [MetadataRecord.from_data(item) for item in data]
        logger.debug("Loaded %d record(s) from %s", len(records), path)
        return records
