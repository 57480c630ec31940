"""Port: Metadata Repository, read/write metadata records."""

from abc import ABC, abstractmethod
from pathlib import Path

from cite_formatter.domain.models.metadata import MetadataRecord


class MetadataRepositoryPort(ABC):
    """Contract for metadata record persistence."""

    @abstractmethod
    def save(self, records: list[MetadataRecord], path: Path) -> None:
        """Persist records to the given path."""
        ...

    @abstractmethod
    def load(self, path: Path) -> list[MetadataRecord]:
        """Load records from the given path.

        Raises:
            ConfigurationError: If the file is missing or not valid JSON.
            MetadataValidationError: If a record is structurally invalid.
        """
        ...
