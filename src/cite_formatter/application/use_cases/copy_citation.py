"""Use Case: Copy Citation to Clipboard.

Generates a citation and copies it to the system clipboard through an
injected ClipboardPort.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any, Optional, Union

from cite_formatter.application.use_cases.generate_citation import GenerateCitationUseCase
from cite_formatter.domain.models.enums import CitationStyle, OutputFormat
from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.ports.clipboard_port import ClipboardPort

logger = logging.getLogger(__name__)


class CopyCitationUseCase:
    """Generate and copy a citation to the clipboard."""

    def __init__(self, clipboard: ClipboardPort, generator: GenerateCitationUseCase) -> None:
        self._clipboard = clipboard
        self._generator = generator

    def execute(
        self,
        metadata: Union[MetadataRecord, Mapping[str, Any]],
        style: Union[CitationStyle, str, None] = None,
        output_format: Union[OutputFormat, str, None] = None,
        today: Optional[date] = None,
    ) -> str:
        """Generate the citation and copy it.

        Returns:
            The citation string that was copied.

        Raises:
            ClipboardError: If no clipboard backend is available.
        """
        citation = self._generator.execute(metadata, style, output_format, today)
        self._clipboard.copy(citation)
        logger.info("Copied %d characters to the clipboard", len(citation))
        return citation
