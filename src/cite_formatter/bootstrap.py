"""Composition Root: Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path

from cite_formatter.domain.models.settings import UserSettings
from cite_formatter.domain.ports.clipboard_port import ClipboardPort
from cite_formatter.domain.ports.metadata_repository import MetadataRepositoryPort
from cite_formatter.domain.ports.settings_port import SettingsPort

from cite_formatter.infrastructure.clipboard.system_clipboard import SystemClipboard
from cite_formatter.infrastructure.config.settings_manager import SettingsManager
from cite_formatter.infrastructure.persistence.json_repository import JsonMetadataRepository

from cite_formatter.application.use_cases.copy_citation import CopyCitationUseCase
from cite_formatter.application.use_cases.generate_citation import GenerateCitationUseCase
from cite_formatter.application.use_cases.manage_settings import ManageSettingsUseCase
from cite_formatter.application.use_cases.preview_key import PreviewKeyUseCase


class Container:
    """Simple dependency injection container.

    Wires all infrastructure implementations to domain ports
    and provides pre-configured use cases.

    Usage::

        container = Container()
        text = container.generate_citation().execute(record, "apa")
    """

    def __init__(
        self,
        config_dir: str | Path | None = None,
        clipboard: ClipboardPort | None = None,
    ) -> None:
        # -- Infrastructure singletons ---------------------------------------
        self._settings_manager = SettingsManager(Path(config_dir) if config_dir else None)
        self._repository = JsonMetadataRepository()
        self._clipboard = clipboard or SystemClipboard()

    # -- Port accessors ------------------------------------------------------

    @property
    def settings_manager(self) -> SettingsPort:
        return self._settings_manager

    @property
    def repository(self) -> MetadataRepositoryPort:
        return self._repository

    @property
    def clipboard(self) -> ClipboardPort:
        return self._clipboard

    @property
    def user_settings(self) -> UserSettings:
        return self._settings_manager.load()

    # -- Use Case factories --------------------------------------------------

    def generate_citation(self) -> GenerateCitationUseCase:
        """Create a use case for citation generation."""
        return GenerateCitationUseCase(settings=self._settings_manager)

    def copy_citation(self) -> CopyCitationUseCase:
        """Create a use case for copying citations to the clipboard."""
        return CopyCitationUseCase(clipboard=self._clipboard, generator=self.generate_citation())

    def preview_key(self) -> PreviewKeyUseCase:
        return PreviewKeyUseCase()

    def manage_settings(self) -> ManageSettingsUseCase:
        """Create a use case for reading and updating settings."""
        return ManageSettingsUseCase(settings=self._settings_manager)
