"""Use Case: Manage user settings (show / update / reset)."""

from __future__ import annotations

import logging
from typing import Any

from cite_formatter.domain.models.settings import UserSettings
from cite_formatter.domain.ports.settings_port import SettingsPort

logger = logging.getLogger(__name__)


class ManageSettingsUseCase:
    """Read and change the persisted user preferences."""

    def __init__(self, settings: SettingsPort) -> None:
        self._settings = settings

    def load(self) -> UserSettings:
        return self._settings.load()

    def update(self, **changes: Any) -> UserSettings:
        """Apply ``changes`` on top of the current settings and persist them.

        Raises:
            pydantic.ValidationError: If a changed value is invalid.
        """
        current = self._settings.load()
        updated = UserSettings.model_validate({**current.model_dump(), **changes})
        self._settings.save(updated)
        logger.info("Updated settings: %s", ", ".join(sorted(changes)))
        return updated

    def reset(self) -> UserSettings:
        logger.info("Settings reset to defaults")
        return self._settings.reset_to_defaults()
