from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from yh_app.api import (
    CommandService,
    HelperSettings,
    ManifestCache,
    ManifestReader,
    SettingsRepository,
)
from yh_common.api import configure_logging
from yh_ui.tui.adapters.chooser import ChooserAdapter, PrompterAdapter
from yh_ui.tui.core.protocols import UI
from yh_ui.tui.system.facade import TUI


@dataclass
class UIContext:
    """Container for UI services and state, initialized lazily."""

    headless: bool = False
    config_path: Optional[Path] = None
    overrides: dict[str, Any] = field(default_factory=dict)

    _ui: Optional[UI] = None
    _settings_repository: Optional[SettingsRepository] = None
    _manifest_cache: Optional[ManifestCache] = None

    @property
    def ui(self) -> UI:
        if self._ui is None:
            if self.headless:
                from yh_ui.tui.system.headless import HeadlessUI

                self._ui = HeadlessUI(echo=True)
            else:
                self._ui = TUI()
        return self._ui

    @ui.setter
    def ui(self, value: UI):
        self._ui = value

    @property
    def settings_repository(self) -> SettingsRepository:
        if self._settings_repository is None:
            self._settings_repository = SettingsRepository()
        return self._settings_repository

    @settings_repository.setter
    def settings_repository(self, value: SettingsRepository):
        self._settings_repository = value

    @property
    def manifest_cache(self) -> ManifestCache:
        """One cache per process, shared by every reader."""
        if self._manifest_cache is None:
            self._manifest_cache = ManifestCache()
        return self._manifest_cache

    def settings(self, **overrides: Any) -> HelperSettings:
        merged = {**self.overrides, **overrides}
        return self.settings_repository.load(self.config_path, **merged)

    def manifest_reader(self) -> ManifestReader:
        return ManifestReader(self.manifest_cache)

    def command_service(self, settings: HelperSettings) -> CommandService:
        return CommandService(
            chooser=ChooserAdapter(self.ui),
            prompter=PrompterAdapter(self.ui),
            settings=settings,
            reader=self.manifest_reader(),
        )


__all__ = [
    "UIContext",
    "configure_logging",
]
