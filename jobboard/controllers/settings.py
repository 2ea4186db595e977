"""Settings screen: theme toggle, local switches and logout."""

from typing import Optional

from jobboard.services.preferences_service import PreferencesService

from .base import ScreenController
from .screen_config import ScreenConfig


class SettingsController(ScreenController):

    screen_name = "settings"

    def __init__(self, preferences: PreferencesService, config: Optional[ScreenConfig] = None):
        super().__init__(config)
        self.preferences = preferences
        self.dark_mode = self.config.dark_mode
        # Display-only switches, not persisted
        self.job_notifications = True
        self.saved_job_alerts = True
        self.location_tracking = False
        self.logged_out = False

    async def on_mount(self) -> None:
        dark_mode = await self.preferences.is_dark_mode()
        self._apply_if_mounted(lambda: self._set_dark_mode(dark_mode))

    def _set_dark_mode(self, enabled: bool) -> None:
        self.dark_mode = enabled
        self.config = self.config.with_dark_mode(enabled)

    @property
    def theme(self):
        return self.config.theme

    async def toggle_dark_mode(self) -> None:
        enabled = not self.dark_mode
        if not await self.preferences.set_dark_mode(enabled):
            self.log.warning("Dark mode preference not persisted")
        self._apply_if_mounted(lambda: self._set_dark_mode(enabled))

    async def logout(self) -> None:
        cleared = await self.preferences.clear()
        if not cleared:
            self.log.error("Error clearing local data on logout")
        self.logged_out = True
