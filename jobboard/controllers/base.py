"""
Screen controller base.

A controller owns one screen's presentation state. Async work started
while the screen is mounted may finish after it has been left; such
results are discarded by checking the liveness flag before applying them.

User-facing feedback comes in three flavours:
    notice         transient popup ("Job Saved")
    alert          blocking dialog for invalid input
    error_message  persistent inline error ("Failed to load jobs")
"""

import asyncio
from typing import Callable, Optional

from jobboard.common.logger import get_logger

from .screen_config import ScreenConfig


class ScreenController:
    """Base class for all screen controllers."""

    screen_name = "screen"

    def __init__(self, config: Optional[ScreenConfig] = None):
        self.config = config or ScreenConfig()
        self.is_mounted = False
        self.loading = False
        self.notice: Optional[str] = None
        self.alert: Optional[str] = None
        self.error_message: Optional[str] = None
        self._notice_timer: Optional[asyncio.TimerHandle] = None
        self.log = get_logger(type(self).__module__, screen=self.screen_name)

    async def mount(self) -> None:
        """Enter the screen and run its initial loads."""
        self.is_mounted = True
        self.log.debug("mounted")
        await self.on_mount()

    def unmount(self) -> None:
        """Leave the screen. Pending results will be dropped."""
        self.is_mounted = False
        self._cancel_notice_timer()
        self.log.debug("unmounted")

    async def on_mount(self) -> None:
        pass

    def _apply_if_mounted(self, apply: Callable[[], None]) -> bool:
        """Run ``apply`` only while the screen is still mounted."""
        if not self.is_mounted:
            self.log.debug("discarding result after unmount")
            return False
        apply()
        return True

    def show_notice(self, message: str) -> None:
        """
        Show a transient notice.

        While mounted, the notice clears itself after
        ``config.notice_seconds``. A newer notice replaces the pending one.
        """
        self._cancel_notice_timer()
        self.notice = message
        if not self.is_mounted or self.config.notice_seconds <= 0:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop to expire it on; stays until dismiss_notice()
            return
        self._notice_timer = loop.call_later(self.config.notice_seconds, self.dismiss_notice)

    def dismiss_notice(self) -> None:
        self._cancel_notice_timer()
        self.notice = None

    def _cancel_notice_timer(self) -> None:
        if self._notice_timer is not None:
            self._notice_timer.cancel()
            self._notice_timer = None

    def show_alert(self, message: str) -> None:
        self.log.info(f"alert: {message}")
        self.alert = message

    def dismiss_alert(self) -> None:
        self.alert = None
