"""Saved jobs screen."""

import asyncio
from typing import List, Optional

from jobboard.common.types import Job
from jobboard.services.saved_jobs_service import SavedJobsService, is_saved

from .base import ScreenController
from .screen_config import ScreenConfig


class SavedJobsController(ScreenController):

    screen_name = "saved"

    def __init__(self, saved_jobs: SavedJobsService, config: Optional[ScreenConfig] = None):
        super().__init__(config)
        self.saved_jobs_service = saved_jobs
        self.saved_jobs: List[Job] = []
        self._save_lock = asyncio.Lock()

    async def on_mount(self) -> None:
        self.loading = True
        saved = await self.saved_jobs_service.load()
        self.loading = False

        def apply():
            self.saved_jobs = saved

        self._apply_if_mounted(apply)

    @property
    def is_empty(self) -> bool:
        return not self.saved_jobs

    async def unsave(self, job: Job) -> None:
        async with self._save_lock:
            if not is_saved(job, self.saved_jobs):
                return
            result = await self.saved_jobs_service.toggle(job, self.saved_jobs)

            def apply():
                self.saved_jobs = result.saved_jobs
                self.show_notice(result.notice)

            self._apply_if_mounted(apply)
