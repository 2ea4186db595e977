"""
Job board screen.

Holds the fetched jobs, the active filter criteria and the saved set.
Every criteria change re-runs the full filter over the fetched jobs.
"""

import asyncio
from dataclasses import replace
from typing import List, Optional

from jobboard.common.error_handling import JobSourceError
from jobboard.common.types import ALL, FilterCriteria, Job, SalaryRange
from jobboard.services.job_filter import filter_jobs, related_jobs
from jobboard.services.job_sources import JobSource
from jobboard.services.saved_jobs_service import SavedJobsService, is_saved

from .base import ScreenController
from .screen_config import ScreenConfig

LOAD_FAILED = "Failed to load jobs"


class JobBoardController(ScreenController):
    """Search, filter, inspect and save jobs."""

    screen_name = "jobs"

    def __init__(
        self,
        source: JobSource,
        saved_jobs: SavedJobsService,
        config: Optional[ScreenConfig] = None,
    ):
        super().__init__(config)
        self.source = source
        self.saved_jobs_service = saved_jobs
        self.jobs: List[Job] = []
        self.visible_jobs: List[Job] = []
        self.saved_jobs: List[Job] = []
        self.criteria = FilterCriteria()
        self.selected_job: Optional[Job] = None
        # Toggles run one at a time, each from the last committed set
        self._save_lock = asyncio.Lock()

    async def on_mount(self) -> None:
        await self.load_jobs()
        await self.load_saved_jobs()

    async def load_jobs(self) -> None:
        """Fetch jobs from the source; a failure leaves an empty list."""
        self.loading = True
        try:
            jobs = await asyncio.to_thread(self.source.fetch_jobs)
            error = None
        except JobSourceError as e:
            self.log.error(f"Error fetching jobs: {e}")
            jobs, error = [], LOAD_FAILED
        finally:
            self.loading = False

        def apply():
            self.jobs = jobs
            self.error_message = error
            self._refilter()

        self._apply_if_mounted(apply)

    async def load_saved_jobs(self) -> None:
        saved = await self.saved_jobs_service.load()

        def apply():
            self.saved_jobs = saved

        self._apply_if_mounted(apply)

    # ===== Criteria =====

    def _refilter(self) -> None:
        self.visible_jobs = filter_jobs(self.jobs, self.criteria)

    def set_search_text(self, text: str) -> None:
        self.criteria = replace(self.criteria, search_text=text or "")
        self._refilter()

    def set_category(self, category: Optional[str]) -> None:
        self.criteria = replace(self.criteria, category=category or ALL)
        self._refilter()

    def set_location(self, location: Optional[str]) -> None:
        self.criteria = replace(self.criteria, location=location or ALL)
        self._refilter()

    def set_salary_range(self, minimum: Optional[int], maximum: Optional[int]) -> None:
        """Set inclusive salary bounds in thousands; None clears the range."""
        if minimum is None or maximum is None:
            salary_range = None
        else:
            try:
                salary_range = SalaryRange(int(minimum), int(maximum))
            except ValueError as e:
                self.show_alert(str(e))
                return
        self.criteria = replace(self.criteria, salary_range=salary_range)
        self._refilter()

    def clear_filters(self) -> None:
        self.criteria = FilterCriteria()
        self._refilter()

    # ===== Detail =====

    def select_job(self, job: Job) -> None:
        self.selected_job = job

    def close_job(self) -> None:
        self.selected_job = None

    def related_jobs(self, job: Job) -> List[Job]:
        return related_jobs(job, self.jobs)

    # ===== Saved =====

    def is_saved(self, job: Job) -> bool:
        return is_saved(job, self.saved_jobs)

    async def toggle_save(self, job: Job) -> None:
        async with self._save_lock:
            result = await self.saved_jobs_service.toggle(job, self.saved_jobs)

            def apply():
                self.saved_jobs = result.saved_jobs
                self.show_notice(result.notice)

            self._apply_if_mounted(apply)
