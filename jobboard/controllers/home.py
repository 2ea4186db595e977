"""Home screen: banner plus featured jobs."""

from typing import List

from jobboard.common.types import Job
from jobboard.services.job_filter import featured_jobs

from .job_board import JobBoardController


class HomeController(JobBoardController):

    screen_name = "home"
    FEATURED_LIMIT = 5
    banner_visible = True

    async def on_mount(self) -> None:
        await self.load_jobs()

    @property
    def featured_jobs(self) -> List[Job]:
        return featured_jobs(self.jobs, limit=self.FEATURED_LIMIT)

    @property
    def banner(self) -> str:
        return self.config.banner

    def dismiss_banner(self) -> None:
        self.banner_visible = False
