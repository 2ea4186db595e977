"""Job application screen."""

from typing import Optional

from jobboard.common.error_handling import ValidationError
from jobboard.common.types import Job
from jobboard.services.application_service import ApplicationService

from .base import ScreenController
from .screen_config import ScreenConfig


class ApplicationController(ScreenController):

    screen_name = "apply"

    def __init__(
        self,
        job: Job,
        applications: ApplicationService,
        config: Optional[ScreenConfig] = None,
    ):
        super().__init__(config)
        self.job = job
        self.applications = applications
        self.resume_uri: Optional[str] = None
        self.cover_letter = ""
        self.submitted = False

    def attach_resume(self, uri: str) -> None:
        self.resume_uri = uri

    def set_cover_letter(self, text: str) -> None:
        self.cover_letter = text or ""

    async def submit(self) -> None:
        try:
            result = await self.applications.submit(self.job, self.resume_uri, self.cover_letter)
        except ValidationError as e:
            self.show_alert(str(e))
            return

        def apply():
            self.submitted = True
            self.resume_uri = None
            self.cover_letter = ""
            self.show_notice(result.notice)

        self._apply_if_mounted(apply)
