"""
Application Service

Validates a job application and bumps the profile's application counter.
Submission itself is simulated: nothing is sent to an employer.
"""

import logging
from dataclasses import dataclass

from jobboard.common.error_handling import ValidationError
from jobboard.common.repositories.kv_store import KeyValueStoreInterface
from jobboard.common.types import Job

from .profile_service import ProfileService

logger = logging.getLogger(__name__)

APPLICATION_REQUIRED = "Please upload a resume and write a cover letter"
NOTICE_SUBMITTED = "Application Submitted"


@dataclass
class ApplicationResult:
    job_id: str
    notice: str
    applications: int  # counter after submission, 0 when no profile exists


class ApplicationService:

    def __init__(self, store: KeyValueStoreInterface):
        self.profiles = ProfileService(store)

    async def submit(self, job: Job, resume_uri: str, cover_letter: str) -> ApplicationResult:
        """
        Submit an application for a job.

        Raises:
            ValidationError: If the resume or cover letter is missing
        """
        if not resume_uri or not (cover_letter or "").strip():
            raise ValidationError(APPLICATION_REQUIRED)

        applications = 0
        profile = await self.profiles.load()
        if profile is not None:
            profile.applications += 1
            if await self.profiles.save(profile):
                applications = profile.applications
            else:
                applications = profile.applications - 1

        logger.info(f"Application submitted for job {job.id} ({job.title})")
        return ApplicationResult(job_id=job.id, notice=NOTICE_SUBMITTED, applications=applications)
