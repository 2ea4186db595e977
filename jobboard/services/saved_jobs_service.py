"""
Saved Jobs Service

Maintains the user's saved-jobs set in the key-value store.

Write-through semantics: a toggle is only reflected in the returned set
once the store has confirmed the write. When the write fails the caller
gets the pre-toggle set back together with a failure notice, so the
displayed state never diverges from what is persisted. No retries.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from jobboard.common.error_handling import StoreError
from jobboard.common.repositories.kv_store import SAVED_JOBS_KEY, KeyValueStoreInterface
from jobboard.common.types import Job

logger = logging.getLogger(__name__)

NOTICE_SAVED = "Job Saved"
NOTICE_UNSAVED = "Job Unsaved"
NOTICE_SAVE_FAILED = "Could not update saved jobs, please try again"


@dataclass
class ToggleResult:
    """Outcome of a save/unsave toggle."""
    saved_jobs: List[Job]
    was_added: bool
    persisted: bool
    notice: str


def is_saved(job: Job, saved: List[Job]) -> bool:
    """Membership is by id equality."""
    return any(item.id == job.id for item in saved)


class SavedJobsService:
    """Load and toggle the persisted saved-jobs set."""

    def __init__(self, store: KeyValueStoreInterface, key: str = SAVED_JOBS_KEY):
        self.store = store
        self.key = key

    async def load(self) -> List[Job]:
        """
        Read the saved set.

        Absent, unreadable or corrupt data yields an empty list. Individual
        entries that are not valid jobs are skipped.
        """
        try:
            raw = await self.store.get_item(self.key)
        except StoreError as e:
            logger.error(f"Error loading saved jobs: {e}")
            return []

        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.error(f"Error loading saved jobs: expected a list, got {type(raw).__name__}")
            return []

        jobs: List[Job] = []
        seen = set()
        for entry in raw:
            try:
                job = Job.from_dict(entry)
            except ValueError as e:
                logger.warning(f"Skipping malformed saved job: {e}")
                continue
            if job.id in seen:
                continue
            seen.add(job.id)
            jobs.append(job)
        return jobs

    async def toggle(self, job: Job, current: List[Job]) -> ToggleResult:
        """
        Add the job if absent, remove it if present, then persist.

        Args:
            job: Job to toggle
            current: Saved set as currently displayed

        Returns:
            ToggleResult; on write failure ``saved_jobs`` is ``current``
        """
        was_added = not is_saved(job, current)
        if was_added:
            updated = list(current) + [job]
        else:
            updated = [item for item in current if item.id != job.id]

        persisted = await self._persist(updated)
        if not persisted:
            return ToggleResult(
                saved_jobs=list(current),
                was_added=was_added,
                persisted=False,
                notice=NOTICE_SAVE_FAILED,
            )

        logger.debug(f"{'Saved' if was_added else 'Unsaved'} job {job.id}")
        return ToggleResult(
            saved_jobs=updated,
            was_added=was_added,
            persisted=True,
            notice=NOTICE_SAVED if was_added else NOTICE_UNSAVED,
        )

    async def remove(self, job_id: str, current: List[Job]) -> Optional[List[Job]]:
        """Remove by id. Returns the new set, or None if the write failed."""
        updated = [item for item in current if item.id != job_id]
        if not await self._persist(updated):
            return None
        return updated

    async def _persist(self, jobs: List[Job]) -> bool:
        try:
            ok = await self.store.set_item(self.key, [job.to_dict() for job in jobs])
        except StoreError as e:
            logger.error(f"Error saving jobs: {e}")
            return False
        if not ok:
            logger.error("Error saving jobs: store rejected the write")
        return ok
