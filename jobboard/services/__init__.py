"""
Job board services.

Pure filtering plus the store-backed and HTTP-backed services used by the
screen controllers.
"""

from .job_filter import featured_jobs, filter_jobs, matches, related_jobs
from .saved_jobs_service import SavedJobsService, ToggleResult, is_saved

__all__ = [
    "filter_jobs",
    "matches",
    "related_jobs",
    "featured_jobs",
    "SavedJobsService",
    "ToggleResult",
    "is_saved",
]
