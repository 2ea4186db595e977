"""
Job Sources Module

Provides a unified interface for fetching jobs:
- Placeholder posts (public demo API mapped into jobs)
- Jobs API (the CRUD backend in ``jobs_api``)

Each source implements the JobSource abstract base class for consistent handling.
"""

from abc import ABC, abstractmethod
from typing import List

from jobboard.common.types import Job


class JobSource(ABC):
    """Abstract base class for job data sources."""

    @abstractmethod
    def fetch_jobs(self) -> List[Job]:
        """
        Fetch all jobs from the source.

        Returns:
            List of Job objects with unique ids

        Raises:
            JobSourceError: On network, HTTP or payload failure
        """
        pass

    @abstractmethod
    def get_source_name(self) -> str:
        """
        Get the unique identifier for this source.

        Returns:
            Source name (e.g., "placeholder", "jobs_api")
        """
        pass


# Import concrete implementations for convenience
from .placeholder_source import PlaceholderJobSource
from .api_source import ApiJobSource

__all__ = ["JobSource", "PlaceholderJobSource", "ApiJobSource"]
