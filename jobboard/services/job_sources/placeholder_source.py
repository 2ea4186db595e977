"""
Placeholder Job Source

Builds demo jobs from the public JSONPlaceholder posts collection.

Posts only carry id, userId, title and body, so the remaining job fields
(location, salary, category, featured flag) are drawn at random on every
fetch. Pass a seeded ``random.Random`` for reproducible output.

API: https://jsonplaceholder.typicode.com/posts
"""

import logging
import random
from datetime import date
from typing import Any, Dict, List, Optional

import requests

from jobboard.common.config import Config
from jobboard.common.error_handling import JobSourceError
from jobboard.common.types import CATEGORIES, LOCATIONS, Job

from . import JobSource

logger = logging.getLogger(__name__)

REQUIREMENTS = ["5+ years experience", "Advanced degree", "Proven excellence"]
FEATURED_PROBABILITY = 0.3


class PlaceholderJobSource(JobSource):
    """Demo jobs generated from placeholder posts."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        rng: Optional[random.Random] = None,
        session: Optional[requests.Session] = None,
    ):
        self.url = url or Config.PLACEHOLDER_POSTS_URL
        self.timeout = timeout or Config.HTTP_TIMEOUT_SECONDS
        self.rng = rng or random.Random()
        self.session = session or requests.Session()

    def get_source_name(self) -> str:
        return "placeholder"

    def fetch_jobs(self) -> List[Job]:
        logger.info(f"Fetching placeholder jobs from {self.url}")

        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            posts = response.json()
        except requests.exceptions.Timeout:
            logger.error("Placeholder API request timed out")
            raise JobSourceError("Placeholder API request timed out")
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error(f"Placeholder API returned an error: {e}")
            raise JobSourceError(f"Placeholder API error: {e}", status_code=status)
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching placeholder jobs: {e}")
            raise JobSourceError(f"Error fetching placeholder jobs: {e}")
        except ValueError as e:
            logger.error(f"Placeholder API returned invalid JSON: {e}")
            raise JobSourceError("Placeholder API returned invalid JSON")

        if not isinstance(posts, list):
            raise JobSourceError(f"Expected a list of posts, got {type(posts).__name__}")

        today = date.today().isoformat()
        jobs = []
        seen = set()
        for post in posts:
            job = self._to_job(post, today)
            if job is None or job.id in seen:
                continue
            seen.add(job.id)
            jobs.append(job)

        logger.info(f"Fetched {len(jobs)} jobs from placeholder posts")
        return jobs

    def _to_job(self, post: Dict[str, Any], posted_date: str) -> Optional[Job]:
        """Map a post into a Job, or None if it lacks an id or title."""
        if not isinstance(post, dict) or post.get("id") is None or not post.get("title"):
            logger.warning(f"Skipping malformed post: {post!r}")
            return None

        return Job(
            id=str(post["id"]),
            title=str(post["title"]),
            company=f"Elite {post.get('userId', '')}".strip(),
            description=str(post.get("body") or ""),
            location=self.rng.choice(LOCATIONS),
            category=self.rng.choice(CATEGORIES),
            salary=self.rng.randint(100, 199),
            posted_date=posted_date,
            requirements=list(REQUIREMENTS),
            is_featured=self.rng.random() < FEATURED_PROBABILITY,
        )
