"""Sample jobs inserted into an empty jobs collection."""

import logging
from datetime import datetime
from typing import Any, Dict, List

from jobboard.common.repositories import JobRepositoryInterface

logger = logging.getLogger(__name__)

SEED_JOBS: List[Dict[str, Any]] = [
    {
        "title": "Senior React Native Developer",
        "company": "TechCorp",
        "location": "San Francisco, CA",
        "salary": "$120,000 - $150,000",
        "description": "Build and maintain cross-platform mobile applications.",
        "category": "Tech",
        "image": "https://via.placeholder.com/150",
    },
    {
        "title": "Marketing Manager",
        "company": "GrowEasy",
        "location": "New York, NY",
        "salary": "$90,000 - $110,000",
        "description": "Lead marketing campaigns and grow the brand.",
        "category": "Marketing",
        "image": "https://via.placeholder.com/150",
    },
]


def seed_jobs(repository: JobRepositoryInterface) -> int:
    """
    Insert the sample jobs if the collection is empty.

    Returns:
        Number of jobs inserted
    """
    if repository.count() > 0:
        logger.info("Jobs collection not empty, skipping seed")
        return 0

    now = datetime.utcnow()
    result = repository.insert_many([dict(job, createdAt=now) for job in SEED_JOBS])
    logger.info(f"Seeded {result.modified_count} jobs")
    return result.modified_count
