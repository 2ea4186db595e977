"""
Job Filter Engine

Narrows a job list by the user's search text and facet selections.

Predicates are applied as a sequential AND in a fixed order:
    1. Text      - title or company contains the search text (case-insensitive)
    2. Category  - "All" or exact match
    3. Location  - "All" or exact match
    4. Salary    - no range, or minimum <= salary <= maximum

A facet holding a value of the wrong type imposes no constraint.
The result preserves input order. Everything here is pure: no I/O, no
mutation of the inputs, the whole list is re-filtered on every change.
"""

from typing import Iterable, List, Optional

from jobboard.common.types import ALL, FilterCriteria, Job, SalaryRange


def _matches_text(job: Job, needle: str) -> bool:
    if not needle:
        return True
    return needle in job.title.lower() or needle in job.company.lower()


def _matches_facet(value: str, selected: str) -> bool:
    if not isinstance(selected, str):
        return True
    return not selected or selected == ALL or value == selected


def matches(job: Job, criteria: Optional[FilterCriteria]) -> bool:
    """Return True if the job passes every active predicate."""
    if criteria is None:
        return True
    search_text = criteria.search_text if isinstance(criteria.search_text, str) else ""
    if not _matches_text(job, search_text.lower()):
        return False
    if not _matches_facet(job.category, criteria.category):
        return False
    if not _matches_facet(job.location, criteria.location):
        return False
    if isinstance(criteria.salary_range, SalaryRange) and not criteria.salary_range.contains(job.salary):
        return False
    return True


def filter_jobs(jobs: Iterable[Job], criteria: Optional[FilterCriteria]) -> List[Job]:
    """
    Filter jobs by search text, category, location and salary range.

    Args:
        jobs: Jobs in display order
        criteria: Active criteria; None means no constraint

    Returns:
        New list with the matching jobs, in input order
    """
    if criteria is None or criteria.is_empty:
        return list(jobs)
    return [job for job in jobs if matches(job, criteria)]


def related_jobs(job: Job, jobs: Iterable[Job], limit: int = 3) -> List[Job]:
    """Other jobs in the same category, excluding the job itself."""
    related = [other for other in jobs if other.category == job.category and other.id != job.id]
    return related[:limit]


def featured_jobs(jobs: Iterable[Job], limit: int = 5) -> List[Job]:
    """Featured jobs in input order."""
    return [job for job in jobs if job.is_featured][:limit]
