"""
Core data types for the job board.

Jobs, filter criteria and the user profile are plain dataclasses with
explicit to_dict/from_dict conversions. The dict form uses the camelCase
keys that are persisted in the key-value store and exchanged with the
jobs API, so saved snapshots stay readable across versions.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .salary import normalize_salary

logger = logging.getLogger(__name__)

# Sentinel facet value meaning "no constraint"
ALL = "All"

CATEGORIES: List[str] = [
    "Tech", "Design", "Marketing", "Finance", "Sales", "Management", "Executive",
]

LOCATIONS: List[str] = [
    "New York", "London", "Remote", "Tokyo", "Dubai", "Paris",
]


@dataclass
class Job:
    """A single job posting shown to the end user."""

    id: str
    title: str
    company: str
    description: str = ""
    location: str = ""
    category: str = ""
    salary: Optional[int] = None  # thousands, normalized
    salary_text: Optional[str] = None  # as received from the source
    posted_date: str = ""
    requirements: List[str] = field(default_factory=list)
    is_featured: bool = False
    image: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted/wire representation."""
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "description": self.description,
            "location": self.location,
            "category": self.category,
            "salary": self.salary,
            "salaryText": self.salary_text,
            "postedDate": self.posted_date,
            "requirements": list(self.requirements),
            "isFeatured": self.is_featured,
            "image": self.image,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Job":
        """
        Build a Job from a stored snapshot or an API document.

        Accepts both the persisted shape and raw backend documents
        (``_id``, ``createdAt``, salary as a range string).

        Raises:
            ValueError: If the payload has no id or no title
        """
        if not isinstance(data, dict):
            raise ValueError(f"Job payload must be an object, got {type(data).__name__}")

        raw_id = data.get("id", data.get("_id"))
        if raw_id is None or str(raw_id) == "":
            raise ValueError("Job payload has no id")
        if not data.get("title"):
            raise ValueError(f"Job {raw_id} has no title")

        raw_salary = data.get("salary")
        salary_text = data.get("salaryText")
        if salary_text is None and isinstance(raw_salary, str):
            salary_text = raw_salary

        posted = data.get("postedDate") or data.get("posted") or data.get("createdAt") or ""
        if isinstance(posted, datetime):
            posted = posted.strftime("%Y-%m-%d")

        return cls(
            id=str(raw_id),
            title=str(data["title"]),
            company=str(data.get("company") or ""),
            description=str(data.get("description") or ""),
            location=str(data.get("location") or ""),
            category=str(data.get("category") or ""),
            salary=normalize_salary(raw_salary),
            salary_text=salary_text,
            posted_date=str(posted),
            requirements=[str(r) for r in data.get("requirements") or []],
            is_featured=bool(data.get("isFeatured", False)),
            image=data.get("image"),
        )


@dataclass(frozen=True)
class SalaryRange:
    """Inclusive salary bounds in thousands."""

    minimum: int
    maximum: int

    def __post_init__(self):
        if self.minimum > self.maximum:
            raise ValueError(
                f"Salary range minimum ({self.minimum}) exceeds maximum ({self.maximum})"
            )

    def contains(self, salary: Optional[int]) -> bool:
        if salary is None:
            return False
        return self.minimum <= salary <= self.maximum


def _text_or(value: Any, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    if value not in (None, ""):
        logger.warning(f"Ignoring non-text filter value {value!r}")
    return default


def _read_salary_range(bounds: Any) -> Optional[SalaryRange]:
    """Parse ``[min, max]``; anything unreadable means no salary constraint."""
    if bounds is None or isinstance(bounds, SalaryRange):
        return bounds
    try:
        low, high = bounds
        if isinstance(low, bool) or isinstance(high, bool):
            raise TypeError("booleans are not salaries")
        return SalaryRange(int(low), int(high))
    except (TypeError, ValueError) as e:
        logger.warning(f"Ignoring salary range {bounds!r}: {e}")
        return None


@dataclass(frozen=True)
class FilterCriteria:
    """Active search and filter parameters chosen by the user."""

    search_text: str = ""
    category: str = ALL
    location: str = ALL
    salary_range: Optional[SalaryRange] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FilterCriteria":
        """
        Build criteria from loosely-shaped input.

        Absent, None and empty facets mean "no constraint".
        """
        if not isinstance(data, dict):
            if data:
                logger.warning(f"Ignoring filter criteria of type {type(data).__name__}")
            data = {}

        return cls(
            search_text=_text_or(data.get("searchText", data.get("search_text")), ""),
            category=_text_or(data.get("category"), ALL),
            location=_text_or(data.get("location"), ALL),
            salary_range=_read_salary_range(data.get("salaryRange", data.get("salary_range"))),
        )

    @property
    def is_empty(self) -> bool:
        """True when no facet constrains the result."""
        return (
            not self.search_text
            and self.category == ALL
            and self.location == ALL
            and self.salary_range is None
        )


@dataclass
class UserProfile:
    """Profile owned by the profile screen, persisted as one JSON blob."""

    email: str = ""
    name: str = ""
    bio: str = ""
    profile_photo: Optional[str] = None
    cover_photo: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    experience: str = ""
    portfolio: List[str] = field(default_factory=list)
    applications: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "email": self.email,
            "name": self.name,
            "bio": self.bio,
            "profilePhoto": self.profile_photo,
            "coverPhoto": self.cover_photo,
            "skills": list(self.skills),
            "experience": self.experience,
            "portfolio": list(self.portfolio),
            "applications": self.applications,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserProfile":
        if not isinstance(data, dict):
            raise ValueError(f"Profile payload must be an object, got {type(data).__name__}")
        return cls(
            email=data.get("email") or "",
            name=data.get("name") or "",
            bio=data.get("bio") or "",
            profile_photo=data.get("profilePhoto"),
            cover_photo=data.get("coverPhoto"),
            skills=list(data.get("skills") or []),
            experience=data.get("experience") or "",
            portfolio=list(data.get("portfolio") or []),
            applications=int(data.get("applications") or 0),
        )


@dataclass
class FeedbackEntry:
    """A single piece of user feedback."""

    text: str
    rating: Optional[int] = None
    date: str = field(default_factory=lambda: datetime.utcnow().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "rating": self.rating, "date": self.date}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FeedbackEntry":
        return cls(
            text=str(data.get("text") or ""),
            rating=data.get("rating"),
            date=str(data.get("date") or ""),
        )
