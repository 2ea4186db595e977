"""
Pydantic models for the Jobs API.

Field names follow the wire format the mobile client already consumes
(camelCase for ``createdAt``, ``profilePhoto`` and ``coverPhoto``).
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


def _salary_to_text(v: Any) -> Any:
    # Accept numeric salaries from older clients
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


def _reject_null(v: Any) -> Any:
    # Absent means "leave unchanged"; an explicit null would blank a required field
    if v is None:
        raise ValueError("may not be null")
    return v


# === Jobs ===

class JobCreate(BaseModel):
    """Request body for creating a job."""

    title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    salary: str = Field(..., min_length=1, description="Display salary, e.g. '$90,000 - $110,000'")
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    image: Optional[str] = None

    @field_validator("salary", mode="before")
    @classmethod
    def coerce_salary(cls, v: Any) -> Any:
        return _salary_to_text(v)


class JobUpdate(BaseModel):
    """Partial update; only fields present in the body are changed."""

    title: Optional[str] = Field(default=None, min_length=1)
    company: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    image: Optional[str] = None

    @field_validator("salary", mode="before")
    @classmethod
    def coerce_salary(cls, v: Any) -> Any:
        return _salary_to_text(v)

    @field_validator("title", "company", "location", "salary", "description", "category", mode="before")
    @classmethod
    def required_not_null(cls, v: Any) -> Any:
        return _reject_null(v)


class JobOut(BaseModel):
    id: str
    title: str
    company: str
    location: str
    salary: str
    description: str
    category: str
    image: Optional[str] = None
    createdAt: Optional[datetime] = None


class MessageResponse(BaseModel):
    message: str
    error: Optional[Any] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    jobs: int
    timestamp: datetime


# === Users ===

class Credentials(BaseModel):
    """Signup/login body. Blank fields are rejected by the route with 400."""

    username: str = ""
    password: str = ""


class FeedbackItem(BaseModel):
    text: str
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    date: Optional[str] = None


class UserUpdate(BaseModel):
    favorites: Optional[List[str]] = None
    feedback: Optional[List[FeedbackItem]] = None
    profilePhoto: Optional[str] = None
    coverPhoto: Optional[str] = None

    @field_validator("favorites", "feedback", mode="before")
    @classmethod
    def lists_not_null(cls, v: Any) -> Any:
        return _reject_null(v)


class UserOut(BaseModel):
    id: str
    username: str
    favorites: List[str] = Field(default_factory=list)
    feedback: List[FeedbackItem] = Field(default_factory=list)
    profilePhoto: Optional[str] = None
    coverPhoto: Optional[str] = None
    createdAt: Optional[datetime] = None
