"""
Jobs API route modules.

Each module handles a specific area of functionality.
"""

from .jobs import router as jobs_router
from .users import router as users_router

__all__ = [
    "jobs_router",
    "users_router",
]
