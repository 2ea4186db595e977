"""
Global fixtures for all unit tests.

These fixtures keep unit tests off real MongoDB and network endpoints:
- Environment variables are set before any jobboard import
- Repository singletons are reset between tests
"""

import os

# Set test environment BEFORE any imports so Config does not load real values
os.environ["STORE_BACKEND"] = "memory"
os.environ["DEBUG_MODE"] = "false"
os.environ["JOBS_API_URL"] = "http://jobs.test/api"
os.environ["PLACEHOLDER_POSTS_URL"] = "http://posts.test/posts"

import pytest

from jobboard.common.error_handling import StoreError
from jobboard.common.repositories import InMemoryKeyValueStore, reset_repositories
from jobboard.common.types import Job


class FailingWriteStore(InMemoryKeyValueStore):
    """In-memory store whose writes fail, either by returning False or raising."""

    def __init__(self, initial=None, raise_error: bool = False):
        super().__init__(initial)
        self.raise_error = raise_error
        self.write_attempts = 0

    async def set_item(self, key, value):
        self.write_attempts += 1
        if self.raise_error:
            raise StoreError(key, "disk full")
        return False


class FailingReadStore(InMemoryKeyValueStore):

    async def get_item(self, key):
        raise StoreError(key, "backend unavailable")


@pytest.fixture(autouse=True)
def isolate_repositories():
    """Reset repository singletons so each test sees fresh in-memory storage."""
    reset_repositories()
    yield
    reset_repositories()


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def failing_store():
    return FailingWriteStore()


@pytest.fixture
def raising_store():
    return FailingWriteStore(raise_error=True)


@pytest.fixture
def unreadable_store():
    return FailingReadStore()


@pytest.fixture
def engineer():
    return Job(id="1", title="Engineer", company="Acme", category="Tech", location="Remote", salary=150)


@pytest.fixture
def designer():
    return Job(id="2", title="Designer", company="Acme", category="Design", location="London", salary=95)


@pytest.fixture
def sample_jobs(engineer, designer):
    return [
        engineer,
        designer,
        Job(id="3", title="Data Analyst", company="Globex", category="Finance", location="Tokyo", salary=120),
        Job(id="4", title="Sales Lead", company="Initech", category="Sales", location="Remote"),
        Job(id="5", title="Senior Engineer", company="Globex", category="Tech", location="London",
            salary=180, is_featured=True),
    ]
