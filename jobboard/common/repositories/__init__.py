"""
Repository Pattern for storage operations

Provides an abstraction layer over MongoDB so services and the API can
run against either MongoDB or process-local storage.

Public API:
- get_job_repository(): Factory to get the job repository instance
- get_account_repository(): Factory to get the account repository instance
- get_kv_store(): Factory to get the client key-value store
- JobRepositoryInterface / AccountRepositoryInterface / KeyValueStoreInterface

Usage:
    from jobboard.common.repositories import get_job_repository

    repo = get_job_repository()
    job = repo.find_by_id(job_id)
"""

from .base import (
    AccountRepositoryInterface,
    DuplicateAccountError,
    JobRepositoryInterface,
    WriteResult,
)
from .config import (
    RepositoryConfig,
    StoreBackend,
    get_account_repository,
    get_job_repository,
    get_kv_store,
    reset_repositories,
)
from .kv_store import (
    COVER_PHOTO_KEY,
    DARK_MODE_KEY,
    ONBOARDING_KEY,
    PROFILE_PHOTO_KEY,
    SAVED_JOBS_KEY,
    USER_KEY,
    InMemoryKeyValueStore,
    KeyValueStoreInterface,
    MongoKeyValueStore,
)
from .memory_repository import InMemoryAccountRepository, InMemoryJobRepository

__all__ = [
    # Jobs
    "get_job_repository",
    "JobRepositoryInterface",
    "InMemoryJobRepository",
    # Accounts
    "get_account_repository",
    "AccountRepositoryInterface",
    "InMemoryAccountRepository",
    "DuplicateAccountError",
    # Key-value store
    "get_kv_store",
    "KeyValueStoreInterface",
    "InMemoryKeyValueStore",
    "MongoKeyValueStore",
    "USER_KEY",
    "SAVED_JOBS_KEY",
    "ONBOARDING_KEY",
    "DARK_MODE_KEY",
    "COVER_PHOTO_KEY",
    "PROFILE_PHOTO_KEY",
    # Shared
    "WriteResult",
    "RepositoryConfig",
    "StoreBackend",
    "reset_repositories",
]
