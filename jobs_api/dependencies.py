"""
Route dependencies.

Routes receive repositories through these functions so tests can swap in
in-memory implementations via ``app.dependency_overrides``.
"""

from jobboard.common.repositories import (
    AccountRepositoryInterface,
    JobRepositoryInterface,
    get_account_repository,
    get_job_repository,
)


def get_jobs_repo() -> JobRepositoryInterface:
    return get_job_repository()


def get_accounts_repo() -> AccountRepositoryInterface:
    return get_account_repository()
