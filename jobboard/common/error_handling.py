"""
Centralized error handling for the job board.

Defines the error taxonomy shared by sources, stores, services and
controllers, plus helpers for consistent logging of failures.

Taxonomy:
    - JobSourceError: network/fetch failure (surfaced as empty results)
    - StoreError: persistent store read/write failure (reads become "no data")
    - ValidationError: missing required form input (surfaced as a blocking alert)
    - AuthError: signup/login/account update rejected or unreachable
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")


class JobBoardError(Exception):
    """Base class for all job board errors."""


class JobSourceError(JobBoardError):
    """A job source could not deliver jobs (network, HTTP status, bad payload)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class JobNotFoundError(JobSourceError):
    """The requested job does not exist on the source."""

    def __init__(self, job_id: str):
        super().__init__(f"Job not found: {job_id}", status_code=404)
        self.job_id = job_id


class StoreError(JobBoardError):
    """The persistent store failed to read, decode or write a value."""

    def __init__(self, key: str, message: str):
        super().__init__(f"{key}: {message}")
        self.key = key


class ValidationError(JobBoardError):
    """Required user input is missing or invalid."""


class AuthError(JobBoardError):
    """Authentication or account update failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@contextmanager
def log_on_exception(logger: logging.Logger, operation: str, level: int = logging.WARNING):
    """
    Log a failure inside the block, then let it propagate.

    Example:
        with log_on_exception(logger, "store write savedJobs", level=logging.ERROR):
            collection.update_one(...)
    """
    try:
        yield
    except Exception as e:
        logger.log(level, f"[{operation}] Failed: {e}")
        raise


def safe_execute(
    func: Callable[..., T],
    *args,
    operation_name: str = "operation",
    logger: Optional[logging.Logger] = None,
    fallback: Any = None,
    **kwargs,
) -> T:
    """
    Call ``func`` and return ``fallback`` instead of raising.

    Only for best-effort work such as the startup seed, where a failure
    must not stop the caller.
    """
    log = logger or logging.getLogger(__name__)
    try:
        return func(*args, **kwargs)
    except Exception as e:
        log.warning(f"[{operation_name}] Failed: {e}")
        return fallback
