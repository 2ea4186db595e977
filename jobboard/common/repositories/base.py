"""
Repository Interface Definitions

Defines the abstract interfaces for the jobs and accounts collections.
This enables swapping implementations (MongoDB, in-memory) without
changing consumer code.

Documents crossing these interfaces are plain dicts with a string ``id``
field; backend-specific identifiers never leak out.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class WriteResult:
    """
    Result of a write operation.

    Attributes:
        matched_count: Number of documents that matched the filter
        modified_count: Number of documents actually modified
        inserted_id: ID of inserted document (if any)
    """
    matched_count: int
    modified_count: int
    inserted_id: Optional[str] = None


class DuplicateAccountError(Exception):
    """An account with the same username already exists."""

    def __init__(self, username: str):
        super().__init__(f"Username already taken: {username}")
        self.username = username


class JobRepositoryInterface(ABC):
    """
    Abstract interface for job posting operations.

    Implementations:
    - MongoJobRepository: MongoDB collection
    - InMemoryJobRepository: process-local dict (tests, demos)

    All methods are fail-fast: backend errors propagate to the caller.
    Unknown or malformed ids behave like missing documents.
    """

    @abstractmethod
    def find_all(self) -> List[Dict[str, Any]]:
        """Return every job document in insertion order."""
        pass

    @abstractmethod
    def find_by_id(self, job_id: str) -> Optional[Dict[str, Any]]:
        """
        Find a single job document.

        Returns:
            Document dict if found, None otherwise
        """
        pass

    @abstractmethod
    def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a job document.

        Returns:
            The stored document including its new ``id``
        """
        pass

    @abstractmethod
    def update(self, job_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Apply a partial update.

        Returns:
            The updated document, or None if the job does not exist
        """
        pass

    @abstractmethod
    def delete(self, job_id: str) -> bool:
        """Delete a job. Returns True if a document was removed."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count job documents."""
        pass

    def insert_many(self, documents: List[Dict[str, Any]]) -> WriteResult:
        """Insert several documents one by one."""
        for document in documents:
            self.insert(document)
        return WriteResult(matched_count=0, modified_count=len(documents))


class AccountRepositoryInterface(ABC):
    """
    Abstract interface for user accounts (auth surface).

    Account documents carry ``username``, ``password_hash``, ``favorites``,
    ``feedback``, ``profilePhoto``, ``coverPhoto`` and ``createdAt``.
    """

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        """Find an account by its unique username."""
        pass

    @abstractmethod
    def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new account.

        Raises:
            DuplicateAccountError: If the username is already taken
        """
        pass

    @abstractmethod
    def update(self, username: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Apply a partial update to an account.

        Returns:
            The updated document, or None if the account does not exist
        """
        pass
