"""
In-Memory Repositories

Process-local implementations of the repository interfaces. Used by the
API tests and for running the service without a database. Documents are
deep-copied on the way in and out so callers cannot mutate stored state.
"""

import copy
import threading
from typing import Any, Dict, List, Optional

from bson import ObjectId

from .base import (
    AccountRepositoryInterface,
    DuplicateAccountError,
    JobRepositoryInterface,
)


class InMemoryJobRepository(JobRepositoryInterface):
    """Job postings kept in an insertion-ordered dict keyed by id."""

    def __init__(self, documents: Optional[List[Dict[str, Any]]] = None):
        self._jobs: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()
        for document in documents or []:
            self.insert(document)

    def find_all(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [copy.deepcopy(doc) for doc in self._jobs.values()]

    def find_by_id(self, job_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            document = self._jobs.get(str(job_id))
            return copy.deepcopy(document) if document is not None else None

    def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        stored = {k: v for k, v in copy.deepcopy(document).items() if k not in ("id", "_id")}
        stored["id"] = str(ObjectId())
        with self._lock:
            self._jobs[stored["id"]] = stored
        return copy.deepcopy(stored)

    def update(self, job_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            document = self._jobs.get(str(job_id))
            if document is None:
                return None
            for key, value in fields.items():
                if key not in ("id", "_id"):
                    document[key] = copy.deepcopy(value)
            return copy.deepcopy(document)

    def delete(self, job_id: str) -> bool:
        with self._lock:
            return self._jobs.pop(str(job_id), None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._jobs)


class InMemoryAccountRepository(AccountRepositoryInterface):
    """User accounts keyed by username."""

    def __init__(self):
        self._accounts: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def find_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            document = self._accounts.get(username)
            return copy.deepcopy(document) if document is not None else None

    def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        username = document["username"]
        stored = copy.deepcopy(document)
        stored["id"] = str(ObjectId())
        with self._lock:
            if username in self._accounts:
                raise DuplicateAccountError(username)
            self._accounts[username] = stored
        return copy.deepcopy(stored)

    def update(self, username: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            document = self._accounts.get(username)
            if document is None:
                return None
            for key, value in fields.items():
                if key not in ("id", "_id", "username"):
                    document[key] = copy.deepcopy(value)
            return copy.deepcopy(document)
