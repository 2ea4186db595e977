"""
MongoDB Repositories

Wraps the jobs and accounts collections behind the repository
interfaces. Mirrors the document store used by the original backend:
one ``jobs`` collection keyed by ObjectId and one ``users`` collection
keyed by username.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from .base import (
    AccountRepositoryInterface,
    DuplicateAccountError,
    JobRepositoryInterface,
)

logger = logging.getLogger(__name__)


def _object_id(job_id: str) -> Optional[ObjectId]:
    """Parse a string id, returning None for malformed values."""
    try:
        return ObjectId(job_id)
    except (InvalidId, TypeError):
        return None


def _to_public(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Replace Mongo's ``_id`` with a string ``id``."""
    if document is None:
        return None
    document = dict(document)
    document["id"] = str(document.pop("_id"))
    return document


class _MongoConnection:
    """
    Shared MongoClient for all repositories.

    Uses a class-level singleton for connection pooling.
    PyMongo handles the pool internally.
    """

    _client: Optional[MongoClient] = None
    _uri: Optional[str] = None

    @classmethod
    def collection(cls, mongodb_uri: str, database: str, name: str) -> Collection:
        if cls._client is None or cls._uri != mongodb_uri:
            cls._client = MongoClient(mongodb_uri)
            cls._uri = mongodb_uri
            logger.info(f"MongoDB client created for database '{database}'")
        return cls._client[database][name]

    @classmethod
    def reset(cls) -> None:
        if cls._client is not None:
            cls._client.close()
        cls._client = None
        cls._uri = None
        logger.info("MongoDB connection reset")


class MongoJobRepository(JobRepositoryInterface):
    """
    Job postings stored in a MongoDB collection.

    Error Handling:
    - Fail-fast: driver errors propagate to caller
    - Malformed ObjectIds behave like missing documents
    """

    def __init__(
        self,
        mongodb_uri: str,
        database: str = "jobapp",
        collection: str = "jobs",
        collection_obj: Optional[Collection] = None,
    ):
        """
        Initialize repository with connection parameters.

        Args:
            mongodb_uri: MongoDB connection string
            database: Database name (default: "jobapp")
            collection: Collection name (default: "jobs")
            collection_obj: Pre-built collection (tests inject a mock here)
        """
        self._mongodb_uri = mongodb_uri
        self._database_name = database
        self._collection_name = collection
        self._collection = collection_obj

    def _get_collection(self) -> Collection:
        if self._collection is None:
            self._collection = _MongoConnection.collection(
                self._mongodb_uri, self._database_name, self._collection_name
            )
        return self._collection

    def find_all(self) -> List[Dict[str, Any]]:
        return [_to_public(doc) for doc in self._get_collection().find({})]

    def find_by_id(self, job_id: str) -> Optional[Dict[str, Any]]:
        object_id = _object_id(job_id)
        if object_id is None:
            return None
        return _to_public(self._get_collection().find_one({"_id": object_id}))

    def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        document = {k: v for k, v in document.items() if k not in ("id", "_id")}
        result = self._get_collection().insert_one(document)
        document["_id"] = result.inserted_id
        logger.debug(f"Inserted job {result.inserted_id}")
        return _to_public(document)

    def update(self, job_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        object_id = _object_id(job_id)
        if object_id is None:
            return None
        fields = {k: v for k, v in fields.items() if k not in ("id", "_id")}
        if not fields:
            return self.find_by_id(job_id)
        updated = self._get_collection().find_one_and_update(
            {"_id": object_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        return _to_public(updated)

    def delete(self, job_id: str) -> bool:
        object_id = _object_id(job_id)
        if object_id is None:
            return False
        result = self._get_collection().delete_one({"_id": object_id})
        return result.deleted_count > 0

    def count(self) -> int:
        return self._get_collection().count_documents({})

    @classmethod
    def reset_connection(cls) -> None:
        """Reset the shared connection pool (testing, recovery)."""
        _MongoConnection.reset()


class MongoAccountRepository(AccountRepositoryInterface):
    """User accounts stored in a MongoDB collection, unique by username."""

    def __init__(
        self,
        mongodb_uri: str,
        database: str = "jobapp",
        collection: str = "users",
        collection_obj: Optional[Collection] = None,
    ):
        self._mongodb_uri = mongodb_uri
        self._database_name = database
        self._collection_name = collection
        self._collection = collection_obj
        self._indexes_ensured = False

    def _get_collection(self) -> Collection:
        if self._collection is None:
            self._collection = _MongoConnection.collection(
                self._mongodb_uri, self._database_name, self._collection_name
            )
        if not self._indexes_ensured:
            self._ensure_indexes(self._collection)
        return self._collection

    def _ensure_indexes(self, collection: Collection) -> None:
        try:
            collection.create_index([("username", ASCENDING)], unique=True, background=True)
            self._indexes_ensured = True
        except Exception as e:
            logger.warning(f"Error creating account indexes (may already exist): {e}")

    def find_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        return _to_public(self._get_collection().find_one({"username": username}))

    def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        document = dict(document)
        try:
            result = self._get_collection().insert_one(document)
        except DuplicateKeyError:
            raise DuplicateAccountError(document.get("username", ""))
        document["_id"] = result.inserted_id
        return _to_public(document)

    def update(self, username: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        fields = {k: v for k, v in fields.items() if k not in ("id", "_id", "username")}
        if not fields:
            return self.find_by_username(username)
        updated = self._get_collection().find_one_and_update(
            {"username": username},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        return _to_public(updated)
