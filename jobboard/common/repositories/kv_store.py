"""
Key-Value Store

Asynchronous string-key to JSON-value store used as the client's single
source of truth between screen mounts (user profile, saved jobs,
onboarding flag, theme preference, photos).

Values are serialized to JSON text on write and parsed on read, so every
read returns a fresh copy and a value that cannot be serialized is
rejected at write time.

Contract:
    get_item(key)      -> value or None; raises StoreError on backend
                          failure or undecodable payload
    set_item(key, v)   -> True on confirmed write, False on failure
    remove_item(key)   -> True on success
    clear()            -> True on success
"""

import asyncio
import json
import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ..error_handling import StoreError, log_on_exception

logger = logging.getLogger(__name__)

# Keys used by the client
USER_KEY = "user"
SAVED_JOBS_KEY = "savedJobs"
ONBOARDING_KEY = "onboardingCompleted"
DARK_MODE_KEY = "isDarkMode"
COVER_PHOTO_KEY = "coverPhoto"
PROFILE_PHOTO_KEY = "profilePhoto"


def _decode(key: str, payload: Optional[str]) -> Any:
    if payload is None:
        return None
    try:
        return json.loads(payload)
    except (TypeError, ValueError) as e:
        raise StoreError(key, f"corrupt payload ({e})")


def _encode(key: str, value: Any) -> Optional[str]:
    try:
        return json.dumps(value)
    except (TypeError, ValueError) as e:
        logger.error(f"Error storing {key}: value is not JSON-serializable ({e})")
        return None


class KeyValueStoreInterface(ABC):
    """Abstract asynchronous key-value store."""

    @abstractmethod
    async def get_item(self, key: str) -> Any:
        pass

    @abstractmethod
    async def set_item(self, key: str, value: Any) -> bool:
        pass

    @abstractmethod
    async def remove_item(self, key: str) -> bool:
        pass

    @abstractmethod
    async def clear(self) -> bool:
        pass


class InMemoryKeyValueStore(KeyValueStoreInterface):
    """Process-local store holding JSON text per key."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self._data[key] = json.dumps(value)

    async def get_item(self, key: str) -> Any:
        return _decode(key, self._data.get(key))

    async def set_item(self, key: str, value: Any) -> bool:
        payload = _encode(key, value)
        if payload is None:
            return False
        self._data[key] = payload
        return True

    async def set_raw(self, key: str, payload: str) -> None:
        """Store pre-serialized text as-is (imports, migrations)."""
        self._data[key] = payload

    async def remove_item(self, key: str) -> bool:
        self._data.pop(key, None)
        return True

    async def clear(self) -> bool:
        self._data.clear()
        return True


class MongoKeyValueStore(KeyValueStoreInterface):
    """
    One MongoDB document per key: ``{_id: key, value: <json>, updated_at}``.

    Driver calls are blocking, so they run in a worker thread to keep the
    event loop free.
    """

    def __init__(self, collection: Collection, namespace: str = "default"):
        """
        Args:
            collection: Target collection
            namespace: Prefix isolating one client's keys from another's
        """
        self._collection = collection
        self._namespace = namespace

    def _doc_id(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    async def get_item(self, key: str) -> Any:
        try:
            document = await asyncio.to_thread(
                self._collection.find_one, {"_id": self._doc_id(key)}
            )
        except PyMongoError as e:
            raise StoreError(key, f"read failed ({e})")
        if document is None:
            return None
        return _decode(key, document.get("value"))

    async def set_item(self, key: str, value: Any) -> bool:
        payload = _encode(key, value)
        if payload is None:
            return False
        try:
            with log_on_exception(logger, f"store write {key}", level=logging.ERROR):
                await asyncio.to_thread(
                    self._collection.update_one,
                    {"_id": self._doc_id(key)},
                    {"$set": {"value": payload, "updated_at": datetime.utcnow()}},
                    upsert=True,
                )
        except PyMongoError:
            return False
        return True

    async def remove_item(self, key: str) -> bool:
        try:
            await asyncio.to_thread(self._collection.delete_one, {"_id": self._doc_id(key)})
        except PyMongoError as e:
            logger.error(f"Error removing {key}: {e}")
            return False
        return True

    async def clear(self) -> bool:
        try:
            await asyncio.to_thread(
                self._collection.delete_many,
                {"_id": {"$regex": f"^{re.escape(self._namespace)}:"}},
            )
        except PyMongoError as e:
            logger.error(f"Error clearing store: {e}")
            return False
        return True
