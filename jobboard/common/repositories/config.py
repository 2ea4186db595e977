"""
Repository Configuration and Factory

Provides factory functions to get the appropriate repository and store
implementations based on environment configuration.
"""

import os
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .base import AccountRepositoryInterface, JobRepositoryInterface
from .kv_store import KeyValueStoreInterface

logger = logging.getLogger(__name__)


class StoreBackend(str, Enum):
    """Where repositories and the key-value store keep their data."""
    MEMORY = "memory"  # Process-local (tests, demos)
    MONGO = "mongo"    # MongoDB collections


@dataclass
class RepositoryConfig:
    """
    Configuration for repository initialization.

    Loaded from environment variables with sensible defaults.
    """
    backend: StoreBackend = StoreBackend.MEMORY
    mongodb_uri: Optional[str] = None

    # Database/collection names
    database: str = "jobapp"
    jobs_collection: str = "jobs"
    users_collection: str = "users"
    kv_collection: str = "kv_store"

    @classmethod
    def from_env(cls) -> "RepositoryConfig":
        """
        Load configuration from environment variables.

        Environment variables:
        - STORE_BACKEND: memory/mongo (default: memory)
        - MONGODB_URI: Required when STORE_BACKEND=mongo
        - MONGO_DB_NAME: Database name (default: jobapp)
        - KV_COLLECTION: Key-value store collection (default: kv_store)

        Returns:
            RepositoryConfig instance

        Raises:
            ValueError: If the mongo backend is selected without MONGODB_URI
        """
        backend_str = os.getenv("STORE_BACKEND", "memory").lower()
        try:
            backend = StoreBackend(backend_str)
        except ValueError:
            logger.warning(f"Invalid STORE_BACKEND '{backend_str}', defaulting to memory")
            backend = StoreBackend.MEMORY

        mongodb_uri = os.getenv("MONGODB_URI") or None
        if backend == StoreBackend.MONGO and not mongodb_uri:
            raise ValueError("MONGODB_URI environment variable is required for STORE_BACKEND=mongo")

        return cls(
            backend=backend,
            mongodb_uri=mongodb_uri,
            database=os.getenv("MONGO_DB_NAME", "jobapp"),
            kv_collection=os.getenv("KV_COLLECTION", "kv_store"),
        )


# Singleton instances
_job_repository_instance: Optional[JobRepositoryInterface] = None
_account_repository_instance: Optional[AccountRepositoryInterface] = None
_kv_store_instance: Optional[KeyValueStoreInterface] = None


def get_job_repository() -> JobRepositoryInterface:
    """
    Get the job repository instance.

    Uses singleton pattern for connection pooling.

    Returns:
        JobRepositoryInterface implementation

    Raises:
        ValueError: If the mongo backend is selected without a URI
    """
    global _job_repository_instance

    if _job_repository_instance is None:
        config = RepositoryConfig.from_env()

        if config.backend == StoreBackend.MONGO:
            from .mongo_repository import MongoJobRepository
            _job_repository_instance = MongoJobRepository(
                mongodb_uri=config.mongodb_uri,
                database=config.database,
                collection=config.jobs_collection,
            )
            logger.info("Initialized MongoDB job repository")
        else:
            from .memory_repository import InMemoryJobRepository
            _job_repository_instance = InMemoryJobRepository()
            logger.info("Initialized in-memory job repository")

    return _job_repository_instance


def get_account_repository() -> AccountRepositoryInterface:
    """Get the account repository instance (singleton)."""
    global _account_repository_instance

    if _account_repository_instance is None:
        config = RepositoryConfig.from_env()

        if config.backend == StoreBackend.MONGO:
            from .mongo_repository import MongoAccountRepository
            _account_repository_instance = MongoAccountRepository(
                mongodb_uri=config.mongodb_uri,
                database=config.database,
                collection=config.users_collection,
            )
            logger.info("Initialized MongoDB account repository")
        else:
            from .memory_repository import InMemoryAccountRepository
            _account_repository_instance = InMemoryAccountRepository()
            logger.info("Initialized in-memory account repository")

    return _account_repository_instance


def get_kv_store() -> KeyValueStoreInterface:
    """Get the client key-value store instance (singleton)."""
    global _kv_store_instance

    if _kv_store_instance is None:
        config = RepositoryConfig.from_env()

        if config.backend == StoreBackend.MONGO:
            from .kv_store import MongoKeyValueStore
            from .mongo_repository import _MongoConnection
            collection = _MongoConnection.collection(
                config.mongodb_uri, config.database, config.kv_collection
            )
            _kv_store_instance = MongoKeyValueStore(collection)
            logger.info(f"Initialized MongoDB key-value store ({config.kv_collection})")
        else:
            from .kv_store import InMemoryKeyValueStore
            _kv_store_instance = InMemoryKeyValueStore()
            logger.info("Initialized in-memory key-value store")

    return _kv_store_instance


def reset_repositories() -> None:
    """
    Reset all repository singletons.

    Used for testing or when configuration changes.
    """
    global _job_repository_instance, _account_repository_instance, _kv_store_instance

    from .mongo_repository import MongoJobRepository
    MongoJobRepository.reset_connection()

    _job_repository_instance = None
    _account_repository_instance = None
    _kv_store_instance = None
    logger.info("Repository singletons reset")
