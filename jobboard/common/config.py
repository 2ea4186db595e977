"""
Configuration loader for the job board client core.

Loads all settings from environment variables (.env file).
Validates settings and provides type-safe access.
"""

import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """
    Centralized configuration for services, sources and stores.

    All values loaded from environment variables - NO SECRETS IN CODE.
    """

    # ===== MongoDB =====
    MONGODB_URI: str = os.getenv("MONGODB_URI", "")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "jobapp")

    # ===== Job Sources =====
    JOBS_API_URL: str = os.getenv("JOBS_API_URL", "http://localhost:4000/api")
    PLACEHOLDER_POSTS_URL: str = os.getenv(
        "PLACEHOLDER_POSTS_URL",
        "https://jsonplaceholder.typicode.com/posts"
    )
    HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "15"))

    # ===== Persistent Store =====
    # memory: process-local store (tests, demos)
    # mongo: one document per key in KV_COLLECTION
    STORE_BACKEND: str = os.getenv("STORE_BACKEND", "memory").lower()
    KV_COLLECTION: str = os.getenv("KV_COLLECTION", "kv_store")

    # ===== Logging =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "simple")

    @classmethod
    def validate(cls) -> List[str]:
        """
        Check the loaded configuration.

        Returns:
            List of problems (empty when the configuration is usable)
        """
        problems = []

        if cls.STORE_BACKEND not in ("memory", "mongo"):
            problems.append(f"STORE_BACKEND must be 'memory' or 'mongo', got '{cls.STORE_BACKEND}'")

        if cls.STORE_BACKEND == "mongo" and not cls.MONGODB_URI:
            problems.append("MONGODB_URI is required when STORE_BACKEND=mongo")

        for name in ("JOBS_API_URL", "PLACEHOLDER_POSTS_URL"):
            value = getattr(cls, name)
            if not value.startswith(("http://", "https://")):
                problems.append(f"{name} must be an http(s) URL: {value}")

        if cls.HTTP_TIMEOUT_SECONDS <= 0:
            problems.append("HTTP_TIMEOUT_SECONDS must be positive")

        return problems

    @classmethod
    def summary(cls) -> str:
        """Return a summary of the current configuration (safe for logging)."""
        return f"""
Configuration Summary:
  MongoDB: {'✓ Configured' if cls.MONGODB_URI else '✗ Missing'} (db={cls.MONGO_DB_NAME})
  Jobs API: {cls.JOBS_API_URL}
  Placeholder posts: {cls.PLACEHOLDER_POSTS_URL}
  Store backend: {cls.STORE_BACKEND}
  HTTP timeout: {cls.HTTP_TIMEOUT_SECONDS}s
        """.strip()
