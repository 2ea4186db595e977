"""
Jobs API settings.

Read once from the environment (and ``.env`` when present) through
pydantic-settings. Bad values fail the import of ``jobs_api.app`` instead
of surfacing on the first request.
"""

import logging
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

KNOWN_ENVIRONMENTS = ("development", "staging", "production")
WEAK_SECRETS = {"secret", "password", "changeme", "apisecret"}


class ApiSettings(BaseSettings):
    """Backend settings; each field maps to the upper-cased env var."""

    # === Auth ===
    api_secret: Optional[str] = Field(
        default=None,
        min_length=16,
        description="Shared bearer token required by POST/PUT/DELETE /api/jobs"
    )
    environment: str = Field(
        default="development",
        description="One of development, staging, production"
    )

    # === HTTP ===
    cors_origins: str = Field(
        default="",
        description="Origins allowed to call the API, comma separated"
    )

    # === Storage ===
    mongodb_uri: str = Field(
        default="mongodb://localhost:27017",
        description="Connection string for the jobs and users collections"
    )
    mongo_db_name: str = Field(
        default="jobapp",
        description="Database holding the jobs and users collections"
    )
    seed_on_startup: bool = Field(
        default=True,
        description="Insert the sample jobs when the jobs collection is empty"
    )

    @field_validator("environment")
    @classmethod
    def check_environment(cls, v: str) -> str:
        name = v.strip().lower()
        if name not in KNOWN_ENVIRONMENTS:
            raise ValueError(f"ENVIRONMENT must be one of {', '.join(KNOWN_ENVIRONMENTS)}, got {v!r}")
        return name

    @field_validator("api_secret")
    @classmethod
    def check_api_secret(cls, v: Optional[str]) -> Optional[str]:
        # Repeating a handful of characters to reach the minimum length is not a secret
        if v is not None and (v.lower() in WEAK_SECRETS or len(set(v)) < 4):
            raise ValueError("API_SECRET is guessable, generate a random token instead")
        return v

    @field_validator("mongodb_uri")
    @classmethod
    def check_mongodb_uri(cls, v: str) -> str:
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(f"MONGODB_URI must use the mongodb:// or mongodb+srv:// scheme: {v}")
        return v

    @property
    def allowed_origins(self) -> List[str]:
        return [item.strip() for item in self.cors_origins.split(",") if item.strip()]

    @property
    def in_production(self) -> bool:
        return self.environment == "production"

    @property
    def auth_required(self) -> bool:
        """Job writes need the token in production, or once a secret is set anywhere."""
        return self.in_production or self.api_secret is not None

    def deployment_problems(self) -> List[str]:
        """
        Settings that are legal but wrong for a production deployment.

        Entries prefixed ``CRITICAL`` abort startup; the rest are logged.
        """
        if not self.in_production:
            return []

        problems = []
        if not self.api_secret:
            problems.append("CRITICAL: production requires API_SECRET for job writes")
        if not self.allowed_origins:
            problems.append("WARNING: no CORS_ORIGINS set, browsers cannot call the API")
        if "localhost" in self.mongodb_uri or "127.0.0.1" in self.mongodb_uri:
            problems.append("WARNING: MONGODB_URI points at a local database")
        return problems

    class Config:
        env_file = ".env"
        extra = "ignore"
        case_sensitive = False


@lru_cache()
def get_settings() -> ApiSettings:
    """
    Cached settings.

    Call ``get_settings.cache_clear()`` after changing the environment.
    """
    return ApiSettings()


def validate_config_on_startup() -> None:
    """
    Load the settings and refuse to start on a critical problem.

    Raises:
        ValueError: If a value fails validation or a CRITICAL problem is found
    """
    try:
        settings = get_settings()
    except Exception as e:
        raise ValueError(f"Invalid Jobs API settings: {e}")

    for problem in settings.deployment_problems():
        if problem.startswith("CRITICAL"):
            raise ValueError(problem)
        logger.warning(problem)

    # Never log the secret or credentials embedded in the URI
    location = settings.mongodb_uri.split("@")[-1]
    logger.info(
        f"Jobs API settings: environment={settings.environment} "
        f"database={settings.mongo_db_name} mongo_host={location} "
        f"auth_required={settings.auth_required} seed_on_startup={settings.seed_on_startup}"
    )
