"""
Authentication Module

Bearer-token protection for mutating job routes, plus password hashing
for user accounts.
"""

import hashlib
import hmac
import logging
import secrets
from typing import Optional

from fastapi import HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import get_settings

logger = logging.getLogger(__name__)

# auto_error=False: the header is optional when auth is not required
security = HTTPBearer(auto_error=False)

PBKDF2_ITERATIONS = 260_000


async def verify_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> Optional[HTTPAuthorizationCredentials]:
    """
    Verify the shared secret token.

    Raises:
        HTTPException: 401 if the token is missing or invalid,
            500 if auth is required but no secret is configured
    """
    settings = get_settings()
    if not settings.auth_required:
        return credentials

    if not settings.api_secret:
        raise HTTPException(status_code=500, detail="Server authentication not configured")

    if credentials is None or not hmac.compare_digest(credentials.credentials, settings.api_secret):
        logger.warning("Rejected request with invalid or missing token")
        raise HTTPException(status_code=401, detail="Invalid authentication token")

    return credentials


def hash_password(password: str, salt: Optional[str] = None) -> str:
    """Return ``pbkdf2_sha256$<iterations>$<salt>$<hex digest>``."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), PBKDF2_ITERATIONS
    )
    return f"pbkdf2_sha256${PBKDF2_ITERATIONS}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt, expected = encoded.split("$")
        rounds = int(iterations)
    except (AttributeError, ValueError):
        return False
    if algorithm != "pbkdf2_sha256":
        return False
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), rounds)
    return hmac.compare_digest(digest.hex(), expected)
