"""
Account Client

HTTP client for the auth surface of the jobs backend:

    POST /signup              create account
    POST /login               verify credentials
    PUT  /user/{username}     partial update (favorites, feedback, photos)

Every call returns the server's public user document (no password hash).
"""

import logging
from typing import Any, Dict, Optional

import requests

from jobboard.common.config import Config
from jobboard.common.error_handling import AuthError, ValidationError

logger = logging.getLogger(__name__)

CREDENTIALS_REQUIRED = "Please enter username and password"


class AccountClient:
    """Signup, login and account updates against the jobs backend."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or Config.JOBS_API_URL).rstrip("/")
        self.timeout = timeout or Config.HTTP_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    def _call(self, method: str, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise AuthError(f"Could not reach account service: {e}")

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.status_code >= 400:
            message = body.get("message") if isinstance(body, dict) else None
            message = message or f"HTTP {response.status_code}"
            logger.warning(f"{method} {path} rejected ({response.status_code}): {message}")
            raise AuthError(message, status_code=response.status_code)

        if not isinstance(body, dict):
            raise AuthError("Unexpected response from account service")
        return body

    @staticmethod
    def _check_credentials(username: str, password: str) -> None:
        if not (username or "").strip() or not password:
            raise ValidationError(CREDENTIALS_REQUIRED)

    def signup(self, username: str, password: str) -> Dict[str, Any]:
        """
        Create an account.

        Raises:
            ValidationError: Blank username or password
            AuthError: Username taken or service unreachable
        """
        self._check_credentials(username, password)
        user = self._call("POST", "/signup", {"username": username.strip(), "password": password})
        logger.info(f"Signed up {user.get('username')}")
        return user

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """
        Verify credentials.

        Raises:
            ValidationError: Blank username or password
            AuthError: Invalid credentials or service unreachable
        """
        self._check_credentials(username, password)
        user = self._call("POST", "/login", {"username": username.strip(), "password": password})
        logger.info(f"Logged in {user.get('username')}")
        return user

    def update_user(self, username: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Apply a partial update to the account and return the stored user."""
        return self._call("PUT", f"/user/{username}", updates)
