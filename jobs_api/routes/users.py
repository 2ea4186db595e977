"""
User Routes

Account signup, login and partial updates for the mobile client.

Endpoints:
    POST /api/signup             - Create account
    POST /api/login              - Verify credentials
    PUT  /api/user/{username}    - Update favorites, feedback, photos
"""

import logging
from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from jobboard.common.repositories import AccountRepositoryInterface, DuplicateAccountError

from ..auth import hash_password, verify_password
from ..dependencies import get_accounts_repo
from ..models import Credentials, UserOut, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])

CREDENTIALS_REQUIRED = "Please enter username and password"


def _public(account: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in account.items() if k != "password_hash"}


def _require_credentials(body: Credentials) -> str:
    username = body.username.strip()
    if not username or not body.password:
        raise HTTPException(status_code=400, detail=CREDENTIALS_REQUIRED)
    return username


@router.post("/signup", response_model=UserOut, status_code=201)
def signup(body: Credentials, repo: AccountRepositoryInterface = Depends(get_accounts_repo)) -> dict:
    username = _require_credentials(body)
    try:
        account = repo.insert({
            "username": username,
            "password_hash": hash_password(body.password),
            "favorites": [],
            "feedback": [],
            "profilePhoto": None,
            "coverPhoto": None,
            "createdAt": datetime.utcnow(),
        })
    except DuplicateAccountError:
        raise HTTPException(status_code=409, detail="Username already exists")
    logger.info(f"Signed up {username}")
    return _public(account)


@router.post("/login", response_model=UserOut)
def login(body: Credentials, repo: AccountRepositoryInterface = Depends(get_accounts_repo)) -> dict:
    username = _require_credentials(body)
    account = repo.find_by_username(username)
    if account is None or not verify_password(body.password, account.get("password_hash", "")):
        logger.warning(f"Failed login for {username}")
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return _public(account)


@router.put("/user/{username}", response_model=UserOut)
def update_user(
    username: str,
    body: UserUpdate,
    repo: AccountRepositoryInterface = Depends(get_accounts_repo),
) -> dict:
    fields = body.model_dump(exclude_unset=True)
    account = repo.update(username, fields)
    if account is None:
        raise HTTPException(status_code=404, detail="User not found")
    logger.info(f"Updated user {username}: {sorted(fields)}")
    return _public(account)
