"""
Favorites Service

Server-side favorites for logged-in accounts. The toggled list is sent
to the account service first and only adopted once the server accepts
it; on failure the caller keeps its previous list.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import List

from jobboard.common.error_handling import AuthError

from .account_client import AccountClient

logger = logging.getLogger(__name__)


@dataclass
class FavoritesResult:
    favorites: List[str]
    was_added: bool
    persisted: bool
    error: str = ""


class FavoritesService:

    def __init__(self, account_client: AccountClient):
        self.account_client = account_client

    async def toggle(self, username: str, job_id: str, favorites: List[str]) -> FavoritesResult:
        """Add or remove a job id from the account's favorites."""
        was_added = job_id not in favorites
        if was_added:
            updated = list(favorites) + [job_id]
        else:
            updated = [f for f in favorites if f != job_id]

        try:
            user = await asyncio.to_thread(
                self.account_client.update_user, username, {"favorites": updated}
            )
        except AuthError as e:
            logger.error(f"Error updating favorites for {username}: {e}")
            return FavoritesResult(
                favorites=list(favorites), was_added=was_added, persisted=False, error=str(e)
            )

        return FavoritesResult(
            favorites=list(user.get("favorites", updated)),
            was_added=was_added,
            persisted=True,
        )
