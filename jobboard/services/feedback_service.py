"""
Feedback Service

Validates user feedback and, for logged-in accounts, appends it to the
account's feedback history on the server.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from jobboard.common.error_handling import ValidationError
from jobboard.common.types import FeedbackEntry

from .account_client import AccountClient

logger = logging.getLogger(__name__)

FEEDBACK_REQUIRED = "Please provide feedback and a rating"
NOTICE_SUBMITTED = "Feedback Submitted"


@dataclass
class FeedbackResult:
    entry: FeedbackEntry
    history: List[FeedbackEntry] = field(default_factory=list)
    synced: bool = False
    notice: str = NOTICE_SUBMITTED


class FeedbackService:

    def __init__(self, account_client: Optional[AccountClient] = None):
        self.account_client = account_client

    async def submit(
        self,
        text: str,
        rating: Optional[int],
        username: Optional[str] = None,
        history: Optional[List[FeedbackEntry]] = None,
    ) -> FeedbackResult:
        """
        Record feedback.

        Args:
            text: Feedback text (required)
            rating: 1 to 5 stars (required)
            username: Account to sync to; local only when omitted
            history: Feedback already on the account

        Raises:
            ValidationError: Missing text or rating out of range
            AuthError: The account update was rejected
        """
        text = (text or "").strip()
        if not text or not isinstance(rating, int) or isinstance(rating, bool) or not 1 <= rating <= 5:
            raise ValidationError(FEEDBACK_REQUIRED)

        entry = FeedbackEntry(text=text, rating=rating)
        updated = list(history or []) + [entry]

        if self.account_client is None or not username:
            logger.info("Feedback recorded locally")
            return FeedbackResult(entry=entry, history=updated)

        user = await asyncio.to_thread(
            self.account_client.update_user,
            username,
            {"feedback": [item.to_dict() for item in updated]},
        )
        stored = [FeedbackEntry.from_dict(item) for item in user.get("feedback", [])]
        logger.info(f"Feedback synced for {username}")
        return FeedbackResult(entry=entry, history=stored or updated, synced=True)
