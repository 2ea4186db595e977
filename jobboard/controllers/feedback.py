"""Feedback screen."""

from typing import List, Optional

from jobboard.common.error_handling import AuthError, ValidationError
from jobboard.common.types import FeedbackEntry
from jobboard.services.feedback_service import FeedbackService

from .base import ScreenController
from .screen_config import ScreenConfig


class FeedbackController(ScreenController):

    screen_name = "feedback"

    def __init__(
        self,
        feedback: FeedbackService,
        username: Optional[str] = None,
        config: Optional[ScreenConfig] = None,
    ):
        super().__init__(config)
        self.feedback = feedback
        self.username = username
        self.text = ""
        self.rating: Optional[int] = None
        self.history: List[FeedbackEntry] = []

    def set_text(self, text: str) -> None:
        self.text = text or ""

    def set_rating(self, rating: int) -> None:
        self.rating = rating

    async def submit(self) -> None:
        try:
            result = await self.feedback.submit(
                self.text, self.rating, username=self.username, history=self.history
            )
        except ValidationError as e:
            self.show_alert(str(e))
            return
        except AuthError as e:
            self.log.error(f"Error sending feedback: {e}")
            self._apply_if_mounted(lambda: setattr(self, "error_message", str(e)))
            return

        def apply():
            self.history = result.history
            self.text = ""
            self.rating = None
            self.error_message = None
            self.show_notice(result.notice)

        self._apply_if_mounted(apply)
