"""
Password reset.

There is no reset backend; a valid request is acknowledged with a notice
and logged.
"""

import logging

from jobboard.common.error_handling import ValidationError

logger = logging.getLogger(__name__)

EMAIL_REQUIRED = "Please enter your email"
NOTICE_RESET_SENT = "Password reset link sent (simulated)"


class ForgotPassword:

    def request_reset(self, email: str) -> str:
        """
        Acknowledge a reset request.

        Raises:
            ValidationError: If the email is blank
        """
        email = (email or "").strip()
        if not email:
            raise ValidationError(EMAIL_REQUIRED)
        logger.info(f"Password reset requested for {email}")
        return NOTICE_RESET_SENT
