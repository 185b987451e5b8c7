"""Delivery of one-time codes and reset tokens.

No transport is wired in yet: in test mode the payload is logged so it can
be picked up during local development; otherwise only masked values are
logged. A real SMS or email provider implements the same interface.
"""

from structlog import get_logger

from credo.core.config.settings import settings
from credo.domain.interfaces.services import INotificationService
from credo.domain.value_objects.email import mask_email
from credo.domain.value_objects.otp_code import mask_subject

logger = get_logger(__name__)


class LoggingNotificationService(INotificationService):
    def __init__(self, test_mode: bool | None = None):
        self.test_mode = settings.NOTIFICATION_TEST_MODE if test_mode is None else test_mode

    async def send_otp(self, subject_id: str, code: str) -> None:
        if self.test_mode:
            logger.info("OTP code issued (test mode)", subject_id=subject_id, code=code)
        else:
            logger.info("OTP code issued", subject_masked=mask_subject(subject_id))

    async def send_password_reset(self, email: str, token: str) -> None:
        if self.test_mode:
            logger.info("Password reset token issued (test mode)", email=email, token=token)
        else:
            logger.info("Password reset token issued", email_masked=mask_email(email))
