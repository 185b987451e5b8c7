"""OTP Challenge Domain Service.

Issues short-lived numeric codes to a subject (typically a phone number)
and verifies them exactly once.
"""

from datetime import datetime, timezone
from typing import Optional

import structlog

from credo.core.config.settings import settings
from credo.core.exceptions import NotificationDeliveryError
from credo.domain.entities.otp_challenge import OtpChallenge
from credo.domain.interfaces.repositories import IOtpChallengeRepository
from credo.domain.interfaces.services import INotificationService, IOtpChallengeService
from credo.domain.value_objects.otp_code import OtpCode, mask_subject

logger = structlog.get_logger(__name__)


class OtpChallengeService(IOtpChallengeService):
    """Domain service for one-time passcode challenges.

    At most one code is live per subject: issuing again overwrites the
    previous code. Verification consumes the code, so a replay fails.
    """

    def __init__(
        self,
        challenge_repository: IOtpChallengeRepository,
        notification_service: INotificationService,
        code_length: Optional[int] = None,
        expiry_minutes: Optional[int] = None,
    ):
        self._challenge_repository = challenge_repository
        self._notification_service = notification_service
        self._code_length = code_length or settings.OTP_CODE_LENGTH
        self._expiry_minutes = expiry_minutes or settings.OTP_EXPIRE_MINUTES

    async def issue_challenge(self, subject_id: str) -> bool:
        """Generate, store and dispatch a fresh code.

        Returns:
            bool: True once the code is stored.

        Raises:
            DatabaseError: If the store write fails.
        """
        code = OtpCode.generate(self._code_length, self._expiry_minutes)
        await self._challenge_repository.upsert(
            OtpChallenge(subject_id=subject_id, code=code.value, expires_at=code.expires_at)
        )
        logger.info(
            "OTP challenge issued",
            subject_masked=mask_subject(subject_id),
            expires_at=code.expires_at.isoformat(),
        )

        try:
            await self._notification_service.send_otp(subject_id, code.value)
        except NotificationDeliveryError as e:
            logger.error("OTP delivery failed", subject_masked=mask_subject(subject_id), error=e.code)
        return True

    async def verify_challenge(
        self, subject_id: str, code: str, current_time: Optional[datetime] = None
    ) -> bool:
        """Check and consume a code.

        Returns False for an unknown subject, a wrong code, an expired code or
        an already-consumed code, without saying which.
        """
        if not subject_id or not code:
            return False
        now = current_time or datetime.now(timezone.utc)
        verified = await self._challenge_repository.consume(subject_id, code, now)
        logger.info("OTP challenge verification", subject_masked=mask_subject(subject_id), verified=verified)
        return verified
