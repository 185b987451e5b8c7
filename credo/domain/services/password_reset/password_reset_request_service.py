"""Password Reset Request Domain Service.

Starts the reset flow. The caller always gets the same outcome whether or
not the email belongs to an account; only the delivery channel learns the
difference.
"""

import structlog

from credo.core.config.settings import settings
from credo.core.exceptions import NotificationDeliveryError
from credo.domain.interfaces.repositories import ICredentialRepository
from credo.domain.interfaces.services import (
    INotificationService,
    IPasswordResetRequestService,
)
from credo.domain.services.validation import check_email, raise_if_invalid
from credo.domain.value_objects.reset_token import ResetToken

logger = structlog.get_logger(__name__)


class PasswordResetRequestService(IPasswordResetRequestService):
    def __init__(
        self,
        credential_repository: ICredentialRepository,
        notification_service: INotificationService,
        expiry_minutes: int | None = None,
    ):
        self._credential_repository = credential_repository
        self._notification_service = notification_service
        self._expiry_minutes = expiry_minutes or settings.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES

    async def request_password_reset(self, email: str, language: str = "en") -> None:
        """Issue a reset token for `email` if it is registered.

        Raises:
            ValidationError: If `email` is not a syntactically valid address.
            DatabaseError: If the store fails.
        """
        errors: dict = {}
        email_vo = check_email(email, errors)
        raise_if_invalid(errors, language)

        credential = await self._credential_repository.get_by_email(email_vo.value)
        if credential is None:
            logger.info("Password reset requested for unknown email", email=email_vo.mask_for_logging())
            return

        token = ResetToken.generate(self._expiry_minutes)
        await self._credential_repository.set_reset_token(
            credential.subject_id, token.digest, token.expires_at
        )
        logger.info(
            "Password reset token issued",
            subject_id=credential.subject_id,
            token=token.mask_for_logging(),
            expires_at=token.expires_at.isoformat(),
        )

        try:
            await self._notification_service.send_password_reset(credential.email, token.value)
        except NotificationDeliveryError as e:
            logger.error("Password reset delivery failed", subject_id=credential.subject_id, error=e.code)
