"""Password Reset Domain Service.

Completes a reset: the new password is validated and hashed first, then the
token is redeemed and the hash replaced in one conditional update, so a
token can change the password at most once.
"""

from datetime import datetime, timezone
from typing import Dict, Optional

import structlog

from credo.core.exceptions import PasswordResetError
from credo.domain.interfaces.repositories import ICredentialRepository
from credo.domain.interfaces.services import IPasswordHasher, IPasswordResetService
from credo.domain.services.validation import check_new_password, raise_if_invalid
from credo.domain.value_objects.reset_token import ResetToken
from credo.utils.i18n import get_translated_message

logger = structlog.get_logger(__name__)


class PasswordResetService(IPasswordResetService):
    def __init__(
        self,
        credential_repository: ICredentialRepository,
        password_hasher: IPasswordHasher,
    ):
        self._credential_repository = credential_repository
        self._password_hasher = password_hasher

    async def reset_password(
        self,
        token: str,
        new_password: str,
        confirm_password: str,
        language: str = "en",
        current_time: Optional[datetime] = None,
    ) -> None:
        """Replace the password of the credential holding `token`.

        Raises:
            ValidationError: New password too short/long or confirmation mismatch.
            PasswordResetError: Token unknown, expired or already used.
        """
        errors: Dict[str, str] = {}
        password_vo = check_new_password(
            new_password, confirm_password, errors, field="new_password"
        )
        raise_if_invalid(errors, language)

        if not token:
            raise PasswordResetError(get_translated_message("password_reset_token_invalid", language))

        new_hash = self._password_hasher.hash(password_vo.value)
        now = current_time or datetime.now(timezone.utc)
        reset = await self._credential_repository.consume_reset_token(
            ResetToken.digest_of(token), new_hash, now
        )
        if not reset:
            logger.warning("Password reset rejected", token=f"{token[:8]}...")
            raise PasswordResetError(get_translated_message("password_reset_token_invalid", language))

        logger.info("Password reset completed", token=f"{token[:8]}...")
