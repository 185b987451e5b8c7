"""User Authentication Domain Service.

Exchanges an email and password for a session token. Every failure raises
the same `InvalidCredentialsError`, and an unknown email still pays for one
bcrypt verification, so the response reveals neither whether the account
exists nor which half of the pair was wrong.
"""

import structlog

from credo.core.exceptions import InvalidCredentialsError
from credo.domain.interfaces.repositories import ICredentialRepository
from credo.domain.interfaces.services import (
    IPasswordHasher,
    ITokenService,
    IUserAuthenticationService,
)
from credo.domain.value_objects.email import Email, mask_email
from credo.utils.i18n import get_translated_message

logger = structlog.get_logger(__name__)


class UserAuthenticationService(IUserAuthenticationService):
    def __init__(
        self,
        credential_repository: ICredentialRepository,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
    ):
        self._credential_repository = credential_repository
        self._password_hasher = password_hasher
        self._token_service = token_service

    async def authenticate(self, email: str, password: str, language: str = "en") -> str:
        """Authenticate and mint a session token.

        Returns:
            str: A signed session token for the credential's subject.

        Raises:
            InvalidCredentialsError: Unknown email, malformed email or wrong password.
        """
        try:
            normalized = Email(email or "").value
        except ValueError:
            self._password_hasher.dummy_verify()
            logger.warning("Authentication failed", email=mask_email(email), reason="malformed_email")
            raise self._invalid(language)

        credential = await self._credential_repository.get_by_email(normalized)
        if credential is None:
            self._password_hasher.dummy_verify()
            logger.warning("Authentication failed", email=mask_email(normalized), reason="unknown_email")
            raise self._invalid(language)

        if not self._password_hasher.verify(credential.password_hash, password or ""):
            logger.warning(
                "Authentication failed",
                subject_id=credential.subject_id,
                reason="password_mismatch",
            )
            raise self._invalid(language)

        token = self._token_service.issue(credential.subject_id)
        logger.info("Authentication successful", subject_id=credential.subject_id)
        return token

    @staticmethod
    def _invalid(language: str) -> InvalidCredentialsError:
        return InvalidCredentialsError(get_translated_message("invalid_credentials", language))
