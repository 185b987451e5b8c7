"""Account Domain Service: look up or delete the caller's own credential."""

import structlog

from credo.core.exceptions import UserNotFoundError
from credo.domain.entities.credential import Credential
from credo.domain.interfaces.repositories import ICredentialRepository
from credo.domain.interfaces.services import IAccountService
from credo.utils.i18n import get_translated_message

logger = structlog.get_logger(__name__)


class AccountService(IAccountService):
    def __init__(self, credential_repository: ICredentialRepository):
        self._credential_repository = credential_repository

    async def get_account(self, subject_id: str, language: str = "en") -> Credential:
        credential = await self._credential_repository.get_by_subject_id(subject_id)
        if credential is None:
            raise UserNotFoundError(get_translated_message("user_not_found", language))
        return credential

    async def delete_account(self, subject_id: str, language: str = "en") -> None:
        """Hard-delete the credential. Outstanding tokens stay signed but
        can no longer resolve to an account.

        Raises:
            UserNotFoundError: If the credential is already gone.
        """
        if not await self._credential_repository.delete(subject_id):
            raise UserNotFoundError(get_translated_message("user_not_found", language))
        logger.info("Account deleted", subject_id=subject_id)
