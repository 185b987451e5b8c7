"""User Registration Domain Service.

Creates credentials: validates input, hashes the password and inserts the
record. Email uniqueness is ultimately decided by the repository insert, so
two racing registrations of one address produce exactly one credential.
"""

import structlog

from credo.core.exceptions import DuplicateUserError
from credo.domain.entities.credential import Credential
from credo.domain.interfaces.repositories import ICredentialRepository
from credo.domain.interfaces.services import IPasswordHasher, IUserRegistrationService
from credo.domain.services.validation import validate_registration
from credo.utils.i18n import get_translated_message

logger = structlog.get_logger(__name__)


class UserRegistrationService(IUserRegistrationService):
    """Domain service for registration.

    Responsibilities:
    - Validate email syntax, password length and confirmation together
    - Reject already-registered emails
    - Hash the password and persist the credential
    """

    def __init__(
        self,
        credential_repository: ICredentialRepository,
        password_hasher: IPasswordHasher,
    ):
        self._credential_repository = credential_repository
        self._password_hasher = password_hasher

    async def register_user(
        self,
        email: str,
        password: str,
        confirm_password: str,
        language: str = "en",
    ) -> Credential:
        """Register a new credential.

        Args:
            email: Raw email; normalized before use.
            password: Plaintext password.
            confirm_password: Must equal `password`.
            language: Language code for error messages.

        Returns:
            Credential: The stored credential.

        Raises:
            ValidationError: Listing every failing field.
            DuplicateUserError: If the email is already registered.
            HashingFailure: If the hashing primitive fails.
            DatabaseError: If the store fails.
        """
        email_vo, password_vo = validate_registration(email, password, confirm_password, language)
        logger.info("User registration started", email=email_vo.mask_for_logging())

        if await self._credential_repository.get_by_email(email_vo.value) is not None:
            logger.warning(
                "Registration failed - email already exists",
                email=email_vo.mask_for_logging(),
            )
            raise DuplicateUserError(get_translated_message("email_already_registered", language))

        credential = Credential(
            email=email_vo.value,
            password_hash=self._password_hasher.hash(password_vo.value),
        )

        try:
            saved = await self._credential_repository.add(credential)
        except DuplicateUserError:
            logger.warning(
                "Registration failed - concurrent registration won",
                email=email_vo.mask_for_logging(),
            )
            raise DuplicateUserError(get_translated_message("email_already_registered", language))

        logger.info(
            "User registration successful",
            subject_id=saved.subject_id,
            email=email_vo.mask_for_logging(),
        )
        return saved
