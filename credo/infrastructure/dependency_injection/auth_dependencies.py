"""Dependency injection for the authentication services.

Each factory builds one concrete implementation and returns it typed as its
domain interface. Routes depend on the service factories; tests replace any
of them through `app.dependency_overrides`.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from credo.domain.interfaces.repositories import ICredentialRepository, IOtpChallengeRepository
from credo.domain.interfaces.services import (
    IAccountService,
    INotificationService,
    IOtpChallengeService,
    IPasswordHasher,
    IPasswordResetRequestService,
    IPasswordResetService,
    ITokenService,
    IUserAuthenticationService,
    IUserRegistrationService,
)
from credo.domain.services.account.account_service import AccountService
from credo.domain.services.authentication.user_authentication_service import (
    UserAuthenticationService,
)
from credo.domain.services.authentication.user_registration_service import (
    UserRegistrationService,
)
from credo.domain.services.otp.otp_challenge_service import OtpChallengeService
from credo.domain.services.password_reset.password_reset_request_service import (
    PasswordResetRequestService,
)
from credo.domain.services.password_reset.password_reset_service import PasswordResetService
from credo.infrastructure.database.async_db import get_async_db
from credo.infrastructure.repositories.credential_repository import CredentialRepository
from credo.infrastructure.repositories.otp_challenge_repository import OtpChallengeRepository
from credo.infrastructure.services.notification_service import LoggingNotificationService
from credo.infrastructure.services.password_hasher import BcryptPasswordHasher
from credo.infrastructure.services.token_service import JWTTokenService

# ---------------------------------------------------------------------------
# Type aliases for dependency injection
# ---------------------------------------------------------------------------

AsyncDB = Annotated[AsyncSession, Depends(get_async_db)]

# ---------------------------------------------------------------------------
# Infrastructure Layer Dependencies
# ---------------------------------------------------------------------------


def get_credential_repository(db: AsyncDB) -> ICredentialRepository:
    return CredentialRepository(db)


def get_otp_challenge_repository(db: AsyncDB) -> IOtpChallengeRepository:
    return OtpChallengeRepository(db)


@lru_cache
def get_password_hasher() -> IPasswordHasher:
    """Process-wide hasher; the CryptContext is immutable once built."""
    return BcryptPasswordHasher()


@lru_cache
def get_token_service() -> ITokenService:
    """Process-wide token service bound to the startup secret."""
    return JWTTokenService()


def get_notification_service() -> INotificationService:
    return LoggingNotificationService()


# ---------------------------------------------------------------------------
# Domain Service Dependencies
# ---------------------------------------------------------------------------


def get_user_registration_service(
    credential_repository: ICredentialRepository = Depends(get_credential_repository),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
) -> IUserRegistrationService:
    return UserRegistrationService(credential_repository, password_hasher)


def get_user_authentication_service(
    credential_repository: ICredentialRepository = Depends(get_credential_repository),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_service: ITokenService = Depends(get_token_service),
) -> IUserAuthenticationService:
    return UserAuthenticationService(credential_repository, password_hasher, token_service)


def get_otp_challenge_service(
    challenge_repository: IOtpChallengeRepository = Depends(get_otp_challenge_repository),
    notification_service: INotificationService = Depends(get_notification_service),
) -> IOtpChallengeService:
    return OtpChallengeService(challenge_repository, notification_service)


def get_password_reset_request_service(
    credential_repository: ICredentialRepository = Depends(get_credential_repository),
    notification_service: INotificationService = Depends(get_notification_service),
) -> IPasswordResetRequestService:
    return PasswordResetRequestService(credential_repository, notification_service)


def get_password_reset_service(
    credential_repository: ICredentialRepository = Depends(get_credential_repository),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
) -> IPasswordResetService:
    return PasswordResetService(credential_repository, password_hasher)


def get_account_service(
    credential_repository: ICredentialRepository = Depends(get_credential_repository),
) -> IAccountService:
    return AccountService(credential_repository)


# ---------------------------------------------------------------------------
# Annotated shortcuts used by the routes
# ---------------------------------------------------------------------------

RegistrationServiceDep = Annotated[IUserRegistrationService, Depends(get_user_registration_service)]
AuthenticationServiceDep = Annotated[
    IUserAuthenticationService, Depends(get_user_authentication_service)
]
OtpChallengeServiceDep = Annotated[IOtpChallengeService, Depends(get_otp_challenge_service)]
PasswordResetRequestServiceDep = Annotated[
    IPasswordResetRequestService, Depends(get_password_reset_request_service)
]
PasswordResetServiceDep = Annotated[IPasswordResetService, Depends(get_password_reset_service)]
AccountServiceDep = Annotated[IAccountService, Depends(get_account_service)]
TokenServiceDep = Annotated[ITokenService, Depends(get_token_service)]
