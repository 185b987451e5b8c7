"""Domain ports: repository and service interfaces."""

from .repositories import ICredentialRepository, IOtpChallengeRepository
from .services import (
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

__all__ = [
    "IAccountService",
    "ICredentialRepository",
    "INotificationService",
    "IOtpChallengeRepository",
    "IOtpChallengeService",
    "IPasswordHasher",
    "IPasswordResetRequestService",
    "IPasswordResetService",
    "ITokenService",
    "IUserAuthenticationService",
    "IUserRegistrationService",
]
