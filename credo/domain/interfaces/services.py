"""Service interfaces for the authentication domain.

Infrastructure adapters (hashing, token signing, delivery) and the domain
services themselves are exposed to the API layer through these ABCs, which
keeps routes testable with `app.dependency_overrides`.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Optional

from credo.domain.entities.credential import Credential
from credo.domain.value_objects.token_claims import TokenClaims


# ---------------------------------------------------------------------------
# Infrastructure ports
# ---------------------------------------------------------------------------


class IPasswordHasher(ABC):
    """Adaptive one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Returns a salted hash. Raises `HashingFailure` if the primitive errors."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, password_hash: str, password: str) -> bool:
        """Constant-time comparison. A mismatch is `False`, never an exception."""
        raise NotImplementedError

    @abstractmethod
    def dummy_verify(self) -> None:
        """Spends the time of one verification without a stored hash."""
        raise NotImplementedError


class ITokenService(ABC):
    """Issues and verifies stateless session tokens."""

    @abstractmethod
    def issue(
        self,
        subject: str,
        ttl: Optional[timedelta] = None,
        current_time: Optional[datetime] = None,
    ) -> str:
        """Mints a signed token for `subject` valid for `ttl`."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str, current_time: Optional[datetime] = None) -> TokenClaims:
        """Checks signature, then expiry.

        Raises:
            InvalidSignatureError: Tampered, malformed or foreign token.
            TokenExpiredError: Valid signature but `exp` has passed.
        """
        raise NotImplementedError


class INotificationService(ABC):
    """Delivery channel for one-time codes and reset tokens."""

    @abstractmethod
    async def send_otp(self, subject_id: str, code: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def send_password_reset(self, email: str, token: str) -> None:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Domain services
# ---------------------------------------------------------------------------


class IUserRegistrationService(ABC):
    @abstractmethod
    async def register_user(
        self, email: str, password: str, confirm_password: str, language: str = "en"
    ) -> Credential:
        """Creates a credential.

        Raises:
            ValidationError: Listing every failing field.
            DuplicateUserError: The email is already registered.
        """
        raise NotImplementedError


class IUserAuthenticationService(ABC):
    @abstractmethod
    async def authenticate(self, email: str, password: str, language: str = "en") -> str:
        """Returns a session token. Raises `InvalidCredentialsError` on any mismatch."""
        raise NotImplementedError


class IOtpChallengeService(ABC):
    @abstractmethod
    async def issue_challenge(self, subject_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def verify_challenge(
        self, subject_id: str, code: str, current_time: Optional[datetime] = None
    ) -> bool:
        raise NotImplementedError


class IPasswordResetRequestService(ABC):
    @abstractmethod
    async def request_password_reset(self, email: str, language: str = "en") -> None:
        """Starts a reset. Unknown emails return silently."""
        raise NotImplementedError


class IPasswordResetService(ABC):
    @abstractmethod
    async def reset_password(
        self,
        token: str,
        new_password: str,
        confirm_password: str,
        language: str = "en",
        current_time: Optional[datetime] = None,
    ) -> None:
        """Completes a reset. Raises `PasswordResetError` for unusable tokens."""
        raise NotImplementedError


class IAccountService(ABC):
    @abstractmethod
    async def get_account(self, subject_id: str, language: str = "en") -> Credential:
        raise NotImplementedError

    @abstractmethod
    async def delete_account(self, subject_id: str, language: str = "en") -> None:
        raise NotImplementedError
