"""Repository interfaces for abstracting data persistence in the domain layer.

The domain services depend only on these ports. The SQL adapters in
`credo.infrastructure.repositories` implement them; tests substitute
in-memory versions.

Every conditional mutation (`add`, `consume_reset_token`, `consume`) must be
atomic at the store: two concurrent callers may never both succeed.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from credo.domain.entities.credential import Credential
from credo.domain.entities.otp_challenge import OtpChallenge


class ICredentialRepository(ABC):
    """Persistence contract for the `Credential` aggregate."""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Credential]:
        """Retrieves a credential by its normalized email.

        Args:
            email: The lowercased email address.

        Returns:
            The matching `Credential`, or `None`.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_by_subject_id(self, subject_id: str) -> Optional[Credential]:
        """Retrieves a credential by its subject identifier."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, credential: Credential) -> Credential:
        """Inserts a new credential.

        Args:
            credential: A credential whose email is not yet registered.

        Returns:
            The persisted credential.

        Raises:
            DuplicateUserError: If the email is already taken, including when
                a concurrent insert wins the race.
            DatabaseError: On any other store failure.
        """
        raise NotImplementedError

    @abstractmethod
    async def set_reset_token(
        self, subject_id: str, token_digest: str, expires_at: datetime
    ) -> None:
        """Stores the digest of a fresh reset token, replacing any previous one."""
        raise NotImplementedError

    @abstractmethod
    async def consume_reset_token(
        self, token_digest: str, new_password_hash: str, current_time: datetime
    ) -> bool:
        """Atomically completes a password reset.

        In one conditional update: if a credential holds `token_digest` and its
        expiry is after `current_time`, its password hash is replaced and the
        token and expiry are cleared.

        Returns:
            True if exactly one credential was updated.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, subject_id: str) -> bool:
        """Hard-deletes a credential. Returns False if nothing was deleted."""
        raise NotImplementedError


class IOtpChallengeRepository(ABC):
    """Persistence contract for OTP challenges, keyed by subject."""

    @abstractmethod
    async def upsert(self, challenge: OtpChallenge) -> None:
        """Stores `challenge`, overwriting any outstanding code for its subject."""
        raise NotImplementedError

    @abstractmethod
    async def consume(self, subject_id: str, code: str, current_time: datetime) -> bool:
        """Atomically verifies and clears a code.

        The code is cleared only if the subject exists, the stored code equals
        `code` and the expiry is after `current_time`.

        Returns:
            True if exactly one challenge was consumed.
        """
        raise NotImplementedError
