"""In-memory stand-ins for the PostgreSQL repositories and the delivery channel.

Each conditional mutation runs without an `await` between its check and its
write, which gives the same all-or-nothing behaviour as the SQL statements
under asyncio.
"""

import asyncio
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from credo.core.exceptions import DuplicateUserError
from credo.domain.entities.credential import Credential
from credo.domain.entities.otp_challenge import OtpChallenge
from credo.domain.interfaces.repositories import ICredentialRepository, IOtpChallengeRepository
from credo.domain.interfaces.services import INotificationService


class InMemoryCredentialRepository(ICredentialRepository):
    def __init__(self):
        self.credentials: Dict[str, Credential] = {}

    async def get_by_email(self, email: str) -> Optional[Credential]:
        return next((c for c in self.credentials.values() if c.email == email), None)

    async def get_by_subject_id(self, subject_id: str) -> Optional[Credential]:
        return self.credentials.get(subject_id)

    async def add(self, credential: Credential) -> Credential:
        # Let racing registrations interleave before the unique check
        await asyncio.sleep(0)
        if any(c.email == credential.email for c in self.credentials.values()):
            raise DuplicateUserError("email_already_registered")
        self.credentials[credential.subject_id] = credential
        return credential

    async def set_reset_token(self, subject_id: str, token_digest: str, expires_at: datetime) -> None:
        credential = self.credentials.get(subject_id)
        if credential is not None:
            credential.password_reset_token = token_digest
            credential.password_reset_token_expires_at = expires_at

    async def consume_reset_token(
        self, token_digest: str, new_password_hash: str, current_time: datetime
    ) -> bool:
        for credential in self.credentials.values():
            if (
                credential.password_reset_token == token_digest
                and credential.password_reset_token_expires_at is not None
                and credential.password_reset_token_expires_at > current_time
            ):
                credential.password_hash = new_password_hash
                credential.password_reset_token = None
                credential.password_reset_token_expires_at = None
                return True
        return False

    async def delete(self, subject_id: str) -> bool:
        return self.credentials.pop(subject_id, None) is not None


class InMemoryOtpChallengeRepository(IOtpChallengeRepository):
    def __init__(self):
        self.challenges: Dict[str, OtpChallenge] = {}

    async def upsert(self, challenge: OtpChallenge) -> None:
        self.challenges[challenge.subject_id] = OtpChallenge(
            subject_id=challenge.subject_id,
            code=challenge.code,
            expires_at=challenge.expires_at,
        )

    async def consume(self, subject_id: str, code: str, current_time: datetime) -> bool:
        challenge = self.challenges.get(subject_id)
        if (
            challenge is None
            or challenge.code is None
            or challenge.code != code
            or challenge.expires_at <= current_time
        ):
            return False
        challenge.code = None
        return True


class RecordingNotificationService(INotificationService):
    """Captures what would have been delivered."""

    def __init__(self):
        self.otp_codes: List[Tuple[str, str]] = []
        self.reset_tokens: List[Tuple[str, str]] = []

    async def send_otp(self, subject_id: str, code: str) -> None:
        self.otp_codes.append((subject_id, code))

    async def send_password_reset(self, email: str, token: str) -> None:
        self.reset_tokens.append((email, token))

    def last_code_for(self, subject_id: str) -> Optional[str]:
        return next((c for s, c in reversed(self.otp_codes) if s == subject_id), None)

    def last_token_for(self, email: str) -> Optional[str]:
        return next((t for e, t in reversed(self.reset_tokens) if e == email), None)
