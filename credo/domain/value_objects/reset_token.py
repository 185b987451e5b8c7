"""Reset Token Value Object for password reset flows.

The raw token is handed to the delivery channel once; only its SHA-256
digest is persisted, so a leaked database row cannot be replayed.
"""

import hashlib
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import ClassVar, Optional


@dataclass(frozen=True)
class ResetToken:
    """Password reset token value object.

    Attributes:
        value: 64 hex characters (32 random bytes).
        expires_at: Token expiration timestamp (timezone aware).
    """

    value: str
    expires_at: datetime

    TOKEN_BYTES: ClassVar[int] = 32
    DEFAULT_EXPIRY_MINUTES: ClassVar[int] = 60

    def __post_init__(self) -> None:
        """Validate token format on construction."""
        if not self.value:
            raise ValueError("Reset token cannot be empty")
        if self.expires_at.tzinfo is None:
            raise ValueError("Reset token expiry must be timezone aware")

    @classmethod
    def generate(
        cls,
        expiry_minutes: Optional[int] = None,
        current_time: Optional[datetime] = None,
    ) -> "ResetToken":
        """Generate a new cryptographically secure reset token.

        Args:
            expiry_minutes: Token expiry time in minutes (default: 60)
            current_time: Issue instant (default: now)

        Returns:
            ResetToken: New token with expiration
        """
        now = current_time or datetime.now(timezone.utc)
        expiry_mins = expiry_minutes or cls.DEFAULT_EXPIRY_MINUTES
        return cls(
            value=secrets.token_hex(cls.TOKEN_BYTES),
            expires_at=now + timedelta(minutes=expiry_mins),
        )

    @property
    def digest(self) -> str:
        return self.digest_of(self.value)

    @staticmethod
    def digest_of(token: str) -> str:
        """SHA-256 hex digest used as the stored lookup key."""
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def is_expired(self, current_time: Optional[datetime] = None) -> bool:
        """Check if token is expired.

        Args:
            current_time: Time to check against (default: now)
        """
        check_time = current_time or datetime.now(timezone.utc)
        return check_time >= self.expires_at

    def mask_for_logging(self) -> str:
        return f"{self.value[:8]}..."
