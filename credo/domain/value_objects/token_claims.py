"""Verified contents of a session token."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """Claims extracted from a session token whose signature checked out.

    Attributes:
        subject: The credential's subject_id (`sub`).
        issued_at: `iat` as an aware datetime.
        expires_at: `exp` as an aware datetime.
    """

    subject: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, current_time: Optional[datetime] = None) -> bool:
        check_time = current_time or datetime.now(timezone.utc)
        return check_time >= self.expires_at
