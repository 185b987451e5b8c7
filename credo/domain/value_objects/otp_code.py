"""One-time passcode value object."""

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional


@dataclass(frozen=True)
class OtpCode:
    """A fixed-width numeric code with its expiry.

    Codes are drawn uniformly from every ``length``-digit string, leading
    zeros included.

    Attributes:
        value: The digits, e.g. ``"048213"``.
        expires_at: Timezone-aware instant after which the code is dead.
    """

    value: str
    expires_at: datetime

    def __post_init__(self) -> None:
        if not self.value or not self.value.isdigit():
            raise ValueError("OTP code must be a non-empty string of digits")
        if self.expires_at.tzinfo is None:
            raise ValueError("OTP expiry must be timezone aware")

    @classmethod
    def generate(
        cls,
        length: int,
        expiry_minutes: int,
        current_time: Optional[datetime] = None,
    ) -> "OtpCode":
        """Generate a fresh code using the `secrets` CSPRNG.

        Args:
            length: Number of digits.
            expiry_minutes: Validity window.
            current_time: Issue instant (default: now).
        """
        now = current_time or datetime.now(timezone.utc)
        value = str(secrets.randbelow(10**length)).zfill(length)
        return cls(value=value, expires_at=now + timedelta(minutes=expiry_minutes))

    def is_expired(self, current_time: Optional[datetime] = None) -> bool:
        check_time = current_time or datetime.now(timezone.utc)
        return check_time >= self.expires_at

    def __repr__(self) -> str:
        return f"OtpCode(value='***', expires_at={self.expires_at.isoformat()})"


def mask_subject(value: str) -> str:
    """Masks an OTP subject (e.g. a phone number) for log output: ``***00``."""
    if not value or len(value) <= 4:
        return "***"
    return f"***{value[-2:]}"
