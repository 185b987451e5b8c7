from datetime import datetime  # For expiry timestamps
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Column, Field, SQLModel, String


class OtpChallenge(SQLModel, table=True):
    """The single live one-time passcode for a subject (e.g. a phone number).

    Issuing a new code overwrites the row. A successful verification clears
    `code`, so the row stays but can never verify again until re-issued.

    Attributes:
        subject_id: Identifier the code was sent to; one row per subject.
        code: The outstanding numeric code, or None once consumed.
        expires_at: Instant after which `code` no longer verifies.
    """

    __tablename__ = "otp_challenges"

    subject_id: str = Field(
        primary_key=True,
        max_length=64,
        description="Identifier the code was issued for.",
    )
    code: Optional[str] = Field(
        default=None,
        sa_column=Column(String(10), nullable=True),
        description="Outstanding code; cleared on successful verification.",
    )
    expires_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Expiry of the outstanding code.",
    )
