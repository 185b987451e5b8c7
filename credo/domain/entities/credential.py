from datetime import datetime, timezone  # For timestamp fields
from typing import Optional  # For optional fields
from uuid import uuid4  # For opaque subject identifiers

from sqlalchemy import DateTime  # Explicit timezone-aware DateTime type
from sqlmodel import Column, Field, SQLModel, String  # For ORM and table definition


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Credential(SQLModel, table=True):
    """Represents the login credential of one account and acts as an Aggregate Root.

    A credential binds a normalized email to a bcrypt password hash under an
    opaque, immutable `subject_id`. The plaintext password is never stored.
    The unique index on `email` is what makes concurrent registrations of the
    same address collapse to a single row.

    Attributes:
        subject_id: Opaque UUID4 identifier; the `sub` claim of session tokens.
        email: Unique, lowercased email address used as the login identifier.
        password_hash: The bcrypt hash of the password. Never empty.
        created_at: The timestamp of when the credential was created.
        password_reset_token: SHA-256 digest of the live reset token, if any.
        password_reset_token_expires_at: Expiry of the live reset token.
    """

    __tablename__ = "credentials"  # Explicit table name for clarity

    subject_id: str = Field(
        default_factory=lambda: str(uuid4()),
        primary_key=True,
        max_length=36,
        description="Opaque identifier for the account.",
    )
    email: str = Field(
        sa_column=Column(String(254), unique=True, index=True, nullable=False),
        description="Unique, lowercased email address used for login.",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Bcrypt-hashed password.",
    )
    created_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="The timestamp of when the credential was created.",
    )
    password_reset_token: Optional[str] = Field(
        default=None,
        sa_column=Column(String(64), unique=True, index=True, nullable=True),
        description="SHA-256 digest (64 hex characters) of the live reset token.",
    )
    password_reset_token_expires_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True),
        description="The expiration timestamp for the password reset token.",
    )
