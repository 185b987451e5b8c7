from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from credo.domain.entities.credential import Credential


class CredentialOut(BaseModel):
    """Public view of a credential. The password hash is never serialized."""

    subject_id: str
    email: str
    created_at: datetime

    @classmethod
    def from_entity(cls, credential: Credential) -> "CredentialOut":
        return cls(
            subject_id=credential.subject_id,
            email=credential.email,
            created_at=credential.created_at,
        )
