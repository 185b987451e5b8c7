"""Miscellaneous utility schemas used by the auth API."""

from __future__ import annotations

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Simple envelope used for *200* acknowledgments.

    Carries only the translated message, so two acknowledgements in the
    same language are byte-identical.
    """

    message: str
