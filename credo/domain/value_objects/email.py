"""A Value Object representing an email address in the domain.

Emails are the login identifier, so every email that enters the domain is
normalized (trimmed, lowercased) before it is compared or stored. Equality is
based on the normalized value.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from structlog import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Email:
    """An immutable, self-validating email address.

    Raises `ValueError` whose message is an i18n key (`email_required` or
    `invalid_email_format`).

    Attributes:
        value: The normalized email address.
    """

    value: str

    MAX_LENGTH: ClassVar[int] = 254
    MIN_LENGTH: ClassVar[int] = 5
    EMAIL_PATTERN: ClassVar[re.Pattern] = re.compile(
        r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
    )

    def __post_init__(self):
        """Performs validation and normalization after initialization."""
        if not isinstance(self.value, str):
            raise TypeError("Email value must be a string.")

        normalized_value = self.value.strip().lower()
        object.__setattr__(self, "value", normalized_value)

        if not normalized_value:
            raise ValueError("email_required")
        if not (self.MIN_LENGTH <= len(normalized_value) <= self.MAX_LENGTH):
            raise ValueError("invalid_email_format")
        if not self.EMAIL_PATTERN.match(normalized_value):
            raise ValueError("invalid_email_format")

    def mask_for_logging(self) -> str:
        """Returns a masked representation, e.g. ``jo***@example.com``."""
        return mask_email(self.value)

    def __str__(self) -> str:
        return self.value


def mask_email(value: str) -> str:
    """Masks the local part of an arbitrary email-ish string for log output."""
    local, sep, domain = (value or "").partition("@")
    if not sep:
        return "***"
    return f"{local[:2]}***@{domain}"
