"""Password value objects.

`Password` holds a plaintext candidate and enforces the length policy; it is
never persisted or logged. `HashedPassword` holds the bcrypt digest that is
stored on the credential.
"""

from dataclasses import dataclass
from typing import ClassVar

from credo.core.config.settings import settings


@dataclass(frozen=True)
class Password:
    """Plaintext password that satisfies the length policy.

    Raises:
        ValueError: With message `password_too_short`, `password_too_long` or
            `password_invalid_characters` (NUL bytes, which bcrypt cannot hash).
    """

    value: str

    MIN_LENGTH: ClassVar[int] = settings.PASSWORD_MIN_LENGTH
    MAX_LENGTH: ClassVar[int] = settings.PASSWORD_MAX_LENGTH

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value) < self.MIN_LENGTH:
            raise ValueError("password_too_short")
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError("password_too_long")
        if "\x00" in self.value:
            raise ValueError("password_invalid_characters")

    def matches(self, confirmation: str) -> bool:
        return self.value == confirmation

    def __repr__(self) -> str:
        return "Password(value='***')"

    __str__ = __repr__


@dataclass(frozen=True)
class HashedPassword:
    """A non-empty password digest produced by the password hasher."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Password hash cannot be empty")

    def __str__(self) -> str:
        return self.value
