"""Password hashing backed by passlib's bcrypt `CryptContext`."""

from typing import Optional

from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from structlog import get_logger

from credo.core.config.settings import settings
from credo.core.exceptions import HashingFailure
from credo.domain.interfaces.services import IPasswordHasher

logger = get_logger(__name__)


class BcryptPasswordHasher(IPasswordHasher):
    """Adaptive bcrypt hashing with a configurable work factor.

    Each hash carries its own random salt and cost, so raising
    `BCRYPT_WORK_FACTOR` does not invalidate existing hashes.
    """

    def __init__(self, rounds: Optional[int] = None):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds or settings.BCRYPT_WORK_FACTOR,
        )

    def hash(self, password: str) -> str:
        try:
            return self._context.hash(password)
        except (ValueError, TypeError) as e:
            logger.error("Password hashing failed", error_type=type(e).__name__)
            raise HashingFailure() from e

    def verify(self, password_hash: str, password: str) -> bool:
        """Return True iff `password` matches `password_hash`.

        A password bcrypt refuses (e.g. one containing a NUL byte) cannot match
        anything; it still costs one full verification before returning False.

        Raises:
            HashingFailure: If the stored hash is malformed or of an unknown
                scheme. A wrong password is never an exception.
        """
        try:
            return self._context.verify(password, password_hash)
        except PasswordValueError:
            self._context.dummy_verify()
            return False
        except (ValueError, TypeError) as e:
            logger.error("Stored password hash could not be verified", error_type=type(e).__name__)
            raise HashingFailure() from e

    def dummy_verify(self) -> None:
        self._context.dummy_verify()
