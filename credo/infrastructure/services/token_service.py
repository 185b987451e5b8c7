"""Stateless HS256 session tokens backed by PyJWT.

Tokens carry `sub`, `iat`, `exp`, `iss` and `aud`, nothing random, so the same
subject issued at the same instant yields the same token. `iat` and `exp` are
NumericDates with microsecond fractions; the lifetime is exactly the TTL. There
is no server-side session state: a token is valid until its `exp`, and logout
is a client-side discard.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jwt import PyJWTError, decode, encode
from structlog import get_logger

from credo.core.config.settings import settings
from credo.core.exceptions import InvalidSignatureError, TokenExpiredError
from credo.domain.interfaces.services import ITokenService
from credo.domain.value_objects.token_claims import TokenClaims

logger = get_logger(__name__)

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "iat", "exp", "iss", "aud"]


def _numeric_date(moment: datetime) -> float:
    """Seconds since the epoch, kept to the microsecond so `exp - iat == ttl`."""
    return round(moment.timestamp(), 6)


class JWTTokenService(ITokenService):
    """Issues and verifies session tokens with a single HMAC secret.

    Only HS256 is accepted on verification, which rejects `alg: none` and
    asymmetric-key confusion. Expiry is checked against an injectable clock
    after the signature, so a forged token always reports as invalid rather
    than expired.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        issuer: Optional[str] = None,
        audience: Optional[str] = None,
        default_ttl: Optional[timedelta] = None,
    ):
        self._secret_key = secret_key or settings.JWT_SECRET_KEY.get_secret_value()
        self._issuer = issuer or settings.JWT_ISSUER
        self._audience = audience or settings.JWT_AUDIENCE
        self._default_ttl = default_ttl or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    @property
    def default_ttl(self) -> timedelta:
        return self._default_ttl

    def issue(
        self,
        subject: str,
        ttl: Optional[timedelta] = None,
        current_time: Optional[datetime] = None,
    ) -> str:
        now = current_time or datetime.now(timezone.utc)
        expires_at = now + (ttl or self._default_ttl)
        payload = {
            "sub": subject,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": _numeric_date(now),
            "exp": _numeric_date(expires_at),
        }
        token = encode(payload, self._secret_key, algorithm=ALGORITHM)
        logger.debug("Session token issued", subject=subject, expires_at=expires_at.isoformat())
        return token

    def verify(self, token: str, current_time: Optional[datetime] = None) -> TokenClaims:
        try:
            payload = decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                issuer=self._issuer,
                audience=self._audience,
                options={"verify_exp": False, "verify_iat": False, "require": REQUIRED_CLAIMS},
            )
        except PyJWTError as e:
            logger.info("Session token rejected", reason=type(e).__name__)
            raise InvalidSignatureError() from e

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            raise InvalidSignatureError()
        try:
            issued_at = datetime.fromtimestamp(payload["iat"], tz=timezone.utc)
            expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        except (TypeError, ValueError, OverflowError, OSError) as e:
            raise InvalidSignatureError() from e

        claims = TokenClaims(subject=subject, issued_at=issued_at, expires_at=expires_at)
        if claims.is_expired(current_time):
            logger.info("Session token expired", subject=subject)
            raise TokenExpiredError()
        return claims
