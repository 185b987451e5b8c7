"""Session dependencies guarding protected routes.

`get_current_subject` reads `Authorization: Bearer <token>`, verifies the
token and exposes the subject on `request.state.subject`. Any failure raises
`UnauthorizedError` before the route body runs; the 401 handler adds the
`WWW-Authenticate` header and a generic, translated detail.
"""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from structlog import get_logger

from credo.core.exceptions import (
    InvalidSignatureError,
    TokenExpiredError,
    UnauthorizedError,
    UserNotFoundError,
)
from credo.domain.entities.credential import Credential
from credo.infrastructure.dependency_injection.auth_dependencies import (
    AccountServiceDep,
    TokenServiceDep,
)
from credo.utils.i18n import get_request_language, get_translated_message

__all__ = [
    "get_current_subject",
    "get_current_credential",
    "CurrentSubject",
    "CurrentCredential",
]

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False, description="Session token from /auth/login")
BearerCredentials = Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)]


def _auth_fail(request: Request, key: str) -> UnauthorizedError:
    """Consistently shaped 401 error carrying a translated message."""
    return UnauthorizedError(get_translated_message(key, get_request_language(request)), code=key)


async def get_current_subject(
    request: Request,
    credentials: BearerCredentials,
    token_service: TokenServiceDep,
) -> str:
    """Return the verified subject of the request's session token."""
    if credentials is None or not credentials.credentials:
        raise _auth_fail(request, "missing_token")

    try:
        claims = token_service.verify(credentials.credentials)
    except TokenExpiredError as exc:
        raise _auth_fail(request, "token_expired") from exc
    except InvalidSignatureError as exc:
        raise _auth_fail(request, "invalid_token") from exc

    request.state.subject = claims.subject
    return claims.subject


CurrentSubject = Annotated[str, Depends(get_current_subject)]


async def get_current_credential(
    request: Request,
    subject: CurrentSubject,
    account_service: AccountServiceDep,
) -> Credential:
    """Resolve the session subject to its credential.

    A valid token for a deleted account is treated as unauthenticated.
    """
    try:
        return await account_service.get_account(subject, get_request_language(request))
    except UserNotFoundError as exc:
        logger.info("Session subject has no credential", subject_id=subject)
        raise _auth_fail(request, "invalid_token") from exc


CurrentCredential = Annotated[Credential, Depends(get_current_credential)]
