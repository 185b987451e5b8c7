"""/auth/login route module."""

import uuid

import structlog
from fastapi import APIRouter, Request, status

from credo.adapters.api.v1.auth.schemas import LoginRequest, TokenResponse
from credo.core.config.settings import settings
from credo.domain.value_objects.email import mask_email
from credo.infrastructure.dependency_injection.auth_dependencies import AuthenticationServiceDep
from credo.utils.i18n import get_request_language

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Exchange email and password for a session token",
    responses={401: {"description": "Invalid email or password"}},
)
async def login_user(
    request: Request,
    payload: LoginRequest,
    authentication_service: AuthenticationServiceDep,
) -> TokenResponse:
    """Authenticate a credential and return a bearer token.

    Unknown emails and wrong passwords produce the same 401 response.
    """
    request_logger = logger.bind(correlation_id=str(uuid.uuid4()), endpoint="login")
    request_logger.info("Login attempt initiated", email_masked=mask_email(payload.email))

    token = await authentication_service.authenticate(
        email=payload.email,
        password=payload.password,
        language=get_request_language(request),
    )

    return TokenResponse(
        access_token=token,
        token_type="bearer",
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
