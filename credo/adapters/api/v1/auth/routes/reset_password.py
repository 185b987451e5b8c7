"""/auth/reset-password route module."""

import structlog
from fastapi import APIRouter, Request, status

from credo.adapters.api.v1.auth.schemas import MessageResponse, ResetPasswordRequest
from credo.infrastructure.dependency_injection.auth_dependencies import PasswordResetServiceDep
from credo.utils.i18n import get_request_language, get_translated_message

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Complete a password reset",
    responses={
        400: {"description": "Token invalid, expired or already used"},
        422: {"description": "New password rejected"},
    },
)
async def reset_password(
    request: Request,
    payload: ResetPasswordRequest,
    reset_service: PasswordResetServiceDep,
) -> MessageResponse:
    language = get_request_language(request)
    await reset_service.reset_password(
        token=payload.token,
        new_password=payload.new_password,
        confirm_password=payload.confirm_password,
        language=language,
    )
    return MessageResponse(message=get_translated_message("password_reset_successful", language))
