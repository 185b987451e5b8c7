"""/auth/forgot-password route module.

The response is identical whether or not the email belongs to an account.
"""

import uuid

import structlog
from fastapi import APIRouter, Request, status

from credo.adapters.api.v1.auth.schemas import ForgotPasswordRequest, MessageResponse
from credo.domain.value_objects.email import mask_email
from credo.infrastructure.dependency_injection.auth_dependencies import (
    PasswordResetRequestServiceDep,
)
from credo.utils.i18n import get_request_language, get_translated_message

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Request password reset",
    responses={
        200: {"description": "Password reset token sent (or would be sent if the account exists)"},
        422: {"description": "Invalid email format"},
    },
)
async def forgot_password(
    request: Request,
    payload: ForgotPasswordRequest,
    reset_request_service: PasswordResetRequestServiceDep,
) -> MessageResponse:
    language = get_request_language(request)
    request_logger = logger.bind(correlation_id=str(uuid.uuid4()), endpoint="forgot_password")
    request_logger.info("Password reset requested", email_masked=mask_email(payload.email))

    await reset_request_service.request_password_reset(payload.email, language=language)

    return MessageResponse(message=get_translated_message("password_reset_email_sent", language))
