"""/auth/register route module."""

import uuid

import structlog
from fastapi import APIRouter, Request, status

from credo.adapters.api.v1.auth.schemas import CredentialOut, RegisterRequest
from credo.domain.value_objects.email import mask_email
from credo.infrastructure.dependency_injection.auth_dependencies import RegistrationServiceDep
from credo.utils.i18n import get_request_language

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=CredentialOut,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
    responses={
        409: {"description": "Email already registered"},
        422: {"description": "One or more fields are invalid"},
    },
)
async def register_user(
    request: Request,
    payload: RegisterRequest,
    registration_service: RegistrationServiceDep,
) -> CredentialOut:
    """Create a credential from an email, a password and its confirmation.

    The response never contains the password or its hash.
    """
    request_logger = logger.bind(correlation_id=str(uuid.uuid4()), endpoint="register")
    request_logger.info("Registration attempt initiated", email_masked=mask_email(payload.email))

    credential = await registration_service.register_user(
        email=payload.email,
        password=payload.password,
        confirm_password=payload.confirm_password,
        language=get_request_language(request),
    )

    request_logger.info("Registration succeeded", subject_id=credential.subject_id)
    return CredentialOut.from_entity(credential)
