"""/auth/otp route module: issue and verify one-time passcodes."""

import structlog
from fastapi import APIRouter, status

from credo.adapters.api.v1.auth.schemas import (
    OtpIssueRequest,
    OtpIssueResponse,
    OtpVerifyRequest,
    OtpVerifyResponse,
)
from credo.infrastructure.dependency_injection.auth_dependencies import OtpChallengeServiceDep

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "/send",
    response_model=OtpIssueResponse,
    status_code=status.HTTP_200_OK,
    summary="Issue a one-time passcode",
)
async def issue_otp(payload: OtpIssueRequest, otp_service: OtpChallengeServiceDep) -> OtpIssueResponse:
    """Generate a code for the subject, replacing any outstanding one."""
    issued = await otp_service.issue_challenge(payload.subject_id)
    return OtpIssueResponse(issued=issued)


@router.post(
    "/verify",
    response_model=OtpVerifyResponse,
    status_code=status.HTTP_200_OK,
    summary="Verify a one-time passcode",
)
async def verify_otp(payload: OtpVerifyRequest, otp_service: OtpChallengeServiceDep) -> OtpVerifyResponse:
    """Consume the code. `verified` is false for any mismatch, expiry or replay."""
    verified = await otp_service.verify_challenge(payload.subject_id, payload.code)
    return OtpVerifyResponse(verified=verified)
