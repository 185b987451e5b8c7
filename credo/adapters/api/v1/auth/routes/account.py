"""Protected account routes: /auth/me and /auth/account."""

from fastapi import APIRouter, Request, Response, status

from credo.adapters.api.v1.auth.schemas import CredentialOut
from credo.core.dependencies.auth import CurrentCredential, CurrentSubject
from credo.infrastructure.dependency_injection.auth_dependencies import AccountServiceDep
from credo.utils.i18n import get_request_language

router = APIRouter()


@router.get(
    "/me",
    response_model=CredentialOut,
    summary="Return the authenticated account",
    responses={401: {"description": "Missing, invalid or expired session token"}},
)
async def read_current_account(credential: CurrentCredential) -> CredentialOut:
    return CredentialOut.from_entity(credential)


@router.delete(
    "/account",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete the authenticated account",
    responses={401: {"description": "Missing, invalid or expired session token"}},
)
async def delete_current_account(
    request: Request,
    subject: CurrentSubject,
    account_service: AccountServiceDep,
) -> Response:
    await account_service.delete_account(subject, get_request_language(request))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
