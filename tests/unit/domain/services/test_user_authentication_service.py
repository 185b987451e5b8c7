from unittest.mock import MagicMock

import pytest

from credo.core.exceptions import InvalidCredentialsError
from credo.domain.interfaces.services import IPasswordHasher, ITokenService
from credo.domain.services.authentication.user_authentication_service import (
    UserAuthenticationService,
)
from tests.factories.credential import create_fake_credential

PASSWORD = "correct horse battery"


@pytest.fixture
def stored(credential_repository, password_hasher):
    credential = create_fake_credential(
        email="jane@example.com", password_hash=password_hasher.hash(PASSWORD)
    )
    credential_repository.credentials[credential.subject_id] = credential
    return credential


@pytest.fixture
def service(credential_repository, password_hasher, token_service):
    return UserAuthenticationService(credential_repository, password_hasher, token_service)


@pytest.mark.asyncio
async def test_valid_credentials_yield_token_for_subject(service, stored, token_service):
    token = await service.authenticate("Jane@Example.com", PASSWORD)

    assert token_service.verify(token).subject == stored.subject_id


@pytest.mark.asyncio
async def test_unknown_email_and_wrong_password_are_indistinguishable(service, stored):
    with pytest.raises(InvalidCredentialsError) as unknown:
        await service.authenticate("nobody@example.com", PASSWORD)
    with pytest.raises(InvalidCredentialsError) as mismatch:
        await service.authenticate("jane@example.com", "wrong password")

    assert unknown.value.message == mismatch.value.message
    assert unknown.value.code == mismatch.value.code == "invalid_credentials"


@pytest.mark.asyncio
async def test_malformed_email_is_an_invalid_credential(service):
    with pytest.raises(InvalidCredentialsError):
        await service.authenticate("not-an-email", PASSWORD)


@pytest.mark.asyncio
async def test_unknown_email_still_runs_a_hash_verification(credential_repository):
    hasher = MagicMock(spec=IPasswordHasher)
    token_service = MagicMock(spec=ITokenService)
    service = UserAuthenticationService(credential_repository, hasher, token_service)

    with pytest.raises(InvalidCredentialsError):
        await service.authenticate("nobody@example.com", PASSWORD)

    hasher.dummy_verify.assert_called_once()
    token_service.issue.assert_not_called()


@pytest.mark.asyncio
async def test_wrong_password_issues_no_token(credential_repository, stored):
    hasher = MagicMock(spec=IPasswordHasher)
    hasher.verify.return_value = False
    token_service = MagicMock(spec=ITokenService)
    service = UserAuthenticationService(credential_repository, hasher, token_service)

    with pytest.raises(InvalidCredentialsError):
        await service.authenticate("jane@example.com", "wrong password")

    hasher.verify.assert_called_once_with(stored.password_hash, "wrong password")
    token_service.issue.assert_not_called()


@pytest.mark.asyncio
async def test_error_message_follows_language(service):
    with pytest.raises(InvalidCredentialsError) as exc_info:
        await service.authenticate("nobody@example.com", PASSWORD, language="es")

    assert exc_info.value.message == "Correo electrónico o contraseña inválidos"


@pytest.mark.asyncio
async def test_nul_byte_password_fails_like_any_wrong_password(service, stored):
    with pytest.raises(InvalidCredentialsError) as known:
        await service.authenticate("jane@example.com", "abc\x00defghij")
    with pytest.raises(InvalidCredentialsError) as unknown:
        await service.authenticate("nobody@example.com", "abc\x00defghij")

    assert known.value.message == unknown.value.message
