import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from credo.core.exceptions import DuplicateUserError, HashingFailure, ValidationError
from credo.domain.interfaces.repositories import ICredentialRepository
from credo.domain.interfaces.services import IPasswordHasher
from credo.domain.services.authentication.user_registration_service import (
    UserRegistrationService,
)
from tests.factories.credential import create_fake_credential

PASSWORD = "correct horse battery"


@pytest.fixture
def service(credential_repository, password_hasher):
    return UserRegistrationService(credential_repository, password_hasher)


@pytest.mark.asyncio
async def test_register_stores_normalized_email_and_hash(service, credential_repository, password_hasher):
    credential = await service.register_user("  Jane.Doe@Example.COM ", PASSWORD, PASSWORD)

    assert credential.email == "jane.doe@example.com"
    assert credential.password_hash != PASSWORD
    assert password_hasher.verify(credential.password_hash, PASSWORD)
    assert credential_repository.credentials[credential.subject_id] is credential


@pytest.mark.asyncio
async def test_register_assigns_distinct_subjects(service):
    first = await service.register_user("a@example.com", PASSWORD, PASSWORD)
    second = await service.register_user("b@example.com", PASSWORD, PASSWORD)

    assert first.subject_id != second.subject_id


@pytest.mark.asyncio
async def test_validation_reports_every_failing_field(service, credential_repository):
    with pytest.raises(ValidationError) as exc_info:
        await service.register_user("not-an-email", "short", "different")

    assert exc_info.value.fields == ["email", "password", "confirm_password"]
    assert credential_repository.credentials == {}


@pytest.mark.asyncio
async def test_password_length_bounds(service):
    with pytest.raises(ValidationError) as exc_info:
        await service.register_user("jane@example.com", "x" * 129, "x" * 129)
    assert exc_info.value.fields == ["password"]

    credential = await service.register_user("jane@example.com", "x" * 8, "x" * 8)
    assert credential.email == "jane@example.com"


@pytest.mark.asyncio
async def test_validation_message_is_translated(service):
    with pytest.raises(ValidationError) as exc_info:
        await service.register_user("jane@example.com", PASSWORD, "other", language="es")

    assert "no coinciden" in exc_info.value.message


@pytest.mark.asyncio
async def test_existing_email_is_rejected(service, credential_repository):
    existing = create_fake_credential(email="jane@example.com")
    credential_repository.credentials[existing.subject_id] = existing

    with pytest.raises(DuplicateUserError):
        await service.register_user("JANE@example.com", PASSWORD, PASSWORD)

    assert len(credential_repository.credentials) == 1


@pytest.mark.asyncio
async def test_duplicate_raised_by_insert_is_reported():
    repository = AsyncMock(spec=ICredentialRepository)
    repository.get_by_email.return_value = None
    repository.add.side_effect = DuplicateUserError("email_already_registered")
    hasher = MagicMock(spec=IPasswordHasher)
    hasher.hash.return_value = "hashed"

    service = UserRegistrationService(repository, hasher)

    with pytest.raises(DuplicateUserError) as exc_info:
        await service.register_user("jane@example.com", PASSWORD, PASSWORD)

    assert exc_info.value.code == "duplicate_user_error"
    repository.add.assert_awaited_once()


@pytest.mark.asyncio
async def test_concurrent_registrations_create_one_credential(service, credential_repository):
    results = await asyncio.gather(
        service.register_user("race@example.com", PASSWORD, PASSWORD),
        service.register_user("race@example.com", PASSWORD, PASSWORD),
        return_exceptions=True,
    )

    failures = [r for r in results if isinstance(r, Exception)]
    assert len(failures) == 1
    assert isinstance(failures[0], DuplicateUserError)
    assert len(credential_repository.credentials) == 1


@pytest.mark.asyncio
async def test_hashing_failure_propagates_and_nothing_is_stored(credential_repository):
    hasher = MagicMock(spec=IPasswordHasher)
    hasher.hash.side_effect = HashingFailure()

    service = UserRegistrationService(credential_repository, hasher)

    with pytest.raises(HashingFailure):
        await service.register_user("jane@example.com", PASSWORD, PASSWORD)

    assert credential_repository.credentials == {}


@pytest.mark.asyncio
async def test_nul_byte_password_is_a_validation_error(service, credential_repository):
    with pytest.raises(ValidationError) as exc_info:
        await service.register_user("jane@example.com", "abc\x00defghij", "abc\x00defghij")

    assert exc_info.value.fields == ["password"]
    assert credential_repository.credentials == {}
