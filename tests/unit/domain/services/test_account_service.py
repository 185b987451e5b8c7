import pytest

from credo.core.exceptions import UserNotFoundError
from credo.domain.services.account.account_service import AccountService
from tests.factories.credential import create_fake_credential


@pytest.fixture
def service(credential_repository):
    return AccountService(credential_repository)


@pytest.mark.asyncio
async def test_get_and_delete_account(service, credential_repository):
    credential = create_fake_credential()
    credential_repository.credentials[credential.subject_id] = credential

    assert await service.get_account(credential.subject_id) is credential

    await service.delete_account(credential.subject_id)

    assert credential_repository.credentials == {}
    with pytest.raises(UserNotFoundError):
        await service.get_account(credential.subject_id)


@pytest.mark.asyncio
async def test_deleting_missing_account_raises(service):
    with pytest.raises(UserNotFoundError):
        await service.delete_account("no-such-subject")
