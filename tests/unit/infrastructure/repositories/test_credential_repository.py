from datetime import datetime, timezone

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError, OperationalError

from credo.core.exceptions import DatabaseError, DuplicateUserError
from credo.infrastructure.repositories.credential_repository import CredentialRepository
from tests.factories.credential import create_fake_credential
from tests.utils.db import result_with

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _sql(statement) -> str:
    return str(statement.compile(dialect=postgresql.dialect()))


@pytest.mark.asyncio
async def test_get_by_email_returns_match(db_session):
    credential = create_fake_credential(email="jane@example.com")
    db_session.execute.return_value = result_with(first=credential)

    found = await CredentialRepository(db_session).get_by_email("jane@example.com")

    assert found is credential
    assert "credentials.email = " in _sql(db_session.execute.await_args.args[0])


@pytest.mark.asyncio
async def test_get_by_email_wraps_driver_errors(db_session):
    db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))

    with pytest.raises(DatabaseError) as exc_info:
        await CredentialRepository(db_session).get_by_email("jane@example.com")

    assert "connection refused" not in str(exc_info.value)


@pytest.mark.asyncio
async def test_add_commits_and_refreshes(db_session):
    credential = create_fake_credential()

    saved = await CredentialRepository(db_session).add(credential)

    assert saved is credential
    db_session.add.assert_called_once_with(credential)
    db_session.commit.assert_awaited_once()
    db_session.refresh.assert_awaited_once_with(credential)


@pytest.mark.asyncio
async def test_add_translates_unique_violation(db_session):
    db_session.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))

    with pytest.raises(DuplicateUserError):
        await CredentialRepository(db_session).add(create_fake_credential())

    db_session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_add_wraps_other_failures(db_session):
    db_session.commit.side_effect = OperationalError("INSERT", {}, Exception("server closed"))

    with pytest.raises(DatabaseError):
        await CredentialRepository(db_session).add(create_fake_credential())

    db_session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_consume_reset_token_is_single_conditional_update(db_session):
    db_session.execute.return_value = result_with(rowcount=1)

    consumed = await CredentialRepository(db_session).consume_reset_token("digest", "new-hash", NOW)

    assert consumed is True
    db_session.execute.assert_awaited_once()
    sql = _sql(db_session.execute.await_args.args[0])
    assert sql.startswith("UPDATE credentials")
    assert "credentials.password_reset_token = " in sql
    assert "credentials.password_reset_token_expires_at > " in sql
    db_session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_consume_reset_token_no_match(db_session):
    db_session.execute.return_value = result_with(rowcount=0)

    assert await CredentialRepository(db_session).consume_reset_token("digest", "h", NOW) is False


@pytest.mark.asyncio
async def test_set_reset_token_updates_subject(db_session):
    db_session.execute.return_value = result_with(rowcount=1)

    await CredentialRepository(db_session).set_reset_token("subject-1", "digest", NOW)

    sql = _sql(db_session.execute.await_args.args[0])
    assert "credentials.subject_id = " in sql
    db_session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_reports_whether_a_row_was_removed(db_session):
    db_session.execute.return_value = result_with(rowcount=0)
    assert await CredentialRepository(db_session).delete("missing") is False

    db_session.execute.return_value = result_with(rowcount=1)
    assert await CredentialRepository(db_session).delete("subject-1") is True
