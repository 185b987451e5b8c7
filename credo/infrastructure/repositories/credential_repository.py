"""Credential repository backed by an async SQLAlchemy session.

Uniqueness of emails is enforced by the `credentials.email` unique index, so
`add` never does check-then-insert: a lost race surfaces as an
`IntegrityError` and is reported as `DuplicateUserError`. Reset completion is
a single conditional `UPDATE`.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from credo.core.exceptions import DatabaseError, DuplicateUserError
from credo.domain.entities.credential import Credential
from credo.domain.interfaces.repositories import ICredentialRepository
from credo.domain.value_objects.email import mask_email
from credo.utils.i18n import get_translated_message

logger = get_logger(__name__)


class CredentialRepository(ICredentialRepository):
    """SQLAlchemy implementation of `ICredentialRepository`."""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def get_by_email(self, email: str) -> Optional[Credential]:
        try:
            statement = select(Credential).where(Credential.email == email)
            result = await self.db_session.execute(statement)
            credential = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(
                "Error retrieving credential by email",
                email_masked=mask_email(email),
                error_type=type(e).__name__,
                operation="get_by_email",
            )
            raise DatabaseError(get_translated_message("database_error")) from e

        logger.debug(
            "Credential lookup by email completed",
            email_masked=mask_email(email),
            found=credential is not None,
        )
        return credential

    async def get_by_subject_id(self, subject_id: str) -> Optional[Credential]:
        try:
            statement = select(Credential).where(Credential.subject_id == subject_id)
            result = await self.db_session.execute(statement)
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(
                "Error retrieving credential by subject",
                subject_id=subject_id,
                error_type=type(e).__name__,
                operation="get_by_subject_id",
            )
            raise DatabaseError(get_translated_message("database_error")) from e

    async def add(self, credential: Credential) -> Credential:
        """Insert a new credential, translating unique-index violations.

        Raises:
            DuplicateUserError: The email already exists.
            DatabaseError: Any other persistence failure.
        """
        try:
            self.db_session.add(credential)
            await self.db_session.commit()
            await self.db_session.refresh(credential)
        except IntegrityError as e:
            await self.db_session.rollback()
            logger.info(
                "Credential insert rejected by unique index",
                email_masked=mask_email(credential.email),
            )
            raise DuplicateUserError(get_translated_message("email_already_registered")) from e
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            logger.error(
                "Error saving credential",
                email_masked=mask_email(credential.email),
                error_type=type(e).__name__,
                operation="add",
            )
            raise DatabaseError(get_translated_message("database_error")) from e

        logger.info("Credential created", subject_id=credential.subject_id)
        return credential

    async def set_reset_token(
        self, subject_id: str, token_digest: str, expires_at: datetime
    ) -> None:
        statement = (
            update(Credential)
            .where(Credential.subject_id == subject_id)
            .values(
                password_reset_token=token_digest,
                password_reset_token_expires_at=expires_at,
            )
        )
        await self._execute_and_commit(statement, "set_reset_token")

    async def consume_reset_token(
        self, token_digest: str, new_password_hash: str, current_time: datetime
    ) -> bool:
        statement = (
            update(Credential)
            .where(
                Credential.password_reset_token == token_digest,
                Credential.password_reset_token_expires_at > current_time,
            )
            .values(
                password_hash=new_password_hash,
                password_reset_token=None,
                password_reset_token_expires_at=None,
            )
        )
        rowcount = await self._execute_and_commit(statement, "consume_reset_token")
        return rowcount == 1

    async def delete(self, subject_id: str) -> bool:
        statement = delete(Credential).where(Credential.subject_id == subject_id)
        rowcount = await self._execute_and_commit(statement, "delete")
        return rowcount == 1

    async def _execute_and_commit(self, statement, operation: str) -> int:
        try:
            result = await self.db_session.execute(statement)
            await self.db_session.commit()
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            logger.error(
                "Credential update failed",
                operation=operation,
                error_type=type(e).__name__,
            )
            raise DatabaseError(get_translated_message("database_error")) from e
        return result.rowcount
