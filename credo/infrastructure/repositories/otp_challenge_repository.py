"""OTP challenge repository backed by PostgreSQL.

Issuing uses `INSERT ... ON CONFLICT DO UPDATE` so the last writer wins
without a read. Verification is one filtered `UPDATE` that clears the code,
so a code can be consumed at most once even under concurrent requests.
"""

from datetime import datetime

from sqlalchemy import update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from credo.core.exceptions import DatabaseError
from credo.domain.entities.otp_challenge import OtpChallenge
from credo.domain.interfaces.repositories import IOtpChallengeRepository
from credo.utils.i18n import get_translated_message

logger = get_logger(__name__)


class OtpChallengeRepository(IOtpChallengeRepository):
    """SQLAlchemy implementation of `IOtpChallengeRepository`."""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def upsert(self, challenge: OtpChallenge) -> None:
        statement = insert(OtpChallenge).values(
            subject_id=challenge.subject_id,
            code=challenge.code,
            expires_at=challenge.expires_at,
        )
        statement = statement.on_conflict_do_update(
            index_elements=["subject_id"],
            set_={"code": statement.excluded.code, "expires_at": statement.excluded.expires_at},
        )
        try:
            await self.db_session.execute(statement)
            await self.db_session.commit()
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            logger.error("OTP challenge upsert failed", error_type=type(e).__name__)
            raise DatabaseError(get_translated_message("database_error")) from e

    async def consume(self, subject_id: str, code: str, current_time: datetime) -> bool:
        statement = (
            update(OtpChallenge)
            .where(
                OtpChallenge.subject_id == subject_id,
                OtpChallenge.code == code,
                OtpChallenge.expires_at > current_time,
            )
            .values(code=None)
        )
        try:
            result = await self.db_session.execute(statement)
            await self.db_session.commit()
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            logger.error("OTP challenge consume failed", error_type=type(e).__name__)
            raise DatabaseError(get_translated_message("database_error")) from e
        return result.rowcount == 1
