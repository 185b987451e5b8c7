from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession


@pytest.fixture
def db_session():
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    return session
