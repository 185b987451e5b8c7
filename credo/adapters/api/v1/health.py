from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request
from pydantic import BaseModel

from credo.core.config.settings import settings
from credo.infrastructure.database.async_db import check_database_health
from credo.utils.i18n import get_request_language, get_translated_message

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    env: str
    message: str
    services: Dict[str, Any]
    timestamp: datetime


@router.get("", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Report application status and database reachability.
    """
    db_healthy = await check_database_health()
    overall_status = "ok" if db_healthy else "degraded"
    return HealthResponse(
        status=overall_status,
        env=settings.APP_ENV,
        message=get_translated_message(f"health_{overall_status}", get_request_language(request)),
        services={"database": {"status": "healthy" if db_healthy else "unhealthy"}},
        timestamp=datetime.now(timezone.utc),
    )
