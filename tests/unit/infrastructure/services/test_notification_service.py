from unittest.mock import patch

import pytest

from credo.infrastructure.services.notification_service import LoggingNotificationService


@pytest.mark.asyncio
async def test_test_mode_logs_payload():
    service = LoggingNotificationService(test_mode=True)
    with patch("credo.infrastructure.services.notification_service.logger") as logger:
        await service.send_otp("+15550100", "123456")
    assert logger.info.call_args.kwargs["code"] == "123456"


@pytest.mark.asyncio
async def test_production_mode_never_logs_secrets():
    service = LoggingNotificationService(test_mode=False)
    with patch("credo.infrastructure.services.notification_service.logger") as logger:
        await service.send_otp("+15550100", "123456")
        await service.send_password_reset("jane@example.com", "deadbeef" * 8)
    logged = [str(call) for call in logger.info.call_args_list]
    secrets = ("123456", "deadbeef", "jane@", "+15550100")
    assert not any(secret in entry for entry in logged for secret in secrets)
