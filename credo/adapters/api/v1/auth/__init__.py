"""Authentication router package – bundles registration, login, OTP and reset endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from .routes import account as account_route
from .routes import forgot_password as forgot_password_route
from .routes import login as login_route
from .routes import otp as otp_route
from .routes import register as register_route
from .routes import reset_password as reset_password_route

router = APIRouter(prefix="/auth", tags=["auth"])

# Delegate to sub-routers ----------------------------------------------------

router.include_router(register_route.router, prefix="/register")
router.include_router(login_route.router, prefix="/login")
router.include_router(otp_route.router, prefix="/otp")
router.include_router(forgot_password_route.router, prefix="/forgot-password")
router.include_router(reset_password_route.router, prefix="/reset-password")
router.include_router(account_route.router)

__all__ = ["router"]
