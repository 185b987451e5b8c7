"""Authentication API schemas package."""

from __future__ import annotations

# flake8: noqa: F401 – re-export

from .misc import MessageResponse
from .requests import (
    ForgotPasswordRequest,
    LoginRequest,
    OtpIssueRequest,
    OtpVerifyRequest,
    RegisterRequest,
    ResetPasswordRequest,
)
from .responses.credential import CredentialOut
from .responses.otp import OtpIssueResponse, OtpVerifyResponse
from .responses.token import TokenResponse

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "OtpIssueRequest",
    "OtpVerifyRequest",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "CredentialOut",
    "TokenResponse",
    "OtpIssueResponse",
    "OtpVerifyResponse",
    "MessageResponse",
]
