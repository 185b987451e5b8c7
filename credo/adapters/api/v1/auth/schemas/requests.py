"""Request payloads accepted by the auth API.

Only shape and size are checked here; email syntax, password policy and
confirmation equality are domain rules enforced by the services so that all
failing fields are reported together.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_MAX_EMAIL = 254
_MAX_PASSWORD = 256


class _Payload(BaseModel):
    model_config = ConfigDict(extra="forbid")


class RegisterRequest(_Payload):
    email: str = Field(..., max_length=_MAX_EMAIL, examples=["jane@example.com"])
    password: str = Field(..., max_length=_MAX_PASSWORD)
    confirm_password: str = Field(..., max_length=_MAX_PASSWORD)


class LoginRequest(_Payload):
    email: str = Field(..., max_length=_MAX_EMAIL)
    password: str = Field(..., max_length=_MAX_PASSWORD)


class OtpIssueRequest(_Payload):
    subject_id: str = Field(..., min_length=1, max_length=64, examples=["+15550100"])


class OtpVerifyRequest(_Payload):
    subject_id: str = Field(..., min_length=1, max_length=64)
    code: str = Field(..., max_length=10)


class ForgotPasswordRequest(_Payload):
    email: str = Field(..., max_length=_MAX_EMAIL)


class ResetPasswordRequest(_Payload):
    token: str = Field(..., max_length=128)
    new_password: str = Field(..., max_length=_MAX_PASSWORD)
    confirm_password: str = Field(..., max_length=_MAX_PASSWORD)
