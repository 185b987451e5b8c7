"""Immutable, self-validating domain values."""

from .email import Email
from .otp_code import OtpCode
from .password import HashedPassword, Password
from .reset_token import ResetToken
from .token_claims import TokenClaims

__all__ = ["Email", "HashedPassword", "OtpCode", "Password", "ResetToken", "TokenClaims"]
