"""Persistent domain entities."""

from .credential import Credential
from .otp_challenge import OtpChallenge

__all__ = ["Credential", "OtpChallenge"]
