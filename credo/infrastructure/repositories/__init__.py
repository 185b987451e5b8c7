from .credential_repository import CredentialRepository
from .otp_challenge_repository import OtpChallengeRepository

__all__ = ["CredentialRepository", "OtpChallengeRepository"]
