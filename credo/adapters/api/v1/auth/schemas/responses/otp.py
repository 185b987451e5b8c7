from __future__ import annotations

from pydantic import BaseModel


class OtpIssueResponse(BaseModel):
    issued: bool


class OtpVerifyResponse(BaseModel):
    verified: bool
