"""
Pydantic schemas for email verification code endpoints.
"""

from typing import Any

from pydantic import BaseModel, EmailStr, Field, field_validator

from catalog.services.user_service import normalize_email


class VerificationCodeRequest(BaseModel):
    """Request a new verification code for an email address."""
    email: EmailStr = Field(..., description="Address to issue the code for")

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, value: Any) -> Any:
        return normalize_email(value) if isinstance(value, str) else value


class VerificationCodeResponse(BaseModel):
    """
    Response after issuing a code.

    The code itself is not returned; delivering it to the user is the job of
    whatever sends the email.
    """
    status: str = Field("CREATED", description="Indicates a code was issued")
    email: str = Field(..., description="Address the code was issued for")
    expires_at: str = Field(..., description="ISO-8601 expiry timestamp")


class VerifyCodeRequest(BaseModel):
    email: EmailStr
    code: str = Field(..., min_length=4, max_length=12, pattern=r"^\s*\d+\s*$")

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, value: Any) -> Any:
        return normalize_email(value) if isinstance(value, str) else value


class VerifyCodeResponse(BaseModel):
    status: str = Field("VERIFIED", description="Indicates the code was accepted")
    email: str = Field(..., description="Verified address")
