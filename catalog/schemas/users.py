"""
Pydantic schemas for catalog user endpoints.

These models never carry the password hash; responses are built from
catalog.services.user_service.public_user().
"""

from typing import Any, Literal, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from catalog.services.user_service import normalize_email


UserStatus = Literal["pending", "approved", "rejected"]


class UserResponse(BaseModel):
    """Public view of a catalog user."""
    id: str = Field(..., description="User UUID")
    email: str = Field(..., description="Login email")
    name: str = Field(..., description="Contact name")
    company_name: str = Field("", description="Company name")
    address: str = Field("", description="Postal address")
    phone_number: str = Field("", description="Contact phone")
    status: UserStatus = Field(..., description="Approval status")
    is_admin: bool = Field(False, description="Administrator flag")
    created_at: Optional[str] = Field(None, description="ISO-8601 creation timestamp")
    updated_at: Optional[str] = Field(None, description="ISO-8601 timestamp of last update")


class UserRegisterRequest(BaseModel):
    """
    Request to register a new catalog user.

    The account is created with status 'pending' and cannot log in until an
    administrator approves it.
    """
    email: EmailStr = Field(..., description="Login email")
    password: str = Field(..., min_length=8, max_length=128)
    name: str = Field(..., min_length=1, max_length=200)
    company_name: str = Field("", max_length=200)
    address: str = Field("", max_length=500)
    phone_number: str = Field("", max_length=50)

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, value: Any) -> Any:
        return normalize_email(value) if isinstance(value, str) else value


class UserLoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, value: Any) -> Any:
        return normalize_email(value) if isinstance(value, str) else value


class UserStatusUpdateRequest(BaseModel):
    status: UserStatus = Field(..., description="New approval status")


class UserStatusUpdateResponse(BaseModel):
    status: str = Field("UPDATED", description="Indicates the status was changed")
    user: UserResponse
