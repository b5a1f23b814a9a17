"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints, field_validator

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_BYTES = 72  # bcrypt input limit


class SignupRequest(BaseModel):
    """Request model for account signup."""

    email: EmailStr
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        description=f"User password (min {PASSWORD_MIN_LENGTH} characters, "
        f"max {PASSWORD_MAX_BYTES} bytes UTF-8)",
    )
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = Field(
        ..., description="Display name (must not be blank)"
    )

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        """Reject passwords bcrypt would truncate or refuse."""
        if len(v.encode()) > PASSWORD_MAX_BYTES:
            raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
        return v


class UserResponse(BaseModel):
    """Public view of a stored account. The password hash is never serialized."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    email: str
    name: str
    created_at: datetime | None = None


class SignupResponse(BaseModel):
    """Response model for successful signup."""

    user: UserResponse


class ErrorResponse(BaseModel):
    """Business-rule error response model."""

    error: str
