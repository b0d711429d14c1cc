"""Pydantic schemas for signup/signin endpoints."""
from pydantic import BaseModel, EmailStr, Field, field_validator


class AuthRequest(BaseModel):
    """Credentials submitted to signup and signin."""

    email: EmailStr
    password: str = Field(min_length=1, max_length=255)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: object) -> object:
        """Trim and lowercase the email so lookups are case-insensitive."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class TokenResponse(BaseModel):
    """Signed bearer token returned on successful signup/signin."""

    access_token: str
    token_type: str = "bearer"
