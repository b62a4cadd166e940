"""Pydantic schemas for authentication endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator

from app.config import get_settings

BCRYPT_MAX_BYTES = 72


class RegisterRequest(BaseModel):
    name: str = Field(max_length=255)
    email: EmailStr
    # Declared before ``password`` so the password validator can compare against it.
    password_confirmation: str | None = None
    password: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("El nombre es obligatorio")
        return value.strip()

    @field_validator("password")
    @classmethod
    def password_policy(cls, value: str, info: ValidationInfo) -> str:
        min_length = get_settings().PASSWORD_MIN_LENGTH
        if len(value) < min_length:
            raise ValueError(f"La contraseña debe tener al menos {min_length} caracteres")
        if len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"La contraseña no puede superar {BCRYPT_MAX_BYTES} bytes")
        if info.data.get("password_confirmation") != value:
            raise ValueError("La confirmación de la contraseña no coincide")
        return value


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserSummary(BaseModel):
    id: int
    name: str
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}


class UserProfile(UserSummary):
    email_verified_at: datetime | None
    updated_at: datetime


class AuthData(BaseModel):
    user: UserSummary
    token: str
    token_type: Literal["Bearer"] = "Bearer"


class AuthResponse(BaseModel):
    success: bool = True
    message: str
    data: AuthData


class ProfileData(BaseModel):
    user: UserProfile


class ProfileResponse(BaseModel):
    success: bool = True
    data: ProfileData


class TokenData(BaseModel):
    token: str
    token_type: Literal["Bearer"] = "Bearer"


class TokenResponse(BaseModel):
    success: bool = True
    message: str
    data: TokenData


class MessageResponse(BaseModel):
    success: bool = True
    message: str
