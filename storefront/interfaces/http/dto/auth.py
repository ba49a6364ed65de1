from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class SignupRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=128)

    model_config = ConfigDict(extra="ignore")

    @field_validator("username", "email")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def _looks_like_email(cls, value: str) -> str:
        if not _EMAIL_RE.match(value):
            raise ValueError("must be a valid email address")
        return value


class LoginRequestDTO(BaseModel):
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=128)  # No strength check on login

    model_config = ConfigDict(extra="ignore")

    @field_validator("email")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


class SignupSuccessDTO(BaseModel):
    message: str = "User created successfully"


class LoginSuccessDTO(BaseModel):
    token: str
    expires_at: int = Field(serialization_alias="expiresAt")
