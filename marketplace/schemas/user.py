from pydantic import AliasChoices, EmailStr, Field, field_validator
from typing import Optional
import re

from marketplace.core.config import settings
from marketplace.schemas.base import CamelModel

PASSWORD_RULES = (
    (re.compile(r"[A-Z]"), "one uppercase letter"),
    (re.compile(r"[a-z]"), "one lowercase letter"),
    (re.compile(r"\d"), "one number"),
    (re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]"), "one special character"),
)


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class RegisterRequest(CamelModel):
    display_name: str = Field(..., min_length=3, max_length=100)
    email: EmailStr
    password: str
    profile_image_url: Optional[str] = Field(None, max_length=500)

    @field_validator("display_name", "email", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return _strip(value)

    @field_validator("password")
    @classmethod
    def check_password_strength(cls, value: str) -> str:
        if len(value) < settings.PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters long"
            )
        missing = [label for pattern, label in PASSWORD_RULES if not pattern.search(value)]
        if missing:
            raise ValueError("Password must contain at least " + ", ".join(missing))
        return value


class LoginRequest(CamelModel):
    # The login form sends an email or a display name
    identifier: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("identifier", "email"),
    )
    password: str = Field(..., min_length=1)

    @field_validator("identifier", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return _strip(value)


class UserInfo(CamelModel):
    id: int
    display_name: str
    email: str
    profile_image_url: Optional[str] = None


class ProfileUpdate(CamelModel):
    """Profile edit form; fields left out keep their current value"""
    user_id: int
    display_name: Optional[str] = Field(None, min_length=3, max_length=100)
    email: Optional[EmailStr] = None
    profile_image_url: Optional[str] = Field(None, max_length=500)

    @field_validator("display_name", "email", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return _strip(value)
