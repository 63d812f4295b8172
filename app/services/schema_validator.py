from __future__ import annotations

import asyncio

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from app.schemas.user_info import UserInfo
from app.services.form_fields import (
    DOB_MESSAGE,
    EMAIL_MESSAGE,
    EMAIL_REGEX,
    FIELD_NAMES,
    GENDER_CHOICES,
    GENDER_MESSAGE,
    INTEREST_CHOICES,
    INTERESTS_MESSAGE,
    PASSWORD_MATCH_MESSAGE,
    PASSWORD_MESSAGE,
    PASSWORD_REGEX,
    PHONE_MESSAGE,
    PHONE_REGEX,
    REQUIRED_MESSAGES,
    is_calendar_date,
)


def _fail(error_type: str, message: str) -> PydanticCustomError:
    return PydanticCustomError(error_type, message)


def _require(value: str, field_name: str) -> str:
    if not value.strip():
        raise _fail("required", REQUIRED_MESSAGES[field_name])
    return value


class UserInfoSchema(BaseModel):
    """
    Declarative rules for a submitted registration form.

    Each field checks "required" before its format, so a blank field only
    reports the required message. pydantic gathers the failures of every
    field into a single ``ValidationError``.
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""
    password: str = ""
    confirm_password: str = ""
    gender: str = ""
    interests: list[str] = Field(default_factory=list)
    dob: str = ""

    model_config = {"validate_default": True}

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_name(cls, value: str, info: ValidationInfo) -> str:
        return _require(value, info.field_name)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        _require(value, "email")
        if not EMAIL_REGEX.fullmatch(value):
            raise _fail("email_format", EMAIL_MESSAGE)
        return value

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, value: str) -> str:
        _require(value, "phone_number")
        if not PHONE_REGEX.fullmatch(value):
            raise _fail("phone_format", PHONE_MESSAGE)
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        _require(value, "password")
        if not PASSWORD_REGEX.fullmatch(value):
            raise _fail("password_strength", PASSWORD_MESSAGE)
        return value

    @field_validator("confirm_password")
    @classmethod
    def validate_confirm_password(cls, value: str, info: ValidationInfo) -> str:
        _require(value, "confirm_password")
        # info.data drops the password when it failed its own rules; fall back to the submitted one.
        password = info.data.get("password", (info.context or {}).get("password"))
        if value != password:
            raise _fail("password_mismatch", PASSWORD_MATCH_MESSAGE)
        return value

    @field_validator("gender")
    @classmethod
    def validate_gender(cls, value: str) -> str:
        _require(value, "gender")
        if value not in GENDER_CHOICES:
            raise _fail("gender_choice", GENDER_MESSAGE)
        return value

    @field_validator("interests")
    @classmethod
    def validate_interests(cls, value: list[str]) -> list[str]:
        if len(value) < 1:
            raise _fail("required", REQUIRED_MESSAGES["interests"])
        if any(interest not in INTEREST_CHOICES for interest in value):
            raise _fail("interest_choice", INTERESTS_MESSAGE)
        return value

    @field_validator("dob")
    @classmethod
    def validate_dob(cls, value: str) -> str:
        _require(value, "dob")
        if not is_calendar_date(value):
            raise _fail("date_format", DOB_MESSAGE)
        return value


def collect_errors(err: ValidationError) -> dict[str, str]:
    """Flatten a ``ValidationError`` into ``{field: message}`` in form order."""
    found: dict[str, str] = {}
    for error in err.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        found.setdefault(field, error["msg"])
    ordered = {name: found[name] for name in FIELD_NAMES if name in found}
    ordered.update((name, message) for name, message in found.items() if name not in ordered)
    return ordered


async def validate_user_info(record: UserInfo) -> dict[str, str]:
    await asyncio.sleep(0)
    try:
        UserInfoSchema.model_validate(record.model_dump(), context={"password": record.password})
    except ValidationError as err:
        return collect_errors(err)
    return {}
