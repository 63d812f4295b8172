from __future__ import annotations

from app.schemas.user_info import UserInfo
from app.services.form_fields import (
    DOB_MESSAGE,
    EMAIL_MESSAGE,
    EMAIL_REGEX,
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


def is_valid_email(value: str) -> bool:
    return EMAIL_REGEX.fullmatch(value) is not None


def is_valid_phone_number(value: str) -> bool:
    return PHONE_REGEX.fullmatch(value) is not None


def is_valid_password(value: str) -> bool:
    return PASSWORD_REGEX.fullmatch(value) is not None


def validate_user_info(record: UserInfo) -> dict[str, str]:
    """
    Checks every field of the record and returns ``{field: message}`` for each
    one that fails. A field that is empty only ever reports its "required"
    message. An empty mapping means the record is valid.
    """
    errors: dict[str, str] = {}

    if not record.first_name.strip():
        errors["first_name"] = REQUIRED_MESSAGES["first_name"]
    if not record.last_name.strip():
        errors["last_name"] = REQUIRED_MESSAGES["last_name"]

    if not record.email.strip():
        errors["email"] = REQUIRED_MESSAGES["email"]
    elif not is_valid_email(record.email):
        errors["email"] = EMAIL_MESSAGE

    if not record.phone_number.strip():
        errors["phone_number"] = REQUIRED_MESSAGES["phone_number"]
    elif not is_valid_phone_number(record.phone_number):
        errors["phone_number"] = PHONE_MESSAGE

    if not record.password.strip():
        errors["password"] = REQUIRED_MESSAGES["password"]
    elif not is_valid_password(record.password):
        errors["password"] = PASSWORD_MESSAGE

    # Compared against the raw password, so a blank password still mismatches.
    if not record.confirm_password.strip():
        errors["confirm_password"] = REQUIRED_MESSAGES["confirm_password"]
    elif record.confirm_password != record.password:
        errors["confirm_password"] = PASSWORD_MATCH_MESSAGE

    if not record.gender.strip():
        errors["gender"] = REQUIRED_MESSAGES["gender"]
    elif record.gender not in GENDER_CHOICES:
        errors["gender"] = GENDER_MESSAGE

    if len(record.interests) == 0:
        errors["interests"] = REQUIRED_MESSAGES["interests"]
    elif any(interest not in INTEREST_CHOICES for interest in record.interests):
        errors["interests"] = INTERESTS_MESSAGE

    if not record.dob.strip():
        errors["dob"] = REQUIRED_MESSAGES["dob"]
    elif not is_calendar_date(record.dob):
        errors["dob"] = DOB_MESSAGE

    return errors
