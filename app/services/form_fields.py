import re
from datetime import date

from app.schemas.user_info import GenderEnum, InterestEnum

FIELD_NAMES = (
    "first_name",
    "last_name",
    "email",
    "phone_number",
    "password",
    "confirm_password",
    "gender",
    "interests",
    "dob",
)

TEXT_FIELDS = frozenset(FIELD_NAMES) - {"gender", "interests"}

GENDER_CHOICES = tuple(item.value for item in GenderEnum)
INTEREST_CHOICES = tuple(item.value for item in InterestEnum)

EMAIL_REGEX = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_REGEX = re.compile(r"[0-9]{10}")
PASSWORD_REGEX = re.compile(r"(?=.*[A-Za-z])(?=.*[0-9])(?=.*[@$!%*?&])[A-Za-z0-9@$!%*?&]{8,}")
DATE_REGEX = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

REQUIRED_MESSAGES = {
    "first_name": "First name is required",
    "last_name": "Last name is required",
    "email": "Email is required",
    "phone_number": "Phone Number is required",
    "password": "Password is required",
    "confirm_password": "Confirm Password is required",
    "gender": "Gender is required",
    "interests": "Select at least one interest",
    "dob": "Date of Birth is required",
}

EMAIL_MESSAGE = "Invalid email format"
PHONE_MESSAGE = "Phone Number must be 10 digits"
PASSWORD_MESSAGE = "Password must be at least 8 characters, include one symbol, one number, and one letter"
PASSWORD_MATCH_MESSAGE = "Passwords must match"
GENDER_MESSAGE = f"Gender must be one of: {', '.join(GENDER_CHOICES)}"
INTERESTS_MESSAGE = f"Interests must be chosen from: {', '.join(INTEREST_CHOICES)}"
DOB_MESSAGE = "Date of Birth must be a valid date"


def is_calendar_date(value: str) -> bool:
    if not DATE_REGEX.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True
