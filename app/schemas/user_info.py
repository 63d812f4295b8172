from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class GenderEnum(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class InterestEnum(str, Enum):
    coding = "coding"
    sports = "sports"
    reading = "reading"


class UserInfo(BaseModel):
    """Registration form record. Starts empty; every control maps to one field."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""
    password: str = ""
    confirm_password: str = ""
    gender: str = ""
    interests: list[str] = Field(default_factory=list)
    dob: str = ""

    model_config = {"frozen": True, "extra": "forbid"}


class TextFieldChange(BaseModel):
    kind: Literal["input"] = "input"
    name: str
    value: str

    model_config = {"extra": "forbid"}


class SelectFieldChange(BaseModel):
    kind: Literal["select"] = "select"
    value: str

    model_config = {"extra": "forbid"}


class CheckboxFieldChange(BaseModel):
    kind: Literal["checkbox"] = "checkbox"
    id: str
    checked: bool

    model_config = {"extra": "forbid"}


FieldChange = Annotated[
    Union[TextFieldChange, SelectFieldChange, CheckboxFieldChange],
    Field(discriminator="kind"),
]


class ValidationResponse(BaseModel):
    valid: bool
    errors: dict[str, str]


class FormState(BaseModel):
    id: str | None = None
    strategy: str
    record: UserInfo
    errors: dict[str, str]
    valid: bool


class StrategyInfo(BaseModel):
    name: str
    title: str
