from __future__ import annotations

from app.schemas.user_info import (
    CheckboxFieldChange,
    FieldChange,
    SelectFieldChange,
    TextFieldChange,
    UserInfo,
)
from app.services.form_fields import TEXT_FIELDS
from app.utils.exceptions import UnknownFieldError


def empty_record() -> UserInfo:
    return UserInfo()


def change_text(record: UserInfo, name: str, value: str) -> UserInfo:
    if name not in TEXT_FIELDS:
        raise UnknownFieldError(name)
    return record.model_copy(update={name: value})


def select_gender(record: UserInfo, value: str) -> UserInfo:
    return record.model_copy(update={"gender": value})


def toggle_interest(record: UserInfo, interest: str, checked: bool) -> UserInfo:
    """Add ``interest`` when checked, drop it when unchecked. Order follows the clicks."""
    if checked:
        if interest in record.interests:
            return record
        interests = [*record.interests, interest]
    else:
        interests = [item for item in record.interests if item != interest]
    return record.model_copy(update={"interests": interests})


def apply_change(record: UserInfo, change: FieldChange) -> UserInfo:
    if isinstance(change, TextFieldChange):
        return change_text(record, change.name, change.value)
    if isinstance(change, SelectFieldChange):
        return select_gender(record, change.value)
    if isinstance(change, CheckboxFieldChange):
        return toggle_interest(record, change.id, change.checked)
    raise TypeError(f"Unsupported field change: {type(change).__name__}")
