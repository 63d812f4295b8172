import logging

from app.schemas.user_info import UserInfo

logger = logging.getLogger(__name__)

REDACTED_FIELDS = ("password", "confirm_password")


def redact(record: UserInfo) -> dict:
    payload = record.model_dump()
    for field in REDACTED_FIELDS:
        if payload.get(field):
            payload[field] = "********"
    return payload


def log_submission(strategy: str, record: UserInfo) -> None:
    logger.info("Form submitted successfully strategy=%s record=%s", strategy, redact(record))


def log_rejection(strategy: str, errors: dict[str, str]) -> None:
    logger.info("Form validation failed strategy=%s fields=%s", strategy, sorted(errors))
