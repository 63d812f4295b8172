from __future__ import annotations

import asyncio
import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import Awaitable, Callable

from app.config import settings
from app.schemas.user_info import FieldChange, FormState, UserInfo
from app.services import regex_validator, schema_validator
from app.services.form_state import apply_change, empty_record
from app.services.submission_sink import log_rejection, log_submission
from app.utils.exceptions import FormNotFoundError, UnknownStrategyError

logger = logging.getLogger(__name__)

SubmissionSink = Callable[[str, UserInfo], None]


@dataclass(frozen=True)
class ValidationStrategy:
    name: str
    title: str
    validate: Callable[[UserInfo], Awaitable[dict[str, str]]]


async def _validate_with_regex(record: UserInfo) -> dict[str, str]:
    return regex_validator.validate_user_info(record)


VALIDATION_STRATEGIES: dict[str, ValidationStrategy] = {
    "regex": ValidationStrategy("regex", "Custom Form Validation", _validate_with_regex),
    "schema": ValidationStrategy("schema", "Schema Form Validation", schema_validator.validate_user_info),
}


def get_strategy(name: str) -> ValidationStrategy:
    try:
        return VALIDATION_STRATEGIES[name]
    except KeyError:
        raise UnknownStrategyError(name) from None


class RegistrationForm:
    """
    One form instance: its record, the last error set and the submit/reset lifecycle.

    Edits, resets and submits share one lock, so a change never lands in the
    middle of a validation pass.
    """

    def __init__(self, strategy: ValidationStrategy, sink: SubmissionSink = log_submission):
        self.strategy = strategy
        self.sink = sink
        self.record = empty_record()
        self.errors: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def apply(self, change: FieldChange) -> UserInfo:
        async with self._lock:
            self.record = apply_change(self.record, change)
            return self.record

    async def reset(self) -> None:
        async with self._lock:
            self.record = empty_record()
            self.errors = {}

    async def submit(self) -> bool:
        async with self._lock:
            record = self.record
            self.errors = await self.strategy.validate(record)
            if self.errors:
                log_rejection(self.strategy.name, self.errors)
                return False
            self.sink(self.strategy.name, record)
            self.record = empty_record()
            return True

    def snapshot(self, form_id: str | None = None) -> FormState:
        return FormState(
            id=form_id,
            strategy=self.strategy.name,
            record=self.record,
            errors=dict(self.errors),
            valid=not self.errors,
        )


class FormStore:
    """In-memory form instances, oldest evicted once ``limit`` is reached."""

    def __init__(self, limit: int):
        self.limit = max(limit, 1)
        self._forms: OrderedDict[str, RegistrationForm] = OrderedDict()

    def create(self, strategy_name: str, sink: SubmissionSink = log_submission) -> tuple[str, RegistrationForm]:
        form = RegistrationForm(get_strategy(strategy_name), sink=sink)
        form_id = uuid.uuid4().hex
        while len(self._forms) >= self.limit:
            evicted_id, _ = self._forms.popitem(last=False)
            logger.info("Evicted form %s; store limit %s reached", evicted_id, self.limit)
        self._forms[form_id] = form
        logger.debug("Created %s form %s", strategy_name, form_id)
        return form_id, form

    def get(self, form_id: str) -> RegistrationForm:
        form = self._forms.get(form_id)
        if form is None:
            raise FormNotFoundError(form_id)
        return form

    def discard(self, form_id: str) -> None:
        if self._forms.pop(form_id, None) is None:
            raise FormNotFoundError(form_id)

    def __len__(self) -> int:
        return len(self._forms)


form_store = FormStore(limit=settings.FORM_SESSION_LIMIT)
