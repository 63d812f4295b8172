import asyncio
import logging

import pytest

from app.schemas.user_info import CheckboxFieldChange, SelectFieldChange, TextFieldChange
from app.services.form_session import FormStore, RegistrationForm, ValidationStrategy, get_strategy
from app.services.submission_sink import redact
from app.utils.exceptions import FormNotFoundError, UnknownStrategyError

TEXT_FIELDS = ("first_name", "last_name", "email", "phone_number", "password", "confirm_password", "dob")


async def _fill(form: RegistrationForm, record) -> None:
    for name in TEXT_FIELDS:
        await form.apply(TextFieldChange(name=name, value=getattr(record, name)))
    await form.apply(SelectFieldChange(value=record.gender))
    for interest in record.interests:
        await form.apply(CheckboxFieldChange(id=interest, checked=True))


@pytest.mark.parametrize("strategy", ["regex", "schema"])
def test_failed_submit_keeps_record_and_errors(strategy):
    submitted = []
    form = RegistrationForm(get_strategy(strategy), sink=lambda name, record: submitted.append(record))

    async def scenario():
        await form.apply(TextFieldChange(name="email", value="bad"))
        return await form.submit()

    assert asyncio.run(scenario()) is False
    assert form.record.email == "bad"
    assert form.errors["email"] == "Invalid email format"
    assert len(form.errors) == 9
    assert submitted == []


@pytest.mark.parametrize("strategy", ["regex", "schema"])
def test_successful_submit_emits_and_resets(strategy, valid_record):
    submitted = []
    form = RegistrationForm(get_strategy(strategy), sink=lambda name, record: submitted.append((name, record)))

    async def scenario():
        await _fill(form, valid_record)
        form.errors = {"email": "stale"}
        return await form.submit()

    assert asyncio.run(scenario()) is True
    assert submitted == [(strategy, valid_record)]
    assert form.errors == {}
    assert form.record.first_name == ""
    assert form.snapshot().valid is True


def test_reset_clears_record_and_errors():
    form = RegistrationForm(get_strategy("regex"))

    async def scenario():
        await form.apply(TextFieldChange(name="first_name", value="John"))
        await form.submit()
        await form.reset()

    asyncio.run(scenario())

    assert form.record.first_name == ""
    assert form.errors == {}


def test_snapshot_reports_state():
    form = RegistrationForm(get_strategy("schema"))

    async def scenario():
        await form.apply(CheckboxFieldChange(id="coding", checked=True))
        await form.submit()

    asyncio.run(scenario())
    state = form.snapshot("abc")

    assert state.id == "abc"
    assert state.strategy == "schema"
    assert state.record.interests == ["coding"]
    assert state.valid is False
    assert "interests" not in state.errors


def test_concurrent_submits_run_one_pass_at_a_time():
    events = []
    results = [{"email": "Invalid email format"}, {}]
    submitted = []

    async def validate(record):
        events.append("enter")
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        events.append("exit")
        return results.pop(0)

    form = RegistrationForm(
        ValidationStrategy("recording", "Recording", validate),
        sink=lambda name, record: submitted.append(record),
    )

    async def scenario():
        return await asyncio.gather(form.submit(), form.submit())

    assert asyncio.run(scenario()) == [False, True]
    assert events == ["enter", "exit", "enter", "exit"]
    assert form.errors == {}
    assert len(submitted) == 1


def test_reset_during_validation_waits_for_the_pass():
    form = RegistrationForm(get_strategy("schema"))

    async def scenario():
        await form.apply(TextFieldChange(name="email", value="bad"))
        await asyncio.gather(form.submit(), form.reset())

    asyncio.run(scenario())

    assert form.record.email == ""
    assert form.errors == {}


def test_edit_during_successful_pass_is_kept(valid_record):
    submitted = []
    form = RegistrationForm(get_strategy("schema"), sink=lambda name, record: submitted.append(record))

    async def scenario():
        await _fill(form, valid_record)
        await asyncio.gather(
            form.submit(),
            form.apply(TextFieldChange(name="first_name", value="Jane")),
        )

    asyncio.run(scenario())

    assert submitted == [valid_record]
    assert form.record.first_name == "Jane"
    assert form.errors == {}


def test_unknown_strategy():
    with pytest.raises(UnknownStrategyError):
        get_strategy("yup")


def test_store_evicts_oldest_form():
    store = FormStore(limit=2)
    first_id, _ = store.create("regex")
    second_id, _ = store.create("schema")
    third_id, _ = store.create("regex")

    assert len(store) == 2
    with pytest.raises(FormNotFoundError):
        store.get(first_id)
    assert store.get(second_id).strategy.name == "schema"
    assert store.get(third_id).strategy.name == "regex"


def test_store_discard():
    store = FormStore(limit=5)
    form_id, _ = store.create("regex")

    store.discard(form_id)

    with pytest.raises(FormNotFoundError):
        store.discard(form_id)


def test_redact_masks_passwords(valid_record, caplog):
    payload = redact(valid_record)

    assert payload["password"] == "********"
    assert payload["confirm_password"] == "********"
    assert payload["email"] == valid_record.email

    form = RegistrationForm(get_strategy("regex"))

    async def scenario():
        await _fill(form, valid_record)
        await form.submit()

    with caplog.at_level(logging.INFO, logger="app.services.submission_sink"):
        asyncio.run(scenario())

    assert "Form submitted successfully" in caplog.text
    assert valid_record.password not in caplog.text
