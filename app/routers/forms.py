import logging

from fastapi import APIRouter, status

from app.schemas.user_info import FieldChange, StrategyInfo, UserInfo, ValidationResponse
from app.services.form_session import VALIDATION_STRATEGIES, form_store, get_strategy
from app.services.submission_sink import log_rejection, log_submission
from app.utils.response import create_response, handle_exception

router = APIRouter(prefix="/forms", tags=["Forms"])
logger = logging.getLogger(__name__)


def _validation_response(errors: dict[str, str], success_message: str):
    payload = ValidationResponse(valid=not errors, errors=errors).model_dump()
    if errors:
        return create_response(
            message="Form validation failed",
            data=payload,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
        )
    return create_response(message=success_message, data=payload, status_code=status.HTTP_200_OK)


@router.get("")
async def list_strategies():
    try:
        strategies = [
            StrategyInfo(name=strategy.name, title=strategy.title).model_dump()
            for strategy in VALIDATION_STRATEGIES.values()
        ]
        return create_response(
            message="Validation strategies fetched successfully",
            data={"count": len(strategies), "strategies": strategies},
            status_code=status.HTTP_200_OK
        )
    except Exception as exc:
        return handle_exception(exc)


@router.post("/{strategy}/validate")
async def validate_record(strategy: str, record: UserInfo):
    try:
        errors = await get_strategy(strategy).validate(record)
        return _validation_response(errors, "Form is valid")
    except Exception as exc:
        return handle_exception(exc)


@router.post("/{strategy}/submit")
async def submit_record(strategy: str, record: UserInfo):
    try:
        selected = get_strategy(strategy)
        errors = await selected.validate(record)
        if errors:
            log_rejection(selected.name, errors)
        else:
            log_submission(selected.name, record)
        return _validation_response(errors, "Form submitted successfully")
    except Exception as exc:
        return handle_exception(exc)


@router.post("/{strategy}/sessions")
async def create_form(strategy: str):
    try:
        form_id, form = form_store.create(strategy)
        logger.info("Opened %s form %s", strategy, form_id)
        return create_response(
            message="Form created successfully",
            data=form.snapshot(form_id).model_dump(),
            status_code=status.HTTP_201_CREATED
        )
    except Exception as exc:
        return handle_exception(exc)


@router.get("/sessions/{form_id}")
async def get_form(form_id: str):
    try:
        form = form_store.get(form_id)
        return create_response(
            message="Form fetched successfully",
            data=form.snapshot(form_id).model_dump(),
            status_code=status.HTTP_200_OK
        )
    except Exception as exc:
        return handle_exception(exc)


@router.patch("/sessions/{form_id}")
async def change_field(form_id: str, change: FieldChange):
    try:
        form = form_store.get(form_id)
        await form.apply(change)
        return create_response(
            message="Field updated successfully",
            data=form.snapshot(form_id).model_dump(),
            status_code=status.HTTP_200_OK
        )
    except Exception as exc:
        return handle_exception(exc)


@router.post("/sessions/{form_id}/submit")
async def submit_form(form_id: str):
    try:
        form = form_store.get(form_id)
        submitted = await form.submit()
        state = form.snapshot(form_id).model_dump()
        if not submitted:
            return create_response(
                message="Form validation failed",
                data=state,
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
            )
        return create_response(
            message="Form submitted successfully",
            data=state,
            status_code=status.HTTP_200_OK
        )
    except Exception as exc:
        return handle_exception(exc)


@router.post("/sessions/{form_id}/reset")
async def reset_form(form_id: str):
    try:
        form = form_store.get(form_id)
        await form.reset()
        return create_response(
            message="Form reset successfully",
            data=form.snapshot(form_id).model_dump(),
            status_code=status.HTTP_200_OK
        )
    except Exception as exc:
        return handle_exception(exc)


@router.delete("/sessions/{form_id}")
async def delete_form(form_id: str):
    try:
        form_store.discard(form_id)
        return create_response(
            message="Form discarded successfully",
            data={"id": form_id},
            status_code=status.HTTP_200_OK
        )
    except Exception as exc:
        return handle_exception(exc)
