"""Form handling endpoints"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import asyncio
import logging

from app.config import Settings, get_settings
from app.errors import ConfigurationError
from app.models.forms import (
    ErrorResponse,
    FormSubmitErrorResponse,
    FormSubmitRequest,
    FormSubmitResponse,
)
from app.services.email_service import EmailDispatcher
from app.services.outcome import DispatchOutcome, aggregate_outcomes
from app.services.record_store import RecordStore, get_cached_record_store

logger = logging.getLogger(__name__)
router = APIRouter()


def get_email_dispatcher(settings: Settings = Depends(get_settings)) -> EmailDispatcher:
    return EmailDispatcher(settings)


def get_record_store(settings: Settings = Depends(get_settings)) -> RecordStore:
    return get_cached_record_store(settings)


@router.post(
    "/submit-form",
    response_model=FormSubmitResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": FormSubmitErrorResponse},
    },
)
async def submit_form(
    form: FormSubmitRequest,
    settings: Settings = Depends(get_settings),
    email_dispatcher: EmailDispatcher = Depends(get_email_dispatcher),
    record_store: RecordStore = Depends(get_record_store),
):
    """Handle an inquiry submission (PUBLIC endpoint)

    Emails the inquiry and records it in the sheet. Both dispatches are
    always attempted; the response reports each one's result.
    """
    submission = form.to_submission()

    if not settings.to_email or not settings.from_email:
        logger.error("TO_EMAIL or FROM_EMAIL is not set")
        raise ConfigurationError()

    record_store.ensure_configured()

    logger.info(f"Inquiry received from {submission.name}")

    if record_store.enabled:
        email_ok, record_ok = await asyncio.gather(
            email_dispatcher.send(submission),
            record_store.append(submission.name, submission.email, submission.details),
        )
        record_outcome = DispatchOutcome(attempted=True, succeeded=record_ok)
    else:
        email_ok = await email_dispatcher.send(submission)
        record_outcome = None

    status_code, body = aggregate_outcomes(
        DispatchOutcome(attempted=True, succeeded=email_ok),
        record_outcome,
    )
    logger.info(f"Inquiry from {submission.name} handled: status={status_code} body={body}")

    return JSONResponse(status_code=status_code, content=body)
