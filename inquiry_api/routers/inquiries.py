# inquiry_api/routers/inquiries.py
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SchemaError
from starlette.concurrency import run_in_threadpool

from inquiry_api.deps import get_inquiry_handler
from inquiry_api.schemas import InquiryIn, InquiryOut
from inquiry_api.services.inquiry import InquiryHandler
from inquiry_api.services.validation import MISSING_FIELDS_REASON

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["inquiries"])


def _reject(message: str) -> JSONResponse:
    return JSONResponse(InquiryOut(success=False, message=message).model_dump(), status_code=400)


@router.post("/send-email", response_model=InquiryOut)
async def send_email(request: Request, handler: InquiryHandler = Depends(get_inquiry_handler)):
    # --- Parse body ourselves so a bad payload is a 400 with our message, not a 422 ---
    try:
        raw = await request.json()
    except ValueError:
        raw = {}
    if not isinstance(raw, dict):
        raw = {}

    try:
        payload = InquiryIn(**raw)
    except SchemaError as e:
        log.info("Inquiry rejected (malformed body): %s", e.error_count())
        return _reject(MISSING_FIELDS_REASON)

    # delivery blocks on the provider; keep it off the event loop
    result = await run_in_threadpool(handler.submit, payload)
    return JSONResponse(
        InquiryOut(success=result.success, message=result.message).model_dump(),
        status_code=result.status_code,
    )
