"""
Relay API Router

Stateless endpoints that forward to the chat-completion provider and the
SMTP relay and normalize their responses to {summary|message} or {error}.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..app import RELAY_RATE_LIMIT, limiter
from ..dependencies import get_email_sender, get_summarizer
from ...ai.summarizer import MeetingSummarizer
from ...mail.sender import EmailSender
from ...workflow.relays import RELAY_FAILURE_MESSAGES, RelayResult, handle_send_email, handle_summarize


logger = logging.getLogger(__name__)

router = APIRouter()


class SummarizeRequest(BaseModel):
    """Transcript plus the user's instruction."""
    transcript: Optional[str] = None
    prompt: Optional[str] = None


class SendEmailRequest(BaseModel):
    """Recipient list plus the (possibly edited) summary."""
    recipients: Optional[List[str]] = None
    summary: Optional[str] = None


class SummaryResponse(BaseModel):
    summary: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


def relay_response(result: RelayResult) -> JSONResponse:
    status_code, body = result
    return JSONResponse(status_code=status_code, content=body)


async def relay_validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Answer unparseable relay bodies with the relay's generic 500 error.

    Requests outside the relays keep FastAPI's default 422 response.
    """
    message = RELAY_FAILURE_MESSAGES.get(request.url.path)
    if message is None:
        return await request_validation_exception_handler(request, exc)

    problems = ", ".join(error["type"] for error in exc.errors())
    logger.error(f"Malformed request body for {request.url.path}: {problems}")
    return JSONResponse(status_code=500, content={"error": message})


@router.post(
    "/summarize",
    response_model=SummaryResponse,
    responses={500: {"model": ErrorResponse}},
)
@limiter.limit(RELAY_RATE_LIMIT)
def summarize(
    request: Request,
    body: SummarizeRequest,
    summarizer: MeetingSummarizer = Depends(get_summarizer)
):
    """Generate a summary of a transcript."""
    return relay_response(handle_summarize(summarizer, body.transcript or "", body.prompt or ""))


@router.post(
    "/sendEmail",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@limiter.limit(RELAY_RATE_LIMIT)
def send_email(
    request: Request,
    body: SendEmailRequest,
    sender: EmailSender = Depends(get_email_sender)
):
    """Email a summary to a list of recipients."""
    return relay_response(handle_send_email(sender, body.recipients or [], body.summary or ""))
