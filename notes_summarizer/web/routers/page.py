"""
Page Router

The single summarizer page. The browser posts the whole form on every
action; the session state travels in the form fields, so the server
keeps nothing between requests.
"""

import logging
from typing import List, Optional, Sequence

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse

from ..app import PAGE_RATE_LIMIT, limiter
from ..dependencies import get_workflow_controller
from ...documents.extractor import SUPPORTED_EXTENSIONS
from ...workflow import session
from ...workflow.controller import WorkflowController
from ...workflow.session import Notification, SessionState, TransitionResult


logger = logging.getLogger(__name__)

router = APIRouter()


def render_page(request: Request, state: SessionState, notifications: Sequence[Notification] = ()):
    templates = request.app.state.templates

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": state,
            "notifications": notifications,
            "accept": ",".join(SUPPORTED_EXTENSIONS),
        }
    )


def parse_index(value: str) -> Optional[int]:
    try:
        return int(value)
    except ValueError:
        return None


def apply_action(
    controller: WorkflowController,
    state: SessionState,
    action: str,
    file: Optional[UploadFile] = None
) -> TransitionResult:
    """
    Map a submitted form action to one workflow transition.

    Actions: upload, generate, send, add_recipient, remove_recipient:<index>.
    Unknown actions re-render the submitted state unchanged.
    """
    name, _, argument = action.partition(":")

    if name == "upload":
        if file is None or not file.filename:
            return controller.upload(state, "", b"")
        return controller.upload(state, file.filename, file.file.read())

    if name == "generate":
        return controller.generate(state)

    if name == "send":
        return controller.send(state)

    if name == "add_recipient":
        return TransitionResult(session.add_recipient(state))

    if name == "remove_recipient":
        index = parse_index(argument)
        if index is not None:
            return TransitionResult(session.remove_recipient(state, index))

    logger.warning(f"Ignoring unknown page action: {action!r}")
    return TransitionResult(state)


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    """Render the page with an empty session."""
    return render_page(request, SessionState())


@router.post("/", response_class=HTMLResponse)
@limiter.limit(PAGE_RATE_LIMIT)
def submit(
    request: Request,
    action: str = Form("generate"),
    transcript: str = Form(""),
    instruction: str = Form(""),
    summary: str = Form(""),
    file_name: str = Form(""),
    recipients: List[str] = Form([]),
    file: Optional[UploadFile] = File(None),
    controller: WorkflowController = Depends(get_workflow_controller)
):
    """Apply one action to the submitted session snapshot and re-render."""
    state = SessionState(
        transcript_text=transcript,
        instruction_text=instruction,
        summary_text=summary,
        recipients=tuple(recipients),
        file_name=file_name,
    )

    result = apply_action(controller, state, action, file)

    return render_page(request, result.state, result.notifications)
