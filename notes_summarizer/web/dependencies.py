"""
FastAPI Dependencies

Builds the provider-facing components from the configuration stored on
the application. Tests replace these through ``app.dependency_overrides``.
"""

from typing import Iterator

import requests
from fastapi import Depends, Request

from ..ai.completion_client import ChatCompletionClient
from ..ai.summarizer import MeetingSummarizer
from ..core.config import ConfigManager
from ..mail.sender import EmailSender
from ..workflow.controller import RelayClient, WorkflowController
from ..workflow.relays import LocalRelay


def get_app_config(request: Request) -> ConfigManager:
    return request.app.state.config


def get_summarizer(request: Request) -> MeetingSummarizer:
    config = get_app_config(request)
    return MeetingSummarizer(
        ChatCompletionClient(config.completion),
        strict=config.app.strict_summary_responses,
    )


def get_email_sender(request: Request) -> EmailSender:
    return EmailSender(get_app_config(request).email)


def get_workflow_controller(
    request: Request,
    summarizer: MeetingSummarizer = Depends(get_summarizer),
    sender: EmailSender = Depends(get_email_sender)
) -> Iterator[WorkflowController]:
    """
    Controller for the page handlers.

    The relays run in-process unless ``relay_base_url`` points the page at
    a separately deployed relay server.
    """
    app_config = get_app_config(request).app
    if not app_config.relay_base_url:
        yield WorkflowController(LocalRelay(summarizer, sender))
        return

    with requests.Session() as http:
        yield WorkflowController(
            RelayClient(http, app_config.relay_base_url, timeout=app_config.relay_timeout_seconds)
        )
