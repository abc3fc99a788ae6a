"""
Shared fixtures: an app built from a test configuration, with the
provider-facing dependencies replaced by mocks.
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from notes_summarizer.ai.summarizer import MeetingSummarizer
from notes_summarizer.core.config import ConfigManager
from notes_summarizer.mail.sender import EmailSender
from notes_summarizer.web.app import create_app, limiter
from notes_summarizer.web.dependencies import get_email_sender, get_summarizer


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()


@pytest.fixture
def config(tmp_path, monkeypatch):
    """Configuration loaded from a clean environment (no .env, no config.yaml)."""
    monkeypatch.setenv("GROQ_API_KEY", "test-key")
    monkeypatch.setenv("EMAIL_USER", "sender@example.com")
    monkeypatch.setenv("EMAIL_PASS", "app-password")
    return ConfigManager(
        env_file=str(tmp_path / ".env"),
        config_file=str(tmp_path / "config.yaml"),
    )


@pytest.fixture
def app(config):
    return create_app(config)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def completion_client():
    """Mock ChatCompletionClient."""
    client = Mock()
    client.create_completion = Mock()
    return client


@pytest.fixture
def mock_sender():
    """Mock EmailSender."""
    return Mock(spec=EmailSender)


@pytest.fixture
def relay_client(app, completion_client, mock_sender):
    """Client for an app whose relays talk to mocked providers."""
    app.dependency_overrides[get_summarizer] = lambda: MeetingSummarizer(completion_client)
    app.dependency_overrides[get_email_sender] = lambda: mock_sender
    yield TestClient(app)
    app.dependency_overrides.clear()
