import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from scam_check.config import Settings, get_settings
from scam_check.main import create_app
from scam_check.services import analysis_service


class FakeCompletions:
    """Stands in for `client.chat.completions`, replaying queued replies."""

    def __init__(self):
        self.replies = []
        self.calls = []

    def queue(self, reply):
        if isinstance(reply, dict):
            reply = json.dumps(reply, ensure_ascii=False)
        self.replies.append(reply)

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        choices = [] if reply is None else [SimpleNamespace(message=SimpleNamespace(content=reply))]
        return SimpleNamespace(choices=choices)


class FakeOpenAI:
    def __init__(self):
        self.completions = FakeCompletions()
        self.chat = SimpleNamespace(completions=self.completions)
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.closed = True


@pytest.fixture
def fake_openai(monkeypatch):
    fake = FakeOpenAI()
    real_build_client = analysis_service.build_client

    def fake_build_client(settings):
        # Keep the missing-key check of the real factory.
        real_build_client(settings)
        return fake

    monkeypatch.setattr(analysis_service, "build_client", fake_build_client)
    return fake


@pytest.fixture
def test_settings():
    return Settings(openai_api_key="test-key", rate_limit_delay_seconds=0.0)


@pytest.fixture
def app(test_settings):
    app = create_app(test_settings)
    app.dependency_overrides[get_settings] = lambda: test_settings
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
