"""Shared fixtures: fixed settings, a recording fake item sink, and an ASGI test client.

Invariants:
    - No test performs a real network call to Webflow
    - Settings are built explicitly (never from the developer's .env)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from formbridge.api.endpoints.forms import get_form_submission_service
from formbridge.core.config import Settings, get_settings
from formbridge.main import app
from formbridge.services.form_submission import FormSubmissionService


class FakeItemSink:
    """Records every payload and answers with a canned result or exception."""

    def __init__(self, result=None, error=None):
        self.calls = []
        self.result = result if result is not None else {"id": "abc123"}
        self.error = error

    async def create_item(self, payload):
        self.calls.append(payload)
        if self.error is not None:
            raise self.error
        return self.result


def make_settings(**overrides) -> Settings:
    values = {
        "webflow_api_token": "test-token",
        "webflow_collection_id": "col-123",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def fake_sink():
    return FakeItemSink()


@pytest.fixture
async def client(settings, fake_sink):
    """Test client whose submission service uses the fake sink."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_form_submission_service] = (
        lambda: FormSubmissionService(settings, item_sink=fake_sink)
    )
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
