"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.errors import ConfigurationError
from app.main import app
from app.models.forms import FormSubmission
from app.routers.forms import get_email_dispatcher, get_record_store
from app.services.record_store import RecordStore


class FakeEmailDispatcher:
    """Email dispatcher double that records every send."""

    def __init__(self, succeeds: bool = True):
        self.succeeds = succeeds
        self.sent: list[FormSubmission] = []

    async def send(self, submission: FormSubmission) -> bool:
        self.sent.append(submission)
        return self.succeeds


class FakeRecordStore(RecordStore):
    """Record store double that records every append."""

    backend = "fake"

    def __init__(self, succeeds: bool = True, configured: bool = True):
        self.succeeds = succeeds
        self.configured = configured
        self.rows: list[tuple[str, str, str]] = []

    def ensure_configured(self) -> None:
        if not self.configured:
            raise ConfigurationError("Google Sheets not configured")

    async def append(self, name: str, email: str, details: str) -> bool:
        self.rows.append((name, email, details))
        return self.succeeds


@pytest.fixture
def settings() -> Settings:
    """Fully configured settings, isolated from the environment."""
    return Settings(
        _env_file=None,
        resend_api_key="re_test_key",
        from_email="inquiries@studio.test",
        to_email="owner@studio.test",
        record_backend="webhook",
        record_webhook_url="https://hooks.example.test/catch",
    )


@pytest.fixture
def sample_form() -> dict:
    """Submission used across scenarios."""
    return {"name": "Ann", "email": "ann@x.com", "details": "need a site"}


@pytest.fixture
def email_dispatcher() -> FakeEmailDispatcher:
    return FakeEmailDispatcher()


@pytest.fixture
def record_store() -> FakeRecordStore:
    return FakeRecordStore()


@pytest.fixture
def client(settings, email_dispatcher, record_store):
    """Test client with settings and both dispatchers overridden."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_email_dispatcher] = lambda: email_dispatcher
    app.dependency_overrides[get_record_store] = lambda: record_store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides = {}
