"""Shared test fixtures and configuration."""
import os

import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("OPENAI_API_KEY", "test-key")
os.environ.setdefault("TWILIO_ACCOUNT_SID", "test-sid")
os.environ.setdefault("TWILIO_AUTH_TOKEN", "test-token")
os.environ.setdefault("TWILIO_CALLER_ID", "+15005550006")

from call_agent.main import app
from call_agent.core.config import Settings
from call_agent.core.dependencies import (
    get_call_service,
    get_script_service,
    get_session_manager,
    get_telephony_provider,
)
from call_agent.services.call_session.manager import CallSessionManager
from call_agent.services.script.generator import ScriptGenerationService
from call_agent.services.telephony.initiator import CallInitiationService
from tests.fake_providers import (
    CALLER_ID,
    FakeScriptGenerator,
    FakeTelephonyProvider,
    instant_sleep,
)


@pytest.fixture
def test_settings():
    """Override settings for testing."""
    return Settings(
        openai_api_key="test-key",
        twilio_account_sid="test-sid",
        twilio_auth_token="test-token",
        twilio_caller_id="+15557654321",
        status_poll_interval_seconds=0.01,
    )


@pytest.fixture
def fake_provider():
    """Telephony provider whose call completes on the first status fetch."""
    return FakeTelephonyProvider()


@pytest.fixture
def fake_generator():
    """Script generator returning SAMPLE_SCRIPT."""
    return FakeScriptGenerator()


@pytest.fixture
def script_service(fake_generator):
    """Script generation service backed by the fake generator."""
    return ScriptGenerationService(fake_generator)


@pytest.fixture
def call_service(fake_provider):
    """Call initiation service backed by the fake provider."""
    return CallInitiationService(fake_provider, from_number=CALLER_ID)


@pytest.fixture
async def session_manager(script_service, call_service, fake_provider):
    """Session manager that polls without waiting between fetches."""
    manager = CallSessionManager(
        script_service=script_service,
        call_service=call_service,
        provider=fake_provider,
        sleep=instant_sleep,
    )
    yield manager
    await manager.close()


@pytest.fixture
def client_session_manager(script_service, call_service, fake_provider):
    """Session manager served to the test client."""
    return CallSessionManager(
        script_service=script_service,
        call_service=call_service,
        provider=fake_provider,
        sleep=instant_sleep,
    )


@pytest.fixture
def test_client(script_service, call_service, fake_provider, client_session_manager):
    """Create FastAPI test client with overrides."""
    app.dependency_overrides[get_script_service] = lambda: script_service
    app.dependency_overrides[get_call_service] = lambda: call_service
    app.dependency_overrides[get_telephony_provider] = lambda: fake_provider
    app.dependency_overrides[get_session_manager] = lambda: client_session_manager

    with TestClient(app) as client:
        yield client
        # Polling tasks live on the client's event loop
        client.portal.call(client_session_manager.close)

    # Clear overrides
    app.dependency_overrides.clear()
