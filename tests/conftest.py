"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and makes fixtures
available to all test modules.
"""

import sys
from pathlib import Path

import pytest

# Add src/ to Python path so we can import meet_bridge without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from meet_bridge.app import create_app  # noqa: E402
from meet_bridge.google_meet.config import GoogleMeetConfig  # noqa: E402
from meet_bridge.google_meet.errors import SpaceCreationError  # noqa: E402

MEETING_URI = "https://meet.example/abc-defg-hij"


class FakeTokenEndpoint:
    """Token endpoint double that records requests and returns a canned reply."""

    def __init__(self, status: int = 200, body: str = '{"access_token": "T1"}') -> None:
        self.status = status
        self.body = body
        self.calls: list[tuple[str, dict[str, str]]] = []

    def post_form(self, url: str, data: dict[str, str]) -> tuple[int, str]:
        self.calls.append((url, data))
        return self.status, self.body


class FakeSpacesClient:
    """Meet spaces double that returns a fixed URI or raises."""

    def __init__(self, meeting_uri: str = MEETING_URI, error: Exception | None = None) -> None:
        self.meeting_uri = meeting_uri
        self.error = error
        self.tokens: list[str] = []

    def create_meet_space(self, bearer_token: str) -> str:
        self.tokens.append(bearer_token)
        if self.error:
            raise self.error
        return self.meeting_uri


@pytest.fixture
def config() -> GoogleMeetConfig:
    return GoogleMeetConfig(
        client_id="client-123",
        client_secret="secret-456",
        redirect_uri="https://app.example.com/api/master/google-meet/create-space",
        token_endpoint_url="https://oauth.example.com/token",
    )


@pytest.fixture
def token_endpoint() -> FakeTokenEndpoint:
    return FakeTokenEndpoint()


@pytest.fixture
def spaces_client() -> FakeSpacesClient:
    return FakeSpacesClient()


@pytest.fixture
def failing_spaces_client() -> FakeSpacesClient:
    return FakeSpacesClient(error=SpaceCreationError("PERMISSION_DENIED"))


@pytest.fixture
def app(config, token_endpoint, spaces_client):
    return create_app(config, token_endpoint=token_endpoint, spaces_client=spaces_client)


@pytest.fixture
def client(app):
    return app.test_client()
