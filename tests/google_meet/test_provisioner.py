"""Tests for MeetingProvisioner."""

import pytest

from meet_bridge.google_meet.errors import (
    InvalidArgumentError,
    SpaceCreationError,
    TokenExchangeError,
)
from meet_bridge.google_meet.oauth import TokenExchanger
from meet_bridge.google_meet.provisioner import MeetingProvisioner, render_join_page

MEETING_URI = "https://meet.example/abc-defg-hij"


@pytest.fixture
def provisioner(config, token_endpoint, spaces_client) -> MeetingProvisioner:
    return MeetingProvisioner(TokenExchanger(config, token_endpoint), spaces_client)


class TestCreateSpace:
    """Tests for create_space."""

    @pytest.mark.parametrize("code,access_token", [("", ""), (None, None), ("", None)])
    def test_no_code_or_token_raises(self, provisioner, token_endpoint, code, access_token):
        with pytest.raises(InvalidArgumentError):
            provisioner.create_space(code=code, access_token=access_token)
        assert token_endpoint.calls == []

    def test_access_token_returns_raw_uri(self, provisioner, token_endpoint, spaces_client):
        result = provisioner.create_space(code="", access_token="T1")

        assert result == MEETING_URI
        assert spaces_client.tokens == ["T1"]
        assert token_endpoint.calls == []

    def test_access_token_takes_precedence_over_code(
        self, provisioner, token_endpoint, spaces_client
    ):
        assert provisioner.create_space(code="validcode", access_token="T9") == MEETING_URI
        assert spaces_client.tokens == ["T9"]
        assert token_endpoint.calls == []

    def test_code_returns_join_page(self, provisioner, token_endpoint, spaces_client):
        html = provisioner.create_space(code="validcode")

        assert f'content="0; url={MEETING_URI}"' in html
        assert f'<iframe src="{MEETING_URI}"' in html
        assert 'allow="camera; microphone"' in html
        assert spaces_client.tokens == ["T1"]
        assert token_endpoint.calls[0][1]["code"] == "validcode"

    def test_token_exchange_failure_propagates(self, provisioner, token_endpoint, spaces_client):
        token_endpoint.status = 401

        with pytest.raises(TokenExchangeError):
            provisioner.create_space(code="badcode")
        assert spaces_client.tokens == []

    def test_space_creation_error_propagates(self, config, token_endpoint, failing_spaces_client):
        provisioner = MeetingProvisioner(
            TokenExchanger(config, token_endpoint), failing_spaces_client
        )
        with pytest.raises(SpaceCreationError, match="PERMISSION_DENIED"):
            provisioner.create_space(access_token="T1")
        assert len(failing_spaces_client.tokens) == 1

    def test_unexpected_client_error_wrapped(self, config, token_endpoint, spaces_client):
        spaces_client.error = RuntimeError("socket closed")
        provisioner = MeetingProvisioner(TokenExchanger(config, token_endpoint), spaces_client)

        with pytest.raises(SpaceCreationError) as exc_info:
            provisioner.create_space(access_token="T1")
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestRefreshAccessToken:
    def test_delegates_to_token_exchanger(self, provisioner, token_endpoint):
        token_endpoint.body = '{"access_token": "T2"}'
        assert provisioner.refresh_access_token("R1") == "T2"
        assert token_endpoint.calls[0][1]["grant_type"] == "refresh_token"


class TestRenderJoinPage:
    def test_escapes_uri(self):
        html = render_join_page('https://meet.example/x"><script>')
        assert "<script>" not in html
        assert "&#34;&gt;&lt;script&gt;" in html

    def test_title(self):
        assert "<title>Google Meet</title>" in render_join_page(MEETING_URI)
