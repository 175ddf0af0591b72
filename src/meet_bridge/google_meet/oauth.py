"""
Google OAuth flow for Meet space creation.

Handles:
- Authorization URL generation with Meet scopes
- Authorization code exchange
- Token refresh

Nothing is stored: tokens live only for the request that obtained them.
"""

import json
import logging
from typing import Any, Protocol

import requests

from .config import GoogleMeetConfig, is_absolute_http_uri
from .errors import ConfigurationError, InvalidArgumentError, TokenExchangeError

logger = logging.getLogger(__name__)


class AuthUrlBuilder:
    """Builds the Google OAuth authorization URL for the Meet scopes."""

    def __init__(self, config: GoogleMeetConfig) -> None:
        self.config = config

    def build_authorization_url(self, state: str | None = None) -> str:
        """
        Generate the Google OAuth authorization URL.

        Args:
            state: Opaque value echoed back on the redirect (CSRF protection)

        Returns:
            The authorization URL

        Raises:
            ConfigurationError: If client ID or redirect URI is missing or invalid
        """
        if not self.config.client_id:
            raise ConfigurationError("GOOGLE_OAUTH_CLIENT_ID is not configured")
        if not self.config.redirect_uri:
            raise ConfigurationError("GOOGLE_OAUTH_REDIRECT_URI is not configured")
        if not is_absolute_http_uri(self.config.redirect_uri):
            raise ConfigurationError(
                f"Redirect URI is not an absolute URI: {self.config.redirect_uri}"
            )

        params = {
            "client_id": self.config.client_id,
            "redirect_uri": self.config.redirect_uri,
            "response_type": "code",
            "scope": " ".join(self.config.scopes),
            "access_type": "offline",  # Get refresh token
            "prompt": "consent",  # Always show consent to get refresh token
        }
        if state:
            params["state"] = state

        query = "&".join(
            f"{k}={requests.utils.quote(str(v), safe='')}" for k, v in params.items()
        )
        url = f"{self.config.authorization_endpoint_url}?{query}"
        logger.info("Generated authorization URL for client %s", self.config.client_id)
        return url

    def get_authorization_url(self, state: str | None = None) -> str | None:
        """
        Generate the authorization URL, returning None instead of raising.

        Callers tell success from failure by whether a URL came back.
        """
        try:
            return self.build_authorization_url(state)
        except ConfigurationError as e:
            logger.warning("Could not generate authorization URL: %s", e)
            return None


class TokenEndpoint(Protocol):
    """Transport used to talk to the OAuth token endpoint."""

    def post_form(self, url: str, data: dict[str, str]) -> tuple[int, str]:
        """POST a form-encoded body and return (status_code, response_text)."""
        ...


class RequestsTokenEndpoint:
    """Token endpoint transport backed by a requests session."""

    def __init__(
        self,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()

    def post_form(self, url: str, data: dict[str, str]) -> tuple[int, str]:
        resp = self.session.post(url, data=data, timeout=self.timeout)
        return resp.status_code, resp.text


class TokenExchanger:
    """Exchanges authorization codes and refresh tokens for access tokens."""

    def __init__(self, config: GoogleMeetConfig, endpoint: TokenEndpoint) -> None:
        self.config = config
        self.endpoint = endpoint

    def exchange_code_for_token(self, code: str | None) -> str:
        """
        Exchange an authorization code for an access token.

        Args:
            code: Authorization code from Google

        Returns:
            The access token. Empty string if the provider answered 200
            without an ``access_token`` field.

        Raises:
            InvalidArgumentError: If code is empty
            TokenExchangeError: If the token endpoint call fails
        """
        if not code:
            raise InvalidArgumentError("Authorization code cannot be empty")

        data = self._post(
            {
                "code": code,
                "client_id": self.config.client_id,
                "client_secret": self.config.client_secret,
                "redirect_uri": self.config.redirect_uri,
                "grant_type": "authorization_code",
            },
            action="Token exchange",
        )
        logger.info("Exchanged authorization code for access token")
        return self._access_token(data)

    def refresh_access_token(self, refresh_token: str | None) -> str:
        """
        Get a new access token using a refresh token.

        Raises:
            InvalidArgumentError: If refresh_token is empty
            TokenExchangeError: If the token endpoint call fails
        """
        if not refresh_token:
            raise InvalidArgumentError("Refresh token cannot be empty")

        data = self._post(
            {
                "client_id": self.config.client_id,
                "client_secret": self.config.client_secret,
                "refresh_token": refresh_token,
                "grant_type": "refresh_token",
            },
            action="Token refresh",
        )
        logger.info("Refreshed access token")
        return self._access_token(data)

    def _post(self, form: dict[str, str], action: str) -> dict[str, Any]:
        """POST to the token endpoint and return the decoded JSON object."""
        try:
            status, body = self.endpoint.post_form(self.config.token_endpoint_url, form)
        except requests.RequestException as e:
            logger.error("%s failed: %s", action, e)
            raise TokenExchangeError(f"{action} failed: {e}") from e

        if status != 200 or not body:
            logger.error("%s failed: %s %s", action, status, body)
            raise TokenExchangeError(f"{action} failed with status {status}")

        try:
            data = json.loads(body)
        except ValueError as e:
            raise TokenExchangeError(f"{action} returned invalid JSON") from e

        if not isinstance(data, dict):
            raise TokenExchangeError(f"{action} returned unexpected payload")

        return data

    @staticmethod
    def _access_token(data: dict[str, Any]) -> str:
        token = data.get("access_token")
        if not token:
            logger.warning("Token response did not include an access_token")
            return ""
        return str(token)
