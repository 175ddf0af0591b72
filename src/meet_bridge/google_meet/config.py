"""
Google OAuth configuration for Meet space creation.

Built once at process start and shared read-only by every request.

Environment variables:
    GOOGLE_OAUTH_CLIENT_ID: OAuth 2.0 client ID
    GOOGLE_OAUTH_CLIENT_SECRET: OAuth 2.0 client secret
    GOOGLE_OAUTH_REDIRECT_URI: OAuth redirect URI (auto-detected if not set)
    GOOGLE_OAUTH_TOKEN_URL: Token endpoint (defaults to Google's)
    GOOGLE_OAUTH_AUTH_URL: Authorization endpoint (defaults to Google's)
    GOOGLE_MEET_HTTP_TIMEOUT: Token endpoint timeout in seconds (default: 30)
    GOOGLE_MEET_RPC_TIMEOUT: Meet API timeout in seconds (default: 30)
    GOOGLE_MEET_VERIFY_STATE: Validate the OAuth state on redirect (default: true)
    GOOGLE_MEET_STATE_SECRET: Key for signing state (defaults to client secret)
    GOOGLE_MEET_STATE_MAX_AGE: State lifetime in seconds (default: 600)
"""

import logging
import os
from dataclasses import dataclass, field
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"

CREATE_SPACE_PATH = "/api/master/google-meet/create-space"

# Order matters: it is the order the scopes appear in the authorization URL
GOOGLE_MEET_SCOPES = (
    "https://www.googleapis.com/auth/meetings.space.created",
    "https://www.googleapis.com/auth/meetings",
    "https://www.googleapis.com/auth/calendar",
    "https://www.googleapis.com/auth/userinfo.email",
)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %s", name, raw, default)
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name, "")
    if not raw:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def is_absolute_http_uri(uri: str) -> bool:
    """Check that a URI has an http(s) scheme and a host."""
    parsed = urlparse(uri)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


@dataclass(frozen=True)
class GoogleMeetConfig:
    """OAuth client identity, endpoints and timeouts for Meet provisioning."""

    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""
    token_endpoint_url: str = GOOGLE_TOKEN_URL
    authorization_endpoint_url: str = GOOGLE_AUTH_URL
    scopes: tuple[str, ...] = field(default=GOOGLE_MEET_SCOPES)

    http_timeout: float = 30.0
    rpc_timeout: float = 30.0

    verify_state: bool = True
    state_secret: str = ""
    state_max_age: float = 600.0

    @classmethod
    def from_env(cls) -> "GoogleMeetConfig":
        """Read configuration from environment variables."""
        # Redirect URI (auto-detected from SERVICE_URL if not set)
        redirect_uri = os.getenv("GOOGLE_OAUTH_REDIRECT_URI", "")
        if not redirect_uri:
            service_url = os.getenv("SERVICE_URL", "")
            if service_url:
                redirect_uri = f"{service_url.rstrip('/')}{CREATE_SPACE_PATH}"

        return cls(
            client_id=os.getenv("GOOGLE_OAUTH_CLIENT_ID", ""),
            client_secret=os.getenv("GOOGLE_OAUTH_CLIENT_SECRET", ""),
            redirect_uri=redirect_uri,
            token_endpoint_url=os.getenv("GOOGLE_OAUTH_TOKEN_URL", "") or GOOGLE_TOKEN_URL,
            authorization_endpoint_url=os.getenv("GOOGLE_OAUTH_AUTH_URL", "") or GOOGLE_AUTH_URL,
            http_timeout=_float_env("GOOGLE_MEET_HTTP_TIMEOUT", 30.0),
            rpc_timeout=_float_env("GOOGLE_MEET_RPC_TIMEOUT", 30.0),
            verify_state=_bool_env("GOOGLE_MEET_VERIFY_STATE", True),
            state_secret=os.getenv("GOOGLE_MEET_STATE_SECRET", ""),
            state_max_age=_float_env("GOOGLE_MEET_STATE_MAX_AGE", 600.0),
        )

    @property
    def is_configured(self) -> bool:
        """Check if OAuth credentials are configured."""
        return bool(self.client_id and self.client_secret)

    @property
    def signing_key(self) -> str:
        """Key used to sign OAuth state tokens."""
        return self.state_secret or self.client_secret

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of errors.

        Returns:
            List of error strings (empty if valid)
        """
        errors = []

        if not self.client_id:
            errors.append("GOOGLE_OAUTH_CLIENT_ID is required")
        if not self.client_secret:
            errors.append("GOOGLE_OAUTH_CLIENT_SECRET is required")
        if not self.redirect_uri:
            errors.append(
                "GOOGLE_OAUTH_REDIRECT_URI or SERVICE_URL is required"
            )
        elif not is_absolute_http_uri(self.redirect_uri):
            errors.append(
                f"GOOGLE_OAUTH_REDIRECT_URI must be an absolute URI: {self.redirect_uri}"
            )
        if not is_absolute_http_uri(self.token_endpoint_url):
            errors.append(
                f"GOOGLE_OAUTH_TOKEN_URL must be an absolute URI: {self.token_endpoint_url}"
            )

        return errors

    def to_dict(self) -> dict:
        """Return safe (no secrets) configuration summary."""
        return {
            "configured": self.is_configured,
            "redirect_uri": self.redirect_uri,
            "token_endpoint_url": self.token_endpoint_url,
            "authorization_endpoint_url": self.authorization_endpoint_url,
            "scopes": list(self.scopes),
            "verify_state": self.verify_state,
            "http_timeout": self.http_timeout,
            "rpc_timeout": self.rpc_timeout,
        }
