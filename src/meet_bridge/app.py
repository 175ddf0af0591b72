"""
Flask application factory for the Meet bridge service.

Wires the Google Meet components once at startup and registers the
HTTP routes.
"""

import logging
import os

from flask import Flask

from .google_meet.config import GoogleMeetConfig
from .google_meet.meet_client import GoogleMeetSpacesClient, MeetSpacesClient
from .google_meet.oauth import (
    AuthUrlBuilder,
    RequestsTokenEndpoint,
    TokenEndpoint,
    TokenExchanger,
)
from .google_meet.provisioner import MeetingProvisioner
from .google_meet.routes import EXTENSION_KEY, GoogleMeetServices, google_meet_bp
from .google_meet.state import StateSigner

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from LOG_LEVEL (default INFO)."""
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)


def create_app(
    config: GoogleMeetConfig | None = None,
    token_endpoint: TokenEndpoint | None = None,
    spaces_client: MeetSpacesClient | None = None,
) -> Flask:
    """
    Create the Flask app.

    Args:
        config: OAuth configuration (defaults to environment variables)
        token_endpoint: Token endpoint transport (defaults to requests)
        spaces_client: Meet space client (defaults to the Meet API)

    Returns:
        Configured Flask application
    """
    config = config or GoogleMeetConfig.from_env()

    errors = config.validate()
    if errors:
        for error in errors:
            logger.warning("Google Meet config: %s", error)

    tokens = TokenExchanger(
        config, token_endpoint or RequestsTokenEndpoint(timeout=config.http_timeout)
    )
    spaces = spaces_client or GoogleMeetSpacesClient(timeout=config.rpc_timeout)

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = GoogleMeetServices(
        config=config,
        auth_urls=AuthUrlBuilder(config),
        provisioner=MeetingProvisioner(tokens, spaces),
        state_signer=StateSigner(config.signing_key, max_age=config.state_max_age),
    )
    app.register_blueprint(google_meet_bp)

    @app.route("/health")
    def health():
        return {"status": "ok"}

    return app
