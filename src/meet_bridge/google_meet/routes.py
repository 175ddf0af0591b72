"""
Flask routes for Google Meet space creation.

Provides:
- /api/master/google-meet/auth - Authorization URL for the OAuth flow
- /api/master/google-meet/create-space - OAuth redirect target, creates a space
- /api/master/google-meet/spaces - Create a space with an existing access token
- /api/master/google-meet/status - Integration configuration summary
"""

import logging
from dataclasses import dataclass

from flask import Blueprint, current_app, jsonify, make_response, request

from .config import GoogleMeetConfig
from .errors import GoogleMeetError, InvalidArgumentError
from .oauth import AuthUrlBuilder
from .provisioner import MeetingProvisioner
from .state import StateSigner

logger = logging.getLogger(__name__)

google_meet_bp = Blueprint("google_meet", __name__, url_prefix="/api/master/google-meet")

EXTENSION_KEY = "google_meet"

ERROR_HTML = "<html><body><h1>Error creating Google Meet space.</h1></body></html>"
HTML_CONTENT_TYPE = "text/html; charset=UTF-8"


@dataclass(frozen=True)
class GoogleMeetServices:
    """Components shared by all requests, wired once by the app factory."""

    config: GoogleMeetConfig
    auth_urls: AuthUrlBuilder
    provisioner: MeetingProvisioner
    state_signer: StateSigner


def _services() -> GoogleMeetServices:
    return current_app.extensions[EXTENSION_KEY]


def _error_page():
    response = make_response(ERROR_HTML, 400)
    response.headers["Content-Type"] = HTML_CONTENT_TYPE
    return response


# ---------------------------------------------------------------------------
# OAuth flow
# ---------------------------------------------------------------------------


@google_meet_bp.route("/auth")
def google_meet_auth():
    """Return the Google OAuth authorization URL as plain text."""
    services = _services()
    if services.config.verify_state and not services.config.signing_key:
        # Callbacks could never verify without a signing key
        logger.warning("Cannot sign OAuth state: GOOGLE_OAUTH_CLIENT_SECRET is not configured")
        return jsonify({"error": "Failed to generate authorization URL"}), 500

    state = services.state_signer.issue()

    auth_url = services.auth_urls.get_authorization_url(state)
    if not auth_url:
        return jsonify({"error": "Failed to generate authorization URL"}), 500

    response = make_response(auth_url, 200)
    response.mimetype = "text/plain"
    return response


@google_meet_bp.route("/create-space")
def google_meet_create_space():
    """Handle the OAuth redirect: exchange the code and create a space."""
    services = _services()
    code = request.args.get("code", "")
    state = request.args.get("state", "")
    error = request.args.get("error")

    if error:
        logger.warning("Google OAuth error: %s", error)
        return _error_page()

    if services.config.verify_state and not services.state_signer.verify(state):
        logger.warning("Rejected create-space callback with invalid or expired state")
        return _error_page()

    try:
        html = services.provisioner.create_space(code=code)
    except GoogleMeetError as e:
        logger.warning("Create space failed: %s", e)
        return _error_page()

    response = make_response(html, 200)
    response.headers["Content-Type"] = HTML_CONTENT_TYPE
    return response


# ---------------------------------------------------------------------------
# API endpoints
# ---------------------------------------------------------------------------


@google_meet_bp.route("/spaces", methods=["POST"])
def google_meet_create_space_with_token():
    """Create a space with a bearer token from the Authorization header."""
    services = _services()
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer":
        token = ""

    try:
        meeting_uri = services.provisioner.create_space(access_token=token.strip())
    except InvalidArgumentError:
        return jsonify({"error": "Missing bearer token"}), 400
    except GoogleMeetError as e:
        logger.warning("Create space failed: %s", e)
        return jsonify({"error": "Error creating Google Meet space"}), 502

    return jsonify({"meeting_uri": meeting_uri}), 201


@google_meet_bp.route("/status")
def google_meet_status():
    """Get Google Meet integration configuration status."""
    config = _services().config
    result = config.to_dict()
    result["errors"] = config.validate()
    return jsonify(result)
