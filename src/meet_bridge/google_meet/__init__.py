"""
Google Meet integration package.

Provides OAuth authorization URL generation, token exchange,
and Meet space provisioning.
"""

from .config import GOOGLE_MEET_SCOPES, GoogleMeetConfig
from .errors import (
    ConfigurationError,
    GoogleMeetError,
    InvalidArgumentError,
    SpaceCreationError,
    TokenExchangeError,
)
from .meet_client import GoogleMeetSpacesClient, MeetSpacesClient
from .oauth import AuthUrlBuilder, RequestsTokenEndpoint, TokenEndpoint, TokenExchanger
from .provisioner import MeetingProvisioner, render_join_page
from .state import StateSigner

__all__ = [
    "GOOGLE_MEET_SCOPES",
    "GoogleMeetConfig",
    "GoogleMeetError",
    "ConfigurationError",
    "InvalidArgumentError",
    "TokenExchangeError",
    "SpaceCreationError",
    "AuthUrlBuilder",
    "TokenEndpoint",
    "RequestsTokenEndpoint",
    "TokenExchanger",
    "MeetSpacesClient",
    "GoogleMeetSpacesClient",
    "MeetingProvisioner",
    "render_join_page",
    "StateSigner",
]
