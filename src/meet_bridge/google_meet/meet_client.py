"""
Google Meet API v2 client for space creation.

Creates a new Meet space on behalf of the user whose access token
is supplied. The token is used as-is: no expiry tracking or refresh.

API docs: https://developers.google.com/workspace/meet/api/guides/overview
"""

import logging
from typing import Protocol

from google.api_core import exceptions as api_exceptions
from google.apps import meet_v2
from google.auth import exceptions as auth_exceptions
from google.oauth2.credentials import Credentials

from .errors import SpaceCreationError

logger = logging.getLogger(__name__)


class MeetSpacesClient(Protocol):
    """Anything that can create a Meet space for a bearer token."""

    def create_meet_space(self, bearer_token: str) -> str:
        """Create a space and return its meeting URI."""
        ...


class GoogleMeetSpacesClient:
    """Creates Meet spaces through the SpacesService API."""

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = timeout

    def create_meet_space(self, bearer_token: str) -> str:
        """
        Create a Meet space with default settings.

        Args:
            bearer_token: OAuth access token with the meetings.space.created scope

        Returns:
            The meeting URI (e.g. https://meet.google.com/abc-defg-hij)

        Raises:
            SpaceCreationError: If the API rejects the call or is unreachable
        """
        credentials = Credentials(token=bearer_token)
        request = meet_v2.CreateSpaceRequest(space=meet_v2.Space())

        try:
            with meet_v2.SpacesServiceClient(credentials=credentials) as client:
                # Single attempt: no client-side retry
                space = client.create_space(
                    request=request, retry=None, timeout=self.timeout
                )
        except (api_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError) as e:
            raise SpaceCreationError(f"Meet API create_space failed: {e}") from e

        return space.meeting_uri
