"""
Meet space provisioning.

Resolves an access token (exchanging an authorization code when no
token is supplied), creates a Meet space and formats the result for
the caller: the raw meeting URI for token-based calls, or a join page
for the browser redirect flow.
"""

import logging

from jinja2 import Template

from .errors import InvalidArgumentError, SpaceCreationError
from .meet_client import MeetSpacesClient
from .oauth import TokenExchanger

logger = logging.getLogger(__name__)

JOIN_PAGE_TEMPLATE = Template(
    """<html>
<head>
    <meta http-equiv="refresh" content="0; url={{ meeting_uri }}" />
    <title>Google Meet</title>
</head>
<body>
    <div style="text-align: center;">
        <h1 style="font-family: inter;">Joining Google Meet...</h1>
        <iframe src="{{ meeting_uri }}" width="600" height="400" allow="camera; microphone" style="border: 0;"></iframe>
    </div>
</body>
</html>
""",
    autoescape=True,
)


def render_join_page(meeting_uri: str) -> str:
    """Render an HTML page that redirects to and embeds the meeting."""
    return JOIN_PAGE_TEMPLATE.render(meeting_uri=meeting_uri)


class MeetingProvisioner:
    """Creates Meet spaces from an authorization code or an access token."""

    def __init__(self, tokens: TokenExchanger, spaces: MeetSpacesClient) -> None:
        self.tokens = tokens
        self.spaces = spaces

    def create_space(
        self,
        code: str | None = None,
        access_token: str | None = None,
    ) -> str:
        """
        Create a Meet space.

        Args:
            code: Authorization code from the OAuth redirect
            access_token: Existing access token; takes precedence over code

        Returns:
            The meeting URI when access_token was given, otherwise an
            HTML join page for the meeting

        Raises:
            InvalidArgumentError: If neither code nor access_token is given
            TokenExchangeError: If the code could not be exchanged
            SpaceCreationError: If the Meet API call fails
        """
        if not code and not access_token:
            raise InvalidArgumentError(
                "Either an authorization code or an access token is required"
            )

        token = access_token or self.tokens.exchange_code_for_token(code)

        try:
            meeting_uri = self.spaces.create_meet_space(token)
        except SpaceCreationError:
            logger.exception("Error creating Google Meet space")
            raise
        except Exception as e:
            logger.exception("Error creating Google Meet space")
            raise SpaceCreationError(f"Error creating Google Meet space: {e}") from e

        logger.info("Created Google Meet space: %s", meeting_uri)

        if access_token:
            return meeting_uri
        return render_join_page(meeting_uri)

    def refresh_access_token(self, refresh_token: str | None) -> str:
        """Get a fresh access token from a refresh token."""
        return self.tokens.refresh_access_token(refresh_token)
