"""Exceptions raised by the Google Meet integration."""


class GoogleMeetError(Exception):
    """Base class for all Google Meet integration failures."""


class ConfigurationError(GoogleMeetError):
    """OAuth configuration is missing or invalid."""


class InvalidArgumentError(GoogleMeetError, ValueError):
    """A required code or token was not supplied."""


class TokenExchangeError(GoogleMeetError):
    """The OAuth token endpoint rejected the request or returned garbage."""


class SpaceCreationError(GoogleMeetError):
    """The Meet API failed to create a space."""
