"""
Meet bridge service.

Flask backend that walks a user through Google OAuth and creates
Google Meet spaces with the resulting access token.
"""

from .app import create_app

__all__ = ["create_app"]
