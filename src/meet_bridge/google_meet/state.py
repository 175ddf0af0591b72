"""
Signed OAuth state tokens.

The state parameter round-trips through Google on the redirect. Signing
it lets the create-space callback reject forged or stale redirects
without storing anything server-side.

Token format: ``<nonce>.<issued_at>.<signature>`` where the signature is
an HMAC-SHA256 of ``<nonce>.<issued_at>``, base64url-encoded.
"""

import base64
import hashlib
import hmac
import secrets
import time
from collections.abc import Callable


class StateSigner:
    """Issues and verifies HMAC-signed OAuth state tokens."""

    def __init__(
        self,
        secret: str,
        max_age: float = 600.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._key = secret.encode()
        self.max_age = max_age
        self._clock = clock

    def issue(self) -> str:
        """Create a new state token."""
        payload = f"{secrets.token_urlsafe(16)}.{int(self._clock())}"
        return f"{payload}.{self._sign(payload)}"

    def verify(self, token: str | None) -> bool:
        """
        Check a state token's signature and age.

        Returns:
            True if the token was issued by this signer and has not expired
        """
        if not token or not self._key:
            return False

        payload, _, signature = token.rpartition(".")
        if not payload or not signature:
            return False
        if not hmac.compare_digest(signature.encode(), self._sign(payload).encode()):
            return False

        _, _, issued_at = payload.partition(".")
        try:
            age = self._clock() - int(issued_at)
        except ValueError:
            return False

        return 0 <= age <= self.max_age

    def _sign(self, payload: str) -> str:
        digest = hmac.new(self._key, payload.encode(), hashlib.sha256).digest()
        return base64.urlsafe_b64encode(digest).rstrip(b"=").decode()
