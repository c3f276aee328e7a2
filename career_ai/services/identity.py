import logging
from typing import Optional, Protocol

from career_ai.core import security

logger = logging.getLogger(__name__)


class IdentityResolver(Protocol):
    def resolve(self) -> Optional[str]:
        """Return the caller's principal id, or None when unauthenticated."""
        ...


class BearerTokenIdentityResolver:
    """Resolves the `sub` claim of a signed access token."""

    def __init__(self, token: Optional[str]):
        self.token = token

    def resolve(self) -> Optional[str]:
        if not self.token:
            return None

        payload = security.decode_access_token(self.token)
        if payload is None:
            logger.warning("Authentication failed: Invalid token")
            return None
        if payload.get("error") == "TOKEN_EXPIRED":
            logger.info("Authentication failed: Token expired")
            return None
        if payload.get("type") != "access":
            logger.warning("Authentication failed: Invalid token type")
            return None

        return payload.get("sub") or None


class StaticIdentityResolver:
    def __init__(self, principal: Optional[str]):
        self.principal = principal

    def resolve(self) -> Optional[str]:
        return self.principal
