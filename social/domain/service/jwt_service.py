"""JWT token domain service."""

import logfire
from pydantic import ValidationError

from social.config import AuthSettings
from social.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service

BEARER_PREFIX = "bearer "


class JWTService(Service):
    """Domain service for JWT token operations.

    The caller identity is taken from the token as-is; no further lookup of
    the user is made.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, name: str = "", avatar: str = "") -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            name: Display name
            avatar: Avatar URL

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, name, avatar, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string, optionally prefixed with ``Bearer``

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            token = strip_bearer(token)
            try:
                payload = verify_token(token, self.auth_settings)
            except ValidationError as e:
                logfire.warn("JWT payload missing required claims")
                raise JWTError("Invalid token payload") from e
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            logfire.info("JWT token verified", user_id=str(payload.user_id))
            return payload

    def get_caller_from_token(self, token: str | None) -> TokenPayload | None:
        """Extract the caller from a JWT token without raising exceptions.

        Args:
            token: JWT token or ``Authorization`` header value (optional)

        Returns:
            Token payload if valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token)
        except JWTError as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None


def strip_bearer(value: str) -> str:
    """Strip a case-insensitive ``Bearer`` scheme from a header value."""
    value = value.strip()
    if value.lower().startswith(BEARER_PREFIX):
        return value[len(BEARER_PREFIX) :].strip()
    return value
