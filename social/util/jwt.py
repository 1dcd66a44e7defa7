"""Encoding and decoding of bearer tokens with PyJWT."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel

from social.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by a bearer token.

    ``name`` and ``avatar`` are the display details copied onto posts and
    comments when a request omits them.
    """

    user_id: UUID
    name: str = ""
    avatar: str = ""
    exp: datetime


class JWTError(Exception):
    """Token could not be verified."""


def create_token(
    user_id: str, name: str, avatar: str, settings: AuthSettings
) -> str:
    """Sign a token for ``user_id`` that expires after ``jwt_expiry_days``."""
    claims = {
        "user_id": user_id,
        "name": name,
        "avatar": avatar,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a token's signature and expiry and return its claims.

    Raises:
        JWTError: If the token is expired or malformed
        pydantic.ValidationError: If required claims are missing
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e
    return TokenPayload(**claims)
