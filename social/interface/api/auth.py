"""Caller authentication for API routes."""

from fastapi import HTTPException, status

from social.domain.service import JWTService
from social.util.jwt import TokenPayload


def require_caller(
    jwt_service: JWTService, authorization: str | None
) -> TokenPayload:
    """Resolve the caller from an ``Authorization`` header.

    Args:
        jwt_service: JWT service used to verify the token
        authorization: Header value, ``Bearer <token>``

    Returns:
        Verified token payload

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    caller = jwt_service.get_caller_from_token(authorization)
    if caller is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return caller
