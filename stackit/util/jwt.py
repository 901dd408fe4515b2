"""Access token encoding.

Tokens are HS256-signed JWTs carrying the user's id and username. Every
token expires; a token without ``exp`` or ``user_id`` is rejected.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from stackit.config import AuthSettings
from stackit.util.error import JWTError

REQUIRED_CLAIMS = ["exp", "user_id"]


class TokenPayload(BaseModel):
    """Decoded access token claims."""

    user_id: str
    username: str = ""
    exp: datetime


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Issue a signed access token for ``user_id``."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(hours=settings.jwt_expiry_hours),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of ``token`` and return its claims.

    Raises:
        JWTError: If the token is malformed, tampered with, expired or
            missing a required claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid or expired token") from e

    return TokenPayload.model_validate(claims)


__all__ = ["JWTError", "TokenPayload", "create_token", "verify_token"]
