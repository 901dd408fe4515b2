"""Access token issuing and checking."""

import logfire

from stackit.config import AuthSettings
from stackit.util import jwt
from stackit.util.error import JWTError

from .base import Service


class JWTService(Service):
    """Issues access tokens at register/login and checks them on every
    authenticated request."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        """Issue a token for a user who just registered or logged in."""
        token = jwt.create_token(user_id, username, self.auth_settings)
        logfire.info(
            "Access token issued",
            user_id=user_id,
            expires_in_hours=self.auth_settings.jwt_expiry_hours,
        )
        return token

    def verify_token(self, token: str) -> jwt.TokenPayload:
        """Return the claims of a valid token.

        Raises:
            JWTError: If the token is invalid or expired
        """
        try:
            payload = jwt.verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Access token rejected", reason=str(e))
            raise
        logfire.debug("Access token accepted", user_id=payload.user_id)
        return payload
