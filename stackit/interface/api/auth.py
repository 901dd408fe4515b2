"""Bearer token authentication for routes."""

from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from stackit.domain.error import AuthenticationError
from stackit.domain.service import JWTService

# auto_error=False so a missing header surfaces as our own 401
bearer_scheme = HTTPBearer(auto_error=False)


def require_user_id(
    jwt_service: JWTService, credentials: HTTPAuthorizationCredentials | None
) -> str:
    """Resolve the authenticated user's ID from a bearer credential.

    Args:
        jwt_service: JWT service for token verification
        credentials: Parsed ``Authorization: Bearer`` header, if any

    Returns:
        User ID carried by the token

    Raises:
        AuthenticationError: If no token was sent
        JWTError: If the token is invalid or expired
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access token required")

    payload = jwt_service.verify_token(credentials.credentials)
    return payload.user_id
