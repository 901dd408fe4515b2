"""Login use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from stackit.domain.error import AuthenticationError, ValidationError
from stackit.domain.service import AuthService, JWTService
from stackit.domain.value import Email

from .register import AuthUser


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user: AuthUser


class LoginUseCase:
    """Use case for email and password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Args:
            request: Login request

        Returns:
            Token and public user info

        Raises:
            ValidationError: If email or password is missing
            AuthenticationError: If the credentials don't match an account
        """
        if not request.email or not request.password:
            raise ValidationError("Email and password are required")

        try:
            email = Email(request.email)
        except PydanticValidationError:
            # A malformed address can't belong to any account
            raise AuthenticationError("Invalid credentials")

        with logfire.span("login.execute", email=email.root):
            user = await self.auth_service.authenticate(email, request.password)
            token = self.jwt_service.create_token(str(user.id), user.username.root)

            return LoginResponse(
                token=token,
                user=AuthUser(
                    id=str(user.id),
                    username=user.username.root,
                    email=user.email.root,
                ),
            )
