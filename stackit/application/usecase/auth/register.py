"""Register use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from stackit.domain.error import ValidationError
from stackit.domain.service import AuthService, JWTService
from stackit.domain.value import Email, Username


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str
    password: str


class AuthUser(BaseModel):
    """User info returned alongside a fresh token."""

    id: str
    username: str
    email: str


class RegisterResponse(BaseModel):
    """Register response."""

    token: str
    user: AuthUser


class RegisterUseCase:
    """Use case for creating an account with username, email and password."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Steps:
        1. Validate username and email format
        2. Create the user (password stored as bcrypt hash)
        3. Issue a JWT for the new user

        Args:
            request: Register request

        Returns:
            Token and public user info

        Raises:
            ValidationError: If a field is missing or malformed
            ConflictError: If the username or email is taken
        """
        if not request.username or not request.email or not request.password:
            raise ValidationError("Username, email, and password are required")

        try:
            username = Username(request.username)
        except PydanticValidationError:
            raise ValidationError(
                "Username must be 3-50 characters of letters, numbers, '_', '-' or '.'"
            )
        try:
            email = Email(request.email)
        except PydanticValidationError:
            raise ValidationError("Invalid email format")

        with logfire.span("register.execute", username=username.root):
            user = await self.auth_service.register(username, email, request.password)
            token = self.jwt_service.create_token(str(user.id), user.username.root)

            return RegisterResponse(
                token=token,
                user=AuthUser(
                    id=str(user.id),
                    username=user.username.root,
                    email=user.email.root,
                ),
            )
