"""Authentication domain service."""

import asyncio
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from stackit.config import AuthSettings
from stackit.domain.error import AuthenticationError, ConflictError, ValidationError
from stackit.domain.model import User
from stackit.domain.model.common import utcnow
from stackit.domain.repository import UserRepository
from stackit.domain.value import Email, UserId, Username
from stackit.util.password import hash_password, verify_password

from .base import Service

MIN_PASSWORD_LENGTH = 6

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


class AuthService(Service):
    """Domain service for password-based registration and login."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt work factor)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(self, username: Username, email: Email, password: str) -> User:
        """Create a new account.

        Args:
            username: Desired username
            email: Email address
            password: Plaintext password

        Returns:
            The created user

        Raises:
            ValidationError: If the password is too short or too long
            ConflictError: If the username or email is already in use
        """
        with logfire.span(
            "auth_service.register", username=username.root, email=email.root
        ):
            self._check_password(password)

            if await self.user_repository.find_by_email(
                email
            ) or await self.user_repository.find_by_username(username):
                logfire.warn(
                    "Registration conflict", username=username.root, email=email.root
                )
                raise ConflictError("Username or email already exists")

            password_hash = await asyncio.to_thread(
                hash_password, password, self.auth_settings
            )
            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=password_hash,
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race against a concurrent registration
                logfire.warn(
                    "Registration conflict on insert",
                    username=username.root,
                    email=email.root,
                )
                raise ConflictError("Username or email already exists")

            logfire.info(
                "User registered", user_id=str(saved.id), username=username.root
            )
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check credentials and record the login.

        Args:
            email: Email address
            password: Plaintext password

        Returns:
            The user, with ``last_login_at`` refreshed

        Raises:
            AuthenticationError: If the email is unknown or the password wrong
        """
        with logfire.span("auth_service.authenticate", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("Login for unknown email", email=email.root)
                raise AuthenticationError("Invalid credentials")

            matches = await asyncio.to_thread(
                verify_password, password, user.password_hash
            )
            if not matches:
                logfire.warn("Login with wrong password", user_id=str(user.id))
                raise AuthenticationError("Invalid credentials")

            saved = await self.user_repository.save(
                user.model_copy(update={"last_login_at": utcnow()})
            )
            logfire.info("User logged in", user_id=str(saved.id))
            return saved

    @staticmethod
    def _check_password(password: str) -> None:
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )
