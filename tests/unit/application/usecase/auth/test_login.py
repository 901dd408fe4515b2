"""Unit tests for LoginUseCase."""

import pytest

from stackit.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from stackit.domain.error import AuthenticationError, ValidationError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    async def _register(self, unit_env) -> str:
        register = await unit_env.get(RegisterUseCase)
        response = await register.execute(
            RegisterRequest(username="alice", email="a@example.com", password="secret1")
        )
        return response.user.id

    @pytest.mark.asyncio
    async def test_login_with_valid_credentials(self, unit_env):
        """Correct email and password should return a token."""
        # Arrange
        user_id = await self._register(unit_env)
        use_case = await unit_env.get(LoginUseCase)

        # Act
        response = await use_case.execute(
            LoginRequest(email="A@example.com", password="secret1")
        )

        # Assert
        assert response.token
        assert response.user.id == user_id
        assert response.user.username == "alice"

    @pytest.mark.asyncio
    async def test_wrong_password_is_invalid_credentials(self, unit_env):
        """A wrong password should raise AuthenticationError."""
        await self._register(unit_env)
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await use_case.execute(LoginRequest(email="a@example.com", password="nope!!"))

    @pytest.mark.asyncio
    async def test_malformed_email_is_invalid_credentials(self, unit_env):
        """A malformed email can't match an account."""
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await use_case.execute(LoginRequest(email="not-an-email", password="secret1"))

    @pytest.mark.asyncio
    async def test_missing_password_rejected(self, unit_env):
        """Both fields are required."""
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(LoginRequest(email="a@example.com", password=""))
