"""Unit tests for RegisterUseCase."""

import pytest

from stackit.application.usecase.auth import RegisterRequest, RegisterUseCase
from stackit.domain.error import ConflictError, ValidationError
from stackit.domain.repository import UserRepository
from stackit.domain.service import JWTService
from stackit.domain.value import Email
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_token_for_new_user(self, unit_env):
        """Registration should create the user and return a valid token."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        response = await use_case.execute(
            RegisterRequest(
                username="alice", email="Alice@Example.com", password="secret1"
            )
        )

        # Assert
        assert response.user.username == "alice"
        assert response.user.email == "alice@example.com"
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == response.user.id
        assert payload.username == "alice"
        assert await user_repo.find_by_email(Email("alice@example.com")) is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,email,password",
        [
            ("", "a@example.com", "secret1"),
            ("alice", "", "secret1"),
            ("alice", "a@example.com", ""),
        ],
    )
    async def test_missing_fields_rejected(self, unit_env, username, email, password):
        """All three fields are required."""
        use_case = await unit_env.get(RegisterUseCase)

        with pytest.raises(ValidationError, match="required"):
            await use_case.execute(
                RegisterRequest(username=username, email=email, password=password)
            )

    @pytest.mark.asyncio
    async def test_malformed_email_rejected(self, unit_env):
        """An email without a domain should be rejected."""
        use_case = await unit_env.get(RegisterUseCase)

        with pytest.raises(ValidationError, match="email"):
            await use_case.execute(
                RegisterRequest(username="alice", email="alice", password="secret1")
            )

    @pytest.mark.asyncio
    async def test_malformed_username_rejected(self, unit_env):
        """A username with spaces should be rejected."""
        use_case = await unit_env.get(RegisterUseCase)

        with pytest.raises(ValidationError, match="Username"):
            await use_case.execute(
                RegisterRequest(
                    username="al ice", email="a@example.com", password="secret1"
                )
            )

    @pytest.mark.asyncio
    async def test_duplicate_username_conflicts(self, unit_env):
        """Registering a taken username should raise ConflictError."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        await use_case.execute(
            RegisterRequest(username="alice", email="a@example.com", password="secret1")
        )

        # Act & Assert
        with pytest.raises(ConflictError):
            await use_case.execute(
                RegisterRequest(
                    username="alice", email="other@example.com", password="secret1"
                )
            )
