"""Unit tests for UpdateUserProfileUseCase."""

import pytest

from stackit.application.usecase.user import (
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from stackit.domain.repository import UserRepository
from stackit.domain.value import ProfileUpdate
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdateUserProfileUseCase:
    """Tests for UpdateUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_update_profile_fields(self, unit_env):
        """Set fields should be returned and persisted."""
        # Arrange
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))

        # Act
        response = await use_case.execute(
            UpdateUserProfileRequest(
                user_id=str(user.id),
                changes=ProfileUpdate(
                    bio="Compilers and coffee",
                    location="Lisbon",
                    website="https://alice.dev",
                ),
            )
        )

        # Assert
        assert response.id == str(user.id)
        assert response.username == "alice"
        assert response.bio == "Compilers and coffee"
        assert response.location == "Lisbon"
        assert response.website == "https://alice.dev"

        stored = await user_repo.find_by_id(user.id)
        assert stored.bio == "Compilers and coffee"

    @pytest.mark.asyncio
    async def test_rename(self, unit_env):
        """A free username can be taken."""
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))

        response = await use_case.execute(
            UpdateUserProfileRequest(
                user_id=str(user.id),
                changes=ProfileUpdate.model_validate({"username": "alice_2"}),
            )
        )

        assert response.username == "alice_2"
