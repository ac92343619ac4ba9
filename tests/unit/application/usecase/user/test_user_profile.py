"""Unit tests for the user profile use cases."""

import pytest

from social.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from social.domain.error import ValidationError
from tests.builders import World
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_profile_counts_follows(self, unit_env):
        """The profile reports follower and following totals."""
        # Arrange
        world = World(unit_env)
        alice = await world.user("alice", name="Alice", last_name="Liddell")
        bob = await world.user("bob")
        carol = await world.user("carol")
        await world.follow(bob, alice)
        await world.follow(carol, alice)
        await world.follow(alice, bob)
        use_case = await unit_env.get(GetUserProfileUseCase)

        # Act
        response = await use_case.execute(GetUserProfileRequest(user_id=str(alice.id)))

        # Assert
        assert response.username == "alice"
        assert response.name == "Alice"
        assert response.follower_count == 2
        assert response.following_count == 1


class TestUpdateUserProfileUseCase:
    """Tests for UpdateUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_update_last_name(self, unit_env):
        """Only the given field changes."""
        # Arrange
        alice = await World(unit_env).user("alice", name="Alice", last_name="Liddell")
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        # Act
        response = await use_case.execute(
            UpdateUserProfileRequest(user_id=str(alice.id), last_name="Hargreaves")
        )

        # Assert
        assert response.name == "Alice"
        assert response.last_name == "Hargreaves"

    @pytest.mark.asyncio
    async def test_empty_update_fails(self, unit_env):
        """An update without fields is rejected."""
        # Arrange
        alice = await World(unit_env).user("alice")
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(UpdateUserProfileRequest(user_id=str(alice.id)))
