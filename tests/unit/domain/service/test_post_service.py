"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from social.domain.error import NotAuthorizedError, NotFoundError
from social.domain.repository import PostRepository
from social.domain.service import PostService
from social.domain.value import PostId
from tests.builders import World
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_post_saves_it(self, unit_env):
        """A created post can be read back."""
        # Arrange
        author = await World(unit_env).user("alice")
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        # Act
        post = await post_service.create_post(author.id, "First post")

        # Assert
        saved = await post_repo.find_by_id(post.id)
        assert saved is not None
        assert saved.content == "First post"
        assert saved.author_id == author.id


class TestUpdatePost:
    """Tests for update_post."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """The author's edit replaces the content and bumps updated_at."""
        # Arrange
        world = World(unit_env)
        author = await world.user("alice")
        post = await world.post(author, "Draft", minute=0)
        post_service = await unit_env.get(PostService)

        # Act
        updated = await post_service.update_post(post.id, author.id, "Final")

        # Assert
        assert updated.content == "Final"
        assert updated.updated_at > post.updated_at
        assert updated.created_at == post.created_at

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        """Editing someone else's post is not authorized."""
        # Arrange
        world = World(unit_env)
        author = await world.user("alice")
        intruder = await world.user("mallory")
        post = await world.post(author, "Mine", minute=0)
        post_service = await unit_env.get(PostService)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.update_post(post.id, intruder.id, "Hijacked")

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        """Editing an unknown post is not found."""
        # Arrange
        author = await World(unit_env).user("alice")
        post_service = await unit_env.get(PostService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await post_service.update_post(PostId(uuid4()), author.id, "Anything")


class TestDeletePost:
    """Tests for delete_post."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        """A deleted post is gone."""
        # Arrange
        world = World(unit_env)
        author = await world.user("alice")
        post = await world.post(author, "Bye", minute=0)
        post_service = await unit_env.get(PostService)

        # Act
        await post_service.delete_post(post.id, author.id)

        # Assert
        assert await post_service.get_post_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """Deleting someone else's post is not authorized and keeps it."""
        # Arrange
        world = World(unit_env)
        author = await world.user("alice")
        intruder = await world.user("mallory")
        post = await world.post(author, "Stays", minute=0)
        post_service = await unit_env.get(PostService)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(post.id, intruder.id)
        assert await post_service.get_post_by_id(post.id) is not None
