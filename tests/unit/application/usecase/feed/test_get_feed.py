"""Unit tests for the feed read use cases."""

from uuid import uuid4

import pytest

from social.application.usecase.feed import (
    GetCommentsRequest,
    GetCommentsUseCase,
    GetFeedRequest,
    GetFeedUseCase,
    GetPostDetailRequest,
    GetPostDetailUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from social.domain.error import NotFoundError
from tests.builders import World
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetFeedUseCase:
    """Tests for GetFeedUseCase."""

    @pytest.mark.asyncio
    async def test_feed_of_followed_author(self, unit_env):
        """The viewer sees the followed author's post with counts and flags."""
        # Arrange
        world = World(unit_env)
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.follow(alice, bob)
        post = await world.post(bob, "Hello World", minute=1)
        comment = await world.comment(post, alice, "Nice", minute=2)
        await world.reply(comment, bob, "Thanks", minute=3)
        await world.like_post(alice, post)
        use_case = await unit_env.get(GetFeedUseCase)

        # Act
        response = await use_case.execute(GetFeedRequest(viewer_id=str(alice.id)))

        # Assert
        assert response is not None
        assert response.limit == 20
        assert response.offset == 0
        [item] = response.posts
        assert item.id == str(post.id)
        assert item.author.username == "bob"
        assert item.like_count == 1
        assert item.comment_count == 1
        assert item.is_liked is True
        assert item.is_following is True
        [comment_item] = item.comments
        assert comment_item.content == "Nice"
        # Feed comments are one level deep: replies are counted, not attached
        assert comment_item.reply_count == 1
        assert comment_item.replies == []

    @pytest.mark.asyncio
    async def test_empty_feed_is_none(self, unit_env):
        """A viewer following nobody gets no feed."""
        # Arrange
        world = World(unit_env)
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.post(bob, "Unseen", minute=1)
        use_case = await unit_env.get(GetFeedUseCase)

        # Act
        response = await use_case.execute(GetFeedRequest(viewer_id=str(alice.id)))

        # Assert
        assert response is None

    @pytest.mark.asyncio
    async def test_search_without_match_is_none(self, unit_env):
        """A search that matches nothing gives no feed."""
        # Arrange
        world = World(unit_env)
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.follow(alice, bob)
        await world.post(bob, "Hello World", minute=1)
        use_case = await unit_env.get(GetFeedUseCase)

        # Act
        response = await use_case.execute(
            GetFeedRequest(viewer_id=str(alice.id), query="zzz")
        )

        # Assert
        assert response is None


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_all_authors_or_one(self, unit_env):
        """Without an author every post is listed; with one only theirs."""
        # Arrange
        world = World(unit_env)
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.post(alice, "From alice", minute=1)
        await world.post(bob, "From bob", minute=2)
        use_case = await unit_env.get(ListPostsUseCase)

        # Act
        everyone = await use_case.execute(ListPostsRequest(viewer_id=str(alice.id)))
        only_bob = await use_case.execute(
            ListPostsRequest(viewer_id=str(alice.id), author_id=str(bob.id))
        )

        # Assert
        assert [p.content for p in everyone.posts] == ["From bob", "From alice"]
        assert [p.content for p in only_bob.posts] == ["From bob"]
        assert only_bob.posts[0].is_following is False


class TestGetPostDetailUseCase:
    """Tests for GetPostDetailUseCase."""

    @pytest.mark.asyncio
    async def test_missing_post_is_none(self, unit_env):
        """An unknown post gives None."""
        # Arrange
        alice = await World(unit_env).user("alice")
        use_case = await unit_env.get(GetPostDetailUseCase)

        # Act
        response = await use_case.execute(
            GetPostDetailRequest(post_id=str(uuid4()), viewer_id=str(alice.id))
        )

        # Assert
        assert response is None

    @pytest.mark.asyncio
    async def test_post_of_unfollowed_author(self, unit_env):
        """Any post can be viewed; the follow flag reflects the viewer."""
        # Arrange
        world = World(unit_env)
        alice = await world.user("alice")
        bob = await world.user("bob")
        post = await world.post(bob, "Public", minute=1)
        use_case = await unit_env.get(GetPostDetailUseCase)

        # Act
        response = await use_case.execute(
            GetPostDetailRequest(post_id=str(post.id), viewer_id=str(alice.id))
        )

        # Assert
        assert response is not None
        assert response.content == "Public"
        assert response.is_following is False
        assert response.comments == []


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        """Comments of an unknown post are not found."""
        # Arrange
        alice = await World(unit_env).user("alice")
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetCommentsRequest(post_id=str(uuid4()), viewer_id=str(alice.id))
            )

    @pytest.mark.asyncio
    async def test_post_without_comments_is_none(self, unit_env):
        """A post with no comments gives None."""
        # Arrange
        world = World(unit_env)
        alice = await world.user("alice")
        post = await world.post(alice, "Quiet", minute=1)
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act
        response = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), viewer_id=str(alice.id))
        )

        # Assert
        assert response is None

    @pytest.mark.asyncio
    async def test_comments_oldest_first_with_flags(self, unit_env):
        """Comments come oldest first with the viewer's like flag."""
        # Arrange
        world = World(unit_env)
        alice = await world.user("alice")
        bob = await world.user("bob")
        post = await world.post(alice, "Talk", minute=1)
        first = await world.comment(post, bob, "First", minute=2)
        await world.comment(post, bob, "Second", minute=3)
        await world.like_comment(alice, first)
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act
        response = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), viewer_id=str(alice.id))
        )

        # Assert
        assert [c.content for c in response.comments] == ["First", "Second"]
        assert [c.is_liked for c in response.comments] == [True, False]
        assert response.comments[0].like_count == 1


class TestGetRepliesUseCase:
    """Tests for GetRepliesUseCase."""

    @pytest.mark.asyncio
    async def test_missing_comment_raises(self, unit_env):
        """Replies of an unknown comment are not found."""
        # Arrange
        use_case = await unit_env.get(GetRepliesUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetRepliesRequest(comment_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_replies_oldest_first(self, unit_env):
        """Replies come back oldest first."""
        # Arrange
        world = World(unit_env)
        alice = await world.user("alice")
        post = await world.post(alice, "Post", minute=1)
        comment = await world.comment(post, alice, "Comment", minute=2)
        await world.reply(comment, alice, "later", minute=5)
        await world.reply(comment, alice, "earlier", minute=4)
        use_case = await unit_env.get(GetRepliesUseCase)

        # Act
        response = await use_case.execute(GetRepliesRequest(comment_id=str(comment.id)))

        # Assert
        assert [r.message for r in response.replies] == ["earlier", "later"]
