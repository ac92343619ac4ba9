"""Tests for the aggregated feed reads against the in-memory database."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from social.domain.repository import CommentRepository, FeedRepository, PostRepository
from social.domain.value import CommentId, Pagination, PostId, Search, UserId
from social.persistence.repository import PostgresFeedRepository
from tests.builders import World
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.fixture
def world(unit_env):
    return World(unit_env)


class TestFindFeed:
    """Tests for the personalized feed."""

    @pytest.mark.asyncio
    async def test_followed_author_post_with_engagement(self, unit_env, world):
        """A follows B; B posts, A comments and likes; A's feed shows it all."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.follow(alice, bob)
        post = await world.post(bob, "Hello World", minute=10)
        comment = await world.comment(post, alice, "Nice post", minute=11)
        await world.like_post(alice, post)
        await world.reply(comment, bob, "Thanks", minute=12)
        await world.like_comment(bob, comment)
        repo = await unit_env.get(FeedRepository)

        # Act
        posts = await repo.find_feed(alice.id, Pagination(), Search())

        # Assert
        assert len(posts) == 1
        view = posts[0]
        assert view.id == post.id
        assert view.author.id == bob.id
        assert view.like_count == 1
        assert view.comment_count == 1
        assert view.is_liked_by_viewer is True
        assert view.is_author_followed_by_viewer is True
        assert len(view.comments) == 1
        assert view.comments[0].id == comment.id
        assert view.comments[0].author.id == alice.id
        assert view.comments[0].like_count == 1
        assert view.comments[0].reply_count == 1
        assert view.comments[0].is_liked_by_viewer is False
        assert view.comments[0].is_author_followed_by_viewer is False

    @pytest.mark.asyncio
    async def test_only_followed_authors(self, unit_env, world):
        """Own posts and posts of unfollowed users stay out of the feed."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        carol = await world.user("carol")
        await world.follow(alice, bob)
        followed = await world.post(bob, "From bob", minute=1)
        await world.post(carol, "From carol", minute=2)
        await world.post(alice, "From alice", minute=3)
        repo = await unit_env.get(FeedRepository)

        # Act
        posts = await repo.find_feed(alice.id, Pagination(), Search())

        # Assert
        assert [p.id for p in posts] == [followed.id]

    @pytest.mark.asyncio
    async def test_empty_follow_set_gives_no_posts(self, unit_env, world):
        """A viewer who follows nobody has an empty feed."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.post(bob, "Hello", minute=1)
        repo = await unit_env.get(FeedRepository)

        # Act
        posts = await repo.find_feed(alice.id, Pagination(), Search())

        # Assert
        assert posts == []

    @pytest.mark.asyncio
    async def test_pages_do_not_overlap(self, unit_env, world):
        """Ten posts split into two windows of five, newest first."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.follow(alice, bob)
        created = [await world.post(bob, f"Post {i}", minute=i) for i in range(10)]
        repo = await unit_env.get(FeedRepository)

        # Act
        first = await repo.find_feed(alice.id, Pagination(limit=5, offset=0), Search())
        second = await repo.find_feed(alice.id, Pagination(limit=5, offset=5), Search())

        # Assert
        newest_first = [p.id for p in reversed(created)]
        assert [p.id for p in first] == newest_first[:5]
        assert [p.id for p in second] == newest_first[5:]
        assert not {p.id for p in first} & {p.id for p in second}

    @pytest.mark.asyncio
    async def test_window_past_the_end_is_empty(self, unit_env, world):
        """An offset beyond the last post yields nothing."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.follow(alice, bob)
        await world.post(bob, "Only post", minute=1)
        repo = await unit_env.get(FeedRepository)

        # Act
        posts = await repo.find_feed(alice.id, Pagination(offset=1), Search())

        # Assert
        assert posts == []

    @pytest.mark.asyncio
    async def test_limit_counts_posts_not_rows(self, unit_env, world):
        """A post with many comments still takes one slot of the window."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.follow(alice, bob)
        older = await world.post(bob, "Older", minute=1)
        newer = await world.post(bob, "Newer", minute=2)
        for i in range(3):
            await world.comment(newer, alice, f"Comment {i}", minute=10 + i)
        repo = await unit_env.get(FeedRepository)

        # Act
        posts = await repo.find_feed(alice.id, Pagination(limit=2), Search())

        # Assert
        assert [p.id for p in posts] == [newer.id, older.id]
        assert len(posts[0].comments) == 3

    @pytest.mark.asyncio
    async def test_equal_timestamps_ordered_by_id_descending(self, unit_env, world):
        """Posts created at the same instant are ordered by id, highest first."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.follow(alice, bob)
        created = [await world.post(bob, f"Same time {i}", minute=5) for i in range(4)]
        repo = await unit_env.get(FeedRepository)

        # Act
        posts = await repo.find_feed(alice.id, Pagination(), Search())

        # Assert
        expected = sorted((p.id for p in created), key=lambda u: u.hex, reverse=True)
        assert [p.id for p in posts] == expected

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("query", "matches"),
        [("hello", True), ("WORLD", True), ("", True), ("zzz", False)],
    )
    async def test_search_is_case_insensitive_substring(
        self, unit_env, world, query, matches
    ):
        """Search matches any case-insensitive substring of the content."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.follow(alice, bob)
        await world.post(bob, "Hello World", minute=1)
        repo = await unit_env.get(FeedRepository)

        # Act
        posts = await repo.find_feed(alice.id, Pagination(), Search(query=query))

        # Assert
        assert (len(posts) == 1) is matches

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, unit_env, world):
        """'%' in a query matches a literal percent sign only."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.follow(alice, bob)
        literal = await world.post(bob, "Growth of 50% this year", minute=1)
        await world.post(bob, "Nothing special", minute=2)
        repo = await unit_env.get(FeedRepository)

        # Act
        posts = await repo.find_feed(alice.id, Pagination(), Search(query="%"))

        # Assert
        assert [p.id for p in posts] == [literal.id]

    @pytest.mark.asyncio
    async def test_counts_are_not_multiplied_by_comments(self, unit_env, world):
        """Like counts stay exact when a post has several comments."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        carol = await world.user("carol")
        await world.follow(alice, bob)
        post = await world.post(bob, "Popular", minute=1)
        for i, author in enumerate([alice, carol, bob]):
            await world.comment(post, author, f"Comment {i}", minute=2 + i)
        await world.like_post(alice, post)
        await world.like_post(carol, post)
        repo = await unit_env.get(FeedRepository)

        # Act
        posts = await repo.find_feed(alice.id, Pagination(), Search())

        # Assert
        assert posts[0].like_count == 2
        assert posts[0].comment_count == 3
        assert len(posts[0].comments) == 3

    @pytest.mark.asyncio
    async def test_viewer_flags_are_per_viewer(self, unit_env, world):
        """Two viewers of the same post see their own like and follow state."""
        # Arrange
        alice = await world.user("alice")
        carol = await world.user("carol")
        bob = await world.user("bob")
        await world.follow(alice, bob)
        await world.follow(carol, bob)
        post = await world.post(bob, "Shared", minute=1)
        await world.like_post(alice, post)
        repo = await unit_env.get(FeedRepository)

        # Act
        alice_view = (await repo.find_feed(alice.id, Pagination(), Search()))[0]
        carol_view = (await repo.find_feed(carol.id, Pagination(), Search()))[0]

        # Assert
        assert alice_view.is_liked_by_viewer is True
        assert carol_view.is_liked_by_viewer is False
        assert alice_view.like_count == carol_view.like_count == 1
        assert carol_view.is_author_followed_by_viewer is True


class TestFindPosts:
    """Tests for the unfiltered and per-author post lists."""

    @pytest.mark.asyncio
    async def test_lists_every_author(self, unit_env, world):
        """All posts appear whether or not the viewer follows the author."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        own = await world.post(alice, "Mine", minute=1)
        other = await world.post(bob, "Theirs", minute=2)
        repo = await unit_env.get(FeedRepository)

        # Act
        posts = await repo.find_posts(alice.id, Pagination(), Search())

        # Assert
        assert [p.id for p in posts] == [other.id, own.id]
        assert posts[0].is_author_followed_by_viewer is False

    @pytest.mark.asyncio
    async def test_posts_by_author(self, unit_env, world):
        """Only the requested author's posts are returned."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.post(alice, "Mine", minute=1)
        theirs = await world.post(bob, "Theirs", minute=2)
        repo = await unit_env.get(FeedRepository)

        # Act
        posts = await repo.find_posts_by_author(
            bob.id, alice.id, Pagination(), Search()
        )

        # Assert
        assert [p.id for p in posts] == [theirs.id]


class TestFindPostDetail:
    """Tests for the single post read."""

    @pytest.mark.asyncio
    async def test_missing_post_returns_none(self, unit_env, world):
        """An unknown id is not found, not an error."""
        # Arrange
        alice = await world.user("alice")
        repo = await unit_env.get(FeedRepository)

        # Act
        post = await repo.find_post_detail(PostId(uuid4()), alice.id)

        # Assert
        assert post is None

    @pytest.mark.asyncio
    async def test_post_with_comments_oldest_first(self, unit_env, world):
        """Comments carry their counts and are ordered oldest first."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.follow(alice, bob)
        post = await world.post(bob, "Detail", minute=1)
        later = await world.comment(post, bob, "Later", minute=5)
        earlier = await world.comment(post, bob, "Earlier", minute=2)
        await world.like_comment(alice, earlier)
        await world.reply(earlier, alice, "Reply", minute=3)
        repo = await unit_env.get(FeedRepository)

        # Act
        view = await repo.find_post_detail(post.id, alice.id)

        # Assert
        assert view is not None
        assert [c.id for c in view.comments] == [earlier.id, later.id]
        assert view.comments[0].like_count == 1
        assert view.comments[0].reply_count == 1
        assert view.comments[0].is_liked_by_viewer is True
        assert view.comments[0].is_author_followed_by_viewer is True
        assert view.comments[1].like_count == 0
        assert view.comments[1].reply_count == 0

    @pytest.mark.asyncio
    async def test_deleting_post_removes_its_comments(self, unit_env, world):
        """Comments and likes go with their post."""
        # Arrange
        alice = await world.user("alice")
        post = await world.post(alice, "Short lived", minute=1)
        comment = await world.comment(post, alice, "Gone soon", minute=2)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        repo = await unit_env.get(FeedRepository)

        # Act
        deleted = await post_repo.delete(post.id)

        # Assert
        assert deleted is True
        assert await repo.find_post_detail(post.id, alice.id) is None
        assert await comment_repo.find_by_id(comment.id) is None


class TestFindComments:
    """Tests for comments with replies and reply lists."""

    @pytest.mark.asyncio
    async def test_comments_with_flat_replies(self, unit_env, world):
        """Each comment holds its replies oldest first."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob")
        await world.follow(alice, bob)
        post = await world.post(alice, "Discuss", minute=1)
        with_replies = await world.comment(post, bob, "First", minute=2)
        without_replies = await world.comment(post, alice, "Second", minute=3)
        second_reply = await world.reply(with_replies, alice, "Two", minute=6)
        first_reply = await world.reply(with_replies, bob, "One", minute=4)
        repo = await unit_env.get(FeedRepository)

        # Act
        comments = await repo.find_comments_by_post(post.id, alice.id)

        # Assert
        assert [c.id for c in comments] == [with_replies.id, without_replies.id]
        assert [r.id for r in comments[0].replies] == [first_reply.id, second_reply.id]
        assert comments[0].reply_count == 2
        assert comments[0].is_author_followed_by_viewer is True
        assert comments[1].replies == []
        assert comments[1].is_author_followed_by_viewer is False

    @pytest.mark.asyncio
    async def test_post_without_comments(self, unit_env, world):
        """A post without comments yields an empty list."""
        # Arrange
        alice = await world.user("alice")
        post = await world.post(alice, "Quiet", minute=1)
        repo = await unit_env.get(FeedRepository)

        # Act
        comments = await repo.find_comments_by_post(post.id, alice.id)

        # Assert
        assert comments == []

    @pytest.mark.asyncio
    async def test_replies_by_comment(self, unit_env, world):
        """Replies come back oldest first with their authors."""
        # Arrange
        alice = await world.user("alice")
        bob = await world.user("bob", name="Bob", last_name="Builder")
        post = await world.post(alice, "Topic", minute=1)
        comment = await world.comment(post, alice, "Thoughts?", minute=2)
        late = await world.reply(comment, bob, "Late", minute=9)
        early = await world.reply(comment, bob, "Early", minute=3)
        repo = await unit_env.get(FeedRepository)

        # Act
        replies = await repo.find_replies_by_comment(comment.id)

        # Assert
        assert [r.id for r in replies] == [early.id, late.id]
        assert replies[0].author.name == "Bob"
        assert replies[0].author.last_name == "Builder"

    @pytest.mark.asyncio
    async def test_replies_of_unknown_comment(self, unit_env):
        """An unknown comment has no replies."""
        # Arrange
        repo = await unit_env.get(FeedRepository)

        # Act
        replies = await repo.find_replies_by_comment(CommentId(uuid4()))

        # Assert
        assert replies == []


class TestStoreFailures:
    """Store errors reach the caller unchanged and never leak a result."""

    @pytest.mark.asyncio
    async def test_failing_statement_propagates(self, unit_env):
        """A statement the store rejects raises the store's error."""
        # Arrange
        engine = await unit_env.get(AsyncEngine)
        async with engine.begin() as connection:
            await connection.execute(text("DROP TABLE post_likes"))
        repo = await unit_env.get(FeedRepository)

        # Act & Assert
        with pytest.raises(SQLAlchemyError):
            await repo.find_feed(UserId(uuid4()), Pagination(), Search())

    @pytest.mark.asyncio
    async def test_result_closed_when_fetch_fails(self):
        """The result is closed even when reading its rows raises."""
        # Arrange
        result = MagicMock()
        result.fetchall.side_effect = OperationalError(
            "SELECT", {}, Exception("connection lost")
        )
        session = MagicMock()
        session.execute = AsyncMock(return_value=result)
        repo = PostgresFeedRepository(session)

        # Act
        with pytest.raises(OperationalError):
            await repo.find_feed(UserId(uuid4()), Pagination(), Search())

        # Assert
        result.close.assert_called_once()
