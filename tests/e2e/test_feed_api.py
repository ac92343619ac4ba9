"""End-to-end tests for the feed and post read endpoints."""

from uuid import uuid4

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine


class TestFeedEndpoint:
    """End-to-end tests for GET /api/v1/feed."""

    @pytest.mark.asyncio
    async def test_feed_requires_auth(self, client):
        """Should return 401 without a token."""
        # Act
        response = await client.get("/api/v1/feed")

        # Assert
        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required"

    @pytest.mark.asyncio
    async def test_feed_rejects_bad_token(self, client):
        """Should return 401 for a token that doesn't verify."""
        # Act
        response = await client.get(
            "/api/v1/feed", headers={"Authorization": "Bearer not-a-token"}
        )

        # Assert
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_feed_of_followed_author(self, client, seed):
        """A follows B: A's feed holds B's post with counts, flags and comments."""
        # Arrange
        async with seed.world() as world:
            alice = await world.user("alice")
            bob = await world.user("bob")
            carol = await world.user("carol")
            await world.follow(alice, bob)
            post = await world.post(bob, "Hello World", minute=1)
            await world.post(carol, "Not followed", minute=2)
            comment = await world.comment(post, carol, "Nice one", minute=3)
            await world.reply(comment, bob, "Thanks", minute=4)
            await world.like_post(alice, post)
            await world.like_post(carol, post)
        headers = await seed.auth(alice)

        # Act
        response = await client.get("/api/v1/feed", headers=headers)

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["limit"] == 20
        assert body["offset"] == 0
        [item] = body["posts"]
        assert item["id"] == str(post.id)
        assert item["author"]["username"] == "bob"
        assert item["like_count"] == 2
        assert item["comment_count"] == 1
        assert item["is_liked"] is True
        assert item["is_following"] is True
        [comment_item] = item["comments"]
        assert comment_item["content"] == "Nice one"
        assert comment_item["author"]["username"] == "carol"
        assert comment_item["is_following"] is False
        assert comment_item["reply_count"] == 1
        assert comment_item["replies"] == []

    @pytest.mark.asyncio
    async def test_empty_feed_is_not_found(self, client, seed):
        """A viewer who follows nobody gets 404."""
        # Arrange
        async with seed.world() as world:
            alice = await world.user("alice")
            bob = await world.user("bob")
            await world.post(bob, "Hello World", minute=1)
        headers = await seed.auth(alice)

        # Act
        response = await client.get("/api/v1/feed", headers=headers)

        # Assert
        assert response.status_code == 404
        assert response.json()["detail"] == "No posts found"

    @pytest.mark.asyncio
    async def test_pages_do_not_overlap(self, client, seed):
        """Two pages of five cover ten posts, newest first, without repeats."""
        # Arrange
        async with seed.world() as world:
            alice = await world.user("alice")
            bob = await world.user("bob")
            await world.follow(alice, bob)
            for minute in range(10):
                await world.post(bob, f"Post {minute}", minute=minute)
        headers = await seed.auth(alice)

        # Act
        first = await client.get("/api/v1/feed?limit=5&offset=0", headers=headers)
        second = await client.get("/api/v1/feed?limit=5&offset=5", headers=headers)
        past_end = await client.get("/api/v1/feed?limit=5&offset=10", headers=headers)

        # Assert
        first_page = [p["content"] for p in first.json()["posts"]]
        second_page = [p["content"] for p in second.json()["posts"]]
        assert first_page == [f"Post {m}" for m in range(9, 4, -1)]
        assert second_page == [f"Post {m}" for m in range(4, -1, -1)]
        assert past_end.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "query,found", [("hello", True), ("WORLD", True), ("", True), ("zzz", False)]
    )
    async def test_search(self, client, seed, query, found):
        """Search is a case-insensitive substring match."""
        # Arrange
        async with seed.world() as world:
            alice = await world.user("alice")
            bob = await world.user("bob")
            await world.follow(alice, bob)
            await world.post(bob, "Hello World", minute=1)
        headers = await seed.auth(alice)

        # Act
        response = await client.get(
            "/api/v1/feed", params={"query": query}, headers=headers
        )

        # Assert
        assert response.status_code == (200 if found else 404)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", ["limit=0", "limit=101", "offset=-1"])
    async def test_invalid_window(self, client, seed, params):
        """Out of range windows are rejected with 400."""
        # Arrange
        async with seed.world() as world:
            alice = await world.user("alice")
        headers = await seed.auth(alice)

        # Act
        response = await client.get(f"/api/v1/feed?{params}", headers=headers)

        # Assert
        assert response.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", ["limit=abc", "offset=x", "limit=2.5"])
    async def test_non_integer_window(self, client, seed, params):
        """Window values that aren't integers are rejected with 400."""
        # Arrange
        async with seed.world() as world:
            alice = await world.user("alice")
        headers = await seed.auth(alice)

        # Act
        response = await client.get(f"/api/v1/feed?{params}", headers=headers)

        # Assert
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_invalid_window_without_token(self, client):
        """Authentication is checked before the window."""
        # Act
        response = await client.get("/api/v1/feed?limit=0")

        # Assert
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_store_failure_is_internal_error(self, client, seed, container):
        """A failing feed statement answers 500 without leaking detail."""
        # Arrange
        async with seed.world() as world:
            alice = await world.user("alice")
        headers = await seed.auth(alice)
        engine = await container.get(AsyncEngine)
        async with engine.begin() as connection:
            await connection.execute(text("DROP TABLE post_likes"))

        # Act
        response = await client.get("/api/v1/feed", headers=headers)

        # Assert
        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"


class TestPostEndpoints:
    """End-to-end tests for post reads."""

    @pytest.mark.asyncio
    async def test_missing_post(self, client, seed):
        """Should return 404 for an unknown post."""
        # Arrange
        async with seed.world() as world:
            alice = await world.user("alice")
        headers = await seed.auth(alice)

        # Act
        response = await client.get(f"/api/v1/posts/{uuid4()}", headers=headers)

        # Assert
        assert response.status_code == 404
        assert response.json()["detail"] == "Post not found"

    @pytest.mark.asyncio
    async def test_comments_of_post(self, client, seed):
        """Comments come oldest first; a post without comments gives 404."""
        # Arrange
        async with seed.world() as world:
            alice = await world.user("alice")
            post = await world.post(alice, "Talk", minute=1)
            quiet = await world.post(alice, "Quiet", minute=2)
            await world.comment(post, alice, "First", minute=3)
            await world.comment(post, alice, "Second", minute=4)
        headers = await seed.auth(alice)

        # Act
        response = await client.get(f"/api/v1/posts/{post.id}/comments", headers=headers)
        empty = await client.get(f"/api/v1/posts/{quiet.id}/comments", headers=headers)

        # Assert
        assert [c["content"] for c in response.json()["comments"]] == [
            "First",
            "Second",
        ]
        assert empty.status_code == 404
        assert empty.json()["detail"] == "No comments found"

    @pytest.mark.asyncio
    async def test_viewer_flags_are_per_viewer(self, client, seed):
        """The like flag reflects the requesting user only."""
        # Arrange
        async with seed.world() as world:
            alice = await world.user("alice")
            bob = await world.user("bob")
            post = await world.post(alice, "Post", minute=1)
            await world.like_post(alice, post)

        # Act
        as_alice = await client.get(
            f"/api/v1/posts/{post.id}", headers=await seed.auth(alice)
        )
        as_bob = await client.get(
            f"/api/v1/posts/{post.id}", headers=await seed.auth(bob)
        )

        # Assert
        assert as_alice.json()["is_liked"] is True
        assert as_bob.json()["is_liked"] is False
        assert as_alice.json()["like_count"] == as_bob.json()["like_count"] == 1
