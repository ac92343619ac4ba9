"""Post domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from social.domain.error import NotAuthorizedError, NotFoundError
from social.domain.model.post import Post
from social.domain.repository import PostRepository
from social.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post_by_id(self, post_id: PostId) -> Optional[Post]:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
            return post

    async def create_post(self, author_id: UserId, content: str) -> Post:
        """Create a post.

        Args:
            author_id: Author's user ID
            content: Post content

        Returns:
            Created post
        """
        with logfire.span("post_service.create_post", author_id=str(author_id)):
            post = Post(id=PostId(uuid4()), author_id=author_id, content=content)
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def _get_owned_post(self, post_id: PostId, user_id: UserId) -> Post:
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        if post.author_id != user_id:
            logfire.warn(
                "Unauthorized post change attempt",
                post_id=str(post_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("post", str(post_id), str(user_id))
        return post

    async def update_post(self, post_id: PostId, user_id: UserId, content: str) -> Post:
        """Update a post's content. Only the author can edit.

        Args:
            post_id: Post ID
            user_id: User attempting the edit
            content: New content

        Returns:
            Updated post

        Raises:
            NotFoundError: If post doesn't exist
            NotAuthorizedError: If user is not the author
        """
        with logfire.span(
            "post_service.update_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self._get_owned_post(post_id, user_id)
            updated = post.model_copy(
                update={"content": content, "updated_at": datetime.now()}
            )
            saved = await self.post_repository.save(updated)
            logfire.info("Post updated", post_id=str(post_id))
            return saved

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Delete a post. Only the author can delete.

        Raises:
            NotFoundError: If post doesn't exist
            NotAuthorizedError: If user is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            await self._get_owned_post(post_id, user_id)
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))
