"""Create post use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from social.domain.service import PostService, UserService
from social.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    content: str


class PostResponse(BaseModel):
    """A post as stored, without counts."""

    post_id: str
    author_id: str
    content: str
    created_at: datetime
    updated_at: datetime


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            NotFoundError: If the author doesn't exist
            pydantic.ValidationError: If the content is empty or too long
        """
        author_id = UserId(UUID(request.author_id))
        user = await self.user_service.get_by_id(author_id)  # Raises NotFoundError

        with logfire.span("create_post.execute", author=user.username.root):
            post = await self.post_service.create_post(author_id, request.content)

            return PostResponse(
                post_id=str(post.id),
                author_id=str(post.author_id),
                content=post.content,
                created_at=post.created_at,
                updated_at=post.updated_at,
            )
