"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel

from social.domain.service import PostService
from social.domain.value import PostId, UserId

from .create_post import PostResponse


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str
    user_id: str  # From authenticated user
    content: str


class UpdatePostUseCase:
    """Use case for editing a post. Only its author may edit it."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        post = await self.post_service.update_post(
            post_id=PostId(UUID(request.post_id)),
            user_id=UserId(UUID(request.user_id)),
            content=request.content,
        )

        return PostResponse(
            post_id=str(post.id),
            author_id=str(post.author_id),
            content=post.content,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
