"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from social.domain.service import PostService
from social.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # From authenticated user


class DeletePostUseCase:
    """Use case for deleting a post with its comments, replies and likes."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        await self.post_service.delete_post(
            PostId(UUID(request.post_id)), UserId(UUID(request.user_id))
        )
