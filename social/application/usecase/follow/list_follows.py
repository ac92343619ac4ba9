"""Follower and following list use cases."""

from uuid import UUID

from pydantic import BaseModel

from social.domain.model.user import User
from social.domain.service import FollowService, UserService
from social.domain.value import UserId


class ListFollowsRequest(BaseModel):
    """Followers or following request."""

    user_id: str


class FollowUserInfo(BaseModel):
    """Minimal user in a follow list."""

    user_id: str
    name: str
    last_name: str
    username: str

    @classmethod
    def from_user(cls, user: User) -> "FollowUserInfo":
        return cls(
            user_id=str(user.id),
            name=user.name,
            last_name=user.last_name,
            username=user.username.root,
        )


class ListFollowsResponse(BaseModel):
    """Follow list response."""

    user_id: str
    users: list[FollowUserInfo]


class GetFollowersUseCase:
    """Use case for listing who follows a user."""

    def __init__(self, follow_service: FollowService, user_service: UserService) -> None:
        self.follow_service = follow_service
        self.user_service = user_service

    async def execute(self, request: ListFollowsRequest) -> ListFollowsResponse:
        """Execute get followers flow.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user_id = UserId(UUID(request.user_id))
        await self.user_service.get_by_id(user_id)  # Raises NotFoundError

        followers = await self.follow_service.get_followers(user_id)
        return ListFollowsResponse(
            user_id=request.user_id,
            users=[FollowUserInfo.from_user(user) for user in followers],
        )


class GetFollowingUseCase:
    """Use case for listing whom a user follows."""

    def __init__(self, follow_service: FollowService, user_service: UserService) -> None:
        self.follow_service = follow_service
        self.user_service = user_service

    async def execute(self, request: ListFollowsRequest) -> ListFollowsResponse:
        """Execute get following flow.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user_id = UserId(UUID(request.user_id))
        await self.user_service.get_by_id(user_id)  # Raises NotFoundError

        following = await self.follow_service.get_following(user_id)
        return ListFollowsResponse(
            user_id=request.user_id,
            users=[FollowUserInfo.from_user(user) for user in following],
        )
