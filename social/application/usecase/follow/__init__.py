"""Follow use cases."""

from .follow_user import (
    FollowRequest,
    FollowResponse,
    FollowUserUseCase,
    UnfollowUserUseCase,
)
from .list_follows import (
    FollowUserInfo,
    GetFollowersUseCase,
    GetFollowingUseCase,
    ListFollowsRequest,
    ListFollowsResponse,
)

__all__ = [
    "FollowRequest",
    "FollowResponse",
    "FollowUserInfo",
    "FollowUserUseCase",
    "GetFollowersUseCase",
    "GetFollowingUseCase",
    "ListFollowsRequest",
    "ListFollowsResponse",
    "UnfollowUserUseCase",
]
