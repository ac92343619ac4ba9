"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, Field

from social.application.usecase.auth import GetCurrentUserUseCase
from social.application.usecase.feed import (
    ListPostsRequest,
    ListPostsUseCase,
    PostListResponse,
)
from social.application.usecase.follow import (
    FollowRequest,
    FollowResponse,
    FollowUserUseCase,
    GetFollowersUseCase,
    GetFollowingUseCase,
    ListFollowsRequest,
    ListFollowsResponse,
    UnfollowUserUseCase,
)
from social.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)
from social.domain.value import DEFAULT_PAGE_LIMIT
from social.interface.api.auth import authenticate, check_page
from social.interface.api.errors import raise_http_error

router = APIRouter(prefix="/api/v1/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the current user's profile."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)


@router.patch("/me", response_model=UpdateUserProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> UpdateUserProfileResponse:
    """Update the current user's display name.

    Raises:
        HTTPException: 400 if no field is given
    """
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        return await update_user_profile_use_case.execute(
            UpdateUserProfileRequest(
                user_id=user.user_id, name=request.name, last_name=request.last_name
            )
        )
    except Exception as e:
        raise_http_error(e, "Update profile")


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: UUID,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetUserProfileResponse:
    """Get a user's public profile."""
    await authenticate(get_current_user_use_case, authorization)

    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=str(user_id))
        )
    except Exception as e:
        raise_http_error(e, "Get user profile")


@router.get("/{user_id}/posts", response_model=PostListResponse)
async def get_user_posts(
    user_id: UUID,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    limit: int = DEFAULT_PAGE_LIMIT,
    offset: int = 0,
    query: str = "",
    authorization: str | None = Header(default=None),
) -> PostListResponse:
    """List one user's posts, newest first.

    Raises:
        HTTPException: 404 if no post matches
    """
    viewer = await authenticate(get_current_user_use_case, authorization)
    check_page(limit, offset)

    try:
        result = await list_posts_use_case.execute(
            ListPostsRequest(
                viewer_id=viewer.user_id,
                author_id=str(user_id),
                limit=limit,
                offset=offset,
                query=query,
            )
        )
    except Exception as e:
        raise_http_error(e, "Get user posts")

    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No posts found",
        )
    return result


@router.get("/{user_id}/followers", response_model=ListFollowsResponse)
async def get_followers(
    user_id: UUID,
    get_followers_use_case: FromDishka[GetFollowersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ListFollowsResponse:
    """List the users following ``user_id``."""
    await authenticate(get_current_user_use_case, authorization)

    try:
        return await get_followers_use_case.execute(
            ListFollowsRequest(user_id=str(user_id))
        )
    except Exception as e:
        raise_http_error(e, "Get followers")


@router.get("/{user_id}/following", response_model=ListFollowsResponse)
async def get_following(
    user_id: UUID,
    get_following_use_case: FromDishka[GetFollowingUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ListFollowsResponse:
    """List the users ``user_id`` follows."""
    await authenticate(get_current_user_use_case, authorization)

    try:
        return await get_following_use_case.execute(
            ListFollowsRequest(user_id=str(user_id))
        )
    except Exception as e:
        raise_http_error(e, "Get following")


@router.post(
    "/{user_id}/follow",
    response_model=FollowResponse,
    status_code=status.HTTP_201_CREATED,
)
async def follow_user(
    user_id: UUID,
    follow_user_use_case: FromDishka[FollowUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> FollowResponse:
    """Follow a user.

    Raises:
        HTTPException: 400 when following oneself or someone already followed
    """
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        return await follow_user_use_case.execute(
            FollowRequest(follower_id=user.user_id, followed_id=str(user_id))
        )
    except Exception as e:
        raise_http_error(e, "Follow user")


@router.delete("/{user_id}/follow", status_code=status.HTTP_204_NO_CONTENT)
async def unfollow_user(
    user_id: UUID,
    unfollow_user_use_case: FromDishka[UnfollowUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> None:
    """Unfollow a user.

    Raises:
        HTTPException: 400 if not following the user
    """
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        await unfollow_user_use_case.execute(
            FollowRequest(follower_id=user.user_id, followed_id=str(user_id))
        )
    except Exception as e:
        raise_http_error(e, "Unfollow user")
