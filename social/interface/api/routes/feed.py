"""Feed routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status

from social.application.usecase.auth import GetCurrentUserUseCase
from social.application.usecase.feed import (
    GetFeedRequest,
    GetFeedUseCase,
    PostListResponse,
)
from social.domain.value import DEFAULT_PAGE_LIMIT
from social.interface.api.auth import authenticate, check_page
from social.interface.api.errors import raise_http_error

router = APIRouter(prefix="/api/v1/feed", tags=["feed"], route_class=DishkaRoute)


@router.get("", response_model=PostListResponse)
async def get_feed(
    get_feed_use_case: FromDishka[GetFeedUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    limit: int = DEFAULT_PAGE_LIMIT,
    offset: int = 0,
    query: str = "",
    authorization: str | None = Header(default=None),
) -> PostListResponse:
    """Get the viewer's feed: posts by the users they follow, newest first.

    Each post carries its comments, like and comment counts, and whether
    the viewer likes it and follows its author.

    Args:
        get_feed_use_case: Get feed use case from DI
        get_current_user_use_case: Get current user use case from DI
        limit: Maximum number of posts (1-100)
        offset: Number of posts to skip
        query: Case-insensitive substring the content must contain
        authorization: Bearer token

    Returns:
        The requested window of the feed

    Raises:
        HTTPException: 404 if no post matches
    """
    user = await authenticate(get_current_user_use_case, authorization)
    check_page(limit, offset)

    try:
        result = await get_feed_use_case.execute(
            GetFeedRequest(
                viewer_id=user.user_id, limit=limit, offset=offset, query=query
            )
        )
    except Exception as e:
        raise_http_error(e, "Get feed")

    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No posts found",
        )
    return result
