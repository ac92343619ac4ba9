"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, Field

from social.application.usecase.auth import GetCurrentUserUseCase
from social.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
)
from social.application.usecase.feed import (
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetPostDetailRequest,
    GetPostDetailUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostListResponse,
)
from social.application.usecase.feed import PostResponse as PostDetailResponse
from social.application.usecase.like import (
    LikeRequest,
    LikeResponse,
    LikeUseCase,
    UnlikeUseCase,
)
from social.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    PostResponse,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from social.domain.value import DEFAULT_PAGE_LIMIT, LikeTarget
from social.interface.api.auth import authenticate, check_page
from social.interface.api.errors import raise_http_error

router = APIRouter(prefix="/api/v1/posts", tags=["posts"], route_class=DishkaRoute)


class PostContentAPIRequest(BaseModel):
    """API request for creating or editing a post."""

    content: str = Field(min_length=1, max_length=5000)


class CommentContentAPIRequest(BaseModel):
    """API request for commenting on a post."""

    content: str = Field(min_length=1, max_length=2000)


@router.get("", response_model=PostListResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    limit: int = DEFAULT_PAGE_LIMIT,
    offset: int = 0,
    query: str = "",
    authorization: str | None = Header(default=None),
) -> PostListResponse:
    """List posts from every author, newest first.

    Raises:
        HTTPException: 404 if no post matches
    """
    user = await authenticate(get_current_user_use_case, authorization)
    check_page(limit, offset)

    try:
        result = await list_posts_use_case.execute(
            ListPostsRequest(
                viewer_id=user.user_id, limit=limit, offset=offset, query=query
            )
        )
    except Exception as e:
        raise_http_error(e, "List posts")

    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No posts found",
        )
    return result


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostContentAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Create a new post authored by the current user."""
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(author_id=user.user_id, content=request.content)
        )
    except Exception as e:
        raise_http_error(e, "Create post")


@router.get("/{post_id}", response_model=PostDetailResponse)
async def get_post(
    post_id: UUID,
    get_post_detail_use_case: FromDishka[GetPostDetailUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> PostDetailResponse:
    """Get a post with all of its comments.

    Raises:
        HTTPException: 404 if the post doesn't exist
    """
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        post = await get_post_detail_use_case.execute(
            GetPostDetailRequest(post_id=str(post_id), viewer_id=user.user_id)
        )
    except Exception as e:
        raise_http_error(e, "Get post")

    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return post


@router.patch("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: UUID,
    request: PostContentAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Edit a post. Only the post author can edit."""
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=str(post_id), user_id=user.user_id, content=request.content
            )
        )
    except Exception as e:
        raise_http_error(e, "Update post")


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> None:
    """Delete a post with its comments, replies and likes. Author only."""
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        await delete_post_use_case.execute(
            DeletePostRequest(post_id=str(post_id), user_id=user.user_id)
        )
    except Exception as e:
        raise_http_error(e, "Delete post")


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetCommentsResponse:
    """Get the comments of a post, oldest first, each with its replies.

    Raises:
        HTTPException: 404 if the post doesn't exist or has no comments
    """
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        result = await get_comments_use_case.execute(
            GetCommentsRequest(post_id=str(post_id), viewer_id=user.user_id)
        )
    except Exception as e:
        raise_http_error(e, "Get comments")

    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No comments found",
        )
    return result


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CommentContentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> CommentResponse:
    """Comment on a post."""
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post_id), author_id=user.user_id, content=request.content
            )
        )
    except Exception as e:
        raise_http_error(e, "Create comment")


@router.post("/{post_id}/like", response_model=LikeResponse)
async def like_post(
    post_id: UUID,
    like_use_case: FromDishka[LikeUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> LikeResponse:
    """Like a post.

    Raises:
        HTTPException: 400 if the post is already liked
    """
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        return await like_use_case.execute(
            LikeRequest(
                target=LikeTarget.POST, target_id=str(post_id), user_id=user.user_id
            )
        )
    except Exception as e:
        raise_http_error(e, "Like post")


@router.delete("/{post_id}/like", response_model=LikeResponse)
async def unlike_post(
    post_id: UUID,
    unlike_use_case: FromDishka[UnlikeUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> LikeResponse:
    """Remove the current user's like from a post.

    Raises:
        HTTPException: 400 if the post is not liked
    """
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        return await unlike_use_case.execute(
            LikeRequest(
                target=LikeTarget.POST, target_id=str(post_id), user_id=user.user_id
            )
        )
    except Exception as e:
        raise_http_error(e, "Unlike post")
