"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, Field

from social.application.usecase.auth import GetCurrentUserUseCase
from social.application.usecase.comment import (
    CommentResponse,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from social.application.usecase.feed import (
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
)
from social.application.usecase.like import (
    LikeRequest,
    LikeResponse,
    LikeUseCase,
    UnlikeUseCase,
)
from social.application.usecase.reply import (
    CreateReplyRequest,
    CreateReplyUseCase,
    ReplyResponse,
)
from social.domain.value import LikeTarget
from social.interface.api.auth import authenticate
from social.interface.api.errors import raise_http_error

router = APIRouter(
    prefix="/api/v1/comments", tags=["comments"], route_class=DishkaRoute
)


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = Field(min_length=1, max_length=2000)


class CreateReplyAPIRequest(BaseModel):
    """API request for replying to a comment."""

    message: str = Field(min_length=1, max_length=2000)


@router.patch("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> CommentResponse:
    """Edit a comment. Only the comment author can edit."""
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=str(comment_id),
                user_id=user.user_id,
                content=request.content,
            )
        )
    except Exception as e:
        raise_http_error(e, "Update comment")


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> None:
    """Delete a comment with its replies and likes. Author only."""
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=str(comment_id), user_id=user.user_id)
        )
    except Exception as e:
        raise_http_error(e, "Delete comment")


@router.get("/{comment_id}/replies", response_model=GetRepliesResponse)
async def get_replies(
    comment_id: UUID,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetRepliesResponse:
    """Get the replies of a comment, oldest first.

    Raises:
        HTTPException: 404 if the comment doesn't exist or has no replies
    """
    await authenticate(get_current_user_use_case, authorization)

    try:
        result = await get_replies_use_case.execute(
            GetRepliesRequest(comment_id=str(comment_id))
        )
    except Exception as e:
        raise_http_error(e, "Get replies")

    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Replies not found",
        )
    return result


@router.post(
    "/{comment_id}/replies",
    response_model=ReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    comment_id: UUID,
    request: CreateReplyAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ReplyResponse:
    """Reply to a comment."""
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        return await create_reply_use_case.execute(
            CreateReplyRequest(
                comment_id=str(comment_id),
                author_id=user.user_id,
                message=request.message,
            )
        )
    except Exception as e:
        raise_http_error(e, "Create reply")


@router.post("/{comment_id}/like", response_model=LikeResponse)
async def like_comment(
    comment_id: UUID,
    like_use_case: FromDishka[LikeUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> LikeResponse:
    """Like a comment."""
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        return await like_use_case.execute(
            LikeRequest(
                target=LikeTarget.COMMENT,
                target_id=str(comment_id),
                user_id=user.user_id,
            )
        )
    except Exception as e:
        raise_http_error(e, "Like comment")


@router.delete("/{comment_id}/like", response_model=LikeResponse)
async def unlike_comment(
    comment_id: UUID,
    unlike_use_case: FromDishka[UnlikeUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> LikeResponse:
    """Remove the current user's like from a comment."""
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        return await unlike_use_case.execute(
            LikeRequest(
                target=LikeTarget.COMMENT,
                target_id=str(comment_id),
                user_id=user.user_id,
            )
        )
    except Exception as e:
        raise_http_error(e, "Unlike comment")
