"""Reply routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from social.application.usecase.auth import GetCurrentUserUseCase
from social.application.usecase.reply import (
    DeleteReplyRequest,
    DeleteReplyUseCase,
    ReplyResponse,
    UpdateReplyRequest,
    UpdateReplyUseCase,
)
from social.interface.api.auth import authenticate
from social.interface.api.errors import raise_http_error

router = APIRouter(prefix="/api/v1/replies", tags=["replies"], route_class=DishkaRoute)


class UpdateReplyAPIRequest(BaseModel):
    """API request for editing a reply."""

    message: str = Field(min_length=1, max_length=2000)


@router.patch("/{reply_id}", response_model=ReplyResponse)
async def update_reply(
    reply_id: UUID,
    request: UpdateReplyAPIRequest,
    update_reply_use_case: FromDishka[UpdateReplyUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ReplyResponse:
    """Edit a reply. Only the reply author can edit."""
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        return await update_reply_use_case.execute(
            UpdateReplyRequest(
                reply_id=str(reply_id), user_id=user.user_id, message=request.message
            )
        )
    except Exception as e:
        raise_http_error(e, "Update reply")


@router.delete("/{reply_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reply(
    reply_id: UUID,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> None:
    """Delete a reply. Author only."""
    user = await authenticate(get_current_user_use_case, authorization)

    try:
        await delete_reply_use_case.execute(
            DeleteReplyRequest(reply_id=str(reply_id), user_id=user.user_id)
        )
    except Exception as e:
        raise_http_error(e, "Delete reply")
