"""Request authentication and query parameter checks shared by routes."""

from fastapi import HTTPException, status

from social.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from social.domain.error import NotFoundError
from social.util.jwt import JWTError

MAX_PAGE_LIMIT = 100


async def authenticate(
    get_current_user_use_case: GetCurrentUserUseCase,
    authorization: str | None,
) -> GetCurrentUserResponse:
    """Resolve the user behind an ``Authorization: Bearer <token>`` header.

    Raises:
        HTTPException: 401 if the header is missing or the token is not valid
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token.strip())
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except (NotFoundError, ValueError):
        # Token is well formed but names no (valid) user
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )


def check_page(limit: int, offset: int) -> None:
    """Reject windows outside 1 <= limit <= MAX_PAGE_LIMIT and offset >= 0.

    Raises:
        HTTPException: 400 for an invalid window
    """
    if limit < 1 or limit > MAX_PAGE_LIMIT:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"limit must be between 1 and {MAX_PAGE_LIMIT}",
        )
    if offset < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="offset must be zero or positive",
        )
